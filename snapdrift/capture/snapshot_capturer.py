# snapdrift/capture/snapshot_capturer.py
# Headless-browser capture of one CapturedReport per URL.
#
# Per URL: navigate, wait for the network to go idle, then write
# {domain}-{timestamp_ms}/screenshot.png and {domain}-{timestamp_ms}/report.html
# under the output root. URLs are processed strictly one after another.
# Navigation failures raise CaptureError. No retries.

import time
from pathlib import Path
from typing import List, Sequence
from urllib.parse import urlsplit

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page, async_playwright

from snapdrift.capture.page_report import (
    PAGE_REPORT_FILENAME,
    SCREENSHOT_FILENAME,
    render_page_report,
)
from snapdrift.data_models.captured_report import CapturedReport, Cookie
from snapdrift.exceptions import CaptureError, OutputWriteError, ReportFileError

NAVIGATION_TIMEOUT_MS: int = 30000

_SCRIPT_SOURCES_JS = "els => els.map(el => el.src)"


def now_ms() -> int:
    return int(time.time() * 1000)


def read_url_list(path: Path) -> List[str]:
    """One URL per line. Blank lines are skipped; surrounding whitespace is stripped."""
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ReportFileError(
            f"ReportFileError: failed to read url list {path}: {exc}",
            source=str(path),
        ) from exc
    return [line.strip() for line in content.splitlines() if line.strip()]


def extract_domain(url: str) -> str:
    try:
        return urlsplit(url).hostname or ""
    except ValueError:
        return ""


async def capture_page(
    page:         Page,
    url:          str,
    output_root:  Path,
    timestamp_ms: int,
) -> CapturedReport:
    """
    Capture one URL on an already open page. Returns the CapturedReport.
    """
    try:
        await page.goto(url, wait_until="networkidle", timeout=NAVIGATION_TIMEOUT_MS)
    except PlaywrightError as exc:
        raise CaptureError(
            f"CaptureError: navigation to {url} failed: {exc}", source=url,
        ) from exc

    domain = extract_domain(url)
    folder = output_root / f"{domain or 'page'}-{timestamp_ms}"
    try:
        folder.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputWriteError(
            f"OutputWriteError: failed to create capture folder {folder}: {exc}",
            source=str(folder),
        ) from exc

    try:
        await page.screenshot(path=str(folder / SCREENSHOT_FILENAME), full_page=True)
        scripts = await page.eval_on_selector_all("script[src]", _SCRIPT_SOURCES_JS)
        raw_cookies = await page.context.cookies()
    except PlaywrightError as exc:
        raise CaptureError(
            f"CaptureError: capturing {url} failed: {exc}", source=url,
        ) from exc

    cookies = tuple(Cookie(name=c["name"], value=c["value"]) for c in raw_cookies)
    scripts = tuple(scripts)

    try:
        (folder / PAGE_REPORT_FILENAME).write_text(
            render_page_report(url, scripts, cookies), encoding="utf-8",
        )
    except OSError as exc:
        raise OutputWriteError(
            f"OutputWriteError: failed to write page report in {folder}: {exc}",
            source=str(folder),
        ) from exc

    return CapturedReport(url=url, domain=domain, scripts=scripts, cookies=cookies)


async def capture_all(urls: Sequence[str], output_root: Path) -> List[CapturedReport]:
    """
    Capture every URL in order with one headless Chromium browser and a
    fresh browser context per URL.
    """
    reports = []
    async with async_playwright() as p:
        browser = await p.chromium.launch(headless=True)
        try:
            for url in urls:
                print(f"Processing: {url}")
                context = await browser.new_context()
                try:
                    page = await context.new_page()
                    reports.append(await capture_page(page, url, output_root, now_ms()))
                finally:
                    await context.close()
        finally:
            await browser.close()
    return reports
