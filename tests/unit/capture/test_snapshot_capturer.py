import asyncio

import pytest
from playwright.async_api import Error as PlaywrightError

from snapdrift.capture.snapshot_capturer import (
    NAVIGATION_TIMEOUT_MS,
    capture_page,
    extract_domain,
    read_url_list,
)
from snapdrift.data_models import CapturedReport, Cookie
from snapdrift.exceptions import CaptureError, OutputWriteError, ReportFileError


class FakeContext:

    def __init__(self, cookies):
        self._cookies = cookies

    async def cookies(self):
        return self._cookies


class FakePage:
    """Stands in for a Playwright Page during capture_page()."""

    def __init__(self, scripts=(), cookies=(), goto_error=None):
        self.context = FakeContext(list(cookies))
        self._scripts = list(scripts)
        self._goto_error = goto_error
        self.goto_calls = []
        self.selectors = []

    async def goto(self, url, wait_until=None, timeout=None):
        self.goto_calls.append((url, wait_until, timeout))
        if self._goto_error is not None:
            raise self._goto_error

    async def screenshot(self, path, full_page=False):
        assert full_page
        with open(path, "wb") as f:
            f.write(b"\x89PNG")

    async def eval_on_selector_all(self, selector, expression):
        self.selectors.append(selector)
        return self._scripts


class TestReadUrlList:

    def test_skips_blank_lines_and_strips(self, tmp_path):
        path = tmp_path / "urls.txt"
        path.write_text("https://ex.com\n\n   \n  https://ex.com/about  \r\n", encoding="utf-8")
        assert read_url_list(path) == ["https://ex.com", "https://ex.com/about"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(ReportFileError):
            read_url_list(tmp_path / "absent.txt")


class TestExtractDomain:

    def test_hostname(self):
        assert extract_domain("https://www.ex.com:8443/path?q=1") == "www.ex.com"

    def test_no_host(self):
        assert extract_domain("not a url") == ""


class TestCapturePage:

    def test_captures_report_and_files(self, tmp_path):
        page = FakePage(
            scripts=["https://ex.com/b.js", "https://ex.com/a.js", "https://ex.com/b.js"],
            cookies=[{"name": "s", "value": "1", "domain": ".ex.com", "httpOnly": True}],
        )
        report = asyncio.run(capture_page(page, "https://ex.com/", tmp_path, 1700000000000))

        assert report == CapturedReport(
            url="https://ex.com/",
            domain="ex.com",
            scripts=("https://ex.com/b.js", "https://ex.com/a.js", "https://ex.com/b.js"),
            cookies=(Cookie("s", "1"),),
        )
        folder = tmp_path / "ex.com-1700000000000"
        assert (folder / "screenshot.png").read_bytes() == b"\x89PNG"
        assert "https://ex.com/a.js" in (folder / "report.html").read_text(encoding="utf-8")

    def test_navigation_waits_for_network_idle(self, tmp_path):
        page = FakePage()
        asyncio.run(capture_page(page, "https://ex.com", tmp_path, 1))
        assert page.goto_calls == [("https://ex.com", "networkidle", NAVIGATION_TIMEOUT_MS)]
        assert page.selectors == ["script[src]"]

    def test_navigation_failure_raises_capture_error(self, tmp_path):
        page = FakePage(goto_error=PlaywrightError("net::ERR_NAME_NOT_RESOLVED"))
        with pytest.raises(CaptureError) as info:
            asyncio.run(capture_page(page, "https://nowhere.invalid", tmp_path, 1))
        assert info.value.source == "https://nowhere.invalid"
        assert info.value.exit_code == 6
        assert list(tmp_path.iterdir()) == []

    def test_unwritable_output_root_raises_output_write_error(self, tmp_path):
        not_a_dir = tmp_path / "root"
        not_a_dir.write_text("", encoding="utf-8")
        with pytest.raises(OutputWriteError) as info:
            asyncio.run(capture_page(FakePage(), "https://ex.com", not_a_dir, 1))
        assert info.value.source == str(not_a_dir / "ex.com-1")
        assert info.value.exit_code == 5

    def test_unwritable_page_report_raises_output_write_error(self, tmp_path):
        folder = tmp_path / "ex.com-1"
        (folder / "report.html").mkdir(parents=True)
        with pytest.raises(OutputWriteError) as info:
            asyncio.run(capture_page(FakePage(), "https://ex.com", tmp_path, 1))
        assert info.value.source == str(folder)
