# snapdrift/storage/report_set_loader.py
# ReportSetLoader -- loads and validates a ReportSet JSON file.
#
# The file must hold a JSON array of objects, each with a string "url".
# Absent "scripts" or "cookies" load as empty tuples. Absent "domain" loads
# as an empty string. Cookie entries need a string "name"; a missing
# "value" loads as an empty string.

import json
from pathlib import Path
from typing import Any, Tuple

from snapdrift.data_models.captured_report import CapturedReport, Cookie
from snapdrift.exceptions import ReportFileError, ReportFormatError


def _load_cookie(d: Any, filepath: Path, url: str) -> Cookie:
    if not isinstance(d, dict) or not isinstance(d.get("name"), str):
        raise ReportFormatError(
            f"ReportFormatError: cookie entry {d!r} for '{url}' in {filepath} "
            "is not an object with a string 'name'.",
            source=str(filepath),
        )
    value = d.get("value")
    if value is None:
        value = ""
    return Cookie(name=d["name"], value=value if isinstance(value, str) else str(value))


def _load_scripts(raw: Any, filepath: Path, url: str) -> Tuple[str, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list) or not all(isinstance(s, str) for s in raw):
        raise ReportFormatError(
            f"ReportFormatError: 'scripts' for '{url}' in {filepath} "
            "must be an array of strings.",
            source=str(filepath),
        )
    return tuple(raw)


def _load_report(d: Any, index: int, filepath: Path) -> CapturedReport:
    if not isinstance(d, dict):
        raise ReportFormatError(
            f"ReportFormatError: entry {index} in {filepath} is not an object.",
            source=str(filepath),
        )
    url = d.get("url")
    if not isinstance(url, str):
        raise ReportFormatError(
            f"ReportFormatError: entry {index} in {filepath} has no string 'url'.",
            source=str(filepath),
        )

    raw_cookies = d.get("cookies")
    if raw_cookies is None:
        raw_cookies = []
    if not isinstance(raw_cookies, list):
        raise ReportFormatError(
            f"ReportFormatError: 'cookies' for '{url}' in {filepath} must be an array.",
            source=str(filepath),
        )

    return CapturedReport(
        url=url,
        domain=str(d.get("domain") or ""),
        scripts=_load_scripts(d.get("scripts"), filepath, url),
        cookies=tuple(_load_cookie(c, filepath, url) for c in raw_cookies),
    )


class ReportSetLoader:
    """
    Reads a whole ReportSet file into memory.
    Any missing, unreadable or malformed file is a hard failure.
    """

    def load(self, filepath: Path) -> Tuple[CapturedReport, ...]:
        if not filepath.is_file():
            raise ReportFileError(
                f"ReportFileError: report file not found: {filepath}",
                source=str(filepath),
            )

        try:
            with open(filepath, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except OSError as exc:
            raise ReportFileError(
                f"ReportFileError: failed to read report file {filepath}: {exc}",
                source=str(filepath),
            ) from exc
        except ValueError as exc:
            # json.JSONDecodeError and UnicodeDecodeError are both ValueErrors.
            raise ReportFormatError(
                f"ReportFormatError: report file {filepath} is not valid JSON: {exc}",
                source=str(filepath),
            ) from exc

        if not isinstance(payload, list):
            raise ReportFormatError(
                f"ReportFormatError: report file {filepath} must contain a JSON array.",
                source=str(filepath),
            )

        return tuple(_load_report(d, i, filepath) for i, d in enumerate(payload))
