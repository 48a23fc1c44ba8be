# snapdrift/data_models/captured_report.py
# Cookie and CapturedReport data classes.
# One CapturedReport is produced per crawled URL and is immutable after capture.

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Cookie:
    """
    A single browser cookie, reduced to name and value.
    Names are not guaranteed unique within one report.
    """
    name:  str
    value: str


@dataclass(frozen=True)
class CapturedReport:
    """
    Snapshot of one crawled URL.

    Fields:
      url     -- The URL as listed in the crawl input. Join key for comparison.
      domain  -- Hostname of url.
      scripts -- script[src] URLs in DOM order. Duplicates are possible.
      cookies -- Cookies set on the browser context after the page settled.
    """
    url:     str
    domain:  str
    scripts: Tuple[str, ...]
    cookies: Tuple[Cookie, ...]
