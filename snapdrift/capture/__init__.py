# snapdrift/capture/__init__.py

from .page_report import render_page_report
from .snapshot_capturer import capture_all, capture_page, extract_domain, read_url_list

__all__ = [
    "capture_all",
    "capture_page",
    "extract_domain",
    "read_url_list",
    "render_page_report",
]
