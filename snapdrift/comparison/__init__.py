# snapdrift/comparison/__init__.py

from .report_comparator import (
    ReportComparator,
    cookies_equal,
    script_name,
    scripts_equal,
)
from .report_renderer import ReportRenderer

__all__ = [
    "ReportComparator",
    "ReportRenderer",
    "cookies_equal",
    "script_name",
    "scripts_equal",
]
