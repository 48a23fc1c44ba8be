# snapdrift/__init__.py
# snapdrift -- website snapshot capture and behavioral drift comparison.
#
# ENTRY POINTS:
#   snapdrift-capture [urls.txt] [--output-dir DIR]
#   snapdrift-compare <file1> <file2> <scriptMatchMode> [<cookieValueCheck>]

from .version import TOOL_VERSION
from .comparison.report_comparator import ReportComparator
from .comparison.report_renderer import ReportRenderer
from .exceptions import (
    CaptureError,
    OutputWriteError,
    ReportFileError,
    ReportFormatError,
    ScriptUrlError,
    SnapdriftError,
)
from .failure_handler import FailureHandler

__all__ = [
    "TOOL_VERSION",
    "ReportComparator",
    "ReportRenderer",
    "CaptureError",
    "OutputWriteError",
    "ReportFileError",
    "ReportFormatError",
    "ScriptUrlError",
    "SnapdriftError",
    "FailureHandler",
]
