# snapdrift/storage/__init__.py

from .mismatch_serializer import MISMATCH_RESULTS_FILENAME, MismatchSerializer
from .report_set_loader import ReportSetLoader
from .report_set_serializer import ReportSetSerializer

__all__ = [
    "MISMATCH_RESULTS_FILENAME",
    "MismatchSerializer",
    "ReportSetLoader",
    "ReportSetSerializer",
]
