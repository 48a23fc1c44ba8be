# snapdrift/data_models/__init__.py

from .captured_report import CapturedReport, Cookie
from .compare_config import CompareConfig
from .mismatch import (
    COOKIE_MISMATCH_REASON,
    SCRIPT_NAME_MISMATCH_REASON,
    SCRIPT_URL_MISMATCH_REASON,
    CookieValueCheck,
    Mismatch,
    ScriptMatchMode,
)

__all__ = [
    "CapturedReport",
    "Cookie",
    "CompareConfig",
    "COOKIE_MISMATCH_REASON",
    "SCRIPT_NAME_MISMATCH_REASON",
    "SCRIPT_URL_MISMATCH_REASON",
    "CookieValueCheck",
    "Mismatch",
    "ScriptMatchMode",
]
