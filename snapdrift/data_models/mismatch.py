# snapdrift/data_models/mismatch.py
# Mismatch data class and the two comparison policy enums.

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from snapdrift.data_models.captured_report import Cookie


class ScriptMatchMode(str, Enum):
    """
    Script comparison policy.

    FULL_URL  -- scripts match on exact URL string equality.
    NAME_ONLY -- scripts match on the final path segment only.
    """
    FULL_URL  = "FULL_URL"
    NAME_ONLY = "NAME_ONLY"


class CookieValueCheck(str, Enum):
    """
    Cookie comparison policy.

    NAME_ONLY      -- cookies match on name.
    NAME_AND_VALUE -- cookies match on name and value.
    """
    NAME_ONLY      = "NAME_ONLY"
    NAME_AND_VALUE = "NAME_AND_VALUE"


COOKIE_MISMATCH_REASON:      str = "Cookie mismatch"
SCRIPT_NAME_MISMATCH_REASON: str = "Script name mismatch"
SCRIPT_URL_MISMATCH_REASON:  str = "Script URL mismatch"


@dataclass(frozen=True)
class Mismatch:
    """
    A detected discrepancy between two CapturedReports sharing a URL.

    Fields:
      url               -- Join key. Present in both compared ReportSets.
      mismatch_reasons  -- Human-readable reasons, cookies first, then scripts.
      script_mismatches -- (sorted scripts of side 1, sorted scripts of side 2)
                           when scripts differ, else None.
      cookie_mismatches -- (cookies of side 1, cookies of side 2), each sorted
                           by name, when cookies differ, else None.
    """
    url:               str
    mismatch_reasons:  Tuple[str, ...]
    script_mismatches: Optional[Tuple[Tuple[str, ...], Tuple[str, ...]]] = None
    cookie_mismatches: Optional[Tuple[Tuple[Cookie, ...], Tuple[Cookie, ...]]] = None
