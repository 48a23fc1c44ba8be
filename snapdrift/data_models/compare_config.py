# snapdrift/data_models/compare_config.py
# CompareConfig -- configuration for one compare run, built once at the CLI boundary.

from dataclasses import dataclass
from pathlib import Path

from snapdrift.data_models.mismatch import CookieValueCheck, ScriptMatchMode


@dataclass(frozen=True)
class CompareConfig:
    """
    Fields:
      file1              -- Path to the first ReportSet JSON file.
      file2              -- Path to the second ReportSet JSON file.
      script_match_mode  -- Script comparison policy.
      cookie_value_check -- Cookie comparison policy.
      output_dir         -- Directory receiving mismatch-results.json and
                            compare-report.html.
    """
    file1:              Path
    file2:              Path
    script_match_mode:  ScriptMatchMode
    cookie_value_check: CookieValueCheck = CookieValueCheck.NAME_ONLY
    output_dir:         Path = Path(".")
