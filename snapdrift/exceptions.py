# snapdrift/exceptions.py
# Exception hierarchy and failure type registry for snapdrift.
#
# EXCEPTION HIERARCHY
# -------------------
#   SnapdriftError(Exception)              -- base; never raised directly
#     ReportFileError(SnapdriftError)      -- input file missing or unreadable
#     ReportFormatError(SnapdriftError)    -- input file is not a valid ReportSet
#     ScriptUrlError(SnapdriftError)       -- script URL cannot be parsed
#     OutputWriteError(SnapdriftError)     -- result file cannot be written
#     CaptureError(SnapdriftError)         -- browser navigation or capture failed
#
# Each concrete class names its failure_type_id. FailureHandler maps the
# failure_type_id to a process exit code through FAILURE_TYPES.

from __future__ import annotations

from typing import Dict


# ---------------------------------------------------------------------------
# FAILURE TYPE REGISTRY
# ---------------------------------------------------------------------------
# Exit code 2 is reserved for argparse usage errors.

FAILURE_TYPES: Dict[str, int] = {
    "INPUT_NOT_FOUND":      3,
    "DATA_CORRUPTION":      3,
    "SCRIPT_URL_MALFORMED": 4,
    "OUTPUT_WRITE_FAILURE": 5,
    "INTERNAL_ERROR":       5,
    "CAPTURE_FAILURE":      6,
}


class SnapdriftError(Exception):
    """
    Base class for all snapdrift exceptions.

    Never raised directly. Use a concrete subclass.

    Attributes:
        message:  Human-readable description. Always non-empty.
        source:   File path or URL the failure relates to, or empty string.
    """

    failure_type_id: str = "INTERNAL_ERROR"

    def __init__(self, message: str, source: str = "") -> None:
        if not isinstance(message, str) or not message:
            raise ValueError(
                "SnapdriftError: message must be a non-empty string"
            )
        super().__init__(message)
        self.message: str = message
        self.source:  str = source

    @property
    def exit_code(self) -> int:
        return FAILURE_TYPES[self.failure_type_id]

    def __repr__(self) -> str:
        return (
            self.__class__.__name__
            + "(message=" + repr(self.message)
            + ", source=" + repr(self.source)
            + ")"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SnapdriftError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.message == other.message
            and self.source == other.source
        )

    __hash__ = Exception.__hash__


class ReportFileError(SnapdriftError):
    """Raised when a ReportSet file does not exist or cannot be read."""

    failure_type_id = "INPUT_NOT_FOUND"


class ReportFormatError(SnapdriftError):
    """
    Raised when a ReportSet file is not valid JSON, or its content is not
    an array of report objects each carrying a string `url`.
    """

    failure_type_id = "DATA_CORRUPTION"


class ScriptUrlError(SnapdriftError):
    """
    Raised when a script URL cannot be parsed during a name-only script
    comparison. Aborts the whole comparison; no partial result is produced.

    Attributes:
        page_url:    URL of the report entry being compared.
        script_url:  The offending script URL string.
    """

    failure_type_id = "SCRIPT_URL_MALFORMED"

    def __init__(self, page_url: str, script_url: str) -> None:
        message = (
            "ScriptUrlError: script '"
            + script_url
            + "' on page '"
            + page_url
            + "' is not a parseable absolute URL."
        )
        super().__init__(message=message, source=page_url)
        self.page_url:   str = page_url
        self.script_url: str = script_url


class OutputWriteError(SnapdriftError):
    """Raised when a result file cannot be written."""

    failure_type_id = "OUTPUT_WRITE_FAILURE"


class CaptureError(SnapdriftError):
    """Raised when the headless browser fails to load or capture a URL."""

    failure_type_id = "CAPTURE_FAILURE"
