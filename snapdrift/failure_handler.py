# snapdrift/failure_handler.py
# FailureHandler -- hard failure policy for the snapdrift command line tools.
#
# On a hard failure: write a fixed-format summary to stderr, then exit with
# the code registered for the failure type. Nothing else is written. No
# retry. No fallback.

import sys
from typing import Optional, TextIO

from snapdrift.exceptions import FAILURE_TYPES, SnapdriftError


class FailureHandler:
    """
    Reports a hard failure and terminates the process.

    Methods:
      handle(failure_type_id, detail, source)  -- does not return.
      handle_from_exception(exc)               -- does not return.
    """

    def __init__(self, tool_name: str, stream: Optional[TextIO] = None):
        self._tool_name = tool_name
        self._stream    = stream

    def handle(
        self,
        failure_type_id: str,
        detail:          str,
        source:          str = "",
    ) -> None:
        exit_code = FAILURE_TYPES.get(failure_type_id, FAILURE_TYPES["INTERNAL_ERROR"])
        stream = self._stream if self._stream is not None else sys.stderr
        stream.write(
            f"{self._tool_name} RESULT: FAIL\n"
            f"Failure type: {failure_type_id}\n"
            f"Exit code:    {exit_code}\n"
            f"Source:       {source or '(not applicable)'}\n"
            f"Detail:       {detail}\n"
        )
        stream.flush()
        sys.exit(exit_code)

    def handle_from_exception(self, exc: SnapdriftError) -> None:
        self.handle(
            failure_type_id=exc.failure_type_id,
            detail=exc.message,
            source=exc.source,
        )
