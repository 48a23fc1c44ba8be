# snapdrift/run_capture.py
# Capture entry point. Snapshots every URL in a newline-delimited list and
# writes the aggregate report-{timestamp_ms}.json consumed by run_compare.
#
# Standard invocation:
#   snapdrift-capture [urls.txt] [--output-dir DIR]
#
# EXIT CODES:
#   0  -- All URLs captured.
#   3  -- URL list file missing or unreadable.
#   5  -- Report file could not be written.
#   6  -- A URL failed to load or capture.

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional, Sequence

from snapdrift.capture.snapshot_capturer import capture_all, now_ms, read_url_list
from snapdrift.exceptions import SnapdriftError
from snapdrift.failure_handler import FailureHandler
from snapdrift.storage.report_set_serializer import ReportSetSerializer
from snapdrift.version import TOOL_VERSION


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Capture screenshot, scripts and cookies for a list of URLs.",
        prog="snapdrift-capture",
    )
    parser.add_argument(
        "urls_file",
        nargs="?",
        default="urls.txt",
        help="Newline-delimited URL list. Default: urls.txt.",
    )
    parser.add_argument(
        "--output-dir",
        default=".",
        help="Directory for per-URL folders and the aggregate report. Default: cwd.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {TOOL_VERSION}",
    )
    return parser.parse_args(argv)


def run_capture(urls_file: Path, output_dir: Path) -> Path:
    """
    Capture all URLs in urls_file and write the aggregate report.
    Returns the path of the aggregate report.
    """
    urls    = read_url_list(urls_file)
    reports = asyncio.run(capture_all(urls, output_dir))
    path    = ReportSetSerializer().serialize(reports, output_dir, now_ms())
    print(f"Report saved to {path}")
    return path


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    fh   = FailureHandler("SNAPDRIFT-CAPTURE")

    try:
        run_capture(Path(args.urls_file), Path(args.output_dir))
    except SnapdriftError as exc:
        fh.handle_from_exception(exc)

    sys.exit(0)


if __name__ == "__main__":
    main()
