# snapdrift/run_compare.py
# Compare entry point. Diffs two ReportSet JSON files and writes the
# mismatch results and HTML report.
#
# Standard invocation:
#   snapdrift-compare <file1> <file2> <scriptMatchMode> [<cookieValueCheck>]
#   python -m snapdrift.run_compare report-a.json report-b.json true false
#
# scriptMatchMode:  "true" -> compare script names only, anything else -> full URLs.
# cookieValueCheck: "true" -> compare cookie values too, anything else or
#                   omitted -> compare cookie names only.
#
# EXIT CODES:
#   0  -- Comparison completed (with or without mismatches).
#   2  -- Wrong number of arguments (usage printed to stderr).
#   3  -- Input file missing or not a valid ReportSet.
#   4  -- Malformed script URL during a name-only comparison.
#   5  -- Output file could not be written.

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from snapdrift.comparison.report_comparator import ReportComparator
from snapdrift.comparison.report_renderer import ReportRenderer
from snapdrift.data_models.compare_config import CompareConfig
from snapdrift.data_models.mismatch import CookieValueCheck, Mismatch, ScriptMatchMode
from snapdrift.exceptions import OutputWriteError, SnapdriftError
from snapdrift.failure_handler import FailureHandler
from snapdrift.storage.mismatch_serializer import MISMATCH_RESULTS_FILENAME, MismatchSerializer
from snapdrift.storage.report_set_loader import ReportSetLoader
from snapdrift.version import TOOL_VERSION

COMPARE_REPORT_FILENAME: str = "compare-report.html"


def _flag(value: str) -> bool:
    return value.lower() == "true"


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Compare two snapshot report files and flag URLs whose cookies "
            "or scripts differ."
        ),
        prog="snapdrift-compare",
    )
    parser.add_argument("file1", help="First ReportSet JSON file.")
    parser.add_argument("file2", help="Second ReportSet JSON file.")
    parser.add_argument(
        "script_names_only",
        metavar="scriptMatchMode",
        help="true to compare script names only, false to compare full script URLs.",
    )
    parser.add_argument(
        "cookie_values",
        metavar="cookieValueCheck",
        nargs="?",
        default="false",
        help="true to also compare cookie values. Default: false.",
    )
    parser.add_argument(
        "--output-dir",
        default=".",
        help="Directory for mismatch-results.json and compare-report.html. Default: cwd.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {TOOL_VERSION}",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> CompareConfig:
    return CompareConfig(
        file1=Path(args.file1),
        file2=Path(args.file2),
        script_match_mode=(
            ScriptMatchMode.NAME_ONLY if _flag(args.script_names_only)
            else ScriptMatchMode.FULL_URL
        ),
        cookie_value_check=(
            CookieValueCheck.NAME_AND_VALUE if _flag(args.cookie_values)
            else CookieValueCheck.NAME_ONLY
        ),
        output_dir=Path(args.output_dir),
    )


def run_compare(config: CompareConfig) -> List[Mismatch]:
    """
    Load both ReportSets, compare them, and write results when any
    mismatch is found. Prints the status lines to stdout.

    Raises SnapdriftError subclasses on any hard failure. Nothing is
    written before both files have loaded and the comparison has finished,
    and a failed write leaves neither result file behind.
    """
    loader = ReportSetLoader()
    report_set1 = loader.load(config.file1)
    report_set2 = loader.load(config.file2)

    mismatches = ReportComparator().compare(
        report_set1,
        report_set2,
        config.script_match_mode,
        config.cookie_value_check,
    )

    if not mismatches:
        print("No mismatches found.")
        return []

    html_doc = ReportRenderer(config.cookie_value_check).render(
        mismatches, str(config.file1), str(config.file2),
    )

    results_path = MismatchSerializer().serialize(mismatches, config.output_dir)
    report_path  = config.output_dir / COMPARE_REPORT_FILENAME
    try:
        report_path.write_text(html_doc, encoding="utf-8")
    except OSError as exc:
        # Results and report are written together or not at all.
        results_path.unlink()
        raise OutputWriteError(
            f"OutputWriteError: failed to write {report_path}: {exc}",
            source=str(report_path),
        ) from exc

    print(f"Comparison complete. Mismatches saved to {MISMATCH_RESULTS_FILENAME}")
    print(f"Mismatch HTML report generated: {COMPARE_REPORT_FILENAME}")

    return list(mismatches)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """
    Command line entry point. Exits 0 on a completed comparison and with
    the registered failure code otherwise.
    """
    args   = _parse_args(argv)
    config = build_config(args)
    fh     = FailureHandler("SNAPDRIFT-COMPARE")

    try:
        run_compare(config)
    except SnapdriftError as exc:
        fh.handle_from_exception(exc)

    sys.exit(0)


if __name__ == "__main__":
    main()
