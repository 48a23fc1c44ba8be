#!/usr/bin/env python3
# =============================================================================
# snapdrift -- CI CHECKS RUNNER
# File:   scripts/run_ci_checks.py
# =============================================================================
#
# PURPOSE
# -------
# Runs the CI gate in two sequential stages:
#   Stage 1: pytest (all tests + coverage report for the snapdrift package)
#   Stage 2: compare smoke run on the bundled fixture ReportSets
#
# Exit codes:
#   0 -- All stages passed.
#   1 -- Stage 1 (pytest) failed.
#   2 -- Stage 2 (compare smoke run) failed.
#
# Usage:
#   python scripts/run_ci_checks.py
# =============================================================================

from __future__ import annotations

import subprocess
import sys
import pathlib
import tempfile

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
_REPO_ROOT = pathlib.Path(__file__).parent.parent
_PYTHON    = sys.executable
_FIXTURES  = _REPO_ROOT / "tests" / "fixtures"


def _separator(char: str = "=", width: int = 72) -> str:
    return char * width


def _run(cmd: list[str], label: str) -> int:
    """
    Run a subprocess command, stream stdout/stderr live, return exit code.
    """
    print(_separator())
    print(f"CI STAGE: {label}")
    print(f"CMD:      {' '.join(cmd)}")
    print(_separator("-"))
    sys.stdout.flush()

    proc = subprocess.run(
        cmd,
        cwd=str(_REPO_ROOT),
    )
    return proc.returncode


def _fail(stage: str, rc: int) -> None:
    print(_separator())
    print(f"CI RESULT: FAIL  [stage={stage}  exit_code={rc}]")
    print(f"Merge BLOCKED: {stage} stage did not pass.")
    print(_separator())
    sys.stdout.flush()


def main() -> int:
    print(_separator())
    print("SNAPDRIFT CI GATE -- starting")
    print(_separator())
    sys.stdout.flush()

    # ------------------------------------------------------------------
    # Stage 1: pytest with coverage (pytest-cov).
    # ------------------------------------------------------------------
    pytest_rc = _run(
        [_PYTHON, "-m", "pytest", "--cov=snapdrift", "--cov-report=term-missing"],
        "pytest (tests + coverage)",
    )
    if pytest_rc != 0:
        _fail("pytest", pytest_rc)
        return 1

    print(_separator("-"))
    print("CI STAGE pytest: PASS")
    sys.stdout.flush()

    # ------------------------------------------------------------------
    # Stage 2: compare smoke run.
    # The fixture sets differ in scripts, so the run must exit 0 and
    # write both result files.
    # ------------------------------------------------------------------
    with tempfile.TemporaryDirectory() as out_dir:
        compare_rc = _run(
            [
                _PYTHON, "-m", "snapdrift.run_compare",
                str(_FIXTURES / "report_set_a.json"),
                str(_FIXTURES / "report_set_b.json"),
                "false",
                "--output-dir", out_dir,
            ],
            "compare smoke run",
        )
        out = pathlib.Path(out_dir)
        written = (out / "mismatch-results.json").is_file() and (out / "compare-report.html").is_file()

    if compare_rc != 0 or not written:
        _fail("compare", compare_rc if compare_rc != 0 else 1)
        return 2

    print(_separator("-"))
    print("CI STAGE compare: PASS")

    print(_separator())
    print("CI RESULT: PASS  [stages=pytest,compare]")
    print("Merge permitted.")
    print(_separator())
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
