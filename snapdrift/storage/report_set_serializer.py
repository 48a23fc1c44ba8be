# snapdrift/storage/report_set_serializer.py
# ReportSetSerializer -- writes captured reports as one aggregate JSON file.
#
# File name format: report-{timestamp_ms}.json
# This is the input format read back by ReportSetLoader.

import json
from pathlib import Path
from typing import Sequence

from snapdrift.data_models.captured_report import CapturedReport
from snapdrift.exceptions import OutputWriteError


def report_to_dict(report: CapturedReport) -> dict:
    return {
        "url":     report.url,
        "domain":  report.domain,
        "scripts": list(report.scripts),
        "cookies": [{"name": c.name, "value": c.value} for c in report.cookies],
    }


class ReportSetSerializer:

    def serialize(
        self,
        reports:      Sequence[CapturedReport],
        output_dir:   Path,
        timestamp_ms: int,
    ) -> Path:
        """
        Write reports to output_dir/report-{timestamp_ms}.json.
        Returns the path of the written file.
        """
        filepath = output_dir / f"report-{timestamp_ms}.json"
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
            with open(filepath, "w", encoding="utf-8") as f:
                json.dump([report_to_dict(r) for r in reports], f, indent=2, ensure_ascii=False)
        except OSError as exc:
            raise OutputWriteError(
                f"OutputWriteError: failed to write report set {filepath}: {exc}",
                source=str(filepath),
            ) from exc
        return filepath
