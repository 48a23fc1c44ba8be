# snapdrift/storage/mismatch_serializer.py
# MismatchSerializer -- writes a Mismatch sequence to mismatch-results.json.
#
# Key names are camelCase. An absent snapshot pair serializes as [] and a
# present pair as [[side1, side2]]. Output is pretty-printed with indent 2
# and is byte-identical for identical input.

import json
from pathlib import Path
from typing import List, Sequence

from snapdrift.data_models.mismatch import Mismatch
from snapdrift.exceptions import OutputWriteError

MISMATCH_RESULTS_FILENAME: str = "mismatch-results.json"


def mismatch_to_dict(mismatch: Mismatch) -> dict:
    script_mismatches: List[list] = []
    if mismatch.script_mismatches is not None:
        scripts1, scripts2 = mismatch.script_mismatches
        script_mismatches.append([list(scripts1), list(scripts2)])

    cookie_mismatches: List[list] = []
    if mismatch.cookie_mismatches is not None:
        cookies1, cookies2 = mismatch.cookie_mismatches
        cookie_mismatches.append([
            [{"name": c.name, "value": c.value} for c in cookies1],
            [{"name": c.name, "value": c.value} for c in cookies2],
        ])

    return {
        "url":              mismatch.url,
        "mismatchReasons":  list(mismatch.mismatch_reasons),
        "scriptMismatches": script_mismatches,
        "cookieMismatches": cookie_mismatches,
    }


def dumps_mismatches(mismatches: Sequence[Mismatch]) -> str:
    return json.dumps(
        [mismatch_to_dict(m) for m in mismatches], indent=2, ensure_ascii=False,
    )


class MismatchSerializer:

    def serialize(self, mismatches: Sequence[Mismatch], output_dir: Path) -> Path:
        """
        Write mismatches to output_dir/mismatch-results.json.
        Returns the path of the written file.
        """
        filepath = output_dir / MISMATCH_RESULTS_FILENAME
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
            filepath.write_text(dumps_mismatches(mismatches), encoding="utf-8")
        except OSError as exc:
            raise OutputWriteError(
                f"OutputWriteError: failed to write {filepath}: {exc}",
                source=str(filepath),
            ) from exc
        return filepath
