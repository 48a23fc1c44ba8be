# snapdrift/comparison/report_renderer.py
# ReportRenderer -- renders a Mismatch sequence as a standalone HTML document.
#
# One section per Mismatch: url heading, one red heading per reason, then a
# scripts table and a cookies table. Each table row is one distinct element
# of the union of both sides, sorted, with a check mark under each side that
# contains it. Rows present on one side only are marked red-text.

import html
from typing import List, Sequence

from snapdrift.data_models.captured_report import Cookie
from snapdrift.data_models.mismatch import CookieValueCheck, Mismatch

CHECK_MARK: str = "&#10004;"

_CSS = """
  table {
    border-collapse: collapse;
    width: 100%;
    font-family: Arial, sans-serif;
    margin-bottom: 20px;
  }
  th, td {
    border: 1px solid #ddd;
    padding: 8px;
    text-align: left;
  }
  th {
    background-color: #f2f2f2;
    font-weight: bold;
  }
  tr:nth-child(even) {
    background-color: #f2f2f2;
  }
  h1 { font-size: 2.5rem; }
  h2 { font-size: 2rem; }
  h3 { font-size: 1.5rem; }
  h4 { font-size: 1.25rem; color: red; }
  .red-text { color: red; }
"""


def _esc(s: str) -> str:
    return html.escape(s, quote=True)


def _row(label: str, in_first: bool, in_second: bool, highlight: bool) -> str:
    cls = ' class="red-text"' if highlight else ""
    return (
        f"<tr><td{cls}>{_esc(label)}</td>"
        f"<td>{CHECK_MARK if in_first else ''}</td>"
        f"<td>{CHECK_MARK if in_second else ''}</td></tr>"
    )


def _table(heading: str, rows: List[str], file_name1: str, file_name2: str) -> str:
    body = "\n".join(rows)
    return (
        "<table>\n"
        f"<thead><tr><th>{_esc(heading)}</th>"
        f"<th>{_esc(file_name1)}</th><th>{_esc(file_name2)}</th></tr></thead>\n"
        f"<tbody>\n{body}\n</tbody>\n"
        "</table>"
    )


def scripts_table(
    scripts1:   Sequence[str],
    scripts2:   Sequence[str],
    file_name1: str,
    file_name2: str,
) -> str:
    present1 = set(scripts1)
    present2 = set(scripts2)
    rows = []
    for script in sorted(present1 | present2):
        in_first  = script in present1
        in_second = script in present2
        rows.append(_row(script, in_first, in_second, in_first != in_second))
    return _table("Script", rows, file_name1, file_name2)


def cookies_table(
    cookies1:           Sequence[Cookie],
    cookies2:           Sequence[Cookie],
    file_name1:         str,
    file_name2:         str,
    cookie_value_check: CookieValueCheck = CookieValueCheck.NAME_ONLY,
) -> str:
    # First cookie per name, matching the comparator's lookup.
    first1 = {}
    for cookie in cookies1:
        first1.setdefault(cookie.name, cookie)
    first2 = {}
    for cookie in cookies2:
        first2.setdefault(cookie.name, cookie)

    rows = []
    for name in sorted(set(first1) | set(first2)):
        cookie1 = first1.get(name)
        cookie2 = first2.get(name)
        highlight = cookie1 is None or cookie2 is None
        if (
            not highlight
            and cookie_value_check is CookieValueCheck.NAME_AND_VALUE
            and cookie1.value != cookie2.value
        ):
            highlight = True
        rows.append(_row(name, cookie1 is not None, cookie2 is not None, highlight))
    return _table("Cookie Name", rows, file_name1, file_name2)


class ReportRenderer:
    """
    Renders mismatches to HTML. file_name1 and file_name2 are used only as
    column headers.
    """

    def __init__(self, cookie_value_check: CookieValueCheck = CookieValueCheck.NAME_ONLY):
        self._cookie_value_check = cookie_value_check

    def render_section(self, mismatch: Mismatch, file_name1: str, file_name2: str) -> str:
        script_table = ""
        if mismatch.script_mismatches is not None:
            script_table = scripts_table(
                mismatch.script_mismatches[0],
                mismatch.script_mismatches[1],
                file_name1,
                file_name2,
            )
        cookie_table = ""
        if mismatch.cookie_mismatches is not None:
            cookie_table = cookies_table(
                mismatch.cookie_mismatches[0],
                mismatch.cookie_mismatches[1],
                file_name1,
                file_name2,
                self._cookie_value_check,
            )
        reasons = "".join(f"<h4>{_esc(r)}</h4>" for r in mismatch.mismatch_reasons)
        return f"""
<div>
  <h2>{_esc(mismatch.url)}</h2>
  {reasons}
  <h3>Scripts</h3>
  {script_table}
  <h3>Cookies</h3>
  {cookie_table}
</div>
"""

    def render(self, mismatches: Sequence[Mismatch], file_name1: str, file_name2: str) -> str:
        sections = "".join(
            self.render_section(m, file_name1, file_name2) for m in mismatches
        )
        return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>Comparison Report</title>
<style>{_CSS}</style>
</head>
<body>
<h1>Comparison Report</h1>
{sections}
</body>
</html>
"""
