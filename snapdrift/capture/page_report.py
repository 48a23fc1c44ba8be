# snapdrift/capture/page_report.py
# Standalone per-URL report.html: screenshot, loaded scripts, cookies.

import html
from typing import Sequence

from snapdrift.data_models.captured_report import Cookie

PAGE_REPORT_FILENAME: str = "report.html"
SCREENSHOT_FILENAME:  str = "screenshot.png"

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
"""


def _esc(s: str) -> str:
    return html.escape(s, quote=True)


def render_page_report(url: str, scripts: Sequence[str], cookies: Sequence[Cookie]) -> str:
    script_rows = "".join(f"<tr><td>{_esc(s)}</td></tr>" for s in scripts)
    cookie_rows = "".join(
        f"<tr><td>{_esc(c.name)}</td><td>{_esc(c.value)}</td></tr>" for c in cookies
    )
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>Website Report</title>
<style>{_CSS}</style>
</head>
<body>
<h1>Website Report</h1>
<p>{_esc(url)}</p>
<h2>Screenshot</h2>
<div>
  <img src="{SCREENSHOT_FILENAME}" alt="Screenshot" style="width: 100%;">
</div>
<h2>Scripts</h2>
<table>
<thead><tr><th>Script URL</th></tr></thead>
<tbody>{script_rows}</tbody>
</table>
<h2>Cookies</h2>
<table>
<thead><tr><th>Cookie Name</th><th>Cookie Value</th></tr></thead>
<tbody>{cookie_rows}</tbody>
</table>
</body>
</html>
"""
