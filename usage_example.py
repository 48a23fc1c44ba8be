# usage_example.py
# Minimal usage example for snapdrift/comparison/report_comparator.py.
# This file is not part of the snapdrift package. For reference only.

from snapdrift.comparison import ReportComparator, ReportRenderer
from snapdrift.data_models import CapturedReport, Cookie, CookieValueCheck, ScriptMatchMode

# Two crawls of the same page
before = [CapturedReport(
    url="https://ex.com",
    domain="ex.com",
    scripts=("https://ex.com/static/app.js?v=1",),
    cookies=(Cookie("session", "abc"),),
)]
after = [CapturedReport(
    url="https://ex.com",
    domain="ex.com",
    scripts=("https://cdn.ex.com/app.js",),
    cookies=(Cookie("session", "def"),),
)]

comparator = ReportComparator()

# Name-only scripts, name-only cookies: app.js is the same file name -> no drift.
print(comparator.compare(before, after, ScriptMatchMode.NAME_ONLY))

# Full URLs, cookie values: both axes drift.
mismatches = comparator.compare(
    before, after, ScriptMatchMode.FULL_URL, CookieValueCheck.NAME_AND_VALUE,
)
for m in mismatches:
    print(m.url, m.mismatch_reasons)

html_doc = ReportRenderer(CookieValueCheck.NAME_AND_VALUE).render(mismatches, "before.json", "after.json")

# Expected output:
# ()
# https://ex.com ('Cookie mismatch', 'Script URL mismatch')
