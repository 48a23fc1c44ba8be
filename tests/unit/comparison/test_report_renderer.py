import re

from snapdrift.comparison.report_renderer import (
    CHECK_MARK,
    ReportRenderer,
    cookies_table,
    scripts_table,
)
from snapdrift.data_models import Cookie, CookieValueCheck, Mismatch


def _rows(table_html):
    return re.findall(r"<tr><td.*?</tr>", table_html)


class TestScriptsTable:

    def test_one_row_per_distinct_script(self):
        html_doc = scripts_table(
            ["https://a.com/x.js", "https://a.com/y.js", "https://a.com/y.js"],
            ["https://a.com/y.js", "https://a.com/z.js"],
            "a.json", "b.json",
        )
        assert len(_rows(html_doc)) == 3

    def test_rows_sorted(self):
        html_doc = scripts_table(["https://b.com/b.js"], ["https://a.com/a.js"], "a.json", "b.json")
        assert html_doc.index("https://a.com/a.js") < html_doc.index("https://b.com/b.js")

    def test_check_marks_and_highlight(self):
        html_doc = scripts_table(
            ["https://a.com/shared.js", "https://a.com/old.js"],
            ["https://a.com/shared.js"],
            "a.json", "b.json",
        )
        rows = _rows(html_doc)
        old_row = [r for r in rows if "old.js" in r][0]
        shared_row = [r for r in rows if "shared.js" in r][0]
        assert 'class="red-text"' in old_row
        assert old_row.count(CHECK_MARK) == 1
        assert 'class="red-text"' not in shared_row
        assert shared_row.count(CHECK_MARK) == 2

    def test_headers_use_file_names(self):
        html_doc = scripts_table([], [], "run-1.json", "run-2.json")
        assert "<th>run-1.json</th><th>run-2.json</th>" in html_doc

    def test_content_is_escaped(self):
        html_doc = scripts_table(['https://a.com/"><script>x.js'], [], "a.json", "b.json")
        assert "<script>" not in html_doc
        assert "&lt;script&gt;" in html_doc


class TestCookiesTable:

    def test_one_row_per_distinct_name(self):
        html_doc = cookies_table(
            [Cookie("a", "1"), Cookie("a", "2"), Cookie("b", "1")],
            [Cookie("b", "1"), Cookie("c", "1")],
            "a.json", "b.json",
        )
        assert len(_rows(html_doc)) == 3

    def test_value_difference_highlighted_only_under_value_check(self):
        c1 = [Cookie("id", "1")]
        c2 = [Cookie("id", "2")]
        plain = cookies_table(c1, c2, "a.json", "b.json", CookieValueCheck.NAME_ONLY)
        strict = cookies_table(c1, c2, "a.json", "b.json", CookieValueCheck.NAME_AND_VALUE)
        assert 'class="red-text"' not in plain
        assert 'class="red-text"' in strict

    def test_missing_side_highlighted(self):
        html_doc = cookies_table([Cookie("id", "1")], [], "a.json", "b.json")
        (row,) = _rows(html_doc)
        assert 'class="red-text"' in row
        assert row.count(CHECK_MARK) == 1

    def test_values_not_rendered(self):
        html_doc = cookies_table([Cookie("id", "secret-value")], [], "a.json", "b.json")
        assert "secret-value" not in html_doc


class TestReportRenderer:

    def test_document_skeleton(self):
        html_doc = ReportRenderer().render([], "a.json", "b.json")
        assert html_doc.startswith("<!DOCTYPE html>")
        assert "<title>Comparison Report</title>" in html_doc
        assert "<h1>Comparison Report</h1>" in html_doc

    def test_section_per_mismatch_with_reasons(self):
        mismatches = [
            Mismatch(
                url="https://ex.com",
                mismatch_reasons=("Cookie mismatch", "Script URL mismatch"),
                script_mismatches=(("https://ex.com/a.js",), ("https://ex.com/b.js",)),
                cookie_mismatches=((Cookie("s", "1"),), ()),
            ),
            Mismatch(
                url="https://ex.com/about",
                mismatch_reasons=("Script URL mismatch",),
                script_mismatches=(("https://ex.com/a.js",), ()),
            ),
        ]
        html_doc = ReportRenderer().render(mismatches, "a.json", "b.json")
        assert html_doc.count("<h2>") == 2
        assert "<h4>Cookie mismatch</h4>" in html_doc
        assert html_doc.count("<h4>Script URL mismatch</h4>") == 2
        assert html_doc.count("<th>Script</th>") == 2
        assert html_doc.count("<th>Cookie Name</th>") == 1
        assert html_doc.index("https://ex.com/about") > html_doc.index("<h2>https://ex.com</h2>")

    def test_absent_snapshot_renders_no_table(self):
        mismatch = Mismatch(
            url="https://ex.com",
            mismatch_reasons=("Cookie mismatch",),
            cookie_mismatches=((Cookie("s", "1"),), (Cookie("t", "1"),)),
        )
        html_doc = ReportRenderer().render_section(mismatch, "a.json", "b.json")
        assert "<h3>Scripts</h3>" in html_doc
        assert "<th>Script</th>" not in html_doc
        assert "<th>Cookie Name</th>" in html_doc

    def test_render_is_deterministic(self):
        mismatch = Mismatch(
            url="https://ex.com",
            mismatch_reasons=("Script URL mismatch",),
            script_mismatches=(("https://ex.com/a.js",), ("https://ex.com/b.js",)),
        )
        renderer = ReportRenderer()
        assert renderer.render([mismatch], "a", "b") == renderer.render([mismatch], "a", "b")
