from snapdrift.capture.page_report import SCREENSHOT_FILENAME, render_page_report
from snapdrift.data_models import Cookie


class TestRenderPageReport:

    def test_lists_scripts_and_cookies(self):
        html_doc = render_page_report(
            "https://ex.com",
            ["https://ex.com/a.js", "https://ex.com/b.js"],
            [Cookie("s", "1")],
        )
        assert "<title>Website Report</title>" in html_doc
        assert f'src="{SCREENSHOT_FILENAME}"' in html_doc
        assert "<tr><td>https://ex.com/a.js</td></tr>" in html_doc
        assert "<tr><td>https://ex.com/b.js</td></tr>" in html_doc
        assert "<tr><td>s</td><td>1</td></tr>" in html_doc

    def test_script_order_preserved(self):
        html_doc = render_page_report("https://ex.com", ["https://ex.com/z.js", "https://ex.com/a.js"], [])
        assert html_doc.index("z.js") < html_doc.index("a.js")

    def test_cookie_value_escaped(self):
        html_doc = render_page_report("https://ex.com", [], [Cookie("s", "<b>x</b>")])
        assert "<b>x</b>" not in html_doc
        assert "&lt;b&gt;x&lt;/b&gt;" in html_doc
