import pytest

from snapdrift.data_models import CapturedReport, Cookie


def make_report(url, scripts=(), cookies=()):
    return CapturedReport(
        url=url,
        domain="ex.com",
        scripts=tuple(scripts),
        cookies=tuple(Cookie(name=n, value=v) for n, v in cookies),
    )


@pytest.fixture
def home_report() -> CapturedReport:
    """Home page with two scripts and two cookies."""
    return make_report(
        "https://ex.com",
        scripts=["https://ex.com/static/app.js?v=1", "https://cdn.ex.com/lib/vendor.js"],
        cookies=[("session", "abc"), ("consent", "yes")],
    )


@pytest.fixture
def home_report_redeployed() -> CapturedReport:
    """Same page after a deploy: app.js moved to a new query string, session rotated."""
    return make_report(
        "https://ex.com",
        scripts=["https://cdn.ex.com/lib/vendor.js", "https://ex.com/static/app.js?v=2"],
        cookies=[("consent", "yes"), ("session", "def")],
    )
