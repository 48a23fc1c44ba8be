# snapdrift/comparison/report_comparator.py
# ReportComparator -- joins two ReportSets by URL and detects cookie and
# script drift between matched entries.
#
# Join: each entry of the first set is looked up by url in the second set.
#       First match wins on duplicate urls. Entries without a counterpart are
#       skipped without a Mismatch or a warning.
# Cookies: equal iff same count and every first-set cookie has a first-match
#          by name in the second set (and an equal value under NAME_AND_VALUE).
#          A name repeated in the first set may match the same second-set
#          cookie more than once.
# Scripts: equal iff same count and every first-set script has a match in
#          the second set (exact URL, or final path segment under NAME_ONLY).
# Sorting of the attached snapshots is for rendering only.

from typing import Dict, List, Optional, Sequence, Tuple
from urllib.parse import quote, urlsplit

from snapdrift.data_models.captured_report import CapturedReport, Cookie
from snapdrift.data_models.mismatch import (
    COOKIE_MISMATCH_REASON,
    SCRIPT_NAME_MISMATCH_REASON,
    SCRIPT_URL_MISMATCH_REASON,
    CookieValueCheck,
    Mismatch,
    ScriptMatchMode,
)
from snapdrift.exceptions import ScriptUrlError

# Schemes whose URLs must carry a host.
_HOST_SCHEMES = frozenset(["http", "https", "ws", "wss", "ftp"])

# Left unencoded in a path segment. Space, quotes, "<", ">", backtick,
# braces and non-ASCII characters are percent-encoded.
_PATH_SAFE = "!$%&'()*+,;=:@[]^|\\"


def script_name(script_url: str, page_url: str = "") -> str:
    """
    Return the final path segment of script_url, ignoring query and fragment.

    "https://a.com/x/app.js?v=2" -> "app.js"
    "https://a.com/"             -> ""

    Characters a browser percent-encodes in a path are encoded, so
    "my app.js" and "my%20app.js" name the same script.

    Raises ScriptUrlError if script_url is not an absolute URL, a network
    scheme has no host, or the port is out of range.
    """
    try:
        parts = urlsplit(script_url)
        parts.port
    except ValueError as exc:
        raise ScriptUrlError(page_url=page_url, script_url=script_url) from exc
    if not parts.scheme:
        raise ScriptUrlError(page_url=page_url, script_url=script_url)
    if parts.scheme.lower() in _HOST_SCHEMES and not parts.hostname:
        raise ScriptUrlError(page_url=page_url, script_url=script_url)
    return quote(parts.path.split("/")[-1], safe=_PATH_SAFE)


def _find_cookie(cookies: Sequence[Cookie], name: str) -> Optional[Cookie]:
    for cookie in cookies:
        if cookie.name == name:
            return cookie
    return None


def cookies_equal(
    cookies1:           Sequence[Cookie],
    cookies2:           Sequence[Cookie],
    cookie_value_check: CookieValueCheck = CookieValueCheck.NAME_ONLY,
) -> bool:
    """
    Order-independent cookie set equality.
    A size difference is unequal regardless of content.
    """
    if len(cookies1) != len(cookies2):
        return False

    for cookie1 in cookies1:
        matching = _find_cookie(cookies2, cookie1.name)
        if matching is None:
            return False
        if (
            cookie_value_check is CookieValueCheck.NAME_AND_VALUE
            and cookie1.value != matching.value
        ):
            return False

    return True


def scripts_equal(
    scripts1:          Sequence[str],
    scripts2:          Sequence[str],
    script_match_mode: ScriptMatchMode,
    page_url:          str = "",
) -> bool:
    """
    Order-independent script list equality.
    A length difference is unequal regardless of content.

    Under NAME_ONLY every script URL on both sides is parsed; a malformed
    URL raises ScriptUrlError carrying page_url.
    """
    if len(scripts1) != len(scripts2):
        return False

    if script_match_mode is ScriptMatchMode.NAME_ONLY:
        keys1 = [script_name(s, page_url) for s in scripts1]
        keys2 = set(script_name(s, page_url) for s in scripts2)
    else:
        keys1 = list(scripts1)
        keys2 = set(scripts2)

    return all(key in keys2 for key in keys1)


def sorted_cookies(cookies: Sequence[Cookie]) -> Tuple[Cookie, ...]:
    """Cookies sorted by name ascending. Stable for equal names."""
    return tuple(sorted(cookies, key=lambda c: c.name))


def sorted_scripts(scripts: Sequence[str]) -> Tuple[str, ...]:
    return tuple(sorted(scripts))


class ReportComparator:
    """
    Compares two ReportSets captured from the same URL list.

    Pure: no I/O, no state kept between calls. Identical inputs always
    produce an identical result.

    Method:
      compare(report_set1, report_set2, script_match_mode, cookie_value_check)
          -> tuple of Mismatch
    """

    def compare(
        self,
        report_set1:        Sequence[CapturedReport],
        report_set2:        Sequence[CapturedReport],
        script_match_mode:  ScriptMatchMode,
        cookie_value_check: CookieValueCheck = CookieValueCheck.NAME_ONLY,
    ) -> Tuple[Mismatch, ...]:
        """
        Return one Mismatch per first-set entry whose counterpart differs.
        Result order follows report_set1.

        Raises ScriptUrlError on a malformed script URL under NAME_ONLY.
        """
        # First occurrence of each url wins.
        second_by_url: Dict[str, CapturedReport] = {}
        for report in report_set2:
            second_by_url.setdefault(report.url, report)

        mismatches: List[Mismatch] = []

        for entry1 in report_set1:
            entry2 = second_by_url.get(entry1.url)
            if entry2 is None:
                continue
            mismatch = self._compare_entries(
                entry1, entry2, script_match_mode, cookie_value_check,
            )
            if mismatch is not None:
                mismatches.append(mismatch)

        return tuple(mismatches)

    def _compare_entries(
        self,
        entry1:             CapturedReport,
        entry2:             CapturedReport,
        script_match_mode:  ScriptMatchMode,
        cookie_value_check: CookieValueCheck,
    ) -> Optional[Mismatch]:
        reasons = []
        script_mismatches = None
        cookie_mismatches = None

        if not cookies_equal(entry1.cookies, entry2.cookies, cookie_value_check):
            reasons.append(COOKIE_MISMATCH_REASON)
            cookie_mismatches = (
                sorted_cookies(entry1.cookies),
                sorted_cookies(entry2.cookies),
            )

        if not scripts_equal(
            entry1.scripts, entry2.scripts, script_match_mode, entry1.url,
        ):
            reasons.append(
                SCRIPT_NAME_MISMATCH_REASON
                if script_match_mode is ScriptMatchMode.NAME_ONLY
                else SCRIPT_URL_MISMATCH_REASON
            )
            script_mismatches = (
                sorted_scripts(entry1.scripts),
                sorted_scripts(entry2.scripts),
            )

        if not reasons:
            return None

        return Mismatch(
            url=entry1.url,
            mismatch_reasons=tuple(reasons),
            script_mismatches=script_mismatches,
            cookie_mismatches=cookie_mismatches,
        )
