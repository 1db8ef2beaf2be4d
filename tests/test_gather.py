# tests/test_gather.py

import re

from autolink.filters import url_match_filter
from autolink.gather import gather_links, make_url
from autolink.models import LinkSpec

WEB_SCHEMES = ["http://", "https://", "rtsp://"]


def test_make_url_prepends_default_scheme():
    assert make_url("google.com", WEB_SCHEMES) == "http://google.com"


def test_make_url_fixes_scheme_case():
    assert make_url("HTTPS://Example.com/A", WEB_SCHEMES) == "https://Example.com/A"
    assert make_url("MailTo:a@b.co", ["mailto:"]) == "mailto:a@b.co"


def test_make_url_keeps_matching_scheme():
    assert make_url("rtsp://cam.example.net", WEB_SCHEMES) == "rtsp://cam.example.net"


def test_make_url_without_prefixes():
    assert make_url("Example.com", []) == "Example.com"


def test_make_url_short_text_gets_default():
    assert make_url("ht", ["http://"]) == "http://ht"


def test_make_url_transform_runs_before_prefixing():
    m = re.search(r"\(\d{3}\) \d{3}-\d{4}", "call (919) 555-1212")
    url = make_url(
        m.group(0),
        ["tel:"],
        m,
        lambda match, u: re.sub(r"[^\d+]", "", u),
    )
    assert url == "tel:9195551212"


def test_url_match_filter():
    text = "me@example.com example.com"
    assert url_match_filter(text, 3, 14) is False
    assert url_match_filter(text, 15, 26) is True
    assert url_match_filter("example.com", 0, 11) is True


def test_gather_links_applies_filter_and_prefix():
    pattern = re.compile(r"[a-z]+\.com")
    text = "me@example.com and google.com"
    links = gather_links(text, pattern, WEB_SCHEMES, url_match_filter)
    assert links == [LinkSpec("http://google.com", 19, 29)]


def test_gather_links_keeps_every_match_without_filter():
    pattern = re.compile(r"\d+")
    links = gather_links("1 22 333", pattern, ["n:"])
    assert links == [
        LinkSpec("n:1", 0, 1),
        LinkSpec("n:22", 2, 4),
        LinkSpec("n:333", 5, 8),
    ]
