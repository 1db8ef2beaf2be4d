# tests/test_config.py

import pytest

from autolink.config import default_config, load_config, parse_mask
from autolink.models import ALL, EMAIL_ADDRESSES, WEB_URLS, DetectorKind, LinkSpec
from autolink.pipeline import Linkifier


def test_shipped_config_matches_defaults():
    config = load_config("configs/linkify.yaml")
    assert config.default_mask == ALL
    assert config.schemes_for(WEB_URLS) == ["http://", "https://", "rtsp://"]
    assert config.schemes_for(EMAIL_ADDRESSES) == ["mailto:"]


@pytest.mark.parametrize(
    "value, expected",
    [
        (3, ALL),
        (0, DetectorKind.NONE),
        ("all", ALL),
        ("none", DetectorKind.NONE),
        ("Web_URLs", WEB_URLS),
        (["email_addresses"], EMAIL_ADDRESSES),
        (["web_urls", "email_addresses"], ALL),
        ([], DetectorKind.NONE),
    ],
)
def test_parse_mask(value, expected):
    assert parse_mask(value) == expected


def test_parse_mask_rejects_unknown_detector():
    with pytest.raises(ValueError):
        parse_mask(["web_urls", "phone_numbers"])


def test_load_config_overrides(tmp_path):
    path = tmp_path / "linkify.yaml"
    path.write_text(
        "default_mask: web_urls\n"
        "detectors:\n"
        "  web_urls:\n"
        "    schemes: ['https://', 'http://']\n",
        encoding="utf-8",
    )
    config = load_config(str(path))
    assert config.default_mask == WEB_URLS
    assert config.schemes_for(WEB_URLS) == ["https://", "http://"]
    assert config.schemes_for(EMAIL_ADDRESSES) == ["mailto:"]

    linkifier = Linkifier.from_config(config)
    assert linkifier.add_auto_links("google.com and a@b.co") == [
        LinkSpec("https://google.com", 0, 10)
    ]


def test_load_config_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    config = load_config(str(path))
    assert config.default_mask == default_config().default_mask
    assert config.schemes_for(WEB_URLS) == ["http://", "https://", "rtsp://"]


def test_load_config_unknown_detector(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("detectors:\n  street_addresses: {}\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(str(path))
