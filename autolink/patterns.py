# autolink/patterns.py

from __future__ import annotations

import regex as re


# Generic TLDs accepted for scheme-less matches. Two-letter country codes
# are accepted wholesale; anything else needs an explicit scheme.
GENERIC_TLDS = (
    "aero", "agency", "app", "asia", "biz", "blog", "cat", "cloud", "club",
    "com", "coop", "design", "dev", "digital", "edu", "email", "gov", "info",
    "int", "jobs", "link", "live", "media", "mil", "mobi", "museum", "name",
    "net", "network", "news", "online", "org", "page", "pro", "shop", "site",
    "software", "solutions", "space", "store", "studio", "systems", "tech",
    "tel", "travel", "website", "wiki", "xyz",
)

_LABEL = r"[\p{L}\p{N}](?:[\p{L}\p{N}\-]{0,61}[\p{L}\p{N}])?"
_OCTET = r"(?:25[0-5]|2[0-4]\d|1\d\d|[1-9]?\d)"
_IPV4 = _OCTET + r"(?:\." + _OCTET + r"){3}"

_PUNYCODE_TLD = r"xn--[a-z0-9\-]{1,59}"
_RELAXED_TLD = r"(?:" + _PUNYCODE_TLD + r"|\p{L}{2,63})"
_STRICT_TLD = (
    r"(?:"
    + _PUNYCODE_TLD
    + "|"
    + "|".join(sorted(GENERIC_TLDS, key=len, reverse=True))
    + r"|[a-z]{2})"
)

# A host must not run straight into more label characters.
_HOST_END = r"(?![\p{L}\p{N}_\-])"

_RELAXED_HOST = r"(?:(?:" + _LABEL + r"\.)+" + _RELAXED_TLD + "|" + _IPV4 + ")" + _HOST_END
_STRICT_HOST = r"(?:" + _LABEL + r"\.)+" + _STRICT_TLD + _HOST_END

_USERINFO_CHAR = r"[\p{L}\p{N}\-._~%!$&'()*+,;=]"
_USERINFO = _USERINFO_CHAR + r"+(?::" + _USERINFO_CHAR + r"*)?@"

_PORT = r"(?::\d{1,5})?"

# Path, query or fragment. Trailing punctuation belongs to the sentence,
# not to the link.
_PATH = r"(?:[/?#](?:[^\s<>\"]*[^\s<>\".,;:!?'()\[\]{}])?)?"

_WEB_URL_WITH_PROTOCOL = (
    r"(?:https?|rtsp)://(?:" + _USERINFO + r")?" + _RELAXED_HOST + _PORT + _PATH
)
_WEB_URL_WITHOUT_PROTOCOL = _STRICT_HOST + _PORT + _PATH

_LEADING_BOUNDARY = r"(?<![\p{L}\p{N}_.\-])"

AUTOLINK_WEB_URL = re.compile(
    _LEADING_BOUNDARY
    + r"(?:"
    + _WEB_URL_WITH_PROTOCOL
    + "|"
    + _WEB_URL_WITHOUT_PROTOCOL
    + ")",
    re.IGNORECASE,
)

_EMAIL_CHAR = r"[\p{L}\p{N}._%+\-]"

AUTOLINK_EMAIL_ADDRESS = re.compile(
    r"(?<!" + _EMAIL_CHAR + r")"
    r"(?:mailto:)?"
    + _EMAIL_CHAR
    + r"{1,256}@"
    r"[\p{L}\p{N}][\p{L}\p{N}\-]{0,64}"
    r"(?:\.[\p{L}\p{N}][\p{L}\p{N}\-]{0,25})+",
    re.IGNORECASE,
)
