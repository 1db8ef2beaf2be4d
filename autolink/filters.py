# autolink/filters.py

from __future__ import annotations

from typing import Any, Callable, Iterable, Protocol


class Pattern(Protocol):
    """Anything that scans text into non-overlapping matches, left to right.

    Compiled ``re`` and ``regex`` patterns both qualify. Each match must
    expose ``start()``, ``end()`` and ``group(0)``.
    """

    def finditer(self, string: str) -> Iterable[Any]:
        ...


# (text, start, end) -> keep the match?
#
# Filters see the whole text, so they can look outside the matched span.
# For example, a web URL filter can refuse "example.com" when the character
# right before it is '@', so the domain of support@example.com does not
# become a link of its own.
MatchFilter = Callable[[str, int, int], bool]

# (match, url) -> replacement url
#
# Runs before scheme handling, e.g. to turn "+1 (919) 555-1212" into
# "+19195551212" ahead of a "tel:" prefix.
TransformFilter = Callable[[Any, str], str]


def url_match_filter(text: str, start: int, end: int) -> bool:
    """Reject web URL matches that directly follow an at-sign."""
    if start == 0:
        return True
    return text[start - 1] != "@"
