# autolink/gather.py

from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

from autolink.filters import MatchFilter, Pattern, TransformFilter
from autolink.models import LinkSpec

logger = logging.getLogger(__name__)


def make_url(
    url: str,
    prefixes: Sequence[str],
    match: Any = None,
    transform_filter: Optional[TransformFilter] = None,
) -> str:
    """
    Turn matched text into a URL carrying exactly one scheme prefix.

    - The transform filter (if any) rewrites the text first.
    - The first prefix that matches case-insensitively wins, and its casing
      replaces whatever the text had ("HTTP://x" -> "http://x").
    - If nothing matches, the first prefix is prepended as the default.
    """
    if transform_filter is not None:
        url = transform_filter(match, url)

    for prefix in prefixes:
        if len(url) < len(prefix):
            continue
        head = url[: len(prefix)]
        if head.lower() == prefix.lower():
            if head != prefix:
                url = prefix + url[len(prefix):]
            return url

    if prefixes:
        url = prefixes[0] + url
    return url


def gather_links(
    text: str,
    pattern: Pattern,
    schemes: Sequence[str],
    match_filter: Optional[MatchFilter] = None,
    transform_filter: Optional[TransformFilter] = None,
) -> List[LinkSpec]:
    links: List[LinkSpec] = []

    for m in pattern.finditer(text):
        start, end = m.start(), m.end()
        if match_filter is not None and not match_filter(text, start, end):
            logger.debug("Match [%d, %d) rejected by filter", start, end)
            continue

        url = make_url(m.group(0), schemes, m, transform_filter)
        links.append(LinkSpec(url=url, start=start, end=end))

    return links
