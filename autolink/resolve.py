# autolink/resolve.py

from __future__ import annotations

from typing import List
from autolink.models import LinkSpec


def prune_overlaps(links: List[LinkSpec]) -> None:
    """
    Reduce links (in place) to a set where no two neighbours overlap:
    - a link fully inside another one is dropped
    - otherwise the longer of two overlapping links wins
    - two overlapping links of equal length are both kept

    The list ends up ordered by start, longest first on equal starts.
    """
    links.sort(key=lambda s: (s.start, -s.end))

    i = 0
    while i < len(links) - 1:
        a = links[i]
        b = links[i + 1]

        if a.start <= b.start and a.end > b.start:
            remove = None
            if b.end <= a.end:
                remove = i + 1
            elif a.length() > b.length():
                remove = i + 1
            elif a.length() < b.length():
                remove = i

            if remove is not None:
                del links[remove]
                continue

        i += 1
