# autolink/pipeline.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from .config import LinkifyConfig, default_config
from .diagnostics import Diagnostics, NullDiagnostics
from .filters import MatchFilter, Pattern, TransformFilter, url_match_filter
from .gather import gather_links
from .models import ALL, DetectorKind, LinkSpec
from .patterns import AUTOLINK_EMAIL_ADDRESS, AUTOLINK_WEB_URL
from .resolve import prune_overlaps

logger = logging.getLogger(__name__)

# Bidi embedding/override controls that can make link text read differently
# from where it actually points.
UNSUPPORTED_CHARACTERS = ("\u202c", "\u202d", "\u202e")


@dataclass(frozen=True)
class Detector:
    kind: DetectorKind
    pattern: Pattern
    schemes: Sequence[str]
    match_filter: Optional[MatchFilter] = None
    transform_filter: Optional[TransformFilter] = None


def build_detectors(config: LinkifyConfig) -> List[Detector]:
    """Default detectors, web URLs first, then email addresses."""
    return [
        Detector(
            kind=DetectorKind.WEB_URLS,
            pattern=AUTOLINK_WEB_URL,
            schemes=tuple(config.schemes_for(DetectorKind.WEB_URLS)),
            match_filter=url_match_filter,
        ),
        Detector(
            kind=DetectorKind.EMAIL_ADDRESSES,
            pattern=AUTOLINK_EMAIL_ADDRESS,
            schemes=tuple(config.schemes_for(DetectorKind.EMAIL_ADDRESSES)),
        ),
    ]


def contains_unsupported_characters(
    text: str, diagnostics: Optional[Diagnostics] = None
) -> bool:
    """
    True if text holds a bidi control we refuse to linkify. Every offending
    character found is reported once.
    """
    found = False
    for ch in UNSUPPORTED_CHARACTERS:
        if ch in text:
            found = True
            if diagnostics is not None:
                diagnostics.report(
                    f"Unsupported character for applying links: u{ord(ch):04X}"
                )
    return found


class Linkifier:
    """
    Finds web URLs and email addresses in plain text.

    Example:
        linkifier = Linkifier()
        links = linkifier.add_auto_links("Mail me at test@example.com")
        # [LinkSpec(url='mailto:test@example.com', start=11, end=27)]
    """

    def __init__(
        self,
        detectors: Optional[Iterable[Detector]] = None,
        diagnostics: Optional[Diagnostics] = None,
        default_mask: DetectorKind = ALL,
    ):
        if detectors is None:
            detectors = build_detectors(default_config())
        self.detectors = tuple(detectors)
        self.diagnostics = diagnostics or NullDiagnostics()
        self.default_mask = default_mask

    @classmethod
    def from_config(
        cls, config: LinkifyConfig, diagnostics: Optional[Diagnostics] = None
    ) -> "Linkifier":
        return cls(
            detectors=build_detectors(config),
            diagnostics=diagnostics,
            default_mask=config.default_mask,
        )

    def add_auto_links(
        self, text: str, mask: Optional[int] = None
    ) -> Optional[List[LinkSpec]]:
        """
        Return the links found in text, or None if there are none.

        None is also returned for a zero mask and for text containing
        bidi override characters (the latter is reported to diagnostics).
        """
        if mask is None:
            mask = self.default_mask

        if contains_unsupported_characters(text, self.diagnostics):
            return None
        if mask == 0:
            return None

        links: List[LinkSpec] = []
        for detector in self.detectors:
            if not mask & detector.kind:
                continue
            links += gather_links(
                text,
                detector.pattern,
                detector.schemes,
                detector.match_filter,
                detector.transform_filter,
            )

        prune_overlaps(links)
        logger.debug("Found %d link(s) in %d chars", len(links), len(text))

        if not links:
            return None
        return links


def add_auto_links(
    text: str, mask: int = ALL, diagnostics: Optional[Diagnostics] = None
) -> Optional[List[LinkSpec]]:
    return Linkifier(diagnostics=diagnostics).add_auto_links(text, mask)


def add_links(
    text: str,
    pattern: Pattern,
    default_scheme: Optional[str] = None,
    schemes: Optional[Sequence[str]] = None,
    match_filter: Optional[MatchFilter] = None,
    transform_filter: Optional[TransformFilter] = None,
) -> List[LinkSpec]:
    """
    Run a single caller-supplied pattern over text.

    default_scheme is prepended to matches that carry none of the known
    schemes. Scheme comparison is case-insensitive and every scheme is
    lowercased. Overlapping matches are not pruned here.
    """
    prefixes = [(default_scheme or "").lower()]
    prefixes += [(s or "").lower() for s in (schemes or [])]

    return gather_links(text, pattern, prefixes, match_filter, transform_filter)
