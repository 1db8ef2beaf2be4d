# autolink/models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag


class DetectorKind(IntFlag):
    NONE = 0
    WEB_URLS = 0x01
    EMAIL_ADDRESSES = 0x02
    ALL = WEB_URLS | EMAIL_ADDRESSES


WEB_URLS = DetectorKind.WEB_URLS
EMAIL_ADDRESSES = DetectorKind.EMAIL_ADDRESSES
ALL = DetectorKind.ALL


@dataclass(frozen=True)
class LinkSpec:
    url: str
    start: int
    end: int

    def __post_init__(self):
        if self.start < 0 or self.start >= self.end:
            raise ValueError(f"Invalid link span [{self.start}, {self.end})")

    def overlaps(self, other: "LinkSpec") -> bool:
        return not (self.end <= other.start or other.end <= self.start)

    def length(self) -> int:
        return self.end - self.start
