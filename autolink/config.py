# autolink/config.py

from __future__ import annotations

import yaml
from dataclasses import dataclass, field
from typing import Any, Dict, List

from autolink.models import DetectorKind


# Config names -> detector kinds, in the order detectors run.
DETECTOR_NAMES: Dict[str, DetectorKind] = {
    "web_urls": DetectorKind.WEB_URLS,
    "email_addresses": DetectorKind.EMAIL_ADDRESSES,
}

DEFAULT_SCHEMES: Dict[DetectorKind, List[str]] = {
    DetectorKind.WEB_URLS: ["http://", "https://", "rtsp://"],
    DetectorKind.EMAIL_ADDRESSES: ["mailto:"],
}


@dataclass
class DetectorConfig:
    name: str
    schemes: List[str]


@dataclass
class LinkifyConfig:
    default_mask: DetectorKind = DetectorKind.ALL
    detectors: Dict[DetectorKind, DetectorConfig] = field(default_factory=dict)

    def schemes_for(self, kind: DetectorKind) -> List[str]:
        dc = self.detectors.get(kind)
        return list(dc.schemes) if dc else list(DEFAULT_SCHEMES[kind])


def parse_mask(value: Any) -> DetectorKind:
    """
    Accepts an int mask, a detector name, "all"/"none", or a list of names.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid detector mask: {value!r}")
    if isinstance(value, int):
        return DetectorKind(value & DetectorKind.ALL)
    if isinstance(value, str):
        name = value.strip().lower()
        if name == "all":
            return DetectorKind.ALL
        if name == "none":
            return DetectorKind.NONE
        if name not in DETECTOR_NAMES:
            raise ValueError(f"Unknown detector: {value!r}")
        return DETECTOR_NAMES[name]
    if value is None:
        return DetectorKind.NONE

    mask = DetectorKind.NONE
    for item in value:
        mask |= parse_mask(item)
    return mask


def default_config() -> LinkifyConfig:
    return LinkifyConfig(
        default_mask=DetectorKind.ALL,
        detectors={
            kind: DetectorConfig(name, list(DEFAULT_SCHEMES[kind]))
            for name, kind in DETECTOR_NAMES.items()
        },
    )


def load_config(path: str) -> LinkifyConfig:
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}

    config = default_config()

    if "default_mask" in cfg:
        config.default_mask = parse_mask(cfg["default_mask"])

    detectors_cfg = cfg.get("detectors") or {}
    for name, props in detectors_cfg.items():
        if name not in DETECTOR_NAMES:
            raise ValueError(f"Unknown detector: {name!r}")
        props = props or {}
        kind = DETECTOR_NAMES[name]
        schemes = props.get("schemes", DEFAULT_SCHEMES[kind])
        config.detectors[kind] = DetectorConfig(name=name, schemes=[str(s) for s in schemes])

    return config
