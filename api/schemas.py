# api/schemas.py

from typing import List, Optional
from pydantic import BaseModel


class LinkSchema(BaseModel):
    url: str
    start: int
    end: int


class LinksRequest(BaseModel):
    text: str
    # Detector names, e.g. ["web_urls"]; None means the configured default
    detectors: Optional[List[str]] = None


class LinksResponse(BaseModel):
    found: bool
    links: List[LinkSchema]
