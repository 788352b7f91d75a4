"""Data models for scrapekit results."""

from datetime import datetime, timezone
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PageResult(BaseModel):
    """Result of fetching a single page."""

    url: str
    status_code: int
    success: bool
    text: str = ""
    content_type: Optional[str] = None
    error: Optional[str] = None
    duration_ms: int
    timestamp: datetime = Field(default_factory=_utcnow)


class ExtractionReport(BaseModel):
    """Fragments pulled out of one document, as printed by the CLI."""

    source: str
    method: str  # "inner_html" or "between"
    keys: Dict[str, str] = Field(default_factory=dict)
    fragments: List[str] = Field(default_factory=list)
    total: int = 0
    duration_ms: int = 0
    timestamp: datetime = Field(default_factory=_utcnow)
