"""Transient results produced while scanning raw HTML text."""

from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class Span:
    """Text found strictly between a left and a right delimiter."""
    text: str
    start: int
    end: int
    left_offset: int  # where the left delimiter begins
    right_end: int  # just past the right delimiter


@dataclass(frozen=True)
class AttributeMatch:
    """A single ``name="value"`` occurrence in the source text."""
    name: str
    value: str
    tokens: Tuple[str, ...]
    offset: int
    end: int  # just past the closing quote


@dataclass(frozen=True)
class TagSpan:
    """Opening tag that owns a matched attribute."""
    name: str
    close_offset: int  # offset of the '>' ending the opening tag

    @property
    def content_start(self) -> int:
        return self.close_offset + 1


@dataclass(frozen=True)
class Fragment:
    """Inner HTML of one attribute-scoped element."""
    html: str
    tag: str
    offset: int
    content_start: int
    next_cursor: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "html": self.html,
            "tag": self.tag,
            "offset": self.offset,
            "content_start": self.content_start,
            "next_cursor": self.next_cursor,
        }
