"""Locate ``name="value"`` attribute occurrences in raw HTML."""

from typing import Optional

from .comparison import Comparison
from .errors import require
from .spans import AttributeMatch
from .substrings import find_between


def next_attribute_match(
    text: str,
    attribute: str,
    start: int = 0,
    comparison: Comparison = Comparison.ORDINAL,
) -> Optional[AttributeMatch]:
    """
    Find the next double-quoted ``attribute`` at or after ``start``.

    Token filtering is left to the caller: on a miss, resume from
    ``match.end``.
    """
    require(attribute, "attribute")
    span = find_between(text, attribute + '="', '"', start, comparison)
    if span is None:
        return None

    return AttributeMatch(
        name=attribute,
        value=span.text,
        tokens=tuple(span.text.split()),
        offset=span.left_offset,
        end=span.right_end,
    )


def contains_token(
    match: AttributeMatch,
    token: str,
    comparison: Comparison = Comparison.ORDINAL,
) -> bool:
    """Exact token membership: ``btn-primary`` does not contain ``primary``."""
    token = token.strip()
    return any(comparison.equals(candidate, token) for candidate in match.tokens)
