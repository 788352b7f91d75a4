"""
Literal delimiter scanning.

Every lookup here comes in three calling conventions sharing one scan:

- ``*_or_default(..., fallback)`` returns ``fallback`` when nothing matched
- the plain form returns ``None`` (or a possibly empty list for the
  multi-match helpers)
- ``*_or_fail`` raises ``SubstringNotFoundError`` naming the search keys
"""

from typing import List, Optional, TypeVar

from .comparison import Comparison
from .errors import SubstringNotFoundError, require, require_start
from .spans import Span

T = TypeVar("T")

ORDINAL = Comparison.ORDINAL


def find_between(
    text: str,
    left: str,
    right: str,
    start: int = 0,
    comparison: Comparison = ORDINAL,
) -> Optional[Span]:
    """
    Find the first text enclosed by ``left`` ... ``right`` at or after ``start``.

    Args:
        text: Text to search
        left: Opening delimiter (non-empty)
        right: Closing delimiter (non-empty)
        start: Offset to start searching from, within ``[0, len(text))``
        comparison: Delimiter comparison mode

    Returns:
        Span between the delimiters or None when either delimiter is missing

    Raises:
        InvalidArgumentError: empty delimiter or start out of range
    """
    require(left, "left")
    require(right, "right")
    require_start(start, len(text))
    return _scan(text, left, right, start, comparison)


def find_all_between(
    text: str,
    left: str,
    right: str,
    start: int = 0,
    comparison: Comparison = ORDINAL,
    limit: int = 0,
) -> List[Span]:
    """
    Find up to ``limit`` non-overlapping spans (0 means no limit).

    Each search for ``left`` resumes just past the previous ``right``.
    """
    require(left, "left")
    require(right, "right")
    require_start(start, len(text))

    spans: List[Span] = []
    cursor = start
    while limit <= 0 or len(spans) < limit:
        span = _scan(text, left, right, cursor, comparison)
        if span is None:
            break
        spans.append(span)
        cursor = span.right_end
    return spans


def _scan(text: str, left: str, right: str, start: int, comparison: Comparison) -> Optional[Span]:
    left_pos = comparison.search(text, left, start)
    if left_pos == -1:
        return None

    content_start = left_pos + len(left)
    right_pos = comparison.search(text, right, content_start)
    if right_pos == -1:
        return None

    return Span(
        text=text[content_start:right_pos],
        start=content_start,
        end=right_pos,
        left_offset=left_pos,
        right_end=right_pos + len(right),
    )


def find_between_last(
    text: str,
    left: str,
    right: str,
    start: int = -1,
    comparison: Comparison = ORDINAL,
) -> Optional[Span]:
    """
    Reverse scan: the last ``right`` at or before ``start``, then the last ``left`` before it.

    ``start`` of -1 searches from the end of the text.
    """
    require(left, "left")
    require(right, "right")
    require_start(start, len(text), allow_end_sentinel=True)
    if start == -1:
        start = len(text) - 1

    right_pos = comparison.search_last(text, right, start)
    # Nothing can precede a right delimiter at offset 0
    if right_pos <= 0:
        return None

    left_pos = comparison.search_last(text, left, right_pos - 1)
    if left_pos == -1:
        return None

    content_start = left_pos + len(left)
    if content_start >= right_pos:
        return None

    return Span(
        text=text[content_start:right_pos],
        start=content_start,
        end=right_pos,
        left_offset=left_pos,
        right_end=right_pos + len(right),
    )


def _or_default(value: Optional[T], fallback: T) -> T:
    return fallback if value is None else value


# Single substring


def between(
    text: str,
    left: str,
    right: str,
    start: int = 0,
    comparison: Comparison = ORDINAL,
) -> Optional[str]:
    span = find_between(text, left, right, start, comparison)
    return span.text if span else None


def between_or_default(
    text: str,
    left: str,
    right: str,
    start: int = 0,
    comparison: Comparison = ORDINAL,
    fallback: str = "",
) -> str:
    return _or_default(between(text, left, right, start, comparison), fallback)


def between_or_fail(
    text: str,
    left: str,
    right: str,
    start: int = 0,
    comparison: Comparison = ORDINAL,
) -> str:
    result = between(text, left, right, start, comparison)
    if result is None:
        raise SubstringNotFoundError.for_keys("StringBetween", left=left, right=right)
    return result


# All substrings


def betweens(
    text: str,
    left: str,
    right: str,
    start: int = 0,
    comparison: Comparison = ORDINAL,
    limit: int = 0,
) -> List[str]:
    return [span.text for span in find_all_between(text, left, right, start, comparison, limit)]


def betweens_or_default(
    text: str,
    left: str,
    right: str,
    start: int = 0,
    comparison: Comparison = ORDINAL,
    limit: int = 0,
    fallback: Optional[List[str]] = None,
) -> Optional[List[str]]:
    return betweens(text, left, right, start, comparison, limit) or fallback


def betweens_or_fail(
    text: str,
    left: str,
    right: str,
    start: int = 0,
    comparison: Comparison = ORDINAL,
    limit: int = 0,
) -> List[str]:
    result = betweens(text, left, right, start, comparison, limit)
    if not result:
        raise SubstringNotFoundError.for_keys("StringBetweens", left=left, right=right)
    return result


# Single substring, scanning right to left


def between_last(
    text: str,
    left: str,
    right: str,
    start: int = -1,
    comparison: Comparison = ORDINAL,
) -> Optional[str]:
    span = find_between_last(text, left, right, start, comparison)
    return span.text if span else None


def between_last_or_default(
    text: str,
    left: str,
    right: str,
    start: int = -1,
    comparison: Comparison = ORDINAL,
    fallback: str = "",
) -> str:
    return _or_default(between_last(text, left, right, start, comparison), fallback)


def between_last_or_fail(
    text: str,
    left: str,
    right: str,
    start: int = -1,
    comparison: Comparison = ORDINAL,
) -> str:
    result = between_last(text, left, right, start, comparison)
    if result is None:
        raise SubstringNotFoundError.for_keys("StringBetweenLast", right=right, left=left)
    return result


# After / before a single delimiter


def after(
    text: str,
    value: str,
    start: int = 0,
    comparison: Comparison = ORDINAL,
) -> Optional[str]:
    """Everything after the first ``value`` at or after ``start``."""
    require(value, "value")
    require_start(start, len(text))

    pos = comparison.search(text, value, start)
    if pos == -1:
        return None
    return text[pos + len(value):]


def after_or_default(
    text: str,
    value: str,
    start: int = 0,
    comparison: Comparison = ORDINAL,
    fallback: str = "",
) -> str:
    return _or_default(after(text, value, start, comparison), fallback)


def after_or_fail(
    text: str,
    value: str,
    start: int = 0,
    comparison: Comparison = ORDINAL,
) -> str:
    result = after(text, value, start, comparison)
    if result is None:
        raise SubstringNotFoundError.for_keys("String.After", input=value)
    return result


def before(
    text: str,
    value: str,
    start: int = 0,
    comparison: Comparison = ORDINAL,
) -> Optional[str]:
    """Everything before the first ``value`` found at or after ``start``."""
    require(value, "value")
    require_start(start, len(text))

    pos = comparison.search(text, value, start)
    if pos == -1:
        return None
    return text[:pos]


def before_or_default(
    text: str,
    value: str,
    start: int = 0,
    comparison: Comparison = ORDINAL,
    fallback: str = "",
) -> str:
    return _or_default(before(text, value, start, comparison), fallback)


def before_or_fail(
    text: str,
    value: str,
    start: int = 0,
    comparison: Comparison = ORDINAL,
) -> str:
    result = before(text, value, start, comparison)
    if result is None:
        raise SubstringNotFoundError.for_keys("String.Before", input=value)
    return result


def contains_ignore_case(text: str, value: str) -> bool:
    return Comparison.IGNORE_CASE.search(text, value) != -1
