"""Extract the inner HTML of elements selected by an attribute token."""

from typing import Iterator, List, Optional

import structlog

from .attributes import contains_token, next_attribute_match
from .comparison import Comparison
from .errors import SubstringNotFoundError, require, require_start
from .spans import Fragment
from .tags import find_balanced_close, find_opening_tag

logger = structlog.get_logger(__name__)

ORDINAL = Comparison.ORDINAL


def find_fragment(
    text: str,
    attribute: str,
    token: str,
    start: int = 0,
    comparison: Comparison = ORDINAL,
) -> Optional[Fragment]:
    """
    Find the first element whose ``attribute`` holds ``token`` and return its inner HTML.

    Candidates that fail the token test, have no recognisable opening tag,
    or never balance are skipped; the search resumes past the candidate.

    Args:
        text: Raw HTML
        attribute: Attribute name, e.g. "class"
        token: Whitespace-delimited token the attribute value must contain
        start: Offset to start searching from, within ``[0, len(text))``
        comparison: Applies to the attribute name and token, never to tag names

    Returns:
        Fragment or None
    """
    require(attribute, "attribute")
    require(token, "token")
    require_start(start, len(text))
    return _find_from(text, attribute, token, start, comparison)


def _find_from(
    text: str,
    attribute: str,
    token: str,
    cursor: int,
    comparison: Comparison,
) -> Optional[Fragment]:
    while cursor < len(text):
        match = next_attribute_match(text, attribute, cursor, comparison)
        if match is None:
            return None
        cursor = match.end

        if not contains_token(match, token, comparison):
            continue

        tag = find_opening_tag(text, match)
        if tag is None:
            continue

        close = find_balanced_close(text, tag.name, tag.content_start)
        if close is None:
            continue

        html = text[tag.content_start:close]
        return Fragment(
            html=html,
            tag=tag.name,
            offset=match.offset,
            content_start=tag.content_start,
            # Resume relative to the attribute, not past the closing tag
            next_cursor=match.offset + max(len(html), 1),
        )

    return None


def iter_fragments(
    text: str,
    attribute: str,
    token: str,
    start: int = 0,
    comparison: Comparison = ORDINAL,
) -> Iterator[Fragment]:
    """Yield every matching fragment in source order."""
    fragment = find_fragment(text, attribute, token, start, comparison)
    while fragment is not None:
        yield fragment
        if fragment.next_cursor >= len(text):
            return
        fragment = _find_from(text, attribute, token, fragment.next_cursor, comparison)


def _all(
    text: str,
    attribute: str,
    token: str,
    start: int,
    comparison: Comparison,
    trim: bool,
) -> List[str]:
    fragments = [f.html for f in iter_fragments(text, attribute, token, start, comparison)]
    if trim:
        fragments = [html.strip() for html in fragments]
    logger.debug("fragments_collected", attribute=attribute, token=token, count=len(fragments))
    return fragments


def _not_found(attribute: str, token: str) -> SubstringNotFoundError:
    return SubstringNotFoundError.for_keys("InnerHtml", attribute=attribute, token=token)


# One element


def inner_html_by_attribute(
    text: str,
    attribute: str,
    token: str,
    start: int = 0,
    comparison: Comparison = ORDINAL,
) -> Optional[str]:
    fragment = find_fragment(text, attribute, token, start, comparison)
    return fragment.html if fragment else None


def inner_html_by_attribute_or_default(
    text: str,
    attribute: str,
    token: str,
    start: int = 0,
    comparison: Comparison = ORDINAL,
    fallback: str = "",
) -> str:
    html = inner_html_by_attribute(text, attribute, token, start, comparison)
    return fallback if html is None else html


def inner_html_by_attribute_or_fail(
    text: str,
    attribute: str,
    token: str,
    start: int = 0,
    comparison: Comparison = ORDINAL,
) -> str:
    html = inner_html_by_attribute(text, attribute, token, start, comparison)
    if html is None:
        raise _not_found(attribute, token)
    return html


def inner_html_by_class(
    text: str,
    class_name: str,
    start: int = 0,
    comparison: Comparison = ORDINAL,
) -> Optional[str]:
    return inner_html_by_attribute(text, "class", class_name, start, comparison)


def inner_html_by_class_or_default(
    text: str,
    class_name: str,
    start: int = 0,
    comparison: Comparison = ORDINAL,
    fallback: str = "",
) -> str:
    return inner_html_by_attribute_or_default(text, "class", class_name, start, comparison, fallback)


def inner_html_by_class_or_fail(
    text: str,
    class_name: str,
    start: int = 0,
    comparison: Comparison = ORDINAL,
) -> str:
    return inner_html_by_attribute_or_fail(text, "class", class_name, start, comparison)


# Every element


def inner_html_by_attribute_all(
    text: str,
    attribute: str,
    token: str,
    start: int = 0,
    comparison: Comparison = ORDINAL,
    trim: bool = False,
) -> List[str]:
    return _all(text, attribute, token, start, comparison, trim)


def inner_html_by_attribute_all_or_default(
    text: str,
    attribute: str,
    token: str,
    start: int = 0,
    comparison: Comparison = ORDINAL,
    trim: bool = False,
    fallback: Optional[List[str]] = None,
) -> Optional[List[str]]:
    return _all(text, attribute, token, start, comparison, trim) or fallback


def inner_html_by_attribute_all_or_fail(
    text: str,
    attribute: str,
    token: str,
    start: int = 0,
    comparison: Comparison = ORDINAL,
    trim: bool = False,
) -> List[str]:
    fragments = _all(text, attribute, token, start, comparison, trim)
    if not fragments:
        raise _not_found(attribute, token)
    return fragments


def inner_html_by_class_all(
    text: str,
    class_name: str,
    start: int = 0,
    comparison: Comparison = ORDINAL,
    trim: bool = False,
) -> List[str]:
    return _all(text, "class", class_name, start, comparison, trim)


def inner_html_by_class_all_or_default(
    text: str,
    class_name: str,
    start: int = 0,
    comparison: Comparison = ORDINAL,
    trim: bool = False,
    fallback: Optional[List[str]] = None,
) -> Optional[List[str]]:
    return inner_html_by_attribute_all_or_default(
        text, "class", class_name, start, comparison, trim, fallback
    )


def inner_html_by_class_all_or_fail(
    text: str,
    class_name: str,
    start: int = 0,
    comparison: Comparison = ORDINAL,
    trim: bool = False,
) -> List[str]:
    return inner_html_by_attribute_all_or_fail(text, "class", class_name, start, comparison, trim)
