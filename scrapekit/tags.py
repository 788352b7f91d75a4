"""
Tag boundaries around a matched attribute.

Balancing only ever compares the target tag name. Unrelated tags, closed
or not, are invisible to the depth counter, so an element containing a
stray unmatched tag of its own name cannot be bounded correctly. Handling
that would need a real parser.
"""

import re
from typing import Optional

from .spans import AttributeMatch, TagSpan

_TAG_NAME = re.compile(r"\S+")


def find_opening_tag(text: str, match: AttributeMatch) -> Optional[TagSpan]:
    """
    Find the opening tag that carries ``match``.

    Args:
        text: Source HTML
        match: Attribute occurrence inside the opening tag

    Returns:
        TagSpan with the tag name and the '>' ending the opening tag, or None
        when there is no '<' before the attribute, the name is empty, or the
        tag is never closed
    """
    lt = text.rfind("<", 0, match.offset)
    if lt == -1:
        return None

    name = _TAG_NAME.match(text, lt + 1, match.offset)
    if name is None:
        return None

    gt = text.find(">", match.end)
    if gt == -1:
        return None

    return TagSpan(name=name.group(), close_offset=gt)


def find_balanced_close(text: str, tag: str, content_start: int) -> Optional[int]:
    """
    Offset of the '<' of the closing tag balancing an opening ``tag``.

    Nested ``<tag`` openings raise the depth and ``</tag`` closers lower it;
    the closer taking it to -1 is the match. Only the next ``len(tag)``
    characters are compared, ordinally.
    """
    if not tag:
        return None

    # The final character is never examined
    last = len(text) - 1
    size = len(tag)
    depth = 0

    i = text.find("<", content_start, last)
    while i != -1:
        probe = i + 1
        step = 1
        if text[probe] == "/":
            probe += 1
            step = -1

        if probe + size <= last and text.startswith(tag, probe):
            depth += step
            if depth == -1:
                return i

        i = text.find("<", i + 1, last)

    return None
