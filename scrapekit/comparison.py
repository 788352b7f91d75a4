"""String comparison modes used by all scanners."""

import re
from enum import Enum
from functools import lru_cache


class Comparison(str, Enum):
    """How literal delimiters and tokens are compared."""
    ORDINAL = "ordinal"
    IGNORE_CASE = "ignore_case"

    def search(self, text: str, value: str, start: int = 0) -> int:
        """Offset of the first ``value`` at or after ``start``, or -1."""
        if self is Comparison.ORDINAL:
            return text.find(value, start)

        match = _forward_pattern(value).search(text, start)
        return match.start() if match else -1

    def search_last(self, text: str, value: str, start: int) -> int:
        """
        Offset of the last ``value`` lying entirely within ``text[:start + 1]``.

        Returns -1 when there is none.
        """
        if self is Comparison.ORDINAL:
            return text.rfind(value, 0, start + 1)

        last = -1
        # Lookahead so overlapping candidates are all visited; endpos clips the lookahead
        for match in _lookahead_pattern(value).finditer(text, 0, start + 1):
            last = match.start()
        return last

    def equals(self, left: str, right: str) -> bool:
        if self is Comparison.ORDINAL:
            return left == right
        return left.casefold() == right.casefold()


@lru_cache(maxsize=256)
def _forward_pattern(value: str) -> re.Pattern:
    return re.compile(re.escape(value), re.IGNORECASE)


@lru_cache(maxsize=256)
def _lookahead_pattern(value: str) -> re.Pattern:
    return re.compile("(?=" + re.escape(value) + ")", re.IGNORECASE)
