"""Exceptions raised by scrapekit."""

from typing import Dict


class InvalidArgumentError(ValueError):
    """A required argument is empty or a start offset is out of range."""

    def __init__(self, name: str, message: str = "must not be empty"):
        self.name = name
        super().__init__(f"{name} {message}")


class SubstringNotFoundError(LookupError):
    """Raised by ``*_or_fail`` helpers when nothing matched."""

    def __init__(self, message: str, **keys: str):
        self.keys: Dict[str, str] = keys
        super().__init__(message)

    @classmethod
    def for_keys(cls, what: str, **keys: str) -> "SubstringNotFoundError":
        """Build the message ``<what> not found. Left: "x". Right: "y".``"""
        parts = " ".join(f'{name.capitalize()}: "{value}".' for name, value in keys.items())
        return cls(f"{what} not found. {parts}", **keys)


def require(value, name: str) -> None:
    """Reject ``None`` or empty strings."""
    if not value:
        raise InvalidArgumentError(name)


def require_start(start: int, length: int, name: str = "start", allow_end_sentinel: bool = False) -> None:
    """
    Validate a scan start offset.

    Forward scans accept ``[0, length)``; reverse scans also accept -1,
    meaning "from the end".
    """
    lowest = -1 if allow_end_sentinel else 0
    if start < lowest or start >= length:
        raise InvalidArgumentError(name, f"out of range: {start} (text length {length})")
