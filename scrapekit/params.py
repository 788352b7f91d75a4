"""Ordered request parameters."""

from typing import Any, Iterable, Iterator, List, Mapping, Optional, Tuple, Union
from urllib.parse import quote_plus

from .errors import require

ParamSource = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


class RequestParams:
    """
    Ordered multimap of query or form parameters.

    Keys may repeat; insertion order is kept in the rendered query.
    """

    def __init__(
        self,
        values: Optional[ParamSource] = None,
        values_unescaped: bool = False,
        keys_unescaped: bool = False,
    ):
        """
        Initialize parameter list.

        Args:
            values: Initial parameters as a mapping or (name, value) pairs
            values_unescaped: Emit values as-is instead of percent-encoding them
            keys_unescaped: Emit names as-is instead of percent-encoding them
        """
        self.values_unescaped = values_unescaped
        self.keys_unescaped = keys_unescaped
        self._items: List[Tuple[str, str]] = []

        if values is not None:
            pairs = values.items() if isinstance(values, Mapping) else values
            for name, value in pairs:
                self.add(name, value)

    def add(self, name: str, value: Any) -> "RequestParams":
        """Append a parameter; ``None`` becomes an empty string."""
        require(name, "name")
        self._items.append((name, "" if value is None else str(value)))
        return self

    def __setitem__(self, name: str, value: Any) -> None:
        self.add(name, value)

    def __getitem__(self, name: str) -> str:
        for key, value in self._items:
            if key == name:
                return value
        raise KeyError(name)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        try:
            return self[name]
        except KeyError:
            return default

    def get_all(self, name: str) -> List[str]:
        return [value for key, value in self._items if key == name]

    def items(self) -> List[Tuple[str, str]]:
        return list(self._items)

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, name: object) -> bool:
        return any(key == name for key, _ in self._items)

    def __repr__(self) -> str:
        return f"RequestParams({self._items!r})"

    @property
    def query(self) -> str:
        """Render as ``name=value&name2=value2``."""
        return "&".join(
            f"{self._encode(key, self.keys_unescaped)}={self._encode(value, self.values_unescaped)}"
            for key, value in self._items
        )

    @staticmethod
    def _encode(value: str, unescaped: bool) -> str:
        return value if unescaped else quote_plus(value)
