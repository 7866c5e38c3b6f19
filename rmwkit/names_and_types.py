"""Names paired with their lists of type names, as reported by graph queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence

from rmwkit.errors import BadAllocError, InvalidArgumentError, RmwError


def check_zero_string_array(array: Optional[Sequence[Optional[str]]]) -> None:
    """Raise ``RmwError`` unless ``array`` is an empty string array."""
    if array is None:
        raise RmwError("string array is null")
    if len(array) != 0:
        raise RmwError("string array is not zero initialized")


@dataclass
class NamesAndTypes:
    """Names, each with the list of type names it carries.

    A default instance is zero: no names and no types.
    """

    names: list[Optional[str]] = field(default_factory=list)
    types: Optional[list[list[str]]] = None

    def check_zero(self) -> None:
        """Raise ``InvalidArgumentError`` unless this is zero initialized."""
        if self.names:
            raise InvalidArgumentError("names array is not zeroed")
        if self.types is not None:
            raise InvalidArgumentError("types array is not NULL")

    def init(self, size: int) -> None:
        """Make room for ``size`` names, each with an empty list of types."""
        if not isinstance(size, int) or isinstance(size, bool) or size < 0:
            raise InvalidArgumentError("size must be a non-negative integer")
        try:
            names: list[Optional[str]] = [None] * size
        except (MemoryError, OverflowError) as exc:
            raise BadAllocError("failed to allocate memory for names") from exc
        self.names = names
        self.types = [[] for _ in names]

    def fini(self) -> None:
        """Drop all names and types, returning to the zero state."""
        if self.types is not None:
            for type_list in self.types:
                type_list.clear()
            self.types = None
        self.names = []

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self) -> Iterator[tuple[Optional[str], list[str]]]:
        types = self.types if self.types is not None else [[] for _ in self.names]
        return iter(zip(self.names, types))