"""Insertion-ordered, duplicate-free collection used for groups and memberships."""
from __future__ import annotations

from typing import Callable, Dict, Hashable, Iterable, Iterator, Optional, Sequence, TypeVar, overload

T = TypeVar("T")


class OrderedSet(Sequence[T]):
    """Sequence that keeps the first occurrence of every value.

    ``key`` maps a value to the identity used for duplicate detection, so a
    set of group names can compare case-insensitively while still returning
    the casing it first saw.
    """

    def __init__(
        self,
        values: Iterable[T] = (),
        *,
        key: Optional[Callable[[T], Hashable]] = None,
    ) -> None:
        self._key = key
        self._index: Dict[Hashable, int] = {}
        self._items: list[T] = []
        for value in values:
            self.add(value)

    def _key_for(self, value: T) -> Hashable:
        return self._key(value) if self._key else value

    def add(self, value: T) -> bool:
        """Append ``value`` unless an equivalent value is already present."""

        key = self._key_for(value)
        if key in self._index:
            return False
        self._index[key] = len(self._items)
        self._items.append(value)
        return True

    def index(self, value: object, start: int = 0, stop: Optional[int] = None) -> int:
        try:
            position = self._index[self._key_for(value)]  # type: ignore[arg-type]
        except (KeyError, TypeError, AttributeError):
            raise ValueError(f"{value!r} is not in set") from None
        if position < start or (stop is not None and position >= stop):
            raise ValueError(f"{value!r} is not in set")
        return position

    def __contains__(self, value: object) -> bool:
        try:
            return self._key_for(value) in self._index  # type: ignore[arg-type]
        except (TypeError, AttributeError):
            return False

    @overload
    def __getitem__(self, position: int) -> T:
        ...

    @overload
    def __getitem__(self, position: slice) -> list[T]:
        ...

    def __getitem__(self, position):
        return self._items[position]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OrderedSet):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"OrderedSet({self._items!r})"
