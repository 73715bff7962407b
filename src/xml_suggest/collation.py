"""Locale-aware ordered set of element names."""

import bisect
from collections.abc import Iterable, Iterator

from pyuca import Collator

# Loading the collation table is slow and the collator is immutable, share it.
_COLLATOR = Collator()


class CollatedSet:
    """Deduplicating set iterated in Unicode collation order.

    Names are ordered by their UCA sort key, with the raw string as a tie
    break so that distinct names the collator considers equal still come out
    in a stable order. Adding a name already present is a no-op.
    """

    def __init__(self, names: Iterable[str] = (), collator: Collator | None = None):
        self._collator = collator or _COLLATOR
        self._entries: list[tuple[tuple[int, ...], str]] = []
        self._names: set[str] = set()
        self.update(names)

    def add(self, name: str) -> None:
        if name in self._names:
            return
        self._names.add(name)
        bisect.insort(self._entries, (self._collator.sort_key(name), name))

    def update(self, names: Iterable[str]) -> None:
        for name in names:
            self.add(name)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return (name for _, name in self._entries)

    def __repr__(self) -> str:
        return f"CollatedSet({list(self)!r})"
