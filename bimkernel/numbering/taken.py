"""TakenSet — identifiers already in use, compared case-insensitively."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class TakenSet:
    """Case-insensitive set of identifiers.

    Owned by the caller and updated by the caller after every allocation;
    the allocator only reads it.  Iteration yields identifiers with the
    casing they were first added with.
    """

    def __init__(self, identifiers: Iterable[str] = ()) -> None:
        self._items: dict[str, str] = {}
        self.update(identifiers)

    @staticmethod
    def _fold(identifier: str) -> str:
        return identifier.lower()

    def add(self, identifier: str) -> None:
        self._items.setdefault(self._fold(identifier), identifier)

    def update(self, identifiers: Iterable[str]) -> None:
        for identifier in identifiers:
            self.add(identifier)

    def discard(self, identifier: str) -> None:
        self._items.pop(self._fold(identifier), None)

    def __contains__(self, identifier: object) -> bool:
        if not isinstance(identifier, str):
            return False
        return self._fold(identifier) in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"TakenSet({list(self._items.values())!r})"


def as_taken_set(identifiers: TakenSet | Iterable[str]) -> TakenSet:
    """Return *identifiers* as a TakenSet, wrapping plain iterables."""
    if isinstance(identifiers, TakenSet):
        return identifiers
    return TakenSet(identifiers)
