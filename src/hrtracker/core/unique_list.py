"""Ordered container that rejects items with the same identity."""

from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, TypeVar

from .errors import DuplicateItemError, DuplicateItemsError, ItemNotFoundError

T = TypeVar("T")


class UniqueList(Generic[T]):
    """List of items where no two are the same under ``is_same``.

    ``is_same`` is an identity predicate, usually weaker than ``==``. All
    lookups (membership, replacement, removal) go through it. Every mutating
    method validates before touching the backing list, so a failed call leaves
    the contents unchanged.
    """

    def __init__(
        self,
        is_same: Callable[[T, T], bool],
        *,
        duplicate_error: type[DuplicateItemError] = DuplicateItemError,
        duplicates_error: type[DuplicateItemsError] = DuplicateItemsError,
        not_found_error: type[ItemNotFoundError] = ItemNotFoundError,
    ) -> None:
        self._is_same = is_same
        self._duplicate_error = duplicate_error
        self._duplicates_error = duplicates_error
        self._not_found_error = not_found_error
        self._items: list[T] = []

    def contains(self, item: T) -> bool:
        return any(self._is_same(existing, item) for existing in self._items)

    def add(self, item: T) -> None:
        if self.contains(item):
            raise self._duplicate_error(item=item)
        self._items.append(item)

    def set_item(self, target: T, replacement: T) -> None:
        """Replace ``target`` with ``replacement`` at the same position."""
        index = self._index_of(target)
        for position, existing in enumerate(self._items):
            if position != index and self._is_same(existing, replacement):
                raise self._duplicate_error(item=replacement)
        self._items[index] = replacement

    def remove(self, item: T) -> None:
        del self._items[self._index_of(item)]

    def set_all(self, items: Iterable[T]) -> None:
        candidates = list(items)
        if not self._all_unique(candidates):
            raise self._duplicates_error(item=candidates)
        self._items = candidates

    def view(self) -> tuple[T, ...]:
        """Read-only snapshot of the current contents, in order."""
        return tuple(self._items)

    def _index_of(self, item: T) -> int:
        for position, existing in enumerate(self._items):
            if self._is_same(existing, item):
                return position
        raise self._not_found_error(item=item)

    def _all_unique(self, items: list[T]) -> bool:
        for i, first in enumerate(items):
            for second in items[i + 1:]:
                if self._is_same(first, second):
                    return False
        return True

    def __contains__(self, item: object) -> bool:
        return self.contains(item)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UniqueList):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"
