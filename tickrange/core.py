"""Read-only collection support.

This module provides the abstract base for collections that can be sized,
iterated and tested for membership but never modified. The usual mutating
methods exist only so callers get an explicit rejection instead of an
AttributeError or a silent no-op.
"""

import logging
from abc import abstractmethod
from collections.abc import Collection, Iterable, Iterator
from typing import Any, Generic, NoReturn, TypeVar

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class UnsupportedOperation(TypeError):
    """Raised when a read-only collection is asked to change."""


class ReadOnlyCollection(Collection[T], Generic[T]):

    __slots__ = ()

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """Yield a fresh traversal of the items on every call."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    @abstractmethod
    def contains(self, candidate: Any) -> bool:
        """Return True if candidate belongs to the collection. Never raises."""
        pass

    def __contains__(self, candidate: Any) -> bool:
        return self.contains(candidate)

    def contains_all(self, candidates: Iterable[Any] | None) -> bool:
        """Return True if every candidate is contained.

        A missing (None) collection is never contained; an empty one always is.
        """
        if candidates is None:
            return False
        return all(self.contains(candidate) for candidate in candidates)

    def to_list(self) -> list[T]:
        """Materialize the items in iteration order."""
        return list(self)

    def _reject(self, operation: str) -> NoReturn:
        LOGGER.debug("Rejected %s on %s", operation, type(self).__name__)
        raise UnsupportedOperation(
            f"{type(self).__name__} is read-only and does not support {operation}().\n"
            f"Hint: Build a new {type(self).__name__} with the bounds you need"
        )

    def add(self, item: T) -> NoReturn:
        self._reject("add")

    def remove(self, item: Any) -> NoReturn:
        self._reject("remove")

    def discard(self, item: Any) -> NoReturn:
        self._reject("discard")

    def update(self, items: Iterable[T]) -> NoReturn:
        self._reject("update")

    def difference_update(self, items: Iterable[Any]) -> NoReturn:
        self._reject("difference_update")

    def intersection_update(self, items: Iterable[Any]) -> NoReturn:
        self._reject("intersection_update")

    def clear(self) -> NoReturn:
        self._reject("clear")


__all__ = ["ReadOnlyCollection", "UnsupportedOperation"]
