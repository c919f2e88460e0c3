from __future__ import annotations

__all__ = ["EquivalenceSet"]

import logging
from typing import Callable, Iterable, Iterator, MutableSet, TypeVar

from returns.result import Failure, Result, Success, safe

from ._entry import PROBE_ERRORS, Entry
from ._equivalence import Equivalence

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _absent_on_failure(result: Result[bool, Exception], element: object) -> bool:
    match result:
        case Success(found):
            return found
        case Failure(error):
            logger.debug("Probe with %r failed in the equivalence functions: %r", element, error)
            return False


class EquivalenceSet(MutableSet[T]):
    """A set whose notion of sameness is supplied at construction.

    Membership is decided entirely by the `equals` and `hash_fn` functions; the elements' own
    `__eq__` and `__hash__` are never consulted. The first element inserted for an equivalence
    class becomes its representative and is never overwritten by later equivalent elements.

    Probing operations (`in`, `remove`, `contains_all`, `retain_all`) tolerate values the functions
    cannot process: a `TypeError` or `AttributeError` raised by either function is reported as "not
    contained" instead of propagating. `add` does not have this tolerance.

    Instances are not safe to share between threads without external synchronization.

    Parameters
    ----------
    equals
        Whether two elements are equivalent.
    hash_fn
        Hash of an element, consistent with `equals`.
    elements
        Initial elements, inserted in order as if by `add`.
    """

    def __init__(
        self,
        equals: Callable[[T, T], bool] | None = None,
        hash_fn: Callable[[T], int] | None = None,
        elements: Iterable[T] = (),
    ):
        self._equivalence = Equivalence(equals, hash_fn)
        # Rely on stable dictionary
        self._entries: dict[Entry[T], None] = {}
        self.add_all(elements)

    @classmethod
    def from_equivalence(
        cls, equivalence: Equivalence[T], elements: Iterable[T] = ()
    ) -> EquivalenceSet[T]:
        return cls(equivalence.equals, equivalence.hash, elements)

    @property
    def equivalence(self) -> Equivalence[T]:
        return self._equivalence

    def _from_iterable(self, elements: Iterable[T]) -> EquivalenceSet[T]:
        # Results of the set operators keep this set's equivalence
        return EquivalenceSet.from_equivalence(self._equivalence, elements)

    def _wrap(self, element: T) -> Entry[T]:
        return Entry(element, self._equivalence)

    @safe(exceptions=PROBE_ERRORS)
    def _lookup(self, element: object) -> bool:
        return self._wrap(element) in self._entries

    @safe(exceptions=PROBE_ERRORS)
    def _pop(self, element: object) -> bool:
        entry = self._wrap(element)
        if entry in self._entries:
            del self._entries[entry]
            return True
        else:
            return False

    @safe(exceptions=PROBE_ERRORS)
    def _insert(self, element: T) -> bool:
        return self.add(element)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, element: object) -> bool:
        return _absent_on_failure(self._lookup(element), element)

    def __iter__(self) -> Iterator[T]:
        for entry in self._entries:
            yield entry.value

    def __repr__(self) -> str:
        return f"EquivalenceSet({', '.join(repr(element) for element in self)})"

    def size(self) -> int:
        return len(self._entries)

    def is_empty(self) -> bool:
        return len(self._entries) == 0

    def contains(self, element: object, /) -> bool:
        return element in self

    def add(self, element: T, /) -> bool:
        """Insert `element` unless an equivalent element is already stored.

        Returns True if the set changed.
        """
        entry = self._wrap(element)
        if entry in self._entries:
            return False
        else:
            self._entries[entry] = None
            return True

    def remove(self, element: object, /) -> bool:
        """Remove the stored element equivalent to `element`.

        Unlike `set.remove`, a missing element is not an error. Returns True if the set changed.
        """
        return _absent_on_failure(self._pop(element), element)

    def discard(self, element: object, /) -> None:
        self.remove(element)

    def clear(self) -> None:
        self._entries.clear()

    def copy(self) -> EquivalenceSet[T]:
        return self._from_iterable(self)

    def to_list(self, target: list | None = None) -> list:
        """Snapshot of the stored elements.

        If `target` is given and long enough, it is filled in place, its trailing slots set to
        `None`, and returned. Otherwise a new list sized to fit is returned.
        """
        elements = [entry.value for entry in self._entries]
        if target is None or len(target) < len(elements):
            return elements

        target[: len(elements)] = elements
        for i in range(len(elements), len(target)):
            target[i] = None
        return target

    def contains_all(self, elements: Iterable[object]) -> bool:
        """Whether every element is contained. True for no elements."""
        return all(element in self for element in elements)

    def add_all(self, elements: Iterable[T]) -> bool:
        # Build the full list so that every element is added
        return any([self.add(element) for element in elements])

    def remove_all(self, elements: Iterable[object]) -> bool:
        if elements is self:
            changed = len(self._entries) > 0
            self.clear()
            return changed

        # Snapshot first so that a view of this set can be passed
        return any([self.remove(element) for element in list(elements)])

    def retain_all(self, elements: Iterable[object]) -> bool:
        """Remove every stored element with no equivalent among `elements`.

        Returns True if the set changed.
        """
        retained = self._from_iterable(())
        for element in elements:
            _absent_on_failure(retained._insert(element), element)

        stale = [entry for entry in self._entries if entry not in retained._entries]
        for entry in stale:
            del self._entries[entry]

        return len(stale) > 0
