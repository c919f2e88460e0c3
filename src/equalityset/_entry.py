from __future__ import annotations

__all__ = ["Entry", "PROBE_ERRORS"]

from dataclasses import dataclass
from typing import Generic, TypeVar

from returns.result import Failure, Success, safe

from ._equivalence import Equivalence

T = TypeVar("T")

# Raised by caller functions handed a value they cannot process, like None or the wrong type
PROBE_ERRORS = (TypeError, AttributeError)


@safe(exceptions=PROBE_ERRORS)
def _equals(equivalence: Equivalence[T], left: T, right: T) -> bool:
    return bool(equivalence.equals(left, right))


@dataclass(frozen=True, slots=True, eq=False)
class Entry(Generic[T]):
    """Storage wrapper whose identity is defined by an injected equivalence.

    The backing dict of an `EquivalenceSet` only knows `__eq__` and `__hash__`, so those forward to
    the equivalence instead of to the wrapped value.
    """

    value: T
    equivalence: Equivalence[T]

    def __eq__(self, other: object):
        if isinstance(other, Entry):
            match _equals(self.equivalence, self.value, other.value):
                case Success(equal):
                    return equal
                case Failure(_):
                    return False
        return NotImplemented

    def __hash__(self) -> int:
        return self.equivalence.hash(self.value)

    def __repr__(self) -> str:
        return f"Entry({self.value!r})"
