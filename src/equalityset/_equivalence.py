from __future__ import annotations

__all__ = ["Equivalence", "InvalidEquivalenceError"]

import operator
from dataclasses import dataclass
from typing import Any, Callable, Generic, Hashable, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class InvalidEquivalenceError(Exception):
    name: str
    function: Any

    def __str__(self) -> str:
        return (
            f"Expected {self.name} to be a callable supplied at construction, "
            f"but got {self.function!r}"
        )


@dataclass(frozen=True, slots=True)
class Equivalence(Generic[T]):
    """The notion of sameness used by an `EquivalenceSet`.

    Attributes
    ----------
    equals
        Returns whether two elements belong to the same equivalence class. It must be reflexive,
        symmetric, and transitive over every value the caller intends to store, including `None`
        if `None` is stored.
    hash
        Returns an integer for an element. Elements considered equal by `equals` must hash
        identically; the reverse is not required.
    """

    equals: Callable[[T, T], bool]
    hash: Callable[[T], int]

    def __post_init__(self):
        for name in ("equals", "hash"):
            function = getattr(self, name)
            if function is None or not callable(function):
                raise InvalidEquivalenceError(name, function)

    @classmethod
    def natural(cls) -> Equivalence[Hashable]:
        """The element type's own `==` and `hash`."""
        return cls(operator.eq, hash)

    @classmethod
    def by_key(cls, key: Callable[[T], Hashable]) -> Equivalence[T]:
        """Elements are equivalent when their keys are equal.

        The hash is derived from the key, so the pair is consistent by construction.
        """
        if key is None or not callable(key):
            raise InvalidEquivalenceError("key", key)
        return cls(lambda a, b: key(a) == key(b), lambda a: hash(key(a)))
