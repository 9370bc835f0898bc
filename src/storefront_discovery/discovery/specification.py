"""Discovery – composable record predicates (specification pattern).

The filter engine compiles a criteria model into one specification, so the
per-record check is a plain ``is_satisfied_by`` call with no criteria lookups.
"""

from __future__ import annotations

import abc
from typing import Callable, Generic, Iterable, TypeVar

T = TypeVar("T")


class Specification(abc.ABC, Generic[T]):
    """Abstract base for specifications; provides the &, | and ~ operators.

    Example::

        spec = on_sale & ~out_of_stock
        matching = [p for p in products if spec.is_satisfied_by(p)]
    """

    name: str = ""

    @abc.abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool: ...

    def __and__(self, other: "Specification[T]") -> "AllOf[T]":
        return AllOf((self, other))

    def __or__(self, other: "Specification[T]") -> "AnyOf[T]":
        return AnyOf((self, other))

    def __invert__(self) -> "Not[T]":
        return Not(self)


class AllOf(Specification[T]):
    """Conjunction; an empty conjunction is satisfied by everything."""

    def __init__(self, specs: Iterable[Specification[T]]) -> None:
        flat: list[Specification[T]] = []
        for spec in specs:
            # keep chains of ``a & b & c`` one level deep
            flat.extend(spec.specs if isinstance(spec, AllOf) else (spec,))
        self.specs: tuple[Specification[T], ...] = tuple(flat)
        self.name = " & ".join(s.name for s in self.specs) or "all"

    def is_satisfied_by(self, candidate: T) -> bool:
        return all(spec.is_satisfied_by(candidate) for spec in self.specs)


class AnyOf(Specification[T]):
    """Disjunction; an empty disjunction is satisfied by nothing."""

    def __init__(self, specs: Iterable[Specification[T]]) -> None:
        self.specs: tuple[Specification[T], ...] = tuple(specs)
        self.name = " | ".join(s.name for s in self.specs) or "none"

    def is_satisfied_by(self, candidate: T) -> bool:
        return any(spec.is_satisfied_by(candidate) for spec in self.specs)


class Not(Specification[T]):
    def __init__(self, spec: Specification[T]) -> None:
        self._spec = spec
        self.name = f"~{spec.name}"

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self._spec.is_satisfied_by(candidate)


class Predicate(Specification[T]):
    """Wraps a plain callable as a named specification.

    Example::

        high_rated = Predicate(lambda p: p.rating >= 4.5, name="high_rated")
    """

    def __init__(self, predicate: Callable[[T], bool], *, name: str = "") -> None:
        self._predicate = predicate
        self.name = name or getattr(predicate, "__name__", "<lambda>")

    def is_satisfied_by(self, candidate: T) -> bool:
        return self._predicate(candidate)

    def __repr__(self) -> str:  # pragma: no cover
        return f"Predicate({self.name!r})"


__all__ = ["AllOf", "AnyOf", "Not", "Predicate", "Specification"]
