"""Weight algebras: ordered monoids over arbitrary weight types.

Every weighted algorithm adds and compares weights exclusively through an
:class:`OrderedMonoid`, never through native arithmetic. Dijkstra, A* and
Prim assume the order is monotonic under ``combine``, i.e.
``compare(a, combine(a, w)) <= 0`` for every edge weight ``w`` in the graph.
That is a precondition and is not checked; negative numeric weights violate it.
"""

from __future__ import annotations

import abc
from decimal import Decimal
from functools import cmp_to_key, reduce
from typing import Any, Callable, Generic, Iterable, Tuple, TypeVar

W = TypeVar("W")


class OrderedMonoid(abc.ABC, Generic[W]):
    """Identity element, associative combine and a total order over ``W``."""

    @abc.abstractmethod
    def zero(self) -> W:
        """Return the identity element of ``combine``."""
        ...

    @abc.abstractmethod
    def combine(self, a: W, b: W) -> W:
        """Return the associative combination of ``a`` and ``b``."""
        ...

    @abc.abstractmethod
    def compare(self, a: W, b: W) -> int:
        """Return a negative, zero or positive int as ``a`` is below, equal to
        or above ``b``."""
        ...

    def less(self, a: W, b: W) -> bool:
        return self.compare(a, b) < 0

    def sum(self, weights: Iterable[W]) -> W:
        """Fold ``weights`` left to right, starting from ``zero()``."""
        return reduce(self.combine, weights, self.zero())

    @property
    def sort_key(self) -> Callable[[W], Any]:
        """Key function ordering weights by ``compare``; usable in heaps."""
        return cmp_to_key(self.compare)


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class NumericMonoid(OrderedMonoid[Any]):
    """Native addition and ordering: int, float, Decimal, Fraction."""

    def __init__(self, zero: Any = 0) -> None:
        self._zero = zero

    def zero(self) -> Any:
        return self._zero

    def combine(self, a: Any, b: Any) -> Any:
        return a + b

    def compare(self, a: Any, b: Any) -> int:
        return _cmp(a, b)

    def __repr__(self) -> str:
        return f"NumericMonoid(zero={self._zero!r})"


class MaxMonoid(OrderedMonoid[Any]):
    """Bottleneck algebra: the cost of a path is its largest edge weight.

    ``zero`` must not exceed any edge weight, so the default of 0 suits
    non-negative weights.
    """

    def __init__(self, zero: Any = 0) -> None:
        self._zero = zero

    def zero(self) -> Any:
        return self._zero

    def combine(self, a: Any, b: Any) -> Any:
        return a if a >= b else b

    def compare(self, a: Any, b: Any) -> int:
        return _cmp(a, b)

    def __repr__(self) -> str:
        return f"MaxMonoid(zero={self._zero!r})"


class LexicographicMonoid(OrderedMonoid[Tuple[Any, ...]]):
    """Vector costs: component-wise combine, lexicographic order.

    Example:
        ``LexicographicMonoid(INTEGER_WEIGHTS, FLOAT_WEIGHTS)`` ranks paths by
        hop count first and by distance among paths with equal hop counts.
    """

    def __init__(self, *components: OrderedMonoid) -> None:
        if not components:
            raise ValueError("LexicographicMonoid needs at least one component.")
        self.components: Tuple[OrderedMonoid, ...] = components

    def zero(self) -> Tuple[Any, ...]:
        return tuple(m.zero() for m in self.components)

    def combine(self, a: Tuple[Any, ...], b: Tuple[Any, ...]) -> Tuple[Any, ...]:
        if len(a) != len(self.components) or len(b) != len(self.components):
            raise ValueError(
                f"Expected {len(self.components)}-component weights, got {a!r} and {b!r}."
            )
        return tuple(m.combine(x, y) for m, x, y in zip(self.components, a, b))

    def compare(self, a: Tuple[Any, ...], b: Tuple[Any, ...]) -> int:
        for m, x, y in zip(self.components, a, b):
            result = m.compare(x, y)
            if result:
                return result
        return 0

    def __repr__(self) -> str:
        return f"LexicographicMonoid{self.components!r}"


INTEGER_WEIGHTS = NumericMonoid(0)
FLOAT_WEIGHTS = NumericMonoid(0.0)
DECIMAL_WEIGHTS = NumericMonoid(Decimal(0))
