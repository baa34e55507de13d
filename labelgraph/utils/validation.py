from __future__ import annotations

import math
import numbers
from collections.abc import Callable, Iterable
from itertools import filterfalse
from typing import Any, TypeVar

T = TypeVar("T")


def require_not_none(value: T, name: str, message: str | None = None) -> T:
    """Return ``value`` unchanged, raising ``ValueError`` when it is ``None``."""
    if value is None:
        raise ValueError(message or f"{name} cannot be None.")
    return value


def require_weight(weight: Any) -> float:
    """Coerce an edge weight to ``float``.

    Any real number is accepted (Python ints/floats, NumPy scalars). ``bool``
    is rejected even though it is an ``int`` subclass, as are ``None`` and
    non-numeric values. NaN raises ``ValueError``; infinities are kept.
    """
    if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
        raise TypeError(f"weight must be numeric, got {type(weight).__name__}")
    value = float(weight)
    if math.isnan(value):
        raise ValueError("weight cannot be NaN.")
    return value


def require_vertex_count(number_of_vertices: Any) -> int:
    """Validate a vertex count for the complete-graph formulas."""
    if isinstance(number_of_vertices, bool) or not isinstance(number_of_vertices, numbers.Integral):
        raise TypeError(
            f"number_of_vertices must be an integer, got {type(number_of_vertices).__name__}"
        )
    n = int(number_of_vertices)
    if n < 0:
        raise ValueError(
            f"number_of_vertices out of range: {n}. "
            "The number of vertices in a graph cannot be negative."
        )
    return n


def is_missing(value: Any) -> bool:
    """True for ``None`` and float NaN (how polars/pandas rows mark empty cells)."""
    return value is None or (isinstance(value, float) and math.isnan(value))


def unique_iter(iterable: Iterable[T], key: Callable[[T], Any] | None = None) -> Iterable[T]:
    # Based on https://iteration-utilities.readthedocs.io/en/latest/generated/unique_everseen.html
    seen: set[Any] = set()
    seen_add = seen.add
    if key is None:
        for element in filterfalse(seen.__contains__, iterable):
            seen_add(element)
            yield element
    else:
        for element in iterable:
            k = key(element)
            if k not in seen:
                seen_add(k)
                yield element
