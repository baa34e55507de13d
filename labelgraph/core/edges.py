"""
Edge value types.

Two edge families share the ``Edge`` capability base:

- ``DirectedEdge``: ordered ``(source, destination)`` pair.
- ``UndirectedEdge``: unordered ``(vertex1, vertex2)`` pair.

Each family has a weighted variant that adds a float ``weight`` to equality
and hashing. Equality is by value (vertex labels), never by object identity.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Optional, Tuple

from ..utils.validation import require_not_none, require_weight
from .structure import EdgeType
from .vertex import Vertex


class Edge(ABC):
    """
    Capability base shared by every edge variant.

    Subclasses provide ``endpoints()`` and ``connects()``; everything else
    (self-loop detection, directedness, weight access) is derived here.
    """

    __slots__ = ()

    edge_type: ClassVar[EdgeType]

    @abstractmethod
    def endpoints(self) -> Tuple[Vertex, Vertex]:
        """Return the two endpoints in stored order."""

    @abstractmethod
    def connects(self, first: Vertex, second: Vertex) -> bool:
        """True if this edge joins ``first`` and ``second`` under the family's ordering rule."""

    @property
    def is_self_loop(self) -> bool:
        """True iff both endpoints are value-equal."""
        first, second = self.endpoints()
        return first == second

    @property
    def is_directed(self) -> bool:
        return self.edge_type.is_directed

    @property
    def is_weighted(self) -> bool:
        return False

    @property
    def weight(self) -> Optional[float]:
        return None


class DirectedEdge(Edge):
    """
    An edge in a directed graph.

    Parameters
    ----------
    source : Vertex
        The source vertex.
    destination : Vertex
        The destination vertex.

    Raises
    ------
    ValueError
        If either vertex is ``None``.

    Notes
    -----
    ``DirectedEdge(a, b) == DirectedEdge(b, a)`` only when ``a == b``.
    """

    __slots__ = ("_source", "_destination")

    edge_type = EdgeType.DIRECTED

    def __init__(self, source: Vertex, destination: Vertex):
        self._source = require_not_none(
            source, "source", "The source vertex for a directed edge cannot be None."
        )
        self._destination = require_not_none(
            destination, "destination", "The destination vertex for a directed edge cannot be None."
        )

    @property
    def source(self) -> Vertex:
        return self._source

    @source.setter
    def source(self, value: Vertex) -> None:
        self._source = require_not_none(value, "source", "The source vertex for a directed edge cannot be None.")

    @property
    def destination(self) -> Vertex:
        return self._destination

    @destination.setter
    def destination(self, value: Vertex) -> None:
        self._destination = require_not_none(
            value, "destination", "The destination vertex for a directed edge cannot be None."
        )

    def endpoints(self) -> Tuple[Vertex, Vertex]:
        return self._source, self._destination

    def connects(self, first: Vertex, second: Vertex) -> bool:
        return self._source == first and self._destination == second

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.connects(other.source, other.destination)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash((self._source, self._destination))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._source!r}, {self._destination!r})"


class UndirectedEdge(Edge):
    """
    An edge in an undirected graph.

    Parameters
    ----------
    vertex1, vertex2 : Vertex
        The two endpoints. Their order is kept for ``endpoints()`` but plays no
        part in equality: ``UndirectedEdge(a, b) == UndirectedEdge(b, a)``.

    Raises
    ------
    ValueError
        If either vertex is ``None``.
    """

    __slots__ = ("_vertex1", "_vertex2")

    edge_type = EdgeType.UNDIRECTED

    def __init__(self, vertex1: Vertex, vertex2: Vertex):
        self._vertex1 = require_not_none(
            vertex1, "vertex1", "Neither of the supplied vertices for an edge can be None."
        )
        self._vertex2 = require_not_none(
            vertex2, "vertex2", "Neither of the supplied vertices for an edge can be None."
        )

    @property
    def vertex1(self) -> Vertex:
        return self._vertex1

    @vertex1.setter
    def vertex1(self, value: Vertex) -> None:
        self._vertex1 = require_not_none(value, "vertex1", "The vertex for an edge cannot be None.")

    @property
    def vertex2(self) -> Vertex:
        return self._vertex2

    @vertex2.setter
    def vertex2(self, value: Vertex) -> None:
        self._vertex2 = require_not_none(value, "vertex2", "The vertex for an edge cannot be None.")

    def endpoints(self) -> Tuple[Vertex, Vertex]:
        return self._vertex1, self._vertex2

    def connects(self, first: Vertex, second: Vertex) -> bool:
        same_order = self._vertex1 == first and self._vertex2 == second
        swapped = self._vertex1 == second and self._vertex2 == first
        return same_order or swapped

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.connects(other.vertex1, other.vertex2)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        # order-independent
        return hash(frozenset((self._vertex1, self._vertex2)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._vertex1!r}, {self._vertex2!r})"


class DirectedWeightedEdge(DirectedEdge):
    """
    A directed edge carrying a float weight.

    The weight takes part in equality and hashing: two edges with the same
    source and destination but different weights are different edges.
    """

    __slots__ = ("_weight",)

    def __init__(self, source: Vertex, destination: Vertex, weight: float):
        super().__init__(source, destination)
        self._weight = require_weight(weight)

    @property
    def is_weighted(self) -> bool:
        return True

    @property
    def weight(self) -> float:
        return self._weight

    @weight.setter
    def weight(self, value: float) -> None:
        self._weight = require_weight(value)

    def __eq__(self, other):
        result = super().__eq__(other)
        if result is NotImplemented or not result:
            return result
        return self._weight == other.weight

    def __hash__(self) -> int:
        return hash((self._source, self._destination, self._weight))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._source!r}, {self._destination!r}, weight={self._weight!r})"


class UndirectedWeightedEdge(UndirectedEdge):
    """An undirected edge carrying a float weight (part of equality and hashing)."""

    __slots__ = ("_weight",)

    def __init__(self, vertex1: Vertex, vertex2: Vertex, weight: float):
        super().__init__(vertex1, vertex2)
        self._weight = require_weight(weight)

    @property
    def is_weighted(self) -> bool:
        return True

    @property
    def weight(self) -> float:
        return self._weight

    @weight.setter
    def weight(self, value: float) -> None:
        self._weight = require_weight(value)

    def __eq__(self, other):
        result = super().__eq__(other)
        if result is NotImplemented or not result:
            return result
        return self._weight == other.weight

    def __hash__(self) -> int:
        return hash((frozenset((self._vertex1, self._vertex2)), self._weight))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._vertex1!r}, {self._vertex2!r}, weight={self._weight!r})"
