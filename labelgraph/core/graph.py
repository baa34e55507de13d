from __future__ import annotations

import copy as _copy

from typing import Generic, Iterable, Iterator, Optional, Tuple, Type, TypeVar, Union

import numpy as np
import polars as pl
import scipy.sparse as sp

from ..utils.validation import require_not_none
from ._history import HistoryMixin, log_mutation
from .edges import DirectedEdge, Edge, UndirectedEdge
from .structure import EdgeType
from .vertex import Vertex

E = TypeVar("E", bound=Edge)
DE = TypeVar("DE", bound=DirectedEdge)
UE = TypeVar("UE", bound=UndirectedEdge)

VertexRef = Union[Vertex, str]


class BaseGraph(HistoryMixin, Generic[E]):
    """
    Ordered vertex and edge store with value-based membership.

    Concrete containers (``DirectedGraph``, ``UndirectedGraph``) fix the edge
    family they accept; everything else is shared.

    Parameters
    ----------
    edges : iterable of Edge
        Initial edges. Each endpoint must be present in ``vertices``.
    vertices : iterable of Vertex
        Initial vertices.
    edge_class : type, optional
        Restrict accepted edges to this subclass of the family base, e.g.
        ``DirectedWeightedEdge``. Defaults to the family base.
    history : bool, optional
        Record successful mutations in the in-memory history (default True).

    Raises
    ------
    ValueError
        If ``edges`` or ``vertices`` is None, or an edge references a vertex
        missing from ``vertices``.
    TypeError
        If an edge does not belong to ``edge_class``.

    Notes
    -----
    - Invariants after every mutation: every edge endpoint is a stored vertex;
      no two vertices share a label; no two edges join the same vertex pair
      (ordered for directed graphs, unordered for undirected ones).
    - Both sequences keep insertion order and are copied from the caller's
      iterables, so mutating those afterwards leaves the graph untouched.
    - Membership, lookup and duplicate checks are linear scans returning the
      first match in insertion order.
    - Construction checks referential integrity only; it does not reject
      duplicates already present in the supplied collections.
    """

    _edge_family: Type[Edge] = Edge
    edge_type: EdgeType

    def __init__(
        self,
        edges: Iterable[E] = (),
        vertices: Iterable[Vertex] = (),
        *,
        edge_class: Optional[Type[E]] = None,
        history: bool = True,
    ):
        require_not_none(edges, "edges", "The collection of edges cannot be None.")
        require_not_none(vertices, "vertices", "The collection of vertices cannot be None.")

        if edge_class is None:
            edge_class = self._edge_family
        if not (isinstance(edge_class, type) and issubclass(edge_class, self._edge_family)):
            raise TypeError(
                f"edge_class must be a subclass of {self._edge_family.__name__}, got {edge_class!r}"
            )
        self.edge_class = edge_class

        edges = list(edges)
        vertices = list(vertices)
        for vertex in vertices:
            self._check_vertex_type(vertex)
        for edge in edges:
            self._check_edge_type(edge)
            for endpoint in edge.endpoints():
                if endpoint not in vertices:
                    raise ValueError(f"The supplied collection of vertices does not contain {endpoint!r}.")

        self._edges = edges
        self._vertices = vertices
        self._init_history(history)

    # Validation

    def _check_vertex_type(self, vertex):
        require_not_none(vertex, "vertex", "Cannot add a None vertex to the graph.")
        if not isinstance(vertex, Vertex):
            raise TypeError(f"Expected a Vertex, got {type(vertex).__name__}")

    def _check_edge_type(self, edge):
        require_not_none(edge, "edge", "Cannot add a None edge to the graph.")
        if not isinstance(edge, self.edge_class):
            raise TypeError(
                f"{type(self).__name__} only accepts {self.edge_class.__name__}, got {type(edge).__name__}"
            )

    def _as_vertex(self, ref: VertexRef, name: str) -> Vertex:
        require_not_none(ref, name, "Cannot retrieve an edge from the graph using a None vertex.")
        if isinstance(ref, Vertex):
            return ref
        if isinstance(ref, str):
            return Vertex(ref)
        raise TypeError(f"{name} must be a Vertex or a label, got {type(ref).__name__}")

    # Read-only views

    @property
    def vertices(self) -> Tuple[Vertex, ...]:
        """Stored vertices, in insertion order."""
        return tuple(self._vertices)

    @property
    def edges(self) -> Tuple[E, ...]:
        """Stored edges, in insertion order."""
        return tuple(self._edges)

    @property
    def is_directed(self) -> bool:
        return self.edge_type.is_directed

    def number_of_vertices(self) -> int:
        return len(self._vertices)

    def number_of_edges(self) -> int:
        return len(self._edges)

    @property
    def num_vertices(self) -> int:
        return self.number_of_vertices()

    @property
    def num_edges(self) -> int:
        return self.number_of_edges()

    @property
    def shape(self) -> Tuple[int, int]:
        """Graph shape as a tuple: (num_vertices, num_edges)."""
        return (self.num_vertices, self.num_edges)

    # Mutation

    @log_mutation()
    def add_vertex(self, vertex: Vertex) -> Vertex:
        """
        Append a vertex.

        Parameters
        ----------
        vertex : Vertex

        Returns
        -------
        Vertex
            The vertex that was added.

        Raises
        ------
        ValueError
            If ``vertex`` is None or a vertex with the same label is already
            in the graph.
        """
        self._check_vertex_type(vertex)
        for existing in self._vertices:
            if existing == vertex:
                raise ValueError(f"The vertex to add is already in the graph: {vertex!r}.")
        self._vertices.append(vertex)
        return vertex

    @log_mutation()
    def add_edge(self, edge: E) -> E:
        """
        Append an edge between two stored vertices.

        Parameters
        ----------
        edge : Edge
            Must belong to this graph's ``edge_class``.

        Returns
        -------
        Edge
            The edge that was added.

        Raises
        ------
        ValueError
            If ``edge`` is None, references a vertex that is not in the graph,
            or joins a vertex pair some stored edge already joins. Weights are
            ignored by the duplicate check.
        TypeError
            If ``edge`` is not an instance of ``edge_class``.
        """
        self._check_edge_type(edge)
        for endpoint in edge.endpoints():
            if endpoint not in self._vertices:
                raise ValueError(f"The edge to add has vertex {endpoint!r}, which is not in the graph.")
        first, second = edge.endpoints()
        for existing in self._edges:
            if existing.connects(first, second):
                raise ValueError(f"The edge to add already exists in the graph: {existing!r}.")
        self._edges.append(edge)
        return edge

    # Queries

    def contains_vertex(self, label: Optional[str]) -> bool:
        """True if some stored vertex has exactly this label (case-sensitive)."""
        for vertex in self._vertices:
            if vertex.label == label:
                return True
        return False

    def get_vertex(self, label: Optional[str]) -> Optional[Vertex]:
        """First stored vertex with this label, or None."""
        for vertex in self._vertices:
            if vertex.label == label:
                return vertex
        return None

    def get_adjacent_vertices(self, vertex: VertexRef) -> Tuple[Vertex, ...]:
        """
        Vertices joined to ``vertex`` by a stored edge.

        Parameters
        ----------
        vertex : Vertex or str
            The vertex, or its label.

        Returns
        -------
        tuple[Vertex, ...]
            The other endpoint of every incident edge, in edge insertion
            order. Edge direction is ignored; repeated neighbours are kept.
            A self-loop contributes the vertex itself once.

        Raises
        ------
        ValueError
            If ``vertex`` is None or not in the graph.
        """
        if vertex is None:
            raise ValueError("The vertex to find the adjacent vertices of cannot be None.")
        if isinstance(vertex, Vertex):
            if vertex not in self._vertices:
                raise ValueError(f"The given vertex to find the adjacent vertices of is not in the graph: {vertex!r}.")
            matches = lambda v: v == vertex  # noqa: E731
        elif isinstance(vertex, str):
            if not self.contains_vertex(vertex):
                raise ValueError(f"The given vertex label to find the adjacent vertices of is not in the graph: {vertex!r}.")
            matches = lambda v: v.label == vertex  # noqa: E731
        else:
            raise TypeError(f"vertex must be a Vertex or a label, got {type(vertex).__name__}")

        adjacent = []
        for edge in self._edges:
            first, second = edge.endpoints()
            if matches(first):
                adjacent.append(second)
            elif matches(second):
                adjacent.append(first)
        return tuple(adjacent)

    def get_edge(self, first: VertexRef, second: VertexRef) -> Optional[E]:
        """
        First stored edge joining ``first`` and ``second``, or None.

        Endpoints may be given as vertices or labels. The lookup uses the
        graph's ordering rule (ordered for directed graphs) and ignores
        weights.

        Raises
        ------
        ValueError
            If either endpoint is None.

        Notes
        -----
        ``None`` is never read as an unlabelled vertex. To look up an edge on
        the unlabelled vertex pass ``Vertex()`` explicitly.
        """
        probe = self._edge_family(self._as_vertex(first, "first"), self._as_vertex(second, "second"))
        u, v = probe.endpoints()
        for edge in self._edges:
            if edge.connects(u, v):
                return edge
        return None

    # Dunder helpers

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(tuple(self._vertices))

    def __contains__(self, item) -> bool:
        if isinstance(item, Vertex):
            return item in self._vertices
        if isinstance(item, str):
            return self.contains_vertex(item)
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertices={self.num_vertices}, edges={self.num_edges})"

    def copy(self):
        """
        Independent container with the same vertices and edges.

        Vertex and edge objects are shared; the sequences are not. History is
        not copied. ``copy.copy`` goes through here; ``copy.deepcopy`` also
        duplicates the vertex and edge objects.
        """
        return type(self)(
            self._edges, self._vertices, edge_class=self.edge_class, history=self._history_enabled
        )

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        # one memo for both sequences keeps edges pointing at the copied vertices
        return type(self)(
            _copy.deepcopy(self._edges, memo),
            _copy.deepcopy(self._vertices, memo),
            edge_class=self.edge_class,
            history=self._history_enabled,
        )

    # Materialized views

    def vertices_view(self) -> pl.DataFrame:
        """
        Polars DF of the vertices, in insertion order.

        Returns
        -------
        polars.DataFrame
            Column: ``label``.
        """
        return pl.DataFrame({"label": [v.label for v in self._vertices]}, schema={"label": pl.Utf8})

    def edges_view(self) -> pl.DataFrame:
        """
        Polars DF of the edges, in insertion order.

        Returns
        -------
        polars.DataFrame
            Columns: ``source``, ``target`` (endpoint labels in stored order),
            ``weight`` (null for unweighted edges), ``directed``, ``self_loop``.
        """
        rows = {"source": [], "target": [], "weight": [], "directed": [], "self_loop": []}
        for edge in self._edges:
            first, second = edge.endpoints()
            rows["source"].append(first.label)
            rows["target"].append(second.label)
            rows["weight"].append(edge.weight)
            rows["directed"].append(edge.is_directed)
            rows["self_loop"].append(edge.is_self_loop)
        return pl.DataFrame(
            rows,
            schema={
                "source": pl.Utf8,
                "target": pl.Utf8,
                "weight": pl.Float64,
                "directed": pl.Boolean,
                "self_loop": pl.Boolean,
            },
        )

    def adjacency_matrix(self, sparse: bool = False, weighted: bool = False):
        """
        Vertex-by-vertex adjacency matrix.

        Parameters
        ----------
        sparse : bool, optional (default=False)
            Return a SciPy CSR matrix instead of a dense NumPy array.
        weighted : bool, optional (default=False)
            Use edge weights as entries (unweighted edges count as 1.0).

        Returns
        -------
        scipy.sparse.csr_matrix | numpy.ndarray
            ``M[i, j]`` is non-zero when an edge runs from vertex ``i`` to
            vertex ``j`` (rows/columns follow vertex insertion order).
            Undirected edges are written symmetrically; a self-loop sets the
            diagonal once.
        """
        n = len(self._vertices)
        index = {vertex: i for i, vertex in enumerate(self._vertices)}
        rows, cols, data = [], [], []
        for edge in self._edges:
            first, second = edge.endpoints()
            i, j = index[first], index[second]
            value = edge.weight if (weighted and edge.is_weighted) else 1.0
            rows.append(i)
            cols.append(j)
            data.append(value)
            if not edge.is_directed and i != j:
                rows.append(j)
                cols.append(i)
                data.append(value)
        M = sp.coo_matrix(
            (np.asarray(data, dtype=np.float64), (np.asarray(rows, dtype=np.int64), np.asarray(cols, dtype=np.int64))),
            shape=(n, n),
        ).tocsr()  # duplicate (i, j) entries are summed
        return M if sparse else M.toarray()


class DirectedGraph(BaseGraph[DE]):
    """
    Graph whose edges are ``DirectedEdge`` instances.

    ``add_edge`` rejects an edge when a stored edge has the same source and
    destination; ``(a, b)`` and ``(b, a)`` may coexist for ``a != b``.

    ``get_adjacent_vertices`` ignores direction: both successors and
    predecessors are returned.
    """

    _edge_family = DirectedEdge
    edge_type = EdgeType.DIRECTED


class UndirectedGraph(BaseGraph[UE]):
    """
    Graph whose edges are ``UndirectedEdge`` instances.

    ``add_edge`` rejects an edge joining a pair some stored edge already
    joins, in either order.
    """

    _edge_family = UndirectedEdge
    edge_type = EdgeType.UNDIRECTED
