from __future__ import annotations

from typing import Dict, Optional

import polars as pl

from ..core.edges import (
    DirectedEdge,
    DirectedWeightedEdge,
    UndirectedEdge,
    UndirectedWeightedEdge,
)
from ..core.graph import BaseGraph, DirectedGraph, UndirectedGraph
from ..core.vertex import Vertex
from ..utils.validation import is_missing

_WEIGHTED_EDGES = (DirectedWeightedEdge, UndirectedWeightedEdge)


def to_dataframes(graph: BaseGraph) -> Dict[str, pl.DataFrame]:
    """
    Export graph to Polars DataFrames.

    Returns a dictionary with three tables:
    - 'vertices': ``label`` in insertion order
    - 'edges': ``source``, ``target``, ``weight``, ``directed``, ``self_loop``
    - 'graph': a single row with ``directed`` and ``weighted`` flags, so the
      graph kind is kept even when there are no edge rows

    Args:
        graph: DirectedGraph or UndirectedGraph instance to export

    Returns:
        Dictionary mapping table names to Polars DataFrames
    """
    return {
        "vertices": graph.vertices_view(),
        "edges": graph.edges_view(),
        "graph": pl.DataFrame(
            {
                "directed": [graph.is_directed],
                "weighted": [issubclass(graph.edge_class, _WEIGHTED_EDGES)],
            },
            schema={"directed": pl.Boolean, "weighted": pl.Boolean},
        ),
    }


def _graph_flag(graph: Optional[pl.DataFrame], column: str) -> Optional[bool]:
    if graph is None or column not in graph.columns or graph.height == 0:
        return None
    values = set(graph[column].drop_nulls().to_list())
    if len(values) > 1:
        raise ValueError(f"from_dataframes: graph table has conflicting '{column}' values.")
    return bool(values.pop()) if values else None


def _resolve_directed(
    edges: pl.DataFrame, directed: Optional[bool], graph: Optional[pl.DataFrame] = None
) -> bool:
    if directed is not None:
        return bool(directed)
    flag = _graph_flag(graph, "directed")
    if flag is not None:
        return flag
    if "directed" in edges.columns and edges.height > 0:
        values = set(edges["directed"].drop_nulls().to_list())
        if len(values) > 1:
            raise ValueError("from_dataframes: edges table mixes directed and undirected rows.")
        if values:
            return bool(values.pop())
    return True


def from_dataframes(
    vertices: Optional[pl.DataFrame] = None,
    edges: Optional[pl.DataFrame] = None,
    graph: Optional[pl.DataFrame] = None,
    *,
    directed: Optional[bool] = None,
    weighted: Optional[bool] = None,
) -> BaseGraph:
    """
    Build a graph from Polars DataFrames.

    Args:
        vertices: Table with a ``label`` column. When None, vertices are taken
            from the edge endpoints in order of first appearance.
        edges: Table with ``source`` and ``target`` columns, plus optional
            ``weight`` and ``directed``. Extra columns are ignored.
        graph: Optional one-row table with ``directed`` / ``weighted`` flags,
            as written by ``to_dataframes``.
        directed: Force the graph kind. When None, use the ``graph`` table,
            then the ``directed`` column (all rows must agree); defaults to
            directed.
        weighted: Force weighted edge variants. When None, weighted variants
            are used if the ``graph`` table marks the graph as weighted or a
            ``weight`` column holds any non-null value.

    Returns:
        DirectedGraph or UndirectedGraph. Rows are added one by one, so the
        usual ``add_vertex``/``add_edge`` checks apply (duplicates and dangling
        endpoints raise ``ValueError``).
    """
    if edges is None:
        edges = pl.DataFrame(schema={"source": pl.Utf8, "target": pl.Utf8})
    missing = {"source", "target"} - set(edges.columns)
    if missing:
        raise ValueError(f"from_dataframes: edges table lacks column(s) {sorted(missing)}")

    is_directed = _resolve_directed(edges, directed, graph)
    if weighted is None:
        has_weights = "weight" in edges.columns and edges["weight"].null_count() < edges.height
        weighted = bool(_graph_flag(graph, "weighted")) or has_weights

    if is_directed:
        graph_cls = DirectedGraph
        edge_cls = DirectedWeightedEdge if weighted else DirectedEdge
    else:
        graph_cls = UndirectedGraph
        edge_cls = UndirectedWeightedEdge if weighted else UndirectedEdge

    G = graph_cls(edge_class=edge_cls)

    if vertices is not None:
        if "label" not in vertices.columns:
            raise ValueError("from_dataframes: vertices table lacks column 'label'")
        for label in vertices["label"].to_list():
            G.add_vertex(Vertex(label))
    else:
        for row in edges.select(["source", "target"]).iter_rows():
            for label in row:
                if not G.contains_vertex(label):
                    G.add_vertex(Vertex(label))

    for i, row in enumerate(edges.iter_rows(named=True)):
        source = G.get_vertex(row["source"]) or Vertex(row["source"])
        target = G.get_vertex(row["target"]) or Vertex(row["target"])
        if weighted:
            weight = row.get("weight")
            if is_missing(weight):
                raise ValueError(f"from_dataframes: edge row {i} has no weight.")
            G.add_edge(edge_cls(source, target, weight))
        else:
            G.add_edge(edge_cls(source, target))

    return G
