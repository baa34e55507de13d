try:
    import networkx as nx
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "Optional dependency 'networkx' is not installed. "
        "Install with: pip install labelgraph[networkx]"
    ) from e

import warnings

from ..core.edges import (
    DirectedEdge,
    DirectedWeightedEdge,
    UndirectedEdge,
    UndirectedWeightedEdge,
)
from ..core.graph import DirectedGraph, UndirectedGraph
from ..core.vertex import Vertex
from ..utils.validation import unique_iter


def to_nx(graph, *, weight_attr: str = "weight"):
    """
    Export a graph to NetworkX.

    Parameters
    ----------
    graph : DirectedGraph | UndirectedGraph
        Source graph instance.
    weight_attr : str
        Edge attribute name that receives the weight of weighted edges.

    Returns
    -------
    networkx.DiGraph | networkx.Graph
        Nodes are vertex labels, added in vertex insertion order. Unweighted
        edges carry no attributes.

    Raises
    ------
    ValueError
        If a vertex has no label (NetworkX does not accept None as a node).
    """
    G = nx.DiGraph() if graph.is_directed else nx.Graph()

    for v in graph.vertices:
        if v.label is None:
            raise ValueError("Cannot export an unlabelled vertex to networkx (None is not a valid node).")
        G.add_node(v.label)

    for edge in graph.edges:
        first, second = edge.endpoints()
        attrs = {weight_attr: edge.weight} if edge.is_weighted else {}
        G.add_edge(first.label, second.label, **attrs)

    return G


def from_nx(nxG, *, weighted=None, weight_attr: str = "weight", default_weight: float = 1.0):
    """
    Build a graph from a NetworkX graph.

    Parameters
    ----------
    nxG : networkx.Graph | networkx.DiGraph | networkx.MultiGraph | networkx.MultiDiGraph
        Source graph. Directedness picks ``DirectedGraph`` or ``UndirectedGraph``.
    weighted : bool, optional
        Use weighted edge variants. When None, weighted variants are used if
        any edge carries ``weight_attr``.
    weight_attr : str
        Edge attribute read as the weight.
    default_weight : float
        Weight for edges without ``weight_attr`` when building weighted edges.

    Returns
    -------
    DirectedGraph | UndirectedGraph

    Notes
    -----
    - Node identifiers are converted to string labels with ``str``.
    - Multigraph parallel edges collapse to the first edge per vertex pair;
      a warning is emitted when that drops edges.
    """
    directed = nxG.is_directed()
    edge_rows = list(nxG.edges(data=True))

    if weighted is None:
        weighted = any(weight_attr in data for _, _, data in edge_rows)

    vertices = [Vertex(str(node)) for node in nxG.nodes]
    by_label = {v.label: v for v in vertices}
    if len(by_label) < len(vertices):
        raise ValueError("from_nx: distinct networkx nodes map to the same label under str().")

    if directed:
        edge_cls = DirectedWeightedEdge if weighted else DirectedEdge
        graph_cls = DirectedGraph
        pair_key = lambda row: (str(row[0]), str(row[1]))  # noqa: E731
    else:
        edge_cls = UndirectedWeightedEdge if weighted else UndirectedEdge
        graph_cls = UndirectedGraph
        pair_key = lambda row: frozenset((str(row[0]), str(row[1])))  # noqa: E731

    kept = list(unique_iter(edge_rows, key=pair_key))
    if len(kept) < len(edge_rows):
        warnings.warn(
            f"from_nx: collapsed {len(edge_rows) - len(kept)} parallel edge(s); "
            "only the first edge per vertex pair is kept.",
            category=UserWarning,
            stacklevel=2,
        )

    edges = []
    for u, v, data in kept:
        ends = (by_label[str(u)], by_label[str(v)])
        if weighted:
            edges.append(edge_cls(*ends, data.get(weight_attr, default_weight)))
        else:
            edges.append(edge_cls(*ends))

    return graph_cls(edges, vertices, edge_class=edge_cls)
