import pytest

from labelgraph.core.edges import DirectedEdge, DirectedWeightedEdge, UndirectedEdge
from labelgraph.core.graph import DirectedGraph, UndirectedGraph
from labelgraph.core.vertex import Vertex


@pytest.fixture
def abc_vertices():
    """Three labelled vertices, A/B/C."""
    return [Vertex("A"), Vertex("B"), Vertex("C")]


@pytest.fixture
def directed_graph(abc_vertices):
    """A -> B, C -> A."""
    a, b, c = abc_vertices
    return DirectedGraph([DirectedEdge(a, b), DirectedEdge(c, a)], abc_vertices)


@pytest.fixture
def undirected_graph(abc_vertices):
    """A -- B, B -- C."""
    a, b, c = abc_vertices
    return UndirectedGraph([UndirectedEdge(a, b), UndirectedEdge(b, c)], abc_vertices)


@pytest.fixture
def weighted_graph(abc_vertices):
    """A -> B (2.0), B -> C (0.5), C -> C (1.5)."""
    a, b, c = abc_vertices
    edges = [
        DirectedWeightedEdge(a, b, 2.0),
        DirectedWeightedEdge(b, c, 0.5),
        DirectedWeightedEdge(c, c, 1.5),
    ]
    return DirectedGraph(edges, abc_vertices, edge_class=DirectedWeightedEdge)


@pytest.fixture
def tmpdir_fixture(tmp_path):
    return tmp_path
