import copy

import pytest

from labelgraph.core.edges import DirectedEdge, DirectedWeightedEdge, UndirectedEdge
from labelgraph.core.graph import DirectedGraph
from labelgraph.core.vertex import Vertex

from .helpers import labels


class TestConstruction:

    def test_empty(self):
        G = DirectedGraph()
        assert G.shape == (0, 0)
        assert G.is_directed
        assert G.vertices == ()
        assert G.edges == ()

    def test_keeps_order_and_contents(self, abc_vertices):
        a, b, c = abc_vertices
        edges = [DirectedEdge(c, a), DirectedEdge(a, b)]
        G = DirectedGraph(edges, abc_vertices)
        assert list(G.vertices) == abc_vertices
        assert list(G.edges) == edges
        assert G.edges[0] is edges[0]

    def test_defensive_copy(self, abc_vertices):
        a, b, c = abc_vertices
        edges = [DirectedEdge(a, b)]
        vertices = list(abc_vertices)
        G = DirectedGraph(edges, vertices)
        edges.append(DirectedEdge(b, c))
        vertices.pop()
        assert G.num_edges == 1
        assert G.num_vertices == 3

    def test_accepts_generators(self, abc_vertices):
        a, b, _ = abc_vertices
        G = DirectedGraph((e for e in [DirectedEdge(a, b)]), iter(abc_vertices))
        assert G.shape == (3, 1)

    def test_endpoint_checked_by_value(self, abc_vertices):
        G = DirectedGraph([DirectedEdge(Vertex("A"), Vertex("B"))], abc_vertices)
        assert G.num_edges == 1

    def test_dangling_endpoint(self, abc_vertices):
        with pytest.raises(ValueError, match="'D'"):
            DirectedGraph([DirectedEdge(Vertex("A"), Vertex("D"))], abc_vertices)

    @pytest.mark.parametrize("edges, vertices", [(None, []), ([], None)])
    def test_none_collections(self, edges, vertices):
        with pytest.raises(ValueError):
            DirectedGraph(edges, vertices)

    def test_wrong_edge_family(self, abc_vertices):
        a, b, _ = abc_vertices
        with pytest.raises(TypeError):
            DirectedGraph([UndirectedEdge(a, b)], abc_vertices)

    def test_edge_class_restriction(self, abc_vertices):
        a, b, _ = abc_vertices
        with pytest.raises(TypeError):
            DirectedGraph([DirectedEdge(a, b)], abc_vertices, edge_class=DirectedWeightedEdge)
        with pytest.raises(TypeError):
            DirectedGraph(edge_class=UndirectedEdge)
        G = DirectedGraph([DirectedWeightedEdge(a, b, 1.0)], abc_vertices, edge_class=DirectedWeightedEdge)
        assert G.edge_class is DirectedWeightedEdge


class TestAddVertex:

    def test_appends_in_order(self):
        G = DirectedGraph()
        for label in ["x", "y", "z"]:
            G.add_vertex(Vertex(label))
        assert labels(G.vertices) == ["x", "y", "z"]

    def test_returns_vertex(self):
        G = DirectedGraph()
        v = Vertex("x")
        assert G.add_vertex(v) is v

    def test_duplicate_label_rejected(self, directed_graph):
        before = directed_graph.num_vertices
        with pytest.raises(ValueError):
            directed_graph.add_vertex(Vertex("A"))
        assert directed_graph.num_vertices == before

    def test_none_rejected(self, directed_graph):
        with pytest.raises(ValueError):
            directed_graph.add_vertex(None)

    def test_single_unlabelled_vertex(self):
        G = DirectedGraph()
        G.add_vertex(Vertex())
        with pytest.raises(ValueError):
            G.add_vertex(Vertex())
        assert G.contains_vertex(None)


class TestAddEdge:

    def test_reverse_direction_allowed(self, abc_vertices):
        a, b, _ = abc_vertices
        G = DirectedGraph([], abc_vertices)
        G.add_edge(DirectedEdge(a, b))
        G.add_edge(DirectedEdge(b, a))
        assert G.num_edges == 2

    def test_same_direction_rejected(self, directed_graph):
        with pytest.raises(ValueError):
            directed_graph.add_edge(DirectedEdge(Vertex("A"), Vertex("B")))
        assert directed_graph.num_edges == 2

    def test_reversed_self_loop_rejected(self, abc_vertices):
        a = abc_vertices[0]
        G = DirectedGraph([], abc_vertices)
        G.add_edge(DirectedEdge(a, a))
        with pytest.raises(ValueError):
            G.add_edge(DirectedEdge(Vertex("A"), Vertex("A")))

    def test_weight_ignored_for_duplicates(self, abc_vertices):
        a, b, _ = abc_vertices
        G = DirectedGraph([], abc_vertices, edge_class=DirectedWeightedEdge)
        G.add_edge(DirectedWeightedEdge(a, b, 1.0))
        with pytest.raises(ValueError):
            G.add_edge(DirectedWeightedEdge(a, b, 2.0))

    def test_unknown_endpoint_rejected(self, directed_graph):
        with pytest.raises(ValueError, match="not in the graph"):
            directed_graph.add_edge(DirectedEdge(Vertex("A"), Vertex("Z")))
        assert directed_graph.num_edges == 2

    def test_none_rejected(self, directed_graph):
        with pytest.raises(ValueError):
            directed_graph.add_edge(None)

    def test_wrong_family_rejected(self, directed_graph):
        with pytest.raises(TypeError):
            directed_graph.add_edge(UndirectedEdge(Vertex("B"), Vertex("C")))

    def test_returns_edge(self, directed_graph):
        edge = DirectedEdge(Vertex("B"), Vertex("C"))
        assert directed_graph.add_edge(edge) is edge
        assert directed_graph.edges[-1] is edge


class TestQueries:

    def test_contains_vertex(self, directed_graph):
        assert directed_graph.contains_vertex("A")
        assert not directed_graph.contains_vertex("a")
        assert not directed_graph.contains_vertex("Z")
        assert "B" in directed_graph
        assert Vertex("C") in directed_graph
        assert 3 not in directed_graph

    def test_get_vertex(self, directed_graph, abc_vertices):
        assert directed_graph.get_vertex("B") is abc_vertices[1]
        assert directed_graph.get_vertex("Z") is None

    def test_adjacency_ignores_direction(self, directed_graph):
        assert labels(directed_graph.get_adjacent_vertices(Vertex("A"))) == ["B", "C"]
        assert labels(directed_graph.get_adjacent_vertices("A")) == ["B", "C"]
        assert labels(directed_graph.get_adjacent_vertices("B")) == ["A"]

    def test_adjacency_isolated_vertex(self):
        G = DirectedGraph([], [Vertex("solo")])
        assert G.get_adjacent_vertices("solo") == ()

    def test_adjacency_self_loop_counted_once(self, abc_vertices):
        a, b, _ = abc_vertices
        G = DirectedGraph([DirectedEdge(a, a), DirectedEdge(a, b)], abc_vertices)
        assert labels(G.get_adjacent_vertices("A")) == ["A", "B"]

    def test_adjacency_keeps_repeats(self, abc_vertices):
        a, b, _ = abc_vertices
        G = DirectedGraph([DirectedEdge(a, b), DirectedEdge(b, a)], abc_vertices)
        assert labels(G.get_adjacent_vertices("A")) == ["B", "B"]

    @pytest.mark.parametrize("query", [None, "Z", Vertex("Z")])
    def test_adjacency_bad_argument(self, directed_graph, query):
        with pytest.raises(ValueError):
            directed_graph.get_adjacent_vertices(query)

    def test_get_edge(self, directed_graph):
        first = directed_graph.edges[0]
        assert directed_graph.get_edge(Vertex("A"), Vertex("B")) is first
        assert directed_graph.get_edge("A", "B") is first
        assert directed_graph.get_edge("B", "A") is None
        assert directed_graph.get_edge("C", "A") is directed_graph.edges[1]
        assert directed_graph.get_edge("A", "Z") is None

    def test_get_edge_finds_weighted_by_endpoints(self, weighted_graph):
        edge = weighted_graph.get_edge("A", "B")
        assert isinstance(edge, DirectedWeightedEdge)
        assert edge.weight == 2.0

    def test_get_edge_none_endpoint(self, directed_graph):
        with pytest.raises(ValueError):
            directed_graph.get_edge(None, Vertex("A"))
        with pytest.raises(ValueError):
            directed_graph.get_edge("A", None)


class TestContainerProtocol:

    def test_len_and_iter(self, directed_graph):
        assert len(directed_graph) == 3
        assert labels(directed_graph) == ["A", "B", "C"]

    def test_read_only_views(self, directed_graph):
        assert isinstance(directed_graph.vertices, tuple)
        assert isinstance(directed_graph.edges, tuple)

    def test_repr(self, directed_graph):
        assert repr(directed_graph) == "DirectedGraph(vertices=3, edges=2)"

    def test_copy_is_independent(self, directed_graph):
        H = directed_graph.copy()
        H.add_vertex(Vertex("D"))
        H.add_edge(DirectedEdge(Vertex("D"), Vertex("A")))
        assert directed_graph.shape == (3, 2)
        assert H.shape == (4, 3)
        assert H.edge_class is directed_graph.edge_class

    @pytest.mark.parametrize("clone", [copy.copy, copy.deepcopy])
    def test_copy_protocol_is_independent(self, directed_graph, clone):
        H = clone(directed_graph)
        H.add_vertex(Vertex("D"))
        H.add_edge(DirectedEdge(Vertex("D"), Vertex("B")))
        assert directed_graph.shape == (3, 2)
        assert H.shape == (4, 3)
        assert type(H) is DirectedGraph

    def test_copy_protocol_on_empty_graph(self):
        G = DirectedGraph()
        H = copy.deepcopy(G)
        H.add_vertex(Vertex("x"))
        assert G.shape == (0, 0)
        assert H.shape == (1, 0)

    def test_deepcopy_keeps_edges_on_copied_vertices(self, directed_graph):
        H = copy.deepcopy(directed_graph)
        assert H.vertices[0] is not directed_graph.vertices[0]
        assert H.edges[0].source is H.vertices[0]
        assert list(H.edges) == list(directed_graph.edges)

    def test_get_edge_unlabelled_vertex(self):
        blank, b = Vertex(), Vertex("B")
        G = DirectedGraph([DirectedEdge(blank, b)], [blank, b])
        assert G.get_edge(Vertex(), "B") is G.edges[0]
        assert G.get_edge("B", Vertex()) is None
