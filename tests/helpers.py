def labels(vertices):
    """Labels of a vertex sequence, order kept."""
    return [v.label for v in vertices]


def edge_triples(graph):
    """(first label, second label, weight) per stored edge, order kept."""
    out = []
    for edge in graph.edges:
        first, second = edge.endpoints()
        out.append((first.label, second.label, edge.weight))
    return out


def assert_graphs_equal(G1, G2, check_order=True):
    assert type(G1) is type(G2), f"graph kinds differ: {type(G1).__name__} vs {type(G2).__name__}"
    if check_order:
        assert labels(G1.vertices) == labels(G2.vertices)
        assert edge_triples(G1) == edge_triples(G2)
        assert list(G1.edges) == list(G2.edges)
    else:
        assert set(labels(G1.vertices)) == set(labels(G2.vertices))
        assert sorted(edge_triples(G1), key=repr) == sorted(edge_triples(G2), key=repr)
