"""
Edge counts of complete graphs.

A complete graph holds every possible edge among its vertices, without
parallel edges or self-loops.
"""
from .validation import require_vertex_count


def complete_directed_edge_count(number_of_vertices: int) -> int:
    """
    Number of edges in a complete directed graph.

    Parameters
    ----------
    number_of_vertices : int
        Vertex count ``n``.

    Returns
    -------
    int
        ``n * (n - 1)``.

    Raises
    ------
    ValueError
        If ``n`` is negative.
    TypeError
        If ``n`` is not an integer.
    """
    n = require_vertex_count(number_of_vertices)
    return n * (n - 1)


def complete_undirected_edge_count(number_of_vertices: int) -> int:
    """
    Number of edges in a complete undirected graph, ``n * (n - 1) / 2``.

    ``n * (n - 1)`` is always even, so the integer division is exact.
    """
    n = require_vertex_count(number_of_vertices)
    return n * (n - 1) // 2
