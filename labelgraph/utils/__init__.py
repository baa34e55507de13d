from .calculations import complete_directed_edge_count, complete_undirected_edge_count

__all__ = ["complete_directed_edge_count", "complete_undirected_edge_count"]
