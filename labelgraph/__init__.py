# labelgraph/__init__.py
"""labelgraph: single import, full API."""
from __future__ import annotations

from importlib import import_module
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version
from typing import Any

# Lazily exposed submodules (imported on first attribute access)
_lazy_submodules = {
    # namespaces
    "adapters": "labelgraph.adapters",
    "core": "labelgraph.core",
    "utils": "labelgraph.utils",
    # adapter modules (direct convenience)
    "networkx": "labelgraph.adapters.networkx",
    "dataframe": "labelgraph.adapters.dataframe_adapter",
}

# Curated top-level symbols (lazy). name -> (module, attribute)
_lazy_symbols: dict[str, tuple[str, str]] = {
    # Core
    "Vertex": ("labelgraph.core.vertex", "Vertex"),
    "Edge": ("labelgraph.core.edges", "Edge"),
    "DirectedEdge": ("labelgraph.core.edges", "DirectedEdge"),
    "UndirectedEdge": ("labelgraph.core.edges", "UndirectedEdge"),
    "DirectedWeightedEdge": ("labelgraph.core.edges", "DirectedWeightedEdge"),
    "UndirectedWeightedEdge": ("labelgraph.core.edges", "UndirectedWeightedEdge"),
    "EdgeType": ("labelgraph.core.structure", "EdgeType"),
    "DirectedGraph": ("labelgraph.core.graph", "DirectedGraph"),
    "UndirectedGraph": ("labelgraph.core.graph", "UndirectedGraph"),

    # Arithmetic helpers
    "complete_directed_edge_count": ("labelgraph.utils.calculations", "complete_directed_edge_count"),
    "complete_undirected_edge_count": ("labelgraph.utils.calculations", "complete_undirected_edge_count"),

    # NetworkX adapter (optional dependency)
    "to_nx": ("labelgraph.adapters.networkx", "to_nx"),
    "from_nx": ("labelgraph.adapters.networkx", "from_nx"),

    # Polars DataFrames
    "to_dataframes": ("labelgraph.adapters.dataframe_adapter", "to_dataframes"),
    "from_dataframes": ("labelgraph.adapters.dataframe_adapter", "from_dataframes"),
}

__all__ = sorted(set(list(_lazy_submodules) + list(_lazy_symbols)))


def __getattr__(name: str) -> Any:  # PEP 562: lazy attribute resolution
    if name in _lazy_submodules:
        return import_module(_lazy_submodules[name])
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))


# Version: read from distribution metadata
try:
    __version__ = _pkg_version("labelgraph")
except PackageNotFoundError:
    __version__ = "0.0.0"
