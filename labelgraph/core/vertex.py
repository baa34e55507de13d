from __future__ import annotations

from typing import Optional


class Vertex:
    """
    A graph vertex identified by its label.

    Parameters
    ----------
    label : str, optional
        Vertex label. ``None`` is allowed; all unlabelled vertices compare equal.

    Notes
    -----
    - Equality and hashing are defined purely from ``label``: two independently
      built ``Vertex('a')`` objects are the same vertex.
    - Vertices are shared by the graph and every edge that references them.
      Treat the label as fixed once the vertex is inserted into a graph; the
      graph does not re-check label uniqueness on relabelling.
    """

    __slots__ = ("label",)

    def __init__(self, label: Optional[str] = None):
        self.label = label

    def __eq__(self, other):
        if not isinstance(other, Vertex):
            return NotImplemented
        if self.label is None:
            return other.label is None
        return self.label == other.label

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return 0 if self.label is None else hash(self.label)

    def __str__(self) -> str:
        return "" if self.label is None else self.label

    def __repr__(self) -> str:
        return f"Vertex({self.label!r})"
