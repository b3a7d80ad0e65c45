# edge.py
from __future__ import annotations
from typing import Iterator, Tuple

from geograph.vertex import Vertex


class Edge:
    """Straight segment between two distinct vertices. Orientation is kept as given."""
    __slots__ = ("_start", "_end")

    def __init__(self, startVertex: Vertex, endVertex: Vertex):
        if not isinstance(startVertex, Vertex) or not isinstance(endVertex, Vertex):
            raise TypeError("Edge endpoints must be vertices.")
        # Prevent loops
        if startVertex is endVertex:
            raise ValueError("Edge endpoints must be distinct (no loops).")
        self._start = startVertex
        self._end = endVertex

    @property
    def u(self) -> Vertex:
        return self._start

    @property
    def v(self) -> Vertex:
        return self._end

    # --- Getters ---
    def getStartVertex(self) -> Vertex: return self._start
    def getEndVertex(self) -> Vertex: return self._end

    # Convenience: sorted endpoint indices
    def key(self) -> Tuple[int, int]:
        a, b = self._start.index, self._end.index
        return (a, b) if a <= b else (b, a)

    def other(self, w: Vertex) -> Vertex:
        if w is self._start:
            return self._end
        if w is self._end:
            return self._start
        raise ValueError(f"{w!r} is not an endpoint of {self!r}.")

    # Unpacks like the (u, v) pair it stands for
    def __iter__(self) -> Iterator[Vertex]:
        yield self._start
        yield self._end

    def __len__(self) -> int:
        return 2

    def __eq__(self, other) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return ((self._start is other._start and self._end is other._end)
                or (self._start is other._end and self._end is other._start))

    def __hash__(self) -> int:
        return hash(frozenset((id(self._start), id(self._end))))

    def __repr__(self):
        return f"E({self._start.index} - {self._end.index})"
