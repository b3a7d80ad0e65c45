# vertex.py

from typing import Iterator, List

from geograph.errors import OutOfRangeError
from geograph.point import Point

# Only GeometricGraph holds this key, so only a graph can build vertices.
_GRAPH_KEY = object()


class Vertex(Point):
    """
    A positioned point owned by a GeometricGraph.
    Vertices compare by identity: two vertices at the same coordinates are
    still different vertices.
    """
    __slots__ = ("_index", "_adjacents")

    def __init__(self, x: float, y: float, index: int, _key=None):
        if _key is not _GRAPH_KEY:
            raise TypeError("Vertices are created through GeometricGraph.create_vertex().")
        super().__init__(x, y)
        self._index = int(index)
        # Mutated only by the owning graph
        self._adjacents: List["Vertex"] = []

    @property
    def index(self) -> int:
        """Position of the vertex in its graph, -1 once removed."""
        return self._index

    @property
    def degree(self) -> int:
        return len(self._adjacents)

    def adjacents(self) -> Iterator["Vertex"]:
        """Neighbours in insertion order. Each call starts a new traversal."""
        for neighbour in self._adjacents:
            yield neighbour

    def adjacent(self, i: int) -> "Vertex":
        if i < 0 or i >= len(self._adjacents):
            raise OutOfRangeError(f"Adjacent index {i} out of range for degree {len(self._adjacents)}.")
        return self._adjacents[i]

    def __getitem__(self, i: int) -> "Vertex":
        return self.adjacent(i)

    # --- Getters (kept for compatibility) ---
    def getIndex(self) -> int:
        return self._index

    def getDegree(self) -> int:
        return len(self._adjacents)

    __eq__ = object.__eq__
    __hash__ = object.__hash__

    def __repr__(self) -> str:
        return f"V({self._index})"
