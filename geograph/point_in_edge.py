# point_in_edge.py
from __future__ import annotations
from typing import Tuple, Union

from geograph.edge import Edge
from geograph.point import Point
from geograph.vertex import Vertex


class PointInEdge(Point):
    """
    A point strictly inside the straight segment of an edge.

    Built by geometry routines that already know the position lies in the
    open segment; the position is taken on trust and never checked here.
    The edge endpoints are borrowed references: removing either vertex from
    its graph leaves this point stale.
    """
    __slots__ = ("_edge",)

    def __init__(self, x: float, y: float, edge: Union[Edge, Tuple[Vertex, Vertex]]):
        super().__init__(x, y)
        self._edge = edge if isinstance(edge, Edge) else Edge(*edge)

    @property
    def edge(self) -> Edge:
        return self._edge

    def getEdge(self) -> Edge:
        return self._edge

    def __eq__(self, other) -> bool:
        return super().__eq__(other) and self._edge == other._edge

    def __hash__(self) -> int:
        return hash((self.x, self.y, self._edge))

    def __repr__(self) -> str:
        return f"PIE({self.x}, {self.y} on {self._edge!r})"
