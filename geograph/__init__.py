"""Planar geometric graph: positioned vertices joined by straight-line edges."""
from geograph.point import Point
from geograph.vertex import Vertex
from geograph.edge import Edge
from geograph.point_in_edge import PointInEdge
from geograph.graph import GeometricGraph, GraphConfig
from geograph.errors import (
    GeometricGraphError,
    InvariantViolationError,
    MembershipViolationError,
    OutOfRangeError,
)
from geograph.log import get_logger, setup_logging

__all__ = [
    "Point",
    "Vertex",
    "Edge",
    "PointInEdge",
    "GeometricGraph",
    "GraphConfig",
    "GeometricGraphError",
    "InvariantViolationError",
    "MembershipViolationError",
    "OutOfRangeError",
    "get_logger",
    "setup_logging",
]
