# errors.py
"""Typed errors raised by the geometric graph core."""


class GeometricGraphError(Exception):
    """Base error of the package."""


class OutOfRangeError(GeometricGraphError, IndexError):
    """Vertex or adjacency index outside [0, count)."""


class MembershipViolationError(GeometricGraphError, ValueError):
    """A vertex argument does not belong to the graph it was passed to."""


class InvariantViolationError(GeometricGraphError, AssertionError):
    """A mutation left the graph breaking one of its structural invariants."""
