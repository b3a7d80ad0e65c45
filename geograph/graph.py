# graph.py

from geograph.edge import Edge
from geograph.errors import InvariantViolationError, MembershipViolationError, OutOfRangeError
from geograph.vertex import Vertex, _GRAPH_KEY
from dataclasses import dataclass
from typing import Iterator, List, Optional
import logging

logger = logging.getLogger(__name__)


@dataclass
class GraphConfig:
    # Re-check every structural invariant after each mutation (slow, O(V + E))
    check_invariants: bool = False


class GeometricGraph:
    """
    Geometric graph: every vertex has a fixed position in the plane and every
    edge is the straight segment joining its two endpoints.

    The graph is kept simple: loops and multiple edges are rejected.
    Vertices are created and destroyed only through the graph, and a vertex
    belongs to a graph exactly when it sits, by identity, in the slot named by
    its own index.

    Not thread-safe; callers must serialize mutation of a graph instance.
    """

    def __init__(self, config: Optional[GraphConfig] = None):
        self._vertices: List[Vertex] = []
        self.config = config if config is not None else GraphConfig()

    # --------------------------
    # Small helpers
    # --------------------------
    def _owns(self, v) -> bool:
        if not isinstance(v, Vertex):
            return False
        i = v.index
        return 0 <= i < len(self._vertices) and self._vertices[i] is v

    def _check_members(self, *vs) -> None:
        for v in vs:
            if not self._owns(v):
                raise MembershipViolationError("Vertices must belong to the current graph.")

    @staticmethod
    def _by_degree(u: Vertex, v: Vertex):
        # Smaller adjacency list first; ties keep argument order
        if v.degree < u.degree:
            return v, u
        return u, v

    def _after_mutation(self, op: str) -> None:
        if self.config.check_invariants and not self.validate_invariants(verbose=True):
            raise InvariantViolationError(f"Graph invariants broken after {op}.")

    # --------------------------
    # Vertices
    # --------------------------
    def create_vertex(self, x: float, y: float) -> Vertex:
        """
        Create a vertex at (x, y) and append it at the end of the graph.
        No check is made for another vertex at the same position, nor for
        three vertices in line.
        """
        v = Vertex(x, y, len(self._vertices), _key=_GRAPH_KEY)
        self._vertices.append(v)
        logger.debug("Created %r at (%s, %s)", v, v.x, v.y)
        self._after_mutation("create_vertex")
        return v

    def vertex_at(self, i: int) -> Vertex:
        if i < 0 or i >= len(self._vertices):
            raise OutOfRangeError(f"Vertex index {i} out of range for {len(self._vertices)} vertices.")
        return self._vertices[i]

    def vertices(self) -> Iterator[Vertex]:
        """Vertices in index order. Each step reads the live sequence."""
        i = 0
        while i < len(self._vertices):
            yield self._vertices[i]
            i += 1

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    def remove_vertex(self, u: Vertex) -> None:
        """
        Remove u and every edge incident to it. Vertices after u move one
        slot down and get their index renumbered. The removed handle is left
        detached (index -1, no neighbours).
        """
        self._check_members(u)

        for w in u._adjacents:
            w._adjacents.remove(u)

        start = u.index
        del self._vertices[start]
        for i in range(start, len(self._vertices)):
            self._vertices[i]._index = i

        logger.debug("Removed V(%d) with %d incident edges", start, len(u._adjacents))
        u._adjacents.clear()
        u._index = -1
        self._after_mutation("remove_vertex")

    # --------------------------
    # Edges
    # --------------------------
    def add_edge(self, u: Vertex, v: Vertex) -> bool:
        """
        Add the edge uv unless it is a loop or already present.
        Returns True when the edge was added, False otherwise.
        Raises MembershipViolationError if u or v is not in this graph.
        """
        self._check_members(u, v)

        if u is v:
            logger.debug("Rejected loop at %r", u)
            return False

        lo, hi = self._by_degree(u, v)
        for adjacent in lo._adjacents:
            if adjacent is hi:
                logger.debug("Rejected duplicate edge %r - %r", u, v)
                return False

        lo._adjacents.append(hi)
        hi._adjacents.append(lo)
        logger.debug("Added edge %r - %r", u, v)
        self._after_mutation("add_edge")
        return True

    def remove_edge(self, u: Vertex, v: Vertex) -> bool:
        """Remove the edge uv. Returns False if there is no such edge."""
        self._check_members(u, v)

        if u is v:
            return False

        lo, hi = self._by_degree(u, v)
        for i, adjacent in enumerate(lo._adjacents):
            if adjacent is hi:
                del lo._adjacents[i]
                hi._adjacents.remove(lo)
                logger.debug("Removed edge %r - %r", u, v)
                self._after_mutation("remove_edge")
                return True

        logger.debug("No edge %r - %r to remove", u, v)
        return False

    def has_edge(self, u: Vertex, v: Vertex) -> bool:
        self._check_members(u, v)
        if u is v:
            return False
        lo, hi = self._by_degree(u, v)
        return any(adjacent is hi for adjacent in lo._adjacents)

    def edges(self) -> Iterator[Edge]:
        """Each undirected edge once, lower-index endpoint first."""
        for u in self.vertices():
            for w in u.adjacents():
                if u.index < w.index:
                    yield Edge(u, w)

    @property
    def edge_count(self) -> int:
        return sum(v.degree for v in self._vertices) // 2

    # --------------------------
    # Sequence protocol
    # --------------------------
    def __len__(self) -> int:
        return len(self._vertices)

    def __getitem__(self, i: int) -> Vertex:
        return self.vertex_at(i)

    def __iter__(self) -> Iterator[Vertex]:
        return self.vertices()

    def __contains__(self, v) -> bool:
        return self._owns(v)

    def __repr__(self) -> str:
        return f"GeometricGraph(V={len(self._vertices)}, E={self.edge_count})"

    # --------------------------
    # Validation and stats
    # --------------------------
    def get_stats(self):
        degrees = [v.degree for v in self._vertices]
        return {
            "total_vertices": len(self._vertices),
            "edges": sum(degrees) // 2,
            "max_degree": max(degrees, default=0),
            "isolated": sum(1 for d in degrees if d == 0),
        }

    def validate_invariants(self, verbose=False) -> bool:
        ok = True
        for i, u in enumerate(self._vertices):
            if u.index != i:
                ok = False
                if verbose: logger.warning("Vertex at slot %d has index %d", i, u.index)

            seen = set()
            for w in u._adjacents:
                if w is u:
                    ok = False
                    if verbose: logger.warning("Self-loop at %r", u)
                    continue
                if id(w) in seen:
                    ok = False
                    if verbose: logger.warning("Multiple edge %r - %r", u, w)
                seen.add(id(w))
                if not self._owns(w):
                    ok = False
                    if verbose: logger.warning("Neighbour %r of %r is not in the graph", w, u)
                    continue
                if not any(x is u for x in w._adjacents):
                    ok = False
                    if verbose: logger.warning("Asymmetry: %r has %r, but %r misses %r", u, w, w, u)
        return ok
