import pytest

from geograph import GeometricGraph


@pytest.fixture
def line_graph():
    """Three collinear vertices a, b, c with no edges."""
    g = GeometricGraph()
    a = g.create_vertex(0, 0)
    b = g.create_vertex(1, 0)
    c = g.create_vertex(2, 0)
    return g, a, b, c
