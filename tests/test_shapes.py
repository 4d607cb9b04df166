import pytest

from renderkit.shapes import AABB, OBB, Triangle
from renderkit.vector import Vector3


@pytest.fixture
def box():
    return AABB(Vector3(-1.0, -2.0, -3.0), Vector3(1.0, 2.0, 3.0))


def test_point_inside_box(box):
    assert box.contains_point(Vector3(0.5, -1.5, 2.0)) is True


def test_point_on_surface_counts_as_inside(box):
    assert box.contains_point(Vector3(1.0, 2.0, 3.0)) is True


@pytest.mark.parametrize(
    "point",
    [Vector3(1.5, 0.0, 0.0), Vector3(0.0, -2.5, 0.0), Vector3(0.0, 0.0, 3.01)],
)
def test_point_outside_box(box, point):
    assert box.contains_point(point) is False


def test_triangle_keeps_vertices():
    a, b, c = Vector3(0, 0, 0), Vector3(1, 0, 0), Vector3(0, 1, 0)
    tri = Triangle([a, b, c])
    assert tri.vertices == (a, b, c)


def test_triangle_rejects_wrong_vertex_count():
    with pytest.raises(ValueError):
        Triangle((Vector3(), Vector3()))


def test_obb_rejects_wrong_axis_count():
    with pytest.raises(ValueError):
        OBB(Vector3(), (Vector3(1, 0, 0),), Vector3(1, 1, 1))