import math

import pytest

from raywave.geometry import (
    AreaSample,
    Bounds,
    Color,
    Intersection,
    Matrix3,
    Ray,
    Shape,
    Vector,
)

A = Vector(1, 2, 3)
B = Vector(0, -1, 1)
M = Matrix3(
    1, 0, 1,
    0, 2, 2,
    1, -1, 1,
)


def test_vector_addition():
    assert A + B == Vector(1, 1, 4)


def test_vector_subtraction():
    assert A - B == Vector(1, 3, 2)


def test_vector_dot():
    assert A.dot(B) == 1


def test_vector_cross():
    assert A.cross(B) == Vector(5, -1, -1)


def test_matrix_vector_product():
    assert M * A == Vector(4, 10, 2)


def test_matrix_product():
    assert M * M == Matrix3(
        2, -1, 2,
        2, 2, 6,
        2, -3, 0,
    )


def test_matrix_determinant():
    assert M.determinant() == 2


def test_matrix_transpose():
    assert M.transpose() == Matrix3(
        1, 0, 1,
        0, 2, -1,
        1, 2, 1,
    )


def test_matrix_needs_nine_entries():
    with pytest.raises(ValueError):
        Matrix3(1, 2, 3)


def test_identity_is_neutral():
    assert Matrix3.identity() * M == M
    assert Matrix3.identity() * A == A


def test_normalized_has_unit_length():
    assert A.normalized().length() == pytest.approx(1.0)


def test_component_queries():
    v = Vector(2, -4, 7)
    assert v.min_component() == -4
    assert v.max_component() == 7
    assert v.max_component_index() == 2


def test_elementwise_min_max():
    assert A.elementwise_min(B) == Vector(0, -1, 1)
    assert A.elementwise_max(B) == Vector(1, 2, 3)


def test_division_by_zero_component_follows_ieee():
    result = Vector(1, -2, 0) / Vector(0, 0, 0)
    assert result.x == math.inf
    assert result.y == -math.inf
    assert math.isnan(result.z)


def test_indexing_and_iteration():
    assert list(A) == [1, 2, 3]
    assert A[1] == 2


def test_empty_bounds_extend():
    box = Bounds.empty()
    assert box.is_empty
    box.extend(Vector(1, 2, 3)).extend(Vector(-1, 0, 5))
    assert box == Bounds(Vector(-1, 0, 3), Vector(1, 2, 5))
    assert not box.is_empty


def test_bounds_extend_with_bounds():
    box = Bounds(Vector(0, 0, 0), Vector(1, 1, 1))
    box.extend(Bounds(Vector(-1, 0, 0), Vector(0, 2, 0)))
    assert box == Bounds(Vector(-1, 0, 0), Vector(1, 2, 1))


def test_bounds_diagonal_and_center():
    box = Bounds(Vector(-1, -1, 0), Vector(1, 1, 0))
    assert box.diagonal() == Vector(2, 2, 0)
    assert box.center() == Vector(0, 0, 0)


def test_ray_at():
    ray = Ray(Vector(1, 0, 0), Vector(0, 2, 0))
    assert ray.at(1.5) == Vector(1, 3, 0)
    assert ray(0) == Vector(1, 0, 0)


def test_color_arithmetic():
    assert Color(1, 2, 3) + Color(1) == Color(2, 3, 4)
    assert 2 * Color(1, 2, 3) == Color(2, 4, 6)
    assert Color(1, 2, 3) * Color(0, 1, 2) == Color(0, 2, 6)
    assert Color.NUM_COMPONENTS == len(list(Color(0.5)))


def test_color_rejects_two_components():
    with pytest.raises(TypeError):
        Color(1, 2)


def test_intersection_defaults():
    its = Intersection()
    assert math.isinf(its.t)
    assert its.stats.bvh_counter == 0


class _Point(Shape):
    def intersect(self, ray, its, rng):
        return False

    def bounding_box(self):
        return Bounds(Vector(0, 0, 0), Vector(0, 0, 0))

    def centroid(self):
        return Vector(0, 0, 0)


def test_shape_without_area_sampling_raises():
    with pytest.raises(NotImplementedError):
        Shape.sample_area(_Point(), None)


def test_mark_as_visible():
    shape = _Point()
    assert shape.visible is False
    Shape.mark_as_visible(shape)
    assert shape.visible is True


def test_area_sample_defaults():
    sample = AreaSample()
    assert sample.pdf == 0.0
    assert sample.uv == (0.0, 0.0)