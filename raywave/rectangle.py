"""Unit rectangle in the xy-plane."""

from __future__ import annotations

from typing import TYPE_CHECKING

from raywave.geometry import (
    EPSILON,
    AreaSample,
    Bounds,
    Intersection,
    Ray,
    Shape,
    SurfaceEvent,
    Vector,
)

if TYPE_CHECKING:
    from raywave.samplers import Sampler

_TANGENT = Vector(1.0, 0.0, 0.0)
_NORMAL = Vector(0.0, 0.0, 1.0)


def _populate(surf: SurfaceEvent, position: Vector) -> None:
    surf.position = position
    surf.uv = ((position.x + 1) / 2, (position.y + 1) / 2)
    surf.tangent = _TANGENT
    surf.shading_normal = _NORMAL
    surf.geometry_normal = _NORMAL
    # uniform area sampling over a surface of area 4
    surf.pdf = 1.0 / 4


class Rectangle(Shape):
    """Rectangle spanning from (-1, -1, 0) to (+1, +1, 0)."""

    def intersect(self, ray: Ray, its: Intersection, rng: Sampler) -> bool:
        if ray.direction.z == 0:
            return False
        t = -ray.origin.z / ray.direction.z
        if t < EPSILON or t > its.t:
            return False
        position = ray.at(t)
        if abs(position.x) > 1 or abs(position.y) > 1:
            return False
        its.t = t
        _populate(its, position)
        return True

    def bounding_box(self) -> Bounds:
        return Bounds(Vector(-1.0, -1.0, 0.0), Vector(1.0, 1.0, 0.0))

    def centroid(self) -> Vector:
        return Vector(0.0, 0.0, 0.0)

    def sample_area(self, rng: Sampler) -> AreaSample:
        u, v = rng.next_2d()
        sample = AreaSample()
        _populate(sample, Vector(2 * u - 1, 2 * v - 1, 0.0))
        return sample

    def __str__(self) -> str:
        return "Rectangle[]"