"""Unit sphere centered at the origin."""

from __future__ import annotations

import math
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


def _square_to_uniform_sphere(u: float, v: float) -> Vector:
    z = 1 - 2 * v
    r = math.sqrt(max(0.0, 1 - z * z))
    phi = 2 * math.pi * u
    return Vector(r * math.cos(phi), r * math.sin(phi), z)


def _populate(surf: SurfaceEvent, position: Vector) -> None:
    surf.position = position
    theta = math.acos(min(1.0, max(-1.0, position.y)))
    phi = math.atan2(-position.z, position.x)
    surf.uv = ((phi - math.pi) / (2 * math.pi), theta / math.pi)
    surf.shading_normal = position.normalized()
    surf.geometry_normal = surf.shading_normal
    surf.tangent = _TANGENT
    surf.pdf = 1.0 / (4.0 * math.pi)


class Sphere(Shape):
    """Sphere of radius one around the origin."""

    def _hit(self, ray: Ray, its: Intersection, t: float) -> bool:
        its.t = t
        _populate(its, ray.at(t))
        return True

    def intersect(self, ray: Ray, its: Intersection, rng: Sampler) -> bool:
        co = ray.origin
        a = ray.direction.dot(ray.direction)
        b = 2 * ray.direction.dot(co)
        c = co.dot(co) - 1
        discriminant = b * b - 4 * a * c

        if discriminant > 0:
            root = math.sqrt(discriminant)
            near = (-b - root) / 2.0 * a
            far = (-b + root) / 2.0 * a
            if far < 0:
                return False
            if EPSILON <= near < its.t:
                return self._hit(ray, its, near)
            if EPSILON <= far < its.t:
                return self._hit(ray, its, far)
            return False

        if discriminant == 0:
            t = -b / (2 * a)
            if t < EPSILON or t > its.t:
                return False
            return self._hit(ray, its, t)

        return False

    def bounding_box(self) -> Bounds:
        return Bounds(Vector(-1.0, -1.0, -1.0), Vector(1.0, 1.0, 1.0))

    def centroid(self) -> Vector:
        return Vector(0.0, 0.0, 0.0)

    def sample_area(self, rng: Sampler) -> AreaSample:
        u, v = rng.next_2d()
        sample = AreaSample()
        _populate(sample, _square_to_uniform_sphere(u, v))
        return sample

    def __str__(self) -> str:
        return "Sphere[]"