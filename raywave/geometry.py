"""Vectors, matrices, colors, bounds, rays and the shape interface."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from raywave.samplers import Sampler

EPSILON = 1e-5
INFINITY = math.inf


def _divide(a: float, b: float) -> float:
    """Division following IEEE rules for a zero divisor."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


@dataclass(frozen=True, slots=True)
class Vector:
    """Three-component vector, also used for points."""

    x: float
    y: float
    z: float

    @classmethod
    def filled(cls, value: float) -> Vector:
        return cls(value, value, value)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def __mul__(self, other: Union[float, Vector]) -> Vector:
        if isinstance(other, Vector):
            return Vector(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vector(self.x * other, self.y * other, self.z * other)

    __rmul__ = __mul__

    def __truediv__(self, other: Union[float, Vector]) -> Vector:
        if isinstance(other, Vector):
            return Vector(*(_divide(a, b) for a, b in zip(self, other)))
        return Vector(*(_divide(a, other) for a in self))

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalized(self) -> Vector:
        return self / self.length()

    def min_component(self) -> float:
        return min(self)

    def max_component(self) -> float:
        return max(self)

    def max_component_index(self) -> int:
        values = tuple(self)
        return values.index(max(values))

    def product(self) -> float:
        return self.x * self.y * self.z

    def elementwise_min(self, other: Vector) -> Vector:
        return Vector(*(min(a, b) for a, b in zip(self, other)))

    def elementwise_max(self, other: Vector) -> Vector:
        return Vector(*(max(a, b) for a, b in zip(self, other)))


Point = Vector


class Matrix3:
    """3x3 matrix stored in row-major order."""

    __slots__ = ("_entries",)

    def __init__(self, *entries: float) -> None:
        if len(entries) != 9:
            raise ValueError(f"a 3x3 matrix needs 9 entries, got {len(entries)}")
        self._entries = tuple(entries)

    @classmethod
    def identity(cls) -> Matrix3:
        return cls(1, 0, 0, 0, 1, 0, 0, 0, 1)

    @classmethod
    def from_rows(cls, rows) -> Matrix3:
        return cls(*(value for row in rows for value in row))

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, column = key
        return self._entries[3 * row + column]

    def row(self, index: int) -> Vector:
        return Vector(*self._entries[3 * index : 3 * index + 3])

    def column(self, index: int) -> Vector:
        return Vector(*self._entries[index::3])

    def __mul__(self, other: Union[Vector, Matrix3, float]):
        if isinstance(other, Vector):
            return Vector(*(self.row(i).dot(other) for i in range(3)))
        if isinstance(other, Matrix3):
            return Matrix3(
                *(self.row(r).dot(other.column(c)) for r in range(3) for c in range(3))
            )
        return Matrix3(*(value * other for value in self._entries))

    def determinant(self) -> float:
        a, b, c, d, e, f, g, h, i = self._entries
        return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)

    def transpose(self) -> Matrix3:
        return Matrix3.from_rows(self.column(i) for i in range(3))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix3):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"Matrix3{self._entries}"


class Color:
    """Linear RGB color."""

    NUM_COMPONENTS = 3
    __slots__ = ("r", "g", "b")

    def __init__(self, r: float, g: float | None = None, b: float | None = None) -> None:
        if g is None and b is None:
            g = b = r
        elif g is None or b is None:
            raise TypeError("Color takes one gray value or three components")
        self.r, self.g, self.b = float(r), float(g), float(b)

    def __iter__(self) -> Iterator[float]:
        yield self.r
        yield self.g
        yield self.b

    def __getitem__(self, index: int) -> float:
        return (self.r, self.g, self.b)[index]

    def __add__(self, other: Color) -> Color:
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __sub__(self, other: Color) -> Color:
        return Color(self.r - other.r, self.g - other.g, self.b - other.b)

    def __mul__(self, other: Union[float, Color]) -> Color:
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        return Color(self.r * other, self.g * other, self.b * other)

    __rmul__ = __mul__

    def __truediv__(self, other: float) -> Color:
        return Color(*(_divide(c, other) for c in self))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return tuple(self) == tuple(other)

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"


@dataclass
class Bounds:
    """Axis-aligned bounding box."""

    min: Vector
    max: Vector

    @classmethod
    def empty(cls) -> Bounds:
        return cls(Vector.filled(math.inf), Vector.filled(-math.inf))

    @property
    def is_empty(self) -> bool:
        return any(lo > hi for lo, hi in zip(self.min, self.max))

    def extend(self, other: Union[Bounds, Vector]) -> Bounds:
        """Grow to include a point or another box; returns self."""
        if isinstance(other, Bounds):
            lower, upper = other.min, other.max
        else:
            lower = upper = other
        self.min = self.min.elementwise_min(lower)
        self.max = self.max.elementwise_max(upper)
        return self

    def diagonal(self) -> Vector:
        return self.max - self.min

    def center(self) -> Vector:
        return (self.min + self.max) * 0.5


@dataclass(frozen=True)
class Ray:
    origin: Vector
    direction: Vector
    depth: int = 0

    def at(self, t: float) -> Vector:
        return self.origin + self.direction * t

    def __call__(self, t: float) -> Vector:
        return self.at(t)

    def normalized(self) -> Ray:
        return Ray(self.origin, self.direction.normalized(), self.depth)


_ZERO = Vector(0.0, 0.0, 0.0)


@dataclass
class SurfaceEvent:
    """Local description of a point on a surface."""

    position: Vector = _ZERO
    uv: tuple[float, float] = (0.0, 0.0)
    geometry_normal: Vector = _ZERO
    shading_normal: Vector = _ZERO
    tangent: Vector = _ZERO
    pdf: float = 0.0


@dataclass
class IntersectionStats:
    bvh_counter: int = 0
    prim_counter: int = 0


@dataclass
class Intersection(SurfaceEvent):
    """Closest hit found so far along a ray."""

    t: float = INFINITY
    stats: IntersectionStats = field(default_factory=IntersectionStats)


@dataclass
class AreaSample(SurfaceEvent):
    """Point sampled on a surface, with its area density in pdf."""


class Shape(ABC):
    """Geometry that rays can be intersected with."""

    visible = False

    @abstractmethod
    def intersect(self, ray: Ray, its: Intersection, rng: Sampler) -> bool:
        """Update its with a closer hit and return True, else return False."""

    @abstractmethod
    def bounding_box(self) -> Bounds:
        """Axis-aligned bounds of the shape."""

    @abstractmethod
    def centroid(self) -> Vector:
        """Representative center point of the shape."""

    def sample_area(self, rng: Sampler) -> AreaSample:
        raise NotImplementedError(f"{type(self).__name__} does not support area sampling")

    def mark_as_visible(self) -> None:
        self.visible = True