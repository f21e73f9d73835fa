"""Line, ray and segment entities.

All three are parameterized as ``origin + t * direction``.  They differ
only in the admissible parameter interval:

=========  ==============  ===========================
kind       direction       interval
=========  ==============  ===========================
line       ``direction``   ``-inf < t < inf``
ray        ``direction``   ``0 <= t < inf``
segment    ``p1 - p0``     ``0 <= t <= 1``
=========  ==============  ===========================

``LinearEntity`` holds everything that only depends on that
parameterization; the intersection engine relies on it too.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import inf, pi
from typing import ClassVar, Tuple

from . import geom
from .entity import Entity, Kind
from .errors import GeometryError
from .primitives import Point, Vector, as_xyz


def _point_pair(args, what):
    """Accept ``(a, b)`` as two 3-vectors or six scalars."""
    if len(args) == 2:
        return as_xyz(args[0]), as_xyz(args[1])
    if len(args) == 6:
        return as_xyz(args[:3]), as_xyz(args[3:])
    raise GeometryError(f'{what} expects 2 points/vectors or 6 scalars, got {len(args)} arguments')


class LinearEntity(Entity):
    """Shared behaviour of line-like entities."""

    __slots__ = ()

    t_min: ClassVar[float] = -inf
    t_max: ClassVar[float] = inf

    @property
    def origin(self) -> Point:
        raise NotImplementedError

    @property
    def direction(self) -> Vector:
        raise NotImplementedError

    def interval(self) -> Tuple[float, float]:
        return (self.t_min, self.t_max)

    def point_at(self, t) -> Point:
        return Point(*geom.add(self.origin.xyz, geom.scale3(self.direction.xyz, t)))

    def project(self, point) -> float:
        """Parameter of the orthogonal projection of ``point`` on the
        supporting line (unclamped)."""
        d = self.direction.xyz
        dd = geom.dot(d, d)
        if dd == 0.0:
            return 0.0
        return geom.dot(geom.sub(as_xyz(point), self.origin.xyz), d)/dd

    def closest_point(self, point) -> Point:
        """Closest point of the entity (within its interval) to ``point``."""
        t = geom.clamp(self.project(point), self.t_min, self.t_max)
        return self.point_at(t)

    def distance(self, point) -> float:
        return geom.dist(self.closest_point(point).xyz, as_xyz(point))

    def is_inside(self, point, tol=None) -> bool:
        """Does ``point`` lie on the entity, within ``tol``?"""
        return geom.is_zero(self.distance(point), tol)

    def to_vector(self) -> Vector:
        return self.direction

    def angle(self, other) -> float:
        """Angle in radians between this entity and ``other``.

        For directional entities the angle between directions, in
        `[0, pi]`.  For planes, triangles and circles the angle between
        the direction and the plane, in `[0, pi/2]`.
        """
        from .planar import PlanarEntity
        if isinstance(other, PlanarEntity):
            return abs(self.direction.angle(other.unit_normal()) - pi/2.0)
        return self.direction.angle(_direction_of(other))

    def is_degenerate(self, tol=None) -> bool:
        return not geom.isfinite3(self.origin.xyz) or self.direction.is_degenerate(tol)


def _direction_of(other) -> Vector:
    if isinstance(other, Vector):
        return other
    if isinstance(other, LinearEntity):
        return other.direction
    raise GeometryError(f'cannot measure an angle against {other!r}')


@dataclass(frozen=True, init=False)
class Line(LinearEntity):
    """Infinite line through ``origin`` along ``direction``."""

    kind: ClassVar[Kind] = Kind.LINE

    _origin: Point
    _direction: Vector

    def __init__(self, *args):
        o, d = _point_pair(args, 'Line')
        object.__setattr__(self, '_origin', Point(*o))
        object.__setattr__(self, '_direction', Vector(*d))

    def __repr__(self) -> str:
        return f'Line({self._origin!r}, {self._direction!r})'

    @property
    def origin(self) -> Point:
        return self._origin

    @property
    def direction(self) -> Vector:
        return self._direction

    def reverse(self) -> "Line":
        return Line(self._origin, -self._direction)

    reversed = reverse

    def to_ray(self) -> "Ray":
        return Ray(self._origin, self._direction)

    def to_segment(self, t0=0.0, t1=1.0) -> "Segment":
        return Segment(self.point_at(t0), self.point_at(t1))

    def is_approx(self, other, tol=None) -> bool:
        return (isinstance(other, Line)
                and self._origin.is_approx(other._origin, tol)
                and self._direction.is_approx(other._direction, tol))

    def translate(self, vector) -> "Line":
        return Line(self._origin.translate(vector), self._direction)

    def transform(self, frame_a, frame_b) -> "Line":
        return Line(self._origin.transform(frame_a, frame_b),
                    self._direction.transform(frame_a, frame_b))

    def apply(self, matrix) -> "Line":
        return Line(self._origin.apply(matrix), self._direction.apply(matrix))


@dataclass(frozen=True, init=False)
class Ray(LinearEntity):
    """Half-line starting at ``origin`` and running along ``direction``."""

    kind: ClassVar[Kind] = Kind.RAY
    t_min: ClassVar[float] = 0.0

    _origin: Point
    _direction: Vector

    def __init__(self, *args):
        o, d = _point_pair(args, 'Ray')
        object.__setattr__(self, '_origin', Point(*o))
        object.__setattr__(self, '_direction', Vector(*d))

    def __repr__(self) -> str:
        return f'Ray({self._origin!r}, {self._direction!r})'

    @property
    def origin(self) -> Point:
        return self._origin

    @property
    def direction(self) -> Vector:
        return self._direction

    def reverse(self) -> "Ray":
        """Ray from the same origin pointing the other way."""
        return Ray(self._origin, -self._direction)

    reversed = reverse

    def to_line(self) -> Line:
        return Line(self._origin, self._direction)

    def is_approx(self, other, tol=None) -> bool:
        return (isinstance(other, Ray)
                and self._origin.is_approx(other._origin, tol)
                and self._direction.is_approx(other._direction, tol))

    def translate(self, vector) -> "Ray":
        return Ray(self._origin.translate(vector), self._direction)

    def transform(self, frame_a, frame_b) -> "Ray":
        return Ray(self._origin.transform(frame_a, frame_b),
                   self._direction.transform(frame_a, frame_b))

    def apply(self, matrix) -> "Ray":
        return Ray(self._origin.apply(matrix), self._direction.apply(matrix))


@dataclass(frozen=True, init=False)
class Segment(LinearEntity):
    """Finite segment between ``point0`` and ``point1``."""

    kind: ClassVar[Kind] = Kind.SEGMENT
    t_min: ClassVar[float] = 0.0
    t_max: ClassVar[float] = 1.0

    point0: Point
    point1: Point

    def __init__(self, *args):
        p0, p1 = _point_pair(args, 'Segment')
        object.__setattr__(self, 'point0', Point(*p0))
        object.__setattr__(self, 'point1', Point(*p1))

    def __repr__(self) -> str:
        return f'Segment({self.point0!r}, {self.point1!r})'

    @property
    def origin(self) -> Point:
        return self.point0

    @property
    def direction(self) -> Vector:
        return self.point1 - self.point0

    def vertices(self) -> Tuple[Point, Point]:
        return (self.point0, self.point1)

    def length(self) -> float:
        return self.point0.distance(self.point1)

    def centroid(self) -> Point:
        return Point(*geom.lerp(self.point0.xyz, self.point1.xyz, 0.5))

    def reverse(self) -> "Segment":
        return Segment(self.point1, self.point0)

    reversed = reverse

    def to_line(self) -> Line:
        return Line(self.point0, self.direction)

    def to_ray(self) -> Ray:
        return Ray(self.point0, self.direction)

    def clamp(self):
        """Tightest axis-aligned box containing the segment."""
        from .solids import Box
        return Box(self.point0, self.point1)

    def is_approx(self, other, tol=None) -> bool:
        return (isinstance(other, Segment)
                and self.point0.is_approx(other.point0, tol)
                and self.point1.is_approx(other.point1, tol))

    def is_degenerate(self, tol=None) -> bool:
        if not (geom.isfinite3(self.point0.xyz) and geom.isfinite3(self.point1.xyz)):
            return True
        return geom.is_zero(self.length(), tol)

    def translate(self, vector) -> "Segment":
        return Segment(self.point0.translate(vector), self.point1.translate(vector))

    def transform(self, frame_a, frame_b) -> "Segment":
        return Segment(self.point0.transform(frame_a, frame_b),
                       self.point1.transform(frame_a, frame_b))

    def apply(self, matrix) -> "Segment":
        return Segment(self.point0.apply(matrix), self.point1.apply(matrix))


__all__ = ['LinearEntity', 'Line', 'Ray', 'Segment']
