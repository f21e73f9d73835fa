"""Plane, triangle and circle entities.

The three planar kinds share a supporting plane, available through
``to_plane()`` and ``unit_normal()``.  The predicate and intersection
tables treat them uniformly through that interface.  A circle stands
for the closed disk it bounds.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import isfinite, pi, sqrt
from typing import ClassVar, Optional, Tuple

from . import geom
from .entity import Entity, Kind
from .errors import GeometryError
from .linear import Segment
from .primitives import Point, Vector, as_xyz


class PlanarEntity(Entity):
    """Entity lying in a single plane."""

    __slots__ = ()

    def unit_normal(self) -> Vector:
        raise NotImplementedError

    def to_plane(self) -> "Plane":
        raise NotImplementedError


@dataclass(frozen=True, init=False)
class Plane(PlanarEntity):
    """Infinite plane through ``origin`` with normal ``normal``.

    The normal need not be of unit length; it only has to be non-zero
    for the plane to be usable.
    """

    kind: ClassVar[Kind] = Kind.PLANE

    origin: Point
    normal: Vector

    def __init__(self, *args):
        if len(args) == 2:
            o, n = as_xyz(args[0]), as_xyz(args[1])
        elif len(args) == 6:
            o, n = as_xyz(args[:3]), as_xyz(args[3:])
        else:
            raise GeometryError(f'Plane expects origin and normal or 6 scalars, got {len(args)} arguments')
        object.__setattr__(self, 'origin', Point(*o))
        object.__setattr__(self, 'normal', Vector(*n))

    def __repr__(self) -> str:
        return f'Plane({self.origin!r}, {self.normal!r})'

    @classmethod
    def from_points(cls, a, b, c) -> "Plane":
        """Plane through three points, oriented by the right-hand rule.

        Collinear points give a plane with a zero normal, which is
        degenerate.
        """
        a, b, c = as_xyz(a), as_xyz(b), as_xyz(c)
        n = geom.cross(geom.sub(b, a), geom.sub(c, a))
        u = geom.unit(n, geom.EPSILON_MACHINE)
        return cls(a, u if u is not None else (0.0, 0.0, 0.0))

    def unit_normal(self) -> Vector:
        return self.normal.normalized()

    def to_plane(self) -> "Plane":
        return self

    def d(self) -> float:
        """Offset in the implicit form ``n . x + d = 0`` with unit ``n``."""
        return -geom.dot(self.unit_normal().xyz, self.origin.xyz)

    def signed_distance(self, point) -> float:
        return geom.dot(geom.sub(as_xyz(point), self.origin.xyz), self.unit_normal().xyz)

    def distance(self, point) -> float:
        return abs(self.signed_distance(point))

    def project(self, point) -> Point:
        p = as_xyz(point)
        s = self.signed_distance(p)
        return Point(*geom.sub(p, geom.scale3(self.unit_normal().xyz, s)))

    def is_inside(self, point, tol=None) -> bool:
        return geom.is_zero(self.signed_distance(point), tol)

    def reverse(self) -> "Plane":
        return Plane(self.origin, -self.normal)

    reversed = reverse

    def is_approx(self, other, tol=None) -> bool:
        return (isinstance(other, Plane)
                and self.origin.is_approx(other.origin, tol)
                and self.normal.is_approx(other.normal, tol))

    def is_degenerate(self, tol=None) -> bool:
        return not geom.isfinite3(self.origin.xyz) or self.normal.is_degenerate(tol)

    def translate(self, vector) -> "Plane":
        return Plane(self.origin.translate(vector), self.normal)

    def transform(self, frame_a, frame_b) -> "Plane":
        return Plane(self.origin.transform(frame_a, frame_b),
                     self.normal.transform(frame_a, frame_b))

    def apply(self, matrix) -> "Plane":
        return Plane(self.origin.apply(matrix), self.normal.apply(matrix))


@dataclass(frozen=True, init=False)
class Triangle(PlanarEntity):
    """Triangle with vertices ``p0``, ``p1``, ``p2``."""

    kind: ClassVar[Kind] = Kind.TRIANGLE

    p0: Point
    p1: Point
    p2: Point

    def __init__(self, *args):
        if len(args) == 3:
            pts = [as_xyz(a) for a in args]
        elif len(args) == 9:
            pts = [as_xyz(args[i:i+3]) for i in (0, 3, 6)]
        else:
            raise GeometryError(f'Triangle expects 3 points or 9 scalars, got {len(args)} arguments')
        object.__setattr__(self, 'p0', Point(*pts[0]))
        object.__setattr__(self, 'p1', Point(*pts[1]))
        object.__setattr__(self, 'p2', Point(*pts[2]))

    def __repr__(self) -> str:
        return f'Triangle({self.p0!r}, {self.p1!r}, {self.p2!r})'

    def vertices(self) -> Tuple[Point, Point, Point]:
        return (self.p0, self.p1, self.p2)

    def edges(self) -> Tuple[Segment, Segment, Segment]:
        return (Segment(self.p0, self.p1),
                Segment(self.p1, self.p2),
                Segment(self.p2, self.p0))

    def _cross(self):
        return geom.cross(geom.sub(self.p1.xyz, self.p0.xyz),
                          geom.sub(self.p2.xyz, self.p0.xyz))

    def normal(self) -> Vector:
        """Unit normal by the right-hand rule, zero when degenerate."""
        return Vector(*self._cross()).normalized()

    unit_normal = normal

    def area(self) -> float:
        return 0.5*geom.mag(self._cross())

    def perimeter(self) -> float:
        return (self.p0.distance(self.p1)
                + self.p1.distance(self.p2)
                + self.p2.distance(self.p0))

    def centroid(self) -> Point:
        x = (self.p0.x + self.p1.x + self.p2.x)/3.0
        y = (self.p0.y + self.p1.y + self.p2.y)/3.0
        z = (self.p0.z + self.p1.z + self.p2.z)/3.0
        return Point(x, y, z)

    def to_plane(self) -> Plane:
        return Plane(self.p0, self.normal())

    def barycentric(self, point) -> Optional[Tuple[float, float, float]]:
        """Barycentric coordinates ``(u, v, w)`` of the projection of
        ``point`` onto the triangle's plane, with
        ``point ~ u*p0 + v*p1 + w*p2``.  ``None`` for a degenerate
        triangle."""
        a, b, c = self.p0.xyz, self.p1.xyz, self.p2.xyz
        v0 = geom.sub(b, a)
        v1 = geom.sub(c, a)
        v2 = geom.sub(as_xyz(point), a)
        d00 = geom.dot(v0, v0)
        d01 = geom.dot(v0, v1)
        d11 = geom.dot(v1, v1)
        d20 = geom.dot(v2, v0)
        d21 = geom.dot(v2, v1)
        denom = d00*d11 - d01*d01
        if denom == 0.0:
            return None
        v = (d11*d20 - d01*d21)/denom
        w = (d00*d21 - d01*d20)/denom
        return (1.0 - v - w, v, w)

    def is_inside(self, point, tol=None) -> bool:
        """Does ``point`` lie in the plane of the triangle and within its
        (closed) boundary?"""
        if self.is_degenerate(tol):
            return False
        tol = geom.resolve_tol(tol)
        if not self.to_plane().is_inside(point, tol):
            return False
        if all(u >= -tol for u in self.barycentric(point)):
            return True
        return any(e.is_inside(point, tol) for e in self.edges())

    def clamp(self):
        """Tightest axis-aligned box containing the triangle."""
        from .solids import Box
        pts = [p.xyz for p in self.vertices()]
        lo = tuple(min(p[i] for p in pts) for i in range(3))
        hi = tuple(max(p[i] for p in pts) for i in range(3))
        return Box(lo, hi)

    def is_approx(self, other, tol=None) -> bool:
        return (isinstance(other, Triangle)
                and self.p0.is_approx(other.p0, tol)
                and self.p1.is_approx(other.p1, tol)
                and self.p2.is_approx(other.p2, tol))

    def is_degenerate(self, tol=None) -> bool:
        if not all(geom.isfinite3(p.xyz) for p in self.vertices()):
            return True
        return geom.vzero(self._cross(), tol)

    def translate(self, vector) -> "Triangle":
        return Triangle(*(p.translate(vector) for p in self.vertices()))

    def transform(self, frame_a, frame_b) -> "Triangle":
        return Triangle(*(p.transform(frame_a, frame_b) for p in self.vertices()))

    def apply(self, matrix) -> "Triangle":
        return Triangle(*(p.apply(matrix) for p in self.vertices()))


@dataclass(frozen=True)
class Circle(PlanarEntity):
    """Closed disk of ``radius`` around ``center`` in the plane with
    normal ``normal``."""

    kind: ClassVar[Kind] = Kind.CIRCLE

    center: Point = Point(0.0, 0.0, 0.0)
    radius: float = 1.0
    normal: Vector = Vector(0.0, 0.0, 1.0)

    def __post_init__(self):
        if not geom.isgoodnum(self.radius):
            raise GeometryError(f'radius must be a number, got {self.radius!r}')
        object.__setattr__(self, 'center', Point.of(self.center))
        object.__setattr__(self, 'radius', float(self.radius))
        object.__setattr__(self, 'normal', Vector.of(self.normal))

    def unit_normal(self) -> Vector:
        return self.normal.normalized()

    def to_plane(self) -> Plane:
        return Plane(self.center, self.normal)

    def area(self) -> float:
        return pi*self.radius*self.radius

    def perimeter(self) -> float:
        return 2.0*pi*self.radius

    def is_inside(self, point, tol=None) -> bool:
        if self.is_degenerate(tol):
            return False
        tol = geom.resolve_tol(tol)
        plane = self.to_plane()
        if not plane.is_inside(point, tol):
            return False
        return self.center.distance(plane.project(point)) <= self.radius + tol

    def clamp(self):
        """Tightest axis-aligned box containing the disk."""
        from .solids import Box
        n = self.unit_normal().xyz
        half = tuple(self.radius*sqrt(max(0.0, 1.0 - n[i]*n[i])) for i in range(3))
        c = self.center.xyz
        return Box(geom.sub(c, half), geom.add(c, half))

    def is_approx(self, other, tol=None) -> bool:
        return (isinstance(other, Circle)
                and self.center.is_approx(other.center, tol)
                and geom.close(self.radius, other.radius, tol)
                and self.normal.is_approx(other.normal, tol))

    def is_degenerate(self, tol=None) -> bool:
        if not (geom.isfinite3(self.center.xyz) and geom.isfinite3(self.normal.xyz)
                and isfinite(self.radius)):
            return True
        return self.radius <= geom.resolve_tol(tol) or self.normal.is_degenerate(tol)

    def translate(self, vector) -> "Circle":
        return Circle(self.center.translate(vector), self.radius, self.normal)

    def transform(self, frame_a, frame_b) -> "Circle":
        return Circle(self.center.transform(frame_a, frame_b), self.radius,
                      self.normal.transform(frame_a, frame_b))

    def apply(self, matrix) -> "Circle":
        return Circle(self.center.apply(matrix), self.radius, self.normal.apply(matrix))


__all__ = ['PlanarEntity', 'Plane', 'Triangle', 'Circle']
