"""Sphere and axis-aligned box entities.

A sphere stands for the solid ball.  A box is stored with its two
corners exactly as given; ``min_point()`` and ``max_point()`` give the
canonical per-axis ordering and every query works on those, so callers
may pass the corners in either order.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import product
from math import isfinite, pi
from typing import ClassVar, Tuple

from . import geom
from .entity import Entity, Kind
from .errors import GeometryError
from .primitives import Point, Vector, as_xyz


@dataclass(frozen=True, init=False)
class Sphere(Entity):
    """Solid ball of ``radius`` around ``center``.

    ``Sphere(center, radius)`` or ``Sphere(radius, cx, cy, cz)``.  Given
    only ``radius=``, the sphere is centered on the origin.
    """

    kind: ClassVar[Kind] = Kind.SPHERE

    center: Point
    radius: float

    def __init__(self, *args, center=None, radius=None):
        if not args and radius is not None:
            args = (Point(0, 0, 0) if center is None else center, radius)
        if len(args) == 2:
            c, r = as_xyz(args[0]), args[1]
        elif len(args) == 4:
            r, c = args[0], as_xyz(args[1:])
        else:
            raise GeometryError(f'Sphere expects (center, radius) or (radius, cx, cy, cz), got {len(args)} arguments')
        if not geom.isgoodnum(r):
            raise GeometryError(f'radius must be a number, got {r!r}')
        object.__setattr__(self, 'center', Point(*c))
        object.__setattr__(self, 'radius', float(r))

    def __repr__(self) -> str:
        return f'Sphere({self.center!r}, {self.radius!r})'

    def area(self) -> float:
        return 4.0*pi*self.radius*self.radius

    def volume(self) -> float:
        return 4.0/3.0*pi*self.radius**3

    def is_inside(self, point, tol=None) -> bool:
        return self.center.distance(point) <= self.radius + geom.resolve_tol(tol)

    def clamp(self) -> "Box":
        r = (self.radius, self.radius, self.radius)
        c = self.center.xyz
        return Box(geom.sub(c, r), geom.add(c, r))

    def is_approx(self, other, tol=None) -> bool:
        return (isinstance(other, Sphere)
                and self.center.is_approx(other.center, tol)
                and geom.close(self.radius, other.radius, tol))

    def is_degenerate(self, tol=None) -> bool:
        if not (geom.isfinite3(self.center.xyz) and isfinite(self.radius)):
            return True
        return self.radius <= geom.resolve_tol(tol)

    def translate(self, vector) -> "Sphere":
        return Sphere(self.center.translate(vector), self.radius)

    def transform(self, frame_a, frame_b) -> "Sphere":
        return Sphere(self.center.transform(frame_a, frame_b), self.radius)

    def apply(self, matrix) -> "Sphere":
        return Sphere(self.center.apply(matrix), self.radius)


@dataclass(frozen=True, init=False)
class Box(Entity):
    """Axis-aligned box spanned by ``point0`` and ``point1``."""

    kind: ClassVar[Kind] = Kind.BOX

    point0: Point
    point1: Point

    def __init__(self, *args):
        if len(args) == 2:
            a, b = as_xyz(args[0]), as_xyz(args[1])
        elif len(args) == 6:
            a, b = as_xyz(args[:3]), as_xyz(args[3:])
        else:
            raise GeometryError(f'Box expects 2 corners or 6 scalars, got {len(args)} arguments')
        object.__setattr__(self, 'point0', Point(*a))
        object.__setattr__(self, 'point1', Point(*b))

    def __repr__(self) -> str:
        return f'Box({self.point0!r}, {self.point1!r})'

    def min_point(self) -> Point:
        a, b = self.point0, self.point1
        return Point(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))

    def max_point(self) -> Point:
        a, b = self.point0, self.point1
        return Point(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))

    def center(self) -> Point:
        return Point(*geom.lerp(self.point0.xyz, self.point1.xyz, 0.5))

    def extent(self) -> Vector:
        return self.max_point() - self.min_point()

    def volume(self) -> float:
        e = self.extent()
        return e.x*e.y*e.z

    def corners(self) -> Tuple[Point, ...]:
        lo, hi = self.min_point().xyz, self.max_point().xyz
        return tuple(Point(x, y, z)
                     for x, y, z in product((lo[0], hi[0]), (lo[1], hi[1]), (lo[2], hi[2])))

    def is_inside(self, point, tol=None) -> bool:
        tol = geom.resolve_tol(tol)
        p = as_xyz(point)
        lo, hi = self.min_point().xyz, self.max_point().xyz
        return all(lo[i] - tol <= p[i] <= hi[i] + tol for i in range(3))

    def intersects(self, other: "Box", tol=None) -> bool:
        """Do the two boxes overlap (touching counts)?"""
        tol = geom.resolve_tol(tol)
        alo, ahi = self.min_point().xyz, self.max_point().xyz
        blo, bhi = other.min_point().xyz, other.max_point().xyz
        return all(alo[i] <= bhi[i] + tol and blo[i] <= ahi[i] + tol for i in range(3))

    def merged(self, other: "Box") -> "Box":
        """Smallest box containing both boxes."""
        alo, ahi = self.min_point().xyz, self.max_point().xyz
        blo, bhi = other.min_point().xyz, other.max_point().xyz
        return Box(tuple(min(alo[i], blo[i]) for i in range(3)),
                   tuple(max(ahi[i], bhi[i]) for i in range(3)))

    def clamp(self) -> "Box":
        return Box(self.min_point(), self.max_point())

    def is_approx(self, other, tol=None) -> bool:
        return (isinstance(other, Box)
                and self.min_point().is_approx(other.min_point(), tol)
                and self.max_point().is_approx(other.max_point(), tol))

    def is_degenerate(self, tol=None) -> bool:
        if not (geom.isfinite3(self.point0.xyz) and geom.isfinite3(self.point1.xyz)):
            return True
        return geom.vclose(self.point0.xyz, self.point1.xyz, tol)

    def translate(self, vector) -> "Box":
        return Box(self.point0.translate(vector), self.point1.translate(vector))

    def transform(self, frame_a, frame_b) -> "Box":
        return Box(self.point0.transform(frame_a, frame_b),
                   self.point1.transform(frame_a, frame_b))

    def apply(self, matrix) -> "Box":
        return Box(self.point0.apply(matrix), self.point1.apply(matrix))


__all__ = ['Sphere', 'Box']
