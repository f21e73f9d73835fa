"""Point and vector entities.

A ``Point`` is a location, a ``Vector`` is a free displacement.  The
distinction matters under frame changes: points pick up the frame
origin, vectors only the rotation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Tuple

import numpy as np

from . import geom
from .entity import Entity, Kind
from .errors import GeometryError

Vec3 = Tuple[float, float, float]


def _coord(value, name):
    if not geom.isgoodnum(value):
        raise GeometryError(f'{name} must be a number, got {value!r}')
    return float(value)


def as_xyz(value) -> Vec3:
    """Return the XYZ components of a point, vector or 3-sequence."""

    if isinstance(value, (Point, Vector)):
        return value.xyz
    if geom.isvect3(value):
        return float(value[0]), float(value[1]), float(value[2])
    raise GeometryError(f'expected a point, vector or 3 numbers, got {value!r}')


@dataclass(frozen=True)
class Point(Entity):
    """Location in 3D space."""

    kind: ClassVar[Kind] = Kind.POINT

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, 'x', _coord(self.x, 'x'))
        object.__setattr__(self, 'y', _coord(self.y, 'y'))
        object.__setattr__(self, 'z', _coord(self.z, 'z'))

    @classmethod
    def of(cls, value) -> "Point":
        """Coerce a point or 3-sequence to a ``Point``."""
        if isinstance(value, Point):
            return value
        return cls(*as_xyz(value))

    @classmethod
    def from_array(cls, arr) -> "Point":
        return cls(*geom.from_array(arr))

    @classmethod
    def origin(cls) -> "Point":
        return cls(0.0, 0.0, 0.0)

    @property
    def xyz(self) -> Vec3:
        return (self.x, self.y, self.z)

    @property
    def array(self) -> np.ndarray:
        return geom.to_array(self.xyz)

    def __iter__(self):
        return iter(self.xyz)

    def __getitem__(self, i):
        return self.xyz[i]

    def __add__(self, other) -> "Point":
        if isinstance(other, Vector):
            return Point(*geom.add(self.xyz, other.xyz))
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Point):
            return Vector(*geom.sub(self.xyz, other.xyz))
        if isinstance(other, Vector):
            return Point(*geom.sub(self.xyz, other.xyz))
        return NotImplemented

    def to_vector(self) -> "Vector":
        return Vector(*self.xyz)

    def distance(self, other) -> float:
        return geom.dist(self.xyz, as_xyz(other))

    def is_approx(self, other, tol=None) -> bool:
        return isinstance(other, Point) and geom.vclose(self.xyz, other.xyz, tol)

    def is_degenerate(self, tol=None) -> bool:
        return not geom.isfinite3(self.xyz)

    def translate(self, vector) -> "Point":
        return Point(*geom.add(self.xyz, as_xyz(vector)))

    def transform(self, frame_a, frame_b) -> "Point":
        return frame_b.to_local_point(frame_a.to_world_point(self))

    def apply(self, matrix) -> "Point":
        return Point(*matrix.transform_point(self.xyz))

    def is_inside(self, point, tol=None) -> bool:
        """A point contains only itself."""
        return geom.vclose(self.xyz, as_xyz(point), tol)


@dataclass(frozen=True)
class Vector(Entity):
    """Free 3D displacement or direction."""

    kind: ClassVar[Kind] = Kind.VECTOR

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, 'x', _coord(self.x, 'x'))
        object.__setattr__(self, 'y', _coord(self.y, 'y'))
        object.__setattr__(self, 'z', _coord(self.z, 'z'))

    @classmethod
    def of(cls, value) -> "Vector":
        if isinstance(value, Vector):
            return value
        return cls(*as_xyz(value))

    @classmethod
    def from_array(cls, arr) -> "Vector":
        return cls(*geom.from_array(arr))

    @classmethod
    def zeros(cls) -> "Vector":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def unit_x(cls) -> "Vector":
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def unit_y(cls) -> "Vector":
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def unit_z(cls) -> "Vector":
        return cls(0.0, 0.0, 1.0)

    @property
    def xyz(self) -> Vec3:
        return (self.x, self.y, self.z)

    @property
    def array(self) -> np.ndarray:
        return geom.to_array(self.xyz)

    def __iter__(self):
        return iter(self.xyz)

    def __getitem__(self, i):
        return self.xyz[i]

    def __add__(self, other) -> "Vector":
        if isinstance(other, Vector):
            return Vector(*geom.add(self.xyz, other.xyz))
        return NotImplemented

    def __sub__(self, other) -> "Vector":
        if isinstance(other, Vector):
            return Vector(*geom.sub(self.xyz, other.xyz))
        return NotImplemented

    def __mul__(self, c) -> "Vector":
        if geom.isgoodnum(c):
            return Vector(*geom.scale3(self.xyz, c))
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, c) -> "Vector":
        if geom.isgoodnum(c):
            return Vector(*geom.scale3(self.xyz, 1.0/c))
        return NotImplemented

    def __neg__(self) -> "Vector":
        return Vector(*geom.neg(self.xyz))

    def dot(self, other) -> float:
        return geom.dot(self.xyz, as_xyz(other))

    def cross(self, other) -> "Vector":
        return Vector(*geom.cross(self.xyz, as_xyz(other)))

    def norm(self) -> float:
        return geom.mag(self.xyz)

    def normalized(self) -> "Vector":
        """Unit vector in the same direction; the zero vector stays zero."""
        u = geom.unit(self.xyz, geom.EPSILON_MACHINE)
        if u is None:
            return Vector.zeros()
        return Vector(*u)

    def angle(self, other) -> float:
        """Angle to another vector in radians."""
        return geom.angle(self.xyz, as_xyz(other))

    def is_approx(self, other, tol=None) -> bool:
        return isinstance(other, Vector) and geom.vclose(self.xyz, other.xyz, tol)

    def is_degenerate(self, tol=None) -> bool:
        return not geom.isfinite3(self.xyz) or geom.vzero(self.xyz, tol)

    def translate(self, vector) -> "Vector":
        # free vectors have no position
        as_xyz(vector)
        return self

    def transform(self, frame_a, frame_b) -> "Vector":
        return frame_b.to_local_vector(frame_a.to_world_vector(self))

    def apply(self, matrix) -> "Vector":
        return Vector(*matrix.transform_vector(self.xyz))


__all__ = ['Vec3', 'as_xyz', 'Point', 'Vector']
