"""Rigid coordinate frames.

A ``Frame`` is an origin plus an orthonormal basis, both expressed in
world coordinates.  It maps local coordinates to world coordinates as
``world = R @ local + origin`` where the columns of ``R`` are the
frame's axes.  Every entity's ``transform(frame_a, frame_b)`` is built
on the four ``to_world_*`` / ``to_local_*`` methods here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

import numpy as np

from . import geom
from .entity import Entity, Kind
from .errors import GeometryError
from .primitives import Point, Vector, as_xyz
from .xform import Matrix, Rotation


@dataclass(frozen=True)
class Frame(Entity):
    """Origin and orthonormal axes of a right-handed coordinate system."""

    kind: ClassVar[Kind] = Kind.FRAME

    origin: Point = Point(0.0, 0.0, 0.0)
    x_axis: Vector = Vector(1.0, 0.0, 0.0)
    y_axis: Vector = Vector(0.0, 1.0, 0.0)
    z_axis: Vector = Vector(0.0, 0.0, 1.0)

    def __post_init__(self):
        object.__setattr__(self, 'origin', Point.of(self.origin))
        object.__setattr__(self, 'x_axis', Vector.of(self.x_axis))
        object.__setattr__(self, 'y_axis', Vector.of(self.y_axis))
        object.__setattr__(self, 'z_axis', Vector.of(self.z_axis))

    @classmethod
    def identity(cls) -> "Frame":
        return cls()

    @classmethod
    def from_rotation(cls, origin, rotation) -> "Frame":
        """Build a frame from an origin and a 3x3 matrix whose columns are the axes."""
        r = np.asarray(rotation, dtype=float)
        if r.shape != (3, 3):
            raise GeometryError(f'rotation must be 3x3, got shape {r.shape}')
        return cls(Point.of(origin),
                   Vector.from_array(r[:, 0]),
                   Vector.from_array(r[:, 1]),
                   Vector.from_array(r[:, 2]))

    @classmethod
    def from_axis_angle(cls, origin, axis, angle) -> "Frame":
        """Frame at ``origin`` rotated by ``angle`` radians about ``axis``."""
        return cls.from_rotation(origin, Rotation(as_xyz(axis), angle).rotation)

    @classmethod
    def from_matrix(cls, matrix) -> "Frame":
        """Frame whose local-to-world transform is ``matrix``."""
        m = Matrix(matrix)
        return cls.from_rotation(Point(*m.translation), m.rotation)

    @property
    def rotation(self) -> np.ndarray:
        return np.column_stack([self.x_axis.array, self.y_axis.array, self.z_axis.array])

    def matrix(self) -> Matrix:
        """local to world transform"""
        m = np.identity(4)
        m[:3, :3] = self.rotation
        m[:3, 3] = self.origin.array
        return Matrix(m)

    def inverse(self) -> "Frame":
        """Frame of the world expressed in this frame's coordinates."""
        rt = self.rotation.T
        return Frame.from_rotation(Point.from_array(-rt @ self.origin.array), rt)

    def compose(self, other: "Frame") -> "Frame":
        """World frame of ``other``, which is expressed in this frame."""
        origin = self.to_world_point(other.origin)
        return Frame.from_rotation(origin, self.rotation @ other.rotation)

    ## coordinate changes

    def to_world_point(self, p) -> Point:
        return Point.from_array(self.rotation @ geom.to_array(as_xyz(p)) + self.origin.array)

    def to_local_point(self, p) -> Point:
        return Point.from_array(self.rotation.T @ (geom.to_array(as_xyz(p)) - self.origin.array))

    def to_world_vector(self, v) -> Vector:
        return Vector.from_array(self.rotation @ geom.to_array(as_xyz(v)))

    def to_local_vector(self, v) -> Vector:
        return Vector.from_array(self.rotation.T @ geom.to_array(as_xyz(v)))

    ## entity capability

    def is_approx(self, other, tol=None) -> bool:
        return (isinstance(other, Frame)
                and self.origin.is_approx(other.origin, tol)
                and self.x_axis.is_approx(other.x_axis, tol)
                and self.y_axis.is_approx(other.y_axis, tol)
                and self.z_axis.is_approx(other.z_axis, tol))

    def is_degenerate(self, tol=None) -> bool:
        r = self.rotation
        if not (np.all(np.isfinite(r)) and geom.isfinite3(self.origin.xyz)):
            return True
        tol = geom.resolve_tol(tol)
        return not np.allclose(r.T @ r, np.identity(3), rtol=0.0, atol=tol)

    def translate(self, vector) -> "Frame":
        return Frame(self.origin.translate(vector), self.x_axis, self.y_axis, self.z_axis)

    def transform(self, frame_a, frame_b) -> "Frame":
        return Frame(self.origin.transform(frame_a, frame_b),
                     self.x_axis.transform(frame_a, frame_b),
                     self.y_axis.transform(frame_a, frame_b),
                     self.z_axis.transform(frame_a, frame_b))

    def apply(self, matrix) -> "Frame":
        return Frame(self.origin.apply(matrix),
                     self.x_axis.apply(matrix),
                     self.y_axis.apply(matrix),
                     self.z_axis.apply(matrix))


__all__ = ['Frame']
