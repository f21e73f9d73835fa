"""Pairwise predicates: parallel, orthogonal, collinear, coplanar.

Each predicate is a complete ``SymmetricDispatch`` table over all
pairs of kinds.  The kinds play one of three roles:

* *directional*: vector, line, ray, segment (they carry a direction)
* *planar*: plane, triangle, circle (they carry a normal)
* *locus*: point

Sphere, box, frame and none take part in no predicate; their table
entries are the constant ``False``.  A degenerate operand always gives
``False``.
"""

from __future__ import annotations

import logging

from . import geom
from .dispatch import SymmetricDispatch
from .entity import Entity, Kind
from .linear import LinearEntity
from .logging_utils import debug_log_call
from .primitives import Vector

logger = logging.getLogger(__name__)

LINEAR = (Kind.LINE, Kind.RAY, Kind.SEGMENT)
DIRECTIONAL = (Kind.VECTOR,) + LINEAR
PLANAR = (Kind.PLANE, Kind.TRIANGLE, Kind.CIRCLE)


def _false(a, b, tol):
    return False


def _true(a, b, tol):
    return True


def _direction(e):
    if isinstance(e, Vector):
        return e.xyz
    return e.direction.xyz


def _normal(e):
    return e.unit_normal().xyz


def _on_line(point, linear, tol):
    """distance from ``point`` to the infinite line supporting ``linear``"""
    t = linear.project(point)
    return geom.is_zero(point.distance(linear.point_at(t)), tol)


def _register(table, kinds_a, kinds_b, func):
    """Register ``func`` for every pair in ``kinds_a x kinds_b``; pairs
    already present (the diagonal of a role with itself) are skipped."""
    for ka in kinds_a:
        for kb in kinds_b:
            if (ka, kb) not in table:
                table.add(ka, kb, func)


## is_parallel
## -----------

_parallel = SymmetricDispatch('is_parallel', default=_false)

def _parallel_dir_dir(a, b, tol):
    return geom.vparallel(_direction(a), _direction(b), tol)

def _parallel_dir_planar(a, b, tol):
    return geom.vorthogonal(_direction(a), _normal(b), tol)

def _parallel_planar_planar(a, b, tol):
    return geom.vparallel(_normal(a), _normal(b), tol)

_register(_parallel, DIRECTIONAL, DIRECTIONAL, _parallel_dir_dir)
_register(_parallel, DIRECTIONAL, PLANAR, _parallel_dir_planar)
_register(_parallel, PLANAR, PLANAR, _parallel_planar_planar)
_parallel.fill()


## is_orthogonal
## -------------

_orthogonal = SymmetricDispatch('is_orthogonal', default=_false)

def _orthogonal_dir_dir(a, b, tol):
    return geom.vorthogonal(_direction(a), _direction(b), tol)

def _orthogonal_dir_planar(a, b, tol):
    return geom.vparallel(_direction(a), _normal(b), tol)

def _orthogonal_planar_planar(a, b, tol):
    return geom.vorthogonal(_normal(a), _normal(b), tol)

_register(_orthogonal, DIRECTIONAL, DIRECTIONAL, _orthogonal_dir_dir)
_register(_orthogonal, DIRECTIONAL, PLANAR, _orthogonal_dir_planar)
_register(_orthogonal, PLANAR, PLANAR, _orthogonal_planar_planar)
_orthogonal.fill()


## is_collinear
## ------------

_collinear = SymmetricDispatch('is_collinear', default=_false)

def _collinear_point_linear(p, e, tol):
    return _on_line(p, e, tol)

def _collinear_linear_linear(a, b, tol):
    # each origin on the other's line; directions only agree within tol
    return (geom.vparallel(a.direction.xyz, b.direction.xyz, tol)
            and _on_line(b.origin, a, tol)
            and _on_line(a.origin, b, tol))

_collinear.add(Kind.POINT, Kind.POINT, _true)
_register(_collinear, (Kind.POINT,), LINEAR, _collinear_point_linear)
_register(_collinear, LINEAR, LINEAR, _collinear_linear_linear)
_register(_collinear, (Kind.VECTOR,), DIRECTIONAL, _parallel_dir_dir)
_collinear.fill()


## is_coplanar
## -----------

_coplanar = SymmetricDispatch('is_coplanar', default=_false)

def _coplanar_point_planar(p, e, tol):
    return e.to_plane().is_inside(p, tol)

def _coplanar_linear_linear(a, b, tol):
    da, db = a.direction.xyz, b.direction.xyz
    if geom.vparallel(da, db, tol):
        return True
    n = geom.unit(geom.cross(da, db), geom.EPSILON_MACHINE)
    return geom.is_zero(geom.dot(geom.sub(b.origin.xyz, a.origin.xyz), n), tol)

def _coplanar_linear_planar(e, p, tol):
    plane = p.to_plane()
    return geom.vorthogonal(e.direction.xyz, _normal(p), tol) and plane.is_inside(e.origin, tol)

def _coplanar_planar_planar(a, b, tol):
    return (geom.vparallel(_normal(a), _normal(b), tol)
            and a.to_plane().is_inside(_origin_of(b), tol)
            and b.to_plane().is_inside(_origin_of(a), tol))

def _origin_of(e):
    return e.to_plane().origin

_register(_coplanar, (Kind.POINT,), (Kind.POINT, Kind.VECTOR) + LINEAR, _true)
_register(_coplanar, (Kind.POINT,), PLANAR, _coplanar_point_planar)
_register(_coplanar, LINEAR, LINEAR, _coplanar_linear_linear)
_register(_coplanar, LINEAR, PLANAR, _coplanar_linear_planar)
_register(_coplanar, PLANAR, PLANAR, _coplanar_planar_planar)
_register(_coplanar, (Kind.VECTOR,), DIRECTIONAL, _true)
_register(_coplanar, (Kind.VECTOR,), PLANAR, _parallel_dir_planar)
_coplanar.fill()


def _evaluate(table, a, b, tol):
    if isinstance(a, Entity) and isinstance(b, Entity):
        if a.is_degenerate(tol) or b.is_degenerate(tol):
            return False
    return bool(table(a, b, tol))


@debug_log_call(logger)
def is_parallel(a, b, tol=None) -> bool:
    """Are ``a`` and ``b`` parallel?  Directions parallel, a direction
    lying in a plane, or two planes with parallel normals."""
    return _evaluate(_parallel, a, b, tol)


@debug_log_call(logger)
def is_orthogonal(a, b, tol=None) -> bool:
    return _evaluate(_orthogonal, a, b, tol)


@debug_log_call(logger)
def is_collinear(a, b, tol=None) -> bool:
    """Do ``a`` and ``b`` lie on one common line?"""
    return _evaluate(_collinear, a, b, tol)


@debug_log_call(logger)
def is_coplanar(a, b, tol=None) -> bool:
    """Do ``a`` and ``b`` lie in one common plane?"""
    return _evaluate(_coplanar, a, b, tol)


TABLES = {
    'is_parallel': _parallel,
    'is_orthogonal': _orthogonal,
    'is_collinear': _collinear,
    'is_coplanar': _coplanar,
}


__all__ = ['is_parallel', 'is_orthogonal', 'is_collinear', 'is_coplanar', 'TABLES']
