## pairwise intersection of acmegeom entities

## Copyright (c) 2026 acmegeom contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""intersections for **acmegeom**

=========
OVERVIEW
=========

``intersection(a, b)`` returns the set of points common to ``a`` and
``b`` as a single entity, or ``NONE`` when the set is empty, when an
operand is degenerate, or when the set cannot be represented by one of
the entity kinds (for instance the polygon shared by two overlapping
coplanar triangles).

Circles are closed disks and spheres are solid balls, with one
exception: two crossing spheres meet in their radical circle.

Vectors and frames are not point sets and intersect nothing.

method
======

Most handlers reduce to *clipping a parameter interval*.  A linear
entity ``origin + t*direction`` carries an interval of admissible
``t`` (see ``acmegeom.linear``).  Each bounded kind narrows that
interval:

- a triangle, by its three edge half-planes (the linear entity must be
  coplanar with it)
- a disk, by the chord of its circle (coplanar again)
- a ball, by the chord of its sphere, found with an ``mpmath``
  quadratic
- a box, by its three slabs

Whatever survives becomes a point, segment, ray, or the input entity
itself when nothing was clipped away.  Two planar entities in crossing
planes are handled the same way, by clipping the line where their
planes meet against both of them.

"""

from __future__ import annotations

import logging
from math import inf, sqrt

import mpmath as mpm
import numpy as np

from . import geom
from .dispatch import SymmetricDispatch
from .entity import NONE, Entity, Kind
from .linear import Line, Ray, Segment
from .logging_utils import debug_log_call
from .planar import Circle
from .primitives import Point, Vector
from .solids import Box

logger = logging.getLogger(__name__)

LINEAR = (Kind.LINE, Kind.RAY, Kind.SEGMENT)
POINT_SETS = (Kind.POINT,) + LINEAR + (Kind.PLANE, Kind.TRIANGLE, Kind.CIRCLE,
                                       Kind.SPHERE, Kind.BOX)

_RANK = {Kind.LINE: 0, Kind.RAY: 1, Kind.SEGMENT: 2}


## building results from parameter intervals
## ------------------------------------------

def _ptol(e, tol):
    """distance tolerance expressed in the parameter of ``e``"""
    return tol/geom.mag(e.direction.xyz)


def _piece(e, lo, hi, tol):
    """Part of linear entity ``e`` with parameter in ``[lo, hi]``."""
    ptol = _ptol(e, tol)
    if lo > hi + ptol:
        return NONE
    if lo > hi:
        lo = hi = 0.5*(lo + hi)
    if lo <= e.t_min + ptol and hi >= e.t_max - ptol:
        return e
    if lo == -inf and hi == inf:
        return Line(e.origin, e.direction)
    if hi == inf:
        return Ray(e.point_at(lo), e.direction)
    if lo == -inf:
        return Ray(e.point_at(hi), -e.direction)
    p0 = e.point_at(lo)
    p1 = e.point_at(hi)
    if geom.vclose(p0.xyz, p1.xyz, tol):
        return Point(*geom.lerp(p0.xyz, p1.xyz, 0.5))
    return Segment(p0, p1)


def _contains_param(e, t, tol):
    ptol = _ptol(e, tol)
    return e.t_min - ptol <= t <= e.t_max + ptol


## clipping
## --------
## Each clip function narrows the interval [lo, hi] of linear entity
## ``e`` to the part inside the given entity.  None means empty.

def _ball_params(o, d, c, r, tol):
    """Parameters ``(t0, t1)`` where the line ``o + t*d`` meets the
    sphere ``|x - c| = r``, or None if it misses.  Tangency gives
    ``t0 == t1``."""
    w = geom.sub(o, c)
    a = geom.dot(d, d)
    tm = -geom.dot(w, d)/a
    h = geom.dist(geom.add(o, geom.scale3(d, tm)), c)
    if h > r + tol:
        return None
    if abs(h - r) <= tol:
        return (tm, tm)

    ## solve  |w + t*d|^2 = r^2
    ##   a t^2 + b t + cc = 0,  a = d.d,  b = 2 w.d,  cc = w.w - r^2
    mpd = [mpm.mpf(x) for x in d]
    mpw = [mpm.mpf(x) for x in w]
    mpr = mpm.mpf(r)
    ma = mpd[0]*mpd[0] + mpd[1]*mpd[1] + mpd[2]*mpd[2]
    mb = 2*(mpd[0]*mpw[0] + mpd[1]*mpw[1] + mpd[2]*mpw[2])
    mc = mpw[0]*mpw[0] + mpw[1]*mpw[1] + mpw[2]*mpw[2] - mpr*mpr
    disc = mb*mb - 4*ma*mc
    if disc < 0:
        disc = mpm.mpf(0)
    sq = mpm.sqrt(disc)
    t0 = float((-mb - sq)/(2*ma))
    t1 = float((-mb + sq)/(2*ma))
    return (min(t0, t1), max(t0, t1))


def _clip_ball(e, sphere, lo, hi, tol):
    roots = _ball_params(e.origin.xyz, e.direction.xyz, sphere.center.xyz, sphere.radius, tol)
    if roots is None:
        return None
    return (max(lo, roots[0]), min(hi, roots[1]))


def _clip_disk(e, circle, lo, hi, tol):
    # e lies in the plane of the circle
    roots = _ball_params(e.origin.xyz, e.direction.xyz, circle.center.xyz, circle.radius, tol)
    if roots is None:
        return None
    return (max(lo, roots[0]), min(hi, roots[1]))


def _clip_triangle(e, tri, lo, hi, tol):
    # e lies in the plane of the triangle
    n = tri.normal().xyz
    o = e.origin.xyz
    d = e.direction.xyz
    dm = geom.mag(d)
    verts = [p.xyz for p in tri.vertices()]
    for i in range(3):
        v = verts[i]
        edge = geom.sub(verts[(i + 1) % 3], v)
        m = geom.unit(geom.cross(n, edge), geom.EPSILON_MACHINE)
        f0 = geom.dot(m, geom.sub(o, v))
        fd = geom.dot(m, d)
        if geom.is_zero(fd/dm, tol):
            if f0 < -tol:
                return None
            continue
        t = -f0/fd
        if fd > 0:
            lo = max(lo, t)
        else:
            hi = min(hi, t)
    return (lo, hi)


def _clip_box(e, box, lo, hi, tol):
    o = e.origin.xyz
    d = e.direction.xyz
    dm = geom.mag(d)
    blo = box.min_point().xyz
    bhi = box.max_point().xyz
    for i in range(3):
        if geom.is_zero(d[i]/dm, tol):
            if o[i] < blo[i] - tol or o[i] > bhi[i] + tol:
                return None
            continue
        t0 = (blo[i] - o[i])/d[i]
        t1 = (bhi[i] - o[i])/d[i]
        if t0 > t1:
            t0, t1 = t1, t0
        lo = max(lo, t0)
        hi = min(hi, t1)
    return (lo, hi)


_CLIP = {
    Kind.SPHERE: _clip_ball,
    Kind.CIRCLE: _clip_disk,
    Kind.TRIANGLE: _clip_triangle,
    Kind.BOX: _clip_box,
}


def _clip(e, other, tol):
    """Part of linear ``e`` inside ``other``, as an entity."""
    span = _CLIP[other.kind](e, other, e.t_min, e.t_max, tol)
    if span is None:
        return NONE
    return _piece(e, span[0], span[1], tol)


def _plane_plane_line(pa, pb, tol):
    """Line where planes ``pa`` and ``pb`` meet, or None when they are
    parallel."""
    na = pa.unit_normal().xyz
    nb = pb.unit_normal().xyz
    if geom.vparallel(na, nb, tol):
        return None
    d = geom.unit(geom.cross(na, nb), geom.EPSILON_MACHINE)
    a = np.array([na, nb, d], dtype=float)
    rhs = np.array([geom.dot(na, pa.origin.xyz), geom.dot(nb, pb.origin.xyz), 0.0])
    return Line(Point.from_array(np.linalg.solve(a, rhs)), Vector(*d))


## handlers
## --------

_intersection = SymmetricDispatch('intersection')


def _empty(a, b, tol):
    return NONE


def _not_representable(a, b, tol):
    logger.debug('intersection of %s and %s is not representable by a single entity',
                 a.kind, b.kind)
    return NONE


def _point_any(p, e, tol):
    return p if e.is_inside(p, tol) else NONE


def _linear_linear(a, b, tol):
    if _RANK[b.kind] > _RANK[a.kind]:
        a, b = b, a
    da = a.direction.xyz
    db = b.direction.xyz
    if geom.vparallel(da, db, tol):
        foot = a.point_at(a.project(b.origin))
        back = b.point_at(b.project(a.origin))
        if not ((foot - b.origin).is_degenerate(tol) and (back - a.origin).is_degenerate(tol)):
            return NONE
        ## collinear: map b's interval into a's parameter
        k = geom.dot(db, da)/geom.dot(da, da)
        s0 = a.project(b.origin)
        s = sorted((s0 + b.t_min*k, s0 + b.t_max*k))
        return _piece(a, max(a.t_min, s[0]), min(a.t_max, s[1]), tol)

    ## closest points of the two supporting lines
    w0 = geom.sub(a.origin.xyz, b.origin.xyz)
    aa = geom.dot(da, da)
    ab = geom.dot(da, db)
    bb = geom.dot(db, db)
    ad = geom.dot(da, w0)
    bd = geom.dot(db, w0)
    denom = aa*bb - ab*ab
    s = (ab*bd - bb*ad)/denom
    t = (aa*bd - ab*ad)/denom
    pa = a.point_at(s)
    pb = b.point_at(t)
    if not (pb - pa).is_degenerate(tol):
        return NONE
    if not (_contains_param(a, s, tol) and _contains_param(b, t, tol)):
        return NONE
    return Point(*geom.lerp(pa.xyz, pb.xyz, 0.5))


def _linear_plane_point(e, plane, tol):
    """Point where non-parallel ``e`` crosses ``plane``, or NONE."""
    n = plane.unit_normal().xyz
    t = geom.dot(n, geom.sub(plane.origin.xyz, e.origin.xyz))/geom.dot(n, e.direction.xyz)
    if not _contains_param(e, t, tol):
        return NONE
    return e.point_at(geom.clamp(t, e.t_min, e.t_max))


def _linear_plane(e, plane, tol):
    if geom.vorthogonal(e.direction.xyz, plane.unit_normal().xyz, tol):
        return e if plane.is_inside(e.origin, tol) else NONE
    return _linear_plane_point(e, plane, tol)


def _linear_planar(e, other, tol):
    """linear entity against a triangle or disk"""
    plane = other.to_plane()
    if geom.vorthogonal(e.direction.xyz, plane.unit_normal().xyz, tol):
        if not plane.is_inside(e.origin, tol):
            return NONE
        return _clip(e, other, tol)
    p = _linear_plane_point(e, plane, tol)
    if p is NONE or not other.is_inside(p, tol):
        return NONE
    return p


def _linear_solid(e, other, tol):
    return _clip(e, other, tol)


def _plane_plane(a, b, tol):
    line = _plane_plane_line(a, b, tol)
    if line is None:
        if a.is_inside(b.origin, tol) and b.is_inside(a.origin, tol):
            return a
        return NONE
    return line


def _plane_planar(plane, other, tol):
    """plane against a triangle or disk"""
    line = _plane_plane_line(plane, other.to_plane(), tol)
    if line is None:
        return other if plane.is_inside(other.to_plane().origin, tol) else NONE
    return _clip(line, other, tol)


def _plane_sphere(plane, sphere, tol):
    h = plane.distance(sphere.center)
    r = sphere.radius
    if h > r + tol:
        return NONE
    foot = plane.project(sphere.center)
    if abs(r - h) <= tol:
        return foot
    return Circle(foot, sqrt(r*r - h*h), plane.unit_normal())


def _planar_within(inner, outer, tol):
    """Does coplanar ``inner`` lie entirely inside ``outer``?"""
    if inner.kind is Kind.TRIANGLE:
        return all(outer.is_inside(v, tol) for v in inner.vertices())
    c, r = inner.center, inner.radius
    if outer.kind is Kind.CIRCLE:
        return c.distance(outer.center) + r <= outer.radius + tol
    return (outer.is_inside(c, tol)
            and all(edge.to_line().distance(c) >= r - tol for edge in outer.edges()))


def _side_range(e, p, m):
    """extent of coplanar ``e`` along in-plane direction ``m`` from ``p``"""
    if e.kind is Kind.CIRCLE:
        s = geom.dot(m, geom.sub(e.center.xyz, p))
        return (s - e.radius, s + e.radius)
    s = [geom.dot(m, geom.sub(v.xyz, p)) for v in e.vertices()]
    return (min(s), max(s))


def _disk_disk(a, b, tol):
    d = a.center.distance(b.center)
    if d > a.radius + b.radius + tol:
        return NONE
    if abs(d - (a.radius + b.radius)) <= tol:
        u = geom.unit(geom.sub(b.center.xyz, a.center.xyz), geom.EPSILON_MACHINE)
        return Point(*geom.add(a.center.xyz, geom.scale3(u, a.radius)))
    return _not_representable(a, b, tol)


def _coplanar_overlap(a, b, tol):
    """Two coplanar triangles or disks, neither inside the other.

    The boundary of a triangle clipped against the other entity catches
    every shared point unless the two overlap in an area; when all of
    those points fall on one line that also separates the two, that
    piece is the whole intersection."""
    if a.kind is Kind.CIRCLE and b.kind is Kind.CIRCLE:
        return _disk_disk(a, b, tol)
    pts = []
    for tri, other in ((a, b), (b, a)):
        if tri.kind is not Kind.TRIANGLE:
            continue
        for edge in tri.edges():
            hit = _clip(edge, other, tol)
            if hit.kind is Kind.POINT:
                pts.append(hit.xyz)
            elif hit.kind is Kind.SEGMENT:
                pts.extend((hit.point0.xyz, hit.point1.xyz))
    if not pts:
        return NONE
    p, q = max(((u, v) for u in pts for v in pts), key=lambda uv: geom.dist(*uv))
    if geom.vclose(p, q, tol):
        return Point(*geom.lerp(p, q, 0.5))
    p, q = sorted((p, q))
    chord = Line(Point(*p), Vector(*geom.sub(q, p)))
    if any(chord.distance(Point(*x)) > tol for x in pts):
        return _not_representable(a, b, tol)
    m = geom.unit(geom.cross(a.unit_normal().xyz, geom.sub(q, p)), geom.EPSILON_MACHINE)
    alo, ahi = _side_range(a, p, m)
    blo, bhi = _side_range(b, p, m)
    if (ahi <= tol and blo >= -tol) or (alo >= -tol and bhi <= tol):
        return Segment(Point(*p), Point(*q))
    return _not_representable(a, b, tol)


def _planar_planar(a, b, tol):
    """two triangles or disks"""
    line = _plane_plane_line(a.to_plane(), b.to_plane(), tol)
    if line is None:
        if not (a.to_plane().is_inside(b.to_plane().origin, tol)
                and b.to_plane().is_inside(a.to_plane().origin, tol)):
            return NONE
        if a.is_approx(b, tol) or _planar_within(a, b, tol):
            return a
        if _planar_within(b, a, tol):
            return b
        return _coplanar_overlap(a, b, tol)
    span = _CLIP[a.kind](line, a, line.t_min, line.t_max, tol)
    if span is None:
        return NONE
    span = _CLIP[b.kind](line, b, span[0], span[1], tol)
    if span is None:
        return NONE
    return _piece(line, span[0], span[1], tol)


def _sphere_sphere(a, b, tol):
    if a.is_approx(b, tol):
        return a
    d = a.center.distance(b.center)
    small, big = (a, b) if a.radius <= b.radius else (b, a)
    if d + small.radius <= big.radius + tol:
        return small
    if d > a.radius + b.radius + tol:
        return NONE
    u = geom.unit(geom.sub(b.center.xyz, a.center.xyz), geom.EPSILON_MACHINE)
    if abs(d - (a.radius + b.radius)) <= tol:
        return Point(*geom.add(a.center.xyz, geom.scale3(u, a.radius)))
    x = (d*d + a.radius*a.radius - b.radius*b.radius)/(2.0*d)
    rc = sqrt(max(0.0, a.radius*a.radius - x*x))
    return Circle(Point(*geom.add(a.center.xyz, geom.scale3(u, x))), rc, Vector(*u))


def _box_box(a, b, tol):
    alo, ahi = a.min_point().xyz, a.max_point().xyz
    blo, bhi = b.min_point().xyz, b.max_point().xyz
    lo = [max(alo[i], blo[i]) for i in range(3)]
    hi = [min(ahi[i], bhi[i]) for i in range(3)]
    for i in range(3):
        if lo[i] > hi[i] + tol:
            return NONE
        if lo[i] > hi[i]:
            lo[i] = hi[i] = 0.5*(lo[i] + hi[i])
    if geom.vclose(lo, hi, tol):
        return Point(*geom.lerp(lo, hi, 0.5))
    return Box(tuple(lo), tuple(hi))


def _register(kinds_a, kinds_b, func):
    for ka in kinds_a:
        for kb in kinds_b:
            if (ka, kb) not in _intersection:
                _intersection.add(ka, kb, func)


_register((Kind.POINT,), POINT_SETS, _point_any)
_register(LINEAR, LINEAR, _linear_linear)
_register(LINEAR, (Kind.PLANE,), _linear_plane)
_register(LINEAR, (Kind.TRIANGLE, Kind.CIRCLE), _linear_planar)
_register(LINEAR, (Kind.SPHERE, Kind.BOX), _linear_solid)
_register((Kind.PLANE,), (Kind.PLANE,), _plane_plane)
_register((Kind.PLANE,), (Kind.TRIANGLE, Kind.CIRCLE), _plane_planar)
_register((Kind.PLANE,), (Kind.SPHERE,), _plane_sphere)
_register((Kind.TRIANGLE, Kind.CIRCLE), (Kind.TRIANGLE, Kind.CIRCLE), _planar_planar)
_register((Kind.SPHERE,), (Kind.SPHERE,), _sphere_sphere)
_register((Kind.BOX,), (Kind.BOX,), _box_box)
_register((Kind.PLANE, Kind.TRIANGLE, Kind.CIRCLE), (Kind.SPHERE, Kind.BOX), _not_representable)
_register((Kind.SPHERE,), (Kind.BOX,), _not_representable)
_intersection.fill(_empty)

TABLE = _intersection


@debug_log_call(logger)
def intersection(a, b, tol=None) -> Entity:
    """Intersection of ``a`` and ``b`` as a single entity, or ``NONE``."""
    tol = geom.resolve_tol(tol)
    if isinstance(a, Entity) and isinstance(b, Entity):
        if a.is_degenerate(tol) or b.is_degenerate(tol):
            return NONE
    return _intersection(a, b, tol)


__all__ = ['intersection', 'TABLE']
