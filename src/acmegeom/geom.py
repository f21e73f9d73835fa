## tolerant scalar and vector arithmetic for acmegeom

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

"""tolerant arithmetic for **acmegeom**

====================
OVERVIEW
====================

The ``acmegeom.geom`` module holds the constants and the low-level
scalar and 3-vector operations that every entity is built on.  All
approximate comparisons in the library go through ``close()`` and
``vclose()``; nothing compares floats for exact equality except
``Entity.is_equal()``, which is exact on purpose.

constants
=========

Four epsilon tiers are provided: ``EPSILON_MACHINE`` (the double
machine epsilon), ``EPSILON_HIGH`` (1e-16), ``EPSILON_MEDIUM`` (1e-10)
and ``EPSILON_LOW`` (1e-7).  ``epsilon`` is the medium tier.  The
default used when a function is called without ``tol`` comes from
``acmegeom.config`` and is the medium tier unless reconfigured.

3-vectors
=========

Inside this module, 3-vectors are plain tuples ``(x, y, z)``.  The
entity classes in ``acmegeom.primitives`` wrap them; the helpers here
stay free of entity types so they can be shared everywhere.

``to_array()`` and ``from_array()`` bridge to numpy for the places
that need linear solves or rotation matrices.

"""

import sys
from math import acos, isfinite, pi, sqrt

import numpy as np

from .config import EPSILON_HIGH, EPSILON_LOW, EPSILON_MEDIUM, get_epsilon

## constants
EPSILON_MACHINE = sys.float_info.epsilon
EPSILON = EPSILON_MEDIUM
epsilon = EPSILON_MEDIUM
pi2 = 2.0*pi

## operations on scalars
## -----------------------

def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n, bool)) and isinstance(n, (int, float, np.integer, np.floating))

def resolve_tol(tol):
    return get_epsilon() if tol is None else tol

def close(a, b, tol=None):
    """ are two scalars the same within ``tol`` (default: configured epsilon)
    """
    return abs(a-b) < resolve_tol(tol)

def is_zero(a, tol=None):
    """ is scalar ``a`` within ``tol`` of zero"""
    return abs(a) < resolve_tol(tol)

def clamp(x, lo, hi):
    return max(lo, min(hi, x))


## operations on 3-vectors
## ------------------------

def isvect3(x):
    """
    check to see if argument is a 3-vector of numbers
    """
    return isinstance(x, (tuple, list, np.ndarray)) and len(x) == 3 and \
        isgoodnum(x[0]) and isgoodnum(x[1]) and isgoodnum(x[2])

def isfinite3(a):
    return isfinite(a[0]) and isfinite(a[1]) and isfinite(a[2])

def add(a, b):
    """ 3 vector, `a + b`"""
    return (a[0]+b[0], a[1]+b[1], a[2]+b[2])

def sub(a, b):
    """ 3 vector, `a - b`"""
    return (a[0]-b[0], a[1]-b[1], a[2]-b[2])

def scale3(a, c):
    """ 3 vector, vector ``a`` times scalar ``c``, `a * c`"""
    return (a[0]*c, a[1]*c, a[2]*c)

def neg(a):
    return (-a[0], -a[1], -a[2])

def dot(a, b):
    """ 3 vector ``a`` dot ``b`` """
    return a[0]*b[0]+a[1]*b[1]+a[2]*b[2]

def cross(a, b):
    """ 3 vector ``a`` cross ``b`` """
    return (a[1]*b[2] - a[2]*b[1],
            a[2]*b[0] - a[0]*b[2],
            a[0]*b[1] - a[1]*b[0])

def mag(a):
    """ compute the magnitude of 3 vector ``a``"""
    return sqrt(a[0]*a[0]+a[1]*a[1]+a[2]*a[2])

def dist(a, b):
    """ compute the euclidean distance between two 3 vector points ``a`` and ``b``"""
    return mag(sub(a, b))

def lerp(a, b, t):
    return (a[0] + t*(b[0]-a[0]),
            a[1] + t*(b[1]-a[1]),
            a[2] + t*(b[2]-a[2]))

## determine if two vectors are the same, to within tol
def vclose(a, b, tol=None):
    return close(mag(sub(a, b)), 0.0, tol)

def vzero(a, tol=None):
    """ is 3 vector ``a`` approximately the zero vector"""
    return is_zero(mag(a), tol)

def unit(a, tol=None):
    """ return ``a`` scaled to unit length, or ``None`` if ``a`` is
    approximately zero"""
    m = mag(a)
    if not isfinite(m) or is_zero(m, tol):
        return None
    return scale3(a, 1.0/m)

def angle(a, b):
    """ angle in radians between 3 vectors ``a`` and ``b``, in `[0, pi]`.
    NaN when either vector has zero length."""
    ma = mag(a)
    mb = mag(b)
    if ma == 0.0 or mb == 0.0:
        return float('nan')
    return acos(clamp(dot(a, b)/(ma*mb), -1.0, 1.0))

## Parallelism and orthogonality are decided on unit vectors so the
## tolerance does not scale with the input magnitudes.

def vparallel(a, b, tol=None):
    """ are 3 vectors ``a`` and ``b`` parallel (or anti-parallel)"""
    ua = unit(a, tol)
    ub = unit(b, tol)
    if ua is None or ub is None:
        return False
    return vzero(cross(ua, ub), tol)

def vorthogonal(a, b, tol=None):
    """ are 3 vectors ``a`` and ``b`` orthogonal"""
    ua = unit(a, tol)
    ub = unit(b, tol)
    if ua is None or ub is None:
        return False
    return is_zero(dot(ua, ub), tol)

def any_orthogonal(a):
    """ return some unit vector orthogonal to the non-zero 3 vector ``a``"""
    ua = unit(a, EPSILON_MACHINE)
    if abs(ua[2]) < 0.9:
        return unit((ua[1], -ua[0], 0.0), EPSILON_MACHINE)
    return unit((0.0, ua[2], -ua[1]), EPSILON_MACHINE)

## numpy bridges
## -------------

def to_array(a):
    return np.array([float(a[0]), float(a[1]), float(a[2])], dtype=float)

def from_array(arr):
    return (float(arr[0]), float(arr[1]), float(arr[2]))


__all__ = [
    'EPSILON_MACHINE', 'EPSILON_HIGH', 'EPSILON_MEDIUM', 'EPSILON_LOW',
    'EPSILON', 'epsilon', 'pi2',
    'isgoodnum', 'resolve_tol', 'close', 'is_zero', 'clamp',
    'isvect3', 'isfinite3', 'add', 'sub', 'scale3', 'neg', 'dot', 'cross',
    'mag', 'dist', 'lerp', 'vclose', 'vzero', 'unit', 'angle',
    'vparallel', 'vorthogonal', 'any_orthogonal', 'to_array', 'from_array',
]
