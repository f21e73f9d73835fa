## homogeneous 4x4 transformation matrices for acmegeom

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

from math import cos, sin

import numpy as np

import acmegeom.geom as geom
from acmegeom.errors import GeometryError

## A matrix wraps a 4x4 numpy array.  Rows are rows; Mx implies a
## column vector.  Points are lifted with w=1 and pick up the
## translation column, vectors are lifted with w=0 and do not.


class Matrix:
    """4x4 transformation matrix for homogeneous 3D coordinates"""

    def __init__(self, a=None):
        if a is None:
            self.m = np.identity(4)
        elif isinstance(a, Matrix):
            self.m = a.m.copy()
        else:
            try:
                arr = np.array(a, dtype=float)
            except (TypeError, ValueError) as exc:
                raise GeometryError('bad thing used in attempt to initialize matrix: {}'.format(a)) from exc
            if arr.shape == (16,):
                arr = arr.reshape((4, 4))
            if arr.shape != (4, 4):
                raise GeometryError('matrix initializer must be 4x4 or 16 values, got shape {}'.format(arr.shape))
            self.m = arr

    def __repr__(self):
        return "Matrix({})".format(self.m.tolist())

    def get(self, i, j):
        if i < 0 or i > 3 or j < 0 or j > 3:
            raise GeometryError('bad index passed to get: {},{}'.format(i, j))
        return float(self.m[i, j])

    def getrow(self, i):
        if i < 0 or i > 3:
            raise GeometryError('bad row passed to getrow: {}'.format(i))
        return self.m[i, :].tolist()

    def getcol(self, j):
        if j < 0 or j > 3:
            raise GeometryError('bad column passed to getcol: {}'.format(j))
        return self.m[:, j].tolist()

    @property
    def rotation(self):
        """upper-left 3x3 block"""
        return self.m[:3, :3].copy()

    @property
    def translation(self):
        return geom.from_array(self.m[:3, 3])

    # matrix multiply.  If x is a matrix, compute MX.  If x is a 4
    # vector, compute Mx.  If x is a 3 vector it is treated as a point
    # (w=1).  If x is a scalar, compute xM.
    def mul(self, x):
        if isinstance(x, Matrix):
            return Matrix(self.m @ x.m)
        elif geom.isgoodnum(x):
            return Matrix(self.m * float(x))
        elif isinstance(x, (tuple, list, np.ndarray)) and len(x) == 4:
            return (self.m @ np.array(x, dtype=float)).tolist()
        elif geom.isvect3(x):
            return list(self.transform_point(x))
        raise GeometryError('bad thing passed to mul(): {}'.format(x))

    def __matmul__(self, other):
        return self.mul(other)

    def transform_point(self, p):
        v = self.m @ np.array([p[0], p[1], p[2], 1.0], dtype=float)
        if v[3] != 1.0 and v[3] != 0.0:
            v = v / v[3]
        return geom.from_array(v)

    def transform_vector(self, d):
        return geom.from_array(self.m[:3, :3] @ geom.to_array(d))

    def inverse(self):
        """Inverse transform.  Rigid matrices are inverted analytically,
        anything else numerically."""
        if self.is_rigid():
            r = self.m[:3, :3]
            t = self.m[:3, 3]
            inv = np.identity(4)
            inv[:3, :3] = r.T
            inv[:3, 3] = -r.T @ t
            return Matrix(inv)
        try:
            return Matrix(np.linalg.inv(self.m))
        except np.linalg.LinAlgError as exc:
            raise GeometryError('singular matrix cannot be inverted') from exc

    def is_rigid(self, tol=None):
        """rotation block orthonormal with determinant +1, last row [0,0,0,1]"""
        tol = geom.resolve_tol(tol)
        r = self.m[:3, :3]
        if not np.all(np.isfinite(self.m)):
            return False
        if not np.allclose(self.m[3, :], [0.0, 0.0, 0.0, 1.0], rtol=0.0, atol=tol):
            return False
        if not np.allclose(r.T @ r, np.identity(3), rtol=0.0, atol=tol):
            return False
        return geom.close(float(np.linalg.det(r)), 1.0, tol)

    def is_close(self, other, tol=None):
        return bool(np.allclose(self.m, other.m, rtol=0.0, atol=geom.resolve_tol(tol)))


# return the generalized 4x4 arbitrary axis rotation matrix, angle in
# radians, right-handed about ``axis``
def Rotation(axis, angle, inverse=False):
    m = geom.mag(axis)
    if m < geom.epsilon:
        raise GeometryError('zero-length rotation axis not allowed')
    ux, uy, uz = geom.scale3(axis, 1.0/m)

    if inverse:
        angle = -angle

    cang = cos(angle)
    cmin = 1.0 - cang
    sang = sin(angle)

    R = [[cang + ux*ux*cmin, ux*uy*cmin - uz*sang, ux*uz*cmin + uy*sang, 0],
         [uy*ux*cmin + uz*sang, cang + uy*uy*cmin, uy*uz*cmin - ux*sang, 0],
         [uz*ux*cmin - uy*sang, uz*uy*cmin + ux*sang, cang + uz*uz*cmin, 0],
         [0, 0, 0, 1]]

    return Matrix(R)

def Translation(delta, inverse=False):
    if inverse:
        delta = geom.neg(delta)
    dx = delta[0]
    dy = delta[1]
    dz = delta[2]
    T = [[1, 0, 0, dx],
         [0, 1, 0, dy],
         [0, 0, 1, dz],
         [0, 0, 0, 1]]
    return Matrix(T)

def Scale(x, y=None, z=None, inverse=False):
    if geom.isgoodnum(x):
        sx = x
        if geom.isgoodnum(y) and geom.isgoodnum(z):
            sy = y
            sz = z
        else:
            sy = sz = x
    elif geom.isvect3(x):
        sx, sy, sz = x
    else:
        raise GeometryError('bad scaling values passed to Scale')

    if inverse:
        sx = 1.0/sx
        sy = 1.0/sy
        sz = 1.0/sz

    S = [[sx, 0, 0, 0],
         [0, sy, 0, 0],
         [0, 0, sz, 0],
         [0, 0, 0, 1.0]]
    return Matrix(S)


__all__ = ['Matrix', 'Rotation', 'Translation', 'Scale']
