## geometric entity base class and kind tags for acmegeom

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

"""entity classes for **acmegeom**

===============
Overview
===============

Every geometric value in acmegeom is an instance of an ``Entity``
subclass.  There are exactly twelve kinds, enumerated by ``Kind``:
``none``, ``point``, ``vector``, ``line``, ``ray``, ``plane``,
``segment``, ``triangle``, ``circle``, ``sphere``, ``box`` and
``frame``.  The string value of each kind is a stable tag; outer
layers (bindings, serializers) may rely on its spelling.

Entities are immutable values.  Spatial operations (``translate()``,
``transform()``, ``apply()``) return a new entity of the same kind and
never modify the receiver, so entities may be shared freely.

the entity capability
=====================

- ``kind`` -- the ``Kind`` of the entity; ``type()`` returns its tag
  string

- ``is_equal(other)`` -- exact structural equality

- ``is_approx(other, tol=None)`` -- equality up to ``tol`` (the
  configured epsilon by default)

- ``is_degenerate(tol=None)`` -- the entity's defining measurement is
  approximately zero, or one of its coordinates is not finite

- ``translate(v)`` -- shift by displacement ``v``

- ``transform(frame_a, frame_b)`` -- re-express an entity given in
  ``frame_a`` coordinates in ``frame_b`` coordinates

- ``apply(m)`` -- apply the rigid ``acmegeom.xform.Matrix`` ``m``

Pairwise relations (``is_parallel``, ``is_orthogonal``,
``is_collinear``, ``is_coplanar``, ``intersection``) are available as
methods for convenience; they forward to the dispatch engine in
``acmegeom.predicates`` and ``acmegeom.intersection``.

the none entity
===============

``NONE`` is the single instance of ``NoneEntity``.  It stands for "no
geometric result": empty intersections return it, and it is degenerate
by definition.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from .errors import GeometryError


class Kind(Enum):
    """Stable tag for each of the twelve entity kinds."""

    NONE = 'none'
    POINT = 'point'
    VECTOR = 'vector'
    LINE = 'line'
    RAY = 'ray'
    PLANE = 'plane'
    SEGMENT = 'segment'
    TRIANGLE = 'triangle'
    CIRCLE = 'circle'
    SPHERE = 'sphere'
    BOX = 'box'
    FRAME = 'frame'

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, tag) -> "Kind":
        """Return the kind for a tag string (or pass a ``Kind`` through)."""
        if isinstance(tag, Kind):
            return tag
        try:
            return cls(tag)
        except ValueError:
            raise GeometryError(f'unknown entity kind: {tag!r}') from None


class Entity(ABC):
    """Common capability of all geometric entities."""

    __slots__ = ()

    kind: ClassVar[Kind]

    def type(self) -> str:
        return self.kind.value

    def is_none(self) -> bool:
        return self.kind is Kind.NONE

    def is_equal(self, other) -> bool:
        """Exact structural equality: same kind and identical floats."""
        if other is self:
            return True
        return type(other) is type(self) and self == other

    @abstractmethod
    def is_approx(self, other, tol=None) -> bool:
        """Equality of the defining data up to ``tol``."""

    @abstractmethod
    def is_degenerate(self, tol=None) -> bool:
        """True if the entity cannot serve its geometric purpose."""

    @abstractmethod
    def translate(self, vector) -> "Entity":
        """Return a copy shifted by ``vector``."""

    @abstractmethod
    def transform(self, frame_a, frame_b) -> "Entity":
        """Return a copy re-expressed from ``frame_a`` into ``frame_b``."""

    @abstractmethod
    def apply(self, matrix) -> "Entity":
        """Return a copy transformed by a rigid 4x4 ``Matrix``."""

    ## pairwise relations, forwarded to the dispatch engine

    def is_parallel(self, other, tol=None) -> bool:
        from .predicates import is_parallel
        return is_parallel(self, other, tol)

    def is_orthogonal(self, other, tol=None) -> bool:
        from .predicates import is_orthogonal
        return is_orthogonal(self, other, tol)

    def is_collinear(self, other, tol=None) -> bool:
        from .predicates import is_collinear
        return is_collinear(self, other, tol)

    def is_coplanar(self, other, tol=None) -> bool:
        from .predicates import is_coplanar
        return is_coplanar(self, other, tol)

    def intersection(self, other, tol=None) -> "Entity":
        from .intersection import intersection
        return intersection(self, other, tol)


@dataclass(frozen=True)
class NoneEntity(Entity):
    """The absent result.  Use the ``NONE`` instance."""

    kind: ClassVar[Kind] = Kind.NONE

    def __repr__(self) -> str:
        return 'NONE'

    def is_approx(self, other, tol=None) -> bool:
        return isinstance(other, NoneEntity)

    def is_degenerate(self, tol=None) -> bool:
        return True

    def translate(self, vector) -> "NoneEntity":
        return self

    def transform(self, frame_a, frame_b) -> "NoneEntity":
        return self

    def apply(self, matrix) -> "NoneEntity":
        return self


NONE = NoneEntity()


__all__ = ['Kind', 'Entity', 'NoneEntity', 'NONE']
