"""Symmetric double dispatch over entity kinds.

A ``SymmetricDispatch`` maps each *unordered* pair of kinds to one
handler.  A handler is written for a specific operand order, e.g.

::

    parallel = SymmetricDispatch('is_parallel')

    @parallel.register(Kind.LINE, Kind.PLANE)
    def _line_plane(line, plane, tol):
        ...

and the table calls it with the operands swapped when the pair arrives
as ``(plane, line)``.  Every operation built on the table is symmetric
by construction.
"""

from __future__ import annotations

import logging
from itertools import combinations_with_replacement
from typing import Any, Callable, Dict, FrozenSet, List, Optional, Tuple

from .entity import Entity, Kind
from .errors import DispatchError, GeometryError

logger = logging.getLogger(__name__)

Handler = Callable[[Any, Any, Optional[float]], Any]

ALL_PAIRS: Tuple[Tuple[Kind, Kind], ...] = tuple(combinations_with_replacement(Kind, 2))


def _key(kind_a: Kind, kind_b: Kind) -> FrozenSet[Kind]:
    return frozenset((kind_a, kind_b))


class SymmetricDispatch:
    """Handler table keyed by the unordered pair of operand kinds."""

    def __init__(self, name: str, default: Optional[Handler] = None) -> None:
        self.name = name
        self.default = default
        self._table: Dict[FrozenSet[Kind], Tuple[Kind, Handler]] = {}

    def __repr__(self) -> str:
        return f'SymmetricDispatch({self.name!r}, {len(self._table)}/{len(ALL_PAIRS)} pairs)'

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, pair) -> bool:
        kind_a, kind_b = pair
        return _key(Kind.parse(kind_a), Kind.parse(kind_b)) in self._table

    def add(self, kind_a, kind_b, func: Handler) -> None:
        kind_a, kind_b = Kind.parse(kind_a), Kind.parse(kind_b)
        key = _key(kind_a, kind_b)
        if key in self._table:
            raise GeometryError(f'{self.name}: handler for ({kind_a}, {kind_b}) already registered')
        self._table[key] = (kind_a, func)

    def register(self, kind_a, kind_b) -> Callable[[Handler], Handler]:
        """Decorator registering a handler for operands ``(kind_a, kind_b)``."""

        def decorator(func: Handler) -> Handler:
            self.add(kind_a, kind_b, func)
            return func

        return decorator

    def fill(self, default: Optional[Handler] = None) -> None:
        """Route every unregistered pair to ``default`` (or the table
        default)."""
        default = default or self.default
        if default is None:
            raise GeometryError(f'{self.name}: no default handler to fill with')
        for kind_a, kind_b in self.missing():
            self._table[_key(kind_a, kind_b)] = (kind_a, default)

    def missing(self) -> List[Tuple[Kind, Kind]]:
        return [pair for pair in ALL_PAIRS if _key(*pair) not in self._table]

    def is_complete(self) -> bool:
        return not self.missing()

    def handler(self, kind_a, kind_b) -> Tuple[Handler, bool]:
        """Return ``(func, swapped)`` for operands of kinds ``(kind_a, kind_b)``.

        ``swapped`` tells the caller to pass the operands in reverse
        order.
        """
        kind_a, kind_b = Kind.parse(kind_a), Kind.parse(kind_b)
        entry = self._table.get(_key(kind_a, kind_b))
        if entry is None:
            if self.default is None:
                raise GeometryError(f'{self.name}: no handler for ({kind_a}, {kind_b})')
            return self.default, False
        first, func = entry
        return func, first is not kind_a

    def __call__(self, a, b, tol=None):
        if not isinstance(a, Entity) or not isinstance(b, Entity):
            raise DispatchError(
                f'{self.name}: operands must be entities, got '
                f'{type(a).__name__} and {type(b).__name__}')
        func, swapped = self.handler(a.kind, b.kind)
        if swapped:
            a, b = b, a
        logger.debug('%s: %s x %s -> %s', self.name, a.kind, b.kind,
                     getattr(func, '__name__', func))
        return func(a, b, tol)


__all__ = ['ALL_PAIRS', 'Handler', 'SymmetricDispatch']
