"""Exceptions raised by acmegeom.

Geometric edge cases (degenerate entities, parallel or skew
configurations, empty intersections) are never reported through
exceptions; they come back as ordinary values (``False`` or the
``NONE`` entity).  The classes below cover programmer errors only.
"""


class GeometryError(ValueError):
    """Bad argument passed to an acmegeom constructor or helper."""


class ConfigurationError(GeometryError):
    """Invalid tolerance configuration."""


class DispatchError(GeometryError, TypeError):
    """Operand of a predicate or intersection call is not an entity."""


__all__ = [
    'GeometryError',
    'ConfigurationError',
    'DispatchError',
]
