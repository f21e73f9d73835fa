"""Debug logging helpers for acmegeom.

Predicate and intersection entry points are wrapped with
``debug_log_call``; with the ``acmegeom`` logger at DEBUG every call
logs its operands and its result.  Entities are logged by kind, with
their repr shortened, so a run over many operands stays readable.
"""

from __future__ import annotations

import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Optional, TypeVar, cast

from .entity import Entity

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 80
_repr.maxtuple = 6

MAX_ENTITY_REPR = 120


def describe(value: Any) -> str:
    """short log form of ``value``: ``<kind> repr`` for entities"""
    if isinstance(value, Entity):
        text = repr(value)
        if len(text) > MAX_ENTITY_REPR:
            text = text[:MAX_ENTITY_REPR] + "..."
        return f"<{value.type()}> {text}"
    return _repr.repr(value)


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Decorator logging entry, result and failure of a call at DEBUG."""

    def decorator(func: F) -> F:
        label = name or func.__qualname__

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if not logger.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)
            operands = [describe(a) for a in args]
            operands += [f"{k}={describe(v)}" for k, v in kwargs.items()]
            logger.debug("Entering %s (%s)", label, ", ".join(operands) or "no-args")
            try:
                result = func(*args, **kwargs)
            except Exception:
                logger.exception("Exception in %s", label)
                raise
            if log_result:
                logger.debug("Exiting %s -> %s", label, describe(result))
            else:
                logger.debug("Exiting %s", label)
            return result

        return cast(F, wrapper)

    return decorator


__all__ = ["debug_log_call", "describe"]
