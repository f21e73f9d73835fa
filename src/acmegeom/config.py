"""Tolerance configuration for acmegeom.

The default epsilon used by every tolerant comparison lives here.  It
starts at the medium tier (``1e-10``) and is meant to be set once at
start-up, if at all.  Individual call sites can always pass an explicit
``tol`` instead.
"""

from __future__ import annotations

import copy
import math
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from .errors import ConfigurationError

EPSILON_HIGH = 1.0e-16
EPSILON_MEDIUM = 1.0e-10
EPSILON_LOW = 1.0e-07


@dataclass
class ToleranceConfig:
    """Process-wide defaults for tolerant comparisons."""

    epsilon: float = EPSILON_MEDIUM

    def validate(self) -> None:
        eps = self.epsilon
        if isinstance(eps, bool) or not isinstance(eps, (int, float)):
            raise ConfigurationError(f'epsilon must be a number, got {eps!r}')
        if not math.isfinite(eps) or eps <= 0.0:
            raise ConfigurationError(f'epsilon must be finite and positive, got {eps!r}')


_TOLERANCE_CONFIG = ToleranceConfig()


def get_tolerance_config() -> ToleranceConfig:
    return copy.deepcopy(_TOLERANCE_CONFIG)


def set_tolerance_config(config: ToleranceConfig) -> None:
    global _TOLERANCE_CONFIG
    config.validate()
    _TOLERANCE_CONFIG = copy.deepcopy(config)


def get_epsilon() -> float:
    """Return the default epsilon used when no ``tol`` is given."""
    return _TOLERANCE_CONFIG.epsilon


@contextmanager
def tolerance(epsilon: float) -> Iterator[ToleranceConfig]:
    """Temporarily replace the default epsilon.

    ::

        with tolerance(EPSILON_LOW):
            assert a.is_approx(b)
    """
    previous = get_tolerance_config()
    updated = copy.deepcopy(previous)
    updated.epsilon = epsilon
    set_tolerance_config(updated)
    try:
        yield get_tolerance_config()
    finally:
        set_tolerance_config(previous)


__all__ = [
    'EPSILON_HIGH',
    'EPSILON_MEDIUM',
    'EPSILON_LOW',
    'ToleranceConfig',
    'get_tolerance_config',
    'set_tolerance_config',
    'get_epsilon',
    'tolerance',
]
