# -*- coding: utf-8 -*-
"""Tolerance-aware 3D computational geometry kernel."""

import logging
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("acmegeom")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .config import (
    EPSILON_HIGH,
    EPSILON_LOW,
    EPSILON_MEDIUM,
    ToleranceConfig,
    get_epsilon,
    get_tolerance_config,
    set_tolerance_config,
    tolerance,
)
from .entity import NONE, Entity, Kind, NoneEntity
from .errors import ConfigurationError, DispatchError, GeometryError
from .frame import Frame
from .geom import EPSILON_MACHINE
from .intersection import intersection
from .linear import Line, LinearEntity, Ray, Segment
from .planar import Circle, Plane, PlanarEntity, Triangle
from .predicates import is_collinear, is_coplanar, is_orthogonal, is_parallel
from .primitives import Point, Vector
from .solids import Box, Sphere
from .xform import Matrix, Rotation, Scale, Translation

__all__ = [
    '__version__',
    'EPSILON_MACHINE', 'EPSILON_HIGH', 'EPSILON_MEDIUM', 'EPSILON_LOW',
    'ToleranceConfig', 'get_tolerance_config', 'set_tolerance_config',
    'get_epsilon', 'tolerance',
    'GeometryError', 'ConfigurationError', 'DispatchError',
    'Kind', 'Entity', 'NoneEntity', 'NONE',
    'Point', 'Vector', 'Frame',
    'LinearEntity', 'Line', 'Ray', 'Segment',
    'PlanarEntity', 'Plane', 'Triangle', 'Circle',
    'Sphere', 'Box',
    'Matrix', 'Rotation', 'Translation', 'Scale',
    'is_parallel', 'is_orthogonal', 'is_collinear', 'is_coplanar',
    'intersection',
]
