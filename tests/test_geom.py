import math

import pytest
from acmegeom.geom import *
from acmegeom.config import tolerance
## unit tests for acmegeom geom.py

class TestScalars:
    """tolerant scalar helpers"""

    def test_isgoodnum(self):
        assert isgoodnum(1)
        assert isgoodnum(2.5)
        assert not isgoodnum(True)
        assert not isgoodnum('1')
        assert not isgoodnum(None)

    def test_close(self):
        assert close(1.0, 1.0 + 1e-12)
        assert not close(1.0, 1.0 + 1e-8)
        assert close(1.0, 1.0 + 1e-8, EPSILON_LOW)
        assert not close(1.0, 1.0 + 1e-12, EPSILON_HIGH)

    def test_close_follows_configuration(self):
        assert not close(0.0, 1e-8)
        with tolerance(EPSILON_LOW):
            assert close(0.0, 1e-8)
        assert not close(0.0, 1e-8)

    def test_tiers(self):
        assert EPSILON_HIGH < EPSILON_MEDIUM < EPSILON_LOW
        assert epsilon == EPSILON_MEDIUM
        assert EPSILON_MACHINE > 0.0

    def test_clamp(self):
        assert clamp(5, 0, 1) == 1
        assert clamp(-5, 0, 1) == 0
        assert clamp(0.5, 0, 1) == 0.5


class TestVectors:
    def test_arithmetic(self):
        a = (5.0, 0.0, 0.0)
        b = (0.0, 5.0, 0.0)
        assert close(mag(a), 5.0)
        assert vclose(add(a, b), (5, 5, 0))
        assert vclose(sub(a, b), (5, -5, 0))
        assert close(dot(a, b), 0)
        assert vclose(cross(a, b), (0, 0, 25))
        assert vclose(cross(b, a), (0, 0, -25))
        assert close(dist(a, b), math.sqrt(50))
        assert vclose(scale3(a, 2), (10, 0, 0))
        assert vclose(neg(a), (-5, 0, 0))
        assert vclose(lerp(a, b, 0.5), (2.5, 2.5, 0))

    def test_isvect3(self):
        assert isvect3((1, 2, 3))
        assert isvect3([1.0, 2.0, 3.0])
        assert not isvect3((1, 2))
        assert not isvect3((1, 2, 'x'))

    def test_unit(self):
        assert vclose(unit((0, 0, 4)), (0, 0, 1))
        assert unit((0, 0, 0)) is None
        assert unit((0, 0, 1e-12)) is None
        assert unit((math.inf, 0, 0)) is None

    def test_angle(self):
        assert close(angle((1, 0, 0), (0, 1, 0)), math.pi/2)
        assert close(angle((1, 0, 0), (-1, 0, 0)), math.pi)
        assert close(angle((1, 0, 0), (2, 0, 0)), 0.0)
        assert math.isnan(angle((0, 0, 0), (1, 0, 0)))

    def test_parallel_orthogonal(self):
        assert vparallel((1, 0, 0), (-3, 0, 0))
        assert not vparallel((1, 0, 0), (1, 1, 0))
        assert not vparallel((0, 0, 0), (1, 0, 0))
        assert vorthogonal((1, 0, 0), (0, 0, 7))
        assert not vorthogonal((1, 0, 0), (1, 1, 0))

    def test_any_orthogonal(self):
        for v in [(1, 0, 0), (0, 0, 1), (1, 2, 3), (0, 0.1, -5)]:
            u = any_orthogonal(v)
            assert close(mag(u), 1.0)
            assert close(dot(u, v), 0.0)

    def test_array_bridge(self):
        arr = to_array((1, 2, 3))
        assert arr.shape == (3,)
        assert from_array(arr) == (1.0, 2.0, 3.0)
