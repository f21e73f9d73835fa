import itertools
import logging
import math

import pytest

from acmegeom import (
    NONE, Box, Circle, DispatchError, Frame, Kind, Line, Plane, Point, Ray,
    Segment, Sphere, Triangle, Vector, intersection,
)
## unit tests for intersection()

def same_segment(s, p, q):
    """segment ``s`` joins ``p`` and ``q``, in either order"""
    p, q = Point(*p), Point(*q)
    if s.kind is not Kind.SEGMENT:
        return False
    return ((s.point0.is_approx(p) and s.point1.is_approx(q))
            or (s.point0.is_approx(q) and s.point1.is_approx(p)))

class TestPoint:
    def test_contained(self):
        p = Point(0.5, 0, 0)
        for other in [Point(0.5, 0, 0), Line((0, 0, 0), (1, 0, 0)),
                      Segment((0, 0, 0), (1, 0, 0)), Plane((0, 0, 0), (0, 0, 1)),
                      Sphere((0, 0, 0), 1.0), Box((0, 0, 0), (1, 1, 1)),
                      Circle((0, 0, 0), 1.0, (0, 0, 1)),
                      Triangle((0, 0, 0), (1, 0, 0), (0, 1, 0))]:
            assert intersection(p, other) == p
            assert intersection(other, p) == p

    def test_not_contained(self):
        p = Point(5, 5, 5)
        assert intersection(p, Sphere((0, 0, 0), 1.0)) is NONE
        assert intersection(p, Ray((0, 0, 0), (-1, -1, -1))) is NONE
        assert intersection(p, Point(5, 5, 5.1)) is NONE

    def test_not_a_point_set(self):
        assert intersection(Point(), Vector(1, 0, 0)) is NONE
        assert intersection(Point(), Frame()) is NONE

class TestLinearLinear:
    def test_crossing(self):
        a = Line((0, 0, 0), (1, 0, 0))
        b = Line((1, -1, 0), (0, 1, 0))
        assert intersection(a, b).is_approx(Point(1, 0, 0))

    def test_parallel_and_skew(self):
        a = Line((0, 0, 0), (1, 0, 0))
        assert intersection(a, Line((0, 1, 0), (1, 0, 0))) is NONE
        assert intersection(a, Line((0, 0, 1), (0, 1, 0))) is NONE

    def test_coincident_lines(self):
        a = Line((0, 0, 0), (1, 0, 0))
        result = intersection(a, Line((5, 0, 0), (2, 0, 0)))
        assert result.kind is Kind.LINE
        assert result.is_approx(a)

    def test_line_and_collinear_segment(self):
        s = Segment((2, 0, 0), (3, 0, 0))
        assert intersection(Line((0, 0, 0), (1, 0, 0)), s) is s
        assert intersection(s, Line((0, 0, 0), (-1, 0, 0))) is s

    def test_rays(self):
        r = Ray((0, 0, 0), (1, 0, 0))
        assert same_segment(intersection(r, Ray((2, 0, 0), (-1, 0, 0))), (0, 0, 0), (2, 0, 0))
        assert intersection(r, Ray((0, 0, 0), (-1, 0, 0))).is_approx(Point(0, 0, 0))
        assert intersection(r, Ray((3, 0, 0), (1, 0, 0))).is_approx(Ray((3, 0, 0), (1, 0, 0)))
        assert intersection(r, Ray((-1, 0, 0), (-1, 0, 0))) is NONE

    def test_segments(self):
        a = Segment((0, 0, 0), (2, 2, 0))
        assert intersection(a, Segment((0, 2, 0), (2, 0, 0))).is_approx(Point(1, 1, 0))
        assert intersection(Segment((0, 0, 0), (1, 0, 0)), Segment((2, -1, 0), (2, 1, 0))) is NONE
        overlap = intersection(Segment((0, 0, 0), (2, 0, 0)), Segment((1, 0, 0), (5, 0, 0)))
        assert same_segment(overlap, (1, 0, 0), (2, 0, 0))
        touch = intersection(Segment((0, 0, 0), (1, 0, 0)), Segment((1, 0, 0), (2, 0, 0)))
        assert touch.is_approx(Point(1, 0, 0))

    def test_ray_misses_behind_origin(self):
        r = Ray((0, 0, 0), (1, 0, 0))
        assert intersection(r, Line((-1, -1, 0), (0, 1, 0))) is NONE

class TestLinearPlanar:
    plane = Plane((0, 0, 0), (0, 0, 1))
    tri = Triangle((0, 0, 0), (1, 0, 0), (0, 1, 0))
    disk = Circle((0, 0, 0), 2.0, (0, 0, 1))

    def test_line_plane(self):
        assert intersection(Line((0, 0, -1), (0, 0, 1)), self.plane).is_approx(Point(0, 0, 0))
        inside = Line((0, 0, 0), (1, 1, 0))
        assert intersection(inside, self.plane) is inside
        assert intersection(Line((0, 0, 1), (1, 0, 0)), self.plane) is NONE
        assert intersection(Ray((0, 0, 1), (0, 0, 1)), self.plane) is NONE
        assert intersection(Segment((1, 1, -2), (1, 1, 2)), self.plane).is_approx(Point(1, 1, 0))

    def test_linear_triangle_crossing(self):
        hit = intersection(Segment((0.25, 0.25, -1), (0.25, 0.25, 1)), self.tri)
        assert hit.is_approx(Point(0.25, 0.25, 0))
        assert intersection(Segment((2, 2, -1), (2, 2, 1)), self.tri) is NONE

    def test_linear_triangle_coplanar(self):
        chord = intersection(Line((-1, 0.25, 0), (1, 0, 0)), self.tri)
        assert same_segment(chord, (0, 0.25, 0), (0.75, 0.25, 0))
        inner = Segment((0.1, 0.1, 0), (0.2, 0.2, 0))
        assert intersection(inner, self.tri) is inner
        assert intersection(Line((-1, 2, 0), (1, 0, 0)), self.tri) is NONE

    def test_linear_disk(self):
        chord = intersection(Line((-5, 0, 0), (1, 0, 0)), self.disk)
        assert same_segment(chord, (-2, 0, 0), (2, 0, 0))
        assert intersection(Line((-5, 2, 0), (1, 0, 0)), self.disk).is_approx(Point(0, 2, 0))
        assert intersection(Line((0.5, 0, -1), (0, 0, 1)), self.disk).is_approx(Point(0.5, 0, 0))
        assert intersection(Line((3, 0, -1), (0, 0, 1)), self.disk) is NONE

class TestLinearSolid:
    ball = Sphere((0, 0, 0), 1.0)
    box = Box((0, 0, 0), (1, 1, 1))

    def test_line_sphere(self):
        chord = intersection(Line((0, 0, -5), (0, 0, 1)), self.ball)
        assert chord.kind is Kind.SEGMENT
        assert chord.point0.is_approx(Point(0, 0, -1))
        assert chord.point1.is_approx(Point(0, 0, 1))
        assert intersection(Line((-5, 1, 0), (1, 0, 0)), self.ball).is_approx(Point(0, 1, 0))
        assert intersection(Line((-5, 2, 0), (1, 0, 0)), self.ball) is NONE

    def test_ray_and_segment_sphere(self):
        out = intersection(Ray((0, 0, 0), (1, 0, 0)), self.ball)
        assert same_segment(out, (0, 0, 0), (1, 0, 0))
        inner = Segment((0, 0, 0), (0.5, 0, 0))
        assert intersection(inner, self.ball) is inner
        assert intersection(Ray((2, 0, 0), (1, 0, 0)), self.ball) is NONE

    def test_line_box(self):
        chord = intersection(Line((-1, 0.5, 0.5), (1, 0, 0)), self.box)
        assert same_segment(chord, (0, 0.5, 0.5), (1, 0.5, 0.5))
        assert intersection(Line((-1, 2, 0.5), (1, 0, 0)), self.box) is NONE
        diag = intersection(Line((0, 0, 0), (1, 1, 1)), self.box)
        assert same_segment(diag, (0, 0, 0), (1, 1, 1))
        corner = intersection(Line((2, 0, 0), (-1, 1, 0)), Box((0, 0, 0), (1, 1, 1)))
        assert corner.is_approx(Point(1, 1, 0))

class TestPlanes:
    plane = Plane((0, 0, 0), (0, 0, 1))

    def test_plane_plane(self):
        line = intersection(self.plane, Plane((0, 0, 0), (1, 0, 0)))
        assert line.kind is Kind.LINE
        assert line.is_parallel(Vector(0, 1, 0))
        assert line.is_inside((0, 5, 0))
        assert intersection(self.plane, Plane((3, 3, 0), (0, 0, -2))) is self.plane
        assert intersection(self.plane, Plane((0, 0, 1), (0, 0, 1))) is NONE

    def test_plane_triangle(self):
        tri = Triangle((-1, 0, 0), (1, 0, 0), (0, 1, 0))
        cut = intersection(Plane((0, 0, 0), (1, 0, 0)), tri)
        assert same_segment(cut, (0, 0, 0), (0, 1, 0))
        assert intersection(Plane((0, 1, 0), (0, 1, 0)), tri).is_approx(Point(0, 1, 0))
        assert intersection(self.plane, tri) is tri
        assert intersection(Plane((0, 5, 0), (0, 1, 0)), tri) is NONE

    def test_plane_circle(self):
        disk = Circle((0, 0, 0), 2.0, (0, 0, 1))
        chord = intersection(Plane((0, 0, 0), (1, 0, 0)), disk)
        assert same_segment(chord, (0, -2, 0), (0, 2, 0))
        assert intersection(disk, self.plane) is disk

    def test_plane_sphere(self):
        ball = Sphere((0, 0, 0), 1.0)
        section = intersection(Plane((0, 0, 0.5), (0, 0, 1)), ball)
        assert section.is_approx(Circle((0, 0, 0.5), math.sqrt(0.75), (0, 0, 1)))
        assert intersection(ball, Plane((0, 0, 1), (0, 0, 1))).is_approx(Point(0, 0, 1))
        assert intersection(Plane((0, 0, 2), (0, 0, 1)), ball) is NONE

class TestPlanarPlanar:
    def test_triangles_crossing(self):
        t1 = Triangle((-1, -1, 0), (1, -1, 0), (0, 1, 0))
        t2 = Triangle((0, -0.5, -1), (0, -0.5, 1), (0, 2, 0))
        cut = intersection(t1, t2)
        assert same_segment(cut, (0, 1, 0), (0, -0.5, 0))
        assert same_segment(intersection(t2, t1), (0, 1, 0), (0, -0.5, 0))

    def test_triangles_coplanar(self):
        t1 = Triangle((0, 0, 0), (1, 0, 0), (0, 1, 0))
        assert intersection(t1, Triangle((0, 0, 0), (1, 0, 0), (0, 1, 0))) == t1
        assert intersection(t1, Triangle((0.1, 0.1, 0), (2, 0, 0), (0, 2, 0))) is NONE
        assert intersection(t1, t1.translate((0, 0, 1))) is NONE

    def test_circles(self):
        c1 = Circle((0, 0, 0), 1.0, (0, 0, 1))
        c2 = Circle((0, 0, 0), 1.0, (1, 0, 0))
        assert same_segment(intersection(c1, c2), (0, -1, 0), (0, 1, 0))
        assert intersection(c1, c2.translate((5, 0, 0))) is NONE

    def test_triangle_circle(self):
        tri = Triangle((-1, -1, 0), (1, -1, 0), (0, 1, 0))
        disk = Circle((0, 0, 0), 0.5, (1, 0, 0))
        assert same_segment(intersection(tri, disk), (0, -0.5, 0), (0, 0.5, 0))

class TestCoplanarPlanar:
    t1 = Triangle((0, 0, 0), (1, 0, 0), (0, 1, 0))

    def test_shared_edge(self):
        t2 = Triangle((0, 0, 0), (1, 0, 0), (0, -1, 0))
        assert same_segment(intersection(self.t1, t2), (0, 0, 0), (1, 0, 0))
        assert same_segment(intersection(t2, self.t1), (0, 0, 0), (1, 0, 0))

    def test_partial_shared_edge(self):
        t2 = Triangle((0.25, 0, 0), (2, 0, 0), (1, -1, 0))
        assert same_segment(intersection(self.t1, t2), (0.25, 0, 0), (1, 0, 0))

    def test_shared_vertex(self):
        t2 = Triangle((1, 0, 0), (2, 1, 0), (2, -1, 0))
        assert intersection(self.t1, t2).is_approx(Point(1, 0, 0))
        assert intersection(t2, self.t1).is_approx(Point(1, 0, 0))

    def test_contained_triangle(self):
        small = Triangle((0.1, 0.1, 0), (0.3, 0.1, 0), (0.1, 0.3, 0))
        assert intersection(self.t1, small) is small
        assert intersection(small, self.t1) is small

    def test_triangle_inside_disk(self):
        tri = Triangle((0, 0, 0), (0.1, 0, 0), (0, 0.1, 0))
        disk = Circle((0, 0, 0), 5.0, (0, 0, 1))
        assert intersection(tri, disk) is tri
        assert intersection(disk, tri) is tri

    def test_disk_inside_triangle(self):
        disk = Circle((0.2, 0.2, 0), 0.05, (0, 0, 1))
        assert intersection(self.t1, disk) is disk
        assert intersection(disk, self.t1) is disk

    def test_disk_tangent_to_edge(self):
        disk = Circle((0.5, -1, 0), 1.0, (0, 0, 1))
        assert intersection(self.t1, disk).is_approx(Point(0.5, 0, 0))

    def test_disks(self):
        a = Circle((0, 0, 0), 1.0, (0, 0, 1))
        assert intersection(a, Circle((2, 0, 0), 1.0, (0, 0, 1))).is_approx(Point(1, 0, 0))
        inner = Circle((0.2, 0, 0), 0.5, (0, 0, -1))
        assert intersection(a, inner) is inner
        assert intersection(a, Circle((3, 0, 0), 1.0, (0, 0, 1))) is NONE

    def test_area_overlap_not_representable(self, caplog):
        lens = Circle((1, 0, 0), 1.0, (0, 0, 1))
        with caplog.at_level(logging.DEBUG, logger='acmegeom.intersection'):
            assert intersection(self.t1, self.t1.translate((0.2, 0.2, 0))) is NONE
            assert intersection(Circle((0, 0, 0), 1.0, (0, 0, 1)), lens) is NONE
            assert intersection(self.t1, Circle((1, 0, 0), 0.5, (0, 0, 1))) is NONE
        assert any('not representable' in r.getMessage() for r in caplog.records)

    def test_apart(self):
        assert intersection(self.t1, self.t1.translate((5, 0, 0))) is NONE
        assert intersection(self.t1, Circle((5, 5, 0), 1.0, (0, 0, 1))) is NONE

class TestSameKindOrder:
    def test_nearly_parallel_far_lines(self):
        a = Line((0, 0, 0), (1, 0, 0))
        b = Line((1000, 0, 0), (1, 5e-11, 0))
        assert intersection(a, b).kind is intersection(b, a).kind

    def test_nearly_parallel_far_planes(self):
        a = Plane((0, 0, 0), (0, 0, 1))
        b = Plane((1000, 0, 0), (5e-11, 0, 1))
        assert intersection(a, b).kind is intersection(b, a).kind

class TestSolids:
    def test_sphere_sphere(self):
        a = Sphere((0, 0, 0), 1.0)
        assert intersection(a, Sphere((0, 0, 0), 1.0)).is_approx(a)
        small = Sphere((1, 0, 0), 1.0)
        assert intersection(Sphere((0, 0, 0), 3.0), small) is small
        ring = intersection(a, Sphere((1, 0, 0), 1.0))
        assert ring.is_approx(Circle((0.5, 0, 0), math.sqrt(0.75), (1, 0, 0)))
        assert intersection(a, Sphere((2, 0, 0), 1.0)).is_approx(Point(1, 0, 0))
        assert intersection(a, Sphere((5, 0, 0), 1.0)) is NONE

    def test_box_box(self):
        a = Box((0, 0, 0), (2, 2, 2))
        assert intersection(a, Box((3, 3, 3), (1, 1, 1))).is_approx(Box((1, 1, 1), (2, 2, 2)))
        assert intersection(Box((0, 0, 0), (1, 1, 1)), Box((1, 1, 1), (2, 2, 2))).is_approx(Point(1, 1, 1))
        assert intersection(a, Box((5, 5, 5), (6, 6, 6))) is NONE

    def test_not_representable(self, caplog):
        with caplog.at_level(logging.DEBUG, logger='acmegeom.intersection'):
            assert intersection(Plane((0, 0, 0), (0, 0, 1)), Box((-1, -1, -1), (1, 1, 1))) is NONE
        assert any('not representable' in r.getMessage() for r in caplog.records)
        assert intersection(Sphere((0, 0, 0), 1.0), Box((0, 0, 0), (1, 1, 1))) is NONE
        assert intersection(Triangle((0, 0, 0), (1, 0, 0), (0, 1, 0)), Sphere((0, 0, 0), 1.0)) is NONE

class TestEdgeCases:
    def test_degenerate_operands(self):
        assert intersection(Sphere((0, 0, 0), 0.0), Point()) is NONE
        assert intersection(Line((0, 0, 0), (0, 0, 0)), Plane((0, 0, 0), (0, 0, 1))) is NONE
        assert intersection(NONE, Point()) is NONE

    def test_vectors_and_frames(self):
        assert intersection(Vector(1, 0, 0), Line((0, 0, 0), (1, 0, 0))) is NONE
        assert intersection(Frame(), Frame()) is NONE

    def test_non_entity(self):
        with pytest.raises(DispatchError):
            intersection(Point(), [0, 0, 0])

    def test_method_form(self):
        a = Line((0, 0, 0), (1, 0, 0))
        assert a.intersection(Line((0, 0, 0), (0, 1, 0))).is_approx(Point(0, 0, 0))

    def test_result_kind_independent_of_order(self):
        samples = [
            Point(0.5, 0, 0), Line((0, 0, 0), (1, 0, 0)), Ray((0, -1, 0), (0, 1, 0)),
            Segment((0, 0, -1), (0, 0, 1)), Plane((0, 0, 0), (0, 0, 1)),
            Triangle((-1, -1, 0), (1, -1, 0), (0, 1, 0)), Circle((0, 0, 0), 1.0, (1, 0, 0)),
            Sphere((0, 0, 0), 1.0), Box((-1, -1, -1), (1, 1, 1)), Frame(), Vector(1, 0, 0),
        ]
        for a, b in itertools.product(samples, repeat=2):
            assert intersection(a, b).kind is intersection(b, a).kind, (a, b)
