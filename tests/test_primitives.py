"""Unit tests for rectangles, boxes and triangles.

Tests cover:
- Axis-aligned rectangle hits, misses, parallel rays and texture coordinates
- Padded bounding boxes for flat primitives
- Box hits from outside and inside
- Triangle barycentric solve, degenerate triangles and UV interpolation
- Area-light sampling densities
- Zero-width rectangles and flat boxes resolving without errors
"""

import math

import pytest

from pathtracer.core.ray import Ray
from pathtracer.core.uv import UV
from pathtracer.core.vector import Vector3
from pathtracer.geometry.aarect import XYRect, XZRect, YZRect
from pathtracer.geometry.box import Box
from pathtracer.geometry.triangle import Triangle
from pathtracer.geometry.world import HittableList
from pathtracer.renderer.integrator import ray_color


class TestRectangles:
    """Tests for axis-aligned rectangles."""

    def test_xy_rect_hit(self, grey):
        rect = XYRect(-1, 1, -1, 1, 0, grey)
        rec = rect.hit(Ray(Vector3(0.5, 0, 3), Vector3(0, 0, -1)), 0.001, math.inf)
        assert rec is not None
        assert rec.t == pytest.approx(3.0)
        assert rec.p.z == pytest.approx(0.0)
        assert rec.u == pytest.approx(0.75)
        assert rec.v == pytest.approx(0.5)
        assert rec.front_face

    def test_xz_rect_back_face(self, grey):
        rect = XZRect(0, 1, 0, 1, 2, grey)
        rec = rect.hit(Ray(Vector3(0.5, 0, 0.5), Vector3(0, 1, 0)), 0.001, math.inf)
        assert rec is not None
        assert not rec.front_face
        assert tuple(rec.normal) == (0, -1, 0)

    def test_yz_rect_miss_outside_bounds(self, grey):
        rect = YZRect(0, 1, 0, 1, 0, grey)
        assert rect.hit(Ray(Vector3(-1, 2, 0.5), Vector3(1, 0, 0)), 0.001, math.inf) is None

    def test_parallel_ray_misses(self, grey):
        rect = XYRect(-1, 1, -1, 1, 0, grey)
        assert rect.hit(Ray(Vector3(0, 0, 0), Vector3(1, 0, 0)), 0.001, math.inf) is None

    def test_box_is_padded(self, grey):
        box = XZRect(0, 1, 0, 2, 5, grey).bounding_box(0, 1)
        assert box.minimum.y < 5 < box.maximum.y
        assert box.extent(1) > 0
        assert (box.minimum.x, box.maximum.x) == (0, 1)
        assert (box.minimum.z, box.maximum.z) == (0, 2)

    def test_sampled_directions_hit_rect(self, light):
        rect = XZRect(-1, 1, -1, 1, 4, light)
        origin = Vector3(0, 0, 0)
        for _ in range(50):
            direction = rect.random(origin)
            assert rect.hit(Ray(origin, direction), 0.001, math.inf) is not None

    def test_pdf_value_straight_above(self, light):
        rect = XZRect(-1, 1, -1, 1, 4, light)
        # distance^2 / (cos * area) with cos = 1 at the center.
        assert rect.pdf_value(Vector3(0, 0, 0), Vector3(0, 1, 0)) == pytest.approx(16 / 4)

    def test_pdf_value_zero_on_miss(self, light):
        rect = XZRect(-1, 1, -1, 1, 4, light)
        assert rect.pdf_value(Vector3(0, 0, 0), Vector3(0, -1, 0)) == 0.0


class TestBox:
    """Tests for six-sided boxes."""

    def test_hit_from_outside(self, grey):
        box = Box(Vector3(0, 0, 0), Vector3(1, 1, 1), grey)
        rec = box.hit(Ray(Vector3(0.5, 0.5, 5), Vector3(0, 0, -1)), 0.001, math.inf)
        assert rec is not None
        assert rec.t == pytest.approx(4.0)

    def test_hit_from_inside(self, grey):
        box = Box(Vector3(0, 0, 0), Vector3(1, 1, 1), grey)
        rec = box.hit(Ray(Vector3(0.5, 0.5, 0.5), Vector3(1, 0, 0)), 0.001, math.inf)
        assert rec is not None
        assert rec.p.x == pytest.approx(1.0)

    def test_bounding_box(self, grey):
        box = Box(Vector3(0, 0, 0), Vector3(2, 3, 4), grey).bounding_box(0, 1)
        assert tuple(box.minimum) == (0, 0, 0)
        assert tuple(box.maximum) == (2, 3, 4)


class TestTriangle:
    """Tests for triangle intersection."""

    def make(self, material):
        return Triangle(Vector3(0, 0, 0), Vector3(1, 0, 0), Vector3(0, 1, 0), material,
                        uv0=UV(0, 0), uv1=UV(1, 0), uv2=UV(0, 1))

    def test_hit_barycentric(self, grey):
        tri = self.make(grey)
        rec = tri.hit(Ray(Vector3(0.25, 0.25, 2), Vector3(0, 0, -1)), 0.001, math.inf)
        assert rec is not None
        assert rec.t == pytest.approx(2.0)
        assert tuple(rec.p) == pytest.approx((0.25, 0.25, 0))
        # With these UVs the texture coordinates equal the barycentrics.
        assert rec.u == pytest.approx(0.25)
        assert rec.v == pytest.approx(0.25)
        assert rec.front_face

    def test_miss_outside_edges(self, grey):
        tri = self.make(grey)
        assert tri.hit(Ray(Vector3(0.8, 0.8, 2), Vector3(0, 0, -1)), 0.001, math.inf) is None
        assert tri.hit(Ray(Vector3(-0.1, 0.5, 2), Vector3(0, 0, -1)), 0.001, math.inf) is None

    def test_parallel_ray_misses(self, grey):
        tri = self.make(grey)
        assert tri.hit(Ray(Vector3(0.2, 0.2, 0), Vector3(1, 0, 0)), 0.001, math.inf) is None

    def test_degenerate_triangle_does_not_raise(self, grey):
        tri = Triangle(Vector3(0, 0, 0), Vector3(1, 1, 1), Vector3(2, 2, 2), grey)
        assert tri.hit(Ray(Vector3(0, 0, 5), Vector3(0.1, 0.1, -1)), 0.001, math.inf) is None
        box = tri.bounding_box(0, 1)
        assert box.extent(0) > 0

    def test_flat_triangle_box_is_padded(self, grey):
        box = self.make(grey).bounding_box(0, 1)
        assert box.extent(2) > 0
        assert box.minimum.z < 0 < box.maximum.z

    def test_vertex_normals_are_interpolated(self, grey):
        n = Vector3(0, 0, 1)
        tilted = Vector3(1, 0, 1).normalize()
        tri = Triangle(Vector3(0, 0, 0), Vector3(1, 0, 0), Vector3(0, 1, 0), grey,
                       n0=n, n1=tilted, n2=n)
        rec = tri.hit(Ray(Vector3(0.5, 0.1, 2), Vector3(0, 0, -1)), 0.001, math.inf)
        assert rec.normal.x > 0
        assert rec.normal.length() == pytest.approx(1.0)

    def test_hits_lie_in_plane(self, grey):
        tri = Triangle(Vector3(-1, 0, -1), Vector3(2, 1, 0), Vector3(0, 3, 1), grey)
        normal = tri.face_normal
        for x in range(-3, 4):
            for y in range(-3, 4):
                origin = Vector3(x * 0.3, y * 0.3, 10)
                rec = tri.hit(Ray(origin, Vector3(0.05, 0.1, -1)), 0.001, math.inf)
                if rec is not None:
                    assert abs((rec.p - tri.v0).dot(normal)) < 1e-9

    def test_light_sampling(self, light):
        tri = Triangle(Vector3(-1, 4, -1), Vector3(1, 4, -1), Vector3(0, 4, 1), light)
        origin = Vector3(0, 0, 0)
        for _ in range(50):
            direction = tri.random(origin)
            assert tri.pdf_value(origin, direction) > 0


class TestDegenerateRectangles:
    """Tests for rectangles and boxes with a zero-width side."""

    def test_zero_width_rect_hit(self, grey):
        rect = XYRect(0, 0, -1, 1, 0, grey)
        rec = rect.hit(Ray(Vector3(0, 0, 5), Vector3(0, 0, -1)), 0.001, math.inf)
        assert rec is not None
        assert rec.u == 0.0
        assert rec.v == pytest.approx(0.5)

    def test_zero_width_rect_miss(self, grey):
        rect = XYRect(0, 0, -1, 1, 0, grey)
        assert rect.hit(Ray(Vector3(0.5, 0, 5), Vector3(0, 0, -1)), 0.001, math.inf) is None

    def test_zero_area_light_has_zero_density(self, light):
        rect = XZRect(0, 0, -1, 1, 2, light)
        assert rect.area() == 0
        assert rect.pdf_value(Vector3(0, 0, 0), Vector3(0, 1, 0)) == 0.0

    def test_flat_box_renders(self, grey):
        flat = Box(Vector3(0, -1, -1), Vector3(0, 1, 1), grey)
        world = HittableList([flat])
        sky = Vector3(0.7, 0.8, 1.0)
        for origin in (Vector3(0, 0, 5), Vector3(5, 0, 0), Vector3(0, 5, 0)):
            color = ray_color(Ray(origin, origin * -1), sky, world, 5)
            assert all(math.isfinite(c) and c >= 0 for c in color)
        box = flat.bounding_box(0, 1)
        assert box.extent(0) > 0
