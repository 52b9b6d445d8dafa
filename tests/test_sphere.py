"""Unit tests for static and moving spheres.

Tests cover:
- Hits from outside (front face) and inside (back face)
- Misses and t-range rejection
- Hit points lying on the surface
- Exact bounding boxes and the swept box of a moving sphere
- Solid-angle sampling toward a sphere
"""

import math

import pytest

from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_unit_vector
from pathtracer.core.vector import Vector3
from pathtracer.geometry.sphere import MovingSphere, Sphere


class TestSphereIntersection:
    """Tests for ray-sphere intersection."""

    def test_direct_hit(self, grey):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, grey)
        rec = sphere.hit(Ray(Vector3(0, 0, 5), Vector3(0, 0, -1)), 0.001, math.inf)
        assert rec is not None
        assert rec.t == pytest.approx(4.0)
        assert tuple(rec.p) == pytest.approx((0, 0, 1))
        assert tuple(rec.normal) == pytest.approx((0, 0, 1))
        assert rec.front_face
        assert rec.material is grey

    def test_miss(self, grey):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, grey)
        assert sphere.hit(Ray(Vector3(5, 0, 0), Vector3(0, 0, -1)), 0.001, math.inf) is None

    def test_inside_hit_is_back_face(self, grey):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, grey)
        rec = sphere.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, 1)), 0.001, math.inf)
        assert rec is not None
        assert rec.t == pytest.approx(1.0)
        assert not rec.front_face
        # The stored normal faces the incoming ray.
        assert tuple(rec.normal) == pytest.approx((0, 0, -1))

    def test_t_max_rejects_far_hit(self, grey):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, grey)
        assert sphere.hit(Ray(Vector3(0, 0, 5), Vector3(0, 0, -1)), 0.001, 3.0) is None

    def test_random_hits_lie_on_surface(self, grey):
        center = Vector3(1, -2, 3)
        sphere = Sphere(center, 1.5, grey)
        hits = 0
        for _ in range(200):
            origin = center + random_unit_vector() * 5
            target = center + random_unit_vector() * 1.2
            rec = sphere.hit(Ray(origin, target - origin), 0.001, math.inf)
            if rec is None:
                continue
            hits += 1
            assert abs((rec.p - center).length() - 1.5) < 1e-4
        assert hits > 0

    def test_uv_in_unit_square(self, grey):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, grey)
        rec = sphere.hit(Ray(Vector3(0, 0, 5), Vector3(0, 0, -1)), 0.001, math.inf)
        assert 0.0 <= rec.u <= 1.0
        assert rec.v == pytest.approx(0.5)


class TestSphereBounds:
    """Tests for sphere bounding boxes."""

    def test_box_is_center_plus_minus_radius(self, grey):
        sphere = Sphere(Vector3(1, 2, 3), 0.5, grey)
        box = sphere.bounding_box(0, 1)
        assert tuple(box.minimum) == (0.5, 1.5, 2.5)
        assert tuple(box.maximum) == (1.5, 2.5, 3.5)

    def test_moving_sphere_box_covers_both_ends(self, grey):
        sphere = MovingSphere(Vector3(0, 0, 0), Vector3(0, 2, 0), 0.0, 1.0, 0.5, grey)
        box = sphere.bounding_box(0.0, 1.0)
        assert tuple(box.minimum) == pytest.approx((-0.5, -0.5, -0.5))
        assert tuple(box.maximum) == pytest.approx((0.5, 2.5, 0.5))


class TestMovingSphere:
    """Tests for motion-blurred spheres."""

    def test_center_interpolates(self, grey):
        sphere = MovingSphere(Vector3(0, 0, 0), Vector3(2, 0, 0), 0.0, 1.0, 0.5, grey)
        assert tuple(sphere.center(0.5)) == pytest.approx((1, 0, 0))

    def test_hit_depends_on_ray_time(self, grey):
        sphere = MovingSphere(Vector3(0, 0, 0), Vector3(0, 3, 0), 0.0, 1.0, 0.5, grey)
        early = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1), time=0.0)
        late = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1), time=1.0)
        assert sphere.hit(early, 0.001, math.inf) is not None
        assert sphere.hit(late, 0.001, math.inf) is None

    def test_equal_keyframe_times(self, grey):
        sphere = MovingSphere(Vector3(1, 1, 1), Vector3(5, 5, 5), 0.5, 0.5, 1.0, grey)
        assert tuple(sphere.center(0.7)) == (1, 1, 1)


class TestSphereSampling:
    """Tests for sampling directions toward a sphere."""

    def test_sampled_directions_hit_sphere(self, light):
        sphere = Sphere(Vector3(0, 5, 0), 1.0, light)
        origin = Vector3(0, 0, 0)
        for _ in range(100):
            direction = sphere.random(origin)
            assert sphere.hit(Ray(origin, direction), 0.001, math.inf) is not None
            assert sphere.pdf_value(origin, direction) > 0

    def test_pdf_is_inverse_solid_angle(self, light):
        sphere = Sphere(Vector3(0, 5, 0), 1.0, light)
        cos_theta_max = math.sqrt(1 - 1 / 25)
        expected = 1 / (2 * math.pi * (1 - cos_theta_max))
        assert sphere.pdf_value(Vector3(0, 0, 0), Vector3(0, 1, 0)) == pytest.approx(expected)

    def test_pdf_zero_when_missing(self, light):
        sphere = Sphere(Vector3(0, 5, 0), 1.0, light)
        assert sphere.pdf_value(Vector3(0, 0, 0), Vector3(0, -1, 0)) == 0.0
