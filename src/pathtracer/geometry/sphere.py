# geometry/sphere.py
import math
from typing import Optional, Tuple
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.core.onb import ONB
from pathtracer.core.utils import INFINITY, random_to_sphere
from pathtracer.geometry.hittable import Hittable, HitRecord

def sphere_uv(p: Vector3) -> Tuple[float, float]:
    """
    Texture coordinates of a point p on the unit sphere.

    u: angle around the Y axis from X=-1, normalized to [0, 1].
    v: angle from Y=-1 to Y=+1, normalized to [0, 1].
    """
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x) + math.pi
    return phi / (2 * math.pi), theta / math.pi

def hit_sphere(ray: Ray, center: Vector3, radius: float, material,
               t_min: float, t_max: float) -> Optional[HitRecord]:
    oc = ray.origin - center
    a = ray.direction.dot(ray.direction)
    if a == 0:
        return None
    half_b = oc.dot(ray.direction)
    c = oc.dot(oc) - radius * radius
    discriminant = half_b * half_b - a * c

    if discriminant < 0:
        return None

    sqrt_disc = math.sqrt(discriminant)
    # Find the nearest root that lies in the acceptable range
    root = (-half_b - sqrt_disc) / a
    if root <= t_min or root >= t_max:
        root = (-half_b + sqrt_disc) / a
        if root <= t_min or root >= t_max:
            return None

    rec = HitRecord()
    rec.t = root
    rec.p = ray.at(rec.t)
    outward_normal = (rec.p - center) / radius
    rec.set_face_normal(ray, outward_normal)
    rec.u, rec.v = sphere_uv(outward_normal)
    rec.material = material
    return rec

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return hit_sphere(ray, self.center, self.radius, self.material, t_min, t_max)

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        # The bounding box of a sphere is center ± radius
        offset = Vector3(abs(self.radius), abs(self.radius), abs(self.radius))
        return AABB(self.center - offset, self.center + offset)

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        if self.hit(Ray(origin, direction), 0.001, INFINITY) is None:
            return 0.0
        distance_squared = (self.center - origin).length_squared()
        ratio = self.radius * self.radius / distance_squared
        if ratio >= 1.0:
            return 0.0
        cos_theta_max = math.sqrt(1 - ratio)
        solid_angle = 2 * math.pi * (1 - cos_theta_max)
        return 1 / solid_angle

    def random(self, origin: Vector3) -> Vector3:
        direction = self.center - origin
        distance_squared = direction.length_squared()
        uvw = ONB(direction)
        return uvw.local(random_to_sphere(self.radius, distance_squared))

class MovingSphere(Hittable):
    """
    A sphere whose center moves linearly from center0 at time0 to
    center1 at time1.
    """
    def __init__(self, center0: Vector3, center1: Vector3, time0: float, time1: float,
                 radius: float, material):
        self.center0 = center0
        self.center1 = center1
        self.time0 = time0
        self.time1 = time1
        self.radius = radius
        self.material = material

    def center(self, time: float) -> Vector3:
        if self.time1 == self.time0:
            return self.center0
        fraction = (time - self.time0) / (self.time1 - self.time0)
        return self.center0 + (self.center1 - self.center0) * fraction

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return hit_sphere(ray, self.center(ray.time), self.radius, self.material, t_min, t_max)

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        # The swept volume is covered by the union of the boxes at both ends.
        offset = Vector3(abs(self.radius), abs(self.radius), abs(self.radius))
        c0 = self.center(time0)
        c1 = self.center(time1)
        return AABB.surrounding_box(AABB(c0 - offset, c0 + offset),
                                    AABB(c1 - offset, c1 + offset))
