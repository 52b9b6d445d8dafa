# geometry/aarect.py
from typing import Optional
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB, PADDING
from pathtracer.core.utils import INFINITY, random_double
from pathtracer.geometry.hittable import Hittable, HitRecord

class AARect(Hittable):
    """
    An axis-aligned rectangle lying in the plane axis = k.

    The rectangle spans [a0, a1] and [b0, b1] on the two remaining axes,
    taken in (x, y, z) order. Its outward normal points along +axis.
    """
    def __init__(self, axis: int, a0: float, a1: float, b0: float, b1: float,
                 k: float, material):
        self.axis = axis
        self.a_axis, self.b_axis = [i for i in range(3) if i != axis]
        self.a0 = a0
        self.a1 = a1
        self.b0 = b0
        self.b1 = b1
        self.k = k
        self.material = material
        self.outward_normal = Vector3(0, 0, 0).with_axis(axis, 1.0)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        d = ray.direction[self.axis]
        if d == 0:
            # Parallel to the plane.
            return None
        t = (self.k - ray.origin[self.axis]) / d
        if t <= t_min or t >= t_max:
            return None

        a = ray.origin[self.a_axis] + t * ray.direction[self.a_axis]
        b = ray.origin[self.b_axis] + t * ray.direction[self.b_axis]
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None

        rec = HitRecord()
        # Zero-width sides map to the texture edge.
        rec.u = (a - self.a0) / (self.a1 - self.a0) if self.a1 != self.a0 else 0.0
        rec.v = (b - self.b0) / (self.b1 - self.b0) if self.b1 != self.b0 else 0.0
        rec.t = t
        rec.set_face_normal(ray, self.outward_normal)
        rec.material = self.material
        rec.p = ray.at(t)
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        # Pad the fixed axis so the box has non-zero width in every dimension.
        lo = Vector3(0, 0, 0).with_axis(self.a_axis, self.a0).with_axis(self.b_axis, self.b0)
        hi = Vector3(0, 0, 0).with_axis(self.a_axis, self.a1).with_axis(self.b_axis, self.b1)
        lo = lo.with_axis(self.axis, self.k - PADDING)
        hi = hi.with_axis(self.axis, self.k + PADDING)
        return AABB(lo, hi)

    def area(self) -> float:
        return (self.a1 - self.a0) * (self.b1 - self.b0)

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        rec = self.hit(Ray(origin, direction), 0.001, INFINITY)
        if rec is None or self.area() == 0:
            return 0.0
        distance_squared = rec.t * rec.t * direction.length_squared()
        cosine = abs(direction.dot(rec.normal) / direction.length())
        if cosine == 0:
            return 0.0
        return distance_squared / (cosine * self.area())

    def random(self, origin: Vector3) -> Vector3:
        point = (Vector3(0, 0, 0)
                 .with_axis(self.a_axis, random_double(self.a0, self.a1))
                 .with_axis(self.b_axis, random_double(self.b0, self.b1))
                 .with_axis(self.axis, self.k))
        return point - origin

class XYRect(AARect):
    """Rectangle in the plane z = k."""
    def __init__(self, x0: float, x1: float, y0: float, y1: float, k: float, material):
        super().__init__(2, x0, x1, y0, y1, k, material)

class XZRect(AARect):
    """Rectangle in the plane y = k."""
    def __init__(self, x0: float, x1: float, z0: float, z1: float, k: float, material):
        super().__init__(1, x0, x1, z0, z1, k, material)

class YZRect(AARect):
    """Rectangle in the plane x = k."""
    def __init__(self, y0: float, y1: float, z0: float, z1: float, k: float, material):
        super().__init__(0, y0, y1, z0, z1, k, material)
