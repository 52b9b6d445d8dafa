# geometry/constant_medium.py
import math
from typing import Optional, Union
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.core.utils import INFINITY, random_double
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.materials.isotropic import Isotropic
from pathtracer.materials.textures import Texture

class ConstantMedium(Hittable):
    """
    A homogeneous participating medium (smoke, fog) filling a boundary object.

    Rays scatter inside the volume after an exponentially distributed
    free-flight distance; the boundary must be closed and convex.
    """
    def __init__(self, boundary: Hittable, density: float, albedo: Union[Vector3, Texture]):
        self.boundary = boundary
        self.density = density
        self.neg_inv_density = -1.0 / density
        self.phase_function = Isotropic(albedo)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        rec1 = self.boundary.hit(ray, -INFINITY, INFINITY)
        if rec1 is None:
            return None
        rec2 = self.boundary.hit(ray, rec1.t + 0.0001, INFINITY)
        if rec2 is None:
            return None

        t_enter = max(rec1.t, t_min)
        t_exit = min(rec2.t, t_max)
        if t_enter >= t_exit:
            return None
        t_enter = max(t_enter, 0.0)

        ray_length = ray.direction.length()
        distance_inside_boundary = (t_exit - t_enter) * ray_length
        # 1 - random() lies in (0, 1], so the logarithm is always defined.
        hit_distance = self.neg_inv_density * math.log(1.0 - random_double())
        if hit_distance > distance_inside_boundary:
            return None

        rec = HitRecord()
        rec.t = t_enter + hit_distance / ray_length
        rec.p = ray.at(rec.t)
        rec.normal = Vector3(1, 0, 0)  # arbitrary
        rec.front_face = True          # also arbitrary
        rec.material = self.phase_function
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> Optional[AABB]:
        return self.boundary.bounding_box(time0, time1)
