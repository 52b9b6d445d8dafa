# materials/dielectric.py
import math
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.core.utils import random_double, reflect, refract
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, ScatterRecord

class Dielectric(Material):
    def __init__(self, ir: float):
        super().__init__()
        self.ir = ir  # index of refraction

    def scatter(self, ray_in: Ray, rec: HitRecord) -> ScatterRecord:
        attenuation = Vector3(1.0, 1.0, 1.0)  # Glass doesn't absorb light

        # Determine if we're entering or exiting the material
        refraction_ratio = 1.0 / self.ir if rec.front_face else self.ir

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        cannot_refract = refraction_ratio * sin_theta > 1.0
        if cannot_refract or reflectance(cos_theta, refraction_ratio) > random_double():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, refraction_ratio)

        return ScatterRecord(attenuation, Ray(rec.p, direction, ray_in.time), is_specular=True)

def reflectance(cosine: float, ref_idx: float) -> float:
    """
    Schlick's approximation; a boundary between matched indices does not reflect.
    """
    if ref_idx == 1.0:
        return 0.0
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cosine), 5)
