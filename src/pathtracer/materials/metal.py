# materials/metal.py
from typing import Optional, Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.core.utils import reflect, random_in_unit_sphere
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, ScatterRecord
from pathtracer.materials.textures import Texture

class Metal(Material):
    """
    Metal material with reflective properties and optional texture support.
    """
    def __init__(self, albedo: Union[Vector3, Texture], fuzz: float = 0.0):
        super().__init__(albedo)
        self.fuzz = min(fuzz, 1)

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[ScatterRecord]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        if self.fuzz > 0:
            reflected = reflected + random_in_unit_sphere() * self.fuzz
        scattered = Ray(rec.p, reflected, ray_in.time)

        if scattered.direction.dot(rec.normal) > 0:
            attenuation = self.get_texture_color(rec)
            return ScatterRecord(attenuation, scattered, is_specular=True)

        return None  # Absorb the ray if it does not scatter forward
