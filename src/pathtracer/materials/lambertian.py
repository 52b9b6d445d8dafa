# materials/lambertian.py

import math
from typing import Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, ScatterRecord
from pathtracer.materials.pdf import CosinePDF
from pathtracer.materials.textures import Texture

class Lambertian(Material):
    """
    Lambertian diffuse material with optional texture support.
    """

    def __init__(self, albedo: Union[Vector3, Texture]):
        super().__init__(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord) -> ScatterRecord:
        """
        Scatter a ray with cosine-weighted importance sampling about the normal.
        """
        pdf = CosinePDF(rec.normal)
        direction = pdf.sample().normalize()
        scattered = Ray(rec.p, direction, ray_in.time)

        # Fetch the base color (albedo) from the texture.
        albedo = self.get_texture_color(rec)

        return ScatterRecord(albedo, scattered, pdf.density(direction), pdf)

    def scattering_pdf(self, ray_in: Ray, rec: HitRecord, scattered: Ray) -> float:
        cosine = rec.normal.dot(scattered.direction.normalize())
        return 0.0 if cosine < 0 else cosine / math.pi
