# materials/isotropic.py
import math
from typing import Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, ScatterRecord
from pathtracer.materials.pdf import SpherePDF
from pathtracer.materials.textures import Texture

class Isotropic(Material):
    """Phase function of a participating medium: scatters uniformly in all directions."""
    def __init__(self, albedo: Union[Vector3, Texture]):
        super().__init__(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord) -> ScatterRecord:
        pdf = SpherePDF()
        scattered = Ray(rec.p, pdf.sample(), ray_in.time)
        return ScatterRecord(self.get_texture_color(rec), scattered, pdf.density(scattered.direction), pdf)

    def scattering_pdf(self, ray_in: Ray, rec: HitRecord, scattered: Ray) -> float:
        return 1 / (4 * math.pi)
