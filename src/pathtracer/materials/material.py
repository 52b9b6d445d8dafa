# materials/material.py
from typing import Optional, Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.pdf import PDF
from pathtracer.materials.textures import Texture, as_texture

class ScatterRecord:
    """
    Result of a scattering event.

    ray is the scattered ray drawn from the material's own distribution and
    pdf_value its density. Specular materials have no pdf and are followed
    without importance weighting.
    """
    def __init__(self, attenuation: Vector3, ray: Ray, pdf_value: float = 0.0,
                 pdf: Optional[PDF] = None, is_specular: bool = False):
        self.attenuation = attenuation
        self.ray = ray
        self.pdf_value = pdf_value
        self.pdf = pdf
        self.is_specular = is_specular

class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    """
    def __init__(self, texture: Optional[Union[Vector3, Texture]] = None):
        self.texture = as_texture(texture) if texture is not None else None

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[ScatterRecord]:
        """
        Computes the scattered ray and attenuation, or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def scattering_pdf(self, ray_in: Ray, rec: HitRecord, scattered: Ray) -> float:
        return 0.0

    def emitted(self, rec: HitRecord) -> Vector3:
        return Vector3(0, 0, 0)

    def get_texture_color(self, rec: HitRecord) -> Vector3:
        """
        Get the color from the texture at the hit's surface coordinates.
        If no texture is set, returns None.
        """
        if self.texture is None:
            return None
        return self.texture.sample(rec.u, rec.v, rec.p)
