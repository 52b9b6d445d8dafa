# materials/diffuse_light.py
from typing import Optional, Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, ScatterRecord
from pathtracer.materials.textures import Texture

class DiffuseLight(Material):
    """
    Emissive material that provides constant radiance with optional texture support.

    Light is only emitted from the front face; wrap the object in FlipFace
    to emit from the other side.
    """
    def __init__(self, emit: Union[Vector3, Texture]):
        super().__init__(emit)

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[ScatterRecord]:
        """
        Emissive materials do not scatter rays.
        """
        return None

    def emitted(self, rec: HitRecord) -> Vector3:
        if not rec.front_face:
            return Vector3(0, 0, 0)
        return self.get_texture_color(rec)
