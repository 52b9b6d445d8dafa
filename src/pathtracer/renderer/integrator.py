# renderer/integrator.py
import math
from typing import Optional
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.core.utils import INFINITY
from pathtracer.geometry.hittable import Hittable
from pathtracer.geometry.world import HittableList
from pathtracer.materials.pdf import HittablePDF, MixturePDF

# Lower bound of the hit interval; skips self-intersections at the last bounce.
T_MIN = 0.001
# Sampling densities at or below this contribute nothing.
PDF_EPSILON = 1e-8

BLACK = Vector3(0, 0, 0)

def ray_color(ray: Ray, background: Vector3, world: Hittable, depth: int,
              lights: Optional[Hittable] = None) -> Vector3:
    """
    Estimates the radiance arriving along ray.

    Paths end after depth bounces. When lights are given, diffuse bounces
    sample an equal mixture of directions toward the lights and the
    material's own distribution.
    """
    if depth <= 0:
        return BLACK

    rec = world.hit(ray, T_MIN, INFINITY)
    if rec is None:
        return background

    emitted = rec.material.emitted(rec)
    srec = rec.material.scatter(ray, rec)
    if srec is None:
        return emitted

    if srec.is_specular:
        return emitted + srec.attenuation * ray_color(srec.ray, background, world, depth - 1, lights)

    if lights is not None and not (isinstance(lights, HittableList) and len(lights) == 0):
        pdf = MixturePDF(HittablePDF(lights, rec.p), srec.pdf)
        scattered = Ray(rec.p, pdf.sample(), ray.time)
        pdf_value = pdf.density(scattered.direction)
    else:
        scattered = srec.ray
        pdf_value = srec.pdf_value

    if not math.isfinite(pdf_value) or pdf_value <= PDF_EPSILON:
        return emitted

    scattering_pdf = rec.material.scattering_pdf(ray, rec, scattered)
    if scattering_pdf == 0:
        return emitted

    incoming = ray_color(scattered, background, world, depth - 1, lights)
    return emitted + srec.attenuation * incoming * (scattering_pdf / pdf_value)
