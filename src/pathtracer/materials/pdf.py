# materials/pdf.py
import math
from pathtracer.core.vector import Vector3
from pathtracer.core.onb import ONB
from pathtracer.core.utils import random_double, random_cosine_direction, random_unit_vector

class PDF:
    """
    A probability density over directions.

    sample() draws a direction; density() evaluates the solid-angle
    density of a direction under the same distribution.
    """
    def sample(self) -> Vector3:
        raise NotImplementedError("sample() must be implemented by subclasses.")

    def density(self, direction: Vector3) -> float:
        raise NotImplementedError("density() must be implemented by subclasses.")

class CosinePDF(PDF):
    """Cosine-weighted hemisphere about w."""
    def __init__(self, w: Vector3):
        self.uvw = ONB(w)

    def sample(self) -> Vector3:
        return self.uvw.local(random_cosine_direction())

    def density(self, direction: Vector3) -> float:
        cosine = direction.normalize().dot(self.uvw.w)
        return 0.0 if cosine <= 0 else cosine / math.pi

class SpherePDF(PDF):
    """Uniform over the unit sphere."""
    def sample(self) -> Vector3:
        return random_unit_vector()

    def density(self, direction: Vector3) -> float:
        return 1 / (4 * math.pi)

class HittablePDF(PDF):
    """Directions from origin toward an object, sampled by the object itself."""
    def __init__(self, objects, origin: Vector3):
        self.objects = objects
        self.origin = origin

    def sample(self) -> Vector3:
        return self.objects.random(self.origin)

    def density(self, direction: Vector3) -> float:
        return self.objects.pdf_value(self.origin, direction)

class MixturePDF(PDF):
    """Equal-weight mixture of two densities."""
    def __init__(self, p0: PDF, p1: PDF):
        self.p = (p0, p1)

    def sample(self) -> Vector3:
        if random_double() < 0.5:
            return self.p[0].sample()
        return self.p[1].sample()

    def density(self, direction: Vector3) -> float:
        return 0.5 * self.p[0].density(direction) + 0.5 * self.p[1].density(direction)
