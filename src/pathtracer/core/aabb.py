# core/aabb.py
import math
from pathtracer.core.vector import Vector3

# Minimum thickness of a box along any axis.
PADDING = 1e-4

class AABB:
    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method: for each axis, find intersection intervals.
        for a in ['x', 'y', 'z']:
            d = getattr(ray.direction, a)
            # A zero component gives a signed infinite reciprocal; the
            # comparisons below then accept or reject the whole axis.
            invD = 1.0 / d if d != 0.0 else math.copysign(math.inf, d)
            t0 = (getattr(self.minimum, a) - getattr(ray.origin, a)) * invD
            t1 = (getattr(self.maximum, a) - getattr(ray.origin, a)) * invD
            if invD < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return False
        return True

    def pad(self, delta: float = PADDING) -> "AABB":
        """
        Returns a box widened to at least delta along every axis.
        """
        lo = [self.minimum.x, self.minimum.y, self.minimum.z]
        hi = [self.maximum.x, self.maximum.y, self.maximum.z]
        for a in range(3):
            if hi[a] - lo[a] < delta:
                lo[a] -= delta / 2
                hi[a] += delta / 2
        return AABB(Vector3(*lo), Vector3(*hi))

    def extent(self, axis: int) -> float:
        return getattr(self.maximum, "xyz"[axis]) - getattr(self.minimum, "xyz"[axis])

    def longest_axis(self) -> int:
        return max(range(3), key=self.extent)

    def contains(self, other: "AABB") -> bool:
        return all(getattr(self.minimum, a) <= getattr(other.minimum, a) and
                   getattr(self.maximum, a) >= getattr(other.maximum, a)
                   for a in "xyz")

    def __eq__(self, other) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return (tuple(self.minimum) == tuple(other.minimum) and
                tuple(self.maximum) == tuple(other.maximum))

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        small = Vector3(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = Vector3(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)
