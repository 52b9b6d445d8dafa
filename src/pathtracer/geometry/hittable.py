# geometry/hittable.py
import math
from typing import Optional
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.core.utils import degrees_to_radians

class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    def __init__(self, p: Vector3 = None, normal: Vector3 = None,
                 t: float = 0, front_face: bool = True, material = None,
                 u: float = 0.0, v: float = 0.0):
        self.p = p              # Intersection point
        self.normal = normal    # Surface normal at intersection, facing the ray
        self.t = t              # Ray parameter at intersection
        self.u = u              # Surface texture coordinates
        self.v = v
        self.front_face = front_face  # Whether the hit was on the front side
        self.material = material

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else outward_normal * -1

    def outward_normal(self) -> Vector3:
        """
        The geometric outward normal, undoing the flip made by set_face_normal.
        """
        return self.normal if self.front_face else self.normal * -1

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> Optional[AABB]:
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        """
        Solid-angle density of sampling direction from origin toward this object.
        """
        return 0.0

    def random(self, origin: Vector3) -> Vector3:
        """
        A direction from origin toward a random point on this object.
        """
        return Vector3(1, 0, 0)

class Translate(Hittable):
    """
    Moves an object by a fixed offset.
    """
    def __init__(self, obj: Hittable, offset: Vector3):
        self.object = obj
        self.offset = offset

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        # Moving the object by offset is the same as moving the ray by -offset.
        moved = Ray(ray.origin - self.offset, ray.direction, ray.time)
        rec = self.object.hit(moved, t_min, t_max)
        if rec is None:
            return None
        rec.p = rec.p + self.offset
        rec.set_face_normal(moved, rec.outward_normal())
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> Optional[AABB]:
        box = self.object.bounding_box(time0, time1)
        if box is None:
            return None
        return AABB(box.minimum + self.offset, box.maximum + self.offset)

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        return self.object.pdf_value(origin - self.offset, direction)

    def random(self, origin: Vector3) -> Vector3:
        return self.object.random(origin - self.offset)

class Rotate(Hittable):
    """
    Rotates an object about one of the coordinate axes (0: x, 1: y, 2: z).

    The bounding box is the axis-aligned envelope of the child's rotated
    box corners, computed once at construction.
    """
    def __init__(self, obj: Hittable, angle: float, axis: int = 1):
        self.object = obj
        self.axis = axis
        # The rotation acts on the plane of the two remaining axes.
        self._a = (axis + 1) % 3
        self._b = (axis + 2) % 3
        radians = degrees_to_radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)

        box = obj.bounding_box(0, 1)
        self.box = None
        if box is not None:
            lo = [math.inf] * 3
            hi = [-math.inf] * 3
            for corner_x in (box.minimum.x, box.maximum.x):
                for corner_y in (box.minimum.y, box.maximum.y):
                    for corner_z in (box.minimum.z, box.maximum.z):
                        rotated = self._to_world(Vector3(corner_x, corner_y, corner_z))
                        for c in range(3):
                            lo[c] = min(lo[c], rotated[c])
                            hi[c] = max(hi[c], rotated[c])
            self.box = AABB(Vector3(*lo), Vector3(*hi))

    def _rotate(self, p: Vector3, sin_theta: float) -> Vector3:
        a = p[self._a]
        b = p[self._b]
        coords = [p.x, p.y, p.z]
        coords[self._a] = self.cos_theta * a - sin_theta * b
        coords[self._b] = sin_theta * a + self.cos_theta * b
        return Vector3(*coords)

    def _to_object(self, p: Vector3) -> Vector3:
        return self._rotate(p, -self.sin_theta)

    def _to_world(self, p: Vector3) -> Vector3:
        return self._rotate(p, self.sin_theta)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        rotated = Ray(self._to_object(ray.origin), self._to_object(ray.direction), ray.time)
        rec = self.object.hit(rotated, t_min, t_max)
        if rec is None:
            return None
        rec.p = self._to_world(rec.p)
        rec.set_face_normal(ray, self._to_world(rec.outward_normal()))
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> Optional[AABB]:
        return self.box

class RotateY(Rotate):
    def __init__(self, obj: Hittable, angle: float):
        super().__init__(obj, angle, axis=1)

class FlipFace(Hittable):
    """
    Swaps the front and back sides of an object without touching its geometry.
    """
    def __init__(self, obj: Hittable):
        self.object = obj

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        rec = self.object.hit(ray, t_min, t_max)
        if rec is None:
            return None
        rec.front_face = not rec.front_face
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> Optional[AABB]:
        return self.object.bounding_box(time0, time1)

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        return self.object.pdf_value(origin, direction)

    def random(self, origin: Vector3) -> Vector3:
        return self.object.random(origin)
