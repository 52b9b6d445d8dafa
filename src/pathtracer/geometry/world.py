# geometry/world.py
from typing import Optional, List
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.core.utils import random_int
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.geometry.bvh import BVHNode

class HittableList(Hittable):
    """
    A list of Hittable objects. The nearest hit among the members wins.

    build_bvh() builds a bounding volume hierarchy over the members; hit()
    then traverses the tree instead of scanning the list.
    """
    def __init__(self, objects: Optional[List[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects else []
        self.bvh_root = None

    def add(self, obj: Hittable):
        self.objects.append(obj)
        self.bvh_root = None

    def __len__(self) -> int:
        return len(self.objects)

    def build_bvh(self, time0: float = 0.0, time1: float = 1.0):
        if len(self.objects) == 0:
            self.bvh_root = None
            return
        # The tree sorts its own copy so the list keeps insertion order.
        self.bvh_root = BVHNode(list(self.objects), 0, len(self.objects), time0, time1)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if self.bvh_root is not None:
            return self.bvh_root.hit(ray, t_min, t_max)
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> Optional[AABB]:
        output_box = None
        for obj in self.objects:
            box = obj.bounding_box(time0, time1)
            if box is None:
                return None
            output_box = box if output_box is None else AABB.surrounding_box(output_box, box)
        return output_box

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        if not self.objects:
            return 0.0
        weight = 1.0 / len(self.objects)
        return sum(weight * obj.pdf_value(origin, direction) for obj in self.objects)

    def random(self, origin: Vector3) -> Vector3:
        if not self.objects:
            return Vector3(1, 0, 0)
        return self.objects[random_int(0, len(self.objects) - 1)].random(origin)
