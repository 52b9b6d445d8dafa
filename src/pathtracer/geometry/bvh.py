# geometry/bvh.py
from typing import Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import Hittable, HitRecord

def _box_of(obj, time0: float, time1: float) -> AABB:
    box = obj.bounding_box(time0, time1)
    if box is None:
        raise ValueError(f"No bounding box for {obj!r} in BVH construction.")
    return box

class BVHNode(Hittable):
    """
    A node of a bounding volume hierarchy over objects[start:end].

    Each node splits its span at the median along the longest axis of its
    box, after sorting by the minimum corner on that axis. Leaves hold one
    object (referenced by both children) or two objects. The tree is never
    modified after construction, so it can be traversed from several
    threads at once.
    """
    def __init__(self, objects: list, start: int, end: int,
                 time0: float = 0.0, time1: float = 1.0):
        object_span = end - start
        if object_span <= 0:
            raise ValueError("BVHNode needs at least one object.")

        # Compute the bounding box of all objects for this node
        span_box = _box_of(objects[start], time0, time1)
        for i in range(start + 1, end):
            span_box = AABB.surrounding_box(span_box, _box_of(objects[i], time0, time1))
        axis = span_box.longest_axis()

        def key(obj):
            return getattr(_box_of(obj, time0, time1).minimum, "xyz"[axis])

        if object_span == 1:
            self.left = self.right = objects[start]
            self.is_leaf = True
        elif object_span == 2:
            first, second = objects[start], objects[start + 1]
            if key(second) < key(first):
                first, second = second, first
            self.left = first
            self.right = second
            self.is_leaf = True
        else:
            objects[start:end] = sorted(objects[start:end], key=key)
            mid = start + object_span // 2
            self.left = BVHNode(objects, start, mid, time0, time1)
            self.right = BVHNode(objects, mid, end, time0, time1)
            self.is_leaf = False

        self.box = AABB.surrounding_box(_box_of(self.left, time0, time1),
                                        _box_of(self.right, time0, time1))

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max)

        # Update t_max for right branch if we hit something on the left
        if hit_left is not None:
            t_max = hit_left.t

        if self.right is self.left:
            return hit_left
        hit_right = self.right.hit(ray, t_min, t_max)

        # Return the closer hit
        return hit_right if hit_right is not None else hit_left

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        return self.box

    def depth(self) -> int:
        if self.is_leaf:
            return 1
        return 1 + max(self.left.depth(), self.right.depth())
