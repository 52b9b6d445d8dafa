"""Hittable primitives, transforms, participating media and the BVH."""
