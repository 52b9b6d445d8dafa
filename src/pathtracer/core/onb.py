# core/onb.py
from pathtracer.core.vector import Vector3

class ONB:
    """
    Right-handed orthonormal basis (u, v, w) with w along a given normal.

    u is derived from the normal and a fixed reference axis, switching the
    reference when it is nearly collinear with the normal; v completes the
    basis so that u x v = w.
    """
    def __init__(self, normal: Vector3):
        self.w = normal.normalize()
        reference = Vector3(0, 1, 0) if abs(self.w.x) > 0.9 else Vector3(1, 0, 0)
        self.u = reference.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

    def local(self, a: Vector3) -> Vector3:
        """
        Maps local coordinates (a.x, a.y, a.z) into world space.
        """
        return self.u * a.x + self.v * a.y + self.w * a.z
