# geometry/triangle.py
import math
from typing import Optional
from pathtracer.core.vector import Vector3
from pathtracer.core.uv import UV
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.core.utils import INFINITY, random_double
from pathtracer.geometry.hittable import Hittable, HitRecord

# Determinants below this magnitude mean the ray is parallel to the triangle.
DETERMINANT_EPSILON = 1e-12

class Triangle(Hittable):
    """Represents a single triangle in 3D space with texture coordinates."""
    def __init__(self,
                 v0: Vector3, v1: Vector3, v2: Vector3, material,
                 uv0: Optional[UV] = None, uv1: Optional[UV] = None, uv2: Optional[UV] = None,
                 n0: Optional[Vector3] = None, n1: Optional[Vector3] = None, n2: Optional[Vector3] = None):
        # Vertices
        self.v0 = v0
        self.v1 = v1
        self.v2 = v2
        self.material = material

        # UV coordinates (default to basic mapping if not provided)
        self.uv0 = uv0 if uv0 is not None else UV(0.0, 0.0)
        self.uv1 = uv1 if uv1 is not None else UV(1.0, 0.0)
        self.uv2 = uv2 if uv2 is not None else UV(0.0, 1.0)

        self.e1 = v1 - v0
        self.e2 = v2 - v0
        cross = self.e1.cross(self.e2)
        self.face_normal = cross.normalize()
        self.area = 0.5 * cross.length()

        # Per-vertex normals give smooth shading; otherwise use the face normal.
        if n0 is None or n1 is None or n2 is None:
            self.vertex_normals = None
        else:
            self.vertex_normals = (n0, n1, n2)

    def interpolate_uv(self, b1: float, b2: float) -> UV:
        """Interpolate UV coordinates at the given barycentric coordinates."""
        return UV.barycentric(self.uv0, self.uv1, self.uv2, b1, b2)

    def get_normal(self, b1: float, b2: float) -> Vector3:
        """Interpolate normal at the given barycentric coordinates."""
        if self.vertex_normals is None:
            return self.face_normal
        n0, n1, n2 = self.vertex_normals
        w = 1.0 - b1 - b2
        return (n0 * w + n1 * b1 + n2 * b2).normalize()

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        # Solve origin + t*d = v0 + b1*e1 + b2*e2 with Cramer's rule.
        s = ray.origin - self.v0
        s1 = ray.direction.cross(self.e2)
        s2 = s.cross(self.e1)

        det = s1.dot(self.e1)
        if abs(det) < DETERMINANT_EPSILON:
            return None
        inv_det = 1.0 / det

        t = s2.dot(self.e2) * inv_det
        if t <= t_min or t >= t_max:
            return None

        b1 = s1.dot(s) * inv_det
        if b1 < 0.0 or b1 > 1.0:
            return None

        b2 = s2.dot(ray.direction) * inv_det
        if b2 < 0.0 or b1 + b2 > 1.0:
            return None

        rec = HitRecord()
        rec.t = t
        rec.p = ray.at(t)
        uv = self.interpolate_uv(b1, b2)
        rec.u = uv.u
        rec.v = uv.v
        rec.set_face_normal(ray, self.get_normal(b1, b2))
        rec.material = self.material
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        """Compute the bounding box for the triangle."""
        min_x = min(self.v0.x, self.v1.x, self.v2.x)
        min_y = min(self.v0.y, self.v1.y, self.v2.y)
        min_z = min(self.v0.z, self.v1.z, self.v2.z)
        max_x = max(self.v0.x, self.v1.x, self.v2.x)
        max_y = max(self.v0.y, self.v1.y, self.v2.y)
        max_z = max(self.v0.z, self.v1.z, self.v2.z)
        return AABB(Vector3(min_x, min_y, min_z), Vector3(max_x, max_y, max_z)).pad()

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        rec = self.hit(Ray(origin, direction), 0.001, INFINITY)
        if rec is None or self.area == 0:
            return 0.0
        distance_squared = rec.t * rec.t * direction.length_squared()
        cosine = abs(direction.dot(self.face_normal) / direction.length())
        if cosine == 0:
            return 0.0
        return distance_squared / (cosine * self.area)

    def random(self, origin: Vector3) -> Vector3:
        # Uniform point over the triangle's area.
        r1 = math.sqrt(random_double())
        r2 = random_double()
        point = self.v0 + self.e1 * (r1 * (1 - r2)) + self.e2 * (r1 * r2)
        return point - origin
