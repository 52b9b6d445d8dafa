# camera/camera.py
import math
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.utils import degrees_to_radians, random_double, random_in_unit_disk

class Camera:
    """
    A look-at camera with a thin lens (depth of field) and a shutter
    interval (motion blur).
    """
    def __init__(self, lookfrom: Vector3, lookat: Vector3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 10.0, time0: float = 0.0, time1: float = 0.0):
        self.position = lookfrom
        self.lookat = lookat
        self.vup = vup
        self.vfov = vfov  # vertical field of view in degrees
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture  # Lens aperture for depth of field
        self.focus_dist = focus_dist  # Distance to focus plane
        self.lens_radius = aperture / 2.0
        self.time0 = time0  # Shutter open/close times
        self.time1 = time1
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        # Compute forward, right and up vectors
        self.forward = (self.lookat - self.position).normalize()
        self.right = self.forward.cross(self.vup).normalize()
        self.up = self.right.cross(self.forward)

        # Compute viewport dimensions based on fov
        viewport_height = 2.0 * math.tan(degrees_to_radians(self.vfov) / 2)
        viewport_width = self.aspect_ratio * viewport_height

        # Scale by focus distance
        self.horizontal = self.right * viewport_width * self.focus_dist
        self.vertical = self.up * viewport_height * self.focus_dist

        self.lower_left_corner = (self.position +
                                  self.forward * self.focus_dist -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5)

    def get_ray(self, s: float, t: float) -> Ray:
        """
        Generates a ray through viewport coordinates (s, t) in [0, 1],
        measured from the lower left corner.
        """
        origin = self.position
        if self.lens_radius > 0:
            # Generate random point on lens
            rd = random_in_unit_disk() * self.lens_radius
            origin = self.position + self.right * rd.x + self.up * rd.y

        direction = (self.lower_left_corner +
                     self.horizontal * s +
                     self.vertical * t -
                     origin)
        time = self.time0 if self.time1 <= self.time0 else random_double(self.time0, self.time1)
        return Ray(origin, direction, time)
