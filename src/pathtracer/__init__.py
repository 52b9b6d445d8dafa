"""Offline Monte-Carlo path tracer.

Subpackages:
    core: Vectors, rays, bounding boxes, orthonormal bases and sampling helpers
    geometry: Hittable primitives, transforms, media and the BVH
    materials: Materials, textures and direction PDFs
    camera: Thin-lens camera with a shutter interval
    renderer: Radiance estimator, tile scheduler, tone mapping and export
"""

__version__ = "0.1.0"
