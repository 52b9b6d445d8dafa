# core/utils.py
import math
import random
import threading
from pathtracer.core.vector import Vector3

INFINITY = math.inf

# Each rendering thread draws from its own generator.
_local = threading.local()

def seed_thread_rng(seed=None) -> random.Random:
    """
    Installs a fresh generator for the calling thread and returns it.
    """
    _local.rng = random.Random(seed)
    return _local.rng

def thread_rng() -> random.Random:
    rng = getattr(_local, "rng", None)
    if rng is None:
        rng = seed_thread_rng()
    return rng

def random_double(lo: float = 0.0, hi: float = 1.0) -> float:
    """
    Returns a random number in [lo, hi) from the calling thread's generator.
    """
    return lo + (hi - lo) * thread_rng().random()

def random_int(lo: int, hi: int) -> int:
    """
    Returns a random integer in [lo, hi].
    """
    return thread_rng().randint(lo, hi)

def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0

def random_in_unit_sphere() -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    rng = thread_rng()
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p

def random_unit_vector() -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    return random_in_unit_sphere().normalize()

def random_in_unit_disk() -> Vector3:
    rng = thread_rng()
    while True:
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0)
        if p.dot(p) < 1:
            return p

def random_cosine_direction() -> Vector3:
    """
    Cosine-weighted direction on the +z hemisphere.
    """
    r1 = random_double()
    r2 = random_double()
    phi = 2 * math.pi * r1
    sqrt_r2 = math.sqrt(r2)
    return Vector3(math.cos(phi) * sqrt_r2,
                   math.sin(phi) * sqrt_r2,
                   math.sqrt(1 - r2))

def random_to_sphere(radius: float, distance_squared: float) -> Vector3:
    """
    Uniform direction inside the cone subtended by a sphere, about +z.
    """
    r1 = random_double()
    r2 = random_double()
    cos_theta_max = math.sqrt(max(0.0, 1 - radius * radius / distance_squared))
    z = 1 + r2 * (cos_theta_max - 1)
    phi = 2 * math.pi * r1
    s = math.sqrt(max(0.0, 1 - z * z))
    return Vector3(math.cos(phi) * s, math.sin(phi) * s, z)

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with unit normal n.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * (-math.sqrt(abs(1.0 - r_out_perp.dot(r_out_perp))))
    return r_out_perp + r_out_parallel
