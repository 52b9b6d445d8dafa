# materials/textures.py
import math
from typing import Optional, Union
import numpy as np
from PIL import Image
from pathtracer.core.vector import Vector3

# Returned by image textures whose file could not be loaded.
MISSING_TEXTURE_COLOR = Vector3(1.0, 0.0, 1.0)

class Texture:
    """Base class for all textures."""
    def sample(self, u: float, v: float, p: Vector3) -> Vector3:
        """Sample the texture at surface coordinates (u, v) and point p."""
        raise NotImplementedError("sample() must be implemented by texture subclasses.")

def as_texture(value: Union[Vector3, Texture]) -> Texture:
    """Wraps a plain color in a SolidTexture."""
    if isinstance(value, Vector3):
        return SolidTexture(value)
    return value

class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def sample(self, u: float, v: float, p: Vector3) -> Vector3:
        return self.color

class CheckerTexture(Texture):
    """
    A 3D checker pattern: the sign of sin(sx) sin(sy) sin(sz) selects
    between the even and odd sub-textures.
    """
    def __init__(self, even: Union[Vector3, Texture], odd: Union[Vector3, Texture],
                 scale: float = 10.0):
        self.even = as_texture(even)
        self.odd = as_texture(odd)
        self.scale = scale

    def sample(self, u: float, v: float, p: Vector3) -> Vector3:
        sines = (math.sin(self.scale * p.x) *
                 math.sin(self.scale * p.y) *
                 math.sin(self.scale * p.z))
        if sines < 0:
            return self.odd.sample(u, v, p)
        return self.even.sample(u, v, p)

class Perlin:
    """
    Gradient noise on an integer lattice of random unit vectors.
    """
    POINT_COUNT = 256

    def __init__(self, seed: Optional[int] = None):
        rng = np.random.default_rng(seed)
        vectors = rng.uniform(-1.0, 1.0, size=(self.POINT_COUNT, 3))
        vectors /= np.linalg.norm(vectors, axis=1, keepdims=True)
        self.ranvec = vectors
        self.perm_x = rng.permutation(self.POINT_COUNT)
        self.perm_y = rng.permutation(self.POINT_COUNT)
        self.perm_z = rng.permutation(self.POINT_COUNT)

    def noise(self, p: Vector3) -> float:
        u = p.x - math.floor(p.x)
        v = p.y - math.floor(p.y)
        w = p.z - math.floor(p.z)
        i = math.floor(p.x)
        j = math.floor(p.y)
        k = math.floor(p.z)

        # Hermite smoothing of the interpolation weights.
        uu = u * u * (3 - 2 * u)
        vv = v * v * (3 - 2 * v)
        ww = w * w * (3 - 2 * w)

        accum = 0.0
        for di in range(2):
            for dj in range(2):
                for dk in range(2):
                    index = (self.perm_x[(i + di) & 255] ^
                             self.perm_y[(j + dj) & 255] ^
                             self.perm_z[(k + dk) & 255])
                    g = self.ranvec[index]
                    weight = g[0] * (u - di) + g[1] * (v - dj) + g[2] * (w - dk)
                    accum += ((di * uu + (1 - di) * (1 - uu)) *
                              (dj * vv + (1 - dj) * (1 - vv)) *
                              (dk * ww + (1 - dk) * (1 - ww)) * weight)
        return float(accum)

    def turb(self, p: Vector3, depth: int = 7) -> float:
        accum = 0.0
        temp_p = p
        weight = 1.0
        for _ in range(depth):
            accum += weight * self.noise(temp_p)
            weight *= 0.5
            temp_p = temp_p * 2
        return abs(accum)

class NoiseTexture(Texture):
    """A marble-like grey texture: a sine along z phase-shifted by turbulence."""
    def __init__(self, scale: float = 1.0, seed: Optional[int] = None):
        self.noise = Perlin(seed)
        self.scale = scale

    def sample(self, u: float, v: float, p: Vector3) -> Vector3:
        value = 0.5 * (1 + math.sin(self.scale * p.z + 10 * self.noise.turb(p)))
        return Vector3(1, 1, 1) * value

class ImageTexture(Texture):
    """A texture from an image file."""
    def __init__(self, image_path: str):
        self.image_path = image_path
        # Load image using PIL
        try:
            with Image.open(image_path) as img:
                # Convert to RGB if necessary
                if img.mode != 'RGB':
                    img = img.convert('RGB')
                # Convert to numpy array for faster access
                self.data = np.asarray(img, dtype=np.float64) / 255.0  # Normalize to [0,1]
                self.width = img.width
                self.height = img.height
        except (OSError, ValueError) as e:
            print(f"WARNING: could not load texture image {image_path}: {e}")
            self.data = None
            self.width = 0
            self.height = 0

    def sample(self, u: float, v: float, p: Vector3) -> Vector3:
        # Without texture data, return a solid color as a debugging aid.
        if self.data is None or self.width == 0 or self.height == 0:
            return MISSING_TEXTURE_COLOR

        # Clamp input texture coordinates to [0,1] x [1,0]
        u = min(max(u, 0.0), 1.0)
        v = 1.0 - min(max(v, 0.0), 1.0)  # Flip V to image coordinates

        # Convert to pixel coordinates
        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        color = self.data[y, x]
        return Vector3(float(color[0]), float(color[1]), float(color[2]))
