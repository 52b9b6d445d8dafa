# renderer/tone_mapping.py
import math
import numpy as np
from numba import njit

@njit
def gamma_quantize_kernel(linear_image, output_image):
    """
    Square-root (gamma 2) tone mapping of a linear (height, width, 3) image
    into 8-bit output. Non-finite components map to 0.
    """
    height, width, channels = linear_image.shape
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                value = linear_image[y, x, c]
                if not math.isfinite(value) or value <= 0.0:
                    output_image[y, x, c] = 0
                    continue
                value = math.sqrt(value)
                if value > 0.999:
                    value = 0.999
                output_image[y, x, c] = int(256.0 * value)

def to_uint8(linear_image: np.ndarray) -> np.ndarray:
    """
    Gamma-correct and quantize a linear radiance image to uint8 RGB.
    """
    linear = np.ascontiguousarray(linear_image, dtype=np.float64)
    output = np.zeros(linear.shape, dtype=np.uint8)
    gamma_quantize_kernel(linear, output)
    return output
