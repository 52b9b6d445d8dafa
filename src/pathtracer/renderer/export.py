# renderer/export.py
import os
from typing import TextIO, Union
import numpy as np
from PIL import Image

def write_ppm(target: Union[str, os.PathLike, TextIO], image: np.ndarray) -> None:
    """
    Writes an 8-bit (height, width, 3) image as plain-text PPM (P3):
    the header, then one "r g b" line per pixel, row-major, top row first.
    """
    image = np.asarray(image)
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"Expected an image of shape (height, width, 3), got {image.shape}")

    if isinstance(target, (str, os.PathLike)):
        with open(target, "w") as f:
            _write_ppm_stream(f, image)
    else:
        _write_ppm_stream(target, image)

def _write_ppm_stream(stream: TextIO, image: np.ndarray) -> None:
    height, width = image.shape[:2]
    stream.write(f"P3\n{width} {height}\n255\n")
    for row in image.reshape(-1, 3).astype(np.int64).clip(0, 255):
        stream.write(f"{row[0]} {row[1]} {row[2]}\n")

def save_png(filepath: Union[str, os.PathLike], image: np.ndarray) -> None:
    """
    Saves an 8-bit (height, width, 3) image with Pillow.
    """
    Image.fromarray(np.asarray(image, dtype=np.uint8)).save(filepath)
