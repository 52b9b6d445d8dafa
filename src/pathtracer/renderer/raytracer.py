# renderer/raytracer.py
import math
import sys
import threading
import time
from typing import List, Optional, Tuple
import numpy as np
from pathtracer.config import RenderSettings, Scene
from pathtracer.core.utils import random_double, seed_thread_rng
from pathtracer.core.vector import Vector3
from .integrator import ray_color
from .tone_mapping import to_uint8

# (column start, column end, row start, row end) in pixels; rows count up from the bottom.
Tile = Tuple[int, int, int, int]

def tile_grid(width: int, height: int, batch_x: int, batch_y: int) -> List[Tile]:
    """
    Splits the image into at most batch_x * batch_y rectangular tiles.
    """
    stride_x = int(math.ceil(width / batch_x))
    stride_y = int(math.ceil(height / batch_y))
    tiles = []
    for j in range(0, height, stride_y):
        for i in range(0, width, stride_x):
            tiles.append((i, min(i + stride_x, width), j, min(j + stride_y, height)))
    return tiles

def tile_seed(seed: int, tile_index: int) -> str:
    return f"{seed}:{tile_index}"

class Renderer:
    """
    Renders a Scene into a linear (height, width, 3) frame buffer.

    Each tile of the image is rendered by its own thread with its own
    random stream; the frame buffer slices written by different tiles never
    overlap. Only the progress counter is shared, behind a lock.
    """
    def __init__(self, settings: Optional[RenderSettings] = None):
        self.settings = settings
        self.frame_buffer = None
        self.pixels_completed = 0
        self._progress_lock = threading.Lock()

    def render(self, scene: Scene) -> np.ndarray:
        settings = self.settings or scene.settings
        settings.validate()
        width = settings.image_width
        height = settings.image_height

        # The hierarchy is complete before any worker starts and is only read afterwards.
        scene.world.build_bvh(scene.camera.time0, max(scene.camera.time0, scene.camera.time1))

        self.frame_buffer = np.zeros((height, width, 3), dtype=np.float64)
        self.pixels_completed = 0

        start = time.perf_counter()
        if settings.multi_thread:
            tiles = tile_grid(width, height, settings.batch_x, settings.batch_y)
            workers = [
                threading.Thread(target=self._render_tile,
                                 args=(scene, settings, tile, tile_seed(settings.seed, index)),
                                 name=f"tile-{index}")
                for index, tile in enumerate(tiles)
            ]
            for worker in workers:
                worker.start()
            for worker in workers:
                worker.join()
        else:
            self._render_tile(scene, settings, (0, width, 0, height), tile_seed(settings.seed, 0))
        elapsed = time.perf_counter() - start

        if settings.show_progress:
            self._update_progress(1.0)
            print(f"\nDone, cost time: {elapsed:.2f} seconds", file=sys.stderr)
        return self.frame_buffer

    def _render_tile(self, scene: Scene, settings: RenderSettings, tile: Tile, seed: str):
        seed_thread_rng(seed)
        col_start, col_end, row_start, row_end = tile
        width = settings.image_width
        height = settings.image_height
        samples = settings.samples_per_pixel
        total = width * height
        # Single-pixel images still need a non-zero divisor.
        u_scale = max(width - 1, 1)
        v_scale = max(height - 1, 1)

        for j in range(row_start, row_end):
            # Row 0 of the frame buffer is the top of the image.
            row = height - 1 - j
            for i in range(col_start, col_end):
                pixel_color = Vector3(0, 0, 0)
                for _ in range(samples):
                    u = (i + random_double()) / u_scale
                    v = (j + random_double()) / v_scale
                    ray = scene.camera.get_ray(u, v)
                    pixel_color = pixel_color + ray_color(ray, scene.background, scene.world,
                                                          settings.max_depth, scene.lights)
                self.frame_buffer[row, i] = [c / samples if math.isfinite(c) else 0.0
                                             for c in pixel_color]

            with self._progress_lock:
                self.pixels_completed += col_end - col_start
                if settings.show_progress:
                    self._update_progress(self.pixels_completed / total)

    def _update_progress(self, progress: float):
        print(f"\rRendering: {progress * 100.0:.2f} %", end="", file=sys.stderr, flush=True)

    def to_rgb8(self) -> np.ndarray:
        if self.frame_buffer is None:
            raise RuntimeError("Nothing has been rendered yet.")
        return to_uint8(self.frame_buffer)
