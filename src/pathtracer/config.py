# config.py
from dataclasses import dataclass, field
from typing import Optional

from pathtracer.camera.camera import Camera
from pathtracer.core.vector import Vector3
from pathtracer.geometry.world import HittableList

# Quality presets: samples per pixel and maximum bounce depth.
QUALITY_PRESETS = {
    "interactive": {"samples": 1, "bounces": 2},
    "balanced": {"samples": 4, "bounces": 4},
    "high_quality": {"samples": 100, "bounces": 50},
}


@dataclass
class RenderSettings:
    """
    Image and sampling parameters for a render.
    """
    image_width: int = 400
    image_height: int = 225
    samples_per_pixel: int = 100
    max_depth: int = 50         # Bounces per path
    batch_x: int = 4            # Tile columns, one worker thread per tile
    batch_y: int = 4            # Tile rows
    seed: int = 0               # Base seed; each tile derives its own stream
    multi_thread: bool = True
    show_progress: bool = True  # Percentage line on stderr

    @property
    def aspect_ratio(self) -> float:
        return self.image_width / self.image_height

    def validate(self) -> None:
        """
        Raises ValueError for settings that cannot produce an image.
        """
        if self.image_width <= 0 or self.image_height <= 0:
            raise ValueError(
                f"Image dimensions must be positive, got {self.image_width}x{self.image_height}"
            )
        if self.samples_per_pixel <= 0:
            raise ValueError(f"samples_per_pixel must be positive, got {self.samples_per_pixel}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")
        if self.batch_x <= 0 or self.batch_y <= 0:
            raise ValueError(f"Tile grid must be positive, got {self.batch_x}x{self.batch_y}")

    @classmethod
    def from_preset(
        cls, name: str, image_width: int = 400, aspect_ratio: float = 16.0 / 9.0, **overrides
    ) -> "RenderSettings":
        """
        Builds settings from one of QUALITY_PRESETS.
        """
        if name not in QUALITY_PRESETS:
            raise ValueError(
                f"Unknown quality preset {name!r}; expected one of {sorted(QUALITY_PRESETS)}"
            )
        preset = QUALITY_PRESETS[name]
        return cls(
            image_width=image_width,
            image_height=max(1, int(image_width / aspect_ratio)),
            samples_per_pixel=preset["samples"],
            max_depth=preset["bounces"],
            **overrides,
        )


@dataclass
class Scene:
    """
    Everything the renderer needs to produce an image. The renderer builds
    the BVH over world; lights, if given, are sampled directly at diffuse
    bounces.
    """
    world: HittableList
    camera: Camera
    background: Vector3 = field(default_factory=lambda: Vector3(0, 0, 0))  # Radiance of missed rays
    settings: RenderSettings = field(default_factory=RenderSettings)
    lights: Optional[HittableList] = None
