"""Pytest configuration for pathtracer tests.

Provides shared fixtures: a deterministic random stream for the test
thread and a few commonly used materials.
"""

import pytest

from pathtracer.core.utils import seed_thread_rng
from pathtracer.core.vector import Vector3
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.lambertian import Lambertian


@pytest.fixture(autouse=True)
def seeded_rng():
    """Seed the calling thread's generator so sampling tests are repeatable."""
    return seed_thread_rng(12345)


@pytest.fixture
def grey():
    return Lambertian(Vector3(0.5, 0.5, 0.5))


@pytest.fixture
def light():
    return DiffuseLight(Vector3(4.0, 4.0, 4.0))

