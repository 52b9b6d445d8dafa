"""Radiance estimation, tile scheduling, tone mapping and image export."""
