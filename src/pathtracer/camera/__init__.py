"""Look-at thin-lens camera."""
