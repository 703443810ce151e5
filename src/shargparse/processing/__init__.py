"""Public API surface for shargparse.processing."""
__all__ = [
    "string_interpolator",
]
