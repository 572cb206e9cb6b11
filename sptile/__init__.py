"""Dense tiling and tile traversal for sparse coordinate tensors, with timers and helpers."""

__version__ = "2.0.0"
__all__ = ["types", "util", "timer", "tile"]