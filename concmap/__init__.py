"""A thread-safe hash map with per-bin locking and lock-free reads."""

__version__ = "0.1.0"
__all__ = ["cmap", "hasher", "helpers", "table"]