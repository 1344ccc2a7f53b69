"""FNV-1a hashing, an open-addressing word table, and simple key searches."""

__version__ = "0.1.0"
__all__ = ["fnv", "search", "table"]