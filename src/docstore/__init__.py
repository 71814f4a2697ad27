"""In-memory document store with multi-criteria search."""

__version__ = "0.1.0"
