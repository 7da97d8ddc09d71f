"""K-means clustering of numeric CSV data, with optional multi-process assignment."""

__version__ = "0.1.0"
__all__ = ["dataset", "rng", "clustering", "parallel", "cli"]