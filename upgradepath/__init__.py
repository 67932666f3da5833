"""Release upgrade path resolution over a published update graph."""

__version__ = "0.1.0"
