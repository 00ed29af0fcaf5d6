"""Binary search tree, ordered search queue, vertex and element helpers, and a tree-timing command."""

__version__ = "0.1.0"

__all__ = ["__version__"]