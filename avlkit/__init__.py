"""Self-balancing AVL trees with custom ordering, traversals, helpers and a menu."""

__version__ = "0.1.0"
__all__ = ["cli", "extensions", "person", "templates", "tree"]