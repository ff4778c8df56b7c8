"""Record types, linked lists, a stack, a sparse matrix and a small map for a social-network application."""

__version__ = "0.1.0"