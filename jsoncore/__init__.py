"""Ordered hash table, string hashing, print buffer and number parsing helpers."""

__version__ = "0.1.0"
__all__ = ["hashing", "linkhash", "printbuf", "seed", "util"]