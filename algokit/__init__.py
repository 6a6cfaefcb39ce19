"""Classic algorithms: shortest paths, dynamic programming, arrays and big numbers."""

__version__ = "0.1.0"
__all__ = ["graphs", "bignum", "arrays", "dynamic"]