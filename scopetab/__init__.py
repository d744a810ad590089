"""Scoped symbol tables with chained hash buckets, a command-driven collision report, and an N-puzzle solver."""

__version__ = "0.1.0"
__all__ = ["hashing", "symbol", "scope", "table", "report", "npuzzle"]