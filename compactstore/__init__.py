"""Compact binary storage of fixed-layout records of strings and 32-bit integers."""

__version__ = "0.1.0"
__all__ = ["descriptor", "encoding", "demo"]