"""PGM image I/O, LBP descriptors and matching, median filtering, and small data structures."""

__version__ = "0.1.0"