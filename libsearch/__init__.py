"""Concurrent book availability search across OverDrive library catalogs."""

__version__ = "0.1.0"
