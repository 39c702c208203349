"""Serialization and persistence adapters for ``Date``."""
