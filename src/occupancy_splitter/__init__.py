"""Split alternate-conformation chains of a structure into clash-free models."""

__version__ = "0.1.0"
