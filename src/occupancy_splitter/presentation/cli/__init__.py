"""Command-line interface modules."""

from .split_occupancy import main as split_occupancy_main

__all__ = ["split_occupancy_main"]
