#!/usr/bin/env python3
# src/occupancy_splitter/core/domain/models/atom.py

"""
Domain model representing a representative atom of a chain residue.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Atom:
    """Represents one atom of a residue, used as a spatial proxy for it."""

    chain_id: str
    residue_id: int
    atom_name: str
    coordinates: Tuple[float, float, float]
