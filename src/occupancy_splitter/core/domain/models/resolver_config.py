"""Configuration for clash resolution."""

from dataclasses import dataclass
from typing import Literal

FRACTIONAL_MODE = "fractional"
ALL_MODE = "all"

# van der Waals radius of phosphorus, in Angstroms
PHOSPHORUS_VDW_RADIUS = 1.85


@dataclass
class ResolverConfig:
    """Parameters controlling clash detection and subset enumeration.

    Attributes:
        vdw_radius: Distance below which two representative atoms clash
        representative_atom: Atom name standing in for each residue
        mode: Build the graph over fractional chains only, or over all chains
        max_component_size: Largest component enumerated exhaustively
        n_workers: Processes used for per-component search
    """

    vdw_radius: float = PHOSPHORUS_VDW_RADIUS
    representative_atom: str = "P"
    mode: Literal["fractional", "all"] = FRACTIONAL_MODE
    max_component_size: int = 20
    n_workers: int = 1

    def __post_init__(self):
        if self.vdw_radius <= 0:
            raise ValueError(f"vdw_radius must be positive, got {self.vdw_radius}")
        if not self.representative_atom:
            raise ValueError("representative_atom must not be empty")
        if self.mode not in (FRACTIONAL_MODE, ALL_MODE):
            raise ValueError(
                f"mode must be '{FRACTIONAL_MODE}' or '{ALL_MODE}', got '{self.mode}'"
            )
        if self.max_component_size < 0:
            raise ValueError(
                f"max_component_size must be non-negative, got {self.max_component_size}"
            )
        if self.n_workers < 1:
            raise ValueError(f"n_workers must be at least 1, got {self.n_workers}")
