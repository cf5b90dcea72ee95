"""Domain model for the clashes found between two chains."""

from dataclasses import dataclass, field
from typing import List, Tuple

from .atom import Atom


@dataclass(frozen=True)
class ClashResult:
    """Atom pairs of two chains closer than the clash distance.

    Attributes:
        chain_a: Chain the first atom of every pair belongs to
        chain_b: Chain the second atom of every pair belongs to
        clash_pairs: Clashing atoms, one from each chain
        min_distance: Closest approach of any two atoms, inf without atoms
    """

    chain_a: str
    chain_b: str
    clash_pairs: List[Tuple[Atom, Atom]] = field(default_factory=list)
    min_distance: float = float("inf")

    @property
    def has_clashes(self) -> bool:
        return bool(self.clash_pairs)

    @property
    def num_clashes(self) -> int:
        return len(self.clash_pairs)

    @property
    def residue_pairs(self) -> List[Tuple[int, int]]:
        """Residue numbers of every clashing pair."""
        return [(a.residue_id, b.residue_id) for a, b in self.clash_pairs]
