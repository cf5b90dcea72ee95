"""Detection of steric clashes between two chains."""

from typing import Sequence

import numpy as np

from ..models.atom import Atom
from ..models.clash_result import ClashResult
from ..models.resolver_config import PHOSPHORUS_VDW_RADIUS


def _coordinates(atoms: Sequence[Atom]) -> np.ndarray:
    """Stack atom coordinates into an (n_atoms, 3) array."""
    if not atoms:
        return np.empty((0, 3), dtype=float)
    return np.array([atom.coordinates for atom in atoms], dtype=float)


class SpatialClashDetector:
    """Decide whether the representative atoms of two chains overlap."""

    def __init__(self, vdw_radius: float = PHOSPHORUS_VDW_RADIUS):
        """
        Initialize detector.

        Args:
            vdw_radius: Atoms closer than this distance clash
        """
        self.vdw_radius = vdw_radius
        self._threshold_sq = vdw_radius * vdw_radius

    def _squared_distances(
        self, atoms_a: Sequence[Atom], atoms_b: Sequence[Atom]
    ) -> np.ndarray:
        coords_a = _coordinates(atoms_a)
        coords_b = _coordinates(atoms_b)
        diff = coords_a[:, np.newaxis, :] - coords_b[np.newaxis, :, :]
        return np.sum(diff**2, axis=-1)

    def clashes(self, atoms_a: Sequence[Atom], atoms_b: Sequence[Atom]) -> bool:
        """Return True if any pair of atoms, one per chain, is too close."""
        if not atoms_a or not atoms_b:
            return False
        return bool(np.any(self._squared_distances(atoms_a, atoms_b) < self._threshold_sq))

    def detect(self, atoms_a: Sequence[Atom], atoms_b: Sequence[Atom]) -> ClashResult:
        """
        Report every clashing atom pair between two chains.

        Args:
            atoms_a: Representative atoms of the first chain
            atoms_b: Representative atoms of the second chain

        Returns:
            ClashResult pairing clashing atoms of the first chain with those
            of the second
        """
        chain_a = atoms_a[0].chain_id if atoms_a else ""
        chain_b = atoms_b[0].chain_id if atoms_b else ""
        if not atoms_a or not atoms_b:
            return ClashResult(chain_a=chain_a, chain_b=chain_b)

        dist_sq = self._squared_distances(atoms_a, atoms_b)
        rows, cols = np.nonzero(dist_sq < self._threshold_sq)

        return ClashResult(
            chain_a=chain_a,
            chain_b=chain_b,
            clash_pairs=[(atoms_a[i], atoms_b[j]) for i, j in zip(rows, cols)],
            min_distance=float(np.sqrt(dist_sq.min())),
        )
