# src/occupancy_splitter/infrastructure/repositories/structure_repository.py
"""Repository reading and writing mmCIF structures."""

import logging
from collections import defaultdict
from pathlib import Path
from typing import AbstractSet, Dict, List, Optional, Union

from Bio.PDB.MMCIF2Dict import MMCIF2Dict
from Bio.PDB.mmcifio import MMCIFIO

from ...core.domain.models.atom import Atom
from ...core.domain.models.solution import Solution

ATOM_SITE = "_atom_site."
CHAIN_KEY = "_atom_site.label_asym_id"
RESIDUE_KEY = "_atom_site.label_seq_id"
ATOM_NAME_KEY = "_atom_site.label_atom_id"
OCCUPANCY_KEY = "_atom_site.occupancy"
COORDINATE_KEYS = (
    "_atom_site.Cartn_x",
    "_atom_site.Cartn_y",
    "_atom_site.Cartn_z",
)
REQUIRED_KEYS = (CHAIN_KEY, RESIDUE_KEY, ATOM_NAME_KEY, OCCUPANCY_KEY) + COORDINATE_KEYS

# mmCIF placeholders for unknown and inapplicable values
MISSING_VALUES = {"?", "."}


class StructureRepository:
    """Access to the atom_site records of one mmCIF file."""

    def __init__(self, path: Union[str, Path], logger: Optional[logging.Logger] = None):
        """
        Load an mmCIF file.

        Args:
            path: Path to the mmCIF file

        Raises:
            ValueError: If the file lacks a required atom_site column
        """
        self.path = Path(path)
        self.logger = logger or logging.getLogger(__name__)
        self._data = MMCIF2Dict(str(self.path))

        missing = [key for key in REQUIRED_KEYS if key not in self._data]
        if missing:
            raise ValueError(f"{self.path}: missing atom_site columns {missing}")

    @property
    def row_count(self) -> int:
        return len(self._data[CHAIN_KEY])

    def chains(self) -> List[str]:
        """Chain ids in order of first appearance."""
        return list(dict.fromkeys(self._data[CHAIN_KEY]))

    def read_occupancy(self) -> Dict[str, float]:
        """
        Minimum occupancy of each chain.

        Rows without an occupancy value count as fully occupied.

        Raises:
            ValueError: If an occupancy value is not a number
        """
        occupancy: Dict[str, float] = {}
        rows = zip(self._data[CHAIN_KEY], self._data[OCCUPANCY_KEY])
        for i, (chain, value) in enumerate(rows):
            try:
                current = 1.0 if value in MISSING_VALUES else float(value)
            except ValueError:
                raise ValueError(
                    f"{self.path}: invalid occupancy '{value}' in atom_site row {i}"
                ) from None
            occupancy[chain] = min(occupancy.get(chain, current), current)
        return occupancy

    def read_atoms(
        self, chains: AbstractSet[str], atom_name: str = "P"
    ) -> Dict[str, List[Atom]]:
        """
        Representative atoms of the given chains, one per residue.

        Args:
            chains: Chain ids to read
            atom_name: Name of the representative atom

        Returns:
            Atoms per chain in file order

        Raises:
            ValueError: If a residue number is not an integer
        """
        columns = [self._data[key] for key in (CHAIN_KEY, RESIDUE_KEY, ATOM_NAME_KEY)]
        coordinates = [self._data[key] for key in COORDINATE_KEYS]

        atoms: Dict[str, List[Atom]] = defaultdict(list)
        seen = set()
        for i, (chain, residue, name) in enumerate(zip(*columns)):
            if chain not in chains or name != atom_name:
                continue
            if residue in MISSING_VALUES:
                self.logger.debug(f"Skipping row {i}: no residue number")
                continue
            if (chain, residue) in seen:
                # alternate locations of the same atom
                continue
            try:
                xyz = tuple(float(axis[i]) for axis in coordinates)
            except ValueError:
                self.logger.debug(f"Skipping row {i}: invalid coordinates")
                continue
            try:
                residue_id = int(residue)
            except ValueError:
                raise ValueError(
                    f"{self.path}: invalid residue number '{residue}' in atom_site row {i}"
                ) from None
            seen.add((chain, residue))
            atoms[chain].append(
                Atom(chain_id=chain, residue_id=residue_id, atom_name=name, coordinates=xyz)
            )
        return dict(atoms)

    def output_path_for(
        self, solution: Solution, output_dir: Optional[Union[str, Path]] = None
    ) -> Path:
        """Path of the file holding one solution, next to the input by default."""
        base = self.path.name
        if base.endswith(".cif"):
            base = base[: -len(".cif")]
        directory = Path(output_dir) if output_dir else self.path.parent
        return directory / f"{base}-{solution.name or 'none'}.cif"

    def write_selection(self, retained_chains: AbstractSet[str], out_path: Union[str, Path]) -> Path:
        """
        Write a copy of the structure keeping only some chains.

        Only atom_site rows are filtered; every other category is copied as is.

        Args:
            retained_chains: Chain ids whose atoms are kept
            out_path: Destination file

        Returns:
            Path of the written file
        """
        keep = [
            i for i, chain in enumerate(self._data[CHAIN_KEY]) if chain in retained_chains
        ]

        data = {}
        for key, value in self._data.items():
            if key.startswith(ATOM_SITE) and isinstance(value, list):
                data[key] = [value[i] for i in keep]
            elif isinstance(value, list):
                data[key] = list(value)
            else:
                data[key] = value

        out_path = Path(out_path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        io = MMCIFIO()
        io.set_dict(data)
        io.save(str(out_path))
        self.logger.debug(f"Wrote {len(keep)} of {self.row_count} atoms to {out_path}")
        return out_path
