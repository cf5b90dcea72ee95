import pytest

from occupancy_splitter.core.domain.models.atom import Atom
from occupancy_splitter.core.domain.models.clash_graph import ClashGraph


def make_atoms(chain_id, *points):
    """One phosphorus atom per point, residues numbered from 1."""
    return [
        Atom(chain_id=chain_id, residue_id=i, atom_name="P", coordinates=tuple(point))
        for i, point in enumerate(points, start=1)
    ]


def graph_from_edges(vertices, edges):
    pairs = {frozenset(edge) for edge in edges}
    return ClashGraph.build(vertices, lambda a, b: frozenset((a, b)) in pairs)


SAMPLE_CIF = """data_TEST
#
_entry.id TEST
#
loop_
_atom_site.group_PDB
_atom_site.id
_atom_site.type_symbol
_atom_site.label_atom_id
_atom_site.label_comp_id
_atom_site.label_asym_id
_atom_site.label_seq_id
_atom_site.Cartn_x
_atom_site.Cartn_y
_atom_site.Cartn_z
_atom_site.occupancy
ATOM 1 P P G A 1 100.000 0.000 0.000 1.00
ATOM 2 C C1 G A 1 101.000 0.000 0.000 1.00
ATOM 3 P P G A 2 106.000 0.000 0.000 1.00
ATOM 4 P P C B 1 0.000 0.000 0.000 0.50
ATOM 5 C C1 C B 1 0.500 0.000 0.000 0.50
ATOM 6 P P C B 2 10.000 0.000 0.000 0.50
ATOM 7 P P U C 1 1.000 0.000 0.000 0.50
ATOM 8 P P U C 2 20.000 0.000 0.000 0.40
ATOM 9 P P A D 1 50.000 0.000 0.000 0.50
#
"""


@pytest.fixture
def sample_cif(tmp_path):
    """mmCIF file where fractional chains B and C clash and D stands alone."""
    path = tmp_path / "sample.cif"
    path.write_text(SAMPLE_CIF)
    return path
