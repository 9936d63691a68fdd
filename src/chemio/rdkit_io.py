"""Exportación del grafo atómico enlazado a RDKit (SMILES y Molfile)."""

from __future__ import annotations

from typing import Dict

from core.model import MolGraph

try:
    from rdkit import Chem
except ImportError:  # pragma: no cover - optional dependency at runtime
    Chem = None


def _require_rdkit():
    if Chem is None:
        raise RuntimeError("RDKit no disponible")


def molgraph_to_rdkit_with_map(molgraph: MolGraph):
    """Convierte el grafo a `Chem.Mol` y devuelve también el mapa de IDs.

    Los hidrógenos implícitos los deduce RDKit al sanitizar.

    Raises:
        RuntimeError: Si RDKit no está disponible.
    """
    _require_rdkit()
    rw = Chem.RWMol()
    id_map: Dict[int, int] = {}

    for atom in sorted(molgraph.atoms.values(), key=lambda a: a.id):
        rd_atom = Chem.Atom(atom.element)
        id_map[atom.id] = rw.AddAtom(rd_atom)

    for bond in molgraph.bonds.values():
        if bond.order == 2:
            bond_type = Chem.BondType.DOUBLE
        elif bond.order == 3:
            bond_type = Chem.BondType.TRIPLE
        else:
            bond_type = Chem.BondType.SINGLE
        if rw.GetBondBetweenAtoms(id_map[bond.a1_id], id_map[bond.a2_id]) is None:
            rw.AddBond(id_map[bond.a1_id], id_map[bond.a2_id], bond_type)

    mol = rw.GetMol()
    Chem.SanitizeMol(mol)
    conf = Chem.Conformer(mol.GetNumAtoms())
    for atom_id, idx in id_map.items():
        atom = molgraph.atoms[atom_id]
        conf.SetAtomPosition(idx, (atom.x, atom.y, 0.0))
    mol.AddConformer(conf, assignId=True)
    return mol, id_map


def molgraph_to_rdkit(molgraph: MolGraph):
    mol, _ = molgraph_to_rdkit_with_map(molgraph)
    return mol


def molgraph_to_smiles(molgraph: MolGraph) -> str:
    mol = molgraph_to_rdkit(molgraph)
    return Chem.MolToSmiles(mol, canonical=True)


def molgraph_to_molfile(molgraph: MolGraph) -> str:
    mol = molgraph_to_rdkit(molgraph)
    return Chem.MolToMolBlock(mol)
