"""Hidrógenos implícitos de los átomos del grafo enlazado."""

from __future__ import annotations

from typing import Dict

from chemname.molview import MolView

# Valencias típicas con las que se completan los átomos con hidrógeno.
TYPICAL_VALENCE: Dict[str, int] = {
    "H": 1,
    "C": 4,
    "N": 3,
    "O": 2,
    "F": 1,
    "Cl": 1,
    "Br": 1,
    "I": 1,
}


def implicit_h_count(view: MolView, atom_id: int) -> int:
    """Calcula los hidrógenos implícitos para un átomo.

    Args:
        view: Vista del grafo molecular.
        atom_id: Identificador del átomo a evaluar.

    Returns:
        Número de H implícitos (>= 0); 0 para elementos sin valencia típica.
    """
    typical = TYPICAL_VALENCE.get(view.element(atom_id))
    if typical is None:
        return 0
    bond_order_sum = sum(view.bond_order_between(atom_id, nbr) for nbr in view.neighbors(atom_id))
    return max(typical - bond_order_sum, 0)
