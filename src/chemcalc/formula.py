"""Cálculo y formateo de fórmulas moleculares.

Cuenta los elementos del grafo (hidrógenos implícitos incluidos) y formatea
la fórmula siguiendo el orden de Hill.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict

from chemname.molview import MolView
from .valence import implicit_h_count


def molecular_formula(graph) -> Dict[str, int]:
    """Calcula la fórmula molecular como diccionario elemento -> conteo.

    Args:
        graph: Grafo molecular compatible con `MolView`.

    Returns:
        Diccionario con símbolos atómicos y sus cantidades totales.
    """
    view = MolView(graph)
    counts: Counter = Counter()
    for atom_id in view.atoms():
        element = view.element(atom_id)
        counts[element] += 1
        if element != "H":
            counts["H"] += implicit_h_count(view, atom_id)
    return {element: count for element, count in counts.items() if count > 0}


def format_formula(formula_dict: Dict[str, int]) -> str:
    """Formatea una fórmula en orden de Hill.

    Con carbono: C, H y el resto alfabético. Sin carbono, todos los
    elementos en orden alfabético (H incluido).

    Args:
        formula_dict: Diccionario con símbolos de elementos y cantidades.

    Returns:
        Cadena con la fórmula formateada (p. ej., "C4H9Cl").
    """
    present = {e: n for e, n in formula_dict.items() if n > 0}
    if "C" in present:
        head = ["C"] + (["H"] if "H" in present else [])
        order = head + sorted(e for e in present if e not in {"C", "H"})
    else:
        order = sorted(present)
    return "".join(e if present[e] == 1 else f"{e}{present[e]}" for e in order)
