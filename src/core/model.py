"""Modelo de datos del grafo atómico enlazado.

Este módulo concentra las estructuras que representan el grafo molecular
(átomos y enlaces) que producen los constructores de moléculas. El
analizador, el motor de nomenclatura y la exportación a RDKit leen estas
clases; ninguno de ellos las modifica.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

# Valencias máximas (suma de órdenes de enlace) antes de marcar error.
MAX_VALENCE_MAP = {
    "H": 1,
    "C": 4,
    "N": 4,
    "O": 3,
    "F": 1,
    "Cl": 7,
    "Br": 7,
    "I": 7,
}


@dataclass
class Atom:
    """Representa un átomo en el grafo molecular."""
    id: int
    element: str
    x: float = 0.0
    y: float = 0.0


@dataclass
class Bond:
    """Representa un enlace químico entre dos átomos."""
    id: int
    a1_id: int
    a2_id: int
    order: int = 1


class MolGraph:
    """Grafo molecular con operaciones de construcción básicas."""

    def __init__(self) -> None:
        """Inicializa el grafo vacío y contadores internos de IDs."""
        self.atoms: Dict[int, Atom] = {}
        self.bonds: Dict[int, Bond] = {}
        self._next_atom_id = 1
        self._next_bond_id = 1

    def add_atom(
        self,
        element: str,
        x: float = 0.0,
        y: float = 0.0,
        atom_id: Optional[int] = None,
    ) -> Atom:
        """Crea y registra un átomo en el grafo.

        Args:
            element: Símbolo del elemento químico (p. ej., "C", "O").
            x: Posición X de dibujo.
            y: Posición Y de dibujo.
            atom_id: ID explícito si se desea restaurar un grafo previo.

        Returns:
            El átomo creado y almacenado en el diccionario interno.

        Side Effects:
            Incrementa el contador de IDs y modifica `self.atoms`.
        """
        if atom_id is None:
            atom_id = self._next_atom_id
            self._next_atom_id += 1
        else:
            self._next_atom_id = max(self._next_atom_id, atom_id + 1)
        atom = Atom(id=atom_id, element=element, x=x, y=y)
        self.atoms[atom_id] = atom
        return atom

    def remove_atom(self, atom_id: int) -> tuple[Atom, List[Bond]]:
        """Elimina un átomo y todos los enlaces conectados.

        Args:
            atom_id: Identificador del átomo a eliminar.

        Returns:
            Una tupla con el átomo eliminado y la lista de enlaces removidos.
        """
        atom = self.atoms.pop(atom_id)
        removed_bonds: List[Bond] = []
        for bond_id, bond in list(self.bonds.items()):
            if bond.a1_id == atom_id or bond.a2_id == atom_id:
                removed_bonds.append(self.remove_bond(bond_id))
        return atom, removed_bonds

    def add_bond(
        self,
        a1_id: int,
        a2_id: int,
        order: int = 1,
        bond_id: Optional[int] = None,
    ) -> Bond:
        """Crea y registra un enlace entre dos átomos existentes.

        Args:
            a1_id: ID del primer átomo.
            a2_id: ID del segundo átomo.
            order: Orden de enlace (1, 2, 3).
            bond_id: ID explícito si se restaura un grafo previo.

        Returns:
            El enlace creado.

        Raises:
            KeyError: Si alguno de los átomos no existe.
            ValueError: Si se intenta enlazar un átomo consigo mismo.
        """
        if a1_id not in self.atoms or a2_id not in self.atoms:
            raise KeyError(f"Unknown atom in bond {a1_id}-{a2_id}")
        if a1_id == a2_id:
            raise ValueError("Cannot bond an atom to itself")
        if bond_id is None:
            bond_id = self._next_bond_id
            self._next_bond_id += 1
        else:
            self._next_bond_id = max(self._next_bond_id, bond_id + 1)
        bond = Bond(id=bond_id, a1_id=a1_id, a2_id=a2_id, order=order)
        self.bonds[bond_id] = bond
        return bond

    def remove_bond(self, bond_id: int) -> Bond:
        """Elimina un enlace del grafo y lo devuelve."""
        return self.bonds.pop(bond_id)

    def get_atom(self, atom_id: int) -> Atom:
        return self.atoms[atom_id]

    def get_bond(self, bond_id: int) -> Bond:
        return self.bonds[bond_id]

    def find_bond_between(self, a1_id: int, a2_id: int) -> Optional[Bond]:
        """Busca un enlace existente entre dos átomos.

        Returns:
            El enlace si existe, o `None` en caso contrario.
        """
        for bond in self.bonds.values():
            if {bond.a1_id, bond.a2_id} == {a1_id, a2_id}:
                return bond
        return None

    def neighbors(self, atom_id: int) -> List[int]:
        """Devuelve los IDs de átomos enlazados a `atom_id`, por ID de enlace."""
        result: List[int] = []
        for bond in self.bonds.values():
            if bond.a1_id == atom_id:
                result.append(bond.a2_id)
            elif bond.a2_id == atom_id:
                result.append(bond.a1_id)
        return result

    def clear(self) -> None:
        """Elimina todos los átomos y enlaces y reinicia los contadores."""
        self.atoms.clear()
        self.bonds.clear()
        self._next_atom_id = 1
        self._next_bond_id = 1

    def validate(self) -> List[int]:
        """Valida valencias máximas según `MAX_VALENCE_MAP`.

        Returns:
            Lista de IDs de átomos que exceden la valencia permitida.
        """
        bond_order_sum: Dict[int, int] = {atom_id: 0 for atom_id in self.atoms}
        for bond in self.bonds.values():
            if bond.a1_id in bond_order_sum:
                bond_order_sum[bond.a1_id] += bond.order
            if bond.a2_id in bond_order_sum:
                bond_order_sum[bond.a2_id] += bond.order

        errors: List[int] = []
        for atom_id, atom in self.atoms.items():
            expected = MAX_VALENCE_MAP.get(atom.element)
            if expected is None:
                continue
            if bond_order_sum.get(atom_id, 0) > expected:
                errors.append(atom_id)
        return errors
