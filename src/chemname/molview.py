"""Vista de lectura sobre el grafo atómico enlazado.

`MolView` ofrece a los módulos de nomenclatura y de cálculo una API de
consulta uniforme y cachea adyacencias y órdenes de enlace del grafo.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Set, Tuple

from .errors import ChemNameNotSupported


class MolView:
    """Adaptador ligero de solo lectura sobre un `MolGraph`."""

    def __init__(self, graph) -> None:
        """Inicializa la vista sobre un grafo.

        Args:
            graph: Objeto con diccionarios `atoms` y `bonds` compatibles con
                `core.model.MolGraph`.

        Raises:
            ChemNameNotSupported: Si el objeto no expone átomos y enlaces.
        """
        atoms = getattr(graph, "atoms", None)
        bonds = getattr(graph, "bonds", None)
        if not isinstance(atoms, dict) or not isinstance(bonds, dict):
            raise ChemNameNotSupported("Cannot read atoms from graph")
        self.graph = graph
        self._adj: Optional[Dict[int, Set[int]]] = None
        self._bond_orders: Optional[Dict[frozenset[int], int]] = None

    def atoms(self) -> List[int]:
        """Devuelve la lista ordenada de IDs atómicos."""
        return sorted(self.graph.atoms.keys())

    def element(self, atom_id: int) -> str:
        """Obtiene el símbolo del elemento para un átomo.

        Raises:
            ChemNameNotSupported: Si el átomo no existe.
        """
        atom = self.graph.atoms.get(atom_id)
        if atom is None:
            raise ChemNameNotSupported("Cannot resolve atom element")
        return str(atom.element)

    def neighbors(self, atom_id: int) -> List[int]:
        """Devuelve la lista ordenada de vecinos conectados al átomo."""
        self._ensure_adjacency()
        return sorted(self._adj.get(atom_id, set()))

    def heavy_neighbors(self, atom_id: int) -> List[int]:
        return [nbr for nbr in self.neighbors(atom_id) if self.element(nbr) != "H"]

    def bond_order_between(self, atom_id_1: int, atom_id_2: int) -> int:
        """Obtiene el orden de enlace entre dos átomos (0 si no hay enlace)."""
        self._ensure_adjacency()
        return self._bond_orders.get(frozenset({atom_id_1, atom_id_2}), 0)

    def bonds(self) -> List[Tuple[int, int, int]]:
        """Lista de enlaces como tuplas (a1, a2, orden)."""
        return [(b.a1_id, b.a2_id, b.order) for b in self.graph.bonds.values()]

    def _ensure_adjacency(self) -> None:
        """Construye y cachea adyacencias y órdenes de enlace."""
        if self._adj is not None:
            return
        adjacency: Dict[int, Set[int]] = {atom_id: set() for atom_id in self.graph.atoms}
        bond_orders: Dict[frozenset[int], int] = {}
        for a1, a2, order in self.bonds():
            adjacency.setdefault(a1, set()).add(a2)
            adjacency.setdefault(a2, set()).add(a1)
            bond_orders[frozenset({a1, a2})] = int(order)
        self._adj = adjacency
        self._bond_orders = bond_orders
