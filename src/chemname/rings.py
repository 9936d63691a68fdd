"""Detección y numeración del anillo de moléculas monocíclicas."""

from __future__ import annotations

from collections import deque
from typing import Dict, Iterator, List, Optional, Set

from .errors import ChemNameNotSupported
from .molview import MolView


def ring_core(view: MolView) -> Set[int]:
    """Devuelve los átomos que quedan tras podar hojas repetidamente.

    En un grafo acíclico el resultado es vacío; en un monociclo son
    exactamente los átomos del anillo.
    """
    adjacency: Dict[int, Set[int]] = {a: set(view.neighbors(a)) for a in view.atoms()}
    queue: deque[int] = deque(a for a, nbrs in adjacency.items() if len(nbrs) <= 1)
    removed: Set[int] = set()
    while queue:
        node = queue.popleft()
        if node in removed:
            continue
        removed.add(node)
        for nbr in adjacency[node]:
            adjacency[nbr].discard(node)
            if nbr not in removed and len(adjacency[nbr]) <= 1:
                queue.append(nbr)
        adjacency[node] = set()
    return {a for a in adjacency if a not in removed}


def find_single_ring(view: MolView) -> Optional[List[int]]:
    """Localiza el único anillo del grafo, ordenado por recorrido.

    Returns:
        Lista de IDs del anillo o `None` si el grafo es acíclico.

    Raises:
        ChemNameNotSupported: Si hay más de un anillo o anillos fusionados.
    """
    core = ring_core(view)
    if not core:
        return None
    for node in core:
        if len([nbr for nbr in view.neighbors(node) if nbr in core]) != 2:
            raise ChemNameNotSupported("Fused or multiple rings not supported")
    order = ring_order(view, core)
    if len(order) != len(core):
        raise ChemNameNotSupported("Multiple rings not supported")
    return order


def ring_order(view: MolView, ring_nodes: Set[int]) -> List[int]:
    """Recorre el anillo desde el átomo de menor ID.

    Si `ring_nodes` contiene varios ciclos disjuntos, solo se recorre el
    que contiene el menor ID.
    """
    adjacency = {node: [nbr for nbr in view.neighbors(node) if nbr in ring_nodes] for node in ring_nodes}
    start = min(ring_nodes)
    order = [start]
    prev = start
    current = adjacency[start][0]
    while current != start:
        order.append(current)
        nbrs = adjacency[current]
        prev, current = current, nbrs[0] if nbrs[1] == prev else nbrs[1]
        if len(order) > len(ring_nodes):
            return []
    return order


def ring_numberings(ring_atoms: List[int]) -> Iterator[List[int]]:
    """Genera todas las numeraciones del anillo (rotaciones y sentidos)."""
    size = len(ring_atoms)
    for start in range(size):
        for step in (1, -1):
            yield [ring_atoms[(start + step * k) % size] for k in range(size)]
