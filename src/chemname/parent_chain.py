"""Cadenas candidatas a cadena principal en moléculas acíclicas.

Incluye funciones para recorrer el esqueleto de carbonos y enumerar las
cadenas entre sus extremos con un orden determinista.
"""

from __future__ import annotations

from collections import deque
from typing import Dict, Iterator, List, Optional, Set, Tuple

from .molview import MolView


def carbon_skeleton(view: MolView) -> Dict[int, List[int]]:
    """Lista de adyacencia restringida a átomos de carbono.

    Args:
        view: Vista del grafo molecular.

    Returns:
        Diccionario carbono -> vecinos de carbono ordenados.
    """
    carbons = {atom_id for atom_id in view.atoms() if view.element(atom_id) == "C"}
    return {
        node: [nbr for nbr in view.neighbors(node) if nbr in carbons]
        for node in sorted(carbons)
    }


def candidate_chains(view: MolView) -> Iterator[List[int]]:
    """Enumera las cadenas entre pares de extremos del esqueleto.

    En un esqueleto acíclico el camino entre dos carbonos es único, y
    prolongar una cadena hasta un extremo nunca reduce su longitud ni los
    grupos que contiene, así que basta con recorrer pares de hojas. Cada
    cadena se emite una sola vez, en su forma canónica (tupla menor).

    Args:
        view: Vista del grafo molecular.

    Yields:
        Listas de IDs de carbono que forman cada cadena candidata.
    """
    adjacency = carbon_skeleton(view)
    leaves = [node for node, nbrs in adjacency.items() if len(nbrs) <= 1]
    seen: Set[Tuple[int, ...]] = set()
    for start in leaves:
        # BFS desde cada hoja para reconstruir el camino hacia las demás.
        _dist, parent = _bfs(start, adjacency)
        for end in leaves:
            if end < start:
                continue
            path = _reconstruct_path(parent, start, end)
            if not path:
                continue
            canon = min(tuple(path), tuple(reversed(path)))
            if canon in seen:
                continue
            seen.add(canon)
            yield list(canon)


def _bfs(start: int, adjacency: Dict[int, List[int]]) -> Tuple[Dict[int, int], Dict[int, Optional[int]]]:
    """Búsqueda BFS para calcular distancias y padres."""
    dist: Dict[int, int] = {start: 0}
    parent: Dict[int, Optional[int]] = {start: None}
    queue: deque[int] = deque([start])
    while queue:
        node = queue.popleft()
        for nbr in adjacency.get(node, []):
            if nbr in dist:
                continue
            dist[nbr] = dist[node] + 1
            parent[nbr] = node
            queue.append(nbr)
    return dist, parent


def _reconstruct_path(
    parent: Dict[int, Optional[int]], start: int, end: int
) -> List[int]:
    """Reconstruye el camino desde `start` hasta `end` usando padres.

    Returns:
        Lista con el camino reconstruido o lista vacía si no existe.
    """
    if end not in parent:
        return []
    path: List[int] = []
    current: Optional[int] = end
    while current is not None:
        path.append(current)
        if current == start:
            break
        current = parent.get(current)
    if not path or path[-1] != start:
        return []
    return list(reversed(path))
