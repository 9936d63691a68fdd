"""Sustituyentes y locantes sobre una numeración del padre.

Este módulo recorre los átomos del padre en el orden de numeración,
clasifica los grupos unidos a cada uno y define la clave de comparación
con la que se elige la numeración de locantes más bajos.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Tuple

from .errors import ChemNameNotSupported
from .molview import MolView
from .substituents import HALO_MAP, alkyl_substituent_name


@dataclass(frozen=True)
class Sub:
    """Representa un sustituyente con su nombre y locante."""
    name: str
    locant: int


@dataclass
class ParentGroups:
    """Grupos encontrados sobre una numeración concreta del padre."""
    prefixes: List[Sub] = field(default_factory=list)
    carbonyl_locants: List[int] = field(default_factory=list)
    acyl_halide_locants: List[int] = field(default_factory=list)


def groups_on_parent(view: MolView, parent: Sequence[int]) -> ParentGroups:
    """Clasifica los grupos unidos a cada átomo del padre.

    Args:
        view: Vista del grafo molecular.
        parent: IDs del padre en orden de numeración (locante 1 primero).

    Returns:
        Prefijos (halógenos y alquilos) y locantes de los carbonilos.

    Raises:
        ChemNameNotSupported: Si aparece un grupo no soportado.
    """
    parent_set = set(parent)
    groups = ParentGroups()
    for index, atom_id in enumerate(parent):
        locant = index + 1
        if view.element(atom_id) != "C":
            raise ChemNameNotSupported("Heteroatom in parent")
        carbonyls = 0
        halogens = 0
        for nbr in view.heavy_neighbors(atom_id):
            if nbr in parent_set:
                if view.bond_order_between(atom_id, nbr) != 1:
                    raise ChemNameNotSupported("Unsaturated parent")
                continue
            elem = view.element(nbr)
            if elem in HALO_MAP:
                groups.prefixes.append(Sub(HALO_MAP[elem], locant))
                halogens += 1
            elif elem == "O":
                if view.bond_order_between(atom_id, nbr) != 2 or len(view.heavy_neighbors(nbr)) != 1:
                    raise ChemNameNotSupported("Only C=O oxygen supported")
                groups.carbonyl_locants.append(locant)
                carbonyls += 1
            elif elem == "C":
                if view.bond_order_between(atom_id, nbr) != 1:
                    raise ChemNameNotSupported("Unsaturated branch")
                groups.prefixes.append(Sub(alkyl_substituent_name(view, nbr, parent_set), locant))
            else:
                raise ChemNameNotSupported("Unsupported substituent")
        if carbonyls > 1:
            raise ChemNameNotSupported("Several C=O on one carbon")
        if carbonyls and halogens:
            groups.acyl_halide_locants.append(locant)
    return groups


def _alphabetical_locants(subs: Iterable[Sub]) -> Tuple[int, ...]:
    """Locantes en el orden alfabético de cita de los sustituyentes."""
    return tuple(sub.locant for sub in sorted(subs, key=lambda s: (s.name, s.locant)))


def _locant_key(subs: Iterable[Sub]) -> Tuple[int, ...]:
    """Clave de orden basada solo en locantes."""
    return tuple(sorted(sub.locant for sub in subs))


def orientation_key(
    subs: Iterable[Sub],
    opts,
    primary_locants: Iterable[int] = (),
) -> Tuple[Tuple[int, ...], Tuple[int, ...], Tuple[int, ...]]:
    """Crea una clave compuesta de orientación para comparar numeraciones.

    Args:
        subs: Prefijos detectados.
        opts: Opciones de desempate.
        primary_locants: Locantes del grupo principal (sufijo).

    Returns:
        Tupla comparable: locantes del sufijo, locantes de todos los
        prefijos y, si se desea, locantes en orden alfabético de cita.
    """
    subs = list(subs)
    primary = tuple(sorted(primary_locants))
    tiebreak = _alphabetical_locants(subs) if opts.prefer_alphabetical_tiebreak else ()
    return primary, _locant_key(subs), tiebreak
