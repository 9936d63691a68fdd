"""Motor de nomenclatura IUPAC simplificada.

Nombra las moléculas que producen los constructores: una cadena o un único
carbociclo, con halógenos, ramas alquílicas lineales y grupos C=O.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from .errors import ChemNameInternalError, ChemNameNotSupported
from .locants import Sub, groups_on_parent, orientation_key
from .molview import MolView
from .options import NameOptions
from .parent_chain import candidate_chains
from .render import render_name
from .rings import find_single_ring, ring_numberings
from .substituents import parent_name

ALLOWED_ELEMENTS = {"C", "H", "O", "F", "Cl", "Br", "I"}


@dataclass(frozen=True)
class _Numbering:
    """Numeración de un padre ya nombrada y la clave con que se compara."""
    name: str
    key: Tuple
    prefix_count: int


def iupac_name(graph, opts: NameOptions = NameOptions()) -> str:
    """Punto de entrada público del motor de nomenclatura.

    Returns:
        El nombre, o "N/D" si la estructura no se soporta y
        `opts.return_nd_on_fail` está activo.

    Raises:
        ChemNameNotSupported: Si la estructura no se soporta en modo estricto.
        ChemNameInternalError: Si el motor falla de forma inesperada.
    """
    try:
        return iupac_name_lite(graph, opts)
    except ChemNameNotSupported:
        if opts.return_nd_on_fail:
            return "N/D"
        raise
    except Exception as exc:  # pragma: no cover
        if opts.return_nd_on_fail:
            return "N/D"
        raise ChemNameInternalError(str(exc)) from exc


def iupac_name_lite(graph, opts: NameOptions) -> str:
    """Nombra un grafo conexo de C, H, O y halógenos."""
    view = MolView(graph)
    atoms = view.atoms()
    if not atoms:
        raise ChemNameNotSupported("Empty graph")
    for atom_id in atoms:
        if view.element(atom_id) not in ALLOWED_ELEMENTS:
            raise ChemNameNotSupported("Unsupported element")
    if not _is_connected(view, atoms):
        raise ChemNameNotSupported("Disconnected graph")

    ring = find_single_ring(view)
    if ring is None:
        return _name_acyclic(view, opts)
    return _name_ring(view, ring, opts)


def _name_acyclic(view: MolView, opts: NameOptions) -> str:
    best: Optional[Tuple[Tuple, _Numbering]] = None
    for chain in candidate_chains(view):
        try:
            numbering = _best_numbering(view, [chain, chain[::-1]], opts, cyclic=False)
        except ChemNameNotSupported:
            continue
        # Las cadenas que dejan un C=O en una rama ya se descartaron.
        # Primero la cadena más larga, luego la de más sustituyentes.
        rank = (-len(chain), -numbering.prefix_count, numbering.key, numbering.name)
        if best is None or rank < best[0]:
            best = (rank, numbering)
    if best is None:
        raise ChemNameNotSupported("No nameable parent chain")
    return best[1].name


def _name_ring(view: MolView, ring: List[int], opts: NameOptions) -> str:
    return _best_numbering(view, ring_numberings(ring), opts, cyclic=True).name


def _best_numbering(
    view: MolView,
    numberings: Iterable[Sequence[int]],
    opts: NameOptions,
    cyclic: bool,
) -> _Numbering:
    best: Optional[_Numbering] = None
    for parent in numberings:
        numbering = _name_numbering(view, parent, opts, cyclic)
        if best is None or (numbering.key, numbering.name) < (best.key, best.name):
            best = numbering
    if best is None:
        raise ChemNameNotSupported("Empty parent")
    return best


def _name_numbering(
    view: MolView, parent: Sequence[int], opts: NameOptions, cyclic: bool
) -> _Numbering:
    groups = groups_on_parent(view, parent)
    length = len(parent)
    prefixes: List[Sub] = list(groups.prefixes)

    carbonyls = groups.carbonyl_locants
    if cyclic:
        aldehydes: List[int] = []
    else:
        aldehydes = [loc for loc in carbonyls if loc in (1, length)]
    ketones = [loc for loc in carbonyls if loc not in aldehydes]

    if any(loc in aldehydes for loc in groups.acyl_halide_locants):
        raise ChemNameNotSupported("Acyl halides not supported")

    suffix: Optional[str] = None
    suffix_locants: List[int] = []
    if aldehydes:
        # El aldehído tiene prioridad; los demás C=O se citan como oxo.
        suffix, suffix_locants = "al", aldehydes
        prefixes.extend(Sub("oxo", loc) for loc in ketones)
    elif ketones:
        suffix, suffix_locants = "one", ketones

    omit = opts.omit_unambiguous_locants
    include_prefix_locants = not (omit and _prefix_locants_implied(length, cyclic, suffix, prefixes))
    include_suffix_locants = not (omit and cyclic and len(suffix_locants) == 1 and not prefixes)

    parent_str = parent_name(
        length,
        cyclic=cyclic,
        suffix=suffix,
        suffix_locants=suffix_locants,
        include_suffix_locants=include_suffix_locants,
    )
    name = render_name(prefixes, parent_str, include_locants=include_prefix_locants)
    key = orientation_key(prefixes, opts, primary_locants=suffix_locants)
    return _Numbering(name=name, key=key, prefix_count=len(prefixes))


def _prefix_locants_implied(
    length: int, cyclic: bool, suffix: Optional[str], prefixes: List[Sub]
) -> bool:
    if not prefixes:
        return True
    if length == 1:
        return True
    if suffix is not None or len(prefixes) != 1:
        return False
    return cyclic or length == 2


def _is_connected(view: MolView, atoms: List[int]) -> bool:
    seen = {atoms[0]}
    stack = [atoms[0]]
    while stack:
        node = stack.pop()
        for nbr in view.neighbors(node):
            if nbr not in seen:
                seen.add(nbr)
                stack.append(nbr)
    return len(seen) == len(atoms)
