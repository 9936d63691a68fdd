"""Nombres de sustituyentes y de padres para nomenclatura IUPAC-lite."""

from __future__ import annotations

from typing import Dict, List, Sequence, Set

from .errors import ChemNameNotSupported
from .molview import MolView

# Mapeo de halógenos a prefijos de sustituyentes.
HALO_MAP: Dict[str, str] = {
    "F": "fluoro",
    "Cl": "chloro",
    "Br": "bromo",
    "I": "iodo",
}

# Nombres base de alcanos (cadena principal).
ALKANE_PARENT: Dict[int, str] = {
    1: "methane",
    2: "ethane",
    3: "propane",
    4: "butane",
    5: "pentane",
    6: "hexane",
    7: "heptane",
    8: "octane",
    9: "nonane",
    10: "decane",
    11: "undecane",
    12: "dodecane",
    13: "tridecane",
    14: "tetradecane",
    15: "pentadecane",
    16: "hexadecane",
    17: "heptadecane",
    18: "octadecane",
    19: "nonadecane",
    20: "icosane",
}

# Nombres de sustituyentes alquilo lineales.
ALKYL: Dict[int, str] = {
    length: parent[:-3] + "yl" for length, parent in ALKANE_PARENT.items()
}

# Prefijos multiplicativos para grupos idénticos.
MULTIPLIER: Dict[int, str] = {
    2: "di",
    3: "tri",
    4: "tetra",
    5: "penta",
    6: "hexa",
    7: "hepta",
    8: "octa",
}


def multiplier(count: int) -> str:
    """Prefijo multiplicativo para `count` grupos ("" si es uno).

    Raises:
        ChemNameNotSupported: Si hay demasiados grupos idénticos.
    """
    if count == 1:
        return ""
    prefix = MULTIPLIER.get(count)
    if prefix is None:
        raise ChemNameNotSupported("Too many identical substituents")
    return prefix


def alkyl_substituent_name(view: MolView, start_atom: int, parent_set: Set[int]) -> str:
    """Devuelve el nombre de una rama alquílica lineal.

    Args:
        view: Vista del grafo molecular.
        start_atom: Carbono de la rama unido al padre.
        parent_set: Átomos de la cadena o anillo principal.

    Returns:
        Nombre del sustituyente (p. ej., "ethyl").

    Raises:
        ChemNameNotSupported: Si la rama es ramificada, insaturada o lleva
            heteroátomos.
    """
    branch: List[int] = [start_atom]
    prev = None
    current = start_atom
    while True:
        onward = []
        for nbr in view.heavy_neighbors(current):
            if nbr == prev or nbr in parent_set:
                continue
            if view.element(nbr) != "C":
                raise ChemNameNotSupported("Substituted alkyl branch")
            if view.bond_order_between(current, nbr) != 1:
                raise ChemNameNotSupported("Unsaturated alkyl branch")
            onward.append(nbr)
        if len(onward) > 1:
            raise ChemNameNotSupported("Branched alkyl substituent")
        parent_links = [nbr for nbr in view.heavy_neighbors(current) if nbr in parent_set]
        if current != start_atom and parent_links:
            raise ChemNameNotSupported("Bridging alkyl branch")
        if not onward:
            break
        prev, current = current, onward[0]
        if current in branch:
            raise ChemNameNotSupported("Cyclic alkyl branch")
        branch.append(current)

    name = ALKYL.get(len(branch))
    if name is None:
        raise ChemNameNotSupported("Unsupported alkyl length")
    return name


def parent_name(
    length: int,
    cyclic: bool = False,
    suffix: str | None = None,
    suffix_locants: Sequence[int] = (),
    include_suffix_locants: bool = True,
) -> str:
    """Construye el nombre del padre con su sufijo funcional.

    Args:
        length: Carbonos de la cadena o del anillo principal.
        cyclic: Si el padre es un anillo.
        suffix: "one" (cetona), "al" (aldehído) o `None`.
        suffix_locants: Locantes del grupo del sufijo.
        include_suffix_locants: Escribir los locantes de "-one".

    Returns:
        Nombre del padre (p. ej., "butan-2-one", "pentane-2,4-dione").

    Raises:
        ChemNameNotSupported: Si la longitud o el sufijo no están soportados.
    """
    base = ALKANE_PARENT.get(length)
    if base is None:
        raise ChemNameNotSupported("Unsupported parent length")
    if cyclic:
        if length < 3:
            raise ChemNameNotSupported("Ring too small")
        base = f"cyclo{base}"
    if suffix is None:
        return base

    count = len(suffix_locants)
    if count == 0:
        raise ChemNameNotSupported("Missing suffix locant")
    mult = multiplier(count)
    # La "e" final se elide ante vocal: butanal, butan-2-one; pentane-2,4-dione.
    stem = base if mult else base[:-1]
    if suffix == "al":
        return f"{stem}{mult}al"
    if suffix != "one":
        raise ChemNameNotSupported(f"Unsupported suffix {suffix}")
    if not include_suffix_locants:
        return f"{stem}{mult}one"
    locant_str = ",".join(str(loc) for loc in sorted(suffix_locants))
    return f"{stem}-{locant_str}-{mult}one"
