"""Renderizado final de nombres IUPAC-lite."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List

from .locants import Sub
from .substituents import multiplier


def render_name(
    substituents: Iterable[Sub],
    parent: str,
    include_locants: bool = True,
) -> str:
    """Renderiza el nombre combinando prefijos y padre.

    Los prefijos se citan en orden alfabético, sin contar los
    multiplicativos, y los idénticos se agrupan (p. ej., "2,2-dichloro").

    Args:
        substituents: Iterable de sustituyentes con locantes.
        parent: Nombre del padre con su sufijo.
        include_locants: Escribir los locantes de los prefijos.

    Returns:
        Nombre final en formato IUPAC-lite.

    Raises:
        ChemNameNotSupported: Si hay demasiados sustituyentes idénticos.
    """
    groups: Dict[str, List[int]] = defaultdict(list)
    for sub in substituents:
        groups[sub.name].append(sub.locant)

    if not groups:
        return parent

    blocks: List[str] = []
    for name in sorted(groups.keys()):
        locants = sorted(groups[name])
        prefix = multiplier(len(locants))
        if include_locants:
            locant_str = ",".join(str(loc) for loc in locants)
            blocks.append(f"{locant_str}-{prefix}{name}")
        else:
            blocks.append(f"{prefix}{name}")

    separator = "-" if include_locants else ""
    return separator.join(blocks) + parent
