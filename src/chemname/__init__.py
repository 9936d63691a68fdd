"""Motor de nomenclatura IUPAC-lite para moléculas de los constructores.

Soporta el subconjunto que producen los constructores lineales y cíclicos:
- Cadenas acíclicas saturadas con halógenos y ramas alquilo lineales.
- Cicloalcanos (C3 en adelante) con los mismos sustituyentes.
- Grupos carbonilo: cetonas (-ona, -diona...) y aldehídos (-al, -dial),
  con las cetonas citadas como "oxo" cuando hay aldehído.

Fuera de alcance se devuelve "N/D" si está habilitada la opción.
"""

from .engine import iupac_name
from .options import NameOptions

__all__ = ["iupac_name", "NameOptions"]
