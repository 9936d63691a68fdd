"""API pública del núcleo químico.

Reexpone el grafo atómico y los constructores de moléculas para facilitar
importaciones.
"""

from core.builders import (
    CyclicOrganicMoleculeBuilder,
    Halogen,
    LinearOrganicMoleculeBuilder,
    OrganicMoleculeBuilder,
    SubstituentSpec,
    SubstituentType,
)
from core.model import Atom, Bond, MolGraph

__all__ = [
    "Atom",
    "Bond",
    "MolGraph",
    "CyclicOrganicMoleculeBuilder",
    "Halogen",
    "LinearOrganicMoleculeBuilder",
    "OrganicMoleculeBuilder",
    "SubstituentSpec",
    "SubstituentType",
]
