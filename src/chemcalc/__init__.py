"""API pública de cálculos químicos auxiliares."""

from .analyzer import MoleculeAnalyzer
from .formula import molecular_formula, format_formula
from .mass import molecular_weight
from .valence import implicit_h_count, TYPICAL_VALENCE

__all__ = [
    "MoleculeAnalyzer",
    "molecular_formula",
    "format_formula",
    "molecular_weight",
    "implicit_h_count",
    "TYPICAL_VALENCE",
]
