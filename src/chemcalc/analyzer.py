"""Analizador de moléculas construidas: nombre, fórmula y masa."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from chemname import NameOptions, iupac_name
from .formula import format_formula, molecular_formula
from .mass import molecular_weight

logger = logging.getLogger(__name__)


class MoleculeAnalyzer:
    """Deriva las propiedades de un grafo atómico enlazado.

    El recuento de elementos se calcula una sola vez por analizador; el
    nombre se calcula en la primera consulta.
    """

    def __init__(self, graph, opts: NameOptions = NameOptions()) -> None:
        self.graph = graph
        self.opts = opts
        self._counts: Optional[Dict[str, int]] = None
        self._name: Optional[str] = None

    def element_counts(self) -> Dict[str, int]:
        if self._counts is None:
            self._counts = molecular_formula(self.graph)
        return dict(self._counts)

    def iupac_name(self) -> str:
        """Nombre IUPAC-lite, o "N/D" si la estructura no está soportada."""
        if self._name is None:
            self._name = iupac_name(self.graph, self.opts)
            logger.debug("Named molecule %s", self._name)
        return self._name

    def formula(self) -> str:
        """Fórmula molecular en orden de Hill (p. ej., "C3H6O")."""
        return format_formula(self.element_counts())

    def molecular_weight(self) -> float:
        """Peso molecular promedio en u.

        Raises:
            ValueError: Si el grafo contiene un elemento sin peso tabulado.
        """
        return molecular_weight(self.element_counts())

    def smiles(self) -> str:
        """SMILES canónico vía RDKit.

        Raises:
            RuntimeError: Si RDKit no está disponible.
        """
        from chemio.rdkit_io import molgraph_to_smiles

        return molgraph_to_smiles(self.graph)
