"""Instantánea plana de una molécula construida, lista para serializar.

`MoleculeData` copia de un constructor (lineal o cíclico) los datos que el
renderizador del front-end necesita para dibujar la molécula: carbonos
principales, sustituyentes por carbono y las propiedades que calcula el
analizador (nombre IUPAC, fórmula y masa molecular).

La instantánea se crea de una vez y no guarda referencias al constructor
ni al analizador.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Tuple

from chemcalc.analyzer import MoleculeAnalyzer
from core.builders import (
    CyclicOrganicMoleculeBuilder,
    LinearOrganicMoleculeBuilder,
    OrganicMoleculeBuilder,
    SubstituentType,
)

logger = logging.getLogger(__name__)

AnalyzerFactory = Callable[[object], MoleculeAnalyzer]


@dataclass(frozen=True)
class Substituent:
    """Grupo lateral unido a un carbono principal.

    Attributes:
        bond_count: 2 para un carbonilo, 1 en los demás casos.
        chain_length: Carbonos de la cadena alquílica (0 si no hay).
        formula: Símbolo del halógeno, o "" si no lo hay.
        type: Forma textual del `SubstituentType`.
    """
    bond_count: int
    chain_length: int
    formula: str
    type: str


@dataclass(frozen=True)
class MoleculeData:
    """Instantánea inmutable de una molécula para el renderizador.

    Attributes:
        core_carbons: Carbonos de la cadena o del anillo principal.
        substituents: Una tupla de sustituyentes por carbono principal.
        cyclic: Si la instantánea proviene de un constructor cíclico.
        name: Nombre IUPAC devuelto por el analizador.
        mass: Masa molecular devuelta por el analizador.
        formula: Fórmula química devuelta por el analizador.
    """
    core_carbons: int
    substituents: Tuple[Tuple[Substituent, ...], ...]
    cyclic: bool
    name: str
    mass: float
    formula: str

    def get_name(self) -> str:
        return self.name

    def get_mass(self) -> float:
        return self.mass

    def get_formula(self) -> str:
        return self.formula

    @classmethod
    def from_linear(
        cls,
        builder: LinearOrganicMoleculeBuilder,
        analyzer_factory: AnalyzerFactory = MoleculeAnalyzer,
    ) -> "MoleculeData":
        """Crea la instantánea de una molécula de cadena abierta."""
        return cls._snapshot(builder, cyclic=False, analyzer_factory=analyzer_factory)

    @classmethod
    def from_cyclic(
        cls,
        builder: CyclicOrganicMoleculeBuilder,
        analyzer_factory: AnalyzerFactory = MoleculeAnalyzer,
    ) -> "MoleculeData":
        """Crea la instantánea de una molécula cíclica."""
        return cls._snapshot(builder, cyclic=True, analyzer_factory=analyzer_factory)

    @classmethod
    def _snapshot(
        cls,
        builder: OrganicMoleculeBuilder,
        cyclic: bool,
        analyzer_factory: AnalyzerFactory,
    ) -> "MoleculeData":
        """Copia los datos del constructor y las propiedades del analizador.

        `build()` se invoca una sola vez y el nombre, la fórmula y la masa
        se leen antes de recorrer los sustituyentes. Los errores del
        constructor o del analizador se propagan sin envolver.

        Raises:
            ValueError: Si el constructor declara menos de un carbono.
        """
        core_carbons = builder.core_carbons
        if core_carbons < 1:
            raise ValueError(f"Builder reports {core_carbons} core carbons")

        atom = builder.build()
        analyzer = analyzer_factory(atom)
        name = analyzer.iupac_name()
        formula = analyzer.formula()
        mass = analyzer.molecular_weight()

        substituents: List[Tuple[Substituent, ...]] = []
        for position in range(core_carbons):
            substituents.append(tuple(_read_slots(builder.substituents_at(position))))

        logger.debug("Snapshot of %s (%s, cyclic=%s)", name, formula, cyclic)
        return cls(
            core_carbons=core_carbons,
            substituents=tuple(substituents),
            cyclic=cyclic,
            name=name,
            mass=mass,
            formula=formula,
        )


def _read_slots(slots) -> List[Substituent]:
    """Convierte un arreglo de posiciones en registros, hasta el primer hueco."""
    records: List[Substituent] = []
    for spec in slots:
        if spec is None:
            break
        halogen = spec.halogen
        records.append(
            Substituent(
                bond_count=2 if spec.type == SubstituentType.CARBONYL else 1,
                chain_length=spec.alkyl_length,
                formula=halogen.symbol if halogen is not None else "",
                type=str(spec.type),
            )
        )
    return records
