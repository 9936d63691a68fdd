"""Constructores de moléculas orgánicas lineales y cíclicas.

Un constructor describe una molécula como un esqueleto de carbonos
principales (cadena o anillo) y, para cada carbono, un arreglo de capacidad
fija con los sustituyentes declarados. Las posiciones vacías se marcan con
`None`; la primera posición vacía termina el arreglo y las siguientes se
consideran capacidad sin usar.

`build()` materializa el grafo atómico completo (`MolGraph`) con los
hidrógenos implícitos, listo para el analizador.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from core.model import MolGraph

logger = logging.getLogger(__name__)

# Capacidad del arreglo de sustituyentes de cada carbono principal.
SLOTS_PER_CARBON = 4

CARBON_VALENCE = 4
BOND_LENGTH = 1.5


class SubstituentType(str, Enum):
    """Tipos de sustituyente que admite un carbono principal."""
    ALKYL = "ALKYL"
    CARBONYL = "CARBONYL"
    HALIDE = "HALIDE"

    def __str__(self) -> str:
        return self.value


class Halogen(str, Enum):
    """Halógenos disponibles para sustituyentes HALIDE."""
    FLUORINE = "F"
    CHLORINE = "Cl"
    BROMINE = "Br"
    IODINE = "I"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_symbol(cls, symbol: str) -> "Halogen":
        """Resuelve un halógeno por su símbolo químico.

        Raises:
            ValueError: Si el símbolo no corresponde a un halógeno.
        """
        for member in cls:
            if member.value == symbol:
                return member
        raise ValueError(f"Unknown halogen symbol: {symbol!r}")


@dataclass(frozen=True)
class SubstituentSpec:
    """Declaración de un grupo lateral unido a un carbono principal.

    Attributes:
        type: Tipo de sustituyente.
        alkyl_length: Carbonos de la cadena alquílica (0 si no es ALKYL).
        halogen: Halógeno del sustituyente HALIDE; `None` indica que aún no
            se ha asignado.
    """
    type: SubstituentType
    alkyl_length: int = 0
    halogen: Optional[Halogen] = None

    def __post_init__(self) -> None:
        if self.alkyl_length < 0:
            raise ValueError("alkyl_length must be >= 0")
        if self.type is SubstituentType.ALKYL and self.alkyl_length < 1:
            raise ValueError("ALKYL substituents need alkyl_length >= 1")
        if self.type is not SubstituentType.ALKYL and self.alkyl_length != 0:
            raise ValueError(f"{self.type} substituents cannot carry an alkyl chain")
        if self.halogen is not None and self.type is not SubstituentType.HALIDE:
            raise ValueError("Only HALIDE substituents carry a halogen")

    @property
    def bond_count(self) -> int:
        """Orden del enlace con el carbono principal."""
        return 2 if self.type is SubstituentType.CARBONYL else 1

    @classmethod
    def alkyl(cls, length: int) -> "SubstituentSpec":
        return cls(SubstituentType.ALKYL, alkyl_length=length)

    @classmethod
    def carbonyl(cls) -> "SubstituentSpec":
        return cls(SubstituentType.CARBONYL)

    @classmethod
    def halide(cls, halogen: Optional[Halogen] = None) -> "SubstituentSpec":
        return cls(SubstituentType.HALIDE, halogen=halogen)


class OrganicMoleculeBuilder(ABC):
    """Base común de los constructores de moléculas orgánicas."""

    cyclic: bool = False
    min_core_carbons: int = 1

    def __init__(self, core_carbons: int) -> None:
        """Crea un esqueleto sin sustituyentes.

        Args:
            core_carbons: Carbonos de la cadena o del anillo principal.

        Raises:
            ValueError: Si el número de carbonos no alcanza el mínimo.
        """
        if core_carbons < self.min_core_carbons:
            raise ValueError(
                f"{type(self).__name__} needs at least "
                f"{self.min_core_carbons} core carbons, got {core_carbons}"
            )
        self._core_carbons = core_carbons
        self._substituents: List[List[Optional[SubstituentSpec]]] = [
            [None] * SLOTS_PER_CARBON for _ in range(core_carbons)
        ]

    @property
    def core_carbons(self) -> int:
        return self._core_carbons

    def substituents_at(self, position: int) -> Tuple[Optional[SubstituentSpec], ...]:
        """Devuelve una copia del arreglo de sustituyentes de un carbono.

        El arreglo siempre tiene `SLOTS_PER_CARBON` posiciones; las vacías
        valen `None`.
        """
        self._check_position(position)
        return tuple(self._substituents[position])

    def add_substituent(self, position: int, spec: SubstituentSpec) -> int:
        """Añade un sustituyente en la primera posición libre del carbono.

        Args:
            position: Índice del carbono principal (desde 0).
            spec: Sustituyente a añadir.

        Returns:
            Índice de la posición ocupada.

        Raises:
            IndexError: Si el carbono no existe.
            ValueError: Si no quedan posiciones o se excede la valencia.
        """
        self._check_position(position)
        slots = self._substituents[position]
        try:
            slot = slots.index(None)
        except ValueError:
            raise ValueError(f"No free substituent slot on carbon {position}") from None
        self._check_valence(position, spec, replacing=None)
        slots[slot] = spec
        logger.debug("Added %s to carbon %d slot %d", spec.type, position, slot)
        return slot

    def set_substituent(
        self, position: int, slot: int, spec: Optional[SubstituentSpec]
    ) -> None:
        """Escribe directamente una posición del arreglo de un carbono.

        No compacta el arreglo: escribir `None` en medio deja un hueco y
        las posiciones posteriores dejan de contar.
        """
        self._check_position(position)
        slots = self._substituents[position]
        if not 0 <= slot < len(slots):
            raise IndexError(f"Substituent slot {slot} out of range")
        if spec is not None:
            self._check_valence(position, spec, replacing=slot)
        slots[slot] = spec

    def remove_substituent(self, position: int, slot: int) -> SubstituentSpec:
        """Quita un sustituyente y desplaza los siguientes hacia la izquierda.

        Raises:
            IndexError: Si el carbono no existe o la posición está vacía.
        """
        self._check_position(position)
        slots = self._substituents[position]
        if not 0 <= slot < len(slots) or slots[slot] is None:
            raise IndexError(f"No substituent at carbon {position} slot {slot}")
        removed = slots.pop(slot)
        slots.append(None)
        return removed

    def clear_substituents(self, position: int) -> None:
        self._check_position(position)
        self._substituents[position] = [None] * SLOTS_PER_CARBON

    def build(self) -> MolGraph:
        """Materializa el grafo atómico enlazado de la molécula.

        Los hidrógenos quedan implícitos. Los sustituyentes HALIDE sin
        halógeno asignado se omiten.

        Returns:
            Grafo con los carbonos principales, cadenas alquílicas, oxígenos
            carbonílicos y halógenos.
        """
        graph = MolGraph()
        coords = self._core_coordinates()
        core_ids: List[int] = []
        for x, y in coords:
            core_ids.append(graph.add_atom("C", x, y).id)
        for i, j in self._core_bonds():
            graph.add_bond(core_ids[i], core_ids[j], order=1)

        for position, atom_id in enumerate(core_ids):
            ux, uy = self._outward_direction(position)
            for spec in self._present_substituents(position):
                self._attach(graph, atom_id, spec, ux, uy)

        logger.debug(
            "Built %s graph: %d atoms, %d bonds",
            "cyclic" if self.cyclic else "linear",
            len(graph.atoms),
            len(graph.bonds),
        )
        return graph

    @abstractmethod
    def _core_bonds(self) -> List[Tuple[int, int]]:
        """Pares de índices de carbonos principales enlazados."""

    @abstractmethod
    def _core_coordinates(self) -> List[Tuple[float, float]]:
        """Coordenadas de dibujo de los carbonos principales."""

    @abstractmethod
    def _outward_direction(self, position: int) -> Tuple[float, float]:
        """Vector unitario hacia fuera del esqueleto en un carbono."""

    def _core_degree(self, position: int) -> int:
        return sum(1 for i, j in self._core_bonds() if position in (i, j))

    def _present_substituents(self, position: int) -> List[SubstituentSpec]:
        present: List[SubstituentSpec] = []
        for spec in self._substituents[position]:
            if spec is None:
                break
            present.append(spec)
        return present

    def _check_position(self, position: int) -> None:
        if not 0 <= position < self._core_carbons:
            raise IndexError(f"Core carbon {position} out of range")

    def _check_valence(
        self, position: int, spec: SubstituentSpec, replacing: Optional[int]
    ) -> None:
        # Cuenta también lo que queda tras un hueco: rellenarlo lo reactiva.
        used = self._core_degree(position)
        for slot, existing in enumerate(self._substituents[position]):
            if existing is not None and slot != replacing:
                used += existing.bond_count
        if used + spec.bond_count > CARBON_VALENCE:
            raise ValueError(f"Carbon {position} cannot take another {spec.type} bond")

    @staticmethod
    def _attach(
        graph: MolGraph, atom_id: int, spec: SubstituentSpec, ux: float, uy: float
    ) -> None:
        origin = graph.get_atom(atom_id)
        if spec.type is SubstituentType.CARBONYL:
            oxygen = graph.add_atom("O", origin.x + ux * BOND_LENGTH, origin.y + uy * BOND_LENGTH)
            graph.add_bond(atom_id, oxygen.id, order=2)
            return
        if spec.type is SubstituentType.HALIDE:
            if spec.halogen is None:
                logger.debug("Skipping unassigned halide on atom %d", atom_id)
                return
            halogen = graph.add_atom(
                spec.halogen.symbol, origin.x + ux * BOND_LENGTH, origin.y + uy * BOND_LENGTH
            )
            graph.add_bond(atom_id, halogen.id, order=1)
            return
        prev_id = atom_id
        for step in range(1, spec.alkyl_length + 1):
            carbon = graph.add_atom(
                "C", origin.x + ux * BOND_LENGTH * step, origin.y + uy * BOND_LENGTH * step
            )
            graph.add_bond(prev_id, carbon.id, order=1)
            prev_id = carbon.id


class LinearOrganicMoleculeBuilder(OrganicMoleculeBuilder):
    """Constructor de moléculas de cadena abierta."""

    cyclic = False
    min_core_carbons = 1

    def _core_bonds(self) -> List[Tuple[int, int]]:
        return [(i, i + 1) for i in range(self._core_carbons - 1)]

    def _core_coordinates(self) -> List[Tuple[float, float]]:
        # Zigzag horizontal.
        dy = BOND_LENGTH * 0.5
        return [
            (i * BOND_LENGTH * 0.866, dy if i % 2 else 0.0)
            for i in range(self._core_carbons)
        ]

    def _outward_direction(self, position: int) -> Tuple[float, float]:
        return (0.0, 1.0) if position % 2 else (0.0, -1.0)


class CyclicOrganicMoleculeBuilder(OrganicMoleculeBuilder):
    """Constructor de cicloalcanos y sus derivados."""

    cyclic = True
    min_core_carbons = 3

    def _core_bonds(self) -> List[Tuple[int, int]]:
        n = self._core_carbons
        return [(i, (i + 1) % n) for i in range(n)]

    def _angle(self, position: int) -> float:
        return 2.0 * math.pi * position / self._core_carbons

    def _core_coordinates(self) -> List[Tuple[float, float]]:
        radius = BOND_LENGTH / (2.0 * math.sin(math.pi / self._core_carbons))
        return [
            (radius * math.cos(self._angle(i)), radius * math.sin(self._angle(i)))
            for i in range(self._core_carbons)
        ]

    def _outward_direction(self, position: int) -> Tuple[float, float]:
        angle = self._angle(position)
        return math.cos(angle), math.sin(angle)
