"""Documento JSON de `MoleculeData` para el renderizador del front-end.

Los nombres de los campos del documento forman parte del contrato con el
renderizador, por eso se declaran explícitamente en lugar de derivarse de
los atributos de Python.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Tuple

from chemio.molecule_data import MoleculeData, Substituent
from core.builders import Halogen, SubstituentType

# Atributo de Python -> clave del documento, en orden de emisión.
MOLECULE_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("core_carbons", "coreCarbons"),
    ("substituents", "substituents"),
    ("cyclic", "cyclic"),
    ("name", "name"),
    ("mass", "mass"),
    ("formula", "formula"),
)

SUBSTITUENT_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("bond_count", "bondCount"),
    ("chain_length", "chainLength"),
    ("formula", "formula"),
    ("type", "type"),
)

_SUBSTITUENT_TYPES = frozenset(str(member) for member in SubstituentType)
_HALOGEN_FORMULAS = frozenset([""] + [halogen.symbol for halogen in Halogen])


def substituent_to_dict(sub: Substituent) -> Dict[str, Any]:
    return {key: getattr(sub, attr) for attr, key in SUBSTITUENT_FIELDS}


def molecule_data_to_dict(data: MoleculeData) -> Dict[str, Any]:
    """Proyecta la instantánea al documento del renderizador.

    Args:
        data: Instantánea a serializar.

    Returns:
        Diccionario con listas anidadas y escalares, serializable con `json`.
    """
    doc: Dict[str, Any] = {}
    for attr, key in MOLECULE_FIELDS:
        value = getattr(data, attr)
        if attr == "substituents":
            value = [[substituent_to_dict(sub) for sub in inner] for inner in value]
        doc[key] = value
    return doc


def molecule_data_to_json(data: MoleculeData, indent: int | None = None) -> str:
    return json.dumps(molecule_data_to_dict(data), indent=indent)


def _require(doc: Dict[str, Any], key: str, kind) -> Any:
    if key not in doc:
        raise ValueError(f"Missing field {key!r}")
    value = doc[key]
    # bool es subclase de int: no se acepta donde se espera un número.
    if isinstance(value, bool) and kind is not bool:
        raise ValueError(f"Field {key!r} has wrong type")
    if not isinstance(value, kind):
        raise ValueError(f"Field {key!r} has wrong type")
    return value


def substituent_from_dict(doc: Dict[str, Any]) -> Substituent:
    if not isinstance(doc, dict):
        raise ValueError("Substituent entry must be an object")
    sub = Substituent(
        bond_count=_require(doc, "bondCount", int),
        chain_length=_require(doc, "chainLength", int),
        formula=_require(doc, "formula", str),
        type=_require(doc, "type", str),
    )
    _check_substituent(sub)
    return sub


def _check_substituent(sub: Substituent) -> None:
    """Comprueba que el sustituyente sea uno que produce una instantánea."""
    if sub.type not in _SUBSTITUENT_TYPES:
        raise ValueError(f"Unknown substituent type {sub.type!r}")
    expected_bonds = 2 if sub.type == str(SubstituentType.CARBONYL) else 1
    if sub.bond_count != expected_bonds:
        raise ValueError(f"{sub.type} substituent must have bondCount {expected_bonds}")
    if sub.chain_length < 0:
        raise ValueError("chainLength cannot be negative")
    if sub.formula not in _HALOGEN_FORMULAS:
        raise ValueError(f"Unknown substituent formula {sub.formula!r}")


def molecule_data_from_dict(doc: Dict[str, Any]) -> MoleculeData:
    """Reconstruye una instantánea desde su documento.

    Raises:
        ValueError: Si faltan campos o tienen tipos incorrectos, si
            `coreCarbons` es menor que 1, si el número de listas de
            sustituyentes no coincide o si algún sustituyente no es
            coherente con su tipo.
    """
    if not isinstance(doc, dict):
        raise ValueError("Molecule document must be an object")
    core_carbons = _require(doc, "coreCarbons", int)
    if core_carbons < 1:
        raise ValueError("coreCarbons must be at least 1")
    raw_substituents: List[Any] = _require(doc, "substituents", list)
    if len(raw_substituents) != core_carbons:
        raise ValueError("substituents length does not match coreCarbons")
    substituents = []
    for inner in raw_substituents:
        if not isinstance(inner, list):
            raise ValueError("Each substituent entry must be a list")
        substituents.append(tuple(substituent_from_dict(item) for item in inner))
    return MoleculeData(
        core_carbons=core_carbons,
        substituents=tuple(substituents),
        cyclic=_require(doc, "cyclic", bool),
        name=_require(doc, "name", str),
        mass=float(_require(doc, "mass", (int, float))),
        formula=_require(doc, "formula", str),
    )


def molecule_data_from_json(text: str) -> MoleculeData:
    return molecule_data_from_dict(json.loads(text))


def save_to_file(filepath: str, data: MoleculeData) -> None:
    """Guarda la instantánea como documento JSON (UTF-8)."""
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(molecule_data_to_dict(data), f, indent=2)


def load_from_file(filepath: str) -> MoleculeData:
    """Carga una instantánea guardada con `save_to_file`."""
    with open(filepath, "r", encoding="utf-8") as f:
        return molecule_data_from_dict(json.load(f))
