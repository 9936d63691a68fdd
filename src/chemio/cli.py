"""Línea de comandos de las instantáneas de moléculas.

Construye una molécula a partir de argumentos, toma su instantánea y
escribe el documento JSON que consume el renderizador del front-end.

Ejemplo:
    chemuson-moldata --carbons 4 --substituent 1:HALIDE:Cl
"""

import argparse
import logging

from chemcalc.analyzer import MoleculeAnalyzer
from chemio.molecule_data import MoleculeData
from chemio.serialization import molecule_data_to_json, save_to_file
from core.builders import (
    CyclicOrganicMoleculeBuilder,
    Halogen,
    LinearOrganicMoleculeBuilder,
    SubstituentSpec,
    SubstituentType,
)

logger = logging.getLogger(__name__)


def parse_substituent(text: str):
    """Interpreta `POS:TYPE[:ARG]` como (posición, SubstituentSpec).

    ARG es la longitud de la cadena para ALKYL y el símbolo del halógeno
    para HALIDE (opcional: sin él el halógeno queda sin asignar).

    Raises:
        argparse.ArgumentTypeError: Si el texto no tiene el formato esperado.
    """
    parts = text.split(":")
    if len(parts) not in (2, 3):
        raise argparse.ArgumentTypeError(f"expected POS:TYPE[:ARG], got {text!r}")
    try:
        position = int(parts[0])
        kind = SubstituentType(parts[1].upper())
        arg = parts[2] if len(parts) == 3 else None
        if kind is SubstituentType.ALKYL:
            spec = SubstituentSpec.alkyl(int(arg) if arg is not None else 1)
        elif kind is SubstituentType.HALIDE:
            spec = SubstituentSpec.halide(Halogen.from_symbol(arg) if arg else None)
        else:
            if arg is not None:
                raise ValueError("CARBONYL takes no argument")
            spec = SubstituentSpec.carbonyl()
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid substituent {text!r}: {exc}") from exc
    return position, spec


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build an organic molecule and print its renderer snapshot as JSON"
    )
    parser.add_argument("--carbons", type=int, required=True, help="core carbon count")
    parser.add_argument("--cyclic", action="store_true", help="build a ring instead of a chain")
    parser.add_argument(
        "--substituent",
        action="append",
        type=parse_substituent,
        default=[],
        metavar="POS:TYPE[:ARG]",
        help="0-based core carbon, ALKYL|CARBONYL|HALIDE, chain length or halogen",
    )
    parser.add_argument("--indent", type=int, default=None)
    parser.add_argument("--output", help="write the document to this file instead of stdout")
    parser.add_argument("--smiles", action="store_true", help="also print the RDKit SMILES")
    parser.add_argument("--verbose", action="store_true")
    return parser


def main(argv=None) -> int:
    """Ejecuta la línea de comandos.

    Returns:
        Código de salida (0 si todo fue bien).
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    builder_cls = CyclicOrganicMoleculeBuilder if args.cyclic else LinearOrganicMoleculeBuilder
    try:
        builder = builder_cls(args.carbons)
        for position, spec in args.substituent:
            builder.add_substituent(position, spec)
    except (IndexError, ValueError) as exc:
        parser.error(str(exc))

    smiles = None
    if args.smiles:
        try:
            smiles = MoleculeAnalyzer(builder.build()).smiles()
        except RuntimeError as exc:
            parser.error(str(exc))

    if args.cyclic:
        data = MoleculeData.from_cyclic(builder)
    else:
        data = MoleculeData.from_linear(builder)

    if args.output:
        save_to_file(args.output, data)
        logger.info("Wrote %s to %s", data.name, args.output)
    else:
        print(molecule_data_to_json(data, indent=args.indent))

    if smiles is not None:
        print(smiles)
    return 0
