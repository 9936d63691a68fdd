"""Entrada y salida de moléculas: instantáneas, JSON y RDKit."""

from chemio.molecule_data import MoleculeData, Substituent
from chemio.serialization import molecule_data_to_dict, molecule_data_to_json

__all__ = ["MoleculeData", "Substituent", "molecule_data_to_dict", "molecule_data_to_json"]
