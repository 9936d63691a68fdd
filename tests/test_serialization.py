"""Pruebas del documento JSON de `MoleculeData`."""

import json
import os
import sys
import tempfile
import unittest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from chemio.molecule_data import MoleculeData, Substituent
from chemio.serialization import (
    load_from_file,
    molecule_data_from_dict,
    molecule_data_from_json,
    molecule_data_to_dict,
    molecule_data_to_json,
    save_to_file,
)
from core.builders import (
    CyclicOrganicMoleculeBuilder,
    Halogen,
    LinearOrganicMoleculeBuilder,
    SubstituentSpec,
)


def chlorocyclohexanone():
    builder = CyclicOrganicMoleculeBuilder(6)
    builder.add_substituent(0, SubstituentSpec.carbonyl())
    builder.add_substituent(1, SubstituentSpec.halide(Halogen.CHLORINE))
    builder.add_substituent(1, SubstituentSpec.alkyl(2))
    return MoleculeData.from_cyclic(builder)


class SerializationTest(unittest.TestCase):
    def test_document_keys(self):
        """Verifica claves camelCase en orden de emisión."""
        doc = molecule_data_to_dict(chlorocyclohexanone())
        self.assertEqual(
            list(doc.keys()),
            ["coreCarbons", "substituents", "cyclic", "name", "mass", "formula"],
        )
        first = doc["substituents"][1][0]
        self.assertEqual(list(first.keys()), ["bondCount", "chainLength", "formula", "type"])

    def test_document_values(self):
        doc = molecule_data_to_dict(chlorocyclohexanone())
        self.assertEqual(doc["coreCarbons"], 6)
        self.assertTrue(doc["cyclic"])
        self.assertEqual(len(doc["substituents"]), 6)
        self.assertEqual(
            doc["substituents"][0],
            [{"bondCount": 2, "chainLength": 0, "formula": "", "type": "CARBONYL"}],
        )
        self.assertEqual(
            doc["substituents"][1],
            [
                {"bondCount": 1, "chainLength": 0, "formula": "Cl", "type": "HALIDE"},
                {"bondCount": 1, "chainLength": 2, "formula": "", "type": "ALKYL"},
            ],
        )
        self.assertEqual(doc["substituents"][2], [])
        self.assertEqual(doc["name"], "2-chloro-2-ethylcyclohexan-1-one")
        self.assertEqual(doc["formula"], "C8H13ClO")
        self.assertIsInstance(doc["mass"], float)

    def test_json_round_trip(self):
        """Verifica que el texto JSON se vuelve a leer sin pérdidas."""
        data = chlorocyclohexanone()
        text = molecule_data_to_json(data, indent=2)
        parsed = json.loads(text)
        self.assertEqual(parsed, molecule_data_to_dict(data))
        self.assertEqual(molecule_data_from_json(text), data)

    def test_methane_document(self):
        data = MoleculeData.from_linear(LinearOrganicMoleculeBuilder(1))
        doc = json.loads(molecule_data_to_json(data))
        self.assertEqual(doc["substituents"], [[]])
        self.assertIs(doc["cyclic"], False)
        self.assertEqual(doc["name"], "methane")
        self.assertEqual(doc["formula"], "CH4")
        self.assertAlmostEqual(doc["mass"], 16.04, places=2)

    def test_file_round_trip(self):
        data = chlorocyclohexanone()
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "molecule.json")
            save_to_file(path, data)
            self.assertEqual(load_from_file(path), data)

    def test_integer_mass_accepted(self):
        doc = {
            "coreCarbons": 1,
            "substituents": [[]],
            "cyclic": False,
            "name": "methane",
            "mass": 16,
            "formula": "CH4",
        }
        self.assertEqual(molecule_data_from_dict(doc).mass, 16.0)

    def test_malformed_documents_rejected(self):
        """Verifica que los documentos incompletos o mal tipados se rechacen."""
        good = molecule_data_to_dict(MoleculeData.from_linear(LinearOrganicMoleculeBuilder(2)))
        missing = dict(good)
        del missing["name"]
        wrong_length = dict(good, substituents=[[]])
        wrong_type = dict(good, coreCarbons=True)
        bad_entry = dict(good, substituents=[[{"bondCount": 1}], []])
        for doc in (missing, wrong_length, wrong_type, bad_entry, [], "x"):
            with self.assertRaises(ValueError):
                molecule_data_from_dict(doc)

    def test_inconsistent_substituents_rejected(self):
        """Verifica que no se acepten sustituyentes que ninguna instantánea produce."""
        base = {"bondCount": 1, "chainLength": 0, "formula": "", "type": "ALKYL"}
        bad_entries = [
            dict(base, bondCount=7),
            dict(base, chainLength=-3),
            dict(base, formula="Xe"),
            dict(base, type="NITRO"),
            dict(base, type="CARBONYL"),
            dict(base, type="HALIDE", bondCount=2, formula="Cl"),
            {"bondCount": 7, "chainLength": -3, "formula": "Xe", "type": "ALKYL"},
        ]
        for entry in bad_entries:
            doc = {
                "coreCarbons": 1,
                "substituents": [[entry]],
                "cyclic": False,
                "name": "x",
                "mass": 1.0,
                "formula": "x",
            }
            with self.assertRaises(ValueError):
                molecule_data_from_dict(doc)

    def test_zero_core_carbons_rejected(self):
        doc = {
            "coreCarbons": 0,
            "substituents": [],
            "cyclic": False,
            "name": "",
            "mass": 0.0,
            "formula": "",
        }
        with self.assertRaises(ValueError):
            molecule_data_from_dict(doc)

    def test_carbonyl_and_halide_entries_accepted(self):
        doc = {
            "coreCarbons": 1,
            "substituents": [[
                {"bondCount": 2, "chainLength": 0, "formula": "", "type": "CARBONYL"},
                {"bondCount": 1, "chainLength": 0, "formula": "", "type": "HALIDE"},
            ]],
            "cyclic": False,
            "name": "methanal",
            "mass": 30.03,
            "formula": "CH2O",
        }
        data = molecule_data_from_dict(doc)
        self.assertEqual(data.substituents[0][0], Substituent(2, 0, "", "CARBONYL"))
        self.assertEqual(data.substituents[0][1].formula, "")

    def test_substituent_from_plain_structure(self):
        doc = {"bondCount": 1, "chainLength": 3, "formula": "", "type": "ALKYL"}
        data = molecule_data_from_dict(
            {
                "coreCarbons": 1,
                "substituents": [[doc]],
                "cyclic": False,
                "name": "butane",
                "mass": 58.1,
                "formula": "C4H10",
            }
        )
        self.assertEqual(data.substituents, ((Substituent(1, 3, "", "ALKYL"),),))


if __name__ == "__main__":
    unittest.main()
