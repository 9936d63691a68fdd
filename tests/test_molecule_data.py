"""Pruebas de la instantánea `MoleculeData` con constructores reales y simulados."""

import os
import sys
import unittest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from chemio.molecule_data import MoleculeData, Substituent
from core.builders import (
    SLOTS_PER_CARBON,
    CyclicOrganicMoleculeBuilder,
    Halogen,
    LinearOrganicMoleculeBuilder,
    SubstituentSpec,
    SubstituentType,
)

ALKYL_1 = SubstituentSpec.alkyl(1)
CARBONYL = SubstituentSpec.carbonyl()


class StubBuilder:
    """Constructor mínimo con arreglos de posiciones arbitrarios."""

    def __init__(self, slots_per_carbon):
        self.slots = [tuple(slots) for slots in slots_per_carbon]
        self.build_calls = 0
        self.graph = object()

    @property
    def core_carbons(self):
        return len(self.slots)

    def substituents_at(self, position):
        return self.slots[position]

    def build(self):
        self.build_calls += 1
        return self.graph


class StubAnalyzer:
    """Analizador que devuelve valores fijos, como en los escenarios de referencia."""

    def __init__(self, name, formula, mass):
        self.name = name
        self._formula = formula
        self.mass = mass
        self.graphs = []

    def __call__(self, graph):
        self.graphs.append(graph)
        return self

    def iupac_name(self):
        return self.name

    def formula(self):
        return self._formula

    def molecular_weight(self):
        return self.mass


class FailingBuilder(StubBuilder):
    def build(self):
        raise RuntimeError("graph construction failed")


class FailingAnalyzer(StubAnalyzer):
    def iupac_name(self):
        raise KeyError("naming failed")


class MissingHalogenSpec:
    """Sustituyente HALIDE cuyo halógeno aún no se ha asignado."""

    type = SubstituentType.HALIDE
    alkyl_length = 0
    halogen = None


def empty_slots():
    return (None,) * SLOTS_PER_CARBON


class MoleculeDataScenarioTest(unittest.TestCase):
    def test_methane_like_linear_without_substituents(self):
        analyzer = StubAnalyzer("methane", "CH4", 16.04)
        data = MoleculeData.from_linear(LinearOrganicMoleculeBuilder(1), analyzer)
        self.assertEqual(data.core_carbons, 1)
        self.assertEqual(data.substituents, ((),))
        self.assertFalse(data.cyclic)
        self.assertEqual(data.get_name(), "methane")
        self.assertEqual(data.get_mass(), 16.04)
        self.assertEqual(data.get_formula(), "CH4")

    def test_propanone_carbonyl_on_middle_carbon(self):
        builder = LinearOrganicMoleculeBuilder(3)
        builder.add_substituent(1, CARBONYL)
        data = MoleculeData.from_linear(builder)
        self.assertEqual(data.substituents[1], (Substituent(2, 0, "", "CARBONYL"),))
        self.assertEqual(data.substituents[0], ())
        self.assertEqual(data.substituents[2], ())
        self.assertEqual(data.name, "propan-2-one")
        self.assertEqual(data.formula, "C3H6O")

    def test_chlorobutane(self):
        builder = LinearOrganicMoleculeBuilder(4)
        builder.add_substituent(1, SubstituentSpec.halide(Halogen.CHLORINE))
        data = MoleculeData.from_linear(builder)
        self.assertEqual(data.substituents[1], (Substituent(1, 0, "Cl", "HALIDE"),))
        self.assertEqual(data.name, "2-chlorobutane")

    def test_missing_halogen_gives_empty_formula(self):
        builder = StubBuilder([empty_slots(), (MissingHalogenSpec(),) + (None,) * 3, empty_slots(), empty_slots()])
        data = MoleculeData.from_linear(builder, StubAnalyzer("butane", "C4H10", 58.12))
        sub = data.substituents[1][0]
        self.assertEqual(sub.formula, "")
        self.assertEqual(sub.type, "HALIDE")
        self.assertEqual(sub.bond_count, 1)

    def test_missing_halogen_with_real_builder(self):
        builder = LinearOrganicMoleculeBuilder(4)
        builder.add_substituent(1, SubstituentSpec.halide())
        data = MoleculeData.from_linear(builder)
        self.assertEqual(data.substituents[1], (Substituent(1, 0, "", "HALIDE"),))
        self.assertEqual(data.name, "butane")

    def test_cyclohexane_with_methyl_branch(self):
        builder = CyclicOrganicMoleculeBuilder(6)
        builder.add_substituent(3, ALKYL_1)
        data = MoleculeData.from_cyclic(builder)
        self.assertTrue(data.cyclic)
        self.assertEqual(data.substituents[3], (Substituent(1, 1, "", "ALKYL"),))
        for position in (0, 1, 2, 4, 5):
            self.assertEqual(data.substituents[position], ())
        self.assertEqual(data.name, "methylcyclohexane")
        self.assertEqual(data.formula, "C7H14")

    def test_scan_stops_at_first_empty_slot(self):
        builder = StubBuilder([(ALKYL_1, CARBONYL, None, ALKYL_1)])
        data = MoleculeData.from_linear(builder, StubAnalyzer("x", "x", 0.0))
        self.assertEqual(
            data.substituents[0],
            (Substituent(1, 1, "", "ALKYL"), Substituent(2, 0, "", "CARBONYL")),
        )

    def test_scan_stops_at_gap_in_real_builder(self):
        builder = LinearOrganicMoleculeBuilder(1)
        builder.set_substituent(0, 0, SubstituentSpec.halide(Halogen.FLUORINE))
        builder.set_substituent(0, 2, SubstituentSpec.halide(Halogen.IODINE))
        data = MoleculeData.from_linear(builder)
        self.assertEqual(data.substituents[0], (Substituent(1, 0, "F", "HALIDE"),))
        self.assertEqual(data.name, "fluoromethane")


class MoleculeDataPropertyTest(unittest.TestCase):
    def _builders(self):
        linear = LinearOrganicMoleculeBuilder(5)
        linear.add_substituent(0, SubstituentSpec.halide(Halogen.BROMINE))
        linear.add_substituent(2, CARBONYL)
        linear.add_substituent(4, SubstituentSpec.alkyl(2))
        ring = CyclicOrganicMoleculeBuilder(4)
        ring.add_substituent(0, ALKYL_1)
        ring.add_substituent(0, SubstituentSpec.halide(Halogen.CHLORINE))
        return [(linear, MoleculeData.from_linear), (ring, MoleculeData.from_cyclic)]

    def test_one_inner_list_per_core_carbon(self):
        for builder, snapshot in self._builders():
            data = snapshot(builder)
            self.assertEqual(len(data.substituents), builder.core_carbons)

    def test_bond_count_two_only_for_carbonyl(self):
        for builder, snapshot in self._builders():
            for inner in snapshot(builder).substituents:
                for sub in inner:
                    self.assertEqual(sub.bond_count == 2, sub.type == "CARBONYL")
                    self.assertIn(sub.formula, {"", "F", "Cl", "Br", "I"})
                    self.assertGreaterEqual(sub.chain_length, 0)

    def test_cyclic_flag_follows_constructor(self):
        builder = StubBuilder([empty_slots()] * 3)
        analyzer = StubAnalyzer("x", "x", 0.0)
        self.assertFalse(MoleculeData.from_linear(builder, analyzer).cyclic)
        self.assertTrue(MoleculeData.from_cyclic(builder, analyzer).cyclic)

    def test_snapshot_is_idempotent(self):
        for builder, snapshot in self._builders():
            self.assertEqual(snapshot(builder), snapshot(builder))

    def test_build_called_once(self):
        builder = StubBuilder([empty_slots(), empty_slots()])
        analyzer = StubAnalyzer("ethane", "C2H6", 30.07)
        MoleculeData.from_linear(builder, analyzer)
        self.assertEqual(builder.build_calls, 1)
        self.assertEqual(analyzer.graphs, [builder.graph])

    def test_order_within_carbon_is_preserved(self):
        builder = LinearOrganicMoleculeBuilder(1)
        builder.add_substituent(0, SubstituentSpec.halide(Halogen.IODINE))
        builder.add_substituent(0, SubstituentSpec.halide(Halogen.BROMINE))
        builder.add_substituent(0, SubstituentSpec.halide(Halogen.IODINE))
        data = MoleculeData.from_linear(builder)
        self.assertEqual([s.formula for s in data.substituents[0]], ["I", "Br", "I"])

    def test_analyzer_values_pass_through(self):
        builder = StubBuilder([empty_slots()])
        data = MoleculeData.from_linear(builder, StubAnalyzer("  odd Name ", "h4c", 1.23456789))
        self.assertEqual(data.name, "  odd Name ")
        self.assertEqual(data.formula, "h4c")
        self.assertEqual(data.mass, 1.23456789)

    def test_snapshot_is_frozen(self):
        data = MoleculeData.from_linear(LinearOrganicMoleculeBuilder(2))
        with self.assertRaises(AttributeError):
            data.name = "other"

    def test_snapshot_detached_from_builder(self):
        builder = LinearOrganicMoleculeBuilder(2)
        data = MoleculeData.from_linear(builder)
        builder.add_substituent(0, ALKYL_1)
        self.assertEqual(data.substituents, ((), ()))
        self.assertEqual(data.name, "ethane")


class MoleculeDataErrorTest(unittest.TestCase):
    def test_zero_core_carbons_rejected(self):
        builder = StubBuilder([])
        with self.assertRaises(ValueError):
            MoleculeData.from_linear(builder, StubAnalyzer("x", "x", 0.0))
        self.assertEqual(builder.build_calls, 0)

    def test_build_failure_propagates(self):
        builder = FailingBuilder([empty_slots()])
        with self.assertRaises(RuntimeError):
            MoleculeData.from_linear(builder, StubAnalyzer("x", "x", 0.0))

    def test_analyzer_failure_propagates(self):
        builder = StubBuilder([empty_slots()])
        with self.assertRaises(KeyError):
            MoleculeData.from_cyclic(builder, FailingAnalyzer("x", "x", 0.0))


if __name__ == "__main__":
    unittest.main()
