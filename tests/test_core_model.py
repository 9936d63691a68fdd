"""Pruebas unitarias para test_core_model."""

import os
import sys
import unittest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from dataclasses import fields

from core.model import Atom, MolGraph


class MolGraphTest(unittest.TestCase):
    """Casos de prueba para MolGraphTest."""
    def test_add_atom_and_bond(self):
        """Verifica add atom and bond.

        Returns:
            None.

        """
        graph = MolGraph()
        a1 = graph.add_atom("C", 0.0, 0.0)
        a2 = graph.add_atom("O", 1.0, 0.0)
        bond = graph.add_bond(a1.id, a2.id, order=2)

        self.assertEqual(len(graph.atoms), 2)
        self.assertEqual(len(graph.bonds), 1)
        self.assertEqual(bond.order, 2)
        self.assertIs(graph.find_bond_between(a2.id, a1.id), bond)
        self.assertIs(graph.get_bond(bond.id), bond)

    def test_bond_to_unknown_atom_rejected(self):
        graph = MolGraph()
        a1 = graph.add_atom("C")
        with self.assertRaises(KeyError):
            graph.add_bond(a1.id, 99)
        with self.assertRaises(ValueError):
            graph.add_bond(a1.id, a1.id)

    def test_neighbors(self):
        graph = MolGraph()
        c1 = graph.add_atom("C")
        c2 = graph.add_atom("C")
        cl = graph.add_atom("Cl")
        graph.add_bond(c1.id, c2.id)
        graph.add_bond(c1.id, cl.id)
        self.assertEqual(sorted(graph.neighbors(c1.id)), [c2.id, cl.id])
        self.assertEqual(graph.neighbors(cl.id), [c1.id])

    def test_remove_atom_drops_bonds(self):
        """Verifica remove atom drops bonds.

        Returns:
            None.

        """
        graph = MolGraph()
        c1 = graph.add_atom("C")
        c2 = graph.add_atom("C")
        graph.add_bond(c1.id, c2.id)
        atom, removed = graph.remove_atom(c2.id)
        self.assertEqual(atom.id, c2.id)
        self.assertEqual(len(removed), 1)
        self.assertEqual(graph.bonds, {})

    def test_explicit_ids_advance_counters(self):
        graph = MolGraph()
        graph.add_atom("C", atom_id=10)
        self.assertEqual(graph.add_atom("C").id, 11)
        graph.clear()
        self.assertEqual(graph.add_atom("C").id, 1)

    def test_validate_still_flags_overvalent_carbon(self):
        """Verifica validate still flags overvalent carbon.

        Returns:
            None.

        """
        graph = MolGraph()
        c = graph.add_atom("C", 0.0, 0.0)
        neighbors = [graph.add_atom("C", float(k), 1.0) for k in range(5)]
        for nbr in neighbors:
            graph.add_bond(c.id, nbr.id, order=1)
        self.assertIn(c.id, graph.validate())

    def test_atom_carries_element_and_position_only(self):
        """Verifica que el átomo solo guarde lo que producen los constructores."""
        self.assertEqual([f.name for f in fields(Atom)], ["id", "element", "x", "y"])
        atom = MolGraph().add_atom("Br", 1.5, -0.5)
        self.assertEqual((atom.element, atom.x, atom.y), ("Br", 1.5, -0.5))

    def test_validate_allows_carbonyl(self):
        graph = MolGraph()
        c = graph.add_atom("C")
        o = graph.add_atom("O")
        graph.add_bond(c.id, o.id, order=2)
        self.assertEqual(graph.validate(), [])


if __name__ == "__main__":
    unittest.main()
