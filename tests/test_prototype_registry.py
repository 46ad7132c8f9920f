"""
Tests for the session prototype registry.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from kaleido.analyzer.prototype_registry import PrototypeRegistry
from kaleido.parser.ast_nodes import Prototype


class TestPrototypeRegistry(unittest.TestCase):

    def setUp(self):
        self.registry = PrototypeRegistry()

    def test_empty_registry(self):
        self.assertIsNone(self.registry.lookup("sin"))
        self.assertEqual(len(self.registry), 0)
        self.assertNotIn("sin", self.registry)

    def test_record_and_lookup(self):
        sin = Prototype("sin", ("x",))
        self.registry.record("sin", sin)

        self.assertIs(self.registry.lookup("sin"), sin)
        self.assertIn("sin", self.registry)

    def test_last_write_wins(self):
        self.registry.record_prototype(Prototype("f", ("a",)))
        self.registry.record_prototype(Prototype("f", ("a", "b")))

        self.assertEqual(self.registry.lookup("f").arity, 2)
        self.assertEqual(len(self.registry), 1)

    def test_names_keep_insertion_order(self):
        for name in ["cos", "sin", "atan2"]:
            self.registry.record_prototype(Prototype(name))

        self.assertEqual(self.registry.names(), ["cos", "sin", "atan2"])
        self.assertEqual(list(self.registry), ["cos", "sin", "atan2"])


if __name__ == '__main__':
    unittest.main()
