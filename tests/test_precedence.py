"""
Tests for the binary operator precedence table.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from kaleido.lexer.lexer import tokenize_string
from kaleido.parser.errors import ConfigurationError
from kaleido.parser.precedence import PrecedenceTable, NOT_AN_OPERATOR


class TestPrecedenceTable(unittest.TestCase):

    def setUp(self):
        self.table = PrecedenceTable()

    def test_default_operators(self):
        self.assertEqual(self.table.lookup('<'), 10)
        self.assertEqual(self.table.lookup('+'), 20)
        self.assertEqual(self.table.lookup('-'), 20)
        self.assertEqual(self.table.lookup('*'), 40)
        self.assertEqual(len(self.table), 4)

    def test_unknown_characters_are_not_operators(self):
        for char in ['/', '>', '@', 'é', '', 'ab']:
            with self.subTest(char=char):
                self.assertEqual(self.table.lookup(char), NOT_AN_OPERATOR)

    def test_non_character_tokens_are_not_operators(self):
        ident, number, char, eof = tokenize_string("x 1 +")

        self.assertEqual(self.table.lookup(ident), NOT_AN_OPERATOR)
        self.assertEqual(self.table.lookup(number), NOT_AN_OPERATOR)
        self.assertEqual(self.table.lookup(char), 20)
        self.assertEqual(self.table.lookup(eof), NOT_AN_OPERATOR)

    def test_register_and_replace(self):
        self.table.register('/', 40)
        self.table.register('<', 5)

        self.assertEqual(self.table.lookup('/'), 40)
        self.assertEqual(self.table.lookup('<'), 5)
        self.assertIn('/', self.table)

    def test_custom_initial_table(self):
        table = PrecedenceTable({'^': 60})

        self.assertEqual(table.lookup('^'), 60)
        self.assertEqual(table.lookup('+'), NOT_AN_OPERATOR)

    def test_invalid_registrations(self):
        for op, precedence in [('/', 0), ('/', -3), ('ab', 10), ('x', 10), ('1', 10),
                               ('(', 10), (';', 10), (' ', 10), ('é', 10)]:
            with self.subTest(op=op, precedence=precedence):
                with self.assertRaises(ConfigurationError):
                    self.table.register(op, precedence)

    def test_frozen_table_rejects_changes(self):
        self.table.freeze()

        self.assertTrue(self.table.frozen)
        with self.assertRaises(ConfigurationError):
            self.table.register('/', 40)
        self.assertEqual(self.table.lookup('*'), 40)

    def test_iterates_by_binding_strength(self):
        self.assertEqual([op for op, _ in self.table][0], '<')
        self.assertEqual([op for op, _ in self.table][-1], '*')


if __name__ == '__main__':
    unittest.main()
