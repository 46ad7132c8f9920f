"""
Tests for the kaleido command line front end.

Author: xwest
"""

import unittest
import sys
import os

from click.testing import CliRunner

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from kaleido.cli import main


class TestParseCommand(unittest.TestCase):

    def setUp(self):
        self.runner = CliRunner()

    def test_prints_each_form(self):
        result = self.runner.invoke(main, ["parse", "-"],
                                    input="extern sin(x); def add(a b) a+b; add(1, 2)")

        self.assertEqual(result.exit_code, 0)
        self.assertIn("extern sin (x)", result.output)
        self.assertIn("def (def add (a b) (+ a b))", result.output)
        self.assertIn("expr (add 1 2)", result.output)

    def test_parse_error_sets_exit_code(self):
        result = self.runner.invoke(main, ["parse", "-"], input="foo(")

        self.assertEqual(result.exit_code, 1)
        printed = [line for line in result.output.splitlines() if line.startswith("expr ")]
        self.assertEqual(printed, [])

    def test_later_forms_still_printed_after_error(self):
        result = self.runner.invoke(main, ["parse", "--no-resolve", "-"],
                                    input="def f x; def g(y) y")

        self.assertEqual(result.exit_code, 1)
        self.assertIn("def (def g (y) y)", result.output)

    def test_no_resolve_skips_name_checks(self):
        result = self.runner.invoke(main, ["parse", "--no-resolve", "-"], input="foo(1, 2)")

        self.assertEqual(result.exit_code, 0)
        self.assertIn("expr (foo 1 2)", result.output)

    def test_resolution_errors_fail(self):
        result = self.runner.invoke(main, ["parse", "-"], input="foo(1, 2)")

        self.assertEqual(result.exit_code, 1)

    def test_extra_operator(self):
        result = self.runner.invoke(main, ["parse", "--precedence", "/=40", "-"],
                                    input="def f(a b) a/b-a")

        self.assertEqual(result.exit_code, 0)
        self.assertIn("def (def f (a b) (- (/ a b) a))", result.output)

    def test_bad_precedence_option(self):
        for value in ["/", "/=x", "a=10", "/=0"]:
            with self.subTest(value=value):
                result = self.runner.invoke(main, ["parse", "--precedence", value, "-"], input="1")
                self.assertEqual(result.exit_code, 2)

    def test_reads_file(self):
        with self.runner.isolated_filesystem():
            with open("prog.kal", "w") as f:
                f.write("# squares\ndef sq(x) x*x\nsq(3)\n")

            result = self.runner.invoke(main, ["parse", "prog.kal"])

        self.assertEqual(result.exit_code, 0)
        self.assertIn("def (def sq (x) (* x x))", result.output)
        self.assertIn("expr (sq 3)", result.output)


class TestTokensCommand(unittest.TestCase):

    def test_dumps_tokens(self):
        result = CliRunner().invoke(main, ["tokens", "-"], input="def f(x) 1.5")

        self.assertEqual(result.exit_code, 0)
        self.assertIn("DEF('def')", result.output)
        self.assertIn("IDENTIFIER('f')", result.output)
        self.assertIn("NUMBER('1.5' -> 1.5)", result.output)
        self.assertIn("EOF('')", result.output)


if __name__ == '__main__':
    unittest.main()
