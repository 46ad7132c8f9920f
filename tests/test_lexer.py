"""
Test suite for the Kaleido lexer.

Tests cover:
- Keywords, identifiers and raw character tokens
- Numeric literals, including the permissive malformed cases
- Comments and whitespace
- Source locations and stream input

Author: xwest
"""

import io
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from kaleido.lexer.lexer import Lexer, tokenize_string, parse_decimal
from kaleido.lexer.tokens import TokenType


class TestLexer(unittest.TestCase):
    """Test cases for the lexer."""

    def _types(self, source: str):
        return [token.type for token in tokenize_string(source)]

    def test_keywords_and_identifiers(self):
        """def and extern are keywords, everything else alphabetic is an identifier."""
        tokens = tokenize_string("def extern foo definitely x1y2")

        self.assertEqual(
            [t.type for t in tokens],
            [TokenType.DEF, TokenType.EXTERN, TokenType.IDENTIFIER,
             TokenType.IDENTIFIER, TokenType.IDENTIFIER, TokenType.EOF]
        )
        self.assertEqual(tokens[2].value, "foo")
        self.assertEqual(tokens[3].value, "definitely")
        self.assertEqual(tokens[4].value, "x1y2")
        self.assertIsNone(tokens[0].value)

    def test_single_character_tokens(self):
        """Every other character comes back on its own."""
        tokens = tokenize_string("(a,b);<=@")
        chars = [t.value for t in tokens if t.type == TokenType.CHAR]

        self.assertEqual(chars, ['(', ',', ')', ';', '<', '=', '@'])
        self.assertTrue(tokens[0].is_char('('))
        self.assertFalse(tokens[1].is_char('('))

    def test_non_ascii_is_a_character_token(self):
        tokens = tokenize_string("aé")

        self.assertEqual(tokens[0].type, TokenType.IDENTIFIER)
        self.assertEqual(tokens[0].value, "a")
        self.assertEqual(tokens[1].type, TokenType.CHAR)
        self.assertEqual(tokens[1].value, "é")

    def test_number_values(self):
        """Well-formed numerals lex to the same value float() gives."""
        for text in ["0", "42", "3.14", ".5", "10.", "007", "123456789.000001"]:
            with self.subTest(text=text):
                lexer = Lexer(text)
                token = lexer.next_token()
                self.assertEqual(token.type, TokenType.NUMBER)
                self.assertEqual(token.lexeme, text)
                self.assertEqual(token.value, float(text))
                self.assertFalse(lexer.has_warnings())

    def test_number_then_identifier(self):
        tokens = tokenize_string("1x")

        self.assertEqual(tokens[0].type, TokenType.NUMBER)
        self.assertEqual(tokens[0].value, 1.0)
        self.assertEqual(tokens[1].type, TokenType.IDENTIFIER)

    def test_malformed_numbers_are_accepted(self):
        """Extra decimal points are kept in the lexeme and ignored in the value."""
        lexer = Lexer("1.2.3 . 4..")
        tokens = lexer.tokenize()

        self.assertEqual([t.lexeme for t in tokens[:3]], ["1.2.3", ".", "4.."])
        self.assertEqual([t.value for t in tokens[:3]], [1.2, 0.0, 4.0])
        self.assertEqual(len(lexer.warnings), 3)
        self.assertEqual(lexer.warnings[0].code, "L003")

    def test_parse_decimal(self):
        self.assertEqual(parse_decimal("12.5"), 12.5)
        self.assertEqual(parse_decimal("1.2.3"), 1.2)
        self.assertEqual(parse_decimal(".."), 0.0)

    def test_comments_are_skipped(self):
        source = """
            # a comment on its own line
            def foo # trailing comment
            \t\t10 # comment right before end of input"""

        self.assertEqual(
            self._types(source),
            [TokenType.DEF, TokenType.IDENTIFIER, TokenType.NUMBER, TokenType.EOF]
        )

    def test_comment_ends_at_carriage_return(self):
        self.assertEqual(
            self._types("# one\rx"),
            [TokenType.IDENTIFIER, TokenType.EOF]
        )

    def test_end_of_input_repeats(self):
        """Asking for more tokens after the end keeps returning EOF."""
        lexer = Lexer("x")
        lexer.next_token()

        for _ in range(3):
            self.assertEqual(lexer.next_token().type, TokenType.EOF)

    def test_empty_input(self):
        self.assertEqual(self._types(""), [TokenType.EOF])
        self.assertEqual(self._types("   \n\t "), [TokenType.EOF])

    def test_source_locations(self):
        tokens = tokenize_string("a\n  b", filename="prog.kal")

        self.assertEqual((tokens[0].location.line, tokens[0].location.column), (1, 1))
        self.assertEqual((tokens[1].location.line, tokens[1].location.column), (2, 3))
        self.assertEqual(tokens[1].location.offset, 4)
        self.assertEqual(str(tokens[1].location), "prog.kal:2:3")

    def test_stream_input(self):
        """The lexer reads from any text stream one character at a time."""
        lexer = Lexer(io.StringIO("extern sin(x)"))
        types = [t.type for t in lexer.tokenize()]

        self.assertEqual(
            types,
            [TokenType.EXTERN, TokenType.IDENTIFIER, TokenType.CHAR,
             TokenType.IDENTIFIER, TokenType.CHAR, TokenType.EOF]
        )


if __name__ == '__main__':
    unittest.main()
