"""
Kaleido Lexer - turns a character stream into tokens

Reads the input one character at a time and keeps exactly one character
of lookahead in `last_char`. There is no fixed operator set: anything that
is not whitespace, an identifier, a number or a comment comes back as a
single-character CHAR token.

xwest
"""

import re
from io import StringIO
from typing import List, TextIO, Union

from .tokens import Token, TokenType, SourceLocation, KEYWORDS
from .errors import LexerWarning, create_invalid_number_warning


# Longest prefix a C-style decimal parser would accept from [0-9.]+ text
_DECIMAL_PREFIX = re.compile(r'\d*\.?\d*')


def _is_digit(char: str) -> bool:
    return '0' <= char <= '9'


def _is_alpha(char: str) -> bool:
    return char.isascii() and char.isalpha()


def _is_alnum(char: str) -> bool:
    return _is_alpha(char) or _is_digit(char)


def _is_well_formed_number(text: str) -> bool:
    return _DECIMAL_PREFIX.match(text).group(0) == text and any(_is_digit(c) for c in text)


def parse_decimal(text: str) -> float:
    """
    Forgiving decimal conversion for numeric lexemes.

    Uses the longest valid decimal prefix of `text` and returns 0.0 when
    there is none, so "1.2.3" gives 1.2 and "." gives 0.0.
    """
    prefix = _DECIMAL_PREFIX.match(text).group(0)
    if not any(_is_digit(c) for c in prefix):
        return 0.0
    return float(prefix)


class Lexer:
    """
    Kaleido lexical analyzer.

    Produces one token per call to next_token(). The only state is the
    read cursor and the one-character lookahead.
    """

    def __init__(self, source: Union[str, TextIO], filename: str = "<stdin>"):
        """
        Initialize the lexer.

        Args:
            source: Source text, or any text stream supporting read(1)
            filename: Name of the source for diagnostics
        """
        self.stream = StringIO(source) if isinstance(source, str) else source
        self.filename = filename
        self.warnings: List[LexerWarning] = []

        # Position of the next character to be read
        self._line = 1
        self._column = 1
        self._offset = 0

        # A space, so the first call skips straight to the first real character
        self.last_char = ' '
        self._char_location = SourceLocation(filename, 1, 1, 0)

    def _getchar(self) -> str:
        """Read one character, returning '' at end of input."""
        char = self.stream.read(1)
        self._char_location = SourceLocation(self.filename, self._line, self._column, self._offset)
        if char:
            self._offset += 1
            if char == '\n':
                self._line += 1
                self._column = 1
            else:
                self._column += 1
        return char

    def _advance(self):
        self.last_char = self._getchar()

    def next_token(self) -> Token:
        """Return the next token from the input."""
        while True:
            # Skip any whitespace
            while self.last_char.isspace():
                self._advance()

            start = self._char_location

            # identifier: [a-zA-Z][a-zA-Z0-9]*
            if _is_alpha(self.last_char):
                chars = [self.last_char]
                self._advance()
                while _is_alnum(self.last_char):
                    chars.append(self.last_char)
                    self._advance()

                text = ''.join(chars)
                token_type = KEYWORDS.get(text, TokenType.IDENTIFIER)
                value = text if token_type == TokenType.IDENTIFIER else None
                return Token(token_type, text, value, start)

            # number: [0-9.]+
            if _is_digit(self.last_char) or self.last_char == '.':
                chars = []
                while _is_digit(self.last_char) or self.last_char == '.':
                    chars.append(self.last_char)
                    self._advance()

                text = ''.join(chars)
                value = parse_decimal(text)
                if not _is_well_formed_number(text):
                    self.warnings.append(create_invalid_number_warning(text, value, start))
                return Token(TokenType.NUMBER, text, value, start)

            # Comment until end of line
            if self.last_char == '#':
                while self.last_char and self.last_char not in '\n\r':
                    self._advance()
                if self.last_char:
                    continue

            if not self.last_char:
                return Token(TokenType.EOF, "", None, self._char_location)

            # Otherwise just return the character itself
            this_char = self.last_char
            self._advance()
            return Token(TokenType.CHAR, this_char, this_char, start)

    def tokenize(self) -> List[Token]:
        """
        Read tokens until end of input.

        Returns:
            List of tokens ending with the EOF token
        """
        tokens = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.type == TokenType.EOF:
                return tokens

    def has_warnings(self) -> bool:
        """Check if lexer encountered any warnings."""
        return len(self.warnings) > 0


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for diagnostics

    Returns:
        List of tokens including the EOF token
    """
    return Lexer(source, filename).tokenize()
