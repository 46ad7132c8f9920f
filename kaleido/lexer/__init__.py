"""
Kaleido Lexer Package

Implements the lexical analyzer (tokenizer) for the Kaleido expression
language. The token set is tiny: two keywords, identifiers, numbers, and
raw single characters for everything else.

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation
from .lexer import Lexer, tokenize_string, parse_decimal
from .errors import Diagnostic, LexerWarning

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "Diagnostic",
    "LexerWarning",
    "tokenize_string",
    "parse_decimal",
]
