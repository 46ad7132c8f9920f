"""
Token definitions for the Kaleido lexer.

Kaleido has a deliberately tiny token set:
- Keywords (def, extern)
- Identifiers and floating-point number literals
- Single raw characters, which is how every operator and punctuation
  mark enters the grammar
- End of input

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Optional


class TokenType(Enum):
    """Enumeration of all token types in Kaleido."""

    EOF = auto()                    # End of input

    # Commands
    DEF = auto()                    # def
    EXTERN = auto()                 # extern

    # Primary
    IDENTIFIER = auto()             # foo, x1
    NUMBER = auto()                 # 42, 3.14, .5

    # Any other single character: operators, parentheses, commas, ';', ...
    CHAR = auto()


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting and for the spans attached to AST nodes.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Kaleido language.

    Contains the token type, lexeme (raw text), semantic value
    and source location.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    value: Any                      # float for NUMBER, str for IDENTIFIER/CHAR
    location: SourceLocation

    def __str__(self) -> str:
        if self.type == TokenType.NUMBER:
            return f"{self.type.name}({self.lexeme!r} -> {self.value!r})"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    def is_char(self, char: str) -> bool:
        """Check if this token is the raw character `char`."""
        return self.type == TokenType.CHAR and self.value == char

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type in (TokenType.DEF, TokenType.EXTERN)

    @property
    def is_identifier(self) -> bool:
        return self.type == TokenType.IDENTIFIER

    @property
    def char(self) -> Optional[str]:
        """The raw character for CHAR tokens, None otherwise."""
        return self.value if self.type == TokenType.CHAR else None


# Lookup table used by the lexer for keyword recognition
KEYWORDS = {
    "def": TokenType.DEF,
    "extern": TokenType.EXTERN,
}
