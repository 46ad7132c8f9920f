"""
Binary operator precedence table.

Maps single-character operators to positive binding strengths. The table
is filled at startup and frozen once a parser starts using it.

Author: xwest
"""

from typing import Dict, Iterator, Optional, Tuple, Union

from ..lexer.tokens import Token, TokenType
from .errors import ConfigurationError


# Returned for anything that is not a known binary operator
NOT_AN_OPERATOR = -1

DEFAULT_PRECEDENCE: Dict[str, int] = {
    '<': 10,
    '+': 20,
    '-': 20,
    '*': 40,  # highest
}


class PrecedenceTable:
    """Operator character -> binding strength."""

    def __init__(self, precedences: Optional[Dict[str, int]] = None):
        self._table: Dict[str, int] = {}
        self._frozen = False
        for op, precedence in (DEFAULT_PRECEDENCE if precedences is None else precedences).items():
            self.register(op, precedence)

    def register(self, op: str, precedence: int):
        """Install or replace an operator. Only allowed before freeze()."""
        if self._frozen:
            raise ConfigurationError(
                f"cannot register operator {op!r}: precedence table is frozen"
            )
        if not isinstance(op, str) or len(op) != 1 or not op.isascii():
            raise ConfigurationError(f"binary operators must be one ASCII character, got {op!r}")
        if op.isalnum() or op.isspace() or op in '(),;#.':
            raise ConfigurationError(f"{op!r} cannot be used as a binary operator")
        if precedence <= 0:
            raise ConfigurationError(
                f"precedence for {op!r} must be positive, got {precedence}"
            )
        self._table[op] = precedence

    def freeze(self):
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def lookup(self, token: Union[Token, str]) -> int:
        """
        Binding strength of a token or character.

        Returns NOT_AN_OPERATOR (-1) for anything other than a registered
        ASCII operator character, which stops precedence climbing.
        """
        if isinstance(token, Token):
            if token.type != TokenType.CHAR:
                return NOT_AN_OPERATOR
            token = token.value
        if len(token) != 1 or not token.isascii():
            return NOT_AN_OPERATOR
        precedence = self._table.get(token, 0)
        if precedence <= 0:
            return NOT_AN_OPERATOR
        return precedence

    def __contains__(self, op: str) -> bool:
        return op in self._table

    def __iter__(self) -> Iterator[Tuple[str, int]]:
        return iter(sorted(self._table.items(), key=lambda item: item[1]))

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        entries = ", ".join(f"{op!r}: {prec}" for op, prec in self)
        return f"PrecedenceTable({{{entries}}})"
