"""
Kaleido Precedence-Climbing Parser

Recursive descent for primaries, prototypes and top-level forms, and
precedence climbing for binary operator chains. The parser pulls tokens
from a Lexer one at a time and keeps exactly one token of lookahead.

Productions raise ParseError. The three top-level entry points
(parse_definition, parse_extern, parse_top_level_expr) catch it, report
it and return None, leaving recovery to the caller.

Author: xwest
"""

from typing import Callable, List, Optional, TypeVar

from ..lexer.lexer import Lexer
from ..lexer.tokens import Token, TokenType
from .ast_nodes import (
    ANONYMOUS_FUNCTION_NAME, SourceSpan, Expression, NumberLiteral, VariableRef,
    BinaryOp, Call, Prototype, FunctionDef
)
from .errors import (
    ParseError, DiagnosticReporter, create_unexpected_token_error,
    create_missing_token_error, create_invalid_expression_error, create_nesting_error
)
from .precedence import PrecedenceTable


T = TypeVar('T')


class Parser:
    """
    Kaleido parser.

    Holds the current token, the precedence table it climbs with and the
    reporter that receives the first error of each top-level form.
    """

    def __init__(self, lexer: Lexer, precedence: Optional[PrecedenceTable] = None,
                 reporter: Optional[DiagnosticReporter] = None):
        """
        Initialize the parser and read the first token.

        Args:
            lexer: Token source
            precedence: Binary operator table; frozen from here on
            reporter: Receives parse errors (defaults to printing on stderr)
        """
        self.lexer = lexer
        self.precedence = precedence if precedence is not None else PrecedenceTable()
        self.precedence.freeze()
        self.reporter = reporter if reporter is not None else DiagnosticReporter()

        self.current: Optional[Token] = None
        self._previous: Optional[Token] = None
        self.next_token()

    # ------------------------------------------------------------------
    # Token buffer
    # ------------------------------------------------------------------

    def next_token(self) -> Token:
        """Read another token from the lexer into `current` and return it."""
        self._previous = self.current
        self.current = self.lexer.next_token()
        return self.current

    @property
    def at_end(self) -> bool:
        return self.current.type == TokenType.EOF

    def _span_from(self, start: Token) -> SourceSpan:
        end = self._previous if self._previous is not None else start
        return SourceSpan(start.location, end.location)

    def _expect_char(self, char: str, message: str):
        if not self.current.is_char(char):
            raise create_missing_token_error(char, self.current, message)

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def parse_number_expr(self) -> NumberLiteral:
        """numberexpr ::= number"""
        token = self.current
        self.next_token()
        return NumberLiteral(token.value, span=self._span_from(token))

    def parse_paren_expr(self) -> Expression:
        """parenexpr ::= '(' expression ')'"""
        self.next_token()  # eat (
        expr = self.parse_expression()
        self._expect_char(')', "expected ')'")
        self.next_token()  # eat )
        return expr

    def parse_identifier_expr(self) -> Expression:
        """
        identifierexpr
          ::= identifier
          ::= identifier '(' expression* ')'
        """
        start = self.current
        name = start.value
        self.next_token()  # eat identifier

        if not self.current.is_char('('):
            return VariableRef(name, span=self._span_from(start))

        self.next_token()  # eat (
        args: List[Expression] = []
        if not self.current.is_char(')'):
            while True:
                args.append(self.parse_expression())

                if self.current.is_char(')'):
                    break

                if not self.current.is_char(','):
                    raise create_missing_token_error(
                        "')' or ','", self.current, "expected ')' or ',' in argument list"
                    )
                self.next_token()

        self.next_token()  # eat )
        return Call(name, tuple(args), span=self._span_from(start))

    def parse_primary(self) -> Expression:
        """
        primary
          ::= identifierexpr
          ::= numberexpr
          ::= parenexpr
        """
        if self.current.type == TokenType.IDENTIFIER:
            return self.parse_identifier_expr()
        if self.current.type == TokenType.NUMBER:
            return self.parse_number_expr()
        if self.current.is_char('('):
            return self.parse_paren_expr()
        raise create_invalid_expression_error(self.current)

    def parse_bin_op_rhs(self, min_precedence: int, lhs: Expression) -> Expression:
        """
        binoprhs ::= (binop primary)*

        Climbs while the current operator binds at least as tightly as
        min_precedence. Non-operators have precedence -1, so they always
        end the loop.
        """
        start = lhs.span.start if lhs.span is not None else None
        while True:
            token_precedence = self.precedence.lookup(self.current)
            if token_precedence < min_precedence:
                return lhs

            op = self.current.value
            self.next_token()  # eat binop

            rhs = self.parse_primary()

            # If the next operator binds tighter, let it take rhs first
            next_precedence = self.precedence.lookup(self.current)
            if token_precedence < next_precedence:
                rhs = self.parse_bin_op_rhs(token_precedence + 1, rhs)

            span = SourceSpan(start, self._previous.location) if start is not None else None
            lhs = BinaryOp(op, lhs, rhs, span=span)

    def parse_expression(self) -> Expression:
        """expression ::= primary binoprhs"""
        lhs = self.parse_primary()
        return self.parse_bin_op_rhs(0, lhs)

    # ------------------------------------------------------------------
    # Prototypes and top-level forms
    # ------------------------------------------------------------------

    def parse_prototype(self) -> Prototype:
        """prototype ::= identifier '(' identifier* ')'"""
        start = self.current
        if start.type != TokenType.IDENTIFIER:
            raise create_unexpected_token_error("expected function name in prototype", start)

        name = start.value
        self.next_token()

        self._expect_char('(', "expected '(' in prototype")

        params: List[str] = []
        while self.next_token().type == TokenType.IDENTIFIER:
            params.append(self.current.value)

        self._expect_char(')', "expected ')' in prototype")
        self.next_token()  # eat )

        return Prototype(name, tuple(params), span=self._span_from(start))

    def _parse_definition(self) -> FunctionDef:
        start = self.current
        self.next_token()  # eat def
        prototype = self.parse_prototype()
        body = self.parse_expression()
        return FunctionDef(prototype, body, span=self._span_from(start))

    def _parse_extern(self) -> Prototype:
        self.next_token()  # eat extern
        return self.parse_prototype()

    def _parse_top_level_expr(self) -> FunctionDef:
        start = self.current
        body = self.parse_expression()
        span = self._span_from(start)
        prototype = Prototype(ANONYMOUS_FUNCTION_NAME, (), span=span)
        return FunctionDef(prototype, body, span=span)

    def _top_level(self, production: Callable[[], T]) -> Optional[T]:
        self.reporter.begin_form()
        try:
            return production()
        except ParseError as e:
            self.reporter.report(e)
            return None
        except RecursionError:
            # Form is abandoned at the token where the stack ran out
            self.reporter.report(create_nesting_error(self.current))
            return None

    def parse_definition(self) -> Optional[FunctionDef]:
        """definition ::= 'def' prototype expression"""
        return self._top_level(self._parse_definition)

    def parse_extern(self) -> Optional[Prototype]:
        """external ::= 'extern' prototype"""
        return self._top_level(self._parse_extern)

    def parse_top_level_expr(self) -> Optional[FunctionDef]:
        """toplevelexpr ::= expression, wrapped as a nullary __anon_expr function"""
        return self._top_level(self._parse_top_level_expr)


def parse_string(source: str, filename: str = "<string>",
                 precedence: Optional[PrecedenceTable] = None,
                 reporter: Optional[DiagnosticReporter] = None) -> Parser:
    """
    Convenience function to create a parser over a source string.

    Returns:
        Parser positioned on the first token
    """
    return Parser(Lexer(source, filename), precedence, reporter)


def parse_expression_string(source: str) -> Expression:
    """
    Parse a single expression from a string.

    Raises:
        ParseError: If the text is not a well formed expression followed
            by end of input
    """
    parser = parse_string(source)
    expr = parser.parse_expression()
    if not parser.at_end:
        raise create_unexpected_token_error("unexpected text after expression", parser.current)
    return expr
