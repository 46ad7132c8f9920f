"""
Top-level driver for Kaleido.

Reads top-level forms one after another until end of input:

    ;            skipped
    def ...      function definition
    extern ...   extern declaration
    anything     bare expression, wrapped as __anon_expr

Each successfully parsed form is handed to the backend, if there is one.
When a form fails to parse, exactly one token is discarded and the loop
carries on, so bad input is skipped a token at a time.

Author: xwest
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, TextIO, Union

from .analyzer.errors import LoweringError, create_nesting_error
from .backend.base import Backend
from .lexer.lexer import Lexer
from .lexer.tokens import TokenType
from .parser.ast_nodes import TopLevelNode
from .parser.errors import DiagnosticReporter
from .parser.parser import Parser
from .parser.precedence import PrecedenceTable

logger = logging.getLogger(__name__)


DEFINITION = "definition"
EXTERN = "extern"
EXPRESSION = "expression"


@dataclass
class TopLevelResult:
    """Outcome of one top-level form."""
    kind: str                           # DEFINITION, EXTERN or EXPRESSION
    node: Optional[TopLevelNode] = None
    handle: Any = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.node is not None and self.error is None


class Driver:
    """
    Runs the parser over a whole input, form by form.

    The parser, lexer, precedence table and reporter are created here
    unless given; the backend (optional) keeps the prototype registry.
    """

    def __init__(self, source: Union[str, TextIO], backend: Optional[Backend] = None,
                 precedence: Optional[PrecedenceTable] = None,
                 reporter: Optional[DiagnosticReporter] = None,
                 filename: str = "<stdin>"):
        self.backend = backend
        self.reporter = reporter if reporter is not None else DiagnosticReporter()
        self.lexer = Lexer(source, filename)
        self.parser = Parser(self.lexer, precedence, self.reporter)

    def forms(self) -> Iterator[TopLevelResult]:
        """Yield one result per top-level form until end of input."""
        parser = self.parser
        while True:
            token = parser.current
            if token.type == TokenType.EOF:
                return
            if token.is_char(';'):
                parser.next_token()
                continue

            if token.type == TokenType.DEF:
                yield self._handle(DEFINITION, parser.parse_definition)
            elif token.type == TokenType.EXTERN:
                yield self._handle(EXTERN, parser.parse_extern)
            else:
                yield self._handle(EXPRESSION, parser.parse_top_level_expr)

    def run(self) -> List[TopLevelResult]:
        """Process the whole input and return every form's result."""
        return list(self.forms())

    def _handle(self, kind: str, parse) -> TopLevelResult:
        node = parse()
        if node is None:
            error = self.reporter.form_error
            skipped = self.parser.current
            # Skip token for error recovery
            self.parser.next_token()
            logger.debug("%s failed to parse, skipped %s", kind, skipped)
            return TopLevelResult(kind, error=error)

        logger.debug("parsed %s %s", kind, getattr(node, "name", ""))
        if self.backend is None:
            return TopLevelResult(kind, node)

        try:
            handle = self.backend.lower(node)
        except LoweringError as e:
            return self._lowering_failed(kind, node, e)
        except RecursionError:
            return self._lowering_failed(kind, node, create_nesting_error(node))
        return TopLevelResult(kind, node, handle)

    def _lowering_failed(self, kind: str, node: TopLevelNode, error: LoweringError) -> TopLevelResult:
        self.reporter.report(error)
        logger.debug("%s %s failed to lower: %s", kind, node.name, error.message)
        return TopLevelResult(kind, node, error=error)

    @property
    def warnings(self):
        return self.lexer.warnings


def parse_all(source: Union[str, TextIO], backend: Optional[Backend] = None,
              precedence: Optional[PrecedenceTable] = None,
              reporter: Optional[DiagnosticReporter] = None,
              filename: str = "<string>") -> List[TopLevelResult]:
    """
    Convenience function to run a Driver over a whole input.

    Returns:
        One TopLevelResult per top-level form, failures included
    """
    return Driver(source, backend, precedence, reporter, filename).run()
