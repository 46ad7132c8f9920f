"""
Error handling for the Kaleido parser.

Parse errors are raised inside the parser and caught at the top-level
form boundary, where the DiagnosticReporter prints the first error of the
form. Nothing here is fatal to a session.

Author: xwest
"""

import sys
from typing import Optional, List, TextIO, Union

from ..lexer.tokens import Token, TokenType, SourceLocation
from ..lexer.errors import Diagnostic


class ParseError(Exception):
    """
    Exception raised when the parser encounters a syntax error.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation],
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
        self.token = token

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class ConfigurationError(ValueError):
    """Raised for invalid precedence table configuration."""


class DiagnosticReporter:
    """
    Records and prints the first error of each top-level form.

    The driver calls begin_form() before every form. Later errors of the
    same form are dropped, since they are almost always fallout from the
    first one. Only the current form's error and the first error of the
    session are kept; everything else is counted and printed, so a long
    session does not accumulate diagnostics.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stderr
        self.error_count = 0
        self.first_error: Optional[Exception] = None
        self.form_error: Optional[Exception] = None

    def begin_form(self):
        """Start a new top-level form."""
        self.form_error = None

    def report(self, error: Exception) -> bool:
        """
        Report an error for the current form.

        Returns:
            True if the error was recorded, False if the form already had one
        """
        if self.form_error is not None:
            return False
        self.form_error = error
        if self.first_error is None:
            self.first_error = error
        self.error_count += 1
        text = str(getattr(error, "diagnostic", error))
        self.stream.write(text if text.endswith("\n") else text + "\n")
        self.stream.flush()
        return True

    def has_errors(self) -> bool:
        return self.error_count > 0

    def clear(self):
        self.error_count = 0
        self.first_error = None
        self.form_error = None


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Unexpected token",
    "P002": "Expected token not found",
    "P005": "Invalid expression",
    "P006": "Expression nested too deeply",
}


def describe_token(token: Token) -> str:
    """Human readable description of a token for messages."""
    if token.type == TokenType.EOF:
        return "end of input"
    if token.type == TokenType.CHAR:
        return repr(token.value)
    if token.type == TokenType.NUMBER:
        return f"number {token.lexeme}"
    if token.type == TokenType.IDENTIFIER:
        return f"identifier '{token.lexeme}'"
    return f"keyword '{token.lexeme}'"


# Helper functions for creating common parser errors

def create_unexpected_token_error(message: str, found: Token) -> ParseError:
    """Create an error for an unexpected token."""
    return ParseError(
        message=message,
        location=found.location,
        token=found,
        code="P001",
        help_text=f"Found {describe_token(found)}."
    )


def create_missing_token_error(expected: Union[str, TokenType], found: Token,
                               message: Optional[str] = None) -> ParseError:
    """Create an error for a missing expected token."""
    expected_str = expected.name if isinstance(expected, TokenType) else repr(expected)

    return ParseError(
        message=message or f"expected {expected_str}",
        location=found.location,
        token=found,
        code="P002",
        help_text=f"The parser expected to see {expected_str} here, but found {describe_token(found)}.",
        suggestions=[f"Add the missing {expected_str}"]
    )


def create_invalid_expression_error(found: Token) -> ParseError:
    """Create an error for a token that cannot start an expression."""
    return ParseError(
        message="unknown token when expecting an expression",
        location=found.location,
        token=found,
        code="P005",
        help_text=f"An expression cannot start with {describe_token(found)}.",
        suggestions=["Expressions start with a number, an identifier or '('"]
    )


def create_nesting_error(found: Token) -> ParseError:
    """Create an error for input nested deeper than the parser can follow."""
    return ParseError(
        message="expression nested too deeply",
        location=found.location,
        token=found,
        code="P006",
        help_text="The parser ran out of stack while reading this form.",
        suggestions=["Split the expression into smaller functions"]
    )
