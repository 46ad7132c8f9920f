"""
Diagnostics for the Kaleido lexer.

The lexer never rejects input, so there is no lexer exception. Suspicious
input (for now only malformed numeric literals) is recorded as a warning.
The Diagnostic class here is the shared diagnostic format used by the
parser and the analyzer as well.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Base class for diagnostics (errors, warnings, info)."""
    message: str
    location: Optional[SourceLocation]
    severity: str  # "error", "warning", "info"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        if self.location is not None:
            result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerWarning:
    """
    Represents a lexer warning that doesn't stop compilation.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="warning",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


ERROR_CODES = {
    "L003": "Invalid numeric literal",
}


def create_invalid_number_warning(lexeme: str, value: float,
                                  location: SourceLocation) -> LexerWarning:
    """Create a warning for a numeric literal that was only partially parsed."""
    return LexerWarning(
        message=f"Malformed numeric literal: '{lexeme}'",
        location=location,
        code="L003",
        help_text=f"Only the leading part of the literal was used (value {value!r}).",
        suggestions=["Use at most one decimal point in a number"]
    )
