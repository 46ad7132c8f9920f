"""
Lowering error handling for Kaleido backends.

A LoweringError means one top-level form could not be turned into a
function handle. The driver reports it and moves on to the next form.

Author: xwest
"""

from typing import Optional, List

from ..lexer.tokens import SourceLocation
from ..lexer.errors import Diagnostic
from ..parser.ast_nodes import ASTNode


class LoweringError(Exception):
    """
    Exception raised when a backend cannot lower a node.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        node: Optional[ASTNode] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.node = node
        span = getattr(node, "span", None)
        location: Optional[SourceLocation] = span.start if span is not None else None
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


BACKEND_ERROR_CODES = {
    "B001": "Unknown function referenced",
    "B002": "Incorrect number of arguments",
    "B003": "Unknown variable name",
    "B004": "Invalid binary operator",
    "B005": "Expression nested too deeply",
}


def create_unknown_function_error(node: ASTNode, name: str) -> LoweringError:
    return LoweringError(
        message="unknown function referenced",
        node=node,
        code="B001",
        help_text=f"No definition or extern declaration for '{name}' has been seen.",
        suggestions=[f"Declare it first with 'extern {name}(...)'"]
    )


def create_arity_mismatch_error(node: ASTNode, name: str, expected: int, found: int) -> LoweringError:
    return LoweringError(
        message="incorrect number of arguments passed",
        node=node,
        code="B002",
        help_text=f"'{name}' takes {expected} argument(s) but {found} were given."
    )


def create_unknown_variable_error(node: ASTNode, name: str) -> LoweringError:
    return LoweringError(
        message="unknown variable name",
        node=node,
        code="B003",
        help_text=f"'{name}' is not a parameter of the enclosing function."
    )


def create_invalid_operator_error(node: ASTNode, op: str) -> LoweringError:
    return LoweringError(
        message="invalid binary operator",
        node=node,
        code="B004",
        help_text=f"{op!r} is not a registered binary operator."
    )


def create_nesting_error(node: ASTNode) -> LoweringError:
    return LoweringError(
        message="expression nested too deeply",
        node=node,
        code="B005",
        help_text="The backend ran out of stack while walking this function."
    )
