"""
Abstract Syntax Tree node definitions for Kaleido.

The node set is closed: four expression kinds plus prototypes and function
definitions. Nodes are frozen dataclasses that exclusively own their
children, so trees are immutable, acyclic and compare by value. Source
spans ride along for diagnostics but are ignored by equality.

Nodes carry no lowering behavior of their own; backends walk them through
the visitor interface.

Author: xwest
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Any, Tuple, Union
from dataclasses import dataclass, field
from enum import Enum

from ..lexer.tokens import SourceLocation


# Reserved name of the prototype synthesized for bare top-level expressions
ANONYMOUS_FUNCTION_NAME = "__anon_expr"


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""

    # Expressions
    NUMBER_LITERAL = "NumberLiteral"
    VARIABLE_REF = "VariableRef"
    BINARY_OP = "BinaryOp"
    CALL = "Call"

    # Top-level forms
    PROTOTYPE = "Prototype"
    FUNCTION_DEF = "FunctionDef"


@dataclass(frozen=True)
class SourceSpan:
    """Represents a span of source code (start and end locations)."""
    start: SourceLocation
    end: SourceLocation

    def __str__(self) -> str:
        if self.start.filename == self.end.filename:
            return f"{self.start.filename}:{self.start.line}:{self.start.column}-{self.end.line}:{self.end.column}"
        return f"{self.start}-{self.end}"


class ASTVisitor:
    """
    Visitor interface for traversing AST nodes.

    visit() dispatches to visit_<NodeClass>, e.g. visit_BinaryOp. Nodes
    without a handler go to generic_visit(), which raises.
    """

    def visit(self, node: 'ASTNode') -> Any:
        method = getattr(self, f"visit_{type(node).__name__}", self.generic_visit)
        return method(node)

    def generic_visit(self, node: 'ASTNode') -> Any:
        raise NotImplementedError(
            f"{type(self).__name__} has no handler for {type(node).__name__}"
        )


class ASTNode(ABC):
    """Base class for all AST nodes."""

    node_type: ASTNodeType

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all child nodes."""

    def walk(self):
        """Yield this node and all of its descendants, depth first."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children()))


def _span_field():
    return field(default=None, compare=False, repr=False)


# ============================================================================
# Expressions
# ============================================================================

class Expression(ASTNode):
    """Base class for expressions."""


@dataclass(frozen=True)
class NumberLiteral(Expression):
    """Numeric literal such as 1.0."""
    value: float
    span: Optional[SourceSpan] = _span_field()

    node_type = ASTNodeType.NUMBER_LITERAL

    def children(self) -> List[ASTNode]:
        return []


@dataclass(frozen=True)
class VariableRef(Expression):
    """Reference to a named value such as a function parameter."""
    name: str
    span: Optional[SourceSpan] = _span_field()

    node_type = ASTNodeType.VARIABLE_REF

    def children(self) -> List[ASTNode]:
        return []


@dataclass(frozen=True)
class BinaryOp(Expression):
    """Binary operator applied to two operands."""
    op: str
    left: Expression
    right: Expression
    span: Optional[SourceSpan] = _span_field()

    node_type = ASTNodeType.BINARY_OP

    def children(self) -> List[ASTNode]:
        return [self.left, self.right]


@dataclass(frozen=True)
class Call(Expression):
    """Function call; arguments are kept as an immutable tuple."""
    callee: str
    args: Tuple[Expression, ...] = ()
    span: Optional[SourceSpan] = _span_field()

    node_type = ASTNodeType.CALL

    def __post_init__(self):
        object.__setattr__(self, 'args', tuple(self.args))

    def children(self) -> List[ASTNode]:
        return list(self.args)


# ============================================================================
# Top-level forms
# ============================================================================

@dataclass(frozen=True)
class Prototype(ASTNode):
    """
    Function signature: its name and parameter names.

    Every value in Kaleido is a double, so only the arity matters to a
    backend. Duplicate parameter names are accepted by the grammar.
    """
    name: str
    params: Tuple[str, ...] = ()
    span: Optional[SourceSpan] = _span_field()

    node_type = ASTNodeType.PROTOTYPE

    def __post_init__(self):
        object.__setattr__(self, 'params', tuple(self.params))

    @property
    def arity(self) -> int:
        return len(self.params)

    @property
    def is_anonymous(self) -> bool:
        return self.name == ANONYMOUS_FUNCTION_NAME

    def children(self) -> List[ASTNode]:
        return []


@dataclass(frozen=True)
class FunctionDef(ASTNode):
    """Function definition: a prototype plus a body expression."""
    prototype: Prototype
    body: Expression
    span: Optional[SourceSpan] = _span_field()

    node_type = ASTNodeType.FUNCTION_DEF

    @property
    def name(self) -> str:
        return self.prototype.name

    def children(self) -> List[ASTNode]:
        return [self.prototype, self.body]


TopLevelNode = Union[FunctionDef, Prototype]
