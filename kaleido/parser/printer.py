"""
S-expression rendering of Kaleido ASTs.

    def add(a b) a+b*2   ->   (def add (a b) (+ a (* b 2)))

Author: xwest
"""

import math

from .ast_nodes import (
    ASTNode, ASTVisitor, NumberLiteral, VariableRef, BinaryOp, Call,
    Prototype, FunctionDef
)


def format_number(value: float) -> str:
    """Render 2.0 as 2 and 2.5 as 2.5."""
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


class ASTPrinter(ASTVisitor):
    """Renders a node and its children as a single-line s-expression."""

    def visit_NumberLiteral(self, node: NumberLiteral) -> str:
        return format_number(node.value)

    def visit_VariableRef(self, node: VariableRef) -> str:
        return node.name

    def visit_BinaryOp(self, node: BinaryOp) -> str:
        chain = []
        while isinstance(node, BinaryOp):
            chain.append(node)
            node = node.left
        text = node.accept(self)
        for op_node in reversed(chain):
            text = f"({op_node.op} {text} {op_node.right.accept(self)})"
        return text

    def visit_Call(self, node: Call) -> str:
        parts = [node.callee] + [arg.accept(self) for arg in node.args]
        return "(" + " ".join(parts) + ")"

    def visit_Prototype(self, node: Prototype) -> str:
        return f"{node.name} ({' '.join(node.params)})"

    def visit_FunctionDef(self, node: FunctionDef) -> str:
        return f"(def {node.prototype.accept(self)} {node.body.accept(self)})"


def to_sexpr(node: ASTNode) -> str:
    return node.accept(ASTPrinter())
