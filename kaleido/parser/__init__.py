"""
Kaleido Parser Package

Implements a precedence-climbing recursive descent parser for the Kaleido
expression language and the immutable AST it produces.

Key Features:
- One token of lookahead, tokens pulled from the lexer on demand
- Configurable single-character binary operator precedence table
- Frozen, value-comparable AST nodes with visitor support
- First-error-per-form diagnostics with caller-driven recovery

Author: xwest
"""

from .ast_nodes import (
    ANONYMOUS_FUNCTION_NAME, ASTNode, ASTNodeType, ASTVisitor, SourceSpan,
    Expression, NumberLiteral, VariableRef, BinaryOp, Call, Prototype,
    FunctionDef, TopLevelNode
)
from .parser import Parser, parse_string, parse_expression_string
from .precedence import PrecedenceTable, DEFAULT_PRECEDENCE, NOT_AN_OPERATOR
from .printer import ASTPrinter, to_sexpr
from .errors import ParseError, ConfigurationError, DiagnosticReporter

__all__ = [
    # Core parser
    "Parser", "parse_string", "parse_expression_string",
    "PrecedenceTable", "DEFAULT_PRECEDENCE", "NOT_AN_OPERATOR",

    # AST nodes
    "ASTNode", "ASTNodeType", "ASTVisitor", "SourceSpan", "TopLevelNode",
    "Expression", "NumberLiteral", "VariableRef", "BinaryOp", "Call",
    "Prototype", "FunctionDef", "ANONYMOUS_FUNCTION_NAME",
    "ASTPrinter", "to_sexpr",

    # Error handling
    "ParseError", "ConfigurationError", "DiagnosticReporter",
]
