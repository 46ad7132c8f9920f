"""
Name-resolving reference backend.

Performs the checks a code generator has to make while lowering, without
generating any code:
- every variable must be a parameter of the enclosing function
- every call must reach a known function with the right number of arguments
- every binary operator must be registered

Each top-level form is its own compilation unit. A call therefore resolves
against the function being lowered first and against the session's
PrototypeRegistry second, which is how externs and earlier definitions
become callable from later forms.

Author: xwest
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Optional, Tuple

from ..analyzer.prototype_registry import PrototypeRegistry
from ..analyzer.errors import (
    create_unknown_function_error, create_arity_mismatch_error,
    create_unknown_variable_error, create_invalid_operator_error
)
from ..parser.ast_nodes import (
    ASTVisitor, NumberLiteral, VariableRef, BinaryOp, Call, Prototype, FunctionDef
)
from ..parser.precedence import PrecedenceTable
from .base import Backend

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FunctionHandle:
    """Result of lowering: the checked signature and, for definitions, the body."""
    prototype: Prototype
    definition: Optional[FunctionDef] = None
    callees: Tuple[str, ...] = field(default=())

    @property
    def name(self) -> str:
        return self.prototype.name

    @property
    def arity(self) -> int:
        return self.prototype.arity

    @property
    def is_extern(self) -> bool:
        return self.definition is None


class _BodyResolver(ASTVisitor):
    """Walks one function body, raising LoweringError on the first problem."""

    def __init__(self, unit: Dict[str, Prototype], registry: PrototypeRegistry,
                 params: FrozenSet[str], operators: PrecedenceTable):
        self.unit = unit
        self.registry = registry
        self.params = params
        self.operators = operators
        self.callees = []

    def visit_NumberLiteral(self, node: NumberLiteral):
        pass

    def visit_VariableRef(self, node: VariableRef):
        if node.name not in self.params:
            raise create_unknown_variable_error(node, node.name)

    def visit_BinaryOp(self, node: BinaryOp):
        # a+b+c+... nests to the left; walk that spine with a loop
        chain = []
        while isinstance(node, BinaryOp):
            chain.append(node)
            node = node.left
        node.accept(self)

        for op_node in reversed(chain):
            op_node.right.accept(self)
            if op_node.op not in self.operators:
                raise create_invalid_operator_error(op_node, op_node.op)

    def visit_Call(self, node: Call):
        callee = self.unit.get(node.callee) or self.registry.lookup(node.callee)
        if callee is None:
            raise create_unknown_function_error(node, node.callee)
        if callee.arity != len(node.args):
            raise create_arity_mismatch_error(node, node.callee, callee.arity, len(node.args))

        for arg in node.args:
            arg.accept(self)
        if node.callee not in self.callees:
            self.callees.append(node.callee)


class ResolvingBackend(Backend):
    """
    Backend that checks name resolution and arity, recording prototypes
    into the shared registry as it goes.
    """

    def __init__(self, registry: Optional[PrototypeRegistry] = None,
                 operators: Optional[PrecedenceTable] = None):
        super().__init__(registry)
        self.operators = operators if operators is not None else PrecedenceTable()
        self.functions: Dict[str, FunctionHandle] = {}

    def lower_extern(self, prototype: Prototype) -> FunctionHandle:
        self.registry.record_prototype(prototype)
        logger.debug("registered extern %s/%d", prototype.name, prototype.arity)
        return FunctionHandle(prototype)

    def lower_function(self, function: FunctionDef) -> FunctionHandle:
        prototype = function.prototype

        # Recorded before the body is checked so the function can call itself.
        # The entry stays even if the body turns out to be invalid.
        self.registry.record_prototype(prototype)
        logger.debug("registered definition %s/%d", prototype.name, prototype.arity)

        resolver = _BodyResolver(
            unit={prototype.name: prototype},
            registry=self.registry,
            params=frozenset(prototype.params),
            operators=self.operators,
        )
        function.body.accept(resolver)

        handle = FunctionHandle(prototype, function, tuple(resolver.callees))
        if not prototype.is_anonymous:
            self.functions[prototype.name] = handle
        return handle
