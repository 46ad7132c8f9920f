"""
Backend lowering interface.

A backend turns completed top-level forms into whatever it compiles to
(IR, machine code, a checked handle...) and shares the session's
PrototypeRegistry with the rest of the pipeline. The front end never
inspects the handles it gets back; it only passes them on.

Author: xwest
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from ..analyzer.prototype_registry import PrototypeRegistry
from ..parser.ast_nodes import FunctionDef, Prototype, TopLevelNode


class Backend(ABC):
    """Base class for lowering backends."""

    def __init__(self, registry: Optional[PrototypeRegistry] = None):
        self.registry = registry if registry is not None else PrototypeRegistry()

    @abstractmethod
    def lower_function(self, function: FunctionDef) -> Any:
        """
        Lower a function definition (named or anonymous).

        Raises:
            LoweringError: If the function cannot be lowered
        """

    @abstractmethod
    def lower_extern(self, prototype: Prototype) -> Any:
        """
        Lower an extern declaration.

        Raises:
            LoweringError: If the declaration cannot be lowered
        """

    def lower(self, node: TopLevelNode) -> Any:
        """Dispatch on the kind of top-level node."""
        if isinstance(node, FunctionDef):
            return self.lower_function(node)
        if isinstance(node, Prototype):
            return self.lower_extern(node)
        raise TypeError(f"cannot lower {type(node).__name__}")
