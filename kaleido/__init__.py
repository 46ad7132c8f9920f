"""
Kaleido Front End Package

Lexer, precedence-climbing parser and AST for the Kaleido expression
language, a tiny language whose only type is the double.

Architecture:
    kaleido/
    ├── lexer/           # Tokenization
    ├── parser/          # Precedence climbing parser and AST
    ├── analyzer/        # Prototype registry and lowering errors
    ├── backend/         # Lowering interface and name-resolving backend
    ├── driver.py        # Top-level form loop with error recovery
    └── cli.py           # Command line front end

Author: xwest
License: MIT
"""

__version__ = "0.1.0-alpha"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Lexer
from .parser import Parser, PrecedenceTable
from .analyzer import PrototypeRegistry
from .backend import Backend, ResolvingBackend
from .driver import Driver, parse_all

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "PrecedenceTable",
    "PrototypeRegistry",
    "Backend",
    "ResolvingBackend",
    "Driver",
    "parse_all",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
