"""
Kaleido Analyzer Package

Holds the state shared between the front end and backends:
- The session-wide prototype registry used for forward references
- Lowering error reporting

Author: xwest
"""

from .prototype_registry import PrototypeRegistry
from .errors import LoweringError, BACKEND_ERROR_CODES

__all__ = [
    "PrototypeRegistry",
    "LoweringError",
    "BACKEND_ERROR_CODES",
]
