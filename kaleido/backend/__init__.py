"""
Kaleido Backend Package.

Defines the interface the front end hands completed ASTs to, and a
reference backend that resolves names without generating code.

Author: xwest
"""

from .base import Backend
from .resolver import ResolvingBackend, FunctionHandle

__all__ = ['Backend', 'ResolvingBackend', 'FunctionHandle']
