"""
Session-wide registry of function prototypes.

Maps a function name to the most recently seen Prototype for it, whether
it came from an extern declaration or from a function definition. Backends
record into it and consult it when a call names a function that is not in
the compilation unit being lowered, which is what makes forward references
and calls across top-level forms work.

Entries are never removed; a later prototype for the same name replaces
the earlier one.

Author: xwest
"""

from typing import Dict, Iterator, List, Optional

from ..parser.ast_nodes import Prototype


class PrototypeRegistry:
    """Flat name -> Prototype table with last-write-wins semantics."""

    def __init__(self):
        self._prototypes: Dict[str, Prototype] = {}

    def record(self, name: str, prototype: Prototype) -> None:
        """Insert or replace the prototype for `name`."""
        self._prototypes[name] = prototype

    def record_prototype(self, prototype: Prototype) -> None:
        """Record a prototype under its own name."""
        self.record(prototype.name, prototype)

    def lookup(self, name: str) -> Optional[Prototype]:
        """Most recent prototype for `name`, or None."""
        return self._prototypes.get(name)

    def names(self) -> List[str]:
        return list(self._prototypes)

    def __contains__(self, name: str) -> bool:
        return name in self._prototypes

    def __len__(self) -> int:
        return len(self._prototypes)

    def __iter__(self) -> Iterator[str]:
        return iter(self._prototypes)

    def __repr__(self) -> str:
        return f"PrototypeRegistry({sorted(self._prototypes)})"
