"""
Symbol Table
============

Maps label names to the location counter value at the point where each
label was defined. Names are case-insensitive and stored lowercase.

The table is filled during the encoding pass and only read afterwards,
by the resolution pass, so a label may be referenced before the line
that defines it.
"""

from dataclasses import dataclass, field
import logging
from typing import Iterator, Optional

from y86asm.errors import DuplicateSymbolError, SourceLocation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Symbol:
    """
    Symbol table entry.

    Attributes:
        name: Label name (lowercase)
        value: Address the label was bound to
        location: Where the label was defined
    """
    name: str
    value: int
    location: Optional[SourceLocation] = None


@dataclass
class SymbolTable:
    """
    Label definitions of one assembly run.

    Usage:
        symbols = SymbolTable()
        symbols.define("loop", 0x20)
        symbols.lookup("LOOP")   # -> 0x20
    """
    _symbols: dict[str, Symbol] = field(default_factory=dict)

    def define(
        self,
        name: str,
        value: int,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ) -> Symbol:
        """
        Bind a label to an address.

        Raises:
            DuplicateSymbolError: If the label is already defined
        """
        key = name.lower()
        if key in self._symbols:
            raise DuplicateSymbolError(
                key,
                location=location,
                original_location=self._symbols[key].location,
                source_line=source_line,
            )

        symbol = Symbol(key, value, location)
        self._symbols[key] = symbol
        logger.debug(f"Defined label '{key}' = 0x{value:X}")
        return symbol

    def lookup(self, name: str) -> Optional[int]:
        """Return the address bound to a label, or None if undefined."""
        symbol = self._symbols.get(name.lower())
        return symbol.value if symbol else None

    def get(self, name: str) -> Optional[Symbol]:
        return self._symbols.get(name.lower())

    def find_similar(self, name: str, limit: int = 3) -> list[str]:
        """
        Find defined labels with names close to the given one.

        Uses edit distance; used for "did you mean" hints.
        """
        name = name.lower()
        similar = [
            sym for sym in self._symbols
            if abs(len(sym) - len(name)) <= 1 and _edit_distance(name, sym) <= 2
        ]
        return similar[:limit]

    def as_dict(self) -> dict[str, int]:
        """Return a plain name -> address mapping."""
        return {name: sym.value for name, sym in self._symbols.items()}

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._symbols

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._symbols.values())

    def __len__(self) -> int:
        return len(self._symbols)


def _edit_distance(s1: str, s2: str) -> int:
    """Calculate Levenshtein edit distance between two strings."""
    if len(s1) < len(s2):
        s1, s2 = s2, s1

    distances = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1):
        new_distances = [i + 1]
        for j, c2 in enumerate(s2):
            if c1 == c2:
                new_distances.append(distances[j])
            else:
                new_distances.append(1 + min(distances[j], distances[j + 1], new_distances[-1]))
        distances = new_distances
    return distances[-1]
