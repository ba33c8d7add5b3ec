"""
Assembly State
==============

Mutable state of one encoding pass: the location counter, the symbol
table and the emission log. A fresh AssemblyState is created for every
assembly run, so running the same source twice gives identical output.
"""

from dataclasses import dataclass, field
from typing import Optional

from y86asm.errors import DirectiveError, SourceLocation
from y86asm.assembler.emission import EmissionLog, EmissionRecord, Field
from y86asm.assembler.symbols import SymbolTable


@dataclass
class AssemblyState:
    """
    State owned by the encoding pass.

    Attributes:
        position: Location counter, the address of the next emitted byte
        symbols: Labels defined so far
        log: Records emitted so far, in program order
    """
    position: int = 0
    symbols: SymbolTable = field(default_factory=SymbolTable)
    log: EmissionLog = field(default_factory=EmissionLog)

    def set_position(
        self,
        value: int,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ) -> None:
        """Move the location counter to an absolute address."""
        if value < 0:
            raise DirectiveError(
                f"location counter cannot be negative ({value})",
                location=location,
                source_line=source_line,
            )
        self.position = value

    def advance(self, count: int) -> None:
        self.position += count

    def emit(
        self,
        fields: tuple[Field, ...],
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ) -> EmissionRecord:
        """Emit a record at the current position and advance past it."""
        record = self.log.emit(self.position, fields, location, source_line)
        self.advance(record.size)
        return record
