"""
Emission Log
============

The encoding pass does not produce hex text directly. Each directive or
instruction appends one EmissionRecord to the EmissionLog: an address
plus an ordered tuple of typed fields.

Field Types
-----------
- **Nibble**: one hex digit (register codes, the 'F' filler)
- **Literal**: a fixed-width value of 1, 4 or 8 bytes
- **SymbolRef**: a pending 4-byte reference to a label

A SymbolRef is only turned into an address by the resolution pass, once
the whole source has been scanned. That is what makes forward references
work without re-encoding anything.

Records are kept in program order. Because '.pos' may move the location
counter backwards, that is not necessarily increasing-address order.
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional, Union

from y86asm.errors import SourceLocation, ValueRangeError


# Width of every address field, in bytes
ADDRESS_SIZE = 4


# =============================================================================
# Field Types
# =============================================================================

@dataclass(frozen=True)
class Nibble:
    """A single hex digit."""
    value: int

    @property
    def digits(self) -> int:
        return 1

    def render(self) -> str:
        return f"{self.value & 0xF:X}"


@dataclass(frozen=True)
class Literal:
    """
    A fixed-width numeric field.

    Negative values are rendered in two's complement. The value must fit
    the signed or unsigned range of the field; check_range() enforces that
    when the field is built from source.

    Attributes:
        value: The integer value
        size: Width in bytes
    """
    value: int
    size: int

    @property
    def digits(self) -> int:
        return self.size * 2

    def fits(self) -> bool:
        bits = self.size * 8
        return -(1 << (bits - 1)) <= self.value < (1 << bits)

    def check_range(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ) -> "Literal":
        """Return self, or raise ValueRangeError if the value does not fit."""
        if not self.fits():
            raise ValueRangeError(self.value, self.size, location, source_line)
        return self

    def render(self) -> str:
        mask = (1 << (self.size * 8)) - 1
        return f"{self.value & mask:0{self.digits}X}"


@dataclass(frozen=True)
class SymbolRef:
    """
    A reference to a label whose address is not known yet.

    Always occupies an address-sized field once resolved.
    """
    name: str

    @property
    def digits(self) -> int:
        return ADDRESS_SIZE * 2

    def render(self) -> str:
        """Placeholder text, used only for diagnostics."""
        return f"#{self.name}#"

    def resolve(self, address: int) -> Literal:
        return Literal(address, ADDRESS_SIZE)


Field = Union[Nibble, Literal, SymbolRef]


# =============================================================================
# Emission Records
# =============================================================================

@dataclass(frozen=True)
class EmissionRecord:
    """
    One unit of output: an address and the fields encoded there.

    Attributes:
        address: Location counter value when the record was emitted
        fields: Encoded fields in output order
        location: Source line that produced the record
        source_line: Text of that line, for error messages
    """
    address: int
    fields: tuple[Field, ...]
    location: Optional[SourceLocation] = None
    source_line: Optional[str] = None

    @property
    def size(self) -> int:
        """Encoded size in bytes."""
        return sum(f.digits for f in self.fields) // 2

    @property
    def symbol_ref(self) -> Optional[SymbolRef]:
        """The pending label reference, if the record has one."""
        for f in self.fields:
            if isinstance(f, SymbolRef):
                return f
        return None

    def is_resolved(self) -> bool:
        return self.symbol_ref is None

    def __str__(self) -> str:
        encoding = "".join(f.render() for f in self.fields)
        return f"0x{self.address:X}: {encoding}"


@dataclass(frozen=True)
class ResolvedRecord:
    """
    A record after the resolution pass: all fields rendered to hex.

    Attributes:
        address: Address of the first byte
        encoding: Fixed-width uppercase hex string
        location: Source line that produced the record
    """
    address: int
    encoding: str
    location: Optional[SourceLocation] = None

    @property
    def size(self) -> int:
        return len(self.encoding) // 2

    @property
    def end_address(self) -> int:
        """First address after the record."""
        return self.address + self.size

    def to_bytes(self) -> bytes:
        return bytes.fromhex(self.encoding)


# =============================================================================
# Emission Log
# =============================================================================

@dataclass
class EmissionLog:
    """
    Ordered, append-only sequence of emission records.

    Usage:
        log = EmissionLog()
        log.emit(0x0, (Literal(0x00, 1),))
        for record in log:
            ...
    """
    records: list[EmissionRecord] = field(default_factory=list)

    def emit(
        self,
        address: int,
        fields: tuple[Field, ...],
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ) -> EmissionRecord:
        """Append a record and return it."""
        record = EmissionRecord(address, fields, location, source_line)
        self.records.append(record)
        return record

    def pending(self) -> list[EmissionRecord]:
        """Records still holding a label reference."""
        return [r for r in self.records if not r.is_resolved()]

    def __iter__(self) -> Iterator[EmissionRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)
