"""
Listing Formatter
=================

Renders resolved records as the object-code listing:

    0x0:    30F000000005
    0x6:    6003
    0x100:    00

The address is hexadecimal with a lowercase '0x' prefix, no padding and
no leading zeros; four spaces separate it from the encoding. Lines
appear in emission order, not sorted by address.
"""

from typing import Iterable

from y86asm.assembler.emission import ResolvedRecord
from y86asm.assembler.symbols import SymbolTable


LISTING_SEPARATOR = ":    "


def format_record(record: ResolvedRecord) -> str:
    """Format a single listing line."""
    return f"0x{record.address:X}{LISTING_SEPARATOR}{record.encoding}"


def format_listing(records: Iterable[ResolvedRecord]) -> list[str]:
    """Format resolved records as listing lines, in the given order."""
    return [format_record(record) for record in records]


def format_symbols(symbols: SymbolTable) -> list[str]:
    """
    Format the symbol table, one 'name 0xADDR' line per label.

    Sorted by address, then by name.
    """
    ordered = sorted(symbols, key=lambda s: (s.value, s.name))
    return [f"{sym.name} 0x{sym.value:X}" for sym in ordered]
