"""
Placeholder Resolution
======================

Second pass of the assembler. Runs once, after every source line has
been encoded and the symbol table is complete, and replaces each
SymbolRef field with the address of its label.

The symbol table is only read here. A label that is still undefined at
this point is never defined anywhere in the source, so the run fails
with UnresolvedSymbolError.
"""

import logging

from y86asm.errors import UnresolvedSymbolError
from y86asm.assembler.emission import EmissionLog, EmissionRecord, ResolvedRecord, SymbolRef
from y86asm.assembler.symbols import SymbolTable

logger = logging.getLogger(__name__)


def resolve_record(record: EmissionRecord, symbols: SymbolTable) -> ResolvedRecord:
    """
    Render one record to hex, substituting its label reference.

    Raises:
        UnresolvedSymbolError: If the referenced label is not defined
        ValueRangeError: If the label address does not fit the field
    """
    parts = []
    for f in record.fields:
        if isinstance(f, SymbolRef):
            address = symbols.lookup(f.name)
            if address is None:
                raise UnresolvedSymbolError(
                    f.name,
                    location=record.location,
                    source_line=record.source_line,
                    similar_symbols=symbols.find_similar(f.name),
                )
            f = f.resolve(address).check_range(record.location, record.source_line)
        parts.append(f.render())
    return ResolvedRecord(record.address, "".join(parts), record.location)


def resolve(log: EmissionLog, symbols: SymbolTable) -> list[ResolvedRecord]:
    """
    Resolve every record of the emission log, in program order.

    Args:
        log: Complete emission log of the encoding pass
        symbols: Complete symbol table

    Returns:
        Resolved records in the same order as the log

    Raises:
        UnresolvedSymbolError: On the first reference to an undefined label
    """
    resolved = [resolve_record(record, symbols) for record in log]
    logger.debug(f"Resolved {len(resolved)} records ({len(log.pending())} with label references)")
    return resolved
