"""
Y86 Assembler - Main Interface
==============================

This module provides the main Assembler class, which is the primary
interface for assembling Y86 source code. It drives the two passes and
keeps the results of the last successful run.

Example Usage
-------------
>>> from y86asm.assembler import Assembler
>>>
>>> asm = Assembler()
>>> asm.assemble_string('''
... loop: addl %eax, %ebx
...       jmp loop
... ''')
['0x0:    6003', '0x2:    7000000000']
>>>
>>> asm.write_listing("loop.yo")

Command-Line Usage
------------------
    $ y86asm prog.ys -o prog.yo -s prog.sym

Options:
    -o, --output FILE      Output listing (default: input.yo)
    -s, --symbols FILE     Generate symbol file
    -b, --binary FILE      Generate memory image
    --strict               Fail on unrecognized lines
    --check-overlaps       Fail when emissions overlap
    -v, --verbose          Verbose output
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

from y86asm.config import AssemblerConfig, get_default_config
from y86asm.errors import UnrecognizedLineError
from y86asm.assembler.classifier import (
    ClassifiedLine,
    DirectiveLine,
    InstructionLine,
    Unrecognized,
    classify_line,
)
from y86asm.assembler.directives import DirectiveEvaluator
from y86asm.assembler.emission import ResolvedRecord
from y86asm.assembler.encoder import InstructionEncoder
from y86asm.assembler.listing import format_listing, format_symbols
from y86asm.assembler.resolver import resolve
from y86asm.assembler.state import AssemblyState
from y86asm.assembler.symbols import SymbolTable
from y86asm.assembler.validation import check_overlaps

logger = logging.getLogger(__name__)


class Assembler:
    """
    Main Y86 assembler class.

    Assembly is a two-phase pipeline:

    1. **Encoding pass**: every line is classified, labels are bound to
       the location counter, directives and instructions are encoded into
       emission records. Label operands stay symbolic.
    2. **Resolution pass**: once the symbol table is complete, every
       label reference is replaced by its address.

    Results are only stored when both passes succeed; a failed run
    leaves the results of the previous run untouched.

    Attributes:
        config: Effective configuration (strict mode, overlap checking)
    """

    def __init__(self, config: Optional[AssemblerConfig] = None,
                 strict: Optional[bool] = None,
                 check_overlaps: Optional[bool] = None):
        """
        Initialize the assembler.

        Args:
            config: Base configuration. Defaults to the environment-derived
                    default configuration.
            strict: Override config.strict
            check_overlaps: Override config.check_overlaps
        """
        base = config or get_default_config()
        self.config = AssemblerConfig(
            strict=base.strict if strict is None else strict,
            check_overlaps=base.check_overlaps if check_overlaps is None else check_overlaps,
            listing_suffix=base.listing_suffix,
        )

        self._directives = DirectiveEvaluator()
        self._encoder = InstructionEncoder()

        self._symbols = SymbolTable()
        self._resolved: list[ResolvedRecord] = []
        self._listing: list[str] = []
        self._warnings: list[str] = []

    # =========================================================================
    # Assembly Methods
    # =========================================================================

    def assemble_lines(self, lines: Iterable[str], filename: str = "<input>") -> list[str]:
        """
        Assemble a sequence of source lines.

        Args:
            lines: Source lines (line terminators are ignored)
            filename: Virtual filename for error messages

        Returns:
            Listing lines in program order

        Raises:
            AssemblerError: If assembly fails
        """
        state = AssemblyState()
        warnings: list[str] = []

        for line_number, raw in enumerate(lines, start=1):
            line = classify_line(raw, line_number, filename)
            self._process_line(line, state, warnings)

        logger.debug(
            f"Encoding pass: {len(state.log)} records, "
            f"{len(state.symbols)} labels, end at 0x{state.position:X}"
        )

        resolved = resolve(state.log, state.symbols)

        if self.config.check_overlaps:
            check_overlaps(resolved)

        self._symbols = state.symbols
        self._resolved = resolved
        self._listing = format_listing(resolved)
        self._warnings = warnings

        logger.info(f"Assembled {filename}: {len(self._listing)} records")
        return list(self._listing)

    def assemble_string(self, source: str, filename: str = "<input>") -> list[str]:
        """
        Assemble source code from a string.

        Args:
            source: Assembly source code
            filename: Virtual filename for error messages

        Returns:
            Listing lines in program order

        Raises:
            AssemblerError: If assembly fails
        """
        return self.assemble_lines(source.splitlines(), filename)

    def assemble_file(self, filepath: str | Path) -> list[str]:
        """
        Assemble source code from a file.

        Args:
            filepath: Path to assembly source file

        Returns:
            Listing lines in program order

        Raises:
            AssemblerError: If assembly fails
            FileNotFoundError: If source file not found
        """
        filepath = Path(filepath)
        logger.debug(f"Reading {filepath}")
        return self.assemble_string(filepath.read_text(), str(filepath))

    def assemble(self, source: str, filename: str = "<input>",
                 output_path: str | Path | None = None) -> list[str]:
        """
        Assemble source code and optionally write the listing.

        Args:
            source: Assembly source code
            filename: Virtual filename for error messages
            output_path: Optional listing file path

        Returns:
            Listing lines in program order
        """
        listing = self.assemble_string(source, filename)
        if output_path:
            self.write_listing(output_path)
        return listing

    def _process_line(self, line: ClassifiedLine, state: AssemblyState,
                      warnings: list[str]) -> None:
        """Run one classified line through the encoding pass."""
        if line.label:
            state.symbols.define(line.label, state.position, line.location, line.text)

        body = line.body
        if isinstance(body, DirectiveLine):
            self._directives.evaluate(line, state)
        elif isinstance(body, InstructionLine):
            self._encoder.encode(line, state)
        elif isinstance(body, Unrecognized):
            if self.config.strict:
                raise UnrecognizedLineError(
                    body.reason,
                    location=line.location,
                    source_line=line.text,
                    hint="remove the line or fix the directive/instruction name",
                )
            message = f"{line.location}: skipped line: {body.reason}"
            logger.warning(message)
            warnings.append(message)

    # =========================================================================
    # Output Methods
    # =========================================================================

    def get_listing(self) -> str:
        """
        Get the object-code listing as a string.

        Returns:
            One line per record, each terminated by a newline
        """
        return "".join(f"{line}\n" for line in self._listing)

    def get_listing_lines(self) -> list[str]:
        return list(self._listing)

    def get_records(self) -> list[ResolvedRecord]:
        """Get the resolved records of the last run, in program order."""
        return list(self._resolved)

    def get_symbols(self) -> dict[str, int]:
        """
        Get the symbol table.

        Returns:
            Dictionary mapping label names (lowercase) to addresses
        """
        return self._symbols.as_dict()

    def get_warnings(self) -> list[str]:
        """Get the lines skipped during the last run."""
        return list(self._warnings)

    def get_memory_image(self) -> bytes:
        """
        Lay out every record's bytes at its address.

        The image starts at address 0 and ends at the last byte written;
        gaps are zero. Where records overlap, the later one wins.
        """
        if not self._resolved:
            return b""

        end = max(record.end_address for record in self._resolved)
        image = bytearray(end)
        for record in self._resolved:
            image[record.address:record.end_address] = record.to_bytes()
        return bytes(image)

    def write_listing(self, filepath: str | Path) -> None:
        """Write the object-code listing file."""
        Path(filepath).write_text(self.get_listing())
        logger.info(f"Wrote listing to {filepath}")

    def write_symbols(self, filepath: str | Path) -> None:
        """
        Write symbol table file.

        Format: name address (one per line)
        """
        lines = ["# Symbol table", "# Generated by y86asm"]
        lines.extend(format_symbols(self._symbols))
        Path(filepath).write_text("\n".join(lines) + "\n")
        logger.info(f"Wrote symbols to {filepath}")

    def write_binary(self, filepath: str | Path) -> int:
        """
        Write the memory image (see get_memory_image).

        Returns:
            Number of bytes written
        """
        image = self.get_memory_image()
        Path(filepath).write_bytes(image)
        logger.info(f"Wrote {len(image)} bytes to {filepath}")
        return len(image)


# =============================================================================
# Convenience Functions
# =============================================================================

def assemble(source: str, filename: str = "<input>", strict: Optional[bool] = None) -> list[str]:
    """
    Convenience function to assemble source code.

    Args:
        source: Assembly source code
        filename: Virtual filename for errors
        strict: Fail on unrecognized lines (default: from configuration)

    Returns:
        Listing lines in program order

    Raises:
        AssemblerError: If assembly fails
    """
    asm = Assembler(strict=strict)
    return asm.assemble_string(source, filename)


def assemble_file(filepath: str | Path, strict: Optional[bool] = None) -> list[str]:
    """
    Convenience function to assemble a file.

    Args:
        filepath: Path to source file
        strict: Fail on unrecognized lines (default: from configuration)

    Returns:
        Listing lines in program order

    Raises:
        AssemblerError: If assembly fails
    """
    asm = Assembler(strict=strict)
    return asm.assemble_file(filepath)
