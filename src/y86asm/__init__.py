"""
y86asm - Assembler for the Y86 Teaching Instruction Set
=======================================================

This package assembles a small Y86-style register-machine assembly
dialect into a textual object-code listing:

    0x0:    30F000000005
    0x6:    6003
    0x8:    7000000006

Multi-byte fields are written big-endian (most significant byte first).

Main Components
---------------
- **assembler**: two-pass assembler (y86asm)
    Encodes source lines, then resolves label references

- **config**: assembler options, from defaults or environment variables

- **cli**: the y86asm command-line tool

Quick Start
-----------
Assemble a program:
    >>> from y86asm import Assembler
    >>> asm = Assembler()
    >>> listing = asm.assemble_file("prog.ys")
    >>> asm.write_listing("prog.yo")

Or use the command-line tool:
    $ y86asm prog.ys -o prog.yo

Version History
---------------
1.0.0 - Initial release
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from y86asm.assembler import Assembler, assemble, assemble_file
from y86asm.config import AssemblerConfig
from y86asm.errors import (
    Y86Error,
    AssemblerError,
    AssemblySyntaxError,
    MalformedNumeralError,
    OperandError,
    UnrecognizedLineError,
    UnknownRegisterError,
    UnresolvedSymbolError,
    DuplicateSymbolError,
    DirectiveError,
    ValueRangeError,
    OverlapError,
    SourceLocation,
)

__all__ = [
    "__version__",
    # Assembler
    "Assembler",
    "assemble",
    "assemble_file",
    "AssemblerConfig",
    # Exception hierarchy
    "Y86Error",
    "AssemblerError",
    "AssemblySyntaxError",
    "MalformedNumeralError",
    "OperandError",
    "UnrecognizedLineError",
    "UnknownRegisterError",
    "UnresolvedSymbolError",
    "DuplicateSymbolError",
    "DirectiveError",
    "ValueRangeError",
    "OverlapError",
    "SourceLocation",
]
