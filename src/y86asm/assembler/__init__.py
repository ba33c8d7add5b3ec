"""
Y86 Assembler
=============

This package converts Y86 assembly source into a textual object-code
listing of address / hex-encoding pairs.

Main Components
---------------
- **Assembler**: Main class that drives both passes
- **classify_line**: Decides whether a line is a label, directive or instruction
- **DirectiveEvaluator**: Applies .pos, .align, .long and .quad
- **InstructionEncoder**: Encodes instructions into typed fields
- **resolve**: Replaces label references with addresses
- **format_listing**: Renders the final listing

Assembly Process
----------------
1. **Encoding pass**:
   - Classify each line, bind labels to the location counter
   - Encode directives and instructions into the emission log, leaving
     label operands as pending references

2. **Resolution pass**:
   - Substitute every pending reference with its label's address
   - Optionally check that no two emissions overlap

Example Usage
-------------
>>> from y86asm.assembler import Assembler
>>> asm = Assembler()
>>> asm.assemble_string("irmovl $5, %eax")
['0x0:    30F000000005']
"""

from y86asm.assembler.assembler import Assembler, assemble, assemble_file
from y86asm.assembler.classifier import (
    ClassifiedLine,
    DirectiveLine,
    InstructionLine,
    Unrecognized,
    classify_line,
)
from y86asm.assembler.directives import DirectiveEvaluator
from y86asm.assembler.emission import (
    EmissionLog,
    EmissionRecord,
    Literal,
    Nibble,
    ResolvedRecord,
    SymbolRef,
)
from y86asm.assembler.encoder import InstructionEncoder
from y86asm.assembler.listing import format_listing, format_record, format_symbols
from y86asm.assembler.numbers import is_symbol_reference, parse_numeral
from y86asm.assembler.opcodes import (
    InstructionFamily,
    InstructionInfo,
    OPCODE_TABLE,
    MNEMONICS,
    REGISTERS,
)
from y86asm.assembler.resolver import resolve
from y86asm.assembler.state import AssemblyState
from y86asm.assembler.symbols import Symbol, SymbolTable
from y86asm.assembler.validation import Overlap, check_overlaps, find_overlaps

__all__ = [
    # Main class and functions
    "Assembler",
    "assemble",
    "assemble_file",
    # Classifier
    "ClassifiedLine",
    "DirectiveLine",
    "InstructionLine",
    "Unrecognized",
    "classify_line",
    # Encoding
    "AssemblyState",
    "DirectiveEvaluator",
    "InstructionEncoder",
    "EmissionLog",
    "EmissionRecord",
    "Literal",
    "Nibble",
    "SymbolRef",
    # Resolution and output
    "ResolvedRecord",
    "resolve",
    "format_listing",
    "format_record",
    "format_symbols",
    # Symbols
    "Symbol",
    "SymbolTable",
    # Numerals
    "parse_numeral",
    "is_symbol_reference",
    # Opcodes
    "InstructionFamily",
    "InstructionInfo",
    "OPCODE_TABLE",
    "MNEMONICS",
    "REGISTERS",
    # Validation
    "Overlap",
    "check_overlaps",
    "find_overlaps",
]
