"""
y86asm Error Hierarchy
======================

This module defines the exception hierarchy for the Y86 assembler.
All exceptions inherit from Y86Error, allowing callers to catch every
assembler-related error with a single except clause if desired.

Exception Hierarchy
-------------------
Y86Error (base)
└── AssemblerError (assembler-related)
    ├── AssemblySyntaxError - syntax errors in source
    │   ├── MalformedNumeralError - numeral is not valid decimal/hex
    │   ├── OperandError - wrong operand count or shape
    │   └── UnrecognizedLineError - line is neither directive nor instruction
    ├── UnknownRegisterError - operand names no known register
    ├── UnresolvedSymbolError - reference to a label never defined
    ├── DuplicateSymbolError - label defined multiple times
    ├── DirectiveError - invalid directive argument
    ├── ValueRangeError - literal does not fit its field
    └── OverlapError - two emissions occupy the same bytes

Every error is fatal to an assembly run. No partial listing is produced
once one of these has been raised.

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class Y86Error(Exception):
    """
    Base exception for all y86asm errors.

        try:
            assembler.assemble_file("program.ys")
        except Y86Error as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int = 1

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Assembler Exceptions
# =============================================================================

class AssemblerError(Y86Error):
    """
    Base exception for all assembler-related errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The actual source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            prog.ys:7:1: error: unresolved symbol 'lop'
                jmp lop
                ^
            hint: did you mean 'loop'?
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class AssemblySyntaxError(AssemblerError):
    """
    Syntax error in assembly source code.

    Raised when a line cannot be broken into the parts its directive or
    instruction requires.
    """
    pass


class MalformedNumeralError(AssemblySyntaxError):
    """
    A numeral token is not valid decimal or hexadecimal.

    Numerals may carry a leading '$'. A '0x' prefix selects base 16,
    otherwise the token must be a signed base-10 integer.

    Examples:
        irmovl $0xZZ, %eax   ; 'ZZ' is not hexadecimal
        .long 12a            ; '12a' is not decimal
    """

    def __init__(
        self,
        token: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.token = token
        super().__init__(
            f"malformed numeral '{token}'",
            location=location,
            hint="use decimal (42, -7) or hexadecimal with a 0x prefix (0x2a)",
            source_line=source_line,
        )


class OperandError(AssemblySyntaxError):
    """
    Wrong number or shape of operands for an instruction.

    Examples:
        addl %eax            ; two registers expected
        rmmovl %eax, 8       ; memory operand needs '(register)'
    """
    pass


class UnrecognizedLineError(AssemblySyntaxError):
    """
    A line is neither a directive nor an instruction.

    Only raised in strict mode. By default such lines are skipped and
    reported as warnings.
    """
    pass


class UnknownRegisterError(AssemblerError):
    """
    An operand naming a register is not one of the eight known registers.

    Valid registers are %eax, %ecx, %edx, %ebx, %esp, %ebp, %esi and %edi.
    """

    def __init__(
        self,
        register: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
        valid_registers: Optional[list[str]] = None,
    ):
        self.register = register
        self.valid_registers = valid_registers or []

        hint = None
        if self.valid_registers:
            hint = f"valid registers: {', '.join(self.valid_registers)}"

        super().__init__(
            f"unknown register '{register}'",
            location=location,
            hint=hint,
            source_line=source_line,
        )


class UnresolvedSymbolError(AssemblerError):
    """
    Reference to a label that is never defined.

    Raised during the resolution pass, after the whole source has been
    scanned, so forward references never trigger it. The resolver
    suggests similarly-named labels to help catch typos.
    """

    def __init__(
        self,
        symbol: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
        similar_symbols: Optional[list[str]] = None,
    ):
        self.symbol = symbol
        self.similar_symbols = similar_symbols or []

        if not hint and self.similar_symbols:
            suggestions = ", ".join(f"'{s}'" for s in self.similar_symbols[:3])
            hint = f"did you mean {suggestions}?"

        super().__init__(
            f"unresolved symbol '{symbol}'",
            location=location,
            hint=hint,
            source_line=source_line,
        )


class DuplicateSymbolError(AssemblerError):
    """
    Label defined multiple times.

    Includes the location of the original definition in the hint.
    """

    def __init__(
        self,
        symbol: str,
        location: Optional[SourceLocation] = None,
        original_location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.symbol = symbol
        self.original_location = original_location

        hint = None
        if original_location:
            hint = f"'{symbol}' was first defined at {original_location}"

        super().__init__(
            f"duplicate symbol '{symbol}'",
            location=location,
            hint=hint,
            source_line=source_line,
        )


class DirectiveError(AssemblerError):
    """
    Error in an assembler directive.

    Examples:
        .align 0     ; alignment must be positive
        .pos -4      ; location counter cannot be negative
    """
    pass


class ValueRangeError(AssemblerError):
    """
    A literal does not fit in the field it is written to.

    Fields accept any value in either the signed or the unsigned range
    of their width (32 bits for .long and instruction operands, 64 bits
    for .quad).
    """

    def __init__(
        self,
        value: int,
        size: int,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.value = value
        self.size = size
        bits = size * 8
        super().__init__(
            f"value {value} does not fit in {bits} bits",
            location=location,
            hint=f"range is {-(1 << (bits - 1))} to {(1 << bits) - 1}",
            source_line=source_line,
        )


class OverlapError(AssemblerError):
    """
    Two emissions occupy overlapping addresses.

    Only raised when overlap checking is enabled; a '.pos' that moves the
    location counter back over emitted code is otherwise accepted.
    """
    pass
