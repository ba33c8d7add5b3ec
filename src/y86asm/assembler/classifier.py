"""
Y86 Line Classifier
===================

This module decides what each source line is. Lines are independent:
there are no multi-line constructs and no comment syntax.

Line Grammar
------------
    [label:] [directive | instruction]

1. **Label**: an identifier followed by a colon at the start of the line
   ```
   loop:
   loop: addl %eax, %ebx
   ```

2. **Directive**: a keyword with exactly one numeric argument
   ```
   .pos 0x100
   .align 4
   .long 0x12345678
   .quad -1
   ```

3. **Instruction**: a mnemonic with zero, one or two comma-separated
   operands
   ```
   halt
   pushl %ebp
   irmovl $5, %eax
   mrmovl 8(%ebp), %edx
   ```

The whole line is lowercased before classification, so labels,
mnemonics and registers are case-insensitive.

Anything that is neither a directive nor an instruction after the label
has been removed is classified as Unrecognized. The classifier never
raises for it; the caller decides whether to warn or fail.
"""

from dataclasses import dataclass
import re
from typing import Optional, Union

from y86asm.errors import SourceLocation
from y86asm.assembler.numbers import IDENTIFIER_PATTERN
from y86asm.assembler.opcodes import is_directive, is_valid_instruction


_LABEL_RE = re.compile(rf"^({IDENTIFIER_PATTERN}):")
_DIRECTIVE_RE = re.compile(r"^(\.[a-z]+)(?:\s+(.*))?$")
_INSTRUCTION_RE = re.compile(r"^([a-z]+)(?:\s+(.*))?$")


# =============================================================================
# Classification Results
# =============================================================================

@dataclass(frozen=True)
class DirectiveLine:
    """
    Directive with its single argument.

    Attributes:
        keyword: Directive name including the dot (e.g., ".pos")
        argument: Raw argument token
    """
    keyword: str
    argument: str


@dataclass(frozen=True)
class InstructionLine:
    """
    Instruction with its operand tokens.

    Attributes:
        mnemonic: Instruction mnemonic (lowercase)
        operands: Operand tokens, stripped, in source order
    """
    mnemonic: str
    operands: tuple[str, ...] = ()


@dataclass(frozen=True)
class Unrecognized:
    """
    A line that matches neither directive nor instruction syntax.

    Attributes:
        text: The unmatched remainder of the line
        reason: Why it was not recognized
    """
    text: str
    reason: str


LineBody = Union[DirectiveLine, InstructionLine, Unrecognized]


@dataclass(frozen=True)
class ClassifiedLine:
    """
    Result of classifying one source line.

    Attributes:
        location: Where the line is in the source
        text: The normalized (stripped, lowercased) line
        label: Label defined on this line, if any
        body: What follows the label; None for blank or label-only lines
    """
    location: SourceLocation
    text: str
    label: Optional[str] = None
    body: Optional[LineBody] = None

    @property
    def is_unrecognized(self) -> bool:
        return isinstance(self.body, Unrecognized)


# =============================================================================
# Classifier
# =============================================================================

def classify_line(
    line: str,
    line_number: int = 1,
    filename: str = "<input>",
) -> ClassifiedLine:
    """
    Classify a single source line.

    Args:
        line: Raw source line
        line_number: 1-based line number for error reporting
        filename: Source name for error reporting

    Returns:
        ClassifiedLine describing the label (if any) and the body

    Example:
        >>> result = classify_line("loop: jmp loop")
        >>> result.label
        'loop'
        >>> result.body
        InstructionLine(mnemonic='jmp', operands=('loop',))
    """
    text = line.strip().lower()
    location = SourceLocation(filename, line_number, 1)

    label = None
    remainder = text
    match = _LABEL_RE.match(remainder)
    if match:
        label = match.group(1)
        remainder = remainder[match.end():].strip()

    if not remainder:
        return ClassifiedLine(location, text, label, None)

    return ClassifiedLine(location, text, label, _classify_body(remainder))


def _classify_body(text: str) -> LineBody:
    """Match the label-free remainder against directive, then instruction syntax."""
    match = _DIRECTIVE_RE.match(text)
    if match:
        keyword, argument = match.group(1), (match.group(2) or "").strip()
        if not is_directive(keyword):
            return Unrecognized(text, f"unknown directive '{keyword}'")
        if not argument or len(argument.split()) != 1:
            return Unrecognized(text, f"'{keyword}' takes exactly one argument")
        return DirectiveLine(keyword, argument)

    match = _INSTRUCTION_RE.match(text)
    if match and is_valid_instruction(match.group(1)):
        rest = (match.group(2) or "").strip()
        operands = tuple(op.strip() for op in rest.split(",")) if rest else ()
        return InstructionLine(match.group(1), operands)

    mnemonic = text.split()[0]
    return Unrecognized(text, f"unknown instruction '{mnemonic}'")
