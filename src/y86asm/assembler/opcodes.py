"""
Y86 Instruction Set Definition
==============================

This module defines the register file and the instruction set of the
Y86 dialect accepted by the assembler: opcodes, operand layouts and
instruction sizes.

Opcode Byte
-----------
Every instruction starts with one opcode byte. The high nibble selects
the instruction family, the low nibble a function code for families
that have variants (conditional moves, ALU operations, jumps):

    rrmovl = $20, cmovle = $21 ... cmovg = $26
    addl   = $60, subl   = $61, andl = $62, xorl = $63
    jmp    = $70, jle    = $71 ... jg  = $76

Operand Layouts
---------------
| Family       | Body after opcode             | Size |
|--------------|-------------------------------|------|
| NO_OPERAND   | -                             | 1    |
| REG_REG      | rA, rB                        | 2    |
| IMMEDIATE    | F, rB, 4-byte value           | 6    |
| REG_TO_MEM   | rA, rB, 4-byte displacement   | 6    |
| MEM_TO_REG   | rA, rB, 4-byte displacement   | 6    |
| BRANCH       | 4-byte target                 | 5    |
| STACK        | rA, F                         | 2    |

Register nibbles and the 'F' filler are half a byte each. Multi-byte
fields are rendered big-endian (most significant byte first), unlike
the little-endian layout of the classic Y86 reference machine.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


# =============================================================================
# Register Table
# =============================================================================

REGISTERS: dict[str, int] = {
    "%eax": 0x0,
    "%ecx": 0x1,
    "%edx": 0x2,
    "%ebx": 0x3,
    "%esp": 0x4,
    "%ebp": 0x5,
    "%esi": 0x6,
    "%edi": 0x7,
}

# Nibble written where an instruction has no register in that slot
NO_REGISTER = 0xF


def get_register_code(name: str) -> Optional[int]:
    """
    Look up the 3-bit code of a register.

    Args:
        name: Register mnemonic including the '%' (e.g., "%eax")

    Returns:
        The register code, or None if the name is not a register
    """
    return REGISTERS.get(name.lower())


# =============================================================================
# Instruction Families
# =============================================================================

class InstructionFamily(Enum):
    """
    Operand layout classes of the instruction set.

    Each family determines the operands an instruction takes and the
    fields that follow its opcode byte.
    """
    NO_OPERAND = auto()  # halt, nop, ret
    REG_REG = auto()     # rrmovl, cmovXX, OPl
    IMMEDIATE = auto()   # irmovl V, rB
    REG_TO_MEM = auto()  # rmmovl rA, D(rB)
    MEM_TO_REG = auto()  # mrmovl D(rB), rA
    BRANCH = auto()      # jXX Dest, call Dest
    STACK = auto()       # pushl rA, popl rA

    def __str__(self) -> str:
        """Return human-readable name for error messages."""
        return self.name.lower().replace("_", "-")


# Operands each family expects
OPERAND_COUNTS: dict[InstructionFamily, int] = {
    InstructionFamily.NO_OPERAND: 0,
    InstructionFamily.REG_REG: 2,
    InstructionFamily.IMMEDIATE: 2,
    InstructionFamily.REG_TO_MEM: 2,
    InstructionFamily.MEM_TO_REG: 2,
    InstructionFamily.BRANCH: 1,
    InstructionFamily.STACK: 1,
}

# Total encoded size in bytes for each family
FAMILY_SIZES: dict[InstructionFamily, int] = {
    InstructionFamily.NO_OPERAND: 1,
    InstructionFamily.REG_REG: 2,
    InstructionFamily.IMMEDIATE: 6,
    InstructionFamily.REG_TO_MEM: 6,
    InstructionFamily.MEM_TO_REG: 6,
    InstructionFamily.BRANCH: 5,
    InstructionFamily.STACK: 2,
}


# =============================================================================
# Instruction Information
# =============================================================================

@dataclass(frozen=True)
class InstructionInfo:
    """
    Encoding information for one mnemonic.

    Attributes:
        opcode: The full opcode byte (family nibble + function nibble)
        family: Operand layout of the instruction
    """
    opcode: int
    family: InstructionFamily

    @property
    def size(self) -> int:
        """Total instruction size in bytes."""
        return FAMILY_SIZES[self.family]

    @property
    def operand_count(self) -> int:
        """Number of comma-separated operands the instruction takes."""
        return OPERAND_COUNTS[self.family]

    def __repr__(self) -> str:
        return f"InstructionInfo(opcode=${self.opcode:02X}, family={self.family.name}, size={self.size})"


# =============================================================================
# Opcode Table
# =============================================================================

OPCODE_TABLE: dict[str, InstructionInfo] = {
    # No-operand instructions
    "halt": InstructionInfo(0x00, InstructionFamily.NO_OPERAND),
    "nop": InstructionInfo(0x10, InstructionFamily.NO_OPERAND),
    "ret": InstructionInfo(0x90, InstructionFamily.NO_OPERAND),

    # Register moves, unconditional and conditional
    "rrmovl": InstructionInfo(0x20, InstructionFamily.REG_REG),
    "cmovle": InstructionInfo(0x21, InstructionFamily.REG_REG),
    "cmovl": InstructionInfo(0x22, InstructionFamily.REG_REG),
    "cmove": InstructionInfo(0x23, InstructionFamily.REG_REG),
    "cmovne": InstructionInfo(0x24, InstructionFamily.REG_REG),
    "cmovge": InstructionInfo(0x25, InstructionFamily.REG_REG),
    "cmovg": InstructionInfo(0x26, InstructionFamily.REG_REG),

    # Immediate and memory moves
    "irmovl": InstructionInfo(0x30, InstructionFamily.IMMEDIATE),
    "rmmovl": InstructionInfo(0x40, InstructionFamily.REG_TO_MEM),
    "mrmovl": InstructionInfo(0x50, InstructionFamily.MEM_TO_REG),

    # ALU operations
    "addl": InstructionInfo(0x60, InstructionFamily.REG_REG),
    "subl": InstructionInfo(0x61, InstructionFamily.REG_REG),
    "andl": InstructionInfo(0x62, InstructionFamily.REG_REG),
    "xorl": InstructionInfo(0x63, InstructionFamily.REG_REG),

    # Jumps
    "jmp": InstructionInfo(0x70, InstructionFamily.BRANCH),
    "jle": InstructionInfo(0x71, InstructionFamily.BRANCH),
    "jl": InstructionInfo(0x72, InstructionFamily.BRANCH),
    "je": InstructionInfo(0x73, InstructionFamily.BRANCH),
    "jne": InstructionInfo(0x74, InstructionFamily.BRANCH),
    "jge": InstructionInfo(0x75, InstructionFamily.BRANCH),
    "jg": InstructionInfo(0x76, InstructionFamily.BRANCH),

    # Procedure call
    "call": InstructionInfo(0x80, InstructionFamily.BRANCH),

    # Stack
    "pushl": InstructionInfo(0xA0, InstructionFamily.STACK),
    "popl": InstructionInfo(0xB0, InstructionFamily.STACK),
}

MNEMONICS: frozenset[str] = frozenset(OPCODE_TABLE)


# =============================================================================
# Directives
# =============================================================================
# Directive keyword -> bytes emitted (0 for counter-only directives)

DIRECTIVE_SIZES: dict[str, int] = {
    ".pos": 0,
    ".align": 0,
    ".long": 4,
    ".quad": 8,
}

DIRECTIVES: frozenset[str] = frozenset(DIRECTIVE_SIZES)


# =============================================================================
# Lookup Functions
# =============================================================================

def get_instruction_info(mnemonic: str) -> Optional[InstructionInfo]:
    """
    Look up instruction information by mnemonic.

    Args:
        mnemonic: The instruction mnemonic (e.g., "irmovl")

    Returns:
        InstructionInfo if found, None if the mnemonic is unknown
    """
    return OPCODE_TABLE.get(mnemonic.lower())


def is_valid_instruction(mnemonic: str) -> bool:
    """Check if a mnemonic belongs to the instruction set."""
    return mnemonic.lower() in MNEMONICS


def is_directive(keyword: str) -> bool:
    """Check if a keyword is one of the assembler directives."""
    return keyword.lower() in DIRECTIVES
