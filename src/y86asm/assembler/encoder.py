"""
Y86 Instruction Encoder
=======================

Turns classified instruction lines into emission records. Each
instruction produces exactly one record: the opcode byte followed by the
operand fields of its family (see opcodes.py for the layouts).

Operand Forms
-------------
| Form           | Example        | Encoded as                      |
|----------------|----------------|---------------------------------|
| Register       | %eax           | one nibble (register code)      |
| Immediate      | $5, $0x10, 5   | 4-byte literal                  |
| Label          | loop           | 4-byte SymbolRef (resolved later)|
| Memory         | 8(%ebp)        | register nibble + displacement  |
| Memory, no D   | (%ebp)         | displacement 0                  |

Numeric operands are rendered immediately; label operands are left as
SymbolRef fields for the resolution pass.

Example
-------
    irmovl $5, %eax     -> 30 F 0 00000005     (30F000000005)
    rmmovl %ecx, 8(%ebp)-> 40 1 5 00000008     (401500000008)
    jmp loop            -> 70 #loop#
"""

import logging
import re

from y86asm.errors import OperandError, UnknownRegisterError
from y86asm.assembler.classifier import ClassifiedLine, InstructionLine
from y86asm.assembler.emission import (
    ADDRESS_SIZE,
    EmissionRecord,
    Field,
    Literal,
    Nibble,
    SymbolRef,
)
from y86asm.assembler.numbers import is_symbol_reference, parse_numeral
from y86asm.assembler.opcodes import (
    NO_REGISTER,
    REGISTERS,
    InstructionFamily,
    get_instruction_info,
    get_register_code,
)
from y86asm.assembler.state import AssemblyState

logger = logging.getLogger(__name__)


# displacement(register), displacement may be empty
_MEMORY_OPERAND_RE = re.compile(r"^(.*)\(\s*(%[a-z0-9]+)\s*\)$")


class InstructionEncoder:
    """
    Encodes instructions into an AssemblyState's emission log.

    Usage:
        encoder = InstructionEncoder()
        record = encoder.encode(line, state)
    """

    def encode(self, line: ClassifiedLine, state: AssemblyState) -> EmissionRecord:
        """
        Encode one instruction line at the current location counter.

        Args:
            line: Classified line whose body is an InstructionLine
            state: State of the current encoding pass

        Returns:
            The emitted record

        Raises:
            OperandError: Wrong operand count or malformed memory operand
            UnknownRegisterError: Operand names an unknown register
            MalformedNumeralError: Numeric operand is not a valid numeral
            ValueRangeError: Numeric operand does not fit 32 bits
        """
        inst = line.body
        if not isinstance(inst, InstructionLine):
            raise TypeError(f"expected an instruction line, got {type(inst).__name__}")

        info = get_instruction_info(inst.mnemonic)
        if info is None:
            raise OperandError(
                f"unknown instruction '{inst.mnemonic}'",
                location=line.location,
                source_line=line.text,
            )

        if len(inst.operands) != info.operand_count:
            raise OperandError(
                f"'{inst.mnemonic}' takes {info.operand_count} operand(s), "
                f"got {len(inst.operands)}",
                location=line.location,
                source_line=line.text,
            )

        opcode = Literal(info.opcode, 1)
        body = self._encode_operands(info.family, inst.operands, line)
        record = state.emit((opcode, *body), line.location, line.text)

        logger.debug(f"{line.location}: {inst.mnemonic} at 0x{record.address:X} ({record.size} bytes)")
        return record

    # =========================================================================
    # Operand Layouts
    # =========================================================================

    def _encode_operands(
        self,
        family: InstructionFamily,
        operands: tuple[str, ...],
        line: ClassifiedLine,
    ) -> tuple[Field, ...]:
        if family == InstructionFamily.NO_OPERAND:
            return ()

        if family == InstructionFamily.REG_REG:
            return (self._register(operands[0], line), self._register(operands[1], line))

        if family == InstructionFamily.IMMEDIATE:
            return (
                Nibble(NO_REGISTER),
                self._register(operands[1], line),
                self._value(operands[0], line),
            )

        if family == InstructionFamily.REG_TO_MEM:
            displacement, base = self._memory(operands[1], line)
            return (self._register(operands[0], line), base, displacement)

        if family == InstructionFamily.MEM_TO_REG:
            displacement, base = self._memory(operands[0], line)
            return (self._register(operands[1], line), base, displacement)

        if family == InstructionFamily.BRANCH:
            return (self._value(operands[0], line),)

        # InstructionFamily.STACK
        return (self._register(operands[0], line), Nibble(NO_REGISTER))

    # =========================================================================
    # Operand Fields
    # =========================================================================

    def _register(self, token: str, line: ClassifiedLine) -> Nibble:
        """Encode a register operand as its code nibble."""
        code = get_register_code(token)
        if code is None:
            raise UnknownRegisterError(
                token,
                location=line.location,
                source_line=line.text,
                valid_registers=list(REGISTERS),
            )
        return Nibble(code)

    def _value(self, token: str, line: ClassifiedLine) -> Field:
        """
        Encode a 4-byte value, displacement or target.

        Identifiers become label references; everything else must be a
        numeral. An empty token means 0.
        """
        if is_symbol_reference(token):
            return SymbolRef(token.lower())
        value = parse_numeral(token, line.location, line.text)
        return Literal(value, ADDRESS_SIZE).check_range(line.location, line.text)

    def _memory(self, token: str, line: ClassifiedLine) -> tuple[Field, Nibble]:
        """Split 'D(%reg)' into its displacement field and base register."""
        match = _MEMORY_OPERAND_RE.match(token)
        if not match:
            raise OperandError(
                f"expected memory operand 'displacement(register)', got '{token}'",
                location=line.location,
                source_line=line.text,
            )
        displacement = match.group(1).strip()
        return self._value(displacement, line), self._register(match.group(2), line)
