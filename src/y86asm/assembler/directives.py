"""
Directive Evaluation
====================

Directives move the location counter or place literal data. Each takes
exactly one numeric argument; labels are not accepted.

| Directive | Effect                                          | Emits    |
|-----------|-------------------------------------------------|----------|
| .pos V    | location counter := V                           | nothing  |
| .align V  | round location counter up to a multiple of V    | nothing  |
| .long V   | 32-bit V at the current address, advance 4      | 8 digits |
| .quad V   | 64-bit V at the current address, advance 8      | 16 digits|
"""

import logging
from typing import Optional

from y86asm.errors import DirectiveError
from y86asm.assembler.classifier import ClassifiedLine, DirectiveLine
from y86asm.assembler.emission import EmissionRecord, Literal
from y86asm.assembler.numbers import parse_numeral
from y86asm.assembler.opcodes import DIRECTIVE_SIZES
from y86asm.assembler.state import AssemblyState

logger = logging.getLogger(__name__)


class DirectiveEvaluator:
    """
    Applies directives to an AssemblyState.

    Usage:
        evaluator = DirectiveEvaluator()
        evaluator.evaluate(line, state)
    """

    def evaluate(self, line: ClassifiedLine, state: AssemblyState) -> Optional[EmissionRecord]:
        """
        Apply one directive line.

        Args:
            line: Classified line whose body is a DirectiveLine
            state: State of the current encoding pass

        Returns:
            The emitted record for .long/.quad, None for .pos/.align

        Raises:
            MalformedNumeralError: If the argument is not a number
            DirectiveError: For a negative .pos or a non-positive .align
            ValueRangeError: If a .long/.quad value does not fit
        """
        directive = line.body
        if not isinstance(directive, DirectiveLine):
            raise TypeError(f"expected a directive line, got {type(directive).__name__}")

        value = parse_numeral(directive.argument, line.location, line.text)
        handler = {
            ".pos": self._pos,
            ".align": self._align,
            ".long": self._data,
            ".quad": self._data,
        }[directive.keyword]
        return handler(directive.keyword, value, line, state)

    def _pos(self, keyword: str, value: int, line: ClassifiedLine,
             state: AssemblyState) -> None:
        state.set_position(value, line.location, line.text)
        logger.debug(f"{line.location}: .pos -> 0x{value:X}")

    def _align(self, keyword: str, value: int, line: ClassifiedLine,
               state: AssemblyState) -> None:
        if value <= 0:
            raise DirectiveError(
                f"alignment must be positive, got {value}",
                location=line.location,
                source_line=line.text,
            )
        remainder = state.position % value
        if remainder:
            state.advance(value - remainder)
        logger.debug(f"{line.location}: .align {value} -> 0x{state.position:X}")

    def _data(self, keyword: str, value: int, line: ClassifiedLine,
              state: AssemblyState) -> EmissionRecord:
        size = DIRECTIVE_SIZES[keyword]
        literal = Literal(value, size).check_range(line.location, line.text)
        record = state.emit((literal,), line.location, line.text)
        logger.debug(f"{line.location}: {keyword} at 0x{record.address:X}")
        return record
