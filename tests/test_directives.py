# =============================================================================
# test_directives.py - Directive Evaluator Unit Tests
# =============================================================================
# Tests for .pos, .align, .long and .quad.
#
# Test coverage includes:
#   - Location counter updates
#   - Alignment arithmetic
#   - Fixed-width data encodings
#   - Invalid directive arguments
# =============================================================================

import pytest

from y86asm.assembler.classifier import classify_line
from y86asm.assembler.directives import DirectiveEvaluator
from y86asm.assembler.state import AssemblyState
from y86asm.assembler.encoder import InstructionEncoder
from y86asm.errors import DirectiveError, MalformedNumeralError, ValueRangeError


# =============================================================================
# Helper Functions
# =============================================================================

def evaluate(source: str, position: int = 0):
    """
    Apply one directive line to a fresh state.

    Returns:
        (emitted record or None, state)
    """
    state = AssemblyState(position=position)
    record = DirectiveEvaluator().evaluate(classify_line(source), state)
    return record, state


# =============================================================================
# .pos
# =============================================================================

class TestPos:
    """Test absolute location counter changes."""

    def test_sets_position(self):
        record, state = evaluate(".pos 0x100")
        assert record is None
        assert state.position == 0x100
        assert len(state.log) == 0

    def test_can_move_backwards(self):
        _, state = evaluate(".pos 4", position=0x40)
        assert state.position == 4

    def test_decimal(self):
        _, state = evaluate(".pos 32")
        assert state.position == 32

    def test_negative_rejected(self):
        with pytest.raises(DirectiveError):
            evaluate(".pos -4")


# =============================================================================
# .align
# =============================================================================

class TestAlign:
    """Test rounding up to a multiple."""

    @pytest.mark.parametrize("position,alignment,expected", [
        (0x2, 0x4, 0x4),
        (0x4, 0x4, 0x4),
        (0x0, 0x10, 0x0),
        (0x5, 8, 0x8),
        (0x11, 0x10, 0x20),
        (7, 1, 7),
        (7, 3, 9),
    ])
    def test_rounds_up(self, position, alignment, expected):
        record, state = evaluate(f".align {alignment}", position=position)
        assert record is None
        assert state.position == expected
        assert len(state.log) == 0

    def test_advance_is_alignment_minus_remainder(self):
        for position in range(0, 20):
            _, state = evaluate(".align 8", position=position)
            remainder = position % 8
            expected_advance = 0 if remainder == 0 else 8 - remainder
            assert state.position - position == expected_advance

    def test_zero_rejected(self):
        with pytest.raises(DirectiveError) as exc_info:
            evaluate(".align 0")
        assert "alignment must be positive" in str(exc_info.value)

    def test_negative_rejected(self):
        with pytest.raises(DirectiveError):
            evaluate(".align -4")


# =============================================================================
# .long / .quad
# =============================================================================

class TestData:
    """Test literal data directives."""

    def test_long(self):
        record, state = evaluate(".long 0x12345678", position=0x20)
        assert record.address == 0x20
        assert str(record) == "0x20: 12345678"
        assert state.position == 0x24

    def test_long_is_zero_padded(self):
        record, _ = evaluate(".long 5")
        assert record.fields[0].render() == "00000005"

    def test_long_negative(self):
        record, _ = evaluate(".long -1")
        assert record.fields[0].render() == "FFFFFFFF"

    def test_long_width(self):
        for value in ("0", "1", "0xABCDEF", "4294967295", "-2147483648"):
            record, _ = evaluate(f".long {value}")
            assert len(record.fields[0].render()) == 8

    def test_long_out_of_range(self):
        with pytest.raises(ValueRangeError):
            evaluate(".long 0x100000000")

    def test_quad(self):
        record, state = evaluate(".quad 5", position=8)
        assert record.fields[0].render() == "0000000000000005"
        assert record.size == 8
        assert state.position == 16

    def test_quad_negative(self):
        record, _ = evaluate(".quad -1")
        assert record.fields[0].render() == "F" * 16

    def test_quad_width(self):
        for value in ("0", "0x123456789ABCDEF0", "-3"):
            record, _ = evaluate(f".quad {value}")
            assert len(record.fields[0].render()) == 16

    def test_label_argument_rejected(self):
        """Directives take literal numerals only."""
        with pytest.raises(MalformedNumeralError):
            evaluate(".long data")


# =============================================================================
# Wrong Line Kind
# =============================================================================

class TestWrongLineKind:
    """Test that the evaluator and encoder reject each other's lines."""

    def test_evaluator_rejects_instruction(self):
        with pytest.raises(TypeError):
            DirectiveEvaluator().evaluate(classify_line("halt"), AssemblyState())

    def test_encoder_rejects_directive(self):
        with pytest.raises(TypeError):
            InstructionEncoder().encode(classify_line(".pos 4"), AssemblyState())
