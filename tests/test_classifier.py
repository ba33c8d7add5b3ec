# =============================================================================
# test_classifier.py - Line Classifier Unit Tests
# =============================================================================
# Tests for splitting source lines into label, directive and instruction.
#
# Test coverage includes:
#   - Label definitions, alone and with a body
#   - Directive syntax
#   - Instruction syntax and operand splitting
#   - Case and whitespace normalization
#   - Unrecognized lines
# =============================================================================

import pytest

from y86asm.assembler.classifier import (
    DirectiveLine,
    InstructionLine,
    Unrecognized,
    classify_line,
)


# =============================================================================
# Labels
# =============================================================================

class TestLabels:
    """Test label detection and stripping."""

    def test_label_only(self):
        result = classify_line("loop:")
        assert result.label == "loop"
        assert result.body is None

    def test_label_with_instruction(self):
        result = classify_line("loop: addl %eax, %ebx")
        assert result.label == "loop"
        assert result.body == InstructionLine("addl", ("%eax", "%ebx"))

    def test_label_with_directive(self):
        result = classify_line("data: .long 5")
        assert result.label == "data"
        assert result.body == DirectiveLine(".long", "5")

    def test_label_without_space(self):
        result = classify_line("end:halt")
        assert result.label == "end"
        assert result.body == InstructionLine("halt")

    def test_label_is_lowercased(self):
        assert classify_line("MyLabel: nop").label == "mylabel"

    def test_label_with_digits(self):
        assert classify_line("l2: nop").label == "l2"

    def test_label_must_start_with_letter(self):
        result = classify_line("2l: nop")
        assert result.label is None
        assert result.is_unrecognized


# =============================================================================
# Directives
# =============================================================================

class TestDirectives:
    """Test directive classification."""

    @pytest.mark.parametrize("keyword", [".pos", ".align", ".long", ".quad"])
    def test_known_directives(self, keyword):
        result = classify_line(f"{keyword} 0x10")
        assert result.body == DirectiveLine(keyword, "0x10")

    def test_directive_uppercase(self):
        assert classify_line(".POS 0X100").body == DirectiveLine(".pos", "0x100")

    def test_unknown_directive(self):
        result = classify_line(".byte 5")
        assert isinstance(result.body, Unrecognized)
        assert "unknown directive '.byte'" in result.body.reason

    def test_directive_without_argument(self):
        result = classify_line(".pos")
        assert isinstance(result.body, Unrecognized)
        assert "exactly one argument" in result.body.reason

    def test_directive_with_two_arguments(self):
        assert classify_line(".long 1 2").is_unrecognized


# =============================================================================
# Instructions
# =============================================================================

class TestInstructions:
    """Test instruction classification and operand splitting."""

    def test_no_operands(self):
        assert classify_line("halt").body == InstructionLine("halt", ())

    def test_one_operand(self):
        assert classify_line("pushl %ebp").body == InstructionLine("pushl", ("%ebp",))

    def test_two_operands(self):
        result = classify_line("irmovl $5, %eax")
        assert result.body == InstructionLine("irmovl", ("$5", "%eax"))

    def test_memory_operand(self):
        result = classify_line("mrmovl 8(%ebp), %edx")
        assert result.body == InstructionLine("mrmovl", ("8(%ebp)", "%edx"))

    def test_whitespace_and_case(self):
        result = classify_line("   IRMOVL   $0x10 ,  %ESP   ")
        assert result.body == InstructionLine("irmovl", ("$0x10", "%esp"))

    def test_tab_separated(self):
        assert classify_line("jmp\tloop").body == InstructionLine("jmp", ("loop",))

    def test_unknown_mnemonic(self):
        result = classify_line("movl %eax, %ebx")
        assert isinstance(result.body, Unrecognized)
        assert "unknown instruction 'movl'" in result.body.reason

    def test_mnemonic_needs_separator(self):
        """Operands glued to the mnemonic do not form an instruction."""
        assert classify_line("addl%eax,%ebx").is_unrecognized


# =============================================================================
# Other Lines
# =============================================================================

class TestOtherLines:
    """Test blank lines, comments and locations."""

    def test_blank_line(self):
        result = classify_line("   ")
        assert result.label is None
        assert result.body is None
        assert not result.is_unrecognized

    def test_comment_is_unrecognized(self):
        assert classify_line("# a comment").is_unrecognized

    def test_location(self):
        result = classify_line("nop", line_number=7, filename="prog.ys")
        assert str(result.location) == "prog.ys:7:1"

    def test_text_is_normalized(self):
        assert classify_line("  Loop: NOP  ").text == "loop: nop"
