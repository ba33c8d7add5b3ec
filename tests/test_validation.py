# =============================================================================
# test_validation.py - Overlap Check and Listing Format Tests
# =============================================================================
# Tests for the optional overlap check and for the text formats of the
# listing and symbol table.
# =============================================================================

import pytest

from y86asm.assembler import Assembler
from y86asm.assembler.emission import ResolvedRecord
from y86asm.assembler.listing import format_listing, format_record, format_symbols
from y86asm.assembler.symbols import SymbolTable
from y86asm.assembler.validation import check_overlaps, find_overlaps
from y86asm.errors import OverlapError, SourceLocation


# =============================================================================
# Overlap Detection
# =============================================================================

class TestFindOverlaps:
    """Test detection of records sharing bytes."""

    def test_adjacent_records_do_not_overlap(self):
        records = [
            ResolvedRecord(0, "30F000000005"),
            ResolvedRecord(6, "6003"),
            ResolvedRecord(8, "00"),
        ]
        assert find_overlaps(records) == []

    def test_gap_does_not_overlap(self):
        records = [ResolvedRecord(0x100, "00"), ResolvedRecord(0, "10")]
        assert find_overlaps(records) == []

    def test_overlap_after_pos_backwards(self):
        first = ResolvedRecord(0, "30F000000001", SourceLocation("p.ys", 2))
        second = ResolvedRecord(2, "00", SourceLocation("p.ys", 4))
        overlaps = find_overlaps([first, second])

        assert len(overlaps) == 1
        overlap = overlaps[0]
        assert overlap.first is first
        assert overlap.second is second
        assert overlap.start == 2
        assert overlap.end == 3
        assert overlap.describe() == "bytes 0x2-0x2 written by p.ys:2:1 and p.ys:4:1"

    def test_later_record_at_lower_address(self):
        """'first' is always the earlier record in program order."""
        first = ResolvedRecord(4, "A05F")
        second = ResolvedRecord(0, "30F000000001")
        overlaps = find_overlaps([first, second])

        assert len(overlaps) == 1
        assert overlaps[0].first is first
        assert overlaps[0].second is second
        assert (overlaps[0].start, overlaps[0].end) == (4, 6)

    def test_end_address(self):
        record = ResolvedRecord(0x10, "30F000000005")
        assert record.end_address == 0x16

    def test_same_address(self):
        records = [ResolvedRecord(8, "00"), ResolvedRecord(8, "10")]
        assert len(find_overlaps(records)) == 1

    def test_multiple_overlaps(self):
        records = [
            ResolvedRecord(0, "00000000"),
            ResolvedRecord(1, "10"),
            ResolvedRecord(3, "1010"),
        ]
        overlaps = find_overlaps(records)
        assert len(overlaps) == 2
        assert overlaps[0].second is records[1]
        assert overlaps[1].second is records[2]


class TestCheckOverlaps:
    """Test the failing check."""

    def test_no_overlap_passes(self):
        check_overlaps([ResolvedRecord(0, "00"), ResolvedRecord(1, "00")])

    def test_overlap_raises(self):
        location = SourceLocation("p.ys", 4)
        records = [ResolvedRecord(0, "6003"), ResolvedRecord(1, "00", location)]
        with pytest.raises(OverlapError) as exc_info:
            check_overlaps(records)
        assert exc_info.value.location == location
        assert "overlapping emissions" in str(exc_info.value)

    def test_hint_counts_other_overlaps(self):
        records = [
            ResolvedRecord(0, "00000000"),
            ResolvedRecord(1, "10"),
            ResolvedRecord(2, "10"),
        ]
        with pytest.raises(OverlapError) as exc_info:
            check_overlaps(records)
        assert exc_info.value.hint == "1 more overlapping region(s)"

    def test_assembler_check_enabled(self):
        source = ".pos 0\nirmovl $1, %eax\n.pos 2\nhalt\n"
        with pytest.raises(OverlapError):
            Assembler(check_overlaps=True).assemble_string(source)

    def test_assembler_check_disabled_by_default(self):
        source = ".pos 0\nirmovl $1, %eax\n.pos 2\nhalt\n"
        listing = Assembler().assemble_string(source)
        assert listing == ["0x0:    30F000000001", "0x2:    00"]


# =============================================================================
# Listing Format
# =============================================================================

class TestListingFormat:
    """Test listing and symbol table text."""

    def test_record_line(self):
        assert format_record(ResolvedRecord(0, "00")) == "0x0:    00"

    def test_address_is_uppercase_hex_without_padding(self):
        assert format_record(ResolvedRecord(0xABC, "10")) == "0xABC:    10"

    def test_listing_keeps_order(self):
        records = [ResolvedRecord(0x100, "00"), ResolvedRecord(0, "10")]
        assert format_listing(records) == ["0x100:    00", "0x0:    10"]

    def test_symbols_sorted_by_address(self):
        symbols = SymbolTable()
        symbols.define("stack", 0x100)
        symbols.define("main", 0)
        symbols.define("loop", 0x14)
        symbols.define("alias", 0x14)
        assert format_symbols(symbols) == [
            "main 0x0",
            "alias 0x14",
            "loop 0x14",
            "stack 0x100",
        ]
