"""
Overlap Validation
==================

Optional check run after resolution. A '.pos' directive may move the
location counter back over bytes that were already emitted; the normal
pipeline accepts this and later records simply win in a memory image.
When overlap checking is enabled, any two records whose byte ranges
intersect make the run fail with OverlapError.
"""

from dataclasses import dataclass
import logging
from typing import Sequence

from y86asm.errors import OverlapError
from y86asm.assembler.emission import ResolvedRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Overlap:
    """
    Two records sharing at least one byte.

    Attributes:
        first: The record emitted earlier in program order
        second: The record emitted later
    """
    first: ResolvedRecord
    second: ResolvedRecord

    @property
    def start(self) -> int:
        return max(self.first.address, self.second.address)

    @property
    def end(self) -> int:
        return min(self.first.end_address, self.second.end_address)

    def describe(self) -> str:
        where = f"0x{self.start:X}-0x{self.end - 1:X}"
        first = self.first.location or "<unknown>"
        second = self.second.location or "<unknown>"
        return f"bytes {where} written by {first} and {second}"


def find_overlaps(records: Sequence[ResolvedRecord]) -> list[Overlap]:
    """
    Find every pair of records with intersecting byte ranges.

    Pairs are reported in program order of their second record.
    """
    ordered = sorted(enumerate(records), key=lambda item: item[1].address)
    overlaps = []

    # Sweep by address; 'active' holds records whose range is still open
    active: list[tuple[int, ResolvedRecord]] = []
    for index, record in ordered:
        active = [(i, r) for i, r in active if r.end_address > record.address]
        for other_index, other in active:
            if other_index < index:
                overlaps.append((index, Overlap(other, record)))
            else:
                overlaps.append((other_index, Overlap(record, other)))
        if record.size:
            active.append((index, record))

    overlaps.sort(key=lambda item: item[0])
    return [overlap for _, overlap in overlaps]


def check_overlaps(records: Sequence[ResolvedRecord]) -> None:
    """
    Raise OverlapError for the first overlap found.

    Raises:
        OverlapError: If any two records share a byte
    """
    overlaps = find_overlaps(records)
    for overlap in overlaps:
        logger.debug(f"Overlap: {overlap.describe()}")

    if overlaps:
        first = overlaps[0]
        hint = None
        if len(overlaps) > 1:
            hint = f"{len(overlaps) - 1} more overlapping region(s)"
        raise OverlapError(
            f"overlapping emissions: {first.describe()}",
            location=first.second.location,
            hint=hint,
        )
