"""Line clearing, compaction and NES-style scoring"""
import logging
from dataclasses import dataclass

from bitris_catalog import SCORE_TABLE
from bitris_field import Field

LINES_PER_LEVEL = 10
SCAN_ROWS = 4  # a piece spans at most four rows

log = logging.getLogger(__name__)


@dataclass
class Progress:
    lines: int = 0
    score: int = 0

    @property
    def level(self) -> int:
        return self.lines // LINES_PER_LEVEL


def score_for(cleared: int, level: int) -> int:
    return SCORE_TABLE[cleared] * (level + 1)


def drop_rows(field: Field, y: int) -> None:
    """Remove row y by shifting every row above it down one; row 0 becomes empty."""
    for i in range(y, 0, -1):
        field.copy_row(i, i - 1)
    field.clear_row(0)


def clear_lines(field: Field, progress: Progress, scan_from_row: int) -> int:
    """Clear full rows in the four rows starting at scan_from_row.

    Rows are processed top to bottom, so a clear only moves rows that were
    already scanned. Updates progress and returns the score delta.
    """
    cleared = 0
    lo = max(scan_from_row, 0)
    hi = min(scan_from_row + SCAN_ROWS, field.height)
    for y in range(lo, hi):
        if field.is_row_full(y):
            drop_rows(field, y)
            cleared += 1

    progress.lines += cleared
    delta = score_for(cleared, progress.level)
    progress.score += delta
    if cleared:
        log.info("cleared %d line(s): +%d, lines=%d level=%d",
                 cleared, delta, progress.lines, progress.level)
    return delta
