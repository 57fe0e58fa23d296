"""Piece model and piece-to-field coordinate mapping"""
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from bitris_catalog import ROTATIONS, shape_encoding
from bitris_field import COLS

SPAWN_Y = -2


@dataclass(frozen=True)
class Piece:
    shape: int
    rotation: int  # 0..3, index into the catalog masks
    x: int
    y: int

    @staticmethod
    def spawn(shape: int, cols: int = COLS) -> "Piece":
        # y starts above the field so the piece scrolls into view
        return Piece(shape, 0, cols // 2 - 2, SPAWN_Y)

    def moved(self, dx: int = 0, dy: int = 0) -> "Piece":
        return replace(self, x=self.x + dx, y=self.y + dy)

    def rotated(self, step: int) -> "Piece":
        return replace(self, rotation=(self.rotation + step) % ROTATIONS)

    @property
    def mask(self) -> int:
        return shape_encoding(self.shape, self.rotation)


def cell_coordinates(piece: Piece, i: int) -> Optional[Tuple[int, int]]:
    """Field coordinates of local cell i (0..15), or None if the piece does not occupy it."""
    if not piece.mask & 1 << i:
        return None
    return i % 4 + piece.x, i // 4 + piece.y


def cells(piece: Piece) -> List[Tuple[int, int]]:
    out = []
    for i in range(16):
        c = cell_coordinates(piece, i)
        if c is not None:
            out.append(c)
    return out
