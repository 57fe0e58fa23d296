"""Tetromino catalog: rotation masks and the score table"""
from typing import List, Tuple

SHAPE_COUNT = 7
ROTATIONS = 4
NO_SHAPE = SHAPE_COUNT

SHAPE_NAMES = ("T", "J", "Z", "O", "S", "L", "I")

# bit i set => local cell (i % 4, i // 4) occupied
SHAPES: Tuple[Tuple[int, int, int, int], ...] = (
    (19968, 17984, 3648, 19520),  # T
    (36352, 25664, 3616, 17600),  # J
    (50688, 19584, 50688, 19584), # Z
    (26112, 26112, 26112, 26112), # O
    (27648, 35904, 27648, 35904), # S
    (11776, 17504, 3712, 50240),  # L
    (3840, 17476, 3840, 17476),   # I
)

SCORE_TABLE = (0, 40, 100, 300, 1200)


def shape_encoding(shape: int, rotation: int) -> int:
    return SHAPES[shape][rotation]


def local_cells(shape: int, rotation: int) -> List[Tuple[int, int]]:
    mask = SHAPES[shape][rotation]
    return [(i % 4, i // 4) for i in range(16) if mask & 1 << i]


def shape_name(shape: int) -> str:
    return SHAPE_NAMES[shape] if 0 <= shape < SHAPE_COUNT else "-"
