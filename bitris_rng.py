"""NES-style spawn randomizer"""
import os
from typing import Optional

from bitris_catalog import NO_SHAPE, SHAPE_COUNT


class NESRandom:
    """
    Piece randomizer with the NES anti-repetition heuristic.

    A first roll is taken over 1..7, where 7 stands for "no shape". If it
    lands on the sentinel or on the previous shape, one fresh roll over
    0..6 is used instead, without re-checking it. Repeats become rarer but
    still happen, and shape 0 only ever comes from the second roll.

    Numbers come from a 32-bit LCG (multiplier 0x41C64E6D, increment 0x3039)
    so a seed reproduces the whole piece sequence.
    """

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = int.from_bytes(os.urandom(4), "little")
        self.state = seed & 0xFFFFFFFF
        self.prev = NO_SHAPE

    def _lcg_next(self) -> int:
        self.state = (self.state * 0x41C64E6D + 0x3039) & 0xFFFFFFFF
        return self.state

    def _rand(self) -> int:
        """15-bit value (0..32767) from the high half of the state."""
        return (self._lcg_next() >> 16) & 0x7FFF

    def next_shape(self) -> int:
        cand = self._rand() % SHAPE_COUNT + 1
        if cand == NO_SHAPE or cand == self.prev:
            cand = self._rand() % SHAPE_COUNT
        self.prev = cand
        return cand
