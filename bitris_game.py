"""Tick-driven game state machine"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from bitris_board import collides, stamp
from bitris_field import COLS, ROWS, Field
from bitris_piece import Piece, cells
from bitris_rng import NESRandom
from bitris_scoring import Progress, clear_lines

log = logging.getLogger(__name__)


class Phase(Enum):
    FALLING = auto()
    LOCKING = auto()
    SPAWN_CHECK = auto()
    GAME_OVER = auto()


class Intent(Enum):
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    ROTATE_CW = auto()
    ROTATE_CCW = auto()
    QUIT = auto()


def speed(level: int) -> int:
    """Milliseconds between gravity ticks; a rough fit of the NES drop table."""
    return 50 - (level + 1) * 2 + 800 // (level + 1)


@dataclass(frozen=True)
class Snapshot:
    field: Field
    shape: int
    rotation: int
    x: int
    y: int
    lines: int
    score: int
    level: int
    phase: Phase

    @property
    def piece(self) -> Piece:
        return Piece(self.shape, self.rotation, self.x, self.y)

    def composite(self) -> Field:
        """Field copy with the current piece drawn in."""
        f = self.field.copy()
        if self.phase is not Phase.SPAWN_CHECK:
            stamp(f, self.piece, True)
        return f


class Game:
    """
    Owns the field and the current piece and advances them one tick at a time.

    The field only ever holds locked cells; the falling piece lives in
    self.piece until it locks. Each tick() performs one transition:

      FALLING      piece moves down one row, or -> LOCKING when blocked
      LOCKING      piece is stamped, lines are cleared -> SPAWN_CHECK;
                   a piece still partly above the field -> GAME_OVER
      SPAWN_CHECK  a new piece is drawn -> FALLING, or GAME_OVER if it
                   already collides
      GAME_OVER    terminal

    At most one player intent is accepted between two ticks.
    """

    def __init__(self, cols: int = COLS, rows: int = ROWS,
                 seed: Optional[int] = None, rng: Optional[NESRandom] = None):
        self.field = Field(cols, rows)
        self.progress = Progress()
        self.rng = rng if rng is not None else NESRandom(seed)
        self.phase = Phase.FALLING
        self.quit_requested = False
        self.intent_taken = False
        self.piece = Piece.spawn(self.rng.next_shape(), cols)
        log.debug("spawned %s", self.piece)

    @property
    def finished(self) -> bool:
        return self.quit_requested or self.phase is Phase.GAME_OVER

    @property
    def level(self) -> int:
        return self.progress.level

    def tick(self) -> Phase:
        if self.finished:
            return self.phase
        self.intent_taken = False

        if self.phase is Phase.FALLING:
            test = self.piece.moved(dy=1)
            if collides(self.field, test):
                self.phase = Phase.LOCKING
            else:
                self.piece = test

        elif self.phase is Phase.LOCKING:
            if any(y < 0 for _, y in cells(self.piece)):
                # lock out: the field has no rows to hold these cells
                self.phase = Phase.GAME_OVER
                log.info("game over (lock out): lines=%d score=%d level=%d",
                         self.progress.lines, self.progress.score, self.level)
                return self.phase
            stamp(self.field, self.piece, True)
            log.debug("locked %s", self.piece)
            clear_lines(self.field, self.progress, self.piece.y)
            self.phase = Phase.SPAWN_CHECK

        elif self.phase is Phase.SPAWN_CHECK:
            self.piece = Piece.spawn(self.rng.next_shape(), self.field.width)
            if collides(self.field, self.piece):
                self.phase = Phase.GAME_OVER
                log.info("game over: lines=%d score=%d level=%d",
                         self.progress.lines, self.progress.score, self.level)
            else:
                self.phase = Phase.FALLING
                log.debug("spawned %s", self.piece)

        return self.phase

    def apply_intent(self, intent: Intent) -> bool:
        """Apply a player intent; returns False if it was rejected (piece unchanged).

        Only the first intent after a tick is considered, legal or not;
        QUIT is always honoured.
        """
        if intent is Intent.QUIT:
            self.quit_requested = True
            return True
        if self.finished or self.phase is not Phase.FALLING or self.intent_taken:
            return False
        self.intent_taken = True

        if intent is Intent.MOVE_LEFT:
            test = self.piece.moved(dx=-1)
        elif intent is Intent.MOVE_RIGHT:
            test = self.piece.moved(dx=1)
        elif intent is Intent.ROTATE_CW:
            test = self.piece.rotated(1)
        else:
            test = self.piece.rotated(-1)

        if collides(self.field, test):
            return False
        self.piece = test
        return True

    def snapshot(self) -> Snapshot:
        p = self.piece
        return Snapshot(
            field=self.field.copy(),
            shape=p.shape, rotation=p.rotation, x=p.x, y=p.y,
            lines=self.progress.lines, score=self.progress.score,
            level=self.level, phase=self.phase,
        )


def step(game: Game, intent: Optional[Intent] = None) -> Phase:
    """One pass of the driver loop: a gravity tick, then at most one intent."""
    game.tick()
    if intent is not None:
        game.apply_intent(intent)
    return game.phase
