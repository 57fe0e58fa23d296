"""
Pygame rendering for bitris.

Only reads Snapshot objects; never touches the game. Locked cells are drawn
in one colour because the field stores occupancy bits, not shapes; the
falling piece is drawn in its shape colour.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from bitris_board import landing
from bitris_catalog import shape_encoding, shape_name
from bitris_config import CONFIG
from bitris_game import Phase, Snapshot
from bitris_piece import cells

# Colors per shape id (T, J, Z, O, S, L, I)
COLORS: Dict[int, Tuple[int, int, int]] = {
    0: (200, 119, 255),
    1: (106, 119, 255),
    2: (255, 102, 119),
    3: (255, 224, 102),
    4: (94, 224, 142),
    5: (255, 158, 94),
    6: (102, 224, 255),
}
LOCKED = (150, 160, 200)
BG = (10, 13, 34)
GRID = (40, 50, 90)
TEXT = (200, 210, 240)


@dataclass
class Dims:
    cell: int
    margin: int
    board_w: int
    board_h: int
    panel_x: int
    total_w: int
    total_h: int

    @classmethod
    def compute(cls, cols: int, rows: int, panel_w: int = 200) -> "Dims":
        cell = int(CONFIG["CELL_SIZE"])
        margin = 16
        board_w, board_h = cols * cell, rows * cell
        return cls(cell=cell, margin=margin, board_w=board_w, board_h=board_h,
                   panel_x=2 * margin + board_w,
                   total_w=3 * margin + board_w + panel_w,
                   total_h=2 * margin + board_h)


class RenderAssets:
    """Pre-rendered background and cell sprites, plus a cached HUD."""
    def __init__(self, cols: int, rows: int, font: pygame.font.Font, big_font: pygame.font.Font):
        self.cols, self.rows = cols, rows
        self.dims = Dims.compute(cols, rows)
        self.font = font
        self.big_font = big_font
        self._hud_key: Optional[Tuple[int, int, int]] = None
        self._hud = []
        self._make_static()
        self._make_cells()

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BG)
        for x in range(self.cols + 1):
            X = d.margin + x * d.cell
            pygame.draw.line(self.bg, GRID, (X, d.margin), (X, d.margin + d.board_h))
        for y in range(self.rows + 1):
            Y = d.margin + y * d.cell
            pygame.draw.line(self.bg, GRID, (d.margin, Y), (d.margin + d.board_w, Y))
        panel = pygame.Rect(d.panel_x, d.margin, d.total_w - d.panel_x - d.margin, d.board_h)
        pygame.draw.rect(self.bg, (21, 25, 53), panel)
        pygame.draw.rect(self.bg, (50, 60, 100), panel, 1)

    # ---------- Cell sprites (solid + ghost outline) ----------
    def _make_cells(self):
        c = self.dims.cell
        self.cell_surf: Dict[int, pygame.Surface] = {}
        self.ghost_surf: Dict[int, pygame.Surface] = {}
        for t, col in COLORS.items():
            s = pygame.Surface((c - 2, c - 2))
            s.fill(col)
            self.cell_surf[t] = s
            g = pygame.Surface((c - 8, c - 8), pygame.SRCALPHA)
            pygame.draw.rect(g, col, (0, 0, c - 8, c - 8), 2)
            self.ghost_surf[t] = g
        self.locked_surf = pygame.Surface((c - 2, c - 2))
        self.locked_surf.fill(LOCKED)

    def _cell_pos(self, x: int, y: int, inset: int = 1) -> Tuple[int, int]:
        d = self.dims
        return d.margin + x * d.cell + inset, d.margin + y * d.cell + inset

    # ---------- HUD ----------
    def _hud_lines(self, snap: Snapshot):
        key = (snap.level, snap.lines, snap.score)
        if key != self._hud_key:
            self._hud_key = key
            f = self.font
            self._hud = [
                f.render("bitris", True, (197, 202, 233)),
                f.render(f"Level: {snap.level}", True, TEXT),
                f.render(f"Lines: {snap.lines}", True, TEXT),
                f.render(f"Score: {snap.score}", True, TEXT),
            ]
        return self._hud

    def draw(self, screen: pygame.Surface, snap: Snapshot):
        d = self.dims
        screen.blit(self.bg, (0, 0))

        piece = snap.piece
        if snap.phase is Phase.FALLING:
            for x, y in cells(landing(snap.field, piece)):
                if y >= 0:
                    screen.blit(self.ghost_surf[piece.shape], self._cell_pos(x, y, 4))

        # locked cells in one colour, the live piece in its own
        live = set() if snap.phase is Phase.SPAWN_CHECK else set(cells(piece))
        for y, row in enumerate(snap.composite().rows()):
            for x, v in enumerate(row):
                if v:
                    surf = self.cell_surf[piece.shape] if (x, y) in live else self.locked_surf
                    screen.blit(surf, self._cell_pos(x, y))

        y = d.margin + 12
        for surf in self._hud_lines(snap):
            screen.blit(surf, (d.panel_x + 12, y)); y += 24

        if CONFIG["DEBUG"]:
            dbg = (f"{shape_name(snap.shape)}[{snap.rotation}] "
                   f"mask={shape_encoding(snap.shape, snap.rotation)} x={snap.x} y={snap.y}")
            screen.blit(self.font.render(dbg, True, (165, 175, 215)), (d.panel_x + 12, y + 12))

        if snap.phase is Phase.GAME_OVER:
            msg = self.big_font.render("GAME OVER", True, (255, 220, 220))
            rect = msg.get_rect(center=(d.margin + d.board_w // 2, d.margin + d.board_h // 2))
            screen.blit(msg, rect)
