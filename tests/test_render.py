import os
import unittest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame

from bitris_game import Game, Phase
from bitris_piece import Piece
from bitris_render import BG, COLORS, LOCKED, RenderAssets


def setUpModule():
    pygame.font.init()


def tearDownModule():
    pygame.font.quit()


class RenderTests(unittest.TestCase):
    def setUp(self):
        font = pygame.font.Font(None, 22)
        self.render = RenderAssets(10, 20, font, font)
        d = self.render.dims
        self.screen = pygame.Surface((d.total_w, d.total_h))
        self.game = Game(seed=3)

    def color_at(self, x, y):
        d = self.render.dims
        px = d.margin + x * d.cell + d.cell // 2
        py = d.margin + y * d.cell + d.cell // 2
        return tuple(self.screen.get_at((px, py)))[:3]

    def test_locked_cells_and_piece(self):
        self.game.field.set(0, 19, True)
        self.game.piece = Piece(3, 0, 2, 10)  # O over (3..4, 12..13)
        self.render.draw(self.screen, self.game.snapshot())
        self.assertEqual(self.color_at(0, 19), LOCKED)
        self.assertEqual(self.color_at(3, 12), COLORS[3])
        self.assertEqual(self.color_at(4, 13), COLORS[3])
        self.assertEqual(self.color_at(5, 5), BG)

    def test_locked_piece_drawn_as_field(self):
        g = self.game
        g.piece = Piece(3, 0, 2, 16)
        while g.phase is not Phase.SPAWN_CHECK:
            g.tick()
        self.render.draw(self.screen, g.snapshot())
        self.assertEqual(self.color_at(3, 18), LOCKED)
        self.assertEqual(self.color_at(4, 19), LOCKED)


if __name__ == "__main__":
    unittest.main()
