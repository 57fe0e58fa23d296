import unittest

import pygame

from bitris_game import Intent
from bitris_input import KEYMAP, intent_for_event


class InputTests(unittest.TestCase):
    def test_home_row_keys(self):
        self.assertIs(KEYMAP[pygame.K_a], Intent.MOVE_LEFT)
        self.assertIs(KEYMAP[pygame.K_s], Intent.MOVE_RIGHT)
        self.assertIs(KEYMAP[pygame.K_k], Intent.ROTATE_CW)
        self.assertIs(KEYMAP[pygame.K_j], Intent.ROTATE_CCW)
        self.assertIs(KEYMAP[pygame.K_q], Intent.QUIT)

    def test_keydown_events(self):
        e = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT)
        self.assertIs(intent_for_event(e), Intent.MOVE_LEFT)
        e = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_F5)
        self.assertIsNone(intent_for_event(e))

    def test_other_events(self):
        self.assertIs(intent_for_event(pygame.event.Event(pygame.QUIT)), Intent.QUIT)
        e = pygame.event.Event(pygame.KEYUP, key=pygame.K_a)
        self.assertIsNone(intent_for_event(e))
        self.assertIsNone(intent_for_event(pygame.event.Event(pygame.NOEVENT)))


if __name__ == "__main__":
    unittest.main()
