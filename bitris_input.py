"""Key events to game intents"""
from typing import Optional

import pygame

from bitris_game import Intent

KEYMAP = {
    pygame.K_a: Intent.MOVE_LEFT,
    pygame.K_s: Intent.MOVE_RIGHT,
    pygame.K_k: Intent.ROTATE_CW,
    pygame.K_j: Intent.ROTATE_CCW,
    pygame.K_q: Intent.QUIT,
    pygame.K_LEFT: Intent.MOVE_LEFT,
    pygame.K_RIGHT: Intent.MOVE_RIGHT,
    pygame.K_UP: Intent.ROTATE_CW,
    pygame.K_x: Intent.ROTATE_CW,
    pygame.K_z: Intent.ROTATE_CCW,
    pygame.K_ESCAPE: Intent.QUIT,
}


def intent_for_event(e) -> Optional[Intent]:
    if e.type == pygame.QUIT:
        return Intent.QUIT
    if e.type == pygame.KEYDOWN:
        return KEYMAP.get(e.key)
    return None
