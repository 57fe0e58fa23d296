import logging
import sys

import pygame

from bitris_config import CONFIG
from bitris_game import Game, Phase, speed, step
from bitris_input import intent_for_event
from bitris_render import RenderAssets

log = logging.getLogger("bitris")


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def next_delay(game):
    # lock and spawn transitions follow immediately; only falling waits on gravity
    return speed(game.level) if game.phase is Phase.FALLING else 0


def run(game, screen, render):
    while not game.finished:
        render.draw(screen, game.snapshot())
        pygame.display.flip()

        # whichever comes first: a key event or the gravity timeout
        wait = next_delay(game)
        e = pygame.event.wait(wait) if wait else pygame.event.poll()
        step(game, intent_for_event(e))

    if game.phase is Phase.GAME_OVER:
        render.draw(screen, game.snapshot())
        pygame.display.flip()
        pygame.time.wait(CONFIG["GAME_OVER_HOLD_MS"])


def main():
    logging.basicConfig(
        level=getattr(logging, str(CONFIG["LOG_LEVEL"]).upper(), logging.INFO),
        format='%(asctime)s | %(name)s | %(levelname)s | %(message)s',
        datefmt='%H:%M:%S'
    )

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    cols, rows = CONFIG["FIELD_WIDTH"], CONFIG["FIELD_HEIGHT"]
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)
    render = RenderAssets(cols, rows, font, big_font)
    screen = recreate_window(render.dims)
    pygame.display.set_caption("bitris")

    game = Game(cols, rows, seed=CONFIG["SEED"])
    log.info("starting %dx%d game", cols, rows)
    try:
        run(game, screen, render)
    finally:
        pygame.quit()

    snap = game.snapshot()
    print(f"level: {snap.level}\tlines: {snap.lines}\tscore: {snap.score}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
