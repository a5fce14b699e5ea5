import logging
import sys

import pygame

from tetris_config import CONFIG
from tetris_input import InputHandler
from tetris_layout import compute_dims
from tetris_render import Renderer
from tetris_scheduler import ClockScheduler
from tetris_session import GameSession

log = logging.getLogger(__name__)


def create_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.board_w, dims.board_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.board_w, dims.board_h), flags)


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"],
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP])

    dims = compute_dims()
    screen = create_window(dims)
    pygame.display.set_caption(CONFIG["CAPTION"])
    font = pygame.font.SysFont(None, 26)
    clock = pygame.time.Clock()

    scheduler = ClockScheduler(pygame.time.get_ticks)
    session = GameSession(scheduler, Renderer(screen, dims, font),
                          cols=dims.cols, rows=dims.rows)
    controls = InputHandler(session)
    log.info("starting %dx%d grid, seed=%s", dims.cols, dims.rows, session.rng.seed)
    session.start()

    while True:
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE:
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN and e.key == pygame.K_r and session.is_over:
                session.reset(); continue
            controls.handle(e)

        scheduler.run_due(pygame.time.get_ticks())
        pygame.display.flip()
        clock.tick(CONFIG["FRAME_RATE"])


if __name__ == '__main__':
    main()
