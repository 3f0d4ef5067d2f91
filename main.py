
import logging
import pygame
from tetris_config import CONFIG, load_env
from tetris_input import command_for
from tetris_layout import compute_dims
from tetris_log import setup_logging
from tetris_loop import GameLoop
from tetris_render import Renderer
from tetris_rng import ShapeRandom
from tetris_state import GameState

log = logging.getLogger(__name__)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.board_w, dims.board_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.board_w, dims.board_h), flags)


def run():
    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont("monospace", 18, bold=True)
    big_font = pygame.font.SysFont("monospace", 24, bold=True)
    render = Renderer(dims, font, big_font)
    clock = pygame.time.Clock()

    loop = GameLoop(GameState(ShapeRandom(CONFIG["SEED"])))
    loop.start()

    while True:
        dt = clock.tick(CONFIG["FPS"])
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                return
            cmd = command_for(e)
            if cmd is not None:
                loop.dispatch(cmd)
        loop.update(dt)
        render.draw(screen, loop.snapshot())
        pygame.display.flip()


def main():
    load_env()
    setup_logging(CONFIG["LOG_LEVEL"])
    pygame.init()
    try:
        run()
    except Exception:
        log.exception("game loop crashed")
        raise
    finally:
        pygame.quit()


if __name__ == '__main__':
    main()
