
import argparse
import logging
import pygame
from tetris_config import CONFIG, apply_overrides
from tetris_game import Game
from tetris_rng import PieceRandom
from tetris_input import START_KEYS, intent_for_key, dispatch
from tetris_overlay import GameOverOverlay
from tetris_layout import compute_dims
from tetris_render import RenderAssets

log = logging.getLogger("tetris")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Falling-block puzzle game")
    parser.add_argument('--seed', type=int, default=None, help='piece sequence seed')
    parser.add_argument('--cell-size', type=int, default=None, help='cell size in pixels')
    parser.add_argument('--drop-ms', type=int, default=None, help='gravity interval in ms')
    parser.add_argument('--cols', type=int, default=None, help='board width in cells')
    parser.add_argument('--rows', type=int, default=None, help='board height in cells')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    args = parser.parse_args(argv)
    try:
        apply_overrides(SEED=args.seed, CELL_SIZE=args.cell_size, DROP_INTERVAL_MS=args.drop_ms,
                        COLS=args.cols, ROWS=args.rows)
    except (KeyError, ValueError) as e:
        parser.error(str(e))
    return args


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def button_label(game):
    return "Play Again" if game.game_over else "Start Game"


def handle_event(game, e, button_rect) -> bool:
    """Route one pygame event; returns False when the window should close."""
    if e.type == pygame.QUIT:
        return False
    if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1 and button_rect.collidepoint(e.pos):
        game.start()
    elif e.type == pygame.KEYDOWN:
        if e.key in START_KEYS:
            game.start()
        else:
            intent = intent_for_key(e.key)
            if intent is not None:
                dispatch(game, intent)
    return True


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    pygame.init()
    try:
        pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN])
        dims = compute_dims()
        screen = recreate_window(dims)
        pygame.display.set_caption("Tetris")
        font = pygame.font.SysFont(None, 24)
        big_font = pygame.font.SysFont(None, 40)

        render = RenderAssets(dims, font)
        overlay = GameOverOverlay()
        clock = pygame.time.Clock()

        game = Game(rng=PieceRandom(CONFIG["SEED"]))
        game.add_score_listener(lambda s: pygame.display.set_caption(f"Tetris - Score {s}"))
        game.add_score_listener(lambda s: log.debug("score now %d", s))

        running = True
        while running:
            dt = clock.tick(CONFIG["FPS"])
            for e in pygame.event.get():
                if not handle_event(game, e, render.button_rect):
                    running = False
                    break
            game.update(dt)

            render.draw(screen, game, button_label(game))
            if game.game_over:
                overlay.draw(screen, big_font, render.board_rect)
            pygame.display.flip()
    finally:
        pygame.quit()


if __name__ == '__main__':
    main()
