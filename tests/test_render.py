import pygame
import pytest

from tetris_game import Game
from tetris_layout import compute_dims
from tetris_overlay import GameOverOverlay
from tetris_piece import O
from tetris_render import RenderAssets, COLORS, BG


@pytest.fixture
def assets():
    pygame.init()
    font = pygame.font.Font(None, 24)
    yield RenderAssets(compute_dims(), font)
    pygame.quit()


def _center(d, bx, by):
    x, y, w, h = d.cell_rect(bx, by)
    return (x + w // 2, y + h // 2)


def test_draws_board_then_piece(assets, fixed_random):
    d = assets.dims
    screen = pygame.Surface((d.total_w, d.total_h))
    g = Game(cols=10, rows=20, rng=fixed_random(O))
    g.start()
    g.board[19][0] = 2
    assets.draw(screen, g, "Start Game")
    assert screen.get_at(_center(d, 0, 19))[:3] == COLORS[2]
    assert screen.get_at(_center(d, 4, 0))[:3] == COLORS[O]
    assert screen.get_at(_center(d, 0, 0))[:3] == BG


def test_board_surface_rebuilt_only_on_change(assets):
    board = [[0] * 10 for _ in range(20)]
    assert assets.rebuild_board_surface(board)
    assert not assets.rebuild_board_surface(board)
    board[5][5] = 1
    assert assets.rebuild_board_surface(board)


def test_game_over_overlay_darkens_board(assets):
    d = assets.dims
    screen = pygame.Surface((d.total_w, d.total_h))
    screen.fill((200, 200, 200))
    GameOverOverlay().draw(screen, assets.font, assets.board_rect)
    corner = screen.get_at((d.board_x + 1, d.board_y + 1))
    assert corner.r < 100
    outside = screen.get_at((d.total_w - 2, d.total_h - 2))
    assert outside.r == 200
