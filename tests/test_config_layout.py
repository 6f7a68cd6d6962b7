import pytest

from tetris_config import CONFIG, apply_overrides
from tetris_layout import compute_dims
from tetris_rng import PieceRandom


def test_overrides_skip_none():
    apply_overrides(SEED=None, DROP_INTERVAL_MS=500)
    assert CONFIG["SEED"] is None
    assert CONFIG["DROP_INTERVAL_MS"] == 500


def test_unknown_key_rejected():
    with pytest.raises(KeyError):
        apply_overrides(LEVEL=3)


def test_non_positive_size_rejected():
    with pytest.raises(ValueError):
        apply_overrides(CELL_SIZE=0)


def test_default_dims():
    d = compute_dims()
    assert (d.board_w, d.board_h) == (300, 600)
    assert d.total_w == 16 + 300 + 16 + 180 + 16
    assert d.cell_rect(1, 2) == (16 + 30, 16 + 60, 30, 30)
    bx, by, bw, bh = d.button
    assert bx >= d.panel_x and bx + bw <= d.panel_x + d.panel_w


def test_seeded_random_repeats():
    r1, r2 = PieceRandom(7), PieceRandom(7)
    seq = [r1.next_piece() for _ in range(20)]
    assert seq == [r2.next_piece() for _ in range(20)]
    assert set(seq) <= set(range(1, 8))
