import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from tetris_config import CONFIG


@pytest.fixture(autouse=True)
def restore_config():
    saved = dict(CONFIG)
    yield
    CONFIG.clear()
    CONFIG.update(saved)


class FixedRandom:
    """Replays a fixed tag sequence, cycling when exhausted."""
    def __init__(self, *tags):
        self.tags = list(tags)
        self.i = 0

    def next_piece(self):
        tag = self.tags[self.i % len(self.tags)]
        self.i += 1
        return tag


@pytest.fixture
def fixed_random():
    return FixedRandom
