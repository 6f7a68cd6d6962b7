
"""Game controller: spawn -> fall -> lock -> clear -> respawn"""
import enum
import logging
from typing import Callable, List, Optional

from tetris_config import CONFIG
from tetris_piece import Piece
from tetris_rng import PieceRandom
from tetris_board import (Board, create_board, lock_cells, is_valid_placement,
                          clear_lines, score_for_lines)

log = logging.getLogger(__name__)

class GameState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"

class Game:
    """Owns the board, the falling piece and the score.

    The front end feeds it elapsed time through update() and player intents
    through the move/rotate/drop methods. Every mutator is a no-op unless the
    game is RUNNING; start() works from any state.
    """

    def __init__(self, cols: Optional[int] = None, rows: Optional[int] = None,
                 drop_interval_ms: Optional[int] = None, rng: Optional[PieceRandom] = None):
        self.cols = CONFIG["COLS"] if cols is None else cols
        self.rows = CONFIG["ROWS"] if rows is None else rows
        self.base_interval = CONFIG["DROP_INTERVAL_MS"] if drop_interval_ms is None else drop_interval_ms
        self.rng = PieceRandom(CONFIG["SEED"]) if rng is None else rng
        self.board: Board = create_board(self.cols, self.rows)
        self.piece: Optional[Piece] = None
        self.score = 0
        self.lines = 0
        self.state = GameState.IDLE
        self.drop_interval = self.base_interval
        self.drop_counter = 0.0
        self._score_listeners: List[Callable[[int], None]] = []

    @property
    def running(self) -> bool:
        return self.state is GameState.RUNNING

    @property
    def game_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    def add_score_listener(self, fn: Callable[[int], None]):
        self._score_listeners.append(fn)

    def _notify_score(self):
        for fn in self._score_listeners:
            fn(self.score)

    # ---------- lifecycle ----------
    def start(self):
        self.board = create_board(self.cols, self.rows)
        self.score = 0
        self.lines = 0
        self.drop_interval = self.base_interval
        self.drop_counter = 0.0
        self.state = GameState.RUNNING
        self._spawn()
        log.info("game started (%dx%d, drop every %d ms)", self.cols, self.rows, self.drop_interval)
        self._notify_score()

    def _spawn(self):
        p = Piece.spawn(self.rng.next_piece(), self.cols)
        # A blocked spawn is pushed up off the board; the next lock then ends the game.
        while p.y > -len(p.shape) and not self._fits(p.shape, p.x, p.y):
            p.y -= 1
        self.piece = p

    def _fits(self, shape, x, y) -> bool:
        return is_valid_placement(self.board, shape, x, y)

    # ---------- timer ----------
    def update(self, dt_ms: float) -> bool:
        """Accumulate elapsed time; fire one gravity step once the interval is exceeded."""
        if not self.running: return False
        self.drop_counter += dt_ms
        if self.drop_counter > self.drop_interval:
            self.tick()
            self.drop_counter = 0.0
            return True
        return False

    def tick(self):
        if not self.running: return
        x, y = self.piece.translated(0, 1)
        if self._fits(self.piece.shape, x, y):
            self.piece.y = y
        else:
            self.lock()

    def lock(self):
        if not self.running: return
        cells = self.piece.cells()
        if any(y < 0 for _, y, _ in cells):
            self.state = GameState.GAME_OVER
            log.info("game over, final score %d", self.score)
            return
        lock_cells(self.board, cells)
        log.debug("locked %s at (%d, %d)", self.piece.name, self.piece.x, self.piece.y)
        self.board, n = clear_lines(self.board)
        if n:
            self.lines += n
            self.score += score_for_lines(n)
            self._notify_score()
        if self.running:
            self._spawn()

    # ---------- intents ----------
    def _shift(self, dx: int) -> bool:
        if not self.running: return False
        x, y = self.piece.translated(dx, 0)
        if not self._fits(self.piece.shape, x, y): return False
        self.piece.x = x
        return True

    def move_left(self) -> bool:
        return self._shift(-1)

    def move_right(self) -> bool:
        return self._shift(1)

    def soft_drop(self) -> bool:
        """One row down; against an obstruction the piece locks instead."""
        if not self.running: return False
        x, y = self.piece.translated(0, 1)
        if self._fits(self.piece.shape, x, y):
            self.piece.y = y
            self.drop_counter = 0.0
            return True
        self.lock()
        return False

    def rotate(self) -> bool:
        if not self.running: return False
        original = self.piece.shape
        self.piece.shape = self.piece.rotated_cw()
        if not self._fits(self.piece.shape, self.piece.x, self.piece.y):
            self.piece.shape = original
            return False
        return True
