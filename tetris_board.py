
"""Board helpers: create, occupancy, lock, validity, line clear"""
import logging
from typing import Iterable, List, Tuple

log = logging.getLogger(__name__)

Board = List[List[int]]

# Flat lookup; a single piece spans at most four rows.
SCORE_TABLE = {1: 100, 2: 300, 3: 500, 4: 800}

def create_board(cols: int, rows: int) -> Board:
    return [[0] * cols for _ in range(rows)]

def is_occupied(board: Board, x: int, y: int) -> bool:
    return 0 <= y < len(board) and 0 <= x < len(board[y]) and board[y][x] != 0

def lock_cells(board: Board, cells: Iterable[Tuple[int, int, int]]):
    for x, y, tag in cells:
        if x < 0 or y < 0:
            raise IndexError(f"cell ({x}, {y}) outside board")
        board[y][x] = tag

def is_valid_placement(board: Board, shape, x: int, y: int) -> bool:
    rows, cols = len(board), len(board[0])
    for j, row in enumerate(shape):
        for i, v in enumerate(row):
            if not v: continue
            bx, by = x+i, y+j
            if bx<0 or bx>=cols or by>=rows: return False
            if by>=0 and is_occupied(board, bx, by): return False
    return True

def clear_lines(board: Board) -> Tuple[Board, int]:
    """Drop full rows bottom-up; the same index is re-tested after each removal."""
    board = [r[:] for r in board]
    cols = len(board[0])
    c = 0; y = len(board)-1
    while y >= 0:
        if all(board[y]):
            del board[y]; board.insert(0, [0]*cols); c += 1
        else: y -= 1
    if c:
        log.debug("cleared %d line(s)", c)
    return board, c

def score_for_lines(n: int) -> int:
    return SCORE_TABLE.get(n, 0)
