
"""Piece model, shape templates, clockwise rotation"""
import logging
from dataclasses import dataclass
from typing import List, Tuple

from tetris_config import CONFIG

log = logging.getLogger(__name__)

Shape = List[List[int]]

# Tags double as color indices; 0 is empty.
T, I, S, Z, J, L, O = range(1, 8)
NAMES = {T: "T", I: "I", S: "S", Z: "Z", J: "J", L: "L", O: "O"}

SHAPES = {
    T: ((0,1,0),(1,1,1),(0,0,0)),
    I: ((0,0,0,0),(2,2,2,2),(0,0,0,0),(0,0,0,0)),
    S: ((0,3,3),(3,3,0),(0,0,0)),
    Z: ((4,4,0),(0,4,4),(0,0,0)),
    J: ((5,0,0),(5,5,5),(0,0,0)),
    L: ((0,0,6),(6,6,6),(0,0,0)),
    O: ((7,7),(7,7)),
}

def rotate_cw(m: Shape) -> Shape:
    """Transpose, then reverse each row."""
    return [list(r)[::-1] for r in zip(*m)]

@dataclass
class Piece:
    tag: int
    shape: Shape
    x: int
    y: int

    @staticmethod
    def spawn(tag: int, cols: int = None) -> "Piece":
        if cols is None:
            cols = CONFIG["COLS"]
        s = [list(r) for r in SHAPES[tag]]
        p = Piece(tag, s, cols // 2 - len(s[0]) // 2, 0)
        log.debug("spawned %s at (%d, %d)", NAMES[tag], p.x, p.y)
        return p

    @property
    def name(self) -> str:
        return NAMES[self.tag]

    def translated(self, dx: int, dy: int) -> Tuple[int, int]:
        return self.x + dx, self.y + dy

    def rotated_cw(self) -> Shape:
        return rotate_cw(self.shape)

    def cells(self) -> List[Tuple[int, int, int]]:
        """Occupied (board_x, board_y, tag) triples."""
        return [(self.x+c, self.y+r, v) for r,row in enumerate(self.shape) for c,v in enumerate(row) if v]
