# tetris_layout.py
from dataclasses import dataclass
from typing import Tuple
from tetris_config import CONFIG

Rect = Tuple[int, int, int, int]

@dataclass
class Dims:
    cell: int
    cols: int
    rows: int
    margin: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int
    score_pos: Tuple[int, int]
    button: Rect

    def cell_rect(self, bx: int, by: int) -> Rect:
        return (self.board_x + bx*self.cell, self.board_y + by*self.cell, self.cell, self.cell)

def compute_dims() -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    cols, rows = CONFIG["COLS"], CONFIG["ROWS"]
    margin = int(CONFIG["MARGIN"])
    panel_w = int(CONFIG["PANEL_W"])

    board_w = cols * cell
    board_h = rows * cell

    total_w = margin + board_w + margin + panel_w + margin
    total_h = margin + board_h + margin

    board_x = margin
    board_y = margin
    panel_x = board_x + board_w + margin
    panel_y = margin

    score_pos = (panel_x + 12, panel_y + 44)
    button = (panel_x + 12, panel_y + 90, panel_w - 24, 40)

    return Dims(
        cell=cell, cols=cols, rows=rows, margin=margin, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=board_x, board_y=board_y,
        panel_x=panel_x, panel_y=panel_y,
        score_pos=score_pos, button=button
    )
