
"""
Rendering helpers for the Tetris project.

- Pre-render one cell Surface per color tag and blit it.
- Pre-render the static background (board well + panel frame) once per Dims.
- Cache HUD text surfaces; re-render only when score or button label change.
- Cache a BOARD SURFACE with all *locked* blocks; rebuild it only when the grid changes.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Tuple, List, Optional
from tetris_layout import Dims

# Colors per tag; 0 is empty
COLORS: Dict[int, Tuple[int,int,int]] = {
    1: (0xFF,0x0D,0x72),  # T
    2: (0x0D,0xC2,0xFF),  # I
    3: (0x0D,0xFF,0x72),  # S
    4: (0xF5,0x38,0xFF),  # Z
    5: (0xFF,0x8E,0x0D),  # J
    6: (0xFF,0xE1,0x38),  # L
    7: (0x38,0x77,0xFF),  # O
}
BG = (0x11,0x11,0x11)
FRAME = (10,13,34)
TEXT = (200,210,240)

@dataclass
class HudCache:
    score: int = -1
    label: str = ""
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    label_s: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self._board_key = None

    @property
    def board_rect(self) -> pygame.Rect:
        d = self.dims
        return pygame.Rect(d.board_x, d.board_y, d.board_w, d.board_h)

    @property
    def button_rect(self) -> pygame.Rect:
        return pygame.Rect(self.dims.button)

    # ---------- Static background (board well + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(FRAME)
        pygame.draw.rect(self.bg, BG, self.board_rect)
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)

    # ---------- Small cell sprites ----------
    def _make_cells(self):
        self.cell_surf: Dict[int, pygame.Surface] = {}
        c = self.dims.cell
        for tag, col in COLORS.items():
            s = pygame.Surface((c, c))
            s.fill(col)
            self.cell_surf[tag] = s

    def redraw_static(self, screen: pygame.Surface):
        screen.blit(self.bg, (0,0))

    # ---------- Board surface cache ----------
    def rebuild_board_surface(self, board: List[List[int]]):
        """Rebuilds the locked-blocks surface when the grid contents changed."""
        key = tuple(map(tuple, board))
        if key == self._board_key:
            return False
        self.board_surface.fill((0,0,0,0))
        c = self.dims.cell
        for y, row in enumerate(board):
            for x, tag in enumerate(row):
                if tag:
                    self.board_surface.blit(self.cell_surf[tag], (x*c, y*c))
        self._board_key = key
        return True

    def blit_board_surface(self, screen: pygame.Surface):
        screen.blit(self.board_surface, (self.dims.board_x, self.dims.board_y))

    # ---------- Falling piece ----------
    def draw_piece(self, screen: pygame.Surface, piece):
        """Cells above the top edge are clipped away."""
        for bx, by, tag in piece.cells():
            if by >= 0:
                screen.blit(self.cell_surf[tag], self.dims.cell_rect(bx, by)[:2])

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, score: int, button_label: str):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Tetris", True, (197,202,233))
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = f.render(f"Score: {score}", True, TEXT)
        if button_label != self.hud.label:
            self.hud.label = button_label
            self.hud.label_s = f.render(button_label, True, (255,255,255))
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.score_s, d.score_pos)
        btn = self.button_rect
        pygame.draw.rect(screen, (56,119,255), btn, border_radius=6)
        screen.blit(self.hud.label_s, self.hud.label_s.get_rect(center=btn.center))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, TEXT),
                f.render("←/→ Move", True, (165,175,215)),
                f.render("↓ Soft drop", True, (165,175,215)),
                f.render("↑ Rotate", True, (165,175,215)),
                f.render("Enter/R Start", True, (165,175,215)),
            ]
        y = d.panel_y + 160
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20

    def draw(self, screen: pygame.Surface, game, button_label: str):
        """Full frame: background, locked board, falling piece on top, HUD."""
        self.redraw_static(screen)
        self.rebuild_board_surface(game.board)
        self.blit_board_surface(screen)
        if game.piece is not None:
            self.draw_piece(screen, game.piece)
        self.draw_panel_hud(screen, game.score, button_label)
