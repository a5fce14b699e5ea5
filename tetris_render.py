"""
Rendering for the Tetris session.

- Cell sprites are pre-rendered once per color and blitted.
- Each frame clears to black, draws locked grid cells, then the falling piece.
"""
from __future__ import annotations
import pygame
from typing import Dict, Optional
from tetris_layout import Dims

BACKGROUND = (0, 0, 0)
STROKE = (0, 0, 0)
HIGHLIGHT = (255, 255, 255, 102)  # white at 40% opacity
BANNER = (255, 220, 220)

class Renderer:
    """Projects a GameSession onto a pygame surface."""
    def __init__(self, surface: pygame.Surface, dims: Dims, font: Optional[pygame.font.Font] = None):
        self.surface = surface
        self.dims = dims
        self.font = font
        self.cell_surf: Dict[str, pygame.Surface] = {}
        self._make_highlight()
        self._banner: Optional[pygame.Surface] = None

    # ---------- Sprites ----------
    def _make_highlight(self):
        c = self.dims.cell
        self.highlight = pygame.Surface((c, c), pygame.SRCALPHA)
        pygame.draw.rect(self.highlight, HIGHLIGHT, (2, 2, c-4, c-4), 2)

    def sprite(self, color: str) -> pygame.Surface:
        s = self.cell_surf.get(color)
        if s is None:
            c = self.dims.cell
            s = pygame.Surface((c, c))
            s.fill(pygame.Color(color))
            pygame.draw.rect(s, STROKE, (0, 0, c, c), 2)
            s.blit(self.highlight, (0, 0))
            self.cell_surf[color] = s
        return s

    # ---------- Drawing ----------
    def draw_square(self, col: int, row: int, color: str):
        x, y, _, _ = self.dims.cell_rect(col, row)
        self.surface.blit(self.sprite(color), (x, y))

    def draw(self, session):
        self.surface.fill(BACKGROUND)
        for row, col, color in session.grid.occupied_cells():
            self.draw_square(col, row, color)
        piece = session.piece
        if piece is not None:
            for row, col in piece.cells():
                if row >= 0:
                    self.draw_square(col, row, piece.color)
        if session.is_over:
            self.draw_banner()

    def draw_banner(self):
        if self.font is None:
            return
        if self._banner is None:
            self._banner = self.font.render("GAME OVER (R to Restart)", True, BANNER)
        rect = self._banner.get_rect(center=(self.dims.board_w // 2, self.dims.board_h // 2))
        self.surface.blit(self._banner, rect)
