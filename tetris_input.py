"""Keyboard mapping onto the active piece"""
import pygame


class InputHandler:
    MOVES = {
        pygame.K_LEFT: (-1, 0),
        pygame.K_RIGHT: (1, 0),
    }

    def __init__(self, session):
        self.session = session

    def handle(self, e) -> bool:
        s = self.session
        if e.type == pygame.KEYUP:
            if e.key == pygame.K_DOWN:
                s.soft_drop(False); return True
            return False
        if e.type != pygame.KEYDOWN:
            return False
        if s.piece is None or s.is_over:
            return False
        if e.key in self.MOVES:
            s.piece.try_move(*self.MOVES[e.key]); return True
        if e.key == pygame.K_UP:
            s.piece.try_rotate(); return True
        if e.key == pygame.K_DOWN:
            s.soft_drop(True); return True
        return False
