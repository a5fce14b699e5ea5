"""Piece model, type catalog, rotation and collision"""
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from tetris_grid import Grid

Layout = List[List[int]]


@dataclass(frozen=True)
class PieceType:
    name: str
    color: str
    layout: Tuple[Tuple[int, ...], ...]

    @property
    def width(self) -> int:
        return len(self.layout[0])

    @property
    def height(self) -> int:
        return len(self.layout)


CATALOG: Dict[str, PieceType] = {
    "T": PieceType("T", "#0000FE", ((0,1,0),
                                    (1,1,1))),
    "S": PieceType("S", "#008001", ((0,1,1),
                                    (1,1,0))),
    "Z": PieceType("Z", "#81007F", ((1,1,0),
                                    (0,1,1))),
    "L": PieceType("L", "#FFFF01", ((0,0,1),
                                    (1,1,1))),
    "J": PieceType("J", "#FF6600", ((1,0,0),
                                    (1,1,1))),
    "O": PieceType("O", "#FF99CB", ((1,1),
                                    (1,1))),
    "I": PieceType("I", "#FE0000", ((0,0,0,0),
                                    (1,1,1,1))),
}

MAX_PIECE_WIDTH = max(t.width for t in CATALOG.values())


def rotate_cw(m: Sequence[Sequence[int]]) -> Layout:
    """Clockwise quarter turn: transpose, then reverse each row."""
    return [list(r) for r in zip(*m[::-1])]


@dataclass
class Piece:
    kind: PieceType
    layout: Layout
    x: int
    y: int
    grid: Grid = field(repr=False)

    @property
    def color(self) -> str:
        return self.kind.color

    @staticmethod
    def spawn(kind: PieceType, grid: Grid, rng) -> "Piece":
        layout = [list(r) for r in kind.layout]
        w, h = len(layout[0]), len(layout)
        # whole layout starts above row 0
        return Piece(kind, layout, rng.randint(0, grid.width - w), -h, grid)

    def _placed(self, dx: int, dy: int, layout: Sequence[Sequence[int]]) -> Iterator[Tuple[int, int]]:
        for r, row in enumerate(layout):
            for c, v in enumerate(row):
                if v:
                    yield self.y + dy + r, self.x + dx + c

    def would_collide(self, dx: int, dy: int, layout: Optional[Layout] = None) -> bool:
        """True if the layout at the offset leaves the grid or hits a locked cell."""
        g = self.grid
        for by, bx in self._placed(dx, dy, self.layout if layout is None else layout):
            if by >= g.height: return True
            if bx < 0 or bx >= g.width: return True
            if g.is_occupied(by, bx): return True
        return False

    def is_game_over_after_move(self, dx: int, dy: int) -> bool:
        """Real-move check: own layout hits a locked cell while still entering."""
        if self.y >= 0:
            return False
        g = self.grid
        for by, bx in self._placed(dx, dy, self.layout):
            if 0 <= bx < g.width and g.is_occupied(by, bx):
                return True
        return False

    def try_move(self, dx: int, dy: int) -> bool:
        if self.would_collide(dx, dy):
            return False
        self.x += dx
        self.y += dy
        return True

    def try_rotate(self) -> bool:
        # no wall kicks: the origin stays put
        candidate = rotate_cw(self.layout)
        if self.would_collide(0, 0, candidate):
            return False
        self.layout = candidate
        return True

    def cells(self) -> Iterator[Tuple[int, int]]:
        return self._placed(0, 0, self.layout)

    def lock_into(self, grid: Grid):
        for by, bx in self.cells():
            if by >= 0:
                grid.occupy(by, bx, self.color)
