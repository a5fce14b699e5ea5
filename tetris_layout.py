# tetris_layout.py
from dataclasses import dataclass
from typing import Optional, Tuple
from tetris_config import CONFIG

@dataclass
class Dims:
    cell: int
    cols: int
    rows: int
    board_w: int
    board_h: int

    def cell_rect(self, col: int, row: int) -> Tuple[int, int, int, int]:
        return (col * self.cell, row * self.cell, self.cell, self.cell)

def compute_dims(cols: Optional[int] = None, rows: Optional[int] = None,
                 cell: Optional[int] = None) -> Dims:
    cols = int(CONFIG["COLS"] if cols is None else cols)
    rows = int(CONFIG["ROWS"] if rows is None else rows)
    cell = int(CONFIG["CELL_SIZE"] if cell is None else cell)

    return Dims(
        cell=cell, cols=cols, rows=rows,
        board_w=cols * cell, board_h=rows * cell,
    )
