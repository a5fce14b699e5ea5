"""Grid model: locked cells and row clearing"""
from typing import Iterator, List, Optional, Tuple

Cell = Optional[str]  # None or a color string


class Grid:
    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f"grid must be at least 1x1, got {width}x{height}")
        self.width = width
        self.height = height
        self.cells: List[List[Cell]] = [[None] * width for _ in range(height)]

    def is_occupied(self, row: int, col: int) -> bool:
        # rows above the matrix (spawn area) are never occupied
        if not 0 <= row < self.height:
            return False
        return self.cells[row][col] is not None

    def color_at(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def occupy(self, row: int, col: int, color: str):
        self.cells[row][col] = color

    def row_is_full(self, row: int) -> bool:
        return all(c is not None for c in self.cells[row])

    def clear_row(self, row: int):
        del self.cells[row]
        self.cells.insert(0, [None] * self.width)

    def clear_full_rows(self) -> int:
        """Remove every full row, bottom-up, and return how many went."""
        cleared = 0
        y = self.height - 1
        while y >= 0:
            if self.row_is_full(y):
                # the row shifted in from above now sits at y; check it again
                self.clear_row(y)
                cleared += 1
            else:
                y -= 1
        return cleared

    def occupied_cells(self) -> Iterator[Tuple[int, int, str]]:
        for y, row in enumerate(self.cells):
            for x, color in enumerate(row):
                if color is not None:
                    yield y, x, color

    def reset(self):
        for row in self.cells:
            row[:] = [None] * self.width
