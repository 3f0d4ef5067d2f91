
"""Board: collision, lock, line clear"""
from typing import Iterator, List, Optional, Tuple
from tetris_config import COLS, ROWS, HIDDEN_ROWS
from tetris_piece import Piece, Color

Cell = Optional[Color]

class Grid:
    def __init__(self, width: int = COLS, height: int = ROWS):
        self.width, self.height = width, height
        self._cells: List[List[Cell]] = [[None]*width for _ in range(height)]

    def reset(self):
        for row in self._cells:
            for x in range(self.width): row[x] = None

    def cell(self, x: int, y: int) -> Cell:
        return self._cells[y][x]

    def rows(self) -> List[List[Cell]]:
        return [row[:] for row in self._cells]

    def is_full_row(self, y: int) -> bool:
        return all(c is not None for c in self._cells[y])

    def is_legal_position(self, piece: Piece, x: int, y: int) -> bool:
        for bx, by in piece.cells(x, y):
            if bx<0 or bx>=self.width or by>=self.height: return False
            if by<0: continue
            if self._cells[by][bx] is not None: return False
        return True

    def lock_piece(self, piece: Piece, x: int, y: int):
        for bx, by in piece.cells(x, y):
            if by>=0: self._cells[by][bx] = piece.color

    def clear_full_lines(self) -> int:
        """Remove full rows bottom-up and return how many were removed.

        After a row is removed the rows above shift down into it, so the same
        index is checked again before moving up.
        """
        c=0; y=self.height-1
        while y>=0:
            if self.is_full_row(y):
                c+=1
                for j in range(y, 0, -1):
                    self._cells[j] = self._cells[j-1][:]
                self._cells[0] = [None]*self.width
            else: y-=1
        return c

    def visible_cells(self) -> Iterator[Tuple[int, int, Color]]:
        for y in range(HIDDEN_ROWS, self.height):
            for x, col in enumerate(self._cells[y]):
                if col is not None: yield x, y, col
