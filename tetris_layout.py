# tetris_layout.py
from dataclasses import dataclass
from tetris_config import CONFIG, COLS, ROWS, HIDDEN_ROWS

VISIBLE_ROWS = ROWS - HIDDEN_ROWS

@dataclass
class Dims:
    cell: int
    board_w: int
    board_h: int
    hud_x: int
    hud_y: int

def compute_dims() -> Dims:
    cell = int(CONFIG["BLOCK_SIZE"])
    return Dims(
        cell=cell,
        board_w=COLS * cell,
        board_h=VISIBLE_ROWS * cell,
        hud_x=10, hud_y=20,
    )

def to_screen(dims: Dims, x: int, y: int):
    """Top-left pixel of board cell (x, y); hidden rows sit above the window."""
    return x * dims.cell, (y - HIDDEN_ROWS) * dims.cell
