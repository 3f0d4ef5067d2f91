
"""Game state: piece lifecycle, commands, scoring"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple
from tetris_board import Grid
from tetris_config import HIDDEN_ROWS
from tetris_piece import Piece, Shape, Color
from tetris_rng import ShapeRandom

log = logging.getLogger(__name__)

SCORE_TABLE = (0, 100, 300, 500, 800)

class Command(Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SOFT_DROP = "soft_drop"
    ROTATE_RIGHT = "rotate_right"
    ROTATE_LEFT = "rotate_left"
    HARD_DROP = "hard_drop"
    TOGGLE_PAUSE = "toggle_pause"
    RESTART = "restart"

class Phase(Enum):
    SPAWNING = "spawning"
    FALLING = "falling"
    PAUSED = "paused"
    GAME_OVER = "game_over"

def line_score(n: int) -> int:
    return SCORE_TABLE[min(n, 4)]

@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the game handed to the renderer each frame."""
    cells: Tuple[Tuple[int, int, Color], ...]
    piece_cells: Tuple[Tuple[int, int], ...]
    piece_color: Optional[Color]
    score: int
    lines: int
    paused: bool
    game_over: bool

class GameState:
    def __init__(self, rng: Optional[ShapeRandom] = None, grid: Optional[Grid] = None):
        self.rng = rng if rng is not None else ShapeRandom()
        self.grid = grid if grid is not None else Grid()
        self.piece = Piece.from_shape(Shape.NO_SHAPE)
        self.x = self.y = 0
        self.score = self.lines = 0
        self.locked = 0
        self.paused = self.game_over = False
        self.falling_finished = False

    @property
    def phase(self) -> Phase:
        if self.game_over: return Phase.GAME_OVER
        if self.paused: return Phase.PAUSED
        if self.falling_finished: return Phase.SPAWNING
        return Phase.FALLING

    # ---------- lifecycle ----------
    def start(self):
        self.grid.reset()
        self.score = self.lines = 0
        self.locked = 0
        self.paused = self.game_over = False
        self.falling_finished = False
        log.info("new game")
        self.spawn()

    def spawn(self):
        self.piece = Piece.random(self.rng)
        self.x, self.y = self.grid.width // 2, 1
        if not self.grid.is_legal_position(self.piece, self.x, self.y):
            self.game_over = True
            self.piece = Piece.from_shape(Shape.NO_SHAPE)
            log.info("game over: score=%d lines=%d", self.score, self.lines)
            return
        log.debug("spawned %s at (%d,%d)", self.piece.shape.name, self.x, self.y)

    def tick(self):
        if self.game_over or self.paused: return
        if self.falling_finished:
            self.falling_finished = False
            self.spawn()
        else:
            self.one_line_down()

    def try_move(self, piece: Piece, x: int, y: int) -> bool:
        if not self.grid.is_legal_position(piece, x, y): return False
        self.piece, self.x, self.y = piece, x, y
        return True

    def one_line_down(self):
        if not self.try_move(self.piece, self.x, self.y+1):
            self.piece_dropped()

    def drop_down(self):
        y = self.y
        while self.grid.is_legal_position(self.piece, self.x, y+1): y += 1
        self.y = y
        self.piece_dropped()

    def piece_dropped(self):
        self.grid.lock_piece(self.piece, self.x, self.y)
        self.locked += 1
        log.debug("locked %s at (%d,%d)", self.piece.shape.name, self.x, self.y)
        n = self.grid.clear_full_lines()
        if n:
            self.score += line_score(n)
            self.lines += n
            log.info("cleared %d line(s): score=%d lines=%d", n, self.score, self.lines)
        if not self.game_over:
            self.falling_finished = True

    def toggle_pause(self):
        self.paused = not self.paused
        log.info("paused" if self.paused else "resumed")

    # ---------- input ----------
    def accepts_input(self) -> bool:
        return not (self.paused or self.game_over or self.falling_finished
                    or self.piece.shape is Shape.NO_SHAPE)

    def handle(self, command: Command):
        if command is Command.RESTART:
            if self.game_over or self.paused: self.start()
            return
        if command is Command.TOGGLE_PAUSE:
            if not self.game_over: self.toggle_pause()
            return
        if not self.accepts_input(): return
        if command is Command.MOVE_LEFT: self.try_move(self.piece, self.x-1, self.y)
        elif command is Command.MOVE_RIGHT: self.try_move(self.piece, self.x+1, self.y)
        elif command is Command.SOFT_DROP: self.one_line_down()
        elif command is Command.ROTATE_RIGHT: self.try_move(self.piece.rotate_right(), self.x, self.y)
        elif command is Command.ROTATE_LEFT: self.try_move(self.piece.rotate_left(), self.x, self.y)
        elif command is Command.HARD_DROP: self.drop_down()

    # ---------- rendering ----------
    def snapshot(self) -> Snapshot:
        show = not (self.game_over or self.falling_finished) and self.piece.shape is not Shape.NO_SHAPE
        piece_cells = tuple(c for c in self.piece.cells(self.x, self.y) if c[1] >= HIDDEN_ROWS) if show else ()
        return Snapshot(
            cells=tuple(self.grid.visible_cells()),
            piece_cells=piece_cells,
            piece_color=self.piece.color if show else None,
            score=self.score, lines=self.lines,
            paused=self.paused, game_over=self.game_over,
        )
