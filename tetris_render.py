
"""
Rendering helpers for the Tetris project.

- Pre-render one beveled block Surface per color and blit it for every cell.
- Cache HUD text surfaces; re-render only when values change.
- Draw only from a Snapshot; the renderer never touches game state.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional
from tetris_layout import Dims, to_screen
from tetris_piece import Color
from tetris_state import Snapshot

BACKGROUND = (0,0,0)
TEXT = (255,255,255)

GAME_OVER_MSG = "Game Over! (R to Restart)"
PAUSED_MSG = "Paused (P to Resume)"

def brighter(c: Color) -> Color:
    return tuple(min(255, int(v / 0.7)) for v in c)

def darker(c: Color) -> Color:
    return tuple(int(v * 0.7) for v in c)

@dataclass
class HudCache:
    score: int = -1
    lines: int = -1
    score_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None

class Renderer:
    """Holds pre-rendered assets and draws a Snapshot each frame."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self.blocks: Dict[Color, pygame.Surface] = {}
        self.hud = HudCache()
        self.messages: Dict[str, pygame.Surface] = {}

    # ---------- Block sprites ----------
    def block(self, color: Color) -> pygame.Surface:
        s = self.blocks.get(color)
        if s is None:
            c = self.dims.cell
            s = pygame.Surface((c, c))
            s.fill(color)
            hi, lo = brighter(color), darker(color)
            pygame.draw.line(s, hi, (0,0), (c-1,0))
            pygame.draw.line(s, hi, (0,0), (0,c-1))
            pygame.draw.line(s, lo, (1,c-1), (c-1,c-1))
            pygame.draw.line(s, lo, (c-1,1), (c-1,c-1))
            self.blocks[color] = s
        return s

    def draw_cell(self, screen: pygame.Surface, color: Color, bx: int, by: int):
        screen.blit(self.block(color), to_screen(self.dims, bx, by))

    # ---------- HUD ----------
    def draw_hud(self, screen: pygame.Surface, score: int, lines: int):
        d, f = self.dims, self.font
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = f.render(f"Score: {score}", True, TEXT)
        if lines != self.hud.lines:
            self.hud.lines = lines
            self.hud.lines_s = f.render(f"Lines: {lines}", True, TEXT)
        screen.blit(self.hud.score_s, (d.hud_x, d.hud_y - 16))
        screen.blit(self.hud.lines_s, (d.hud_x, d.hud_y + 4))

    def draw_message(self, screen: pygame.Surface, text: str):
        msg = self.messages.get(text)
        if msg is None:
            msg = self.messages[text] = self.big_font.render(text, True, TEXT)
        rect = msg.get_rect(center=(self.dims.board_w // 2, self.dims.board_h // 2))
        screen.blit(msg, rect)

    # ---------- Frame ----------
    def draw(self, screen: pygame.Surface, snap: Snapshot):
        screen.fill(BACKGROUND)
        for x, y, color in snap.cells:
            self.draw_cell(screen, color, x, y)
        if snap.piece_color is not None:
            for x, y in snap.piece_cells:
                self.draw_cell(screen, snap.piece_color, x, y)
        self.draw_hud(screen, snap.score, snap.lines)
        if snap.game_over:
            self.draw_message(screen, GAME_OVER_MSG)
        elif snap.paused:
            self.draw_message(screen, PAUSED_MSG)
