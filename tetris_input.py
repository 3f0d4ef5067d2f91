
"""Keyboard → command mapping"""
from typing import Optional
import pygame
from tetris_state import Command

KEY_BINDINGS = {
    pygame.K_LEFT: Command.MOVE_LEFT,   pygame.K_a: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT, pygame.K_d: Command.MOVE_RIGHT,
    pygame.K_DOWN: Command.SOFT_DROP,   pygame.K_s: Command.SOFT_DROP,
    pygame.K_UP: Command.ROTATE_RIGHT,  pygame.K_w: Command.ROTATE_RIGHT,
    pygame.K_z: Command.ROTATE_LEFT,
    pygame.K_SPACE: Command.HARD_DROP,
    pygame.K_p: Command.TOGGLE_PAUSE,
    pygame.K_r: Command.RESTART,
}

def command_for(event) -> Optional[Command]:
    if event.type != pygame.KEYDOWN: return None
    return KEY_BINDINGS.get(event.key)
