
"""Keyboard -> intent mapping"""
import enum
from typing import Optional
import pygame

class Intent(enum.Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SOFT_DROP = "soft_drop"
    ROTATE = "rotate"

KEY_BINDINGS = {
    pygame.K_LEFT: Intent.MOVE_LEFT,
    pygame.K_RIGHT: Intent.MOVE_RIGHT,
    pygame.K_DOWN: Intent.SOFT_DROP,
    pygame.K_UP: Intent.ROTATE,
}

START_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_r)

def intent_for_key(key) -> Optional[Intent]:
    return KEY_BINDINGS.get(key)

def dispatch(game, intent: Intent) -> bool:
    """Forward an intent to the game; ignored unless a game is running."""
    if not game.running: return False
    if intent is Intent.MOVE_LEFT: return game.move_left()
    if intent is Intent.MOVE_RIGHT: return game.move_right()
    if intent is Intent.SOFT_DROP: return game.soft_drop()
    if intent is Intent.ROTATE: return game.rotate()
    return False
