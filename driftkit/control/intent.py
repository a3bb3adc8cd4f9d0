"""Control intent and vehicle factions."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class Faction(Enum):
    """Who drives the vehicle."""
    PLAYER = "player"       # Keyboard
    ENEMY = "enemy"         # Chases a target
    NEUTRAL = "neutral"     # Straight-line traffic


@dataclass(frozen=True)
class ControlIntent:
    """One tick's worth of driver commands.

    Attributes:
        throttle: -1 (full reverse) to +1 (full forward)
        turn: -1 (left) to +1 (right)
        boost: Whether boost is held
        reset_requested: Whether a reset was asked for this tick
    """
    throttle: float = 0.0
    turn: float = 0.0
    boost: bool = False
    reset_requested: bool = False

    def __post_init__(self):
        # Clamp out-of-range axes
        object.__setattr__(self, "throttle", max(-1.0, min(1.0, self.throttle)))
        object.__setattr__(self, "turn", max(-1.0, min(1.0, self.turn)))
