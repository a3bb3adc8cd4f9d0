"""Rotation-rate shaping for arcade steering.

The car yaws at a constant rate while a turn is held, rather than through
steered wheels. The rate ramps in with speed so a stationary car cannot
spin in place, and the turn direction flips when reversing so steering
stays intuitive.
"""

from __future__ import annotations
from dataclasses import dataclass

from driftkit.core.vector import clamp, sign


@dataclass(frozen=True)
class RotationModel:
    """Speed-dependent rotation rate and yaw step.

    Attributes:
        rotation_rate: Full rotation rate (deg/s)
        min_speed: Speed (m/s) below which rotation is suppressed
        max_speed: Speed (m/s) at which the full rate is reached
    """
    rotation_rate: float = 190.0
    min_speed: float = 1.0
    max_speed: float = 4.0

    TURN_DEADZONE = 0.5
    STUMBLE_RATIO = 0.1

    def __post_init__(self):
        if self.max_speed <= self.min_speed:
            raise ValueError(
                f"max_speed ({self.max_speed}) must exceed min_speed ({self.min_speed})"
            )

    def effective_rate(self, rate: float, speed: float) -> float:
        """Scale ``rate`` by ``speed`` and clamp to the full rotation rate.

        Args:
            rate: Rotation rate active this tick (deg/s), already gated
                  by grounding
            speed: Previous-tick local speed magnitude (m/s)
        """
        if speed < self.min_speed:
            return 0.0

        ramp = (speed - self.min_speed) / (self.max_speed - self.min_speed)
        return min(rate * clamp(ramp, 0.0, 1.0), self.rotation_rate)

    def wants_turn(self, turn: float) -> bool:
        return abs(turn) > self.TURN_DEADZONE

    @staticmethod
    def yaw_delta(turn: float, forward_speed: float, rate: float, dt: float) -> float:
        """Yaw change (degrees) for a held turn.

        Reversing (negative forward speed) flips the direction so the car
        turns the way the player steers.
        """
        direction = -1.0 if forward_speed < 0.0 else 1.0
        return sign(turn) * direction * rate * dt

    def is_stumbling(self, angular_speed: float, dt: float) -> bool:
        """Whether the body is spinning from outside forces (rad/s input)."""
        return angular_speed > self.STUMBLE_RATIO * self.rotation_rate * dt
