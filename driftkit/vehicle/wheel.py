"""Cosmetic front-wheel steering angle."""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from driftkit.vehicle.controller import DriftController


class WheelVisual:
    """Steering angle of a visual wheel, read from its owning vehicle.

    Purely cosmetic; the controller never reads it back.
    """

    def __init__(self, vehicle: DriftController, modifier: float = 0.1, base_yaw: float = 0.0):
        """Initialize wheel visual.

        Args:
            vehicle: Owning vehicle
            modifier: Fraction of the rotation rate shown as wheel angle
            base_yaw: Rest yaw of the wheel relative to the body (degrees)
        """
        if vehicle is None:
            raise ValueError("WheelVisual requires its owning vehicle")
        self.vehicle = vehicle
        self.modifier = modifier
        self.base_yaw = base_yaw

    def steer_angle(self) -> float:
        """Wheel yaw relative to the body (degrees)."""
        turn = self.vehicle.intent.turn
        return self.base_yaw + turn * self.vehicle.params.rotation_rate * self.modifier
