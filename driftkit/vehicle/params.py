"""Tunable physics parameters for the drift controller."""

from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Tuple


@dataclass(frozen=True)
class PhysicsParams:
    """Per-vehicle tuning, fixed once the vehicle is created."""
    accel: float = 15.0                     # m/s^2
    boost_ratio: float = 4.0 / 3.0          # accel multiplier while boosting
    top_speed: float = 30.0                 # m/s (forward and reverse)
    grip_x: float = 12.0                    # lateral grip decel (m/s^2)
    grip_z: float = 3.0                     # forward grip decel (m/s^2)
    rotation_rate: float = 190.0            # deg/s
    rotation_velocity_transfer: float = 0.8 # share of velocity carried through a turn

    # Center of mass as a fraction of the bounds' half size,
    # 0 = center, +/-1 = edge in the pos/neg direction
    center_of_mass_fraction: Tuple[float, float, float] = (0.0, 0.5, 0.0)

    # Ground drag suppresses unwanted spin; air drag leaves tumbling free
    angular_drag_grounded: float = 5.0
    angular_drag_airborne: float = 0.05

    min_rotation_speed: float = 1.0         # m/s to start rotating
    max_rotation_speed: float = 4.0         # m/s to reach full rotation
    slip_modifier: float = 20.0             # m/s of lateral speed per unit of slip curve input

    def __post_init__(self):
        for f in fields(self):
            if f.name == "center_of_mass_fraction":
                continue
            value = getattr(self, f.name)
            if value < 0.0:
                raise ValueError(f"{f.name} must be >= 0, got {value}")

        if self.rotation_velocity_transfer > 1.0:
            raise ValueError(
                f"rotation_velocity_transfer must be within [0, 1], "
                f"got {self.rotation_velocity_transfer}"
            )
        if self.max_rotation_speed <= self.min_rotation_speed:
            raise ValueError(
                f"max_rotation_speed ({self.max_rotation_speed}) must exceed "
                f"min_rotation_speed ({self.min_rotation_speed})"
            )
        if self.slip_modifier <= 0.0:
            raise ValueError(f"slip_modifier must be positive, got {self.slip_modifier}")
        if len(self.center_of_mass_fraction) != 3:
            raise ValueError("center_of_mass_fraction needs three components")
        if any(abs(c) > 1.0 for c in self.center_of_mass_fraction):
            raise ValueError(
                f"center_of_mass_fraction components must lie within [-1, 1], "
                f"got {self.center_of_mass_fraction}"
            )

    @classmethod
    def arcade(cls) -> PhysicsParams:
        """Default arcade tuning."""
        return cls()

    @classmethod
    def drifter(cls) -> PhysicsParams:
        """Loose rear, carries momentum through turns."""
        return cls(
            accel=16.0,
            top_speed=32.0,
            grip_x=7.0,
            grip_z=2.5,
            rotation_rate=210.0,
            rotation_velocity_transfer=0.55,
            slip_modifier=14.0
        )

    @classmethod
    def grippy(cls) -> PhysicsParams:
        """Planted, redirects almost all velocity on a turn."""
        return cls(
            accel=14.0,
            top_speed=28.0,
            grip_x=20.0,
            grip_z=4.0,
            rotation_rate=170.0,
            rotation_velocity_transfer=0.95,
            slip_modifier=30.0
        )
