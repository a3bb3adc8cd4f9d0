"""Vehicle controller and parameters."""

from driftkit.vehicle.params import PhysicsParams
from driftkit.vehicle.controller import (
    DriftController, VehicleState, TickCoefficients, create_vehicle
)
from driftkit.vehicle.wheel import WheelVisual

__all__ = [
    "PhysicsParams",
    "DriftController",
    "VehicleState",
    "TickCoefficients",
    "create_vehicle",
    "WheelVisual",
]
