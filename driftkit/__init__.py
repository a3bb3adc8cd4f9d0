"""
DriftKit - Arcade vehicle drift physics.

A fixed-tick vehicle controller that trades rigid-body realism for
controllable skids:
- Slip hysteresis with separate loading/unloading curves
- Speed-shaped constant-rate steering with momentum carry-over
- Grounded/airborne coefficient gating and slope attenuation
- Keyboard, chase and straight-line input sources
"""

__version__ = "0.1.0"

from driftkit.core.vector import Vector3
from driftkit.core.rigid_body import RigidBody
from driftkit.core.ground import FlatGround
from driftkit.core.world import World
from driftkit.control.intent import ControlIntent, Faction
from driftkit.vehicle.params import PhysicsParams
from driftkit.vehicle.controller import DriftController, VehicleState, create_vehicle

__all__ = [
    "Vector3",
    "RigidBody",
    "FlatGround",
    "World",
    "ControlIntent",
    "Faction",
    "PhysicsParams",
    "DriftController",
    "VehicleState",
    "create_vehicle",
    "__version__",
]
