"""Core physics engine components."""

from driftkit.core.vector import Vector3
from driftkit.core.rigid_body import RigidBody
from driftkit.core.ground import FlatGround, GroundProbe, GroundSensor
from driftkit.core.world import World

__all__ = [
    "Vector3",
    "RigidBody",
    "FlatGround",
    "GroundProbe",
    "GroundSensor",
    "World",
]
