"""Kinematic rigid body handle used by the drift controller.

The controller drives velocity directly, so the body only stores state,
converts directions between world and local frames, and integrates
position and orientation. There is no force accumulation or contact
response.
"""

from __future__ import annotations
import math
from dataclasses import dataclass, field

import numpy as np

from driftkit.core.vector import Vector3, normalize_degrees


def rotation_matrix(pitch: float, yaw: float, roll: float) -> np.ndarray:
    """Build the local-to-world rotation for Euler angles in degrees.

    Rotations are composed as yaw (about y), then pitch (about x), then
    roll (about z). Positive yaw turns +z toward +x; positive pitch turns
    the nose down.
    """
    p, y, r = math.radians(pitch), math.radians(yaw), math.radians(roll)
    cp, sp = math.cos(p), math.sin(p)
    cy, sy = math.cos(y), math.sin(y)
    cr, sr = math.cos(r), math.sin(r)

    rot_y = np.array([[cy, 0.0, sy], [0.0, 1.0, 0.0], [-sy, 0.0, cy]])
    rot_x = np.array([[1.0, 0.0, 0.0], [0.0, cp, -sp], [0.0, sp, cp]])
    rot_z = np.array([[cr, -sr, 0.0], [sr, cr, 0.0], [0.0, 0.0, 1.0]])
    return rot_y @ rot_x @ rot_z


@dataclass
class RigidBody:
    """3D vehicle body with position, Euler orientation and velocities.

    - ``orientation`` holds Euler angles in degrees (x = pitch, y = yaw,
      z = roll), each normalized to (-180, 180].
    - ``angular_velocity`` is in rad/s about the world axes.
    - ``half_extents`` is half the size of the collision bounds; its y
      component is the distance from the origin to the ground contact.
    """

    position: Vector3 = field(default_factory=Vector3)
    orientation: Vector3 = field(default_factory=Vector3)
    velocity: Vector3 = field(default_factory=Vector3)
    angular_velocity: Vector3 = field(default_factory=Vector3)

    half_extents: Vector3 = field(default_factory=lambda: Vector3(1.0, 0.5, 2.0))
    center_of_mass: Vector3 = field(default_factory=Vector3)
    angular_drag: float = 0.05

    def __post_init__(self):
        self.set_orientation(self.orientation.x, self.orientation.y, self.orientation.z)

    @property
    def pitch(self) -> float:
        return self.orientation.x

    @property
    def yaw(self) -> float:
        return self.orientation.y

    @property
    def roll(self) -> float:
        return self.orientation.z

    @property
    def half_height(self) -> float:
        """Distance from the body origin to the bottom of its bounds."""
        return self.half_extents.y

    def set_orientation(self, pitch: float, yaw: float, roll: float) -> None:
        """Set Euler angles (degrees)."""
        self.orientation = Vector3(
            normalize_degrees(pitch),
            normalize_degrees(yaw),
            normalize_degrees(roll)
        )

    def rotate_yaw(self, delta: float) -> None:
        """Rotate about world up by ``delta`` degrees."""
        self.set_orientation(self.pitch, self.yaw + delta, self.roll)

    def rotation(self) -> np.ndarray:
        """Local-to-world rotation matrix for the current orientation."""
        return rotation_matrix(self.pitch, self.yaw, self.roll)

    def transform_direction(self, local_dir: Vector3) -> Vector3:
        """Transform a direction from local to world coordinates."""
        return Vector3.from_array(self.rotation() @ local_dir.to_array())

    def inverse_transform_direction(self, world_dir: Vector3) -> Vector3:
        """Transform a direction from world to local coordinates."""
        return Vector3.from_array(self.rotation().T @ world_dir.to_array())

    def forward(self) -> Vector3:
        """Unit vector pointing forward (local +z in world)."""
        return self.transform_direction(Vector3(0.0, 0.0, 1.0))

    def up(self) -> Vector3:
        """Unit vector pointing up (local +y in world)."""
        return self.transform_direction(Vector3(0.0, 1.0, 0.0))

    def right(self) -> Vector3:
        """Unit vector pointing right (local +x in world)."""
        return self.transform_direction(Vector3(1.0, 0.0, 0.0))

    def local_to_world(self, local_point: Vector3) -> Vector3:
        """Transform a point from local (body) to world coordinates."""
        return self.position + self.transform_direction(local_point)

    def get_local_velocity(self) -> Vector3:
        """Get velocity in local (body) coordinates."""
        return self.inverse_transform_direction(self.velocity)

    def get_speed(self) -> float:
        return self.velocity.magnitude()

    def integrate(self, dt: float, gravity: float = 9.81) -> None:
        """Advance position and orientation by one step.

        Gravity is applied to the vertical velocity first, angular velocity
        is damped by ``angular_drag``, and then position and orientation
        move with the updated velocities.
        """
        self.velocity.y -= gravity * dt
        self.position += self.velocity * dt

        self.angular_velocity = self.angular_velocity * max(0.0, 1.0 - self.angular_drag * dt)
        spin = self.angular_velocity * (math.degrees(1.0) * dt)
        self.set_orientation(self.pitch + spin.x, self.yaw + spin.y, self.roll + spin.z)

    def set_state(self, position: Vector3, orientation: Vector3,
                  velocity: Vector3, angular_velocity: Vector3) -> None:
        """Set complete state."""
        self.position = position.copy()
        self.set_orientation(orientation.x, orientation.y, orientation.z)
        self.velocity = velocity.copy()
        self.angular_velocity = angular_velocity.copy()
