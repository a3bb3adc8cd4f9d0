"""Smoothed follow camera.

The camera aims for a point fixed relative to the target body (``relative``,
in the body's local frame) plus a world-space ``offset``, and eases toward
it with a critically damped spring.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple

from driftkit.core.rigid_body import RigidBody
from driftkit.core.vector import Vector3


def smooth_damp(
    current: float,
    target: float,
    velocity: float,
    smooth_time: float,
    dt: float
) -> Tuple[float, float]:
    """Critically damped approach of ``current`` toward ``target``.

    Args:
        current: Current value
        target: Value to approach
        velocity: Current rate of change (carried between calls)
        smooth_time: Approximate time to reach the target (seconds)
        dt: Time step (seconds)

    Returns:
        Tuple of (new_value, new_velocity)
    """
    if dt <= 0.0:
        return current, velocity

    smooth_time = max(0.0001, smooth_time)
    omega = 2.0 / smooth_time

    x = omega * dt
    decay = 1.0 / (1.0 + x + 0.48 * x * x + 0.235 * x * x * x)

    change = current - target
    temp = (velocity + omega * change) * dt
    velocity = (velocity - omega * temp) * decay
    output = target + (change + temp) * decay

    # Never overshoot the target
    if (target - current > 0.0) == (output > target):
        output = target
        velocity = (output - target) / dt

    return output, velocity


@dataclass
class FollowCamera:
    """Camera that trails a body."""
    offset: Vector3 = field(default_factory=lambda: Vector3(0.0, 5.0, -5.0))
    relative: Vector3 = field(default_factory=Vector3)
    smooth_time: float = 0.3

    position: Optional[Vector3] = None
    _velocity: Vector3 = field(default_factory=Vector3)

    def goal(self, target: RigidBody) -> Vector3:
        """Where the camera wants to be for this target."""
        return target.local_to_world(self.relative) + self.offset

    def update(self, target: RigidBody, dt: float) -> Vector3:
        """Move toward the target's goal point.

        The first call snaps straight to the goal.
        """
        goal = self.goal(target)
        if self.position is None:
            self.position = goal
            return self.position.copy()

        x, vx = smooth_damp(self.position.x, goal.x, self._velocity.x, self.smooth_time, dt)
        y, vy = smooth_damp(self.position.y, goal.y, self._velocity.y, self.smooth_time, dt)
        z, vz = smooth_damp(self.position.z, goal.z, self._velocity.z, self.smooth_time, dt)

        self.position = Vector3(x, y, z)
        self._velocity = Vector3(vx, vy, vz)
        return self.position.copy()
