"""Vector mathematics and angle helpers for the y-up vehicle frame."""

from __future__ import annotations
import math
from dataclasses import dataclass

import numpy as np


@dataclass
class Vector3:
    """3D vector with common operations for physics simulation.

    World axes are x = right, y = up, z = forward. The same layout is used
    for local (body) vectors, so ``x`` is the lateral component and ``z``
    the forward component of a local velocity.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Vector3:
        """Create Vector3 from numpy array."""
        return cls(float(arr[0]), float(arr[1]), float(arr[2]) if len(arr) > 2 else 0.0)

    @classmethod
    def up(cls) -> Vector3:
        return cls(0.0, 1.0, 0.0)

    def to_array(self) -> np.ndarray:
        """Convert to numpy array."""
        return np.array([self.x, self.y, self.z])

    def magnitude(self) -> float:
        """Return the length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def magnitude_squared(self) -> float:
        """Return the squared length (faster, no sqrt)."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def magnitude_horizontal(self) -> float:
        """Return length in the XZ (ground) plane only."""
        return math.sqrt(self.x * self.x + self.z * self.z)

    def normalized(self) -> Vector3:
        """Return unit vector in same direction."""
        mag = self.magnitude()
        if mag < 1e-10:
            return Vector3(0.0, 0.0, 0.0)
        return Vector3(self.x / mag, self.y / mag, self.z / mag)

    def dot(self, other: Vector3) -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def scale(self, other: Vector3) -> Vector3:
        """Component-wise product."""
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def lerp(self, other: Vector3, t: float) -> Vector3:
        """Linear interpolation between this and other vector."""
        return Vector3(
            self.x + (other.x - self.x) * t,
            self.y + (other.y - self.y) * t,
            self.z + (other.z - self.z) * t
        )

    def copy(self) -> Vector3:
        """Return a copy of this vector."""
        return Vector3(self.x, self.y, self.z)

    # Operator overloads
    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vector3:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector3:
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __iadd__(self, other: Vector3) -> Vector3:
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __isub__(self, other: Vector3) -> Vector3:
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def __repr__(self) -> str:
        return f"Vector3({self.x:.4f}, {self.y:.4f}, {self.z:.4f})"


def normalize_degrees(angle: float) -> float:
    """Normalize angle in degrees to the (-180, 180] range."""
    angle = math.fmod(angle, 360.0)
    if angle > 180.0:
        angle -= 360.0
    elif angle <= -180.0:
        angle += 360.0
    return angle


def delta_angle(current: float, target: float) -> float:
    """Shortest signed difference from ``current`` to ``target`` in degrees.

    Positive when ``target`` lies clockwise (seen from above) of ``current``.
    """
    return normalize_degrees(target - current)


def bearing(origin: Vector3, target: Vector3) -> float:
    """Heading in degrees from origin to target, measured from +z toward +x."""
    return math.degrees(math.atan2(target.x - origin.x, target.z - origin.z))


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def sign(x: float) -> float:
    """Return sign of x (-1, 0, or 1)."""
    if x > 0:
        return 1.0
    elif x < 0:
        return -1.0
    return 0.0


def decay_toward_zero(value: float, amount: float) -> float:
    """Pull ``value`` toward zero by ``amount`` without crossing it.

    A zero value is treated as moving in the negative direction, so the
    pull lands back on zero instead of pushing it away.
    """
    direction = 1.0 if value > 0.0 else -1.0
    value -= direction * amount
    if value * direction < 0.0:
        value = 0.0
    return value
