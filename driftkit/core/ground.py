"""Ground probing: the environment side and the vehicle's grounded check."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Protocol

from driftkit.core.vector import Vector3


class GroundProbe(Protocol):
    """Downward intersection test against the environment."""

    def probe(self, origin: Vector3, direction: Vector3, max_distance: float) -> bool:
        ...


@dataclass
class FlatGround:
    """Horizontal ground plane at ``height``.

    With ``extent`` set the plane is a square of that half-size centered on
    the world origin; anything past the edge has no ground below it.
    """
    height: float = 0.0
    extent: Optional[float] = None

    def height_at(self, x: float, z: float) -> Optional[float]:
        """Ground height under (x, z), or None off the edge."""
        if self.extent is not None and (abs(x) > self.extent or abs(z) > self.extent):
            return None
        return self.height

    def probe(self, origin: Vector3, direction: Vector3, max_distance: float) -> bool:
        """Ray/plane intersection within ``max_distance``."""
        if direction.y >= 0.0:
            return False

        # Distance along the ray to the plane
        t = (self.height - origin.y) / direction.y
        if t < 0.0 or t > max_distance:
            return False

        hit = origin + direction * t
        return self.height_at(hit.x, hit.z) is not None


class GroundSensor:
    """Classify a body as grounded or airborne with a short downward probe.

    The probe reaches from the body origin to just past the bottom of its
    bounds.
    """

    PROBE_MARGIN: float = 0.1  # m past the bottom of the bounds

    def __init__(self, probe: GroundProbe):
        if probe is None:
            raise ValueError("GroundSensor requires a ground probe")
        self._probe = probe

    def probe_distance(self, half_height: float) -> float:
        return half_height + self.PROBE_MARGIN

    def is_grounded(self, origin: Vector3, down: Vector3, half_height: float) -> bool:
        """Whether the probe from ``origin`` along ``down`` hits the ground."""
        return self._probe.probe(origin, down, self.probe_distance(half_height))
