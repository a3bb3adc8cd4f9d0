"""Simulation world managing fixed-tick vehicle updates."""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List

from driftkit.core.ground import FlatGround

if TYPE_CHECKING:
    from driftkit.vehicle.controller import DriftController

logger = logging.getLogger(__name__)


@dataclass
class World:
    """Physics simulation world.

    Owns the stepping loop: vehicles never schedule themselves. Provides a
    fixed timestep with an accumulator for consistent physics regardless
    of frame rate, and an out-of-bounds pass that runs between ticks.
    """

    # Simulation parameters
    dt: float = 0.02  # 50 Hz fixed tick
    time: float = 0.0
    gravity: float = 9.81  # m/s^2
    ground: FlatGround = field(default_factory=FlatGround)
    kill_height: float = -10.0  # respawn vehicles that fall below this

    # Managed objects
    vehicles: List[DriftController] = field(default_factory=list)

    # Fixed timestep accumulator
    _accumulator: float = 0.0
    _max_steps_per_frame: int = 20  # Prevent spiral of death

    def __post_init__(self):
        if self.dt <= 0.0:
            raise ValueError(f"World dt must be positive, got {self.dt}")

    def add_vehicle(self, vehicle: DriftController) -> None:
        """Add a vehicle to the simulation."""
        self.vehicles.append(vehicle)

    def remove_vehicle(self, vehicle: DriftController) -> None:
        """Remove a vehicle from the simulation."""
        if vehicle in self.vehicles:
            self.vehicles.remove(vehicle)

    def step(self) -> None:
        """Advance simulation by one fixed timestep (dt)."""
        for vehicle in self.vehicles:
            vehicle.on_fixed_tick(self.dt)
            vehicle.body.integrate(self.dt, self.gravity)
            self._clamp_to_ground(vehicle)

        self.time += self.dt

    def _clamp_to_ground(self, vehicle: DriftController) -> None:
        """Keep the body's bounds from sinking below the ground plane."""
        body = vehicle.body
        height = self.ground.height_at(body.position.x, body.position.z)
        if height is None:
            return

        floor = height + body.half_height
        if body.position.y < floor:
            body.position.y = floor
            if body.velocity.y < 0.0:
                body.velocity.y = 0.0

    def check_bounds(self) -> int:
        """Respawn vehicles that fell out of the world.

        Returns:
            Number of vehicles respawned
        """
        respawned = 0
        for vehicle in self.vehicles:
            if vehicle.body.position.y < self.kill_height:
                vehicle.respawn()
                respawned += 1
        return respawned

    def step_fixed(self, real_dt: float) -> int:
        """Fixed timestep update with accumulator.

        Call this once per frame with the real elapsed time. The bounds
        check runs first, then the simulation steps as many whole ticks
        as the accumulated time allows.

        Args:
            real_dt: Real elapsed time since last call (seconds)

        Returns:
            Number of physics steps taken
        """
        self.check_bounds()

        self._accumulator += real_dt
        steps = 0

        while self._accumulator >= self.dt and steps < self._max_steps_per_frame:
            self.step()
            self._accumulator -= self.dt
            steps += 1

        if steps == self._max_steps_per_frame and self._accumulator >= self.dt:
            logger.warning("Simulation falling behind, dropping %.3fs", self._accumulator)
            self._accumulator = 0.0

        return steps

    def reset(self) -> None:
        """Reset simulation to initial state."""
        self.time = 0.0
        self._accumulator = 0.0
        for vehicle in self.vehicles:
            vehicle.reset()

    def get_interpolation_alpha(self) -> float:
        """Get interpolation factor for rendering between physics steps.

        Returns value in [0, 1] representing progress toward next step.
        """
        return self._accumulator / self.dt
