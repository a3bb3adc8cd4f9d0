"""Ready-made scenes shared by the CLI and examples."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from driftkit.control.intent import Faction
from driftkit.control.sources import AxisSource, KeyboardInput
from driftkit.core.ground import FlatGround
from driftkit.core.vector import Vector3
from driftkit.core.world import World
from driftkit.drift.curves import SlipCurves
from driftkit.vehicle.controller import DriftController, VehicleState, create_vehicle
from driftkit.vehicle.params import PhysicsParams


class ScriptedAxes:
    """Axis source that replays fixed values, for headless runs and tests."""

    def __init__(self, throttle: float = 0.0, sideways: float = 0.0, boost: bool = False):
        self.values = {
            KeyboardInput.THROTTLE_AXIS: throttle,
            KeyboardInput.TURN_AXIS: sideways,
            KeyboardInput.BOOST_AXIS: 1.0 if boost else 0.0,
        }
        self._pending: set = set()

    def press(self, name: str) -> None:
        """Queue a key press for the next poll."""
        self._pending.add(name)

    def axis(self, name: str) -> float:
        return self.values.get(name, 0.0)

    def key_pressed(self, name: str) -> bool:
        if name in self._pending:
            self._pending.discard(name)
            return True
        return False


@dataclass
class Scene:
    world: World
    player: DriftController
    others: List[DriftController] = field(default_factory=list)


def build_chase_scene(
    axes: AxisSource,
    params: Optional[PhysicsParams] = None,
    slip_curves: Optional[SlipCurves] = None,
    ground_extent: Optional[float] = 150.0,
    num_enemies: int = 2,
    num_neutral: int = 3,
    dt: float = 0.02
) -> Scene:
    """Player car with enemies chasing it and neutral traffic.

    Args:
        axes: Player input axes
        params: Physics tuning shared by every car
        slip_curves: Slip curves shared by every car
        ground_extent: Half-size of the ground square (None for infinite)
        num_enemies: Number of ChaseAI cars
        num_neutral: Number of NeutralAI cars
        dt: Fixed tick (seconds)
    """
    ground = FlatGround(height=0.0, extent=ground_extent)
    world = World(dt=dt, ground=ground)

    def spawn(faction: Faction, x: float, z: float, yaw: float, name: str, **kwargs) -> DriftController:
        vehicle = create_vehicle(
            faction, ground,
            position=Vector3(x, 0.5, z),
            yaw=yaw,
            params=params,
            slip_curves=slip_curves,
            name=name,
            **kwargs
        )
        world.add_vehicle(vehicle)
        return vehicle

    player = spawn(Faction.PLAYER, 0.0, 0.0, 0.0, "player", axes=axes)

    others = []
    for i in range(num_enemies):
        others.append(spawn(Faction.ENEMY, -40.0 + 80.0 * i, -60.0, 0.0, f"enemy-{i}", target=player))
    for i in range(num_neutral):
        others.append(spawn(Faction.NEUTRAL, 30.0 * (i - 1), 40.0, 90.0 * i, f"traffic-{i}"))

    return Scene(world=world, player=player, others=others)


def record(world: World, vehicle: DriftController, seconds: float) -> List[VehicleState]:
    """Step the world for ``seconds`` and return ``vehicle``'s state after each tick."""
    states = []
    steps = int(round(seconds / world.dt))
    for _ in range(steps):
        world.check_bounds()
        world.step()
        states.append(vehicle.get_state())
    return states
