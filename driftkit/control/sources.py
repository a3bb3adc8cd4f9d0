"""Input sources: where each vehicle's ControlIntent comes from.

One variant per faction:

- KeyboardInput (player): polls an axis source each tick
- ChaseAI (enemy): full throttle, turns to face a target
- NeutralAI (neutral): full throttle, straight ahead
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional, Protocol

from driftkit.control.intent import ControlIntent, Faction
from driftkit.core.vector import Vector3, bearing, delta_angle

if TYPE_CHECKING:
    from driftkit.core.rigid_body import RigidBody


class AxisSource(Protocol):
    """Polled device state (keyboard, gamepad, or a scripted stand-in)."""

    def axis(self, name: str) -> float:
        ...

    def key_pressed(self, name: str) -> bool:
        """True only on the poll where the key went down."""
        ...


class TargetProvider(Protocol):
    def position(self) -> Vector3:
        ...


class BodyTarget:
    """Target that follows a rigid body."""

    def __init__(self, body: RigidBody):
        self._body = body

    def position(self) -> Vector3:
        return self._body.position.copy()


class FixedTarget:
    """Target pinned to a world point."""

    def __init__(self, point: Vector3):
        self._point = point.copy()

    def position(self) -> Vector3:
        return self._point.copy()


class InputSource(ABC):
    """Produces a fresh ControlIntent every tick."""

    faction: Faction

    @abstractmethod
    def read(self, body: RigidBody) -> ControlIntent:
        """Return the intent for this tick given the vehicle's body."""


class KeyboardInput(InputSource):
    """Player input read from device axes.

    Axis names: "Throttle", "Sideways", "Boost"; key name: "Reset".
    """

    faction = Faction.PLAYER

    THROTTLE_AXIS = "Throttle"
    TURN_AXIS = "Sideways"
    BOOST_AXIS = "Boost"
    RESET_KEY = "Reset"

    def __init__(self, axes: AxisSource):
        if axes is None:
            raise ValueError("KeyboardInput requires an axis source")
        self._axes = axes

    def read(self, body: RigidBody) -> ControlIntent:
        return ControlIntent(
            throttle=self._axes.axis(self.THROTTLE_AXIS),
            turn=self._axes.axis(self.TURN_AXIS),
            boost=self._axes.axis(self.BOOST_AXIS) > 0.0,
            reset_requested=self._axes.key_pressed(self.RESET_KEY)
        )


class ChaseAI(InputSource):
    """Drive flat out and steer toward a target.

    Turns only when the target is more than ``turn_threshold`` degrees off
    the nose, which keeps the car from weaving on a straight approach.
    """

    faction = Faction.ENEMY

    def __init__(self, target: TargetProvider, turn_threshold: float = 10.0):
        if target is None:
            raise ValueError("ChaseAI requires a target provider")
        self.target = target
        self.turn_threshold = turn_threshold

    def heading_error(self, body: RigidBody) -> float:
        """Signed degrees from the current yaw to the target bearing."""
        goal = bearing(body.position, self.target.position())
        return delta_angle(body.yaw, goal)

    def read(self, body: RigidBody) -> ControlIntent:
        delta = self.heading_error(body)

        if delta > self.turn_threshold:
            turn = 1.0
        elif delta < -self.turn_threshold:
            turn = -1.0
        else:
            turn = 0.0

        return ControlIntent(throttle=1.0, turn=turn)


class NeutralAI(InputSource):
    """Straight-line filler traffic."""

    faction = Faction.NEUTRAL

    def read(self, body: RigidBody) -> ControlIntent:
        return ControlIntent(throttle=1.0, turn=0.0)


def create_input_source(
    faction: Faction,
    axes: Optional[AxisSource] = None,
    target: Optional[TargetProvider] = None
) -> InputSource:
    """Pick the input source for a faction.

    Args:
        faction: Vehicle faction
        axes: Device axes, required for Faction.PLAYER
        target: Chase target, required for Faction.ENEMY

    Raises:
        ValueError: If the faction's collaborator is missing
    """
    if faction == Faction.PLAYER:
        return KeyboardInput(axes)
    elif faction == Faction.ENEMY:
        return ChaseAI(target)
    elif faction == Faction.NEUTRAL:
        return NeutralAI()
    raise ValueError(f"Unknown faction: {faction!r}")
