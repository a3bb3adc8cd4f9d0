"""Arcade drift controller: the fixed-tick vehicle update.

The DriftController brings together:
- Ground sensing (grounded vs airborne coefficients)
- Rotation-rate shaping (speed ramp, reverse flip)
- Slip hysteresis (gradual grip loss, snappy recovery)
- An input source chosen by faction
- The stuck watchdog for AI vehicles

Each call to on_fixed_tick runs the stages in a fixed order. The order
matters: the turn is applied after throttle and reset, and the velocity
blend uses the local velocity captured just before the turn.
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass, field
from typing import Optional

from driftkit.control.intent import ControlIntent, Faction
from driftkit.control.sources import (
    AxisSource, InputSource, TargetProvider, create_input_source
)
from driftkit.control.watchdog import ResetWatchdog, WatchdogPhase
from driftkit.core.ground import GroundProbe, GroundSensor
from driftkit.core.rigid_body import RigidBody
from driftkit.core.vector import Vector3, clamp, decay_toward_zero
from driftkit.drift.curves import SlipCurves
from driftkit.drift.rotation import RotationModel
from driftkit.drift.slip import SlipModel, SlipPhase
from driftkit.vehicle.params import PhysicsParams

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TickCoefficients:
    """Coefficients actually used during the last tick."""
    accel: float = 0.0
    grip_x: float = 0.0
    grip_z: float = 0.0
    rotation: float = 0.0
    rotation_velocity_transfer: float = 0.0


@dataclass
class VehicleState:
    """Complete vehicle state for telemetry and visual collaborators."""
    # Body state
    position: Vector3 = field(default_factory=Vector3)
    orientation: Vector3 = field(default_factory=Vector3)   # pitch, yaw, roll (deg)
    velocity: Vector3 = field(default_factory=Vector3)
    angular_velocity: Vector3 = field(default_factory=Vector3)

    # Local frame (x = lateral, z = forward)
    local_velocity: Vector3 = field(default_factory=Vector3)
    previous_local_velocity: Vector3 = field(default_factory=Vector3)

    # Derived quantities
    speed: float = 0.0
    forward_speed: float = 0.0
    lateral_speed: float = 0.0

    # Controller flags
    grounded: bool = True
    slip_phase: SlipPhase = SlipPhase.NORMAL
    slip: float = 0.0
    watchdog_phase: WatchdogPhase = WatchdogPhase.IDLE
    is_rotating: bool = False
    is_stumbling: bool = False
    reset_requested: bool = False
    coefficients: TickCoefficients = field(default_factory=TickCoefficients)

    # Inputs
    throttle: float = 0.0
    turn: float = 0.0
    boost: bool = False


class DriftController:
    """Fixed-tick arcade drift controller for one vehicle.

    Owns its body's motion exclusively; nothing else should write the
    body's velocity or orientation between ticks except respawn().
    """

    THROTTLE_DEADZONE: float = 0.5
    RESET_LIFT: float = 2.0             # m raised on reset
    RESET_DROP_SPEED: float = -1.0      # m/s vertical velocity after reset

    def __init__(
        self,
        body: RigidBody,
        ground: GroundProbe,
        input_source: InputSource,
        params: Optional[PhysicsParams] = None,
        slip_curves: Optional[SlipCurves] = None,
        faction: Optional[Faction] = None,
        name: str = "vehicle"
    ):
        """Initialize controller.

        Args:
            body: Rigid body to drive
            ground: Ground probe for the grounded check
            input_source: Where this vehicle's intent comes from
            params: Physics tuning. Defaults to PhysicsParams.arcade().
            slip_curves: Slip hysteresis curves. Defaults to SlipCurves.default().
            faction: Vehicle faction. Defaults to the input source's faction.
            name: Label used in log messages

        Raises:
            ValueError: If a required collaborator is missing
        """
        if body is None:
            raise ValueError("DriftController requires a rigid body")
        if input_source is None:
            raise ValueError("DriftController requires an input source")

        self.name = name
        self.body = body
        self.params = params or PhysicsParams.arcade()
        self.input_source = input_source
        self.faction = faction or input_source.faction

        self.ground_sensor = GroundSensor(ground)
        self.rotation = RotationModel(
            rotation_rate=self.params.rotation_rate,
            min_speed=self.params.min_rotation_speed,
            max_speed=self.params.max_rotation_speed
        )
        self.slip_model = SlipModel(slip_curves, self.params.slip_modifier)
        self.watchdog = ResetWatchdog()

        # Spawn pose
        self.spawn_position = body.position.copy()
        self.spawn_orientation = body.orientation.copy()

        self.body.center_of_mass = body.half_extents.scale(
            Vector3(*self.params.center_of_mass_fraction)
        )

        # Tick state
        self._prev_local_velocity = Vector3()
        self._intent = ControlIntent()
        self._coefficients = TickCoefficients()
        self._grounded = True
        self._is_rotating = False
        self._is_stumbling = False
        self._reset_latched = False

        logger.info("Created %s vehicle %r at %s", self.faction.value, name, self.spawn_position)

    @property
    def auto_reset(self) -> bool:
        """AI vehicles reset themselves when stuck; the player never does."""
        return self.faction != Faction.PLAYER

    def on_fixed_tick(self, dt: float) -> None:
        """Run one fixed physics tick.

        Args:
            dt: Tick duration in seconds
        """
        if dt <= 0.0:
            raise ValueError(f"Tick duration must be positive, got {dt}")

        p = self.params
        body = self.body

        # Situational checks
        accel = p.accel
        rotate = p.rotation_rate
        grip_x = p.grip_x
        grip_z = p.grip_z
        transfer = p.rotation_velocity_transfer
        body.angular_drag = p.angular_drag_grounded

        # Adjustment on slopes
        cos_pitch = math.cos(math.radians(body.pitch))
        cos_roll = math.cos(math.radians(body.roll))
        accel = max(0.0, accel * cos_pitch)
        grip_z = max(0.0, grip_z * cos_pitch)
        grip_x = max(0.0, grip_x * cos_roll)

        self._grounded = self.ground_sensor.is_grounded(body.position, -body.up(), body.half_height)
        if not self._grounded:
            rotate = 0.0
            accel = 0.0
            grip_x = 0.0
            grip_z = 0.0
            body.angular_drag = p.angular_drag_airborne

        self._is_stumbling = self.rotation.is_stumbling(body.angular_velocity.magnitude(), dt)

        # Start turning only once there is speed
        rotate = self.rotation.effective_rate(rotate, self._prev_local_velocity.magnitude())

        slip = self.slip_model.update(self._prev_local_velocity.x)
        rotate *= SlipModel.rotation_scale(slip)
        transfer *= SlipModel.transfer_scale(slip)

        # Commands
        intent = self.input_source.read(body)
        self._intent = intent
        if intent.reset_requested:
            self._reset_latched = True

        if intent.boost:
            accel *= p.boost_ratio

        if abs(intent.throttle) > self.THROTTLE_DEADZONE:
            body.velocity += body.forward() * (intent.throttle * accel * dt)
            grip_z = 0.0    # Spinning wheels have no forward grip

        if self.auto_reset and self.watchdog.update(self._prev_local_velocity.magnitude()):
            self._reset_latched = True

        if self._reset_latched:
            self._apply_reset()

        self._is_rotating = False

        # Local velocity before the turn
        self._prev_local_velocity = body.get_local_velocity()

        if self.rotation.wants_turn(intent.turn):
            body.rotate_yaw(RotationModel.yaw_delta(
                intent.turn, self._prev_local_velocity.z, rotate, dt
            ))
            self._is_rotating = True

        self._coefficients = TickCoefficients(
            accel=accel,
            grip_x=grip_x,
            grip_z=grip_z,
            rotation=rotate,
            rotation_velocity_transfer=transfer
        )

        self._integrate(grip_x, grip_z, transfer, dt)

    def _apply_reset(self) -> None:
        """Stand the car upright (yaw kept), lift it, and drop it back down."""
        body = self.body
        body.set_orientation(0.0, body.yaw, 0.0)
        body.velocity = Vector3(0.0, self.RESET_DROP_SPEED, 0.0)
        body.position += Vector3(0.0, self.RESET_LIFT, 0.0)
        self._reset_latched = False
        logger.info("Reset %r at %s", self.name, body.position)

    def _integrate(self, grip_x: float, grip_z: float, transfer: float, dt: float) -> None:
        """Carry velocity through the turn, apply grip, clamp, and commit."""
        body = self.body
        vel = body.get_local_velocity()

        # transfer = 1 keeps the local velocity (follows the new heading),
        # transfer = 0 keeps the world velocity (drift)
        if self._is_rotating:
            vel = vel * (1.0 - transfer) + self._prev_local_velocity * transfer

        vel.x = decay_toward_zero(vel.x, grip_x * dt)
        vel.z = decay_toward_zero(vel.z, grip_z * dt)
        vel.z = clamp(vel.z, -self.params.top_speed, self.params.top_speed)

        body.velocity = body.transform_direction(vel)

    def request_reset(self) -> None:
        """Latch a reset to be applied on the next tick."""
        self._reset_latched = True

    def respawn(self) -> None:
        """Teleport to the spawn pose and latch a reset.

        Call between ticks only.
        """
        self.body.position = self.spawn_position.copy()
        self.body.set_orientation(
            self.spawn_orientation.x, self.spawn_orientation.y, self.spawn_orientation.z
        )
        self._reset_latched = True
        logger.info("Respawned %r at %s", self.name, self.spawn_position)

    def reset(self) -> None:
        """Restore the spawn pose and clear all tick state."""
        self.body.set_state(self.spawn_position, self.spawn_orientation, Vector3(), Vector3())
        self.slip_model.reset()
        self.watchdog.reset()
        self._prev_local_velocity = Vector3()
        self._intent = ControlIntent()
        self._coefficients = TickCoefficients()
        self._grounded = True
        self._is_rotating = False
        self._is_stumbling = False
        self._reset_latched = False

    def position(self) -> Vector3:
        """Current position, so a vehicle can be used as a chase target."""
        return self.body.position.copy()

    def get_drift_angle(self) -> float:
        """Angle between heading and velocity in degrees (positive = sliding right)."""
        local_vel = self.body.get_local_velocity()
        if local_vel.magnitude_horizontal() < 0.5:
            return 0.0
        return math.degrees(math.atan2(local_vel.x, local_vel.z))

    def get_state(self) -> VehicleState:
        """Get complete vehicle state."""
        local_vel = self.body.get_local_velocity()

        return VehicleState(
            position=self.body.position.copy(),
            orientation=self.body.orientation.copy(),
            velocity=self.body.velocity.copy(),
            angular_velocity=self.body.angular_velocity.copy(),
            local_velocity=local_vel,
            previous_local_velocity=self._prev_local_velocity.copy(),
            speed=self.body.get_speed(),
            forward_speed=local_vel.z,
            lateral_speed=local_vel.x,
            grounded=self._grounded,
            slip_phase=self.slip_model.phase,
            slip=self.slip_model.slip,
            watchdog_phase=self.watchdog.phase,
            is_rotating=self._is_rotating,
            is_stumbling=self._is_stumbling,
            reset_requested=self._reset_latched,
            coefficients=self._coefficients,
            throttle=self._intent.throttle,
            turn=self._intent.turn,
            boost=self._intent.boost
        )

    @property
    def grounded(self) -> bool:
        return self._grounded

    @property
    def is_rotating(self) -> bool:
        return self._is_rotating

    @property
    def is_stumbling(self) -> bool:
        return self._is_stumbling

    @property
    def reset_requested(self) -> bool:
        return self._reset_latched

    @property
    def coefficients(self) -> TickCoefficients:
        return self._coefficients

    @property
    def intent(self) -> ControlIntent:
        """Intent read on the last tick."""
        return self._intent


def create_vehicle(
    faction: Faction,
    ground: GroundProbe,
    position: Optional[Vector3] = None,
    yaw: float = 0.0,
    params: Optional[PhysicsParams] = None,
    slip_curves: Optional[SlipCurves] = None,
    axes: Optional[AxisSource] = None,
    target: Optional[TargetProvider] = None,
    name: str = "vehicle"
) -> DriftController:
    """Build a body and controller for a faction.

    Without a ``position`` the body rests on a ground plane at height 0
    under the world origin.

    Raises:
        ValueError: If the faction's collaborator (axes or target) is missing
    """
    body = RigidBody()
    if position is None:
        position = Vector3(0.0, body.half_height, 0.0)
    body.position = position.copy()
    body.set_orientation(0.0, yaw, 0.0)

    source = create_input_source(faction, axes=axes, target=target)
    return DriftController(
        body, ground, source,
        params=params,
        slip_curves=slip_curves,
        faction=faction,
        name=name
    )
