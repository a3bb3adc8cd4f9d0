"""Drift controller tick behaviour."""

import logging

import pytest

from driftkit.control.intent import Faction
from driftkit.control.sources import NeutralAI
from driftkit.core.rigid_body import RigidBody
from driftkit.core.vector import Vector3
from driftkit.drift.slip import SlipPhase
from driftkit.vehicle.controller import DriftController, create_vehicle
from driftkit.vehicle.params import PhysicsParams

DT = 0.02


def test_center_of_mass_from_fraction(make_player):
    vehicle = make_player()
    assert vehicle.body.center_of_mass.to_array() == pytest.approx([0.0, 0.25, 0.0])


def test_throttle_accelerates_forward(make_player, axes):
    vehicle = make_player()
    axes.values["Throttle"] = 1.0

    vehicle.on_fixed_tick(DT)

    assert vehicle.body.velocity.z == pytest.approx(15.0 * DT)
    assert vehicle.coefficients.grip_z == 0.0
    assert vehicle.grounded


def test_throttle_deadzone(make_player, axes):
    vehicle = make_player()
    axes.values["Throttle"] = 0.5

    vehicle.on_fixed_tick(DT)

    assert vehicle.body.velocity.z == 0.0
    assert vehicle.coefficients.grip_z == 3.0


def test_boost_scales_acceleration(make_player, axes):
    vehicle = make_player()
    axes.values["Throttle"] = 1.0
    axes.values["Boost"] = 1.0

    vehicle.on_fixed_tick(DT)

    assert vehicle.coefficients.accel == pytest.approx(20.0)
    assert vehicle.body.velocity.z == pytest.approx(20.0 * DT)


def test_forward_speed_clamped_to_top_speed(make_player, axes):
    vehicle = make_player()
    axes.values["Throttle"] = 1.0
    axes.values["Boost"] = 1.0
    vehicle.body.velocity = Vector3(0.0, 0.0, 29.9)

    for _ in range(20):
        vehicle.on_fixed_tick(DT)
        assert vehicle.body.get_local_velocity().z <= 30.0 + 1e-9

    assert vehicle.body.get_local_velocity().z == pytest.approx(30.0)


def test_reverse_speed_clamped_too(make_player, axes):
    vehicle = make_player()
    axes.values["Throttle"] = -1.0
    vehicle.body.velocity = Vector3(0.0, 0.0, -29.9)

    for _ in range(5):
        vehicle.on_fixed_tick(DT)

    assert vehicle.body.get_local_velocity().z == pytest.approx(-30.0)


def test_airborne_zeroes_coefficients(make_player, axes):
    vehicle = make_player(position=Vector3(0.0, 5.0, 0.0))
    axes.values["Throttle"] = 1.0
    axes.values["Sideways"] = 1.0
    vehicle.body.velocity = Vector3(3.0, 0.0, 4.0)

    vehicle.on_fixed_tick(DT)

    coeffs = vehicle.coefficients
    assert not vehicle.grounded
    assert (coeffs.accel, coeffs.grip_x, coeffs.grip_z, coeffs.rotation) == (0.0, 0.0, 0.0, 0.0)
    assert vehicle.body.angular_drag == pytest.approx(0.05)
    assert vehicle.body.velocity.to_array() == pytest.approx([3.0, 0.0, 4.0])
    assert vehicle.body.yaw == 0.0


def test_grounded_uses_ground_drag(make_player):
    vehicle = make_player()
    vehicle.on_fixed_tick(DT)
    assert vehicle.body.angular_drag == 5.0


@pytest.mark.parametrize("pitch, roll, accel, grip_x", [
    (0.0, 0.0, 15.0, 12.0),
    (60.0, 0.0, 7.5, 12.0),
    (90.0, 0.0, 0.0, 12.0),
    (0.0, 90.0, 15.0, 0.0),
    (0.0, 180.0, 15.0, 0.0),
])
def test_slope_attenuation(make_player, solid_ground, pitch, roll, accel, grip_x):
    vehicle = make_player(probe=solid_ground)
    vehicle.body.set_orientation(pitch, 0.0, roll)

    vehicle.on_fixed_tick(DT)

    coeffs = vehicle.coefficients
    assert coeffs.accel == pytest.approx(accel, abs=1e-9)
    assert coeffs.grip_x == pytest.approx(grip_x, abs=1e-9)
    assert coeffs.accel >= 0.0
    assert coeffs.grip_x >= 0.0
    assert coeffs.grip_z >= 0.0


@pytest.mark.parametrize("lateral", [0.1, -0.1, 0.2])
def test_lateral_grip_never_reverses_direction(make_player, lateral):
    vehicle = make_player()
    vehicle.body.velocity = Vector3(lateral, 0.0, 0.0)

    vehicle.on_fixed_tick(DT)

    assert vehicle.body.velocity.x == 0.0


def test_lateral_grip_decays_large_slide(make_player):
    vehicle = make_player()
    vehicle.body.velocity = Vector3(5.0, 0.0, 0.0)

    vehicle.on_fixed_tick(DT)

    assert vehicle.body.velocity.x == pytest.approx(5.0 - 12.0 * DT)


def test_rotation_needs_speed(make_player, axes):
    vehicle = make_player()
    axes.values["Sideways"] = 1.0

    vehicle.on_fixed_tick(DT)

    # Turn held: flagged as rotating even though the rate is zero
    assert vehicle.is_rotating
    assert vehicle.coefficients.rotation == 0.0
    assert vehicle.body.yaw == 0.0


@pytest.mark.parametrize("forward, expected_yaw", [(5.0, 3.8), (-5.0, -3.8)])
def test_turn_direction_flips_in_reverse(make_player, axes, forward, expected_yaw):
    vehicle = make_player()
    axes.values["Sideways"] = 1.0
    vehicle.body.velocity = Vector3(0.0, 0.0, forward)

    # First tick has no previous speed, so the rate is still zero
    vehicle.on_fixed_tick(DT)
    vehicle.on_fixed_tick(DT)

    assert vehicle.body.yaw == pytest.approx(expected_yaw)


def test_full_transfer_redirects_velocity(make_player, axes):
    params = PhysicsParams(grip_x=0.0, grip_z=0.0, rotation_velocity_transfer=1.0)
    vehicle = make_player(params=params)
    axes.values["Sideways"] = 1.0
    vehicle.body.velocity = Vector3(0.0, 0.0, 10.0)

    vehicle.on_fixed_tick(DT)
    vehicle.on_fixed_tick(DT)

    local = vehicle.body.get_local_velocity()
    assert vehicle.body.yaw > 0.0
    assert local.x == pytest.approx(0.0, abs=1e-9)
    assert local.z == pytest.approx(10.0)


def test_zero_transfer_keeps_world_velocity(make_player, axes):
    params = PhysicsParams(grip_x=0.0, grip_z=0.0, rotation_velocity_transfer=0.0)
    vehicle = make_player(params=params)
    axes.values["Sideways"] = 1.0
    vehicle.body.velocity = Vector3(0.0, 0.0, 10.0)

    vehicle.on_fixed_tick(DT)
    vehicle.on_fixed_tick(DT)

    assert vehicle.body.yaw > 0.0
    assert vehicle.body.velocity.to_array() == pytest.approx([0.0, 0.0, 10.0])
    assert vehicle.get_drift_angle() < 0.0


def test_reset_is_edge_triggered(make_player, axes):
    vehicle = make_player()
    vehicle.body.set_orientation(20.0, 30.0, 120.0)
    vehicle.body.velocity = Vector3(4.0, 2.0, 6.0)
    axes.press("Reset")

    vehicle.on_fixed_tick(DT)

    body = vehicle.body
    assert body.orientation.to_array() == pytest.approx([0.0, 30.0, 0.0])
    assert body.position.y == pytest.approx(2.5)
    assert body.velocity.to_array() == pytest.approx([0.0, -1.0, 0.0])
    assert not vehicle.reset_requested

    vehicle.on_fixed_tick(DT)
    assert body.position.y == pytest.approx(2.5)


def test_request_reset_applies_next_tick(make_player):
    vehicle = make_player()
    vehicle.request_reset()
    assert vehicle.reset_requested

    vehicle.on_fixed_tick(DT)
    assert vehicle.body.position.y == pytest.approx(2.5)
    assert not vehicle.reset_requested


def test_stuck_ai_resets_itself(ground):
    vehicle = create_vehicle(Faction.NEUTRAL, ground, params=PhysicsParams(accel=0.0))

    vehicle.on_fixed_tick(DT)
    assert vehicle.body.position.y == pytest.approx(0.5)

    vehicle.on_fixed_tick(DT)
    assert vehicle.body.position.y == pytest.approx(2.5)


def test_player_never_auto_resets(make_player):
    vehicle = make_player(params=PhysicsParams(accel=0.0))
    for _ in range(5):
        vehicle.on_fixed_tick(DT)
    assert vehicle.body.position.y == pytest.approx(0.5)


def test_slip_state_follows_lateral_speed(make_player):
    vehicle = make_player(params=PhysicsParams(grip_x=0.0))
    vehicle.body.velocity = Vector3(25.0, 0.0, 0.0)

    vehicle.on_fixed_tick(DT)   # records the lateral speed
    vehicle.on_fixed_tick(DT)   # evaluates slip from it

    state = vehicle.get_state()
    assert state.slip_phase == SlipPhase.SLIPPING
    assert state.slip == 1.0
    assert state.coefficients.rotation_velocity_transfer == 0.0


def test_state_snapshot(make_player, axes):
    vehicle = make_player()
    axes.values["Throttle"] = 1.0
    vehicle.on_fixed_tick(DT)

    state = vehicle.get_state()
    assert state.throttle == 1.0
    assert state.forward_speed == pytest.approx(15.0 * DT)
    assert state.grounded
    assert state.previous_local_velocity.z == pytest.approx(15.0 * DT)

    state.position.x = 100.0
    assert vehicle.body.position.x == 0.0


def test_reset_restores_spawn(make_player, axes):
    vehicle = make_player(yaw=45.0)
    axes.values["Throttle"] = 1.0
    for _ in range(10):
        vehicle.on_fixed_tick(DT)

    vehicle.reset()

    assert vehicle.body.position.to_array() == pytest.approx([0.0, 0.5, 0.0])
    assert vehicle.body.yaw == pytest.approx(45.0)
    assert vehicle.body.velocity.magnitude() == 0.0
    assert vehicle.slip_model.phase == SlipPhase.NORMAL


def test_respawn_teleports_and_latches_reset(make_player, caplog):
    caplog.set_level(logging.INFO, logger="driftkit.vehicle.controller")
    vehicle = make_player(yaw=30.0)
    vehicle.body.position = Vector3(50.0, -20.0, 50.0)
    vehicle.body.set_orientation(0.0, 170.0, 90.0)

    vehicle.respawn()

    assert vehicle.body.position.to_array() == pytest.approx([0.0, 0.5, 0.0])
    assert vehicle.body.yaw == pytest.approx(30.0)
    assert vehicle.reset_requested
    assert "Respawned 'player'" in caplog.text


def test_rejects_non_positive_dt(make_player):
    with pytest.raises(ValueError):
        make_player().on_fixed_tick(0.0)


def test_missing_collaborators_fail_fast(ground):
    with pytest.raises(ValueError):
        DriftController(None, ground, NeutralAI())
    with pytest.raises(ValueError):
        DriftController(RigidBody(), None, NeutralAI())
    with pytest.raises(ValueError):
        DriftController(RigidBody(), ground, None)
    with pytest.raises(ValueError):
        create_vehicle(Faction.ENEMY, ground)


def test_faction_defaults_from_source(ground):
    vehicle = DriftController(RigidBody(), ground, NeutralAI())
    assert vehicle.faction == Faction.NEUTRAL
    assert vehicle.auto_reset
