"""Cosmetic wheel steering."""

import pytest

from driftkit.vehicle.wheel import WheelVisual


def test_wheel_follows_turn_input(make_player, axes):
    vehicle = make_player()
    wheel = WheelVisual(vehicle)
    assert wheel.steer_angle() == 0.0

    axes.values["Sideways"] = -1.0
    vehicle.on_fixed_tick(0.02)

    assert wheel.steer_angle() == pytest.approx(-19.0)


def test_wheel_base_yaw(make_player):
    wheel = WheelVisual(make_player(), base_yaw=180.0)
    assert wheel.steer_angle() == 180.0


def test_wheel_needs_vehicle():
    with pytest.raises(ValueError):
        WheelVisual(None)
