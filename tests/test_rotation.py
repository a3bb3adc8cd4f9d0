"""Rotation-rate shaping."""

import pytest

from driftkit.drift.rotation import RotationModel


@pytest.fixture
def rotation():
    return RotationModel(rotation_rate=190.0, min_speed=1.0, max_speed=4.0)


@pytest.mark.parametrize("speed, expected", [
    (0.0, 0.0),
    (0.5, 0.0),
    (1.0, 0.0),
    (2.5, 95.0),
    (4.0, 190.0),
    (12.0, 190.0),
])
def test_rate_ramps_in_with_speed(rotation, speed, expected):
    assert rotation.effective_rate(190.0, speed) == pytest.approx(expected)


def test_gated_rate_stays_zero(rotation):
    assert rotation.effective_rate(0.0, 10.0) == 0.0


def test_rate_never_exceeds_full_rate(rotation):
    assert rotation.effective_rate(500.0, 10.0) == 190.0


def test_turn_deadzone(rotation):
    assert not rotation.wants_turn(0.5)
    assert not rotation.wants_turn(-0.3)
    assert rotation.wants_turn(0.51)
    assert rotation.wants_turn(-1.0)


@pytest.mark.parametrize("turn, forward, expected", [
    (1.0, 5.0, 3.8),
    (-1.0, 5.0, -3.8),
    (1.0, -5.0, -3.8),
    (-1.0, -5.0, 3.8),
    (0.7, 0.0, 3.8),
])
def test_yaw_delta_flips_when_reversing(turn, forward, expected):
    assert RotationModel.yaw_delta(turn, forward, 190.0, 0.02) == pytest.approx(expected)


def test_stumble_threshold(rotation):
    # 0.1 * 190 * 0.02 = 0.38
    assert rotation.is_stumbling(0.5, 0.02)
    assert not rotation.is_stumbling(0.2, 0.02)


def test_speed_range_validated():
    with pytest.raises(ValueError):
        RotationModel(min_speed=4.0, max_speed=4.0)
