"""Slip hysteresis behaviour."""

import logging

import pytest

from driftkit.drift.curves import SlipCurves
from driftkit.drift.slip import SlipModel, SlipPhase


@pytest.fixture
def model():
    # Default curves: full slip at 20 m/s, grip back at or below 4 m/s
    return SlipModel(SlipCurves.default(), slip_modifier=20.0)


def test_starts_gripping(model):
    assert model.phase == SlipPhase.NORMAL
    assert model.slip == 0.0
    assert not model.is_slipping


def test_loading_curve_builds_slip_gradually(model):
    assert model.update(8.0) == pytest.approx(0.1)
    assert model.update(10.0) == pytest.approx(0.25)
    assert model.phase == SlipPhase.NORMAL


def test_enters_slipping_only_at_full_slip(model):
    model.update(19.9)
    assert model.phase == SlipPhase.NORMAL

    assert model.update(20.0) == 1.0
    assert model.phase == SlipPhase.SLIPPING


def test_lateral_direction_does_not_matter(model):
    model.update(-25.0)
    assert model.is_slipping


def test_no_chatter_around_the_breakaway_speed(model):
    model.update(20.0)
    for lateral in (19.0, 21.0, 18.5, 20.5, 19.5):
        model.update(lateral)
        assert model.phase == SlipPhase.SLIPPING


def test_recovers_on_unloading_curve(model):
    model.update(20.0)

    # Unloading curve holds full slip well below the breakaway speed
    assert model.update(10.0) == 1.0
    assert model.update(6.0) == pytest.approx(2.0 / 3.0)
    assert model.phase == SlipPhase.SLIPPING

    assert model.update(4.0) == 0.0
    assert model.phase == SlipPhase.NORMAL

    # Back on the loading curve
    assert model.update(6.0) == pytest.approx(0.075)
    assert model.phase == SlipPhase.NORMAL


def test_transitions_are_logged(model, caplog):
    caplog.set_level(logging.DEBUG, logger="driftkit.drift.slip")
    model.update(20.0)
    model.update(0.0)
    assert "Grip lost" in caplog.text
    assert "Grip recovered" in caplog.text


def test_scales():
    assert SlipModel.rotation_scale(0.0) == 1.0
    assert SlipModel.rotation_scale(1.0) == pytest.approx(0.7)
    assert SlipModel.transfer_scale(0.25) == pytest.approx(0.75)


def test_reset_restores_grip(model):
    model.update(20.0)
    model.reset()
    assert model.phase == SlipPhase.NORMAL
    assert model.slip == 0.0


def test_modifier_must_be_positive():
    with pytest.raises(ValueError):
        SlipModel(slip_modifier=0.0)
