"""Shared fixtures for the drift physics tests."""

import pytest

from driftkit.control.intent import Faction
from driftkit.core.ground import FlatGround
from driftkit.core.vector import Vector3
from driftkit.scenario import ScriptedAxes
from driftkit.vehicle.controller import create_vehicle


class SolidGround:
    """Probe that always reports ground, whatever the body's tilt."""

    def probe(self, origin, direction, max_distance):
        return True


class NoGround:
    def probe(self, origin, direction, max_distance):
        return False


@pytest.fixture
def ground():
    return FlatGround(height=0.0)


@pytest.fixture
def solid_ground():
    return SolidGround()


@pytest.fixture
def no_ground():
    return NoGround()


@pytest.fixture
def axes():
    return ScriptedAxes()


@pytest.fixture
def make_player(ground, axes):
    """Build a player car resting on the ground, optionally on another probe."""

    def _make(probe=None, params=None, yaw=0.0, position=None):
        return create_vehicle(
            Faction.PLAYER,
            probe or ground,
            position=position or Vector3(0.0, 0.5, 0.0),
            yaw=yaw,
            params=params,
            axes=axes,
            name="player"
        )

    return _make
