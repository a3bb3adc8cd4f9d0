"""Input sources and intent."""

import pytest

from driftkit.control.intent import ControlIntent, Faction
from driftkit.control.sources import (
    BodyTarget, ChaseAI, FixedTarget, KeyboardInput, NeutralAI, create_input_source
)
from driftkit.core.rigid_body import RigidBody
from driftkit.core.vector import Vector3
from driftkit.scenario import ScriptedAxes


def test_intent_clamps_axes():
    intent = ControlIntent(throttle=2.0, turn=-3.0)
    assert intent.throttle == 1.0
    assert intent.turn == -1.0


def test_keyboard_reads_axes():
    axes = ScriptedAxes(throttle=1.0, sideways=-1.0, boost=True)
    intent = KeyboardInput(axes).read(RigidBody())

    assert intent.throttle == 1.0
    assert intent.turn == -1.0
    assert intent.boost
    assert not intent.reset_requested


def test_keyboard_reset_is_edge_triggered():
    axes = ScriptedAxes()
    source = KeyboardInput(axes)
    axes.press("Reset")

    assert source.read(RigidBody()).reset_requested
    assert not source.read(RigidBody()).reset_requested


@pytest.mark.parametrize("target, expected_turn", [
    (Vector3(10.0, 0.0, 10.0), 1.0),      # 45 deg right
    (Vector3(-10.0, 0.0, 10.0), -1.0),    # 45 deg left
    (Vector3(1.0, 0.0, 10.0), 0.0),       # inside the threshold
    (Vector3(0.0, 0.0, -10.0), 1.0),      # directly behind
])
def test_chase_turns_toward_target(target, expected_turn):
    ai = ChaseAI(FixedTarget(target))
    intent = ai.read(RigidBody())

    assert intent.throttle == 1.0
    assert intent.turn == expected_turn
    assert not intent.boost


def test_chase_accounts_for_current_heading():
    body = RigidBody()
    body.set_orientation(0.0, 45.0, 0.0)
    ai = ChaseAI(FixedTarget(Vector3(10.0, 0.0, 10.0)))

    assert ai.heading_error(body) == pytest.approx(0.0)
    assert ai.read(body).turn == 0.0


def test_body_target_tracks_body():
    body = RigidBody(position=Vector3(1.0, 0.0, 2.0))
    target = BodyTarget(body)
    body.position = Vector3(5.0, 0.0, 5.0)
    assert target.position().to_array() == pytest.approx([5.0, 0.0, 5.0])


def test_neutral_drives_straight():
    intent = NeutralAI().read(RigidBody())
    assert intent == ControlIntent(throttle=1.0, turn=0.0)


def test_factory_picks_source_by_faction():
    assert isinstance(create_input_source(Faction.PLAYER, axes=ScriptedAxes()), KeyboardInput)
    assert isinstance(create_input_source(Faction.ENEMY, target=FixedTarget(Vector3())), ChaseAI)
    assert isinstance(create_input_source(Faction.NEUTRAL), NeutralAI)


def test_missing_collaborators_fail_fast():
    with pytest.raises(ValueError):
        create_input_source(Faction.PLAYER)
    with pytest.raises(ValueError):
        create_input_source(Faction.ENEMY)
