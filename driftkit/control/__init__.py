"""Control intent, input sources and the stuck watchdog."""

from driftkit.control.intent import ControlIntent, Faction
from driftkit.control.sources import (
    InputSource, KeyboardInput, ChaseAI, NeutralAI,
    BodyTarget, FixedTarget, create_input_source
)
from driftkit.control.watchdog import ResetWatchdog, WatchdogPhase

__all__ = [
    "ControlIntent",
    "Faction",
    "InputSource",
    "KeyboardInput",
    "ChaseAI",
    "NeutralAI",
    "BodyTarget",
    "FixedTarget",
    "create_input_source",
    "ResetWatchdog",
    "WatchdogPhase",
]
