"""Drift-specific models: slip hysteresis and rotation shaping."""

from driftkit.drift.curves import KeyframeCurve, SlipCurves
from driftkit.drift.slip import SlipModel, SlipPhase
from driftkit.drift.rotation import RotationModel

__all__ = [
    "KeyframeCurve",
    "SlipCurves",
    "SlipModel",
    "SlipPhase",
    "RotationModel",
]
