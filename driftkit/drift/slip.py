"""Slip hysteresis: how much lateral grip is lost to skidding.

A single curve would flicker between gripping and sliding whenever the
lateral speed hovers near its threshold. Two curves with different
crossing points act as a Schmitt trigger instead:

- NORMAL follows the loading curve and switches to SLIPPING only when it
  outputs exactly 1.0.
- SLIPPING follows the unloading curve and switches back to NORMAL only
  when it outputs exactly 0.0.

The result is a gradual loss of grip and a snappy recovery.
"""

from __future__ import annotations
import logging
from enum import Enum
from typing import Optional

from driftkit.drift.curves import SlipCurves

logger = logging.getLogger(__name__)


class SlipPhase(Enum):
    """Which side of the hysteresis loop the vehicle is on."""
    NORMAL = "normal"
    SLIPPING = "slipping"


class SlipModel:
    """Hysteresis evaluator producing a slip fraction from lateral speed."""

    ROTATION_SLIP_FACTOR: float = 0.3   # share of rotation lost at full slip

    def __init__(self, curves: Optional[SlipCurves] = None, slip_modifier: float = 20.0):
        """Initialize slip model.

        Args:
            curves: Loading/unloading pair. Defaults to SlipCurves.default().
            slip_modifier: Lateral speed (m/s) mapped to a curve input of 1.
                           Larger values widen the curves.
        """
        if slip_modifier <= 0.0:
            raise ValueError(f"slip_modifier must be positive, got {slip_modifier}")

        self.curves = curves or SlipCurves.default()
        self.slip_modifier = slip_modifier

        self._phase = SlipPhase.NORMAL
        self._slip: float = 0.0

    def update(self, lateral_speed: float) -> float:
        """Evaluate slip for this tick's lateral speed and advance the phase.

        Args:
            lateral_speed: Local lateral velocity (m/s), either sign

        Returns:
            Slip fraction in [0, 1]
        """
        x = abs(lateral_speed) / self.slip_modifier

        if self._phase == SlipPhase.NORMAL:
            self._slip = self.curves.loading.evaluate(x)
            if self._slip == 1.0:
                self._phase = SlipPhase.SLIPPING
                logger.debug("Grip lost at lateral speed %.2f m/s", lateral_speed)
        else:
            self._slip = self.curves.unloading.evaluate(x)
            if self._slip == 0.0:
                self._phase = SlipPhase.NORMAL
                logger.debug("Grip recovered at lateral speed %.2f m/s", lateral_speed)

        return self._slip

    @classmethod
    def rotation_scale(cls, slip: float) -> float:
        """Multiplier on the rotation rate for a given slip."""
        return 1.0 - cls.ROTATION_SLIP_FACTOR * slip

    @staticmethod
    def transfer_scale(slip: float) -> float:
        """Multiplier on the rotation-velocity transfer for a given slip."""
        return 1.0 - slip

    @property
    def phase(self) -> SlipPhase:
        return self._phase

    @property
    def slip(self) -> float:
        """Slip fraction from the last update."""
        return self._slip

    @property
    def is_slipping(self) -> bool:
        return self._phase == SlipPhase.SLIPPING

    def reset(self) -> None:
        """Return to full grip."""
        self._phase = SlipPhase.NORMAL
        self._slip = 0.0
