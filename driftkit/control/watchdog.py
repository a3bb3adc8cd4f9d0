"""Auto-reset for AI vehicles that get stuck."""

from __future__ import annotations
import logging
from enum import Enum

logger = logging.getLogger(__name__)


class WatchdogPhase(Enum):
    IDLE = "idle"
    PENDING_STUCK = "pending_stuck"


class ResetWatchdog:
    """Request a respawn after two consecutive stationary observations.

    The first low-speed tick only arms the watchdog; the reset fires on the
    next one if the vehicle still has not moved. Any tick above the
    threshold disarms it.
    """

    STUCK_SPEED: float = 0.01  # m/s

    def __init__(self):
        self._phase = WatchdogPhase.IDLE

    def update(self, speed: float) -> bool:
        """Observe this tick's speed.

        Args:
            speed: Previous-tick local velocity magnitude (m/s)

        Returns:
            True if a reset should fire this tick
        """
        if speed <= self.STUCK_SPEED:
            fire = self._phase == WatchdogPhase.PENDING_STUCK
            self._phase = WatchdogPhase.PENDING_STUCK
            if fire:
                logger.debug("Vehicle stuck, requesting reset")
            return fire

        self._phase = WatchdogPhase.IDLE
        return False

    @property
    def phase(self) -> WatchdogPhase:
        return self._phase

    def reset(self) -> None:
        self._phase = WatchdogPhase.IDLE
