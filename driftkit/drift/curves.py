"""Keyframe curves for the slip hysteresis.

A curve is a list of (x, y) keys evaluated piecewise-linearly, holding the
first and last values outside the key range. Evaluation is a pure function
of x.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np


class KeyframeCurve:
    """Piecewise-linear curve through a set of (x, y) keys.

    Args:
        keys: Sequence of (x, y) pairs with strictly increasing x and
              y within [0, 1].

    Raises:
        ValueError: If the keys are empty, unsorted, or out of range.
    """

    def __init__(self, keys: Sequence[Tuple[float, float]]):
        if len(keys) == 0:
            raise ValueError("A curve needs at least one key")

        xs = np.array([float(k[0]) for k in keys])
        ys = np.array([float(k[1]) for k in keys])

        if np.any(np.diff(xs) <= 0.0):
            raise ValueError(f"Curve key times must be strictly increasing, got {xs.tolist()}")
        if np.any(ys < 0.0) or np.any(ys > 1.0):
            raise ValueError(f"Curve values must lie within [0, 1], got {ys.tolist()}")

        self._xs = xs
        self._ys = ys

    @property
    def keys(self) -> List[Tuple[float, float]]:
        return list(zip(self._xs.tolist(), self._ys.tolist()))

    def evaluate(self, x: float) -> float:
        """Evaluate the curve at x."""
        return float(np.interp(x, self._xs, self._ys))

    def is_non_decreasing(self) -> bool:
        return bool(np.all(np.diff(self._ys) >= 0.0))

    def reaches(self, value: float) -> bool:
        """Whether some key outputs exactly ``value``."""
        return bool(np.any(self._ys == value))

    def sample(self, num_points: int = 100) -> Tuple[np.ndarray, np.ndarray]:
        """Sample the curve over its key range (for plotting)."""
        xs = np.linspace(self._xs[0], self._xs[-1], num_points)
        return xs, np.interp(xs, self._xs, self._ys)

    def __repr__(self) -> str:
        return f"KeyframeCurve({self.keys})"


@dataclass(frozen=True)
class SlipCurves:
    """Loading/unloading curve pair for the slip hysteresis.

    Both curves map normalized lateral speed to a slip fraction and rise
    with speed. The loading curve is followed while grip is building up
    toward a full slide and must reach exactly 1.0; the unloading curve is
    followed on the way back (as lateral speed falls) and must reach
    exactly 0.0. Keeping the unloading zero point below the loading full
    point gives the gap that stops the phase from chattering.
    """
    loading: KeyframeCurve
    unloading: KeyframeCurve

    def __post_init__(self):
        for name, curve in (("loading", self.loading), ("unloading", self.unloading)):
            if curve is None:
                raise ValueError(f"SlipCurves requires a {name} curve")
            if not curve.is_non_decreasing():
                raise ValueError(f"The {name} curve must be monotonic non-decreasing in speed")
        if not self.loading.reaches(1.0):
            raise ValueError("The loading curve must reach a slip of exactly 1.0")
        if not self.unloading.reaches(0.0):
            raise ValueError("The unloading curve must reach a slip of exactly 0.0")

    @classmethod
    def default(cls) -> SlipCurves:
        """Gradual loss of grip, snappy recovery."""
        return cls(
            loading=KeyframeCurve([(0.0, 0.0), (0.4, 0.1), (1.0, 1.0)]),
            unloading=KeyframeCurve([(0.0, 0.0), (0.2, 0.0), (0.35, 1.0)])
        )

    @classmethod
    def snappy(cls) -> SlipCurves:
        """Breaks away late and grips back almost immediately."""
        return cls(
            loading=KeyframeCurve([(0.0, 0.0), (0.6, 0.05), (0.8, 1.0)]),
            unloading=KeyframeCurve([(0.0, 0.0), (0.5, 0.0), (0.6, 1.0)])
        )

    @classmethod
    def loose(cls) -> SlipCurves:
        """Slides early and holds the slide down to low lateral speeds."""
        return cls(
            loading=KeyframeCurve([(0.0, 0.0), (0.5, 1.0)]),
            unloading=KeyframeCurve([(0.0, 0.0), (0.05, 0.0), (0.3, 1.0)])
        )
