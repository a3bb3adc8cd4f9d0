"""Matplotlib-based plotting for slip curves and trajectories.

Provides static plots for:
- Slip hysteresis curve pairs
- Vehicle trajectory
- Telemetry over time
"""

from __future__ import annotations
from typing import TYPE_CHECKING, List, Optional, Sequence

import numpy as np

try:
    import matplotlib.pyplot as plt
    MATPLOTLIB_AVAILABLE = True
except ImportError:
    MATPLOTLIB_AVAILABLE = False

if TYPE_CHECKING:
    from driftkit.drift.curves import SlipCurves
    from driftkit.vehicle.controller import VehicleState


def _check_matplotlib():
    """Check if matplotlib is available."""
    if not MATPLOTLIB_AVAILABLE:
        raise ImportError(
            "Matplotlib is required for plotting. "
            "Install it with: pip install matplotlib"
        )


class SlipPlotter:
    """Plot slip hysteresis curves."""

    @staticmethod
    def plot_curves(
        curves: SlipCurves,
        slip_modifier: float = 20.0,
        ax: Optional[plt.Axes] = None
    ) -> plt.Figure:
        """Plot the loading and unloading curves against lateral speed.

        Args:
            curves: Slip curve pair
            slip_modifier: Lateral speed per unit of curve input (m/s)
            ax: Optional axes to plot on

        Returns:
            Matplotlib figure
        """
        _check_matplotlib()

        if ax is None:
            fig, ax = plt.subplots(figsize=(10, 6))
        else:
            fig = ax.figure

        x_load, y_load = curves.loading.sample(200)
        x_unload, y_unload = curves.unloading.sample(200)

        ax.plot(x_load * slip_modifier, y_load, label='Loading (grip to slide)')
        ax.plot(x_unload * slip_modifier, y_unload, '--', label='Unloading (slide to grip)')

        # Shade the band where the phase decides the output
        ax.fill_between(
            x_unload * slip_modifier,
            y_unload,
            np.interp(x_unload, x_load, y_load),
            alpha=0.1
        )

        ax.set_xlabel('Lateral Speed (m/s)')
        ax.set_ylabel('Slip')
        ax.set_ylim(-0.05, 1.05)
        ax.set_title('Slip Hysteresis')
        ax.legend()
        ax.grid(True, alpha=0.3)

        return fig


class TrajectoryPlotter:
    """Plot vehicle trajectory and telemetry."""

    @staticmethod
    def plot_trajectory(
        states: Sequence[VehicleState],
        color_by: str = 'slip',
        ax: Optional[plt.Axes] = None
    ) -> plt.Figure:
        """Plot the ground track (x vs z) colored by a state field.

        Args:
            states: Recorded vehicle states
            color_by: VehicleState attribute used for coloring
            ax: Optional axes to plot on

        Returns:
            Matplotlib figure
        """
        _check_matplotlib()

        if ax is None:
            fig, ax = plt.subplots(figsize=(8, 8))
        else:
            fig = ax.figure

        xs = np.array([s.position.x for s in states])
        zs = np.array([s.position.z for s in states])
        values = np.array([float(getattr(s, color_by)) for s in states])

        scatter = ax.scatter(xs, zs, c=values, cmap='plasma', s=4)
        fig.colorbar(scatter, ax=ax, label=color_by)

        ax.set_xlabel('X (m)')
        ax.set_ylabel('Z (m)')
        ax.set_title('Trajectory')
        ax.set_aspect('equal')
        ax.grid(True, alpha=0.3)

        return fig

    @staticmethod
    def plot_telemetry(
        times: Sequence[float],
        states: Sequence[VehicleState],
        fields: Optional[List[str]] = None
    ) -> plt.Figure:
        """Plot state fields over time, one subplot per field."""
        _check_matplotlib()

        if fields is None:
            fields = ['forward_speed', 'lateral_speed', 'slip']

        fig, axes = plt.subplots(len(fields), 1, figsize=(10, 2.5 * len(fields)), sharex=True)
        axes = np.atleast_1d(axes)

        for ax, name in zip(axes, fields):
            ax.plot(times, [float(getattr(s, name)) for s in states])
            ax.set_ylabel(name)
            ax.grid(True, alpha=0.3)

        axes[-1].set_xlabel('Time (s)')
        fig.tight_layout()

        return fig
