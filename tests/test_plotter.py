"""Matplotlib plots (skipped without matplotlib)."""

import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from driftkit.drift.curves import SlipCurves  # noqa: E402
from driftkit.scenario import ScriptedAxes, build_chase_scene, record  # noqa: E402
from driftkit.visualization.plotter import SlipPlotter, TrajectoryPlotter  # noqa: E402


def test_slip_curves_plot():
    fig = SlipPlotter.plot_curves(SlipCurves.default())
    assert len(fig.axes[0].lines) == 2
    plt.close(fig)


def test_trajectory_and_telemetry_plots():
    scene = build_chase_scene(ScriptedAxes(throttle=1.0, sideways=1.0), num_enemies=0, num_neutral=0)
    states = record(scene.world, scene.player, 1.0)

    fig = TrajectoryPlotter.plot_trajectory(states)
    assert fig.axes
    plt.close(fig)

    times = [i * scene.world.dt for i in range(len(states))]
    fig = TrajectoryPlotter.plot_telemetry(times, states)
    assert len(fig.axes) == 3
    plt.close(fig)
