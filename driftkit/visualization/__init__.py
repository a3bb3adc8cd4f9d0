"""Visualization tools for the drift simulation."""

from driftkit.visualization.camera import FollowCamera, smooth_damp
from driftkit.visualization.renderer import PygameRenderer, PygameAxes
from driftkit.visualization.plotter import SlipPlotter, TrajectoryPlotter

__all__ = [
    "FollowCamera",
    "smooth_damp",
    "PygameRenderer",
    "PygameAxes",
    "SlipPlotter",
    "TrajectoryPlotter",
]
