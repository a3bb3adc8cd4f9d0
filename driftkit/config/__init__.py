"""Configuration presets for vehicles and slip curves."""

from driftkit.config.vehicle_presets import VEHICLE_PRESETS, get_vehicle_params
from driftkit.config.slip_presets import SLIP_PRESETS, get_slip_curves

__all__ = [
    "VEHICLE_PRESETS",
    "get_vehicle_params",
    "SLIP_PRESETS",
    "get_slip_curves",
]
