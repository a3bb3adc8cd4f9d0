"""Pre-configured physics parameter sets."""

from driftkit.vehicle.params import PhysicsParams


VEHICLE_PRESETS = {
    "arcade": {
        "name": "Arcade",
        "description": "Balanced default tuning",
        "config": PhysicsParams.arcade,
    },
    "drifter": {
        "name": "Drifter",
        "description": "Low lateral grip, long slides",
        "config": PhysicsParams.drifter,
    },
    "grippy": {
        "name": "Grippy",
        "description": "Planted, turns redirect nearly all momentum",
        "config": PhysicsParams.grippy,
    },
    "heavy": {
        "name": "Heavy Hauler",
        "description": "Slow to accelerate and turn, hard to unsettle",
        "config": lambda: PhysicsParams(
            accel=9.0,
            boost_ratio=1.2,
            top_speed=22.0,
            grip_x=16.0,
            grip_z=4.5,
            rotation_rate=120.0,
            rotation_velocity_transfer=0.85,
            angular_drag_grounded=8.0,
            min_rotation_speed=1.5,
            max_rotation_speed=6.0,
            slip_modifier=28.0
        ),
    },
}


def get_vehicle_params(preset_name: str) -> PhysicsParams:
    """Get physics parameters by preset name.

    Args:
        preset_name: Name of the preset

    Returns:
        PhysicsParams instance

    Raises:
        ValueError: If preset name is not found
    """
    if preset_name not in VEHICLE_PRESETS:
        available = ", ".join(VEHICLE_PRESETS.keys())
        raise ValueError(f"Unknown vehicle preset '{preset_name}'. Available: {available}")

    return VEHICLE_PRESETS[preset_name]["config"]()
