"""Pre-configured slip hysteresis curves."""

from driftkit.drift.curves import SlipCurves


SLIP_PRESETS = {
    "default": {
        "name": "Default",
        "description": "Gradual loss of grip, snappy recovery",
        "config": SlipCurves.default,
    },
    "snappy": {
        "name": "Snappy",
        "description": "Late breakaway, near-instant recovery",
        "config": SlipCurves.snappy,
    },
    "loose": {
        "name": "Loose",
        "description": "Early breakaway, slides held to low speed",
        "config": SlipCurves.loose,
    },
}


def get_slip_curves(preset_name: str) -> SlipCurves:
    """Get a slip curve pair by preset name.

    Args:
        preset_name: Name of the preset ('default', 'snappy', 'loose')

    Returns:
        SlipCurves instance

    Raises:
        ValueError: If preset name is not found
    """
    if preset_name not in SLIP_PRESETS:
        available = ", ".join(SLIP_PRESETS.keys())
        raise ValueError(f"Unknown slip preset '{preset_name}'. Available: {available}")

    return SLIP_PRESETS[preset_name]["config"]()
