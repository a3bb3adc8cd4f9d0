#!/usr/bin/env python3
"""Drift simulation demo.

This example demonstrates:
- Setting up a drift-tuned player car
- Enemy cars chasing the player and neutral traffic
- Using the Pygame renderer for visualization
- Logging slip transitions and resets

Run with: python examples/drift_demo.py
"""

import sys
import os
import logging

# Add parent directory to path for development
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from driftkit.config.slip_presets import get_slip_curves
from driftkit.vehicle.params import PhysicsParams
from driftkit.scenario import build_chase_scene


def main():
    """Run drift simulation demo."""
    # Check for pygame
    try:
        from driftkit.visualization.renderer import PygameRenderer
        renderer = PygameRenderer()
    except ImportError:
        print("This demo requires pygame. Install with: pip install pygame")
        return 1

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("DriftKit Drift Demo")
    print("=" * 40)
    print()
    print("Controls:")
    print("  W/↑     - Throttle")
    print("  S/↓     - Reverse")
    print("  A/D     - Turn left/right")
    print("  Shift   - Boost")
    print("  R       - Reset vehicle")
    print("  V       - Toggle velocity rays")
    print("  T       - Toggle telemetry")
    print("  C       - Toggle camera follow")
    print("  Esc     - Quit")
    print()
    print("Drift Tips:")
    print("  1. Build up speed (W)")
    print("  2. Turn hard to throw the tail out")
    print("  3. Hold the turn: slip builds slowly")
    print("  4. Straighten up: grip snaps back")
    print()

    scene = build_chase_scene(
        renderer.axes,
        params=PhysicsParams.drifter(),
        slip_curves=get_slip_curves("loose"),
        num_enemies=3,
        num_neutral=4
    )
    vehicles = [scene.player] + scene.others

    renderer.init()
    print("Starting simulation...")

    frame_dt = 1 / 60

    try:
        while renderer.handle_events():
            scene.world.step_fixed(frame_dt)
            renderer.render(
                vehicles, scene.player, frame_dt,
                ground_extent=scene.world.ground.extent
            )
    except KeyboardInterrupt:
        pass
    finally:
        renderer.quit()

    print("Simulation ended.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
