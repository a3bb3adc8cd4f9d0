"""CLI entry point for DriftKit.

Run with: python -m driftkit [command]

Commands:
    drift     - Run the interactive drift demo
    run       - Run a headless scripted drive and print a summary
    plot      - Plot slip hysteresis curves
    info      - Show available presets
"""

import sys
import argparse
import logging


def run_drift_demo(args):
    """Run the interactive drift demo."""
    try:
        from driftkit.visualization.renderer import PygameRenderer
        renderer = PygameRenderer()
    except ImportError:
        print("Error: Pygame is required for the drift demo.")
        print("Install it with: pip install pygame")
        return 1

    from driftkit.config.vehicle_presets import get_vehicle_params
    from driftkit.config.slip_presets import get_slip_curves
    from driftkit.scenario import build_chase_scene

    print("DriftKit Drift Demo")
    print("=" * 40)
    print(f"Vehicle: {args.vehicle}")
    print(f"Slip curves: {args.slip}")
    print()
    print("Controls:")
    print("  W/↑ S/↓ - Throttle / reverse")
    print("  A/D     - Turn")
    print("  Shift   - Boost")
    print("  R       - Reset")
    print("  Esc     - Quit")
    print()

    try:
        params = get_vehicle_params(args.vehicle)
        curves = get_slip_curves(args.slip)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    scene = build_chase_scene(
        renderer.axes,
        params=params,
        slip_curves=curves,
        num_enemies=args.enemies,
        num_neutral=args.traffic
    )
    vehicles = [scene.player] + scene.others
    extent = scene.world.ground.extent

    renderer.init()
    print("Starting simulation...")

    frame_dt = 1 / 60  # Target 60 FPS

    try:
        while renderer.handle_events():
            scene.world.step_fixed(frame_dt)
            renderer.render(vehicles, scene.player, frame_dt, ground_extent=extent, fps=60)
    except KeyboardInterrupt:
        pass
    finally:
        renderer.quit()

    print("Simulation ended.")
    return 0


def run_headless(args):
    """Drive the player with fixed inputs and report the result."""
    from driftkit.config.vehicle_presets import get_vehicle_params
    from driftkit.config.slip_presets import get_slip_curves
    from driftkit.drift.slip import SlipPhase
    from driftkit.scenario import ScriptedAxes, build_chase_scene, record

    try:
        params = get_vehicle_params(args.vehicle)
        curves = get_slip_curves(args.slip)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    axes = ScriptedAxes(throttle=args.throttle, sideways=args.turn, boost=args.boost)
    scene = build_chase_scene(
        axes,
        params=params,
        slip_curves=curves,
        num_enemies=args.enemies,
        num_neutral=args.traffic
    )

    states = record(scene.world, scene.player, args.seconds)
    if not states:
        print("Nothing to simulate.")
        return 0

    final = states[-1]
    peak_slip = max(s.slip for s in states)
    slipping_ticks = sum(1 for s in states if s.slip_phase == SlipPhase.SLIPPING)

    print(f"Simulated {len(states)} ticks ({args.seconds:.1f}s) with '{args.vehicle}'")
    print("-" * 40)
    print(f"  Position:       ({final.position.x:.1f}, {final.position.y:.1f}, {final.position.z:.1f})")
    print(f"  Yaw:            {final.orientation.y:.1f}°")
    print(f"  Forward speed:  {final.forward_speed:.2f} m/s")
    print(f"  Lateral speed:  {final.lateral_speed:.2f} m/s")
    print(f"  Peak slip:      {peak_slip:.2f}")
    print(f"  Ticks slipping: {slipping_ticks}")

    if args.output:
        try:
            import matplotlib.pyplot as plt
            from driftkit.visualization.plotter import TrajectoryPlotter
        except ImportError:
            print("Error: Matplotlib is required for plotting.")
            print("Install it with: pip install matplotlib")
            return 1

        TrajectoryPlotter.plot_trajectory(states)
        plt.savefig(args.output, dpi=150)
        print(f"Saved trajectory to: {args.output}")

    return 0


def plot_slip(args):
    """Plot slip hysteresis curves."""
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        print("Error: Matplotlib is required for plotting.")
        print("Install it with: pip install matplotlib")
        return 1

    from driftkit.config.slip_presets import get_slip_curves
    from driftkit.visualization.plotter import SlipPlotter

    print(f"Plotting slip curves for: {args.slip}")

    try:
        curves = get_slip_curves(args.slip)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    fig = SlipPlotter.plot_curves(curves, slip_modifier=args.modifier)
    fig.suptitle(f'{args.slip.title()} Slip Curves')
    plt.tight_layout()

    if args.output:
        plt.savefig(args.output, dpi=150)
        print(f"Saved to: {args.output}")
    else:
        plt.show()

    return 0


def show_info(args):
    """Show available presets and information."""
    from driftkit import __version__
    from driftkit.config.vehicle_presets import VEHICLE_PRESETS
    from driftkit.config.slip_presets import SLIP_PRESETS

    print(f"DriftKit v{__version__}")
    print("=" * 40)
    print()

    print("Vehicle Presets:")
    print("-" * 30)
    for name, info in VEHICLE_PRESETS.items():
        print(f"  {name:15} - {info['description']}")
    print()

    print("Slip Presets:")
    print("-" * 30)
    for name, info in SLIP_PRESETS.items():
        print(f"  {name:15} - {info['description']}")
    print()

    return 0


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="DriftKit - Arcade vehicle drift physics",
        prog="driftkit"
    )
    parser.add_argument(
        "--version", action="version",
        version="%(prog)s 0.1.0"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log slip transitions, resets and respawns"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    def add_tuning_args(sub):
        sub.add_argument(
            "-v", "--vehicle",
            default="arcade",
            help="Vehicle preset to use (default: arcade)"
        )
        sub.add_argument(
            "--slip",
            default="default",
            help="Slip curve preset to use (default: default)"
        )
        sub.add_argument(
            "--enemies",
            type=int, default=2,
            help="Number of chasing cars (default: 2)"
        )
        sub.add_argument(
            "--traffic",
            type=int, default=3,
            help="Number of neutral cars (default: 3)"
        )

    # Drift demo command
    drift_parser = subparsers.add_parser("drift", help="Run interactive drift demo")
    add_tuning_args(drift_parser)

    # Headless command
    run_parser = subparsers.add_parser("run", help="Run a headless scripted drive")
    add_tuning_args(run_parser)
    run_parser.add_argument(
        "-s", "--seconds",
        type=float, default=10.0,
        help="Simulated time in seconds (default: 10)"
    )
    run_parser.add_argument(
        "--throttle",
        type=float, default=1.0,
        help="Held throttle, -1 to 1 (default: 1)"
    )
    run_parser.add_argument(
        "--turn",
        type=float, default=0.0,
        help="Held turn, -1 to 1 (default: 0)"
    )
    run_parser.add_argument(
        "--boost",
        action="store_true",
        help="Hold boost"
    )
    run_parser.add_argument(
        "-o", "--output",
        help="Save a trajectory plot to this file"
    )

    # Plot command
    plot_parser = subparsers.add_parser("plot", help="Plot slip curves")
    plot_parser.add_argument(
        "--slip",
        default="default",
        help="Slip curve preset to plot (default: default)"
    )
    plot_parser.add_argument(
        "-m", "--modifier",
        type=float, default=20.0,
        help="Lateral speed per unit of curve input in m/s (default: 20)"
    )
    plot_parser.add_argument(
        "-o", "--output",
        help="Save plot to file instead of displaying"
    )

    # Info command
    subparsers.add_parser("info", help="Show available presets")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    if args.command == "drift":
        return run_drift_demo(args)
    elif args.command == "run":
        return run_headless(args)
    elif args.command == "plot":
        return plot_slip(args)
    elif args.command == "info":
        return show_info(args)
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
