#!/usr/bin/env python3
"""Plot slip hysteresis curves.

This example demonstrates:
- Comparing the built-in slip curve presets
- Tracing the phase a car takes through a slide and back

Run with: python examples/slip_curves.py [--save]
"""

import sys
import os

# Add parent directory to path for development
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def main():
    """Plot slip curves."""
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        print("This example requires matplotlib. Install with: pip install matplotlib")
        return 1

    import numpy as np

    from driftkit.drift.curves import SlipCurves
    from driftkit.drift.slip import SlipModel
    from driftkit.visualization.plotter import SlipPlotter

    print("Slip Hysteresis Curves")
    print("=" * 40)

    presets = {
        "Default": SlipCurves.default(),
        "Snappy": SlipCurves.snappy(),
        "Loose": SlipCurves.loose(),
    }
    slip_modifier = 20.0

    fig, axes = plt.subplots(len(presets), 2, figsize=(14, 4 * len(presets)))

    # Lateral speed sweep: build up a slide, then let it die away
    sweep = np.concatenate([np.linspace(0.0, 25.0, 100), np.linspace(25.0, 0.0, 100)])

    for i, (name, curves) in enumerate(presets.items()):
        ax_curves = axes[i, 0]
        SlipPlotter.plot_curves(curves, slip_modifier=slip_modifier, ax=ax_curves)
        ax_curves.set_title(f'{name} - Loading / Unloading')

        model = SlipModel(curves, slip_modifier)
        slips = [model.update(v) for v in sweep]

        ax_trace = axes[i, 1]
        ax_trace.plot(sweep[:100], slips[:100], label='Speeding up')
        ax_trace.plot(sweep[100:], slips[100:], '--', label='Slowing down')
        ax_trace.set_xlabel('Lateral Speed (m/s)')
        ax_trace.set_ylabel('Slip')
        ax_trace.set_title(f'{name} - Swept Slide')
        ax_trace.legend()
        ax_trace.grid(True, alpha=0.3)

        print(f"  {name:8} peak slip {max(slips):.2f}, final phase {model.phase.value}")

    fig.suptitle('Slip Hysteresis', fontsize=14)
    plt.tight_layout()

    if len(sys.argv) > 1 and sys.argv[1] == '--save':
        output_file = 'slip_curves.png'
        plt.savefig(output_file, dpi=150)
        print(f"Saved to: {output_file}")
    else:
        print("Displaying plot. Close window to exit.")
        plt.show()

    return 0


if __name__ == "__main__":
    sys.exit(main())
