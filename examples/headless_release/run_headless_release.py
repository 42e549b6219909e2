"""
Minimal example: script a drag-release without a window and plot how the
mass settles (position, velocity and mechanical energy vs time).
"""

import sys
from pathlib import Path

# Add repository root (massspring) to the path
ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT))

from massspring.config import DEFAULT_LAYOUT, DEFAULT_PARAMETERS
from massspring.core import FrameHistory, FrameInput, InteractionController, Mode
from massspring.view.geometry import object_rect


def main() -> None:
    dt = 1.0 / DEFAULT_LAYOUT.target_fps
    controller = InteractionController()

    # Grab the mass in its middle, drag it 200 px to the right, let go
    rect = object_rect(controller.position)
    grab = (rect.x + rect.width / 2, rect.y + rect.height / 2)
    target = (DEFAULT_PARAMETERS.equilibrium + 200.0, grab[1])
    script = [FrameInput(pointer=grab, button_down=True, dt=dt)]
    script += [FrameInput(pointer=target, button_down=True, dt=dt)] * 5
    script += [FrameInput(pointer=target, button_down=False, dt=dt)]
    script += [FrameInput(pointer=target, button_down=False, dt=dt)] * 1200

    history = FrameHistory()
    outputs = controller.run(script, history=history)
    settled_at = next(
        (i for i, out in enumerate(outputs) if i > 6 and out.mode is Mode.IDLE),
        None,
    )
    print(f"Frames: {len(history)}; back to Idle at frame {settled_at}")
    print(f"Final position: {controller.position:.3f} (equilibrium {DEFAULT_PARAMETERS.equilibrium})")

    try:
        import matplotlib.pyplot as plt
    except ImportError:
        print("matplotlib not available, skip plots")
        return

    t = history.get("time")
    fig, axes = plt.subplots(3, 1, sharex=True, figsize=(8, 7))
    for ax, key in zip(axes, ("position", "velocity", "energy")):
        ax.plot(t, history.get(key), label=key)
        ax.set_ylabel(key)
        ax.grid(True, alpha=0.3)
        ax.legend(loc="upper right", fontsize=8)
    axes[-1].set_xlabel("time [s]")
    fig.suptitle("Drag-release: mass settling")
    fig.tight_layout()
    plt.show()


if __name__ == "__main__":
    main()
