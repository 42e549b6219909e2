"""Interaction controller: drag/release state machine driving the oscillator."""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from massspring.config import DEFAULT_LAYOUT, Layout
from massspring.core.history import FrameHistory
from massspring.physics.oscillator import DampedOscillator
from massspring.view.geometry import object_rect

logger = logging.getLogger(__name__)


class Mode(str, Enum):
    """Interaction mode; the value is the label shown in the status line."""

    IDLE = "Idle"
    SIMULATING = "Simulation"


class Highlight(Enum):
    """How the renderer should paint the mass."""

    NORMAL = "normal"
    HIGHLIGHTED = "highlighted"


@dataclass(frozen=True)
class FrameInput:
    """Input sampled once per frame: pointer (x, y), primary button, elapsed seconds."""

    pointer: Tuple[float, float]
    button_down: bool
    dt: float


@dataclass(frozen=True)
class ControllerState:
    """Authoritative state carried from one frame to the next."""

    position: float
    velocity: float
    mode: Mode = Mode.IDLE
    dragging: bool = False


@dataclass(frozen=True)
class FrameOutput:
    """What the rendering layer needs to draw one frame."""

    position: float
    velocity: float
    mode: Mode
    highlight: Highlight
    pointer_cursor: bool = False


def _update_idle(
    state: ControllerState,
    frame: FrameInput,
    model: DampedOscillator,
    layout: Layout,
) -> Tuple[ControllerState, FrameOutput]:
    hovering = object_rect(state.position, layout).contains(frame.pointer)

    dragging = state.dragging
    if hovering and frame.button_down:
        if not dragging:
            logger.debug(f"Grabbed object at x={state.position:.2f}")
        dragging = True
    if not frame.button_down:
        if dragging:
            logger.debug(f"Released object at x={state.position:.2f}")
        dragging = False

    position = state.position
    if dragging:
        position = float(np.clip(frame.pointer[0], layout.min_position, layout.max_position))

    mode = Mode.IDLE
    displacement = model.params.displacement(position)
    if not dragging and abs(displacement) > model.params.threshold:
        mode = Mode.SIMULATING
        logger.info(f"Released at displacement {displacement:.2f}, starting simulation")

    new_state = replace(state, position=position, mode=mode, dragging=dragging)
    output = FrameOutput(
        position=position,
        velocity=state.velocity,
        mode=mode,
        highlight=Highlight.HIGHLIGHTED if hovering else Highlight.NORMAL,
        pointer_cursor=hovering or dragging,
    )
    return new_state, output


def _update_simulating(
    state: ControllerState,
    frame: FrameInput,
    model: DampedOscillator,
) -> Tuple[ControllerState, FrameOutput]:
    # Settle check runs on the pre-step values: the settling frame does not integrate.
    if model.is_settled(state.position, state.velocity):
        logger.info(f"Settled at x={state.position:.3f} (v={state.velocity:.3f})")
        new_state = replace(state, mode=Mode.IDLE, dragging=False)
    else:
        position, velocity = model.step(state.position, state.velocity, frame.dt)
        new_state = replace(state, position=position, velocity=velocity)
    output = FrameOutput(
        position=new_state.position,
        velocity=new_state.velocity,
        mode=new_state.mode,
        highlight=Highlight.HIGHLIGHTED,
    )
    return new_state, output


def update(
    state: ControllerState,
    frame: FrameInput,
    model: DampedOscillator,
    layout: Optional[Layout] = None,
) -> Tuple[ControllerState, FrameOutput]:
    """
    Advance the interaction by exactly one frame.

    Pure with respect to its arguments: the previous state is not modified,
    the new state and the values to render are returned.

    Args:
        state: state left by the previous frame.
        frame: pointer, button and dt sampled for this frame.
        model: oscillator used while simulating (also provides thresholds).
        layout: scene geometry (default: DEFAULT_LAYOUT).

    Returns:
        (new_state, output)
    """
    layout = layout or DEFAULT_LAYOUT
    if state.mode is Mode.IDLE:
        return _update_idle(state, frame, model, layout)
    # Pointer and button are ignored while the mass is in flight.
    return _update_simulating(state, frame, model)


class InteractionController:
    """
    Frame-loop orchestrator.
    Owns the current ControllerState and feeds it through update() once per frame.
    """

    def __init__(
        self,
        model: Optional[DampedOscillator] = None,
        layout: Optional[Layout] = None,
    ) -> None:
        """
        Args:
            model: oscillator model (default: DampedOscillator with default parameters).
            layout: scene geometry (default: DEFAULT_LAYOUT).
        """
        self.model = model or DampedOscillator()
        self.layout = layout or DEFAULT_LAYOUT
        self._state: Optional[ControllerState] = None
        self._time: float = 0.0
        self._frame_count = 0
        self.initialize()

    def initialize(
        self,
        position: Optional[float] = None,
        velocity: Optional[float] = None,
    ) -> None:
        """Reset to Idle at the given state (default: equilibrium, launch velocity)."""
        params = self.model.params
        self._state = ControllerState(
            position=float(params.equilibrium if position is None else position),
            velocity=float(params.start_velocity if velocity is None else velocity),
        )
        self._time = 0.0
        self._frame_count = 0

    def step(self, pointer: Sequence[float], button_down: bool, dt: float) -> FrameOutput:
        """
        Process one frame of input.

        Args:
            pointer: pointer (x, y) in window coordinates.
            button_down: primary button currently held.
            dt: seconds elapsed since the previous frame.

        Returns:
            FrameOutput for the rendering layer.
        """
        if self._state is None:
            raise RuntimeError("Controller not initialized: call initialize() before step().")
        frame = FrameInput(pointer=(float(pointer[0]), float(pointer[1])), button_down=bool(button_down), dt=float(dt))
        self._state, output = update(self._state, frame, self.model, self.layout)
        self._time += frame.dt
        self._frame_count += 1
        return output

    def run(
        self,
        frames: Iterable[FrameInput],
        history: Optional[FrameHistory] = None,
    ) -> List[FrameOutput]:
        """
        Play back a scripted sequence of frames (headless, no window).

        Each frame is also recorded in history when one is given.
        """
        outputs = []
        for frame in frames:
            out = self.step(frame.pointer, frame.button_down, frame.dt)
            outputs.append(out)
            if history is not None:
                history.record(self._time, out, self.model.energy(out.position, out.velocity))
        return outputs

    @property
    def state(self) -> ControllerState:
        if self._state is None:
            raise RuntimeError("Controller not initialized.")
        return self._state

    @property
    def mode(self) -> Mode:
        return self.state.mode

    @property
    def position(self) -> float:
        return self.state.position

    @property
    def velocity(self) -> float:
        return self.state.velocity

    @property
    def dragging(self) -> bool:
        return self.state.dragging

    @property
    def time(self) -> float:
        """Accumulated frame time in seconds."""
        return self._time

    @property
    def frame_count(self) -> int:
        return self._frame_count

    def state_dict(self) -> Dict[str, Any]:
        """Snapshot of the controller for inspection and debugging."""
        state = self.state
        return {
            "position": state.position,
            "velocity": state.velocity,
            "mode": state.mode.value,
            "dragging": state.dragging,
            "time": self._time,
            "frame_count": self._frame_count,
        }
