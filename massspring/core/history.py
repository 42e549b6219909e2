"""Per-frame trace of the controller: time, position, velocity, mode and energy."""

from collections import deque
from typing import TYPE_CHECKING, Deque, Dict, List, Optional

import numpy as np

if TYPE_CHECKING:
    from massspring.core.controller import FrameOutput

SERIES = ("time", "position", "velocity", "mode", "energy")


class FrameHistory:
    """
    Bounded in-memory trace of the frames played by an InteractionController.

    Numeric series come back as float arrays, the mode series as an array of
    status labels ("Idle", "Simulation"). Nothing is written to disk.
    """

    def __init__(self, max_length: Optional[int] = None) -> None:
        """
        Args:
            max_length: number of most recent frames to keep (None = unlimited).
        """
        self.max_length = max_length
        self._time: Deque[float] = deque(maxlen=max_length)
        self._position: Deque[float] = deque(maxlen=max_length)
        self._velocity: Deque[float] = deque(maxlen=max_length)
        self._mode: Deque[str] = deque(maxlen=max_length)
        self._energy: Deque[float] = deque(maxlen=max_length)

    def record(self, time: float, output: "FrameOutput", energy: float) -> None:
        """Store one emitted frame together with the clock and its mechanical energy."""
        self._time.append(float(time))
        self._position.append(float(output.position))
        self._velocity.append(float(output.velocity))
        self._mode.append(output.mode.value)
        self._energy.append(float(energy))

    def get(self, key: str) -> np.ndarray:
        if key == "mode":
            return np.array(list(self._mode), dtype=str)
        if key not in SERIES:
            raise KeyError(f"Unknown series {key!r}; expected one of {SERIES}")
        return np.fromiter(getattr(self, f"_{key}"), dtype=float)

    def simulating_frames(self) -> List[int]:
        """Indices of the recorded frames emitted while the mass was in flight."""
        return [i for i, mode in enumerate(self._mode) if mode == "Simulation"]

    def to_dict(self) -> Dict[str, np.ndarray]:
        return {key: self.get(key) for key in SERIES}

    def clear(self) -> None:
        for key in SERIES:
            getattr(self, f"_{key}").clear()

    def __len__(self) -> int:
        return len(self._time)
