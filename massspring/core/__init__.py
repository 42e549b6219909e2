"""Core: interaction state machine and frame history."""

from massspring.core.controller import (
    ControllerState,
    FrameInput,
    FrameOutput,
    Highlight,
    InteractionController,
    Mode,
    update,
)
from massspring.core.history import FrameHistory

__all__ = [
    "ControllerState",
    "FrameInput",
    "FrameOutput",
    "Highlight",
    "InteractionController",
    "Mode",
    "update",
    "FrameHistory",
]
