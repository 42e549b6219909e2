"""
massspring: interactive damped mass-on-spring simulation.
"""

__version__ = "0.1.0"

from massspring.config import ConfigurationError, Layout, PhysicalParameters
from massspring.core.controller import InteractionController, Mode
from massspring.physics.oscillator import DampedOscillator

__all__ = [
    "__version__",
    "ConfigurationError",
    "Layout",
    "PhysicalParameters",
    "InteractionController",
    "Mode",
    "DampedOscillator",
]
