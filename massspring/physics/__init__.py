"""
Physics of the mass-on-spring scene.

  - integrators: numerical integration (explicit Euler, semi-implicit Euler)
  - oscillator: damped spring-mass model (DampedOscillator)
"""

from massspring.physics.integrators import (
    EulerIntegrator,
    SemiImplicitEulerIntegrator,
    euler_step,
    semi_implicit_euler_step,
)
from massspring.physics.oscillator import DampedOscillator

__all__ = [
    "EulerIntegrator",
    "SemiImplicitEulerIntegrator",
    "euler_step",
    "semi_implicit_euler_step",
    "DampedOscillator",
]
