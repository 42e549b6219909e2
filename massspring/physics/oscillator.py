"""Damped spring-mass oscillator: m*ddx + c*dx + k*(x - x_eq) = 0."""

from typing import Any, Optional, Tuple

import numpy as np

from massspring.config import DEFAULT_PARAMETERS, PhysicalParameters
from massspring.physics.integrators import SemiImplicitEulerIntegrator


class DampedOscillator:
    """
    One-dimensional damped oscillator around params.equilibrium.

    State [pos, vel]; rhs: dx/dt = vel, dv/dt = -(k/m)*(pos - x_eq) - (c/m)*vel.
    Holds only constants: step() takes the state by value and returns the
    new one, so the same model can be shared freely.
    """

    def __init__(
        self,
        params: Optional[PhysicalParameters] = None,
        integrator: Optional[Any] = None,
    ) -> None:
        """
        Args:
            params: physical constants (default: DEFAULT_PARAMETERS).
            integrator: object with step(f, x, u, t, dt). Default: semi-implicit Euler.
        """
        self.params = params or DEFAULT_PARAMETERS
        self.integrator = integrator or SemiImplicitEulerIntegrator()

    def acceleration(self, position: float, velocity: float) -> float:
        p = self.params
        displacement = position - p.equilibrium
        return -(p.stiffness / p.mass) * displacement - (p.damping / p.mass) * velocity

    def rhs(self, x: np.ndarray, u: np.ndarray, t: float) -> np.ndarray:
        pos, vel = x[0], x[1]
        return np.array([vel, self.acceleration(pos, vel)])

    def step(self, position: float, velocity: float, dt: float) -> Tuple[float, float]:
        """
        Advance the oscillator by one time step.

        Args:
            position: current coordinate along the drag axis.
            velocity: current velocity.
            dt: time step in seconds (dt >= 0).

        Returns:
            (new_position, new_velocity)
        """
        x = np.array([position, velocity], dtype=float)
        x_next = self.integrator.step(self.rhs, x, np.array([]), 0.0, dt)
        return float(x_next[0]), float(x_next[1])

    def energy(self, position: float, velocity: float) -> float:
        """Total mechanical energy: kinetic plus spring potential."""
        p = self.params
        displacement = p.displacement(position)
        return 0.5 * p.mass * float(velocity) ** 2 + 0.5 * p.stiffness * displacement ** 2

    def is_settled(self, position: float, velocity: float) -> bool:
        """True when both |displacement| and |velocity| are below epsilon."""
        eps = float(self.params.epsilon)
        return abs(self.params.displacement(position)) < eps and abs(float(velocity)) < eps
