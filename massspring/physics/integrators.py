"""
Numerical integrators for second-order mechanical systems.

Pure numerical level: no knowledge of input devices or rendering.
Interface: step(f, x, u, t, dt) -> x_next, where f(x, u, t) returns dx/dt.

State vectors are laid out as [positions..., velocities...], so the
derivative of the position block is the velocity block.
"""

from typing import Callable

import numpy as np

# Type for ODE right-hand side: (x, u, t) -> dx/dt
RHS = Callable[[np.ndarray, np.ndarray, float], np.ndarray]


def euler_step(f: RHS, x: np.ndarray, u: np.ndarray, t: float, dt: float) -> np.ndarray:
    """Explicit Euler, order 1: x_{n+1} = x_n + dt * f(x_n, u_n, t_n)."""
    return x + dt * f(x, u, t)


def semi_implicit_euler_step(f: RHS, x: np.ndarray, u: np.ndarray, t: float, dt: float) -> np.ndarray:
    """
    Semi-implicit (symplectic) Euler: velocities first, then positions
    advanced with the *new* velocities.

        v_{n+1} = v_n + dt * a(x_n, v_n)
        q_{n+1} = q_n + dt * v_{n+1}

    Unlike explicit Euler it does not pump energy into an undamped oscillator.
    """
    x = np.asarray(x, dtype=float)
    if x.size % 2:
        raise ValueError(f"Expected state [positions, velocities] of even size, got {x.size}")
    n = x.size // 2
    dxdt = f(x, u, t)
    v_next = x[n:] + dt * dxdt[n:]
    q_next = x[:n] + dt * v_next
    return np.concatenate([q_next, v_next])


class EulerIntegrator:
    """Explicit Euler integrator, order 1."""

    @staticmethod
    def step(f: RHS, x: np.ndarray, u: np.ndarray, t: float, dt: float) -> np.ndarray:
        return euler_step(f, x, u, t, dt)


class SemiImplicitEulerIntegrator:
    """Semi-implicit Euler integrator (stable for oscillatory systems)."""

    @staticmethod
    def step(f: RHS, x: np.ndarray, u: np.ndarray, t: float, dt: float) -> np.ndarray:
        return semi_implicit_euler_step(f, x, u, t, dt)
