"""Tests for the damped oscillator model."""

import numpy as np
import pytest

from massspring.config import PhysicalParameters
from massspring.physics import DampedOscillator, EulerIntegrator

EQ = 425.0


@pytest.fixture
def model() -> DampedOscillator:
    return DampedOscillator(PhysicalParameters(equilibrium=EQ, stiffness=50.0, mass=1.0, damping=2.0))


@pytest.mark.parametrize("dt", [0.0, 0.016, 1.0])
def test_rest_stays_at_rest(model: DampedOscillator, dt: float) -> None:
    assert model.step(EQ, 0.0, dt) == (EQ, 0.0)


def test_single_step_from_displacement(model: DampedOscillator) -> None:
    """a = -50 * 100 = -5000; v = -80; x = 100 - 1.28 relative to equilibrium."""
    x, v = model.step(EQ + 100.0, 0.0, 0.016)
    assert v == pytest.approx(-80.0)
    assert x - EQ == pytest.approx(98.72)


def test_acceleration(model: DampedOscillator) -> None:
    assert model.acceleration(EQ + 100.0, 0.0) == pytest.approx(-5000.0)
    assert model.acceleration(EQ, 10.0) == pytest.approx(-20.0)
    assert model.acceleration(EQ - 2.0, -3.0) == pytest.approx(100.0 + 6.0)


def test_rhs(model: DampedOscillator) -> None:
    dxdt = model.rhs(np.array([EQ + 1.0, 2.0]), np.array([]), 0.0)
    np.testing.assert_allclose(dxdt, [2.0, -50.0 - 4.0])


def test_zero_dt_is_identity(model: DampedOscillator) -> None:
    assert model.step(EQ + 37.5, -12.0, 0.0) == (EQ + 37.5, -12.0)


def test_step_is_deterministic(model: DampedOscillator) -> None:
    first = model.step(EQ + 63.0, 17.0, 0.02)
    for _ in range(5):
        assert model.step(EQ + 63.0, 17.0, 0.02) == first


def test_mass_scales_acceleration() -> None:
    heavy = DampedOscillator(PhysicalParameters(equilibrium=0.0, stiffness=50.0, mass=2.0, damping=2.0))
    assert heavy.acceleration(100.0, 10.0) == pytest.approx(-2500.0 - 10.0)


def test_energy_non_increasing(model: DampedOscillator) -> None:
    x, v = EQ + 100.0, 0.0
    energy = model.energy(x, v)
    initial = energy
    for _ in range(2000):
        x, v = model.step(x, v, 0.016)
        e_next = model.energy(x, v)
        assert e_next <= energy + 1e-9
        energy = e_next
    assert energy < 1e-6 * initial


def test_converges_to_equilibrium(model: DampedOscillator) -> None:
    x, v = EQ - 300.0, 40.0
    for _ in range(3000):
        x, v = model.step(x, v, 1.0 / 60.0)
    assert model.is_settled(x, v)


def test_undamped_semi_implicit_stays_bounded() -> None:
    params = PhysicalParameters(equilibrium=0.0, stiffness=50.0, mass=1.0, damping=0.0)
    symplectic = DampedOscillator(params)
    explicit = DampedOscillator(params, integrator=EulerIntegrator())
    initial = symplectic.energy(100.0, 0.0)

    xs, vs = 100.0, 0.0
    xe, ve = 100.0, 0.0
    peak = initial
    for _ in range(500):
        xs, vs = symplectic.step(xs, vs, 0.016)
        xe, ve = explicit.step(xe, ve, 0.016)
        peak = max(peak, symplectic.energy(xs, vs))

    assert peak < 1.1 * initial
    assert explicit.energy(xe, ve) > 10 * initial


def test_energy(model: DampedOscillator) -> None:
    assert model.energy(EQ, 0.0) == 0.0
    assert model.energy(EQ + 2.0, 3.0) == pytest.approx(0.5 * 9.0 + 0.5 * 50.0 * 4.0)


def test_is_settled_requires_both_below_epsilon(model: DampedOscillator) -> None:
    assert model.is_settled(EQ + 0.05, -0.05)
    assert not model.is_settled(EQ + 0.05, 0.2)
    assert not model.is_settled(EQ + 0.2, 0.05)
    # Strict comparison: exactly epsilon is not settled
    assert not model.is_settled(EQ, 0.1)
