"""Tests for physical parameters and layout validation."""

import dataclasses

import pytest

from massspring.config import (
    DEFAULT_LAYOUT,
    DEFAULT_PARAMETERS,
    ConfigurationError,
    Layout,
    PhysicalParameters,
    validate_scene,
)


def test_defaults() -> None:
    p = DEFAULT_PARAMETERS
    assert p.equilibrium == 425.0
    assert p.stiffness == 50.0
    assert p.mass == 1.0
    assert p.damping == 2.0
    assert p.epsilon == 0.1
    assert p.threshold == 10.0
    assert p.start_velocity == 40.0
    assert DEFAULT_LAYOUT.min_position == 50.0
    assert DEFAULT_LAYOUT.max_position == 850.0
    assert DEFAULT_LAYOUT.ground_y == 300.0


@pytest.mark.parametrize("mass", [0.0, -1.0])
def test_non_positive_mass_is_rejected(mass: float) -> None:
    with pytest.raises(ConfigurationError, match="mass"):
        PhysicalParameters(mass=mass)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"stiffness": 0.0},
        {"damping": -0.5},
        {"epsilon": 0.0},
        {"threshold": -1.0},
    ],
)
def test_invalid_parameters(kwargs) -> None:
    with pytest.raises(ConfigurationError):
        PhysicalParameters(**kwargs)


def test_configuration_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        PhysicalParameters(mass=0.0)


def test_undamped_is_allowed() -> None:
    assert PhysicalParameters(damping=0.0).damping == 0.0


def test_parameters_are_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_PARAMETERS.mass = 2.0  # type: ignore[misc]


def test_displacement() -> None:
    assert DEFAULT_PARAMETERS.displacement(525.0) == pytest.approx(100.0)
    assert DEFAULT_PARAMETERS.displacement(400.0) == pytest.approx(-25.0)


def test_invalid_layout() -> None:
    with pytest.raises(ConfigurationError):
        Layout(width=0)
    with pytest.raises(ConfigurationError):
        Layout(width=100, rect_size=50)
    with pytest.raises(ConfigurationError):
        Layout(spring_num=0)


def test_validate_scene() -> None:
    validate_scene(DEFAULT_PARAMETERS, DEFAULT_LAYOUT)
    validate_scene(PhysicalParameters(equilibrium=50.0), Layout())
    validate_scene(PhysicalParameters(equilibrium=850.0), Layout())
    with pytest.raises(ConfigurationError, match="draggable range"):
        validate_scene(PhysicalParameters(equilibrium=10.0), Layout())
    with pytest.raises(ConfigurationError):
        validate_scene(DEFAULT_PARAMETERS, Layout(width=400))
