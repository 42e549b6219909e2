"""
Physical parameters and window layout for the mass-on-spring scene.

All values are fixed at startup. Both records validate themselves on
construction and raise ConfigurationError, so a bad parameter set is
rejected before the frame loop ever starts.
"""

from dataclasses import dataclass

# Window layout (pixels, origin top-left, y pointing down)
WIDTH = 900
HEIGHT = 600
FONT_SIZE = 20
TARGET_FPS = 60

RECT_SIZE = 50
GROUND_THICK = 6

SPRING_NUM = 12
SPRING_LEN = 30.0
SPRING_THICK = 2.0
SPRING_Y_OFFSET = 5.0

# Physics
EQUILIBRIUM_X = WIDTH / 2 - RECT_SIZE / 2
START_VELOCITY = 40.0
SPRING_STIFFNESS = 50.0
OBJ_MASS = 1.0
DAMPING_COEFFICIENT = 2.0

EPSILON = 0.1
THRESHOLD = 10.0


class ConfigurationError(ValueError):
    """Invalid physical or layout constants (fatal at startup)."""


@dataclass(frozen=True)
class PhysicalParameters:
    """
    Constants of the damped spring-mass system.

    Attributes:
        equilibrium: rest coordinate along the drag axis (spring force is zero).
        stiffness: spring constant k.
        mass: object mass m, strictly positive.
        damping: viscous damping coefficient c.
        epsilon: settle threshold for both |displacement| and |velocity|.
        threshold: minimum |displacement| at release that starts a simulation.
        start_velocity: velocity the oscillator is launched with at startup.
    """

    equilibrium: float = EQUILIBRIUM_X
    stiffness: float = SPRING_STIFFNESS
    mass: float = OBJ_MASS
    damping: float = DAMPING_COEFFICIENT
    epsilon: float = EPSILON
    threshold: float = THRESHOLD
    start_velocity: float = START_VELOCITY

    def __post_init__(self) -> None:
        if self.mass <= 0:
            raise ConfigurationError(f"mass must be positive, got {self.mass}")
        if self.stiffness <= 0:
            raise ConfigurationError(f"stiffness must be positive, got {self.stiffness}")
        if self.damping < 0:
            raise ConfigurationError(f"damping must be non-negative, got {self.damping}")
        if self.epsilon <= 0:
            raise ConfigurationError(f"epsilon must be positive, got {self.epsilon}")
        if self.threshold < 0:
            raise ConfigurationError(f"threshold must be non-negative, got {self.threshold}")

    def displacement(self, position: float) -> float:
        """Signed distance of position from equilibrium."""
        return float(position) - float(self.equilibrium)


@dataclass(frozen=True)
class Layout:
    """Fixed scene geometry shared by the controller and the window."""

    width: int = WIDTH
    height: int = HEIGHT
    rect_size: int = RECT_SIZE
    ground_thick: int = GROUND_THICK
    spring_num: int = SPRING_NUM
    spring_len: float = SPRING_LEN
    spring_thick: float = SPRING_THICK
    spring_y_offset: float = SPRING_Y_OFFSET
    font_size: int = FONT_SIZE
    target_fps: int = TARGET_FPS

    def __post_init__(self) -> None:
        for name in ("width", "height", "rect_size", "spring_num", "font_size", "target_fps"):
            value = getattr(self, name)
            if value <= 0:
                raise ConfigurationError(f"{name} must be positive, got {value}")
        if 2 * self.rect_size >= self.width:
            raise ConfigurationError(
                f"rect_size {self.rect_size} leaves no draggable range in width {self.width}"
            )

    @property
    def ground_y(self) -> float:
        """Vertical coordinate of the ground line."""
        return self.height / 2

    @property
    def min_position(self) -> float:
        return float(self.rect_size)

    @property
    def max_position(self) -> float:
        return float(self.width - self.rect_size)


def validate_scene(params: PhysicalParameters, layout: Layout) -> None:
    """
    Cross-check parameters against the layout: the equilibrium must lie in
    the range the mass can be dragged to, or it could never be returned to.
    """
    if not layout.min_position <= params.equilibrium <= layout.max_position:
        raise ConfigurationError(
            f"equilibrium {params.equilibrium} outside draggable range "
            f"[{layout.min_position}, {layout.max_position}]"
        )


DEFAULT_PARAMETERS = PhysicalParameters()
DEFAULT_LAYOUT = Layout()
