"""Bodies with translational and rotational state."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from oadcs.units import UnitsAngle, UnitsLinear, UnitsMass


def _zeros3() -> np.ndarray:
    return np.zeros(3)


def _identity_quaternion() -> np.ndarray:
    return np.array([0.0, 0.0, 0.0, 1.0])


@dataclass(eq=False)
class Body:
    """A body with position, velocity, attitude quaternion ``[x, y, z, w]`` and angular velocity."""

    id: int = 0
    name: str = ""
    pos: np.ndarray = field(default_factory=_zeros3)
    vel: np.ndarray = field(default_factory=_zeros3)
    ep: np.ndarray = field(default_factory=_identity_quaternion)
    omega: np.ndarray = field(default_factory=_zeros3)
    u_linear: UnitsLinear = UnitsLinear.KILOMETER
    u_angle: UnitsAngle = UnitsAngle.RADIANS
    u_mass: UnitsMass = UnitsMass.KILOGRAMS
    update_position: bool = True
    update_attitude: bool = False

    def __post_init__(self) -> None:
        self.pos = np.asarray(self.pos, dtype=float).reshape(3)
        self.vel = np.asarray(self.vel, dtype=float).reshape(3)
        self.ep = np.asarray(self.ep, dtype=float).reshape(4)
        self.omega = np.asarray(self.omega, dtype=float).reshape(3)


@dataclass(eq=False)
class Satellite(Body):
    """An artificial satellite."""


@dataclass(eq=False)
class CelestialBody(Body):
    """A natural body such as a planet or moon."""