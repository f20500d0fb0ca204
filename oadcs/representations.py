"""Object-oriented attitude representations built on the conversion functions."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

import numpy as np

from oadcs.attitude import dcm_to_ep, ea_to_dcm, ep_to_dcm
from oadcs.units import UnitsAngle, convert_angle

_SINGULARITY_EPS = 1e-8


def _fmt(value) -> str:
    return f"{float(value):g}"


def _matrix_str(matrix: np.ndarray) -> str:
    cells = [[_fmt(v) for v in row] for row in matrix]
    width = max(len(cell) for row in cells for cell in row)
    return "\n".join(" ".join(cell.rjust(width) for cell in row) for row in cells)


def _as_matrix(dcm) -> np.ndarray:
    r = np.asarray(dcm, dtype=float)
    if r.shape != (3, 3):
        raise ValueError(f"expected a 3x3 matrix, got shape {r.shape}")
    return r


def _as_quaternion(quat) -> np.ndarray:
    q = np.asarray(quat, dtype=float).reshape(-1)
    if q.shape != (4,):
        raise ValueError(f"expected a quaternion of length 4, got shape {q.shape}")
    return q.copy()


class Attitude(ABC):
    """Common interface of attitude representations.

    Quaternions are ``[x, y, z, w]``.
    """

    @abstractmethod
    def to_dcm(self) -> np.ndarray:
        """Return the direction cosine matrix."""

    @abstractmethod
    def from_dcm(self, dcm) -> None:
        """Set the attitude from a direction cosine matrix."""

    @abstractmethod
    def to_quaternion(self) -> np.ndarray:
        """Return the quaternion ``[x, y, z, w]``."""

    @abstractmethod
    def from_quaternion(self, quat) -> None:
        """Set the attitude from a quaternion ``[x, y, z, w]``."""


class QuaternionAttitude(Attitude):
    """Attitude held as a quaternion, with an angular velocity."""

    def __init__(self, quat=None):
        self.omega = np.zeros(3)
        self.from_quaternion((0.0, 0.0, 0.0, 1.0) if quat is None else quat)

    def to_quaternion(self) -> np.ndarray:
        return self.quat.copy()

    def from_quaternion(self, quat) -> None:
        self.quat = _as_quaternion(quat)

    def to_dcm(self) -> np.ndarray:
        return ep_to_dcm(self.quat)

    def from_dcm(self, dcm) -> None:
        self.quat = dcm_to_ep(_as_matrix(dcm))

    def __str__(self) -> str:
        return "Quat [x,y,z,w]: [" + ", ".join(_fmt(v) for v in self.quat) + "]"


def _tait_bryan(sin_t2, t1_args, t3_args, t3_singular):
    t2 = math.asin(min(1.0, max(-1.0, sin_t2)))
    if abs(math.cos(t2)) > _SINGULARITY_EPS:
        return math.atan2(*t1_args), t2, math.atan2(*t3_args)
    return 0.0, t2, math.atan2(*t3_singular)


def _proper(cos_t2, t1_args, t3_args, t3_singular):
    t2 = math.acos(min(1.0, max(-1.0, cos_t2)))
    if abs(math.sin(t2)) > _SINGULARITY_EPS:
        return math.atan2(*t1_args), t2, math.atan2(*t3_args)
    return 0.0, t2, math.atan2(*t3_singular)


_EXTRACTORS = {
    (1, 2, 3): lambda r: _tait_bryan(
        -r[0, 2], (r[1, 2], r[2, 2]), (r[0, 1], r[0, 0]), (-r[1, 0], r[1, 1])
    ),
    (1, 3, 2): lambda r: _tait_bryan(
        r[0, 1], (-r[2, 1], r[1, 1]), (-r[0, 2], r[0, 0]), (r[2, 0], r[2, 2])
    ),
    (2, 1, 3): lambda r: _tait_bryan(
        -r[1, 0], (r[0, 0], r[2, 0]), (r[1, 2], r[1, 1]), (-r[0, 2], r[0, 1])
    ),
    (2, 3, 1): lambda r: _tait_bryan(
        r[1, 2], (-r[0, 2], r[2, 2]), (-r[1, 0], r[1, 1]), (r[0, 1], r[0, 0])
    ),
    (3, 1, 2): lambda r: _tait_bryan(
        -r[2, 1], (r[0, 1], r[1, 1]), (r[2, 0], r[2, 2]), (-r[0, 2], r[0, 0])
    ),
    (3, 2, 1): lambda r: _tait_bryan(
        -r[2, 0], (r[2, 1], r[2, 2]), (r[1, 0], r[0, 0]), (-r[0, 1], r[1, 1])
    ),
    (1, 2, 1): lambda r: _proper(
        r[0, 0], (r[1, 0], -r[2, 0]), (r[0, 1], r[0, 2]), (-r[2, 1], r[1, 1])
    ),
    (1, 3, 1): lambda r: _proper(
        r[0, 0], (r[2, 0], r[1, 0]), (r[0, 2], -r[0, 1]), (r[1, 2], r[2, 2])
    ),
    (2, 1, 2): lambda r: _proper(
        r[1, 1], (r[0, 1], -r[2, 1]), (r[1, 0], r[1, 2]), (-r[2, 0], r[0, 0])
    ),
    (2, 3, 2): lambda r: _proper(
        r[1, 1], (r[0, 1], r[2, 1]), (r[1, 2], -r[1, 0]), (r[2, 0], r[0, 0])
    ),
    (3, 1, 3): lambda r: _proper(
        r[2, 2], (r[0, 2], -r[1, 2]), (r[2, 0], r[2, 1]), (-r[1, 0], r[0, 0])
    ),
    (3, 2, 3): lambda r: _proper(
        r[2, 2], (r[1, 2], r[0, 2]), (r[2, 1], -r[2, 0]), (r[0, 1], r[1, 1])
    ),
}


class EulerAngleAttitude(Attitude):
    """Attitude held as three Euler angles (radians) and an axis sequence."""

    def __init__(self, angles=(0.0, 0.0, 0.0), sequence=(3, 2, 1), units_in=UnitsAngle.RADIANS):
        values = np.asarray(angles, dtype=float).reshape(-1)
        if values.shape != (3,):
            raise ValueError(f"expected three angles, got shape {values.shape}")
        seq = tuple(int(axis) for axis in sequence)
        if len(seq) != 3:
            raise ValueError(f"expected a sequence of three axes, got {seq}")
        self.angles = np.asarray(convert_angle(values, units_in, UnitsAngle.RADIANS), dtype=float)
        self.sequence = seq

    def to_dcm(self) -> np.ndarray:
        return ea_to_dcm(self.angles, self.sequence)

    def from_dcm(self, dcm) -> None:
        try:
            extract = _EXTRACTORS[tuple(self.sequence)]
        except KeyError:
            raise ValueError(f"unsupported Euler angle sequence {self.sequence}") from None
        self.angles = np.array(extract(_as_matrix(dcm)), dtype=float)

    def to_quaternion(self) -> np.ndarray:
        return dcm_to_ep(self.to_dcm())

    def from_quaternion(self, quat) -> None:
        self.from_dcm(ep_to_dcm(_as_quaternion(quat)))

    def __str__(self) -> str:
        angles = ", ".join(_fmt(v) for v in self.angles)
        sequence = ", ".join(str(axis) for axis in self.sequence)
        return (
            f"Euler Angles [t_1, t_2, t_3]: [{angles}]\n"
            f"Sequence [s_1, s_2, s_3]: [{sequence}]"
        )


class DirectionCosineAttitude(Attitude):
    """Attitude held as an orthonormal direction cosine matrix."""

    def __init__(self, dcm=None):
        if dcm is None:
            self.dcm = np.eye(3)
        else:
            self.from_dcm(dcm)

    def to_dcm(self) -> np.ndarray:
        return self.dcm.copy()

    def from_dcm(self, dcm) -> None:
        """Store the nearest orthonormal matrix to ``dcm``."""
        u, _, vh = np.linalg.svd(_as_matrix(dcm))
        self.dcm = u @ vh

    def to_quaternion(self) -> np.ndarray:
        return dcm_to_ep(self.dcm)

    def from_quaternion(self, quat) -> None:
        self.dcm = ep_to_dcm(_as_quaternion(quat))

    def __str__(self) -> str:
        return "DCM:\n" + _matrix_str(self.dcm)