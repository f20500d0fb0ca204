"""Rotation matrices and conversions between attitude parameterisations.

Quaternions (Euler parameters) are stored as ``[x, y, z, w]``.
"""

from __future__ import annotations

import math
from enum import IntEnum

import numpy as np

from oadcs.units import UnitsAngle, convert_angle


class RotationalAxis(IntEnum):
    X = 1
    Y = 2
    Z = 3


def _vec(v, size: int) -> np.ndarray:
    arr = np.asarray(v, dtype=float).reshape(-1)
    if arr.shape != (size,):
        raise ValueError(f"expected a vector of length {size}, got shape {arr.shape}")
    return arr


def _to_radians(angle, units_in: UnitsAngle):
    if UnitsAngle(units_in) is not UnitsAngle.RADIANS:
        return convert_angle(angle, units_in, UnitsAngle.RADIANS)
    return angle


def skew(v) -> np.ndarray:
    """Return the cross-product matrix of a 3-vector."""
    x, y, z = _vec(v, 3)
    return np.array([[0.0, -z, y], [z, 0.0, -x], [-y, x, 0.0]])


def single_axis_rotation(angle, axis, units_in: UnitsAngle = UnitsAngle.RADIANS) -> np.ndarray:
    """Rotation matrix about one body axis."""
    axis = RotationalAxis(int(axis))
    angle = _to_radians(float(angle), units_in)
    c = math.cos(angle)
    s = math.sin(angle)
    if axis is RotationalAxis.X:
        return np.array([[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]])
    if axis is RotationalAxis.Y:
        return np.array([[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]])
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


def dcm_to_ep(dcm) -> np.ndarray:
    """Convert a direction cosine matrix to a unit quaternion ``[x, y, z, w]``."""
    r = np.asarray(dcm, dtype=float)
    if r.shape != (3, 3):
        raise ValueError(f"expected a 3x3 matrix, got shape {r.shape}")
    q = np.empty(4)
    tr = float(r[0, 0] + r[1, 1] + r[2, 2])
    if tr > 0.0:
        s = math.sqrt(tr + 1.0) * 2.0
        q[3] = 0.25 * s
        q[0] = (r[2, 1] - r[1, 2]) / s
        q[1] = (r[0, 2] - r[2, 0]) / s
        q[2] = (r[1, 0] - r[0, 1]) / s
    elif r[0, 0] > r[1, 1] and r[0, 0] > r[2, 2]:
        s = math.sqrt(1.0 + r[0, 0] - r[1, 1] - r[2, 2]) * 2.0
        q[0] = 0.25 * s
        q[1] = (r[0, 1] + r[1, 0]) / s
        q[2] = (r[0, 2] + r[2, 0]) / s
        q[3] = (r[2, 1] - r[1, 2]) / s
    elif r[1, 1] > r[2, 2]:
        s = math.sqrt(1.0 + r[1, 1] - r[0, 0] - r[2, 2]) * 2.0
        q[0] = (r[0, 1] + r[1, 0]) / s
        q[1] = 0.25 * s
        q[2] = (r[1, 2] + r[2, 1]) / s
        q[3] = (r[0, 2] - r[2, 0]) / s
    else:
        s = math.sqrt(1.0 + r[2, 2] - r[0, 0] - r[1, 1]) * 2.0
        q[0] = (r[0, 2] + r[2, 0]) / s
        q[1] = (r[1, 2] + r[2, 1]) / s
        q[2] = 0.25 * s
        q[3] = (r[1, 0] - r[0, 1]) / s
    return q / np.linalg.norm(q)


def ep_to_dcm(ep) -> np.ndarray:
    """Convert a quaternion ``[x, y, z, w]`` to a direction cosine matrix."""
    q1, q2, q3, q4 = _vec(ep, 4)
    q1s, q2s, q3s, q4s = q1 * q1, q2 * q2, q3 * q3, q4 * q4
    return np.array(
        [
            [q1s - q2s - q3s - q4s, 2 * (q1 * q2 + q3 + q4), 2 * (q1 * q3 - q2 * q4)],
            [2 * (q2 * q1 - q3 * q4), -q1s + q2s - q3s + q4s, 2 * (q2 * q3 + q1 * q4)],
            [2 * (q3 * q1 + q2 * q4), 2 * (q3 * q2 - q1 * q4), -q1s - q2s + q3s + q4s],
        ]
    )


def ep_kde(ep, omega) -> np.ndarray:
    """Quaternion kinematic differential equation: time derivative of ``ep``."""
    e1, e2, e3, e4 = _vec(ep, 4)
    o1, o2, o3 = _vec(omega, 3)
    return 0.5 * np.array(
        [
            o3 * e2 - o2 * e3 + o1 * e4,
            -o3 * e1 + o1 * e3 + o2 * e4,
            o2 * e1 - o1 * e2 + o3 * e4,
            -o1 * e1 - o2 * e2 - o3 * e3,
        ]
    )


def omega_ode(omega, torque, inertia, inertia_inv, diagonal: bool = True) -> np.ndarray:
    """Euler's rotational equations: angular acceleration in the body frame."""
    w = _vec(omega, 3)
    tau = _vec(torque, 3)
    i_mat = np.asarray(inertia, dtype=float)
    i_inv = np.asarray(inertia_inv, dtype=float)
    w1, w2, w3 = w
    if diagonal:
        i1, i2, i3 = i_mat[0, 0], i_mat[1, 1], i_mat[2, 2]
        gyro = np.array(
            [
                (i2 - i3) / i1 * w2 * w3,
                (i3 - i1) / i2 * w1 * w3,
                (i1 - i2) / i3 * w1 * w2,
            ]
        )
        return gyro + tau * np.diag(i_inv)
    h = i_mat @ w
    gyro = np.array([h[2] * w2 - h[1] * w3, h[0] * w3 - h[2] * w1, h[1] * w1 - h[0] * w2])
    return i_inv @ (tau - gyro)


def ea_to_dcm(angles, sequence, units_in: UnitsAngle = UnitsAngle.RADIANS) -> np.ndarray:
    """Direction cosine matrix from Euler angles applied in the given axis sequence."""
    angles = np.asarray(_to_radians(_vec(angles, 3), units_in), dtype=float)
    sequence = _vec(sequence, 3)
    r = np.eye(3)
    for angle, axis in reversed(list(zip(angles, sequence))):
        r = r @ single_axis_rotation(angle, int(axis))
    return r


def ea_to_ep(angles, sequence, units_in: UnitsAngle = UnitsAngle.RADIANS) -> np.ndarray:
    """Quaternion from Euler angles."""
    return dcm_to_ep(ea_to_dcm(angles, sequence, units_in))


def pr_to_dcm(axis, angle, units_in: UnitsAngle = UnitsAngle.RADIANS) -> np.ndarray:
    """Direction cosine matrix from a principal rotation axis and angle."""
    angle = float(angle)
    theta = _to_radians(angle, units_in)
    sigma = 1.0 - math.cos(angle)
    c = math.cos(theta)
    s = math.sin(theta)
    e1, e2, e3 = _vec(axis, 3)
    return np.array(
        [
            [e1 * e1 * sigma + c, e1 * e2 * sigma + e3 * s, e1 * e3 * sigma - e2 * s],
            [e2 * e1 * sigma - e3 * s, e2 * e2 * sigma + c, e2 * e3 * sigma + e1 * s],
            [e3 * e1 * sigma + e2 * s, e3 * e2 * sigma - e1 * s, e3 * e3 * sigma + c],
        ]
    )


def pr_to_ep(axis, angle, units_in: UnitsAngle = UnitsAngle.RADIANS) -> np.ndarray:
    """Quaternion from a principal rotation axis and angle."""
    return dcm_to_ep(pr_to_dcm(axis, angle, units_in))


def crp_to_dcm(crp) -> np.ndarray:
    """Direction cosine matrix from classical Rodrigues parameters."""
    q = _vec(crp, 3)
    q1, q2, q3 = q
    q1s, q2s, q3s = q1 * q1, q2 * q2, q3 * q3
    r = np.array(
        [
            [1 + q1s - q2s - q3s, 2 * (q1 * q2 + q3), 2 * (q1 * q3 - q2)],
            [2 * (q2 * q1 - q3), 1 - q1s + q2s - q3s, 2 * (q2 * q3 + q1)],
            [2 * (q3 * q1 + q2), 2 * (q3 * q2 - q1), 1 - q1s - q2s + q3s],
        ]
    )
    return r / (1.0 + float(q @ q))


def crp_to_ep(crp) -> np.ndarray:
    """Quaternion from classical Rodrigues parameters."""
    return dcm_to_ep(crp_to_dcm(crp))


def mrp_to_dcm(mrp) -> np.ndarray:
    """Direction cosine matrix from modified Rodrigues parameters."""
    sv = _vec(mrp, 3)
    s1, s2, s3 = sv
    s1s, s2s, s3s = s1 * s1, s2 * s2, s3 * s3
    sdots = float(sv @ sv)
    denom = (1 + sdots) ** 2
    oms = 1 - sdots
    oms2 = oms * oms
    r = np.array(
        [
            [4 * (s1s - s2s - s3s) + oms2, 8 * s1 * s2 + 4 * s3 * oms, 8 * s1 * s3 - 4 * s2 * oms],
            [8 * s2 * s1 - 4 * s3 * oms, 4 * (-s1s + s2s - s3s) + oms2, 8 * s2 * s3 + 4 * s1 * oms],
            [8 * s3 * s1 + 4 * s2 * oms, 8 * s3 * s2 - 4 * s1 * oms, 4 * (-s1s - s2s + s3s) + oms2],
        ]
    )
    return r / denom


def mrp_to_ep(mrp) -> np.ndarray:
    """Quaternion from modified Rodrigues parameters."""
    return dcm_to_ep(mrp_to_dcm(mrp))