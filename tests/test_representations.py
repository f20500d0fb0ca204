import math

import numpy as np
import pytest

from oadcs.attitude import (
    RotationalAxis,
    dcm_to_ep,
    ea_to_dcm,
    ep_to_dcm,
    single_axis_rotation,
)
from oadcs.representations import (
    Attitude,
    DirectionCosineAttitude,
    EulerAngleAttitude,
    QuaternionAttitude,
)
from oadcs.units import UnitsAngle


def test_attitude_is_abstract():
    with pytest.raises(TypeError):
        Attitude()


def test_quaternion_default_is_identity():
    att = QuaternionAttitude()
    assert np.array_equal(att.to_quaternion(), [0.0, 0.0, 0.0, 1.0])
    assert np.array_equal(att.omega, np.zeros(3))


def test_quaternion_stored_without_normalising():
    q = [0.1, 0.2, 0.3, 0.9]
    att = QuaternionAttitude(q)
    assert np.array_equal(att.to_quaternion(), q)


def test_quaternion_str():
    att = QuaternionAttitude([0.1, 0.2, 0.3, 0.9])
    assert str(att) == "Quat [x,y,z,w]: [0.1, 0.2, 0.3, 0.9]"


def test_quaternion_from_identity_dcm():
    att = QuaternionAttitude([0.1, 0.2, 0.3, 0.9])
    att.from_dcm(np.eye(3))
    assert np.allclose(att.to_quaternion(), [0.0, 0.0, 0.0, 1.0])
    assert str(att) == "Quat [x,y,z,w]: [0, 0, 0, 1]"


def test_quaternion_to_dcm_matches_conversion():
    q = [0.1, 0.2, 0.3, 0.9]
    att = QuaternionAttitude(q)
    assert np.allclose(att.to_dcm(), ep_to_dcm(q))


def test_quaternion_rejects_bad_length():
    with pytest.raises(ValueError):
        QuaternionAttitude([1.0, 0.0, 0.0])


def test_euler_default():
    att = EulerAngleAttitude()
    assert att.sequence == (3, 2, 1)
    assert np.allclose(att.to_dcm(), np.eye(3))


def test_euler_degrees_converted_to_radians():
    att = EulerAngleAttitude([90.0, 0.0, 0.0], (3, 2, 1), UnitsAngle.DEGREES)
    assert att.angles[0] == pytest.approx(math.pi / 2)


def test_euler_to_dcm_is_rotation():
    angles = [0.5, 0.0, 0.25]
    att = EulerAngleAttitude(angles, (3, 2, 1))
    r = att.to_dcm()
    assert np.allclose(r, ea_to_dcm(angles, (3, 2, 1)))
    assert np.allclose(r @ r.T, np.eye(3))
    assert np.linalg.det(r) == pytest.approx(1.0)


def test_euler_str():
    att = EulerAngleAttitude([0.5, 0.0, 0.25], (3, 2, 1), UnitsAngle.RADIANS)
    assert str(att) == (
        "Euler Angles [t_1, t_2, t_3]: [0.5, 0, 0.25]\n"
        "Sequence [s_1, s_2, s_3]: [3, 2, 1]"
    )


@pytest.mark.parametrize(
    "sequence",
    [
        (1, 2, 3),
        (1, 3, 2),
        (2, 3, 1),
        (3, 1, 2),
        (3, 2, 1),
        (1, 2, 1),
        (1, 3, 1),
        (2, 1, 2),
        (2, 3, 2),
        (3, 1, 3),
        (3, 2, 3),
    ],
)
def test_euler_from_identity_gives_zero_angles(sequence):
    att = EulerAngleAttitude([0.1, 0.2, 0.3], sequence)
    att.from_dcm(np.eye(3))
    assert np.allclose(att.angles, np.zeros(3))


def test_euler_from_dcm_single_axis():
    att = EulerAngleAttitude(sequence=(3, 2, 1))
    att.from_dcm(single_axis_rotation(0.3, RotationalAxis.Z))
    assert np.allclose(att.angles, [0.0, 0.0, 0.3])


def test_euler_unsupported_sequence():
    att = EulerAngleAttitude(sequence=(1, 1, 2))
    with pytest.raises(ValueError):
        att.from_dcm(np.eye(3))


def test_euler_to_quaternion_matches_dcm():
    att = EulerAngleAttitude([0.5, 0.1, 0.25], (3, 2, 1))
    q = att.to_quaternion()
    assert np.allclose(q, dcm_to_ep(att.to_dcm()))
    assert np.linalg.norm(q) == pytest.approx(1.0)


def test_euler_from_quaternion_consistent_with_from_dcm():
    q = [0.1, 0.2, 0.3, 0.9]
    a = EulerAngleAttitude(sequence=(1, 2, 3))
    b = EulerAngleAttitude(sequence=(1, 2, 3))
    a.from_quaternion(q)
    b.from_dcm(ep_to_dcm(q))
    assert np.allclose(a.angles, b.angles)


def test_dcm_default_identity_and_str():
    att = DirectionCosineAttitude()
    assert np.array_equal(att.to_dcm(), np.eye(3))
    assert str(att) == "DCM:\n1 0 0\n0 1 0\n0 0 1"


def test_dcm_orthonormalised():
    att = DirectionCosineAttitude(2.0 * np.eye(3))
    assert np.allclose(att.to_dcm(), np.eye(3))


def test_dcm_noisy_rotation_becomes_orthonormal():
    r = single_axis_rotation(0.4, RotationalAxis.X) + 1e-3 * np.arange(9).reshape(3, 3)
    att = DirectionCosineAttitude(r)
    out = att.to_dcm()
    assert np.allclose(out @ out.T, np.eye(3))
    assert np.allclose(out, r, atol=1e-2)


def test_dcm_rotation_unchanged():
    r = single_axis_rotation(0.7, RotationalAxis.Y)
    att = DirectionCosineAttitude(r)
    assert np.allclose(att.to_dcm(), r)


def test_dcm_to_quaternion_identity():
    att = DirectionCosineAttitude()
    assert np.allclose(att.to_quaternion(), [0.0, 0.0, 0.0, 1.0])


def test_dcm_from_quaternion():
    q = [0.1, 0.2, 0.3, 0.9]
    att = DirectionCosineAttitude()
    att.from_quaternion(q)
    assert np.allclose(att.to_dcm(), ep_to_dcm(q))


def test_dcm_rejects_bad_shape():
    with pytest.raises(ValueError):
        DirectionCosineAttitude(np.eye(2))