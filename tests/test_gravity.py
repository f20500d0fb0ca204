import numpy as np
import pytest

from oadcs.gravity import (
    CompositeForce,
    EGMCoefficients,
    EquationsOfMotion,
    NewtonianGravity,
    ZonalGravity,
)

MU = 398600.4418
R_EARTH = 6378.137
J_EARTH = (0.0, 1.08263e-3)


def _state(r, v=(0.0, 0.0, 0.0)):
    return np.array([*r, *v], dtype=float)


def test_newtonian_magnitude_and_direction():
    x = _state((7000.0, 0.0, 0.0), (0.0, 7.5, 0.0))
    a = NewtonianGravity(MU).acceleration(x)
    assert np.linalg.norm(a) == pytest.approx(MU / 7000.0**2)
    assert np.allclose(np.cross(a, x[:3]), 0.0)
    assert a @ x[:3] < 0


def test_newtonian_inverse_square_scaling():
    g = NewtonianGravity(MU)
    a1 = np.linalg.norm(g.acceleration(_state((7000.0, 0.0, 0.0))))
    a2 = np.linalg.norm(g.acceleration(_state((14000.0, 0.0, 0.0))))
    assert a1 / a2 == pytest.approx(4.0)


def test_composite_sums_policies():
    x = _state((4000.0, 3000.0, 2000.0))
    g1 = NewtonianGravity(MU)
    g2 = NewtonianGravity(2.0 * MU)
    total = CompositeForce(g1, g2).acceleration(x)
    assert np.allclose(total, g1.acceleration(x) + g2.acceleration(x))


def test_composite_empty_is_zero():
    assert np.array_equal(CompositeForce().acceleration(_state((1.0, 2.0, 3.0))), np.zeros(3))


def test_equations_of_motion_layout():
    x = _state((7000.0, 100.0, -50.0), (1.0, 7.5, 0.2))
    g = NewtonianGravity(MU)
    dxdt = EquationsOfMotion(g)(0.0, x)
    assert dxdt.shape == (6,)
    assert np.allclose(dxdt[:3], x[:3])
    assert np.allclose(dxdt[3:], g.acceleration(x))


def test_zonal_without_j2_matches_newtonian():
    x = _state((5000.0, 4000.0, 3000.0))
    zonal = ZonalGravity(MU, (0.0, 0.0), R_EARTH, 2)
    assert np.allclose(zonal.acceleration(x), NewtonianGravity(MU).acceleration(x))


def test_zonal_equatorial_pull_is_stronger():
    x = _state((7000.0, 0.0, 0.0))
    a_z = ZonalGravity(MU, J_EARTH, R_EARTH, 2).acceleration(x)
    a_n = NewtonianGravity(MU).acceleration(x)
    assert a_z[0] < a_n[0]
    assert a_z[1] == pytest.approx(0.0)
    assert a_z[2] == pytest.approx(0.0)


def test_zonal_polar_pull_is_weaker():
    x = _state((0.0, 0.0, 7000.0))
    a_z = ZonalGravity(MU, J_EARTH, R_EARTH, 2).acceleration(x)
    a_n = NewtonianGravity(MU).acceleration(x)
    assert a_n[2] < a_z[2] < 0.0


def test_zonal_needs_j2():
    with pytest.raises(IndexError):
        ZonalGravity(MU, (0.0,), R_EARTH, 2).acceleration(_state((7000.0, 0.0, 0.0)))


def test_egm_starts_zero_and_round_trips():
    egm = EGMCoefficients(4, 3)
    assert egm.get_c(4, 3) == 0.0
    assert egm.get_s(2, 1) == 0.0
    egm.set_c(2, 0, -4.84e-4)
    egm.set_s(3, 2, 1.5)
    assert egm.get_c(2, 0) == -4.84e-4
    assert egm.get_s(3, 2) == 1.5
    assert egm.get_c(3, 2) == 0.0


@pytest.mark.parametrize("n, m", [(5, 0), (0, 4), (-1, 0)])
def test_egm_out_of_range(n, m):
    egm = EGMCoefficients(4, 3)
    with pytest.raises(IndexError):
        egm.get_c(n, m)
    with pytest.raises(IndexError):
        egm.set_s(n, m, 1.0)


def _line_2008(n, m, c, s):
    return f"{n:>5}{m:>5}   {c:>22}   {s:>22}"


def test_egm_load_2008(tmp_path):
    rows = [
        _line_2008(2, 0, "-0.484165143790815E-03", "0.000000000000000E+00"),
        "",
        _line_2008(2, 1, "-0.206615509074176E-09", "0.138441389137979E-08"),
        _line_2008(2, 2, "0.243938357328313E-05", "3.000000000000000E+00"),
        _line_2008(3, 4, "0.999999999999999E-05", "0.000000000000000E+00"),
        _line_2008(5, 0, "0.686987951217000E-07", "0.000000000000000E+00"),
        _line_2008(3, 0, "0.957161207093473E-06", "0.000000000000000E+00"),
    ]
    path = tmp_path / "egm.txt"
    path.write_text("\n".join(rows) + "\n", encoding="utf-8")
    egm = EGMCoefficients(4, 3)
    egm.load(path, 2008)
    assert egm.get_c(2, 0) == pytest.approx(-0.484165143790815e-03)
    assert egm.get_c(2, 1) == pytest.approx(-0.206615509074176e-09)
    assert egm.get_c(2, 2) == pytest.approx(0.243938357328313e-05)
    assert egm.get_s(2, 0) == 0.0
    assert egm.get_s(2, 2) == 3.0
    # reading stopped at degree 5, so the later degree-3 row was never read
    assert egm.get_c(3, 0) == 0.0


def test_egm_load_1984_layout(tmp_path):
    row = f"{2:>5}{0:>5}{'-0.48416685E-03':>15}{'0.0':>15}"
    path = tmp_path / "egm84.txt"
    path.write_text(row + "\n", encoding="utf-8")
    egm = EGMCoefficients(2, 2)
    egm.load(path, 1984)
    assert egm.get_c(2, 0) == pytest.approx(-0.48416685e-03)


def test_egm_load_1996_layout(tmp_path):
    row = f"{3:>4}{1:>4}{'0.20304737173E-05':>20}{'0.0':>20}"
    path = tmp_path / "egm96.txt"
    path.write_text(row + "\n", encoding="utf-8")
    egm = EGMCoefficients(3, 3)
    egm.load(path, 1996)
    assert egm.get_c(3, 1) == pytest.approx(0.20304737173e-05)


def test_egm_unsupported_year(tmp_path):
    path = tmp_path / "egm.txt"
    path.write_text(_line_2008(2, 0, "1.0", "0.0") + "\n", encoding="utf-8")
    with pytest.raises(ValueError):
        EGMCoefficients(2, 2).load(path, 2020)


def test_egm_missing_file(tmp_path):
    with pytest.raises(OSError):
        EGMCoefficients(2, 2).load(tmp_path / "absent.txt", 2008)