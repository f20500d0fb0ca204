"""Demonstration: propagate a circular orbit, show attitude conversions, read gravity coefficients."""

from __future__ import annotations

import argparse
import math
import time

import numpy as np

from oadcs.gravity import EGMCoefficients
from oadcs.integrators import FixedStepIntegrator, rk4_step
from oadcs.representations import EulerAngleAttitude, QuaternionAttitude
from oadcs.units import UnitsAngle

MU_EARTH = 398600.4418  # km^3 s^-2


def gravity_newton(t, x, mu) -> np.ndarray:
    """Two-body state derivative ``[v, a]`` for state ``[r, v]``."""
    state = np.asarray(x, dtype=float).reshape(-1)
    r = state[:3]
    v = state[3:6]
    r_mag = float(np.linalg.norm(r))
    g = -mu / (r_mag * r_mag * r_mag) * r
    return np.concatenate((v, g))


def _vec_str(v) -> str:
    return " ".join(f"{float(c):g}" for c in v)


def _parse_args(argv):
    parser = argparse.ArgumentParser(prog="oadcs", description=__doc__)
    parser.add_argument("--dt", type=float, default=10.0, help="RK4 step size in seconds")
    parser.add_argument("--egm", help="gravity model coefficient file to read")
    parser.add_argument("--egm-year", type=int, default=2008, choices=(1984, 1996, 2008))
    parser.add_argument("--max-degree", type=int, default=4)
    parser.add_argument("--max-order", type=int, default=3)
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = _parse_args(argv)
    mu = MU_EARTH

    def f(t, x):
        return gravity_newton(t, x, mu)

    r0_mag = 7000.0
    r0 = np.array([r0_mag, 0.0, 0.0])
    v0 = np.array([0.0, math.sqrt(mu / r0_mag), 0.0])
    x0 = np.concatenate((r0, v0))

    print("Initial State")
    print(f"Initial position (km): {_vec_str(r0)}")
    print(f"Initial velocity (km/s): {_vec_str(v0)}")

    period = 2.0 * math.pi * math.sqrt(r0_mag**3 / mu)
    print(f"Orbital period: {period:g} s")

    rk4 = FixedStepIntegrator(f, args.dt, rk4_step)
    start = time.perf_counter()
    times, states = rk4.integrate(0.0, period, x0)
    elapsed = time.perf_counter() - start
    print(f"Total runtime: {elapsed:g} seconds")
    print(f"Number of time steps: {len(times)}")

    xf = states[-1]
    rf, vf = xf[:3], xf[3:6]
    print("\nFixed RK4 Results")
    print(f"Final position (km): {_vec_str(rf)}")
    print(f"Final velocity (km/s): {_vec_str(vf)}")
    print(f"Radius error (km): {np.linalg.norm(rf) - np.linalg.norm(r0):g}")

    print()
    ea_att = EulerAngleAttitude((0.5, 0.0, 0.25), (3, 2, 1), UnitsAngle.RADIANS)
    print(ea_att)
    q_att = QuaternionAttitude((0.1, 0.2, 0.3, 0.9))
    print(q_att)
    q_att.from_dcm(np.eye(3))
    print(q_att)

    if args.egm is not None:
        egm = EGMCoefficients(args.max_degree, args.max_order)
        egm.load(args.egm, args.egm_year)
        for n in range(args.max_degree + 1):
            for m in range(args.max_order + 1):
                print(f"C[{n},{m}]: {egm.get_c(n, m):g}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())