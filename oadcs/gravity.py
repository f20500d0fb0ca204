"""Gravity force models, equations of motion and gravity-model coefficients."""

from __future__ import annotations

import re

import numpy as np

_INT_PREFIX = re.compile(r"[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

# Column ranges (start, inclusive end) of n, m, C and S for each model layout.
_EGM_LAYOUTS = {
    1984: ((0, 4), (5, 9), (10, 24), (25, 39)),
    1996: ((0, 3), (4, 7), (8, 27), (28, 47)),
    2008: ((0, 4), (5, 9), (13, 34), (38, 59)),
}


def _position(x) -> np.ndarray:
    return np.asarray(x, dtype=float).reshape(-1)[:3]


class EquationsOfMotion:
    """State derivative built from a force model.

    The derivative is the first three state components followed by the
    acceleration the force model gives for the state.
    """

    def __init__(self, forces):
        self.forces = forces

    def __call__(self, t, x) -> np.ndarray:
        state = np.asarray(x, dtype=float).reshape(-1)
        return np.concatenate((state[:3], self.forces.acceleration(state)))


class CompositeForce:
    """Sum of the accelerations of several force models."""

    def __init__(self, *args):
        self.policies = tuple(args)

    def acceleration(self, x) -> np.ndarray:
        total = np.zeros(3)
        for policy in self.policies:
            total = total + policy.acceleration(x)
        return total


class NewtonianGravity:
    """Point-mass gravity with gravitational parameter ``mu``."""

    def __init__(self, mu):
        self.mu = float(mu)

    def acceleration(self, x) -> np.ndarray:
        r = _position(x)
        r_mag = float(np.linalg.norm(r))
        return -self.mu / (r_mag * r_mag * r_mag) * r


class ZonalGravity:
    """Point-mass gravity with the J2 zonal perturbation.

    ``j`` holds the zonal coefficients with J2 at index 1.
    """

    def __init__(self, mu, j, radius, max_degree):
        self.mu = float(mu)
        self.j = tuple(float(v) for v in j)
        self.radius = float(radius)
        self.max_degree = int(max_degree)

    def acceleration(self, x) -> np.ndarray:
        a = NewtonianGravity(self.mu).acceleration(x)
        r = _position(x)
        j2 = self.j[1]
        r_mag = float(np.linalg.norm(r))
        r_mag2 = float(r @ r)
        ror2 = (self.radius / r_mag) ** 2
        muor2 = self.mu / r_mag2
        r0, r1, r2 = r / r_mag
        r2sq = r2 * r2
        coef = -1.5 * j2 * muor2 * ror2
        components = np.array(
            [
                (1.0 - 5.0 * r2sq) * r0,
                (1.0 - 0.5 * r2sq) * r1,
                (3.0 - 5.0 * r2sq) * r2,
            ]
        )
        return a + coef * components


def _leading(pattern: re.Pattern, text: str, kind):
    match = pattern.match(text)
    if match is None:
        raise ValueError(f"cannot parse a number from {text!r}")
    return kind(match.group(0))


def _field(line: str, bounds) -> str:
    start, end = bounds
    return line[start : end + 1].replace(" ", "")


class EGMCoefficients:
    """Gravity-model coefficients C[n, m] and S[n, m], zero-filled on creation."""

    def __init__(self, max_degree, max_order):
        self.max_degree = int(max_degree)
        self.max_order = int(max_order)
        shape = (self.max_degree + 1, self.max_order + 1)
        self.c = np.zeros(shape)
        self.s = np.zeros(shape)

    def _check(self, n, m) -> tuple[int, int]:
        n, m = int(n), int(m)
        if not (0 <= n <= self.max_degree and 0 <= m <= self.max_order):
            raise IndexError(f"coefficient ({n}, {m}) outside degree/order limits")
        return n, m

    def load(self, filename, year) -> None:
        """Read coefficients from a fixed-column gravity model file.

        Reading stops at the first degree beyond ``max_degree``; orders
        beyond ``max_order`` are skipped.
        """
        try:
            layout = _EGM_LAYOUTS[int(year)]
        except KeyError:
            raise ValueError(f"unsupported gravity model year {year}") from None
        n_cols, m_cols, c_cols, s_cols = layout
        with open(filename, encoding="utf-8") as handle:
            for raw in handle:
                line = raw.rstrip("\r\n")
                if not line:
                    continue
                n = _leading(_INT_PREFIX, _field(line, n_cols), int)
                if n > self.max_degree:
                    break
                m = _leading(_INT_PREFIX, _field(line, m_cols), int)
                if m > self.max_order:
                    continue
                cnm = _leading(_FLOAT_PREFIX, _field(line, c_cols), float)
                snm = _leading(_INT_PREFIX, _field(line, s_cols), int)
                if n >= 0 and m >= 0:
                    self.c[n, m] = cnm
                    self.s[n, m] = float(snm)

    def get_c(self, n, m) -> float:
        n, m = self._check(n, m)
        return float(self.c[n, m])

    def get_s(self, n, m) -> float:
        n, m = self._check(n, m)
        return float(self.s[n, m])

    def set_c(self, n, m, value) -> None:
        n, m = self._check(n, m)
        self.c[n, m] = float(value)

    def set_s(self, n, m, value) -> None:
        n, m = self._check(n, m)
        self.s[n, m] = float(value)