"""Fixed- and adaptive-step Runge-Kutta integrators for ``dx/dt = f(t, x)``."""

from __future__ import annotations

import sys
from typing import Callable

import numpy as np

N_DEFAULT = 1000
TOL_DEFAULT = 1e-9
DT_DEFAULT = 1e-3


class StepSizeUnderflowError(RuntimeError):
    """Raised when an adaptive step shrinks below machine precision."""


def rk1_step(f, t, x, dt):
    """Explicit Euler step; returns ``(t_new, x_new)``."""
    k1 = f(t, x)
    return t + dt, x + dt * k1


def rk2_step(f, t, x, dt):
    """Midpoint step."""
    k1 = f(t, x)
    k2 = f(t + dt / 2.0, x + dt * k1 / 2.0)
    return t + dt, x + dt * k2


def rk3_step(f, t, x, dt):
    """Third-order Runge-Kutta step."""
    k1 = f(t, x)
    k2 = f(t + dt / 2.0, x + dt * k1 / 2.0)
    k3 = f(t + dt, x - dt * k1 + 2.0 * dt * k2)
    return t + dt, x + dt * (k1 + 4.0 * k2 + k3) / 6.0


def rk4_step(f, t, x, dt):
    """Classical fourth-order Runge-Kutta step."""
    k1 = f(t, x)
    k2 = f(t + dt / 2.0, x + dt * k1 / 2.0)
    k3 = f(t + dt / 2.0, x + dt * k2 / 2.0)
    k4 = f(t + dt, x + dt * k3)
    return t + dt, x + dt / 6.0 * (k1 + 2.0 * k2 + 2.0 * k3 + k4)


def rk5_step(f, t, x, dt):
    """Fifth-order Runge-Kutta step."""
    k1 = f(t, x)
    k2 = f(t + dt / 4.0, x + dt * k1 / 4.0)
    k3 = f(t + dt / 4.0, x + dt * (k1 / 8.0 + k2 / 8.0))
    k4 = f(t + dt / 2.0, x + dt * (-k2 / 2.0 + k3))
    k5 = f(t + 3.0 * dt / 4.0, x + dt * (3.0 * k1 / 16.0 + 9.0 * k4 / 16.0))
    k6 = f(
        t + dt,
        x
        + dt
        * (-3.0 * k1 / 7.0 + 2.0 * k2 / 7.0 + 12.0 * k3 / 7.0 - 12.0 * k4 / 7.0 + 8.0 * k5 / 7.0),
    )
    x_new = x + dt * (
        7.0 * k1 / 90.0 + 32.0 * k3 / 90.0 + 12.0 * k4 / 90.0 + 32.0 * k5 / 90.0 + 7.0 * k6 / 90.0
    )
    return t + dt, x_new


def rk6_step(f, t, x, dt):
    """Six-stage Runge-Kutta step."""
    k1 = f(t, x)
    k2 = f(t + dt / 5.0, x + dt * k1 / 5.0)
    k3 = f(t + dt / 5.0, x + dt * (3.0 * k1 / 40.0 + 9.0 * k2 / 40.0))
    k4 = f(t + dt / 2.0, x + dt * (3.0 * k1 / 10.0 - 9.0 * k2 / 10.0 + 6.0 * k3 / 10.0))
    k5 = f(
        t + 3.0 * dt / 4.0,
        x + dt * (-11.0 * k1 / 54.0 + 5.0 * k2 / 2.0 - 70.0 * k3 / 27.0 + 35.0 * k4 / 27.0),
    )
    k6 = f(
        t + dt,
        x
        + dt
        * (
            1631.0 * k1 / 55296.0
            + 175.0 * k2 / 512.0
            + 575.0 * k3 / 13824.0
            + 44275.0 * k4 / 110592.0
            + 253.0 * k5 / 4096.0
        ),
    )
    x_new = x + dt * (
        37.0 * k1 / 378.0 + 250.0 * k3 / 621.0 + 125.0 * k4 / 594.0 + 512.0 * k6 / 1771.0
    )
    return t + dt, x_new


def heun_step(f, t, x, dt):
    """Heun's method step."""
    k1 = f(t, x)
    k2 = f(t + dt, x + dt * k1)
    return t + dt, x + dt * (k1 + k2) / 2.0


def ralston_step(f, t, x, dt):
    """Ralston's second-order step."""
    k1 = f(t, x)
    k2 = f(t + 3.0 * dt / 4.0, x + 3.0 * dt * k1 / 4.0)
    return t + dt, x + dt * (k1 / 3.0 + 2.0 * k2 / 3.0)


def dormand_prince45_step(f, t, x, dt, tol):
    """Dormand-Prince 4(5) step; returns ``(dt_new, x_new, err)``."""
    k1 = f(t, x)
    k2 = f(t + dt / 5.0, x + dt * (1.0 / 5.0 * k1))
    k3 = f(t + 3.0 / 10.0 * dt, x + dt * ((3.0 / 40.0) * k1 + (9.0 / 40.0) * k2))
    k4 = f(
        t + 4.0 / 5.0 * dt,
        x + dt * ((44.0 / 45.0) * k1 - (56.0 / 15.0) * k2 + (32.0 / 9.0) * k3),
    )
    k5 = f(
        t + 8.0 / 9.0 * dt,
        x
        + dt
        * (
            (19372.0 / 6561.0) * k1
            - (25360.0 / 2187.0) * k2
            + (64448.0 / 6561.0) * k3
            - (212.0 / 729.0) * k4
        ),
    )
    k6 = f(
        t + dt,
        x
        + dt
        * (
            (9017.0 / 3168.0) * k1
            - (355.0 / 33.0) * k2
            + (46732.0 / 5247.0) * k3
            + (49.0 / 176.0) * k4
            - (5103.0 / 18656.0) * k5
        ),
    )
    y5 = x + dt * (
        (35.0 / 384.0) * k1
        + (500.0 / 1113.0) * k3
        + (125.0 / 192.0) * k4
        - (2187.0 / 6784.0) * k5
        + (11.0 / 84.0) * k6
    )
    y4 = x + dt * (
        (5179.0 / 57600.0) * k1
        + (7571.0 / 16695.0) * k3
        + (393.0 / 640.0) * k4
        - (92097.0 / 339200.0) * k5
        + (187.0 / 2100.0) * k6
        + (1.0 / 40.0) * f(t + dt, y5)
    )
    err = float(np.linalg.norm(np.asarray(y5 - y4, dtype=float)))
    if err == 0.0:
        factor = 5.0
    else:
        factor = min(5.0, max(0.2, 0.9 * (tol / err) ** 0.2))
    return dt * factor, y5, err


FixedStep = Callable[..., tuple]


class FixedStepIntegrator:
    """Integrate with a constant step, shortening only the final step."""

    def __init__(self, f, dt0=DT_DEFAULT, step=rk4_step):
        self.f = f
        self.dt0 = float(dt0)
        self.step = step

    @classmethod
    def from_span(cls, f, t0, tf, n_steps=N_DEFAULT, step=rk4_step):
        """Build an integrator whose step divides ``[t0, tf]`` into ``n_steps``."""
        return cls(f, (tf - t0) / float(n_steps), step)

    def integrate(self, t0, tf, x0):
        """Return ``(times, states)`` from ``t0`` to ``tf``, both endpoints included."""
        if tf > t0 and self.dt0 <= 0.0:
            raise ValueError(f"step size must be positive, got {self.dt0}")
        t = t0
        x = x0
        times = [t]
        states = [x]
        while t < tf:
            dt = min(self.dt0, tf - t)
            t, x = self.step(self.f, t, x, dt)
            times.append(t)
            states.append(x)
        return times, states


class AdaptiveStepIntegrator:
    """Integrate with an error-controlled step; the step carries over between calls."""

    def __init__(self, f, dt0=DT_DEFAULT, tol=TOL_DEFAULT, step=dormand_prince45_step):
        self.f = f
        self.dt = float(dt0)
        self.tol = float(tol)
        self.step = step

    def integrate(self, t0, tf, x0):
        """Return ``(times, states)`` from ``t0`` to ``tf``, both endpoints included."""
        if tf > t0 and self.dt <= 0.0:
            raise ValueError(f"step size must be positive, got {self.dt}")
        t = t0
        x = x0
        times = [t]
        states = [x]
        while t < tf:
            dt = min(self.dt, tf - t)
            while True:
                dt_new, x_trial, err = self.step(self.f, t, x, dt, self.tol)
                if err <= self.tol:
                    break
                dt = dt_new
                if not dt >= sys.float_info.epsilon:
                    raise StepSizeUnderflowError("adaptive integrator step size underflow")
            x = x_trial
            t += dt
            self.dt = dt_new
            times.append(t)
            states.append(x)
        return times, states