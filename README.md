# oadcs

Orbit and attitude dynamics in Python, built on numpy.

## Modules

- `oadcs.units` — physical constants (`PI`, `DEG2RAD`, `GRAVITY_CONSTANT`, ...), the
  `UnitsAngle`, `UnitsLinear`, `UnitsTime` and `UnitsMass` enums, and
  `convert_angle(value, units_in, units_out)` for scalars or arrays.
- `oadcs.attitude` — attitude conversion functions. Quaternions (Euler parameters)
  are stored as `[x, y, z, w]`.
  - `skew`, `single_axis_rotation` (with `RotationalAxis.X/Y/Z`)
  - `dcm_to_ep`, `ep_to_dcm`
  - `ea_to_dcm`, `ea_to_ep` (Euler angles with an axis sequence such as `(3, 2, 1)`)
  - `pr_to_dcm`, `pr_to_ep` (principal rotation axis and angle)
  - `crp_to_dcm`, `crp_to_ep` (classical Rodrigues parameters)
  - `mrp_to_dcm`, `mrp_to_ep` (modified Rodrigues parameters)
  - `ep_kde` (quaternion kinematic equation) and `omega_ode` (Euler's rotational
    equations, with a fast path for diagonal inertia)
- `oadcs.representations` — attitude objects sharing the `Attitude` interface
  (`to_dcm`, `from_dcm`, `to_quaternion`, `from_quaternion`):
  - `QuaternionAttitude` — holds `quat` and an `omega` vector.
  - `EulerAngleAttitude` — holds `angles` (radians) and `sequence`; `from_dcm`
    supports all six Tait-Bryan and six proper Euler sequences and raises
    `ValueError` for any other.
  - `DirectionCosineAttitude` — stores the nearest orthonormal matrix to the one given.
- `oadcs.integrators` — single steps `rk1_step` … `rk6_step`, `heun_step`,
  `ralston_step` (each returns `(t_new, x_new)`) and `dormand_prince45_step`
  (returns `(dt_new, x_new, err)`), plus two drivers:
  - `FixedStepIntegrator(f, dt0, step)` and `FixedStepIntegrator.from_span(f, t0, tf, n_steps, step)`;
    the last step is shortened to land on `tf`.
  - `AdaptiveStepIntegrator(f, dt0, tol, step)`; raises `StepSizeUnderflowError`
    when the step shrinks below machine epsilon.

  Both `integrate(t0, tf, x0)` methods return `(times, states)` lists including both endpoints.
- `oadcs.gravity` — force models with an `acceleration(x)` method:
  `NewtonianGravity(mu)`, `ZonalGravity(mu, j, radius, max_degree)` (point mass plus a
  J2 term, with J2 taken from `j[1]`) and `CompositeForce(*models)` (their sum).
  `EquationsOfMotion(forces)` is a callable `f(t, x)` returning the first three state
  components followed by the force model's acceleration.
  `EGMCoefficients(max_degree, max_order)` holds zero-filled `C` and `S` tables with
  `get_c`, `get_s`, `set_c`, `set_s` (raising `IndexError` outside the limits) and
  `load(filename, year)` for fixed-column coefficient files in the 1984, 1996 or 2008
  layouts.
- `oadcs.bodies` — `Body`, `Satellite` and `CelestialBody` dataclasses holding
  position, velocity, attitude quaternion, angular velocity, units and update flags.
- `oadcs.main` — `gravity_newton(t, x, mu)`, the two-body derivative `[v, a]` of a
  state `[r, v]`, and the `oadcs` command.

## Installation

```
pip install .
```

## Example: propagating a circular orbit

```python
import numpy as np
from oadcs.integrators import FixedStepIntegrator, rk4_step
from oadcs.main import gravity_newton

mu = 398600.4418
r0 = 7000.0
x0 = np.array([r0, 0.0, 0.0, 0.0, np.sqrt(mu / r0), 0.0])
period = 2 * np.pi * np.sqrt(r0**3 / mu)

integrator = FixedStepIntegrator(lambda t, x: gravity_newton(t, x, mu), 10.0, rk4_step)
times, states = integrator.integrate(0.0, period, x0)
print(np.linalg.norm(states[-1][:3]) - r0)
```

## Example: attitude conversions

```python
import numpy as np
from oadcs.attitude import ea_to_dcm, dcm_to_ep
from oadcs.representations import EulerAngleAttitude
from oadcs.units import UnitsAngle

dcm = ea_to_dcm(np.array([30.0, 0.0, 15.0]), (3, 2, 1), UnitsAngle.DEGREES)
quaternion = dcm_to_ep(dcm)

att = EulerAngleAttitude((0.5, 0.0, 0.25), (3, 2, 1))
print(att)
```

## Command line

```
oadcs
oadcs --dt 5 --egm EGM2008.txt --egm-year 2008 --max-degree 4 --max-order 3
```

The command propagates a 7000 km circular Earth orbit for one period with RK4
(step `--dt`, default 10 s) and prints the initial state, orbital period, runtime,
number of steps, final state and radius error. It then prints an example
`EulerAngleAttitude` and `QuaternionAttitude`. With `--egm`, it reads the given
coefficient file in the `--egm-year` layout (1984, 1996 or 2008) and prints every
`C[n,m]` up to `--max-degree` and `--max-order`.

## What it does not do

- `EGMCoefficients` only stores coefficients; no spherical-harmonic gravity
  acceleration is computed from them.
- `Body`, `Satellite` and `CelestialBody` hold state only; they are not propagated
  on their own.
- Trajectories are returned as Python lists; nothing is written to files.

## Tests

```
pip install .[test]
pytest
```