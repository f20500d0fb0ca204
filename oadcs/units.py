"""Physical constants, unit enumerations and angle conversion."""

from __future__ import annotations

import math
from enum import Enum

import numpy as np

PI = 3.14159265358979323846
TWO_PI = 2.0 * PI
PI_OVER_2 = PI / 2.0
PI_OVER_4 = PI / 4.0
PI_OVER_8 = PI / 8.0
RAD2DEG = 180.0 / PI
DEG2RAD = PI / 180.0

SQRT2 = math.sqrt(2.0)
SQRT2_INV = 1.0 / float(np.sqrt(np.float32(2.0)))
SQRT3 = math.sqrt(3.0)
SQRT3_INV = 1.0 / math.sqrt(3.0)

RL2U = 1000.0
U2RL = 1.0 / RL2U

GRAVITY_CONSTANT = 6.67259e-20  # km^3 kg^-1 s^-2
SPEED_LIGHT = 2.99792e5  # km s^-1


class UnitsAngle(Enum):
    RADIANS = "radians"
    DEGREES = "degrees"
    ARCSEC = "arcsec"
    MINUTES = "minutes"


class UnitsLinear(Enum):
    MILLIMETER = "millimeter"
    METER = "meter"
    CENTIMETER = "centimeter"
    KILOMETER = "kilometer"
    FOOT = "foot"
    INCH = "inch"
    AU = "au"


class UnitsTime(Enum):
    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"


class UnitsMass(Enum):
    KILOGRAMS = "kilograms"
    GRAMS = "grams"
    MILLIGRAMS = "milligrams"
    MICROGRAMS = "micrograms"
    METRIC_TON = "metric_ton"


_TO_RADIANS = {
    UnitsAngle.RADIANS: 1.0,
    UnitsAngle.DEGREES: DEG2RAD,
    UnitsAngle.MINUTES: DEG2RAD / 60.0,
    UnitsAngle.ARCSEC: DEG2RAD / 3600.0,
}

_FROM_RADIANS = {
    UnitsAngle.RADIANS: 1.0,
    UnitsAngle.DEGREES: RAD2DEG,
    UnitsAngle.MINUTES: RAD2DEG * 60.0,
    UnitsAngle.ARCSEC: RAD2DEG * 3600.0,
}


def convert_angle(value, units_in: UnitsAngle, units_out: UnitsAngle):
    """Convert an angle (scalar or array) between angular units."""
    units_in = UnitsAngle(units_in)
    units_out = UnitsAngle(units_out)
    if units_in is not UnitsAngle.RADIANS:
        value = value * _TO_RADIANS[units_in]
    if units_out is not UnitsAngle.RADIANS:
        value = value * _FROM_RADIANS[units_out]
    return value