"""
Small angle and trigonometry helpers used across the orbit kernel.
"""
import math

import numpy as np

from astrarium.constants import TWO_PI


def acosh(x: float) -> float:
    """Inverse hyperbolic cosine, log(x + sqrt(x^2 - 1))."""
    return math.log(x + math.sqrt(x * x - 1.0))


def normalise_angle(angle: float) -> float:
    """Wrap an angle into [0, 2*pi)."""
    wrapped = math.fmod(angle, TWO_PI)
    if wrapped < 0.0:
        wrapped += TWO_PI
    # fmod of a tiny negative number can round up to exactly 2*pi
    return 0.0 if wrapped >= TWO_PI else wrapped


def angle_difference(a: float, b: float) -> float:
    """Signed difference a - b wrapped into [-pi, pi)."""
    return normalise_angle(a - b + math.pi) - math.pi


def deg_to_rad(d: float) -> float:
    return float(np.deg2rad(d))
