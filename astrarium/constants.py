"""
Physical and numerical constants for Astrarium.

This module contains the constants shared by the orbit kernel, the body
hierarchy and the simulation clock. All quantities are SI unless noted.
"""

import numpy as np

# Newtonian constant of gravitation (m^3 kg^-1 s^-2)
G = 6.67408e-11

# Angles
TWO_PI = 2.0 * np.pi
PI_BY_TWO = np.pi / 2.0

# Time. The simulation clock counts integer milliseconds.
MS_PER_S = 1000.0
DAY = 86400.0  # seconds per day
YEAR = 365.25 * DAY  # seconds per Julian year

# Kepler solver defaults
DEFAULT_PRECISION = 10  # decimal places of |f(E)|
MAX_ITERATIONS = 30

# Determination tolerances
CIRCULAR_TOLERANCE = 1e-10  # eccentricities below this are treated as exactly 0
EQUATORIAL_TOLERANCE = 1e-12  # |z| / |r| below this is treated as 0
