"""
Orbital elements representation for orbiting bodies.
"""
from typing import NamedTuple


class OrbitalElements(NamedTuple):
    """
    Keplerian orbital elements of a body around its parent.

    All angular quantities are in radians.

    Attributes:
        a: Semi-major axis (m). Always positive; for parabolic orbits this
           holds the periapsis distance.
        e: Eccentricity (dimensionless)
        i: Inclination relative to the parent's reference plane (radians)
        Omega: Longitude of the ascending node (radians)
        omega: Argument of periapsis (radians)
        M0: Mean anomaly at epoch t=0 (radians)

    Note:
        - Circular orbits: e = 0
        - Elliptical orbits: 0 < e < 1
        - Parabolic orbits: e = 1
        - Hyperbolic orbits: e > 1
    """
    a: float  # semi-major axis (m)
    e: float  # eccentricity
    i: float  # inclination (rad)
    Omega: float  # longitude of ascending node (rad)
    omega: float  # argument of periapsis (rad)
    M0: float  # mean anomaly at epoch (rad)
