# Configure JAX to use double precision (64-bit floats) throughout the package
import jax
jax.config.update("jax_enable_x64", True)

from .orbital_elements import OrbitalElements
from .cartesian_state import CartesianState

from .constants import (
    # Constants
    G,
    TWO_PI,
    PI_BY_TWO,
    MS_PER_S,
    DAY,
    YEAR,
)

from .config import (
    SolverConfig,
    DEFAULT_SOLVER_CONFIG,
    make_solver_config,
)

from .errors import (
    AstrariumError,
    InvalidOrbitError,
    UnsupportedOrbitError,
    UnboundOrbitError,
    ConvergenceError,
    DegenerateGeometryError,
    NotRenderedError,
)

from .vector import (
    Vector,
    Position,
    rotation_matrix,
)

from .kepler import (
    # Kepler solvers
    KeplerSolution,
    solve_kepler,
    solve_kepler_vec,
    solve_eccentric_anomaly,
    solve_hyperbolic_anomaly,
    solve_parabolic_anomaly,
)

from .astrodynamics import (
    elements_to_cartesian,
    sample_states,
)

from .orbit import (
    Orbit,
    OrbitType,
    RenderedState,
    classify_eccentricity,
)

from .bodies import (
    # Body classes
    Body,
    CelestialBody,
)

from .hierarchy import BodyTree
from .simulation import Astrarium

import openmdao.utils.units as om_units

# Julian year, the year used by YEAR. This differs from OpenMDAO's default
# 'year' which uses 31556925.99 s
om_units.add_unit('julian_year', f'{YEAR}*s')

__all__ = [
    # Constants
    "G",
    "TWO_PI",
    "PI_BY_TWO",
    "MS_PER_S",
    "DAY",
    "YEAR",

    # Configuration
    "SolverConfig",
    "DEFAULT_SOLVER_CONFIG",
    "make_solver_config",

    # Errors
    "AstrariumError",
    "InvalidOrbitError",
    "UnsupportedOrbitError",
    "UnboundOrbitError",
    "ConvergenceError",
    "DegenerateGeometryError",
    "NotRenderedError",

    # Named tuples
    "OrbitalElements",
    "CartesianState",
    "KeplerSolution",
    "RenderedState",

    # Vectors
    "Vector",
    "Position",
    "rotation_matrix",

    # Functions
    "solve_kepler",
    "solve_kepler_vec",
    "solve_eccentric_anomaly",
    "solve_hyperbolic_anomaly",
    "solve_parabolic_anomaly",
    "elements_to_cartesian",
    "sample_states",
    "classify_eccentricity",

    # Orbits and bodies
    "Orbit",
    "OrbitType",
    "Body",
    "CelestialBody",
    "BodyTree",
    "Astrarium",
]
