"""
Keplerian orbit of a body around its parent.

An ``Orbit`` stores the six classical elements together with the parent's
standard gravitational parameter, and computes everything that follows from
them: anomalies, radii, speeds, energies, positions and velocities at a time,
and the inverse problem of finding the elements from a state vector.

Many formulas depend on the orbit type (circular, elliptical, parabolic,
hyperbolic). The type is derived from the eccentricity on demand and each
formula branches on it explicitly, since the closed forms genuinely differ.

Times passed to an orbit are simulation times in integer milliseconds.
"""
from __future__ import annotations

import logging
import math
from enum import Enum
from typing import TYPE_CHECKING, NamedTuple, Optional

import numpy as np
import openmdao.utils.units as om_units
from pydantic import BaseModel, ConfigDict, Field, field_validator

from astrarium.astrodynamics import sample_states
from astrarium.cartesian_state import CartesianState
from astrarium.config import DEFAULT_SOLVER_CONFIG, SolverConfig
from astrarium.constants import MS_PER_S, PI_BY_TWO, TWO_PI
from astrarium.errors import (
    ConvergenceError,
    DegenerateGeometryError,
    InvalidOrbitError,
    UnboundOrbitError,
    UnsupportedOrbitError,
)
from astrarium.kepler import (
    KeplerSolution,
    solve_eccentric_anomaly,
    solve_hyperbolic_anomaly,
    solve_parabolic_anomaly,
)
from astrarium.mathematics import acosh, normalise_angle
from astrarium.orbital_elements import OrbitalElements
from astrarium.vector import Position, Vector

if TYPE_CHECKING:
    from astrarium.bodies import CelestialBody

logger = logging.getLogger(__name__)


class OrbitType(str, Enum):
    CIRCULAR = 'circular'
    ELLIPTICAL = 'elliptical'
    PARABOLIC = 'parabolic'
    HYPERBOLIC = 'hyperbolic'


def classify_eccentricity(eccentricity: float) -> OrbitType:
    """
    Map an eccentricity to exactly one orbit type.

    Raises:
        InvalidOrbitError: if the eccentricity is negative or not finite.
    """
    if not math.isfinite(eccentricity) or eccentricity < 0:
        raise InvalidOrbitError(f"Eccentricity should never be negative, got {eccentricity}.")
    if eccentricity == 0:
        return OrbitType.CIRCULAR
    if eccentricity < 1:
        return OrbitType.ELLIPTICAL
    if eccentricity == 1:
        return OrbitType.PARABOLIC
    return OrbitType.HYPERBOLIC


class RenderedState(NamedTuple):
    """
    Position of an orbiting body computed for one simulation time.

    Attributes:
        time: Simulation time (ms) the state was rendered for
        eccentric_anomaly: Eccentric anomaly E (F for hyperbolic, D for parabolic orbits)
        true_anomaly: True anomaly (radians)
        position_on_orbital_plane: Position in the perifocal frame (periapsis on +X)
        position_from_parent: Position in the parent's reference frame
        converged: Whether the Kepler solve reached the requested precision
    """
    time: int
    eccentric_anomaly: float
    true_anomaly: float
    position_on_orbital_plane: Position
    position_from_parent: Position
    converged: bool


class Orbit(BaseModel):
    """
    Keplerian orbit around a parent body.

    Attributes:
        parent_id: Handle of the parent body in its BodyTree
        mu: Standard gravitational parameter of the parent, G * M (m^3/s^2)
        semi_major_axis: Semi-major axis (m). Always positive; hyperbolic orbits
            store |a|, parabolic orbits store the periapsis distance.
        eccentricity: Eccentricity, e >= 0
        inclination: Inclination (radians)
        longitude_of_ascending_node: Longitude of the ascending node (radians)
        argument_of_periapsis: Argument of periapsis (radians)
        mean_anomaly_at_epoch: Mean anomaly at t=0 (radians)
    """
    model_config = ConfigDict(frozen=True)

    parent_id: int = Field(..., ge=0, description="Handle of the parent body")
    mu: float = Field(..., gt=0.0, description="Parent standard gravitational parameter (m^3/s^2)")
    semi_major_axis: float = Field(..., gt=0.0, description="Semi-major axis (m)")
    eccentricity: float = Field(..., description="Eccentricity")
    inclination: float = Field(default=0.0, description="Inclination (rad)")
    longitude_of_ascending_node: float = Field(default=0.0, description="Longitude of the ascending node (rad)")
    argument_of_periapsis: float = Field(default=0.0, description="Argument of periapsis (rad)")
    mean_anomaly_at_epoch: float = Field(default=0.0, description="Mean anomaly at t=0 (rad)")

    @field_validator('eccentricity')
    @classmethod
    def validate_eccentricity(cls, v):
        classify_eccentricity(v)
        return v

    @classmethod
    def around(cls, parent: CelestialBody, semi_major_axis: float, eccentricity: float,
               inclination: float = 0.0, longitude_of_ascending_node: float = 0.0,
               argument_of_periapsis: float = 0.0, mean_anomaly_at_epoch: float = 0.0) -> Orbit:
        """
        Create an orbit around ``parent``, fixing its gravitational parameter.

        Args:
            parent: Body being orbited. It must already belong to a BodyTree.
            semi_major_axis: Semi-major axis (m)
            eccentricity: Eccentricity
            inclination: Inclination (rad)
            longitude_of_ascending_node: Longitude of the ascending node (rad)
            argument_of_periapsis: Argument of periapsis (rad)
            mean_anomaly_at_epoch: Mean anomaly at t=0 (rad)

        Returns:
            Orbit
        """
        return cls(
            parent_id=parent.id,
            mu=parent.standard_gravitational_parameter,
            semi_major_axis=semi_major_axis,
            eccentricity=eccentricity,
            inclination=inclination,
            longitude_of_ascending_node=longitude_of_ascending_node,
            argument_of_periapsis=argument_of_periapsis,
            mean_anomaly_at_epoch=mean_anomaly_at_epoch,
        )

    @staticmethod
    def calculate_eccentricity(a: float, b: float) -> float:
        """Eccentricity of an ellipse with semi-axes a >= b."""
        return math.sqrt(1.0 - (b * b) / (a * a))

    # Type

    @property
    def orbit_type(self) -> OrbitType:
        return classify_eccentricity(self.eccentricity)

    def get_orbit_type(self) -> OrbitType:
        return self.orbit_type

    @property
    def is_bound(self) -> bool:
        return self.orbit_type in (OrbitType.CIRCULAR, OrbitType.ELLIPTICAL)

    @property
    def elements(self) -> OrbitalElements:
        return OrbitalElements(
            a=self.semi_major_axis,
            e=self.eccentricity,
            i=self.inclination,
            Omega=self.longitude_of_ascending_node,
            omega=self.argument_of_periapsis,
            M0=self.mean_anomaly_at_epoch,
        )

    # Axes and radii

    @property
    def signed_semi_major_axis(self) -> float:
        """Semi-major axis with the sign the energy formulas expect (negative if hyperbolic)."""
        if self.orbit_type is OrbitType.HYPERBOLIC:
            return -self.semi_major_axis
        return self.semi_major_axis

    def get_semi_minor_axis(self) -> float:
        return math.sqrt(self.semi_major_axis * self.get_semi_latus_rectum())

    def get_focus_distance(self) -> float:
        return self.semi_major_axis * self.eccentricity

    def get_semi_latus_rectum(self) -> float:
        orbit_type = self.orbit_type
        if orbit_type is OrbitType.CIRCULAR:
            return self.semi_major_axis
        elif orbit_type is OrbitType.PARABOLIC:
            return 2.0 * self.get_periapsis()
        else:
            return abs(self.semi_major_axis * (1.0 - self.eccentricity**2))

    def get_periapsis(self) -> float:
        orbit_type = self.orbit_type
        if orbit_type is OrbitType.PARABOLIC:
            return self.semi_major_axis
        elif orbit_type is OrbitType.HYPERBOLIC:
            return self.semi_major_axis * (self.eccentricity - 1.0)
        return self.semi_major_axis * (1.0 - self.eccentricity)

    def get_apoapsis(self) -> float:
        if not self.is_bound:
            return math.inf
        return self.semi_major_axis * (1.0 + self.eccentricity)

    def get_radius(self, theta: float) -> float:
        """Distance from the parent at true anomaly ``theta``."""
        orbit_type = self.orbit_type
        if orbit_type is OrbitType.CIRCULAR:
            return self.semi_major_axis
        elif orbit_type is OrbitType.PARABOLIC:
            return 2.0 * self.get_periapsis() / (1.0 + math.cos(theta))
        else:
            return self.get_semi_latus_rectum() / (1.0 + self.eccentricity * math.cos(theta))

    # Energy and velocities

    def get_specific_orbital_energy(self) -> float:
        if self.orbit_type is OrbitType.PARABOLIC:
            return 0.0
        return -self.mu / (2.0 * self.signed_semi_major_axis)

    def get_mean_velocity(self) -> float:
        """The speed of an equivalent circular orbit (m/s)."""
        return math.sqrt(self.mu / self.semi_major_axis)

    def get_velocity_at_radius(self, radius: float) -> float:
        """Orbital speed at ``radius`` from the vis-viva equation."""
        orbit_type = self.orbit_type
        if orbit_type is OrbitType.CIRCULAR:
            return self.get_mean_velocity()
        elif orbit_type is OrbitType.PARABOLIC:
            return math.sqrt(2.0 * self.mu / radius)
        else:
            return math.sqrt(self.mu * (2.0 / radius - 1.0 / self.signed_semi_major_axis))

    def get_velocity_at_angle(self, theta: float) -> float:
        return self.get_velocity_at_radius(self.get_radius(theta))

    def get_flight_path_angle(self, theta: float) -> float:
        """Angle between the velocity and the local horizontal at true anomaly ``theta``."""
        orbit_type = self.orbit_type
        if orbit_type is OrbitType.CIRCULAR:
            return 0.0
        elif orbit_type is OrbitType.PARABOLIC:
            return theta / 2.0
        else:
            e = self.eccentricity
            return math.atan2(e * math.sin(theta), 1.0 + e * math.cos(theta))

    def get_velocity_direction(self, theta: float) -> float:
        """Direction of the velocity on the orbital plane, measured from periapsis."""
        return theta + PI_BY_TWO - self.get_flight_path_angle(theta)

    def get_areal_velocity(self) -> float:
        """Area swept per unit time, h/2 (m^2/s)."""
        orbit_type = self.orbit_type
        mu, a, e = self.mu, self.semi_major_axis, self.eccentricity
        if orbit_type is OrbitType.CIRCULAR:
            return math.sqrt(mu * a) / 2.0
        elif orbit_type is OrbitType.ELLIPTICAL:
            return math.sqrt(mu * a * (1.0 - e * e)) / 2.0
        elif orbit_type is OrbitType.PARABOLIC:
            return math.sqrt(2.0 * mu * self.get_periapsis()) / 2.0
        else:
            return math.sqrt(mu * a * (e * e - 1.0)) / 2.0

    def get_mean_motion(self) -> float:
        """
        Rate of change of the mean anomaly (rad/s).

        For parabolic orbits this is the rate of Barker's mean anomaly
        D + D^3/3, sqrt(mu / (2 q^3)).
        """
        a = self.semi_major_axis
        if self.orbit_type is OrbitType.PARABOLIC:
            return math.sqrt(self.mu / (2.0 * a**3))
        return math.sqrt(self.mu / a**3)

    # Times

    def get_period(self, units: str = 's') -> float:
        """
        Orbital period from Kepler's third law, T = 2*pi*sqrt(a^3/mu).

        Args:
            units: Any time unit known to openmdao (e.g. 's', 'ms', 'julian_year')

        Raises:
            UnboundOrbitError: for parabolic and hyperbolic orbits.
        """
        if not self.is_bound:
            raise UnboundOrbitError(f"A {self.orbit_type.value} orbit has no period.")

        period_seconds = TWO_PI * math.sqrt(self.semi_major_axis**3 / self.mu)
        if units == 's':
            return period_seconds
        return float(om_units.convert_units(period_seconds, 's', units))

    def get_time_from_periapsis(self, theta: float) -> float:
        """Seconds needed to travel from periapsis to true anomaly ``theta``."""
        return self.get_mean_anomaly_from_true_anomaly(theta) / self.get_mean_motion()

    # Anomalies

    def get_mean_anomaly(self, time: int) -> float:
        """
        Angle in an imaginary circular orbit corresponding to the body's progress.

        Args:
            time: Simulation time (ms)

        Returns:
            Mean anomaly (radians), not normalised.
        """
        return self.get_mean_motion() * (time / MS_PER_S) + self.mean_anomaly_at_epoch

    def solve_anomaly(self, time: int, config: Optional[SolverConfig] = None) -> KeplerSolution:
        """
        Solve Kepler's equation for the anomaly at ``time``, using the solver
        that matches the orbit type.

        Raises:
            ConvergenceError: if the solver did not converge and ``config.strict`` is set.
        """
        config = config or DEFAULT_SOLVER_CONFIG
        mean_anomaly = self.get_mean_anomaly(time)
        orbit_type = self.orbit_type

        if orbit_type is OrbitType.HYPERBOLIC:
            solution = solve_hyperbolic_anomaly(mean_anomaly, self.eccentricity,
                                                config.precision, config.max_iterations)
        elif orbit_type is OrbitType.PARABOLIC:
            solution = solve_parabolic_anomaly(mean_anomaly)
        else:
            solution = solve_eccentric_anomaly(mean_anomaly, self.eccentricity,
                                               config.precision, config.max_iterations)

        if not solution.converged:
            message = (f"Kepler solve for {self} at t={time} ms stopped after "
                       f"{solution.iterations} iterations with residual {solution.residual:.3e}")
            if config.strict:
                raise ConvergenceError(message)
            logger.warning(message)

        return solution

    def calculate_eccentric_anomaly(self, time: int, config: Optional[SolverConfig] = None) -> float:
        return self.solve_anomaly(time, config).eccentric_anomaly

    def get_true_anomaly_from_eccentric_anomaly(self, eccentric_anomaly: float) -> float:
        orbit_type = self.orbit_type
        e = self.eccentricity
        if orbit_type is OrbitType.PARABOLIC:
            return 2.0 * math.atan(eccentric_anomaly)
        elif orbit_type is OrbitType.HYPERBOLIC:
            return 2.0 * math.atan(math.sqrt((e + 1.0) / (e - 1.0)) * math.tanh(eccentric_anomaly / 2.0))
        else:
            return 2.0 * math.atan2(
                math.sqrt(1.0 + e) * math.sin(eccentric_anomaly / 2.0),
                math.sqrt(1.0 - e) * math.cos(eccentric_anomaly / 2.0),
            )

    def get_true_anomaly(self, time: int, config: Optional[SolverConfig] = None) -> float:
        return self.get_true_anomaly_from_eccentric_anomaly(self.calculate_eccentric_anomaly(time, config))

    def get_eccentric_anomaly_from_true_anomaly(self, theta: float) -> float:
        orbit_type = self.orbit_type
        e = self.eccentricity
        if orbit_type is OrbitType.CIRCULAR:
            return theta
        elif orbit_type is OrbitType.ELLIPTICAL:
            return math.atan2(math.sqrt(1.0 - e * e) * math.sin(theta), e + math.cos(theta))
        elif orbit_type is OrbitType.PARABOLIC:
            return math.tan(theta / 2.0)
        else:
            ratio = (e + math.cos(theta)) / (1.0 + e * math.cos(theta))
            return math.copysign(acosh(max(ratio, 1.0)), math.sin(theta))

    def get_mean_anomaly_from_true_anomaly(self, theta: float) -> float:
        eccentric_anomaly = self.get_eccentric_anomaly_from_true_anomaly(theta)
        orbit_type = self.orbit_type
        e = self.eccentricity
        if orbit_type is OrbitType.CIRCULAR:
            return eccentric_anomaly
        elif orbit_type is OrbitType.ELLIPTICAL:
            return eccentric_anomaly - e * math.sin(eccentric_anomaly)
        elif orbit_type is OrbitType.PARABOLIC:
            return eccentric_anomaly + eccentric_anomaly**3 / 3.0
        else:
            return e * math.sinh(eccentric_anomaly) - eccentric_anomaly

    # Positions and velocities

    def get_position_on_orbital_plane(self, eccentric_anomaly: float) -> Position:
        """Position in the perifocal frame, periapsis along +X."""
        orbit_type = self.orbit_type
        a, e = self.semi_major_axis, self.eccentricity
        if orbit_type is OrbitType.PARABOLIC:
            D = eccentric_anomaly
            return Position(a * (1.0 - D * D), 2.0 * a * D, 0.0)
        elif orbit_type is OrbitType.HYPERBOLIC:
            F = eccentric_anomaly
            return Position(a * (e - math.cosh(F)), a * math.sqrt(e * e - 1.0) * math.sinh(F), 0.0)
        else:
            E = eccentric_anomaly
            return Position(a * (math.cos(E) - e), a * math.sqrt(1.0 - e * e) * math.sin(E), 0.0)

    def rotate_position_on_orbital_plane(self, position: Vector) -> Vector:
        """
        Rotate a perifocal vector into the parent's reference frame, in place.

        Equivalent to Rz(Omega) Rx(i) Rz(omega): one rotation about Z by
        Omega + omega, then, for inclined orbits, a rotation about the
        ascending-node axis by the inclination.
        """
        node = self.longitude_of_ascending_node
        position.rotate_z(node + self.argument_of_periapsis)

        if self.inclination != 0.0:
            node_axis = Vector(math.cos(node), math.sin(node), 0.0)
            position.rotate(node_axis, self.inclination)

        return position

    def get_position_from_parent_at_time(self, time: int, config: Optional[SolverConfig] = None) -> Position:
        return self.rotate_position_on_orbital_plane(
            self.get_position_on_orbital_plane(self.calculate_eccentric_anomaly(time, config))
        )

    def get_velocity_at_true_anomaly(self, theta: float) -> Vector:
        """Velocity relative to the parent at true anomaly ``theta``."""
        speed_scale = math.sqrt(self.mu / self.get_semi_latus_rectum())
        velocity = Vector(-speed_scale * math.sin(theta),
                          speed_scale * (self.eccentricity + math.cos(theta)),
                          0.0)
        return self.rotate_position_on_orbital_plane(velocity)

    def get_velocity_at_time(self, time: int, config: Optional[SolverConfig] = None) -> Vector:
        return self.get_velocity_at_true_anomaly(self.get_true_anomaly(time, config))

    def get_state_at_time(self, time: int, config: Optional[SolverConfig] = None) -> CartesianState:
        """Position and velocity relative to the parent as numpy arrays."""
        theta = self.get_true_anomaly(time, config)
        position = self.rotate_position_on_orbital_plane(
            Position(self.get_radius(theta) * math.cos(theta), self.get_radius(theta) * math.sin(theta), 0.0)
        )
        return CartesianState(r=position.to_array(), v=self.get_velocity_at_true_anomaly(theta).to_array())

    def render(self, time: int, config: Optional[SolverConfig] = None) -> RenderedState:
        """
        Compute the state of the orbit at ``time`` without mutating anything.

        Args:
            time: Simulation time (ms)
            config: Solver settings, DEFAULT_SOLVER_CONFIG when omitted

        Returns:
            RenderedState
        """
        solution = self.solve_anomaly(time, config)
        eccentric_anomaly = solution.eccentric_anomaly
        on_plane = self.get_position_on_orbital_plane(eccentric_anomaly)

        return RenderedState(
            time=time,
            eccentric_anomaly=eccentric_anomaly,
            true_anomaly=self.get_true_anomaly_from_eccentric_anomaly(eccentric_anomaly),
            position_on_orbital_plane=on_plane,
            position_from_parent=self.rotate_position_on_orbital_plane(on_plane.copy()),
            converged=solution.converged,
        )

    def trace(self, times) -> np.ndarray:
        """
        Positions relative to the parent at many times, for drawing the orbit.

        Args:
            times: Sequence of simulation times (ms)

        Returns:
            numpy array of shape (n_times, 3) in meters

        Raises:
            UnsupportedOrbitError: for parabolic and hyperbolic orbits.
        """
        if not self.is_bound:
            raise UnsupportedOrbitError(f"Cannot trace a {self.orbit_type.value} orbit.")
        seconds = np.asarray(times, dtype=float) / MS_PER_S
        return np.asarray(sample_states(self.elements, self.mu, seconds).r)

    # Determination

    @classmethod
    def from_position_and_velocity(cls, parent: CelestialBody, position: Vector, velocity: Vector,
                                   time: Optional[int] = None,
                                   config: Optional[SolverConfig] = None) -> Orbit:
        """
        Determine the orbit around ``parent`` of a body with the given state vector.

        Args:
            parent: Body the orbit will be relative to
            position: Position relative to the parent (m)
            velocity: Velocity relative to the parent (m/s)
            time: Simulation time (ms) of the state. When given, the mean anomaly
                at epoch is chosen so that the orbit evaluated at ``time`` returns
                the input position; otherwise it is 0.
            config: Tolerances, DEFAULT_SOLVER_CONFIG when omitted

        Returns:
            Orbit

        Raises:
            InvalidOrbitError: if the parent has no mass.
            DegenerateGeometryError: for a zero position or a radial trajectory.
        """
        config = config or DEFAULT_SOLVER_CONFIG
        mu = parent.standard_gravitational_parameter
        if mu <= 0.0:
            raise InvalidOrbitError(f"Cannot orbit {parent.name}: it has no mass.")

        distance = position.magnitude
        if distance == 0.0:
            raise DegenerateGeometryError("Position coincides with the parent body.")

        speed_squared = velocity.magnitude_squared
        angular_momentum = position.cross(velocity)
        h = angular_momentum.magnitude
        if h == 0.0:
            raise DegenerateGeometryError("Radial trajectory: the angular momentum is zero.")

        eccentricity_vector = (
            position.product(speed_squared - mu / distance)
            .subtract(velocity.product(position.dot(velocity)))
            .divide(mu)
        )
        eccentricity = eccentricity_vector.magnitude
        if eccentricity < config.circular_tolerance:
            eccentricity = 0.0

        specific_orbital_energy = speed_squared / 2.0 - mu / distance
        if classify_eccentricity(eccentricity) is OrbitType.PARABOLIC:
            semi_major_axis = h * h / (2.0 * mu)
        else:
            semi_major_axis = abs(-mu / (2.0 * specific_orbital_energy))

        inclination = math.acos(float(np.clip(angular_momentum.z / h, -1.0, 1.0)))
        longitude_of_ascending_node = 0.0
        argument_of_periapsis = 0.0

        tol = config.equatorial_tolerance
        node_axis = Vector(0.0, 0.0, 1.0).cross(angular_momentum)
        is_equatorial = (
            (abs(position.z) <= tol * distance and abs(velocity.z) <= tol * math.sqrt(speed_squared))
            or node_axis.magnitude == 0.0
        )

        if is_equatorial:
            retrograde = angular_momentum.z < 0.0
            inclination = math.pi if retrograde else 0.0
            if eccentricity > 0.0:
                ey = -eccentricity_vector.y if retrograde else eccentricity_vector.y
                argument_of_periapsis = normalise_angle(math.atan2(ey, eccentricity_vector.x))
        else:
            node = node_axis.magnitude
            longitude_of_ascending_node = math.acos(float(np.clip(node_axis.x / node, -1.0, 1.0)))
            if node_axis.y < 0.0:
                longitude_of_ascending_node = TWO_PI - longitude_of_ascending_node

            if eccentricity > 0.0:
                cos_omega = node_axis.dot(eccentricity_vector) / (node * eccentricity)
                argument_of_periapsis = math.acos(float(np.clip(cos_omega, -1.0, 1.0)))
                if eccentricity_vector.z < 0.0:
                    argument_of_periapsis = TWO_PI - argument_of_periapsis

        orbit = cls(
            parent_id=parent.id,
            mu=mu,
            semi_major_axis=semi_major_axis,
            eccentricity=eccentricity,
            inclination=inclination,
            longitude_of_ascending_node=longitude_of_ascending_node,
            argument_of_periapsis=argument_of_periapsis,
            mean_anomaly_at_epoch=0.0,
        )

        if time is not None:
            periapsis_direction = orbit.rotate_position_on_orbital_plane(Vector(1.0, 0.0, 0.0))
            normal_direction = orbit.rotate_position_on_orbital_plane(Vector(0.0, 1.0, 0.0))
            theta = math.atan2(position.dot(normal_direction), position.dot(periapsis_direction))

            mean_anomaly_at_epoch = orbit.get_mean_anomaly_from_true_anomaly(theta) - orbit.get_mean_anomaly(time)
            if orbit.is_bound:
                mean_anomaly_at_epoch = normalise_angle(mean_anomaly_at_epoch)
            orbit = orbit.model_copy(update={'mean_anomaly_at_epoch': mean_anomaly_at_epoch})

        logger.debug("Determined %s around %s: i=%.6f, LoAN=%.6f, AoP=%.6f, M0=%.6f",
                     orbit, parent.name, orbit.inclination, orbit.longitude_of_ascending_node,
                     orbit.argument_of_periapsis, orbit.mean_anomaly_at_epoch)
        return orbit

    def __str__(self) -> str:
        return (f"{self.orbit_type.value} orbit. Semi-major axis {self.semi_major_axis:f}, "
                f"eccentricity {self.eccentricity:f}")
