"""
Bodies of an Astrarium system.
"""
import math
from typing import List, Optional

import pydantic
from pydantic import Field

from astrarium.constants import G, PI_BY_TWO
from astrarium.errors import DegenerateGeometryError
from astrarium.orbit import Orbit
from astrarium.vector import Vector


class Body(pydantic.BaseModel):
    """
    Any object that has a mass and can orbit something else.

    Attributes:
        name: Name of the body (e.g., "Earth")
        mass: Mass (kg)
        radius: Physical radius (m)
    """
    name: str
    mass: float = Field(..., ge=0.0, description="Mass (kg)")
    radius: float = Field(..., ge=0.0, description="Radius (m)")

    @property
    def standard_gravitational_parameter(self) -> float:
        """G * mass (m^3/s^2)"""
        return G * self.mass

    def __str__(self) -> str:
        return self.name


class CelestialBody(Body):
    """
    A natural body: star, planet, moon, comet...

    Celestial bodies are created and owned by a ``BodyTree``, which assigns
    their ``id`` and fills in ``children`` as orbiting bodies are added.

    Attributes:
        id: Handle of the body in its tree
        orbit: Orbit around the parent, None for the root of the system
        children: Handles of the bodies orbiting this one
    """
    id: int = Field(..., ge=0, description="Handle of the body in its BodyTree")
    orbit: Optional[Orbit] = None
    children: List[int] = Field(default_factory=list)

    @property
    def parent_id(self) -> Optional[int]:
        if self.orbit is None:
            return None
        return self.orbit.parent_id

    def is_root(self) -> bool:
        return self.orbit is None

    def get_escape_velocity(self, radius: float) -> float:
        """
        Velocity (m/s) required to escape the body from ``radius`` meters
        away from its center of mass.
        """
        if radius <= 0.0:
            raise DegenerateGeometryError(f"Escape velocity is undefined at radius {radius} m.")
        return math.sqrt(2.0 * self.standard_gravitational_parameter / radius)

    def get_circular_orbit_velocity(self, position: Vector) -> Vector:
        """
        Velocity an object at ``position`` (relative to this body) needs to
        be on a circular, prograde orbit in the XY plane.

        Args:
            position: Position relative to the body (m)

        Returns:
            Velocity vector relative to the body (m/s)
        """
        distance = position.magnitude
        if distance == 0.0:
            raise DegenerateGeometryError("Circular orbit velocity is undefined at the center of the body.")
        speed = math.sqrt(self.standard_gravitational_parameter / distance)
        velocity = Vector(speed, 0.0, 0.0)
        return velocity.rotate_z(position.longitude + PI_BY_TWO)

    def __repr__(self) -> str:
        return f"CelestialBody(id={self.id}, name='{self.name}')"
