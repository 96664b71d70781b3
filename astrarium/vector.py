"""
Three dimensional vectors and positions.

Vectors are small mutable value objects. Methods that change the vector in
place return ``self`` so they can be chained; operators (``+``, ``-``, ``*``,
``/``) always return a new instance and leave their operands untouched.
"""
import math
from typing import Iterator

import numpy as np

from astrarium.errors import DegenerateGeometryError


def rotation_matrix(axis: "Vector", theta: float) -> np.ndarray:
    """
    Rotation matrix for a right-handed rotation of ``theta`` about ``axis``.

    Args:
        axis: Rotation axis. It must already be a unit vector.
        theta: Rotation angle (radians)

    Returns:
        A (3, 3) numpy array R such that R @ v rotates v.
    """
    c = np.cos(theta)
    s = np.sin(theta)
    t = 1.0 - c
    x, y, z = axis.x, axis.y, axis.z

    return np.array([
        [c + x * x * t, x * y * t - z * s, x * z * t + y * s],
        [x * y * t + z * s, c + y * y * t, y * z * t - x * s],
        [x * z * t - y * s, y * z * t + x * s, c + z * z * t],
    ])


class Vector:
    """
    A 3D vector with components x, y, z.

    Attributes:
        x: X component
        y: Y component
        z: Z component
    """
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classmethod
    def from_array(cls, values) -> "Vector":
        x, y, z = (float(v) for v in np.asarray(values, dtype=float).reshape(3))
        return cls(x, y, z)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z])

    def copy(self) -> "Vector":
        return type(self)(self.x, self.y, self.z)

    def set_values(self, x, y: float = None, z: float = 0.0) -> "Vector":
        """Overwrite the components, either from another vector or from numbers."""
        if isinstance(x, Vector):
            self.x, self.y, self.z = x.x, x.y, x.z
        else:
            self.x, self.y, self.z = float(x), float(y), float(z)
        return self

    # Magnitude

    @property
    def magnitude_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.magnitude_squared)

    def normalize(self) -> float:
        """
        Scale the vector to unit length in place.

        Returns:
            The length the vector had before normalisation.

        Raises:
            DegenerateGeometryError: if the vector has zero length.
        """
        length = self.magnitude
        if length == 0.0:
            raise DegenerateGeometryError("Cannot normalize a zero-length vector.")
        self.scale(1.0 / length)
        return length

    def normalized(self) -> "Vector":
        norm = self.copy()
        norm.normalize()
        return norm

    # Products

    def dot(self, other: "Vector") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector") -> "Vector":
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def product(self, factor: float) -> "Vector":
        return type(self)(self.x * factor, self.y * factor, self.z * factor)

    # In-place operations

    def scale(self, factor: float) -> "Vector":
        self.x *= factor
        self.y *= factor
        self.z *= factor
        return self

    def divide(self, divisor: float) -> "Vector":
        return self.scale(1.0 / divisor)

    def add(self, other: "Vector") -> "Vector":
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def subtract(self, other: "Vector") -> "Vector":
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    # Operators

    def __add__(self, other: "Vector") -> "Vector":
        return self.copy().add(other)

    def __sub__(self, other: "Vector") -> "Vector":
        return self.copy().subtract(other)

    def __neg__(self) -> "Vector":
        return self.product(-1.0)

    def __mul__(self, factor: float) -> "Vector":
        return self.product(factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> "Vector":
        return self.product(1.0 / divisor)

    def __iadd__(self, other: "Vector") -> "Vector":
        return self.add(other)

    def __isub__(self, other: "Vector") -> "Vector":
        return self.subtract(other)

    def __imul__(self, factor: float) -> "Vector":
        return self.scale(factor)

    def __itruediv__(self, divisor: float) -> "Vector":
        return self.divide(divisor)

    # Rotations

    def rotate(self, axis: "Vector", theta: float) -> "Vector":
        """
        Rotate the vector in place by ``theta`` radians about ``axis``.

        Uses the closed-form axis-angle rotation on the normalised vector and
        axis, then restores the original magnitude. ``axis`` is not modified.

        Raises:
            DegenerateGeometryError: if ``axis`` has zero length.
        """
        unit_axis = axis.normalized()

        if self.magnitude_squared == 0.0:
            return self
        length = self.normalize()

        c = math.cos(theta)
        s = math.sin(theta)
        t = 1.0 - c
        ax, ay, az = unit_axis.x, unit_axis.y, unit_axis.z
        x, y, z = self.x, self.y, self.z

        self.x = x * (t * ax * ax + c) + y * (t * ax * ay - s * az) + z * (t * ax * az + s * ay)
        self.y = x * (t * ax * ay + s * az) + y * (t * ay * ay + c) + z * (t * ay * az - s * ax)
        self.z = x * (t * ax * az - s * ay) + y * (t * ay * az + s * ax) + z * (t * az * az + c)

        return self.scale(length)

    def rotate_with_matrix(self, axis: "Vector", theta: float) -> "Vector":
        """Same rotation as ``rotate``, computed through an explicit rotation matrix."""
        unit_axis = axis.normalized()

        if self.magnitude_squared == 0.0:
            return self
        length = self.normalize()

        rotated = rotation_matrix(unit_axis, theta) @ self.to_array()
        self.set_values(*rotated)

        return self.scale(length)

    def rotate_x(self, theta: float) -> "Vector":
        c, s = math.cos(theta), math.sin(theta)
        y, z = self.y, self.z
        self.y = y * c - z * s
        self.z = y * s + z * c
        return self

    def rotate_y(self, theta: float) -> "Vector":
        c, s = math.cos(theta), math.sin(theta)
        x, z = self.x, self.z
        self.x = x * c + z * s
        self.z = -x * s + z * c
        return self

    def rotate_z(self, theta: float) -> "Vector":
        """Rotate about the Z axis. No normalisation is needed for a planar rotation."""
        c, s = math.cos(theta), math.sin(theta)
        x, y = self.x, self.y
        self.x = x * c - y * s
        self.y = x * s + y * c
        return self

    # Angles and distances

    @property
    def longitude(self) -> float:
        """Angle of the XY projection from the X axis, in (-pi, pi]."""
        return math.atan2(self.y, self.x)

    def angle_with(self, other: "Vector") -> float:
        denominator = self.magnitude * other.magnitude
        if denominator == 0.0:
            raise DegenerateGeometryError("Angle with a zero-length vector is undefined.")
        return math.acos(float(np.clip(self.dot(other) / denominator, -1.0, 1.0)))

    def distance_to(self, other: "Vector") -> float:
        return (self - other).magnitude

    def is_inside_radius(self, center: "Vector", radius: float) -> bool:
        return self.distance_to(center) <= radius

    def is_close(self, other: "Vector", rtol: float = 1e-9, atol: float = 1e-12) -> bool:
        return bool(np.allclose(self.to_array(), other.to_array(), rtol=rtol, atol=atol))

    # Python protocol

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x!r}, {self.y!r}, {self.z!r})"

    def __str__(self) -> str:
        return f"<{self.x:f}, {self.y:f}, {self.z:f}>"


class Position(Vector):
    """A vector used as a location. Z defaults to 0 for planar use."""
    __slots__ = ()

    def angle_of_line_to(self, position: "Position") -> float:
        """
        Angle of the line from this position to another, measured in the XY plane.

        Raises:
            ValueError: if either position is off the XY plane.
        """
        if self.z != 0.0 or position.z != 0.0:
            raise ValueError("Both positions must lie on the XY plane (z == 0).")
        return math.atan2(position.y - self.y, position.x - self.x)
