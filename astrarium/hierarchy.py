"""
The tree of celestial bodies.

``BodyTree`` is an arena: it owns every ``CelestialBody`` and addresses them
by integer handle. A body refers to its parent only through the handle stored
in its orbit, and to its children through a list of handles, so the tree has
no reference cycles. The tree also owns the render cache, one
``RenderedState`` per orbiting body, filled by ``render_at_time``.
"""
from __future__ import annotations

import logging
import math
from typing import Dict, Iterator, List, Optional, Union

from astrarium.bodies import CelestialBody
from astrarium.config import DEFAULT_SOLVER_CONFIG, SolverConfig
from astrarium.errors import NotRenderedError
from astrarium.orbit import Orbit, RenderedState
from astrarium.vector import Position, Vector

logger = logging.getLogger(__name__)

BodyRef = Union[CelestialBody, int]


class BodyTree:
    """
    Hierarchy of celestial bodies with a single root.

    Examples:
        >>> tree = BodyTree()
        >>> sun = tree.add_body("Sun", 1.9891e30, 6.957e8)
        >>> earth = tree.add_body("Earth", 5.9736e24, 6.371e6,
        ...                       Orbit.around(sun, 1.49598261e11, 0.01671123))
        >>> tree.render_at_time(0)
        >>> tree.get_position(earth)
    """

    def __init__(self, config: Optional[SolverConfig] = None):
        self.config = config or DEFAULT_SOLVER_CONFIG
        self._bodies: List[CelestialBody] = []
        self._rendered: Dict[int, RenderedState] = {}
        self._root_id: Optional[int] = None

    # Construction

    def add_body(self, name: str, mass: float, radius: float, orbit: Optional[Orbit] = None) -> CelestialBody:
        """
        Create a body and attach it to the tree.

        A body without an orbit becomes the root; a body with an orbit is
        appended to the children of the orbit's parent.

        Raises:
            ValueError: if a second root is added.
            KeyError: if the orbit's parent is not in this tree.
        """
        if orbit is None and self._root_id is not None:
            raise ValueError(f"The tree already has a root ({self.root.name}); {name} needs an orbit.")
        if orbit is not None and not 0 <= orbit.parent_id < len(self._bodies):
            raise KeyError(f"Parent body {orbit.parent_id} of {name} is not in this tree.")

        body = CelestialBody(id=len(self._bodies), name=name, mass=mass, radius=radius, orbit=orbit)
        self._bodies.append(body)

        if orbit is None:
            self._root_id = body.id
        else:
            self._bodies[orbit.parent_id].children.append(body.id)

        logger.debug("Added %r to the tree (parent=%s)", body, body.parent_id)
        return body

    # Lookup and traversal

    def __getitem__(self, body_id: int) -> CelestialBody:
        return self._resolve(body_id)

    def __len__(self) -> int:
        return len(self._bodies)

    def __contains__(self, body: BodyRef) -> bool:
        body_id = body.id if isinstance(body, CelestialBody) else body
        return 0 <= body_id < len(self._bodies)

    def __iter__(self) -> Iterator[CelestialBody]:
        return self.walk()

    @property
    def root(self) -> CelestialBody:
        if self._root_id is None:
            raise LookupError("The tree is empty.")
        return self._bodies[self._root_id]

    def _resolve(self, body: BodyRef) -> CelestialBody:
        body_id = body.id if isinstance(body, CelestialBody) else body
        if not 0 <= body_id < len(self._bodies):
            raise KeyError(f"Body {body_id} is not in this tree.")
        return self._bodies[body_id]

    def find(self, name: str) -> CelestialBody:
        """Return the first body called ``name``."""
        for body in self._bodies:
            if body.name == name:
                return body
        raise KeyError(f"No body named {name!r}.")

    def get_parent(self, body: BodyRef) -> Optional[CelestialBody]:
        parent_id = self._resolve(body).parent_id
        return None if parent_id is None else self._bodies[parent_id]

    def get_children(self, body: BodyRef) -> List[CelestialBody]:
        return [self._bodies[child_id] for child_id in self._resolve(body).children]

    def walk(self, start: Optional[BodyRef] = None) -> Iterator[CelestialBody]:
        """Pre-order traversal from ``start`` (the root by default)."""
        if self._root_id is None:
            return
        stack = [self.root if start is None else self._resolve(start)]
        while stack:
            body = stack.pop()
            yield body
            stack.extend(self._bodies[child_id] for child_id in reversed(body.children))

    def depth(self, body: BodyRef) -> int:
        depth = 0
        parent = self.get_parent(body)
        while parent is not None:
            depth += 1
            parent = self.get_parent(parent)
        return depth

    # Rendering

    def render_at_time(self, time: int, body: Optional[BodyRef] = None) -> None:
        """
        Render ``body`` (the root by default) and every body below it at ``time``.

        Each orbiting body's RenderedState is stored in the tree cache, replacing
        the one from the previous render.
        """
        start = self.root if body is None else self._resolve(body)
        logger.debug("Rendering subtree of %s at t=%d ms", start.name, time)
        self._render_subtree(start, time)

    def _render_subtree(self, body: CelestialBody, time: int) -> None:
        if body.orbit is not None:
            self._rendered[body.id] = body.orbit.render(time, self.config)

        for child_id in body.children:
            self._render_subtree(self._bodies[child_id], time)

    def get_rendered_state(self, body: BodyRef) -> Optional[RenderedState]:
        return self._rendered.get(self._resolve(body).id)

    # Positions

    def get_position_from_parent(self, body: BodyRef) -> Position:
        """Cached position relative to the parent. The root is always at the origin."""
        body = self._resolve(body)
        if body.orbit is None:
            return Position(0.0, 0.0, 0.0)

        state = self._rendered.get(body.id)
        if state is None:
            raise NotRenderedError(f"{body.name} has not been rendered yet.")
        return state.position_from_parent.copy()

    def get_position_from_parent_at_time(self, body: BodyRef, time: int) -> Position:
        body = self._resolve(body)
        if body.orbit is None:
            return Position(0.0, 0.0, 0.0)
        return body.orbit.get_position_from_parent_at_time(time, self.config)

    def get_position(self, body: BodyRef) -> Position:
        """Absolute position from the cached states of the body and its ancestors."""
        body = self._resolve(body)
        position = self.get_position_from_parent(body)
        parent = self.get_parent(body)
        if parent is None:
            return position
        return position.add(self.get_position(parent))

    def get_position_at_time(self, body: BodyRef, time: int) -> Position:
        """Absolute position at ``time``, computed without touching the cache."""
        body = self._resolve(body)
        position = self.get_position_from_parent_at_time(body, time)
        parent = self.get_parent(body)
        if parent is None:
            return position
        return position.add(self.get_position_at_time(parent, time))

    def get_velocity_at_time(self, body: BodyRef, time: int) -> Vector:
        """Absolute velocity at ``time``, summing each ancestor's orbital velocity."""
        velocity = Vector(0.0, 0.0, 0.0)
        current = self._resolve(body)
        while current.orbit is not None:
            velocity.add(current.orbit.get_velocity_at_time(time, self.config))
            current = self._bodies[current.orbit.parent_id]
        return velocity

    # Regions of influence

    def get_sphere_of_influence(self, body: BodyRef) -> float:
        """
        Radius (m) of the region where an object can be approximated to orbit
        only this body, a * (m / M_parent)^(2/5). Infinite for the root.
        """
        body = self._resolve(body)
        if body.orbit is None:
            return math.inf
        parent = self.get_parent(body)
        return body.orbit.semi_major_axis * (body.mass / parent.mass) ** (2.0 / 5.0)

    def get_hill_sphere(self, body: BodyRef) -> float:
        """
        Radius (m) of the Hill sphere, a * (1 - e) * (m / (3 M_parent))^(1/3).
        Infinite for the root.
        """
        body = self._resolve(body)
        if body.orbit is None:
            return math.inf
        parent = self.get_parent(body)
        orbit = body.orbit
        return orbit.semi_major_axis * (1.0 - orbit.eccentricity) * (body.mass / (3.0 * parent.mass)) ** (1.0 / 3.0)

    def get_escape_velocity(self, body: BodyRef, radius: float) -> float:
        return self._resolve(body).get_escape_velocity(radius)

    def get_circular_orbit_velocity(self, body: BodyRef, position: Vector) -> Vector:
        return self._resolve(body).get_circular_orbit_velocity(position)
