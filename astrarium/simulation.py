"""
The simulation aggregate: a body tree driven by a single clock.
"""
import logging
from typing import Iterator, Optional

from astrarium.bodies import CelestialBody
from astrarium.hierarchy import BodyTree

logger = logging.getLogger(__name__)


class Astrarium:
    """
    Wraps a BodyTree and the time of the simulation.

    Setting the time renders the whole tree, so afterwards every cached
    position query on the tree reflects that time.

    Attributes:
        tree: The hierarchy of bodies
    """

    def __init__(self, tree: BodyTree, time: int = 0):
        self.tree = tree
        self._time = 0
        self.set_time(time)

    @property
    def root(self) -> CelestialBody:
        return self.tree.root

    def bodies(self) -> Iterator[CelestialBody]:
        return self.tree.walk()

    def get_time(self) -> int:
        """Simulation time in milliseconds."""
        return self._time

    def set_time(self, time: int) -> None:
        """Move the clock to ``time`` (ms) and re-render the whole tree."""
        self._time = int(time)
        logger.debug("Setting time to %d ms (%d bodies)", self._time, len(self.tree))
        self.tree.render_at_time(self._time)

    @property
    def time(self) -> int:
        return self.get_time()

    @time.setter
    def time(self, value: int) -> None:
        self.set_time(value)

    def advance(self, delta: int) -> int:
        """
        Step the clock forward by ``delta`` milliseconds.

        Returns:
            The new time (ms)

        Raises:
            ValueError: if delta is negative.
        """
        if delta < 0:
            raise ValueError(f"Cannot advance the clock by a negative step ({delta} ms).")
        self.set_time(self._time + int(delta))
        return self._time

    def find(self, name: str) -> CelestialBody:
        return self.tree.find(name)

    def __repr__(self) -> str:
        root: Optional[str] = self.tree.root.name if len(self.tree) else None
        return f"Astrarium(root={root!r}, bodies={len(self.tree)}, time={self._time})"
