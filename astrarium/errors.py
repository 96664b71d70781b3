"""
Exceptions raised by the Astrarium orbit kernel.

Structural problems (an orbit that cannot exist, an unknown body) are raised
and end the operation. Numerical edge cases are reported through typed
results where possible (see ``KeplerSolution.converged``) and through the
errors below where no meaningful result exists.
"""


class AstrariumError(Exception):
    """Base class for all Astrarium errors."""


class InvalidOrbitError(AstrariumError, ValueError):
    """The orbital elements violate a kernel invariant (e.g. negative eccentricity)."""


class UnsupportedOrbitError(AstrariumError, NotImplementedError):
    """The requested computation is not available for this orbit type."""


class UnboundOrbitError(AstrariumError, ValueError):
    """The quantity is only defined for bound (circular or elliptical) orbits."""


class ConvergenceError(AstrariumError, ArithmeticError):
    """An iterative solver hit its iteration cap before reaching the requested precision."""


class DegenerateGeometryError(AstrariumError, ArithmeticError):
    """A zero-length vector was used where a direction is required."""


class NotRenderedError(AstrariumError, LookupError):
    """A cached query was made on a body that has not been rendered yet."""
