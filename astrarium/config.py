from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from astrarium.constants import (
    DEFAULT_PRECISION,
    MAX_ITERATIONS,
    CIRCULAR_TOLERANCE,
    EQUATORIAL_TOLERANCE,
)


@dataclass(frozen=True, slots=True)
class SolverConfig:
    precision: int = DEFAULT_PRECISION
    max_iterations: int = MAX_ITERATIONS
    circular_tolerance: float = CIRCULAR_TOLERANCE
    equatorial_tolerance: float = EQUATORIAL_TOLERANCE
    strict: bool = False


DEFAULT_SOLVER_CONFIG = SolverConfig()


def make_solver_config(
    precision: Optional[int] = None,
    max_iterations: Optional[int] = None,
    *,
    circular_tolerance: Optional[float] = None,
    equatorial_tolerance: Optional[float] = None,
    strict: bool = False,
) -> SolverConfig:
    """Normalize CLI-style inputs into a SolverConfig."""
    prec = DEFAULT_PRECISION if precision is None else int(precision)
    iters = MAX_ITERATIONS if max_iterations is None or max_iterations <= 0 else int(max_iterations)
    circ = CIRCULAR_TOLERANCE if circular_tolerance is None else max(float(circular_tolerance), 0.0)
    equ = EQUATORIAL_TOLERANCE if equatorial_tolerance is None else max(float(equatorial_tolerance), 0.0)
    return SolverConfig(
        precision=prec,
        max_iterations=iters,
        circular_tolerance=circ,
        equatorial_tolerance=equ,
        strict=bool(strict),
    )
