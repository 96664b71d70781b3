"""
Kepler's equation solvers.

The elliptic and hyperbolic solvers are Newton-Raphson iterations written with
``jax.lax.while_loop`` so they stop as soon as the residual is below the
tolerance, while still bounding the work by an iteration cap. Hitting the cap
is not an error: the best estimate is returned together with a convergence
flag so the caller decides what to do with it.
"""
from typing import NamedTuple

import jax
import jax.numpy as jnp
from jax import jit

from astrarium.constants import DEFAULT_PRECISION, MAX_ITERATIONS
from astrarium.errors import InvalidOrbitError, UnsupportedOrbitError


class KeplerSolution(NamedTuple):
    """
    Result of a Kepler's equation solve.

    Attributes:
        eccentric_anomaly: Best estimate of the anomaly (E, or F for hyperbolic orbits)
        iterations: Number of Newton steps taken
        residual: Value of Kepler's equation at the returned anomaly
        converged: True when |residual| is below the requested tolerance
    """
    eccentric_anomaly: float
    iterations: int
    residual: float
    converged: bool


@jit
def solve_kepler(M, e, tol=1e-10, max_iter=MAX_ITERATIONS):
    """
    Solve Kepler's equation M = E - e*sin(E) for eccentric anomaly E
    using Newton-Raphson iteration seeded with E0 = M.

    Returns:
        (E, residual, iterations)
    """
    M = jnp.asarray(M, dtype=float)
    e = jnp.asarray(e, dtype=float)

    def residual(E):
        return E - e * jnp.sin(E) - M

    def cond_fn(carry):
        _, f, i = carry
        return (jnp.abs(f) >= tol) & (i < max_iter)

    def body_fn(carry):
        E, f, i = carry
        E_new = E - f / (1.0 - e * jnp.cos(E))
        return E_new, residual(E_new), i + 1

    E0 = M
    E, f, n = jax.lax.while_loop(cond_fn, body_fn, (E0, residual(E0), jnp.asarray(0)))
    return E, f, n


# Vectorized version using vmap
# Note: vmap over first two arguments (M and e arrays), broadcast tol and max_iter
_solve_kepler_vec = jax.vmap(solve_kepler, in_axes=(0, 0, None, None))


def solve_kepler_vec(M, e, tol=1e-10, max_iter=MAX_ITERATIONS):
    """
    Vectorized version of solve_kepler that handles arrays of M and e.

    Parameters
    ----------
    M : jnp.ndarray
        Array of mean anomalies
    e : jnp.ndarray
        Array of eccentricities (0 <= e <= 1)
    tol : float, optional
        Tolerance on the residual of Kepler's equation
    max_iter : int, optional
        Maximum number of iterations

    Returns
    -------
    E : jnp.ndarray
        Array of eccentric anomalies
    residual : jnp.ndarray
        Array of residuals at the returned anomalies
    """
    M = jnp.atleast_1d(jnp.asarray(M, dtype=float))
    e = jnp.broadcast_to(jnp.asarray(e, dtype=float), M.shape)
    E, f, _ = _solve_kepler_vec(M, e, tol, max_iter)
    return E, f


@jit
def solve_hyperbolic_kepler(M, e, tol=1e-10, max_iter=MAX_ITERATIONS):
    """
    Solve the hyperbolic Kepler equation M = e*sinh(F) - F for F
    using Newton-Raphson iteration seeded with F0 = asinh(M/e).

    Returns:
        (F, residual, iterations)
    """
    M = jnp.asarray(M, dtype=float)
    e = jnp.asarray(e, dtype=float)

    def residual(F):
        return e * jnp.sinh(F) - F - M

    def cond_fn(carry):
        _, f, i = carry
        return (jnp.abs(f) >= tol) & (i < max_iter)

    def body_fn(carry):
        F, f, i = carry
        F_new = F - f / (e * jnp.cosh(F) - 1.0)
        return F_new, residual(F_new), i + 1

    F0 = jnp.arcsinh(M / e)
    F, f, n = jax.lax.while_loop(cond_fn, body_fn, (F0, residual(F0), jnp.asarray(0)))
    return F, f, n


@jit
def solve_barker(M):
    """
    Solve Barker's equation M = D + D^3/3 for the parabolic anomaly D = tan(theta/2).

    Closed form: D = B - 1/B with B^3 = 3M/2 + sqrt(9M^2/4 + 1). The odd
    symmetry of the equation is used to avoid cancellation for negative M.
    """
    M = jnp.asarray(M, dtype=float)
    m = jnp.abs(M)
    B = jnp.cbrt(1.5 * m + jnp.sqrt(2.25 * m**2 + 1.0))
    return jnp.sign(M) * (B - 1.0 / B)


def _to_solution(anomaly, residual, iterations, tol) -> KeplerSolution:
    residual = float(residual)
    return KeplerSolution(
        eccentric_anomaly=float(anomaly),
        iterations=int(iterations),
        residual=residual,
        converged=abs(residual) < tol,
    )


def solve_eccentric_anomaly(mean_anomaly: float, eccentricity: float,
                            precision: float = DEFAULT_PRECISION,
                            max_iterations: int = MAX_ITERATIONS) -> KeplerSolution:
    """
    Uses Newton's method to calculate the eccentric anomaly from the mean anomaly.

    Args:
        mean_anomaly: The mean anomaly (radians)
        eccentricity: Eccentricity of the orbit, 0 <= e <= 1
        precision: Number of decimal places the residual must reach
        max_iterations: Iteration cap. Reaching it is reported through
            ``KeplerSolution.converged`` rather than raised.

    Returns:
        KeplerSolution. The anomaly is not normalised.

    Raises:
        InvalidOrbitError: if eccentricity < 0
        UnsupportedOrbitError: if eccentricity > 1
    """
    if eccentricity < 0:
        raise InvalidOrbitError(f"Eccentricity must be non-negative, got {eccentricity}.")
    if eccentricity > 1:
        raise UnsupportedOrbitError(
            f"Eccentricity {eccentricity} > 1 is not supported by the elliptic solver; "
            "use solve_hyperbolic_anomaly.")

    tol = 10.0 ** -precision
    E, f, n = solve_kepler(mean_anomaly, eccentricity, tol, max_iterations)
    return _to_solution(E, f, n, tol)


def solve_hyperbolic_anomaly(mean_anomaly: float, eccentricity: float,
                             precision: float = DEFAULT_PRECISION,
                             max_iterations: int = MAX_ITERATIONS) -> KeplerSolution:
    """
    Hyperbolic counterpart of ``solve_eccentric_anomaly``.

    Raises:
        UnsupportedOrbitError: if eccentricity <= 1
    """
    if eccentricity <= 1:
        raise UnsupportedOrbitError(
            f"The hyperbolic solver requires eccentricity > 1, got {eccentricity}.")

    tol = 10.0 ** -precision
    F, f, n = solve_hyperbolic_kepler(mean_anomaly, eccentricity, tol, max_iterations)
    return _to_solution(F, f, n, tol)


def solve_parabolic_anomaly(mean_anomaly: float) -> KeplerSolution:
    """Parabolic anomaly D from Barker's equation. Always converged (closed form)."""
    D = float(solve_barker(mean_anomaly))
    residual = D + D**3 / 3.0 - mean_anomaly
    return KeplerSolution(eccentric_anomaly=D, iterations=0, residual=residual, converged=True)
