"""
Vectorised two-body state evaluation.

These functions evaluate bound (circular or elliptical) orbits directly from
their elements with JAX, so a renderer can sample a whole orbit in a single
call. The perifocal state is built from the eccentric anomaly and carried into
the parent's frame by R = Rz(Omega) Rx(i) Rz(omega), the same rotation
``Orbit.rotate_position_on_orbital_plane`` applies.
"""
import jax
import jax.numpy as jnp
from jax import jit

from .orbital_elements import OrbitalElements
from .cartesian_state import CartesianState
from .kepler import solve_kepler
from .constants import MAX_ITERATIONS


def _rz(angle):
    c, s = jnp.cos(angle), jnp.sin(angle)
    return jnp.array([[c, -s, 0.0],
                      [s, c, 0.0],
                      [0.0, 0.0, 1.0]])


def _rx(angle):
    c, s = jnp.cos(angle), jnp.sin(angle)
    return jnp.array([[1.0, 0.0, 0.0],
                      [0.0, c, -s],
                      [0.0, s, c]])


def perifocal_to_parent(i, Omega, omega):
    """Rotation matrix from the perifocal frame (periapsis on +X) to the parent's frame."""
    return _rz(Omega) @ _rx(i) @ _rz(omega)


@jit
def elements_to_cartesian(elements: OrbitalElements, mu: float, t: float) -> CartesianState:
    """
    Cartesian state of a bound orbit at time t.

    Args:
        elements: Orbital elements (0 <= e < 1)
        mu: Gravitational parameter of the parent body (m^3/s^2)
        t: Time since epoch (s)

    Returns:
        CartesianState relative to the parent
    """
    a, e = elements.a, elements.e

    n = jnp.sqrt(mu / a**3)
    E, _, _ = solve_kepler(elements.M0 + n * t, e, 1e-12, MAX_ITERATIONS)

    cos_E, sin_E = jnp.cos(E), jnp.sin(E)
    root = jnp.sqrt(1.0 - e**2)
    r_mag = a * (1.0 - e * cos_E)

    r_pf = jnp.stack([a * (cos_E - e), a * root * sin_E, jnp.zeros_like(E)])
    # dE/dt = n a / r
    v_pf = (n * a * a / r_mag) * jnp.stack([-sin_E, root * cos_E, jnp.zeros_like(E)])

    R = perifocal_to_parent(elements.i, elements.Omega, elements.omega)
    return CartesianState(r=R @ r_pf, v=R @ v_pf)


_sample_states = jax.vmap(elements_to_cartesian, in_axes=(None, None, 0))


def sample_states(elements: OrbitalElements, mu: float, times) -> CartesianState:
    """
    Evaluate an orbit at many times at once.

    Args:
        elements: Orbital elements (bound orbit, 0 <= e < 1)
        mu: Gravitational parameter of the parent body (m^3/s^2)
        times: Array of times since epoch in seconds

    Returns:
        CartesianState whose r and v have shape (n_times, 3)
    """
    elements = OrbitalElements(*(jnp.asarray(x, dtype=float) for x in elements))
    times = jnp.atleast_1d(jnp.asarray(times, dtype=float))
    return _sample_states(elements, jnp.asarray(mu, dtype=float), times)
