"""
Cartesian state representation.
"""
from typing import NamedTuple
import jax.numpy as jnp


class CartesianState(NamedTuple):
    """
    Cartesian state of a body relative to a reference body.

    Attributes:
        r: Position vector [x, y, z] in m
        v: Velocity vector [vx, vy, vz] in m/s

    Note:
        - Arrays may be numpy or JAX arrays, so the state can be passed
          through jax.jit and jax.vmap.
        - The frame is the reference frame of the parent body.

    Examples:
        >>> import jax.numpy as jnp
        >>> state = CartesianState(
        ...     r=jnp.array([1.496e11, 0.0, 0.0]),  # 1 AU from the sun
        ...     v=jnp.array([0.0, 2.978e4, 0.0])     # ~30 km/s orbital velocity
        ... )
    """
    r: jnp.ndarray  # position [x, y, z] (m)
    v: jnp.ndarray  # velocity [vx, vy, vz] (m/s)
