import unittest

from diffrax import diffeqsolve, ODETerm, Dopri5, SaveAt, PIDController
import jax.numpy as jnp
import numpy as np

from astrarium import Orbit, make_solver_config


def two_body_ode(t, y, args):
    """
    Derivatives for pure Keplerian motion.

    Args:
        t: time
        y: state [x, y, z, vx, vy, vz]
        args: (mu,)
    """
    mu, = args
    r = y[:3]
    v = y[3:]
    a = -mu * r / jnp.linalg.norm(r)**3
    return jnp.concatenate([v, a])


class TestTwoBodyODE(unittest.TestCase):
    """Integrate the equations of motion and compare with the analytic orbit."""

    def setUp(self):
        # Canonical units: mu = 1, a = 1, so the period is 2*pi seconds
        self.mu = 1.0
        self.config = make_solver_config(precision=12)

    def _propagate(self, orbit, t1_ms, n=20):
        state0 = orbit.get_state_at_time(0, self.config)
        y0 = jnp.concatenate([jnp.asarray(state0.r), jnp.asarray(state0.v)])
        # Whole milliseconds, the resolution of the simulation clock
        times_ms = np.linspace(0, t1_ms, n).round()
        ts = jnp.asarray(times_ms / 1000.0)

        solution = diffeqsolve(ODETerm(two_body_ode), Dopri5(), args=(self.mu,),
                               t0=0.0, t1=t1_ms / 1000.0, dt0=1e-3, y0=y0,
                               saveat=SaveAt(ts=ts),
                               stepsize_controller=PIDController(rtol=1e-11, atol=1e-11),
                               max_steps=100_000)
        return times_ms.astype(int), np.asarray(solution.ys)

    def _assert_matches(self, orbit, t1_ms, tol):
        times_ms, ys = self._propagate(orbit, t1_ms)
        for time, y in zip(times_ms, ys):
            state = orbit.get_state_at_time(time, self.config)
            np.testing.assert_allclose(y[:3], state.r, atol=tol)
            np.testing.assert_allclose(y[3:], state.v, atol=tol)

    def test_elliptical_orbit(self):
        orbit = Orbit(parent_id=0, mu=self.mu, semi_major_axis=1.0, eccentricity=0.3,
                      inclination=0.5, longitude_of_ascending_node=1.0, argument_of_periapsis=2.0,
                      mean_anomaly_at_epoch=0.0)
        self._assert_matches(orbit, 6283, 1e-6)

    def test_circular_orbit(self):
        orbit = Orbit(parent_id=0, mu=self.mu, semi_major_axis=1.0, eccentricity=0.0,
                      inclination=0.2)
        self._assert_matches(orbit, 3000, 1e-6)

    def test_hyperbolic_flyby(self):
        orbit = Orbit(parent_id=0, mu=self.mu, semi_major_axis=1.0, eccentricity=1.6,
                      inclination=0.3, argument_of_periapsis=0.4, mean_anomaly_at_epoch=-2.0)
        self._assert_matches(orbit, 4000, 1e-6)

    def test_parabolic_escape(self):
        orbit = Orbit(parent_id=0, mu=self.mu, semi_major_axis=1.0, eccentricity=1.0,
                      mean_anomaly_at_epoch=-1.0)
        self._assert_matches(orbit, 2000, 1e-6)


if __name__ == '__main__':
    unittest.main()
