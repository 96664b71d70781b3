"""
Tests for determining an orbit from a position and velocity.
"""
import math
import unittest

import numpy as np
import pytest

from astrarium import (
    BodyTree,
    DegenerateGeometryError,
    InvalidOrbitError,
    Orbit,
    OrbitType,
    Vector,
)
from astrarium.mathematics import angle_difference


def make_parent(mass=5.9736e24):
    tree = BodyTree()
    return tree.add_body("Earth", mass, 6.371e6)


class TestDetermination(unittest.TestCase):

    def setUp(self):
        self.earth = make_parent()
        self.mu = self.earth.standard_gravitational_parameter

    def assertAngleEqual(self, a, b, tol=1e-7):
        self.assertLess(abs(angle_difference(a, b)), tol, f"{a} != {b}")

    def test_random_orbits_are_recovered(self):
        rng = np.random.default_rng(2024)
        for _ in range(25):
            original = Orbit.around(
                self.earth,
                semi_major_axis=rng.uniform(7e6, 4e8),
                eccentricity=rng.uniform(0.01, 0.8),
                inclination=rng.uniform(0.1, 3.0),
                longitude_of_ascending_node=rng.uniform(0.0, 2.0 * math.pi),
                argument_of_periapsis=rng.uniform(0.0, 2.0 * math.pi),
                mean_anomaly_at_epoch=rng.uniform(0.0, 2.0 * math.pi),
            )
            time = int(rng.integers(0, 10_000_000))
            position = original.get_position_from_parent_at_time(time)
            velocity = original.get_velocity_at_time(time)

            orbit = Orbit.from_position_and_velocity(self.earth, position, velocity, time)

            self.assertEqual(orbit.parent_id, self.earth.id)
            self.assertAlmostEqual(orbit.semi_major_axis / original.semi_major_axis, 1.0, places=8)
            self.assertAlmostEqual(orbit.eccentricity, original.eccentricity, places=8)
            self.assertAlmostEqual(orbit.inclination, original.inclination, places=8)
            self.assertAngleEqual(orbit.longitude_of_ascending_node, original.longitude_of_ascending_node)
            self.assertAngleEqual(orbit.argument_of_periapsis, original.argument_of_periapsis, tol=1e-6)
            self.assertAngleEqual(orbit.mean_anomaly_at_epoch, original.mean_anomaly_at_epoch, tol=1e-6)

            recovered = orbit.get_position_from_parent_at_time(time)
            np.testing.assert_allclose(recovered.to_array(), position.to_array(),
                                       rtol=1e-7, atol=1e-7 * position.magnitude)

    def test_determination_is_idempotent(self):
        position = Vector(7.0e6, 1.0e6, 3.0e5)
        velocity = Vector(-500.0, 7600.0, 900.0)

        first = Orbit.from_position_and_velocity(self.earth, position, velocity, 0)
        second = Orbit.from_position_and_velocity(self.earth,
                                                  first.get_position_from_parent_at_time(0),
                                                  first.get_velocity_at_time(0), 0)

        self.assertAlmostEqual(second.semi_major_axis / first.semi_major_axis, 1.0, places=9)
        self.assertAlmostEqual(second.eccentricity, first.eccentricity, places=9)
        self.assertAlmostEqual(second.inclination, first.inclination, places=9)
        self.assertAngleEqual(second.longitude_of_ascending_node, first.longitude_of_ascending_node)
        self.assertAngleEqual(second.argument_of_periapsis, first.argument_of_periapsis)

    def test_inputs_are_not_modified(self):
        position = Vector(7.0e6, 0.0, 1.0e5)
        velocity = Vector(0.0, 8000.0, 100.0)
        Orbit.from_position_and_velocity(self.earth, position, velocity)
        self.assertEqual(position, Vector(7.0e6, 0.0, 1.0e5))
        self.assertEqual(velocity, Vector(0.0, 8000.0, 100.0))

    def test_without_time_mean_anomaly_is_zero(self):
        orbit = Orbit.from_position_and_velocity(self.earth, Vector(7.0e6, 0.0, 1.0e5),
                                                 Vector(100.0, 8000.0, 100.0))
        self.assertEqual(orbit.mean_anomaly_at_epoch, 0.0)

    def test_equatorial_prograde(self):
        r = 7.0e6
        v = 1.2 * math.sqrt(self.mu / r)
        orbit = Orbit.from_position_and_velocity(self.earth, Vector(r, 0.0, 0.0), Vector(0.0, v, 0.0), 0)

        self.assertEqual(orbit.inclination, 0.0)
        self.assertEqual(orbit.longitude_of_ascending_node, 0.0)
        self.assertAlmostEqual(orbit.argument_of_periapsis, 0.0, places=12)
        self.assertAlmostEqual(orbit.eccentricity, 0.44, places=10)
        self.assertAlmostEqual(orbit.get_periapsis() / r, 1.0, places=10)
        self.assertAngleEqual(orbit.mean_anomaly_at_epoch, 0.0, tol=1e-9)

    def test_equatorial_retrograde(self):
        r = 7.0e6
        v = 1.2 * math.sqrt(self.mu / r)
        position = Vector(0.0, r, 0.0)
        velocity = Vector(v, 0.0, 0.0)
        orbit = Orbit.from_position_and_velocity(self.earth, position, velocity, 5000)

        self.assertEqual(orbit.inclination, math.pi)
        self.assertEqual(orbit.longitude_of_ascending_node, 0.0)

        np.testing.assert_allclose(orbit.get_position_from_parent_at_time(5000).to_array(),
                                   position.to_array(), atol=1e-3)
        np.testing.assert_allclose(orbit.get_velocity_at_time(5000).to_array(),
                                   velocity.to_array(), atol=1e-6)

    def test_circular(self):
        r = 4.2e7
        v = math.sqrt(self.mu / r)
        orbit = Orbit.from_position_and_velocity(self.earth, Vector(0.0, r, 0.0), Vector(-v, 0.0, 0.0), 0)

        self.assertIs(orbit.orbit_type, OrbitType.CIRCULAR)
        self.assertEqual(orbit.eccentricity, 0.0)
        self.assertEqual(orbit.argument_of_periapsis, 0.0)
        self.assertAlmostEqual(orbit.semi_major_axis / r, 1.0, places=10)
        self.assertAngleEqual(orbit.mean_anomaly_at_epoch, math.pi / 2, tol=1e-9)

    def test_hyperbolic(self):
        r = 1.0e7
        v = 1.5 * math.sqrt(2.0 * self.mu / r)
        orbit = Orbit.from_position_and_velocity(self.earth, Vector(r, 0.0, 0.0), Vector(0.0, 0.0, v), 0)

        self.assertIs(orbit.orbit_type, OrbitType.HYPERBOLIC)
        self.assertAlmostEqual(orbit.eccentricity, 3.5, places=9)
        self.assertAlmostEqual(orbit.get_periapsis() / r, 1.0, places=9)
        self.assertGreater(orbit.get_specific_orbital_energy(), 0.0)
        self.assertAlmostEqual(orbit.inclination, math.pi / 2, places=12)

        np.testing.assert_allclose(orbit.get_position_from_parent_at_time(0).to_array(),
                                   [r, 0.0, 0.0], atol=1e-3)

    def test_hyperbolic_state_is_recovered_later(self):
        original = Orbit.around(self.earth, 2.0e7, 1.8, 0.3, 1.0, 2.0, -0.5)
        time = 1_500_000
        position = original.get_position_from_parent_at_time(time)
        velocity = original.get_velocity_at_time(time)

        orbit = Orbit.from_position_and_velocity(self.earth, position, velocity, time)

        self.assertAlmostEqual(orbit.semi_major_axis / original.semi_major_axis, 1.0, places=8)
        self.assertAlmostEqual(orbit.eccentricity, original.eccentricity, places=8)
        self.assertAlmostEqual(orbit.mean_anomaly_at_epoch, -0.5, places=6)

    def test_radial_trajectory_raises(self):
        with self.assertRaises(DegenerateGeometryError):
            Orbit.from_position_and_velocity(self.earth, Vector(1.0e7, 0.0, 0.0), Vector(2000.0, 0.0, 0.0))

    def test_zero_position_raises(self):
        with self.assertRaises(DegenerateGeometryError):
            Orbit.from_position_and_velocity(self.earth, Vector(), Vector(0.0, 1000.0, 0.0))


def test_massless_parent_raises():
    rock = make_parent(mass=0.0)
    with pytest.raises(InvalidOrbitError):
        Orbit.from_position_and_velocity(rock, Vector(1.0, 0.0, 0.0), Vector(0.0, 1.0, 0.0))
