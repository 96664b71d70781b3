"""
Tests for the Astrarium clock, the preset systems and the command line.
"""
import math
import unittest

import pytest

from astrarium import Astrarium, BodyTree, Orbit
from astrarium.__main__ import main
from astrarium.systems import SYSTEMS, kerbol_system, solar_system, sandbox_system

DAY_MS = 86_400_000


class TestAstrarium(unittest.TestCase):

    def setUp(self):
        self.astrarium = solar_system()
        self.tree = self.astrarium.tree
        self.earth = self.astrarium.find("Earth")

    def test_rendered_at_construction(self):
        self.assertEqual(self.astrarium.get_time(), 0)
        for body in self.astrarium.bodies():
            self.tree.get_position(body)

    def test_set_time_renders_the_tree(self):
        before = self.tree.get_position(self.earth)
        self.astrarium.set_time(10 * DAY_MS)
        after = self.tree.get_position(self.earth)

        self.assertEqual(self.astrarium.time, 10 * DAY_MS)
        self.assertEqual(self.tree.get_rendered_state(self.earth).time, 10 * DAY_MS)
        self.assertGreater(before.distance_to(after), 1e10)

    def test_seeking_back_restores_positions(self):
        before = self.tree.get_position(self.earth)
        self.astrarium.time = 100 * DAY_MS
        self.astrarium.time = 0
        self.assertTrue(self.tree.get_position(self.earth).is_close(before))

    def test_advance(self):
        self.assertEqual(self.astrarium.advance(DAY_MS), DAY_MS)
        self.assertEqual(self.astrarium.advance(0), DAY_MS)
        self.assertEqual(self.astrarium.advance(DAY_MS), 2 * DAY_MS)
        with self.assertRaises(ValueError):
            self.astrarium.advance(-1)
        self.assertEqual(self.astrarium.get_time(), 2 * DAY_MS)

    def test_advance_matches_set_time(self):
        stepped = solar_system()
        for _ in range(5):
            stepped.advance(DAY_MS)
        self.astrarium.set_time(5 * DAY_MS)

        for body in self.tree.walk():
            a = self.tree.get_position(body)
            b = stepped.tree.get_position(stepped.find(body.name))
            self.assertTrue(a.is_close(b))

    def test_root_and_repr(self):
        self.assertEqual(self.astrarium.root.name, "Sun")
        self.assertEqual(repr(self.astrarium), "Astrarium(root='Sun', bodies=7, time=0)")

    def test_initial_time(self):
        tree = BodyTree()
        star = tree.add_body("Star", 2e30, 7e8)
        planet = tree.add_body("Planet", 6e24, 6e6, Orbit.around(star, 1.5e11, 0.1))
        astrarium = Astrarium(tree, time=DAY_MS)
        self.assertEqual(astrarium.time, DAY_MS)
        self.assertEqual(tree.get_rendered_state(planet).time, DAY_MS)


@pytest.mark.parametrize('name', sorted(SYSTEMS))
def test_presets_build_and_render(name):
    astrarium = SYSTEMS[name]()
    assert astrarium.get_time() == 0
    assert len(astrarium.tree) >= 2
    for body in astrarium.bodies():
        if body.orbit is not None:
            assert astrarium.tree.get_rendered_state(body).converged


def test_kerbol_moon_orbits_kerbin():
    astrarium = kerbol_system()
    tree = astrarium.tree
    mun = astrarium.find("Mun")
    assert tree.get_parent(mun).name == "Kerbin"
    assert tree.get_position_from_parent(mun).magnitude == pytest.approx(1.2e7)
    duna = astrarium.find("Duna")
    assert duna.orbit.longitude_of_ascending_node == pytest.approx(math.pi * 135.5 / 180.0)


def test_sandbox_planet_starts_at_periapsis():
    astrarium = sandbox_system()
    planet = astrarium.find("Planet")
    assert astrarium.tree.get_position(planet).magnitude == pytest.approx(2e7)


def test_cli_prints_every_body(capsys):
    assert main(['--system', 'sandbox', '--time', '1', '--time-units', 'h']) == 0
    out = capsys.readouterr().out
    assert "t = 3600000 ms" in out
    assert "Sun" in out
    assert "Planet" in out


def test_cli_rejects_incompatible_units(capsys):
    assert main(['--system', 'sandbox', '--time', '1', '--time-units', 'm']) == 2
    assert "Invalid time units" in capsys.readouterr().err


def test_cli_rejects_unknown_system():
    with pytest.raises(SystemExit):
        main(['--system', 'vulcan'])
