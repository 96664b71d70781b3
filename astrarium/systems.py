"""
Ready-made systems.

Each factory builds a BodyTree and returns an Astrarium rendered at t=0.
Masses in kg, radii and semi-major axes in m, angles in radians.
"""
import math

from astrarium.config import SolverConfig
from astrarium.hierarchy import BodyTree
from astrarium.mathematics import deg_to_rad
from astrarium.orbit import Orbit
from astrarium.simulation import Astrarium


def solar_system(config: SolverConfig = None) -> Astrarium:
    """The Sun with a selection of planets, a dwarf planet, a moon and a comet."""
    tree = BodyTree(config)
    sun = tree.add_body("Sun", 1.9891e30, 6.957e8)

    earth = tree.add_body("Earth", 5.9736e24, 6.371e6,
                          Orbit.around(sun, 1.49598261e11, 0.01671123,
                                       0.0, 6.0866500, 1.9933027, 6.259047404))

    tree.add_body("Moon", 7.342e22, 1.7374e6,
                  Orbit.around(earth, 3.84399e8, 0.0549, 0.0898, 0.0, 0.0, 0.0))

    tree.add_body("Mars", 6.4171e23, 3.3895e6,
                  Orbit.around(sun, 2.279392e11, 0.0934, 0.0322992, 0.8649518, 5.0003683, 0.3384215))

    tree.add_body("Ceres", 9.393e20, 4.73e5,
                  Orbit.around(sun, 4.14e11, 0.1161977, 0.168379107187))

    tree.add_body("Pluto", 1.303e22, 1.1883e6,
                  Orbit.around(sun, 5.90638e12, 0.2488, 0.2994985, 1.9251587, 1.9867860, 0.0))

    tree.add_body("67P/Churyumov-Gerasimenko", 9.982e12, 4e3,
                  Orbit.around(sun, 5.18e11, 0.64102, 0.122879906, 0.87523026, 0.22305308, 5.30073947))

    return Astrarium(tree)


def kerbol_system(config: SolverConfig = None) -> Astrarium:
    tree = BodyTree(config)
    kerbol = tree.add_body("Kerbol", 1.756567e28, 2.616e5)

    kerbin = tree.add_body("Kerbin", 5.2915793e22, 6e5,
                           Orbit.around(kerbol, 1.3599840256e10, 0.0))

    tree.add_body("Mun", 9.7599066e20, 2e5,
                  Orbit.around(kerbin, 1.2e7, 0.0, 0.0, 0.0, 0.0, 1.7))

    tree.add_body("Duna", 4.5154812e21, 3.2e5,
                  Orbit.around(kerbol, 2.0726155264e10, 0.051, 0.001, deg_to_rad(135.5), 0.0, 3.14))

    return Astrarium(tree)


def sandbox_system(config: SolverConfig = None) -> Astrarium:
    """A star with a single, very eccentric and inclined planet."""
    tree = BodyTree(config)
    sun = tree.add_body("Sun", 1e30, 1e6)

    tree.add_body("Planet", 5e9, 1e4,
                  Orbit.around(sun, 1e8, 0.8, math.pi / 4, 0.0, 0.0, 0.0))

    return Astrarium(tree)


SYSTEMS = {
    'solar': solar_system,
    'kerbol': kerbol_system,
    'sandbox': sandbox_system,
}
