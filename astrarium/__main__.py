"""
Command-line interface for Astrarium.

Usage:
    # Positions of the solar system at t=0
    python -m astrarium

    # Positions of the Kerbol system one Julian year later
    python -m astrarium --system kerbol --time 1 --time-units julian_year

    # With debug logging
    python -m astrarium --system sandbox --time 3600 --time-units s --verbose
"""

import argparse
import logging
import sys

import openmdao.utils.units as om_units

from astrarium.systems import SYSTEMS


def _setup_parser():
    parser = argparse.ArgumentParser(
        prog='astrarium',
        description='Print the absolute position of every body of a preset system at a given time.'
    )
    parser.add_argument(
        '--system',
        choices=sorted(SYSTEMS),
        default='solar',
        help='Preset system to load (default: solar)'
    )
    parser.add_argument(
        '--time',
        type=float,
        default=0.0,
        help='Simulation time, in --time-units (default: 0)'
    )
    parser.add_argument(
        '--time-units',
        default='ms',
        help="Units of --time, any openmdao time unit such as 'ms', 's', 'julian_year' (default: ms)"
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )
    return parser


def main(argv=None):
    args = _setup_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )

    try:
        time_ms = int(round(om_units.convert_units(args.time, args.time_units, 'ms')))
    except (KeyError, ValueError, TypeError) as err:
        print(f"Invalid time units '{args.time_units}': {err}", file=sys.stderr)
        return 2

    astrarium = SYSTEMS[args.system]()
    astrarium.set_time(time_ms)

    tree = astrarium.tree
    print(f"{args.system} system at t = {time_ms} ms")
    print(f"{'Body':<28} {'x (m)':>16} {'y (m)':>16} {'z (m)':>16}")
    for body in tree.walk():
        position = tree.get_position(body)
        name = '  ' * tree.depth(body) + body.name
        print(f"{name:<28} {position.x:>16.6e} {position.y:>16.6e} {position.z:>16.6e}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
