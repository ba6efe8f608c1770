"""
dzzones: compute the circles covering the area spanned by an object set
and print them as SQL insert statements.
"""

import argparse
import sys

from . import session_log as slog
from .profiler import stat, show_profile
from .extractor import extract_points, ObjectSetError
from .planner import CoveragePlanner, METHODS
from .emitter import zone_inserts, DEFAULT_TABLE

SESSION = 'dzzones'


def positive_float(text):
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f'not a number: {text!r}')
    if not value > 0 or value == float('inf'):
        raise argparse.ArgumentTypeError(f'must be a positive number: {text!r}')
    return value


def build_parser():
    parser = argparse.ArgumentParser(
        prog='dzzones',
        description='Compute minimal number of circles to cover area determined by objects')
    parser.add_argument('-i', '--input', required=True,
                        help='Input JSON file with objects')
    parser.add_argument('-r', '--radius', required=True, type=positive_float,
                        help='Maximum circle radius')
    parser.add_argument('-t', '--type', required=True, dest='zone_type',
                        help='Type of the zone')
    parser.add_argument('-s', '--sid', required=True,
                        help='SID of the zone')
    parser.add_argument('--method', choices=METHODS, default='scan',
                        help='Cover search: direct scan or KD-tree neighbours (same result)')
    parser.add_argument('--table', default=DEFAULT_TABLE,
                        help='Target table of the insert statements')
    parser.add_argument('--log-level', default='INFO', choices=slog.Profile.LEVELS)
    parser.add_argument('--profile', action='store_true',
                        help='Log stage timings')
    parser.add_argument('--plot', metavar='PNG',
                        help='Also draw the cover to this image file')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    level = 'STATS' if args.profile and args.log_level in ('INFO', 'WARN', 'ERROR') else args.log_level
    slog.config(slog.Profile(slog.Profile.MODE_STD, level=level,
                             colored=sys.stderr.isatty()))

    def tick(name):
        if args.profile:
            stat(SESSION, name)

    tick('start')
    try:
        points = extract_points(args.input)
    except (OSError, ObjectSetError) as e:
        slog.error(SESSION, f'Error reading input file: {e}')
        return 1
    slog.info(SESSION, f'{len(points)} points from {args.input}')
    tick('load')

    planner = CoveragePlanner({'radius': args.radius, 'method': args.method})
    try:
        cover = planner.plan(points)
        slog.info(SESSION, f'{len(cover)} circles of radius {args.radius}')
        slog.debug(SESSION, f'points per circle: {cover.coverage_counts()}')
        tick('cover')
        statements = zone_inserts(cover, args.zone_type, args.sid, args.table)
    except ValueError as e:
        slog.error(SESSION, str(e))
        return 1

    for statement in statements:
        print(statement)
    tick('emit')

    if args.plot:
        from .visualization import visualize_cover
        visualize_cover(cover, points, output_file=args.plot)
        slog.info(SESSION, f'Plot written to {args.plot}')
        tick('plot')

    if args.profile:
        show_profile(SESSION)
    return 0


if __name__ == '__main__':
    sys.exit(main())
