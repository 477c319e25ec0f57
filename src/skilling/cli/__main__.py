#!/usr/bin/env python3
"""
Skilling CLI - Main entry point

Usage:
    skilling demo                       # Reference example {5,10,20}, 5 bits
    skilling encode 5 10 20 --bits 5    # Coordinates -> Hilbert index
    skilling decode 7865 --dims 3       # Hilbert index -> coordinates
    skilling locality --dims 3          # Neighbour/random index distance ratio
    skilling table --dims 2 --bits 3    # Walk a small grid in curve order
"""

import sys
import logging
import argparse

from ..hilbert import HilbertCurve
from .demo import DEFAULT_COORDS, demo_command
from .table import table_command

logger = logging.getLogger(__name__)


def configure_logging(level: str = 'WARNING') -> None:
    """Configure root logging from a level name."""
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {level}')
    logging.basicConfig(
        level=numeric_level,
        format='%(levelname)-8s %(name)-24s %(message)s',
    )


def cmd_demo(args):
    """Run the reference example"""
    return demo_command(args.coords or DEFAULT_COORDS, args.bits)


def cmd_encode(args):
    """Coordinates to Hilbert index"""
    curve = HilbertCurve(len(args.coords), args.bits)
    print(curve.encode(args.coords))
    return 0


def cmd_decode(args):
    """Hilbert index to coordinates"""
    curve = HilbertCurve(args.dims, args.bits)
    print(','.join(str(c) for c in curve.decode(args.index)))
    return 0


def cmd_locality(args):
    """Locality statistic"""
    curve = HilbertCurve(args.dims, args.bits)
    ratio = curve.locality(args.samples, args.seed)
    print(f"Locality ratio: {ratio:.4f} (neighbour / random index distance)")
    return 0


def cmd_table(args):
    """Full grid walk"""
    return table_command(args.dims, args.bits)


def main(argv=None):
    parser = argparse.ArgumentParser(description='Hilbert curve indexing (Skilling transpose)')
    parser.add_argument('--log-level', default='WARNING', help='Logging level')
    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # demo command
    parser_demo = subparsers.add_parser('demo', help='Walk one point through encode/decode')
    parser_demo.add_argument('coords', type=int, nargs='*', help='Axis coordinates')
    parser_demo.add_argument('--bits', type=int, default=HilbertCurve.DEFAULT_BITS)
    parser_demo.set_defaults(func=cmd_demo)

    # encode command
    parser_encode = subparsers.add_parser('encode', help='Coordinates to Hilbert index')
    parser_encode.add_argument('coords', type=int, nargs='+', help='Axis coordinates')
    parser_encode.add_argument('--bits', type=int, default=HilbertCurve.DEFAULT_BITS)
    parser_encode.set_defaults(func=cmd_encode)

    # decode command
    parser_decode = subparsers.add_parser('decode', help='Hilbert index to coordinates')
    parser_decode.add_argument('index', type=int, help='Hilbert index')
    parser_decode.add_argument('--dims', type=int, default=HilbertCurve.DEFAULT_DIMENSIONS)
    parser_decode.add_argument('--bits', type=int, default=HilbertCurve.DEFAULT_BITS)
    parser_decode.set_defaults(func=cmd_decode)

    # locality command
    parser_locality = subparsers.add_parser('locality', help='Measure locality preservation')
    parser_locality.add_argument('--dims', type=int, default=HilbertCurve.DEFAULT_DIMENSIONS)
    parser_locality.add_argument('--bits', type=int, default=HilbertCurve.DEFAULT_BITS)
    parser_locality.add_argument('--samples', type=int, default=1000)
    parser_locality.add_argument('--seed', type=int, default=0)
    parser_locality.set_defaults(func=cmd_locality)

    # table command
    parser_table = subparsers.add_parser('table', help='List a small grid in curve order')
    parser_table.add_argument('--dims', type=int, default=2)
    parser_table.add_argument('--bits', type=int, default=2)
    parser_table.set_defaults(func=cmd_table)

    args = parser.parse_args(argv)

    if not hasattr(args, 'func'):
        parser.print_help()
        return 1

    try:
        configure_logging(args.log_level)
        logger.debug("Running %s", args.command)
        return args.func(args)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == '__main__':
    sys.exit(main())
