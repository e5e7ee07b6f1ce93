"""CLI entry point: thyrannic-sky sky|ephemeris|tracker subcommands."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from thyrannic_sky.angle_utils import dms_string, parse_angle
from thyrannic_sky.calendar_date import CalendarDateTime, parse_datetime
from thyrannic_sky.config import get_log_level
from thyrannic_sky.constants import DEFAULT_INTERVAL, DEFAULT_TIME_UNIT
from thyrannic_sky.ephemeris import generate_ephemeris, sky_for
from thyrannic_sky.params import (
    EphemerisParams,
    TrackerParams,
    parse_body_column_spec,
    parse_column_spec,
)
from thyrannic_sky.tracker import run_tracker

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool = False) -> None:
    """Configure logging for CLI (stderr, level from --verbose or THYRANNIC_SKY_LOG)."""
    level = get_log_level(logging.DEBUG if verbose else logging.WARNING)
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr,
    )
    logging.getLogger('matplotlib').setLevel(logging.WARNING)


def _angle_arg(text: str) -> float:
    """argparse type for "deg [min [sec]]" angles."""
    value = parse_angle(text)
    if value is None:
        raise argparse.ArgumentTypeError(f'invalid angle: {text!r}')
    return value


def _write_positions(stream: TextIO, args: argparse.Namespace) -> None:
    """Tick one instant and write a line per body."""
    if args.value is not None:
        when = args.value
        label = str(CalendarDateTime.from_clock(when))
    else:
        parsed = parse_datetime(args.time)
        if parsed is None:
            raise ValueError(f'Invalid time {args.time!r}')
        when = parsed.value
        label = str(parsed)
    sky, names = sky_for(args.latitude, args.tilt, args.bodies or [])
    sky.tick(when)
    stream.write(f'{label} (clock {when:g} h), observer {sky.observer.name} '
                 f'lat {sky.observer.latitude:g} tilt {sky.observer.tilt:g}\n')
    for name in names:
        pos = sky.position(name)
        stream.write(
            f'{sky.elements(name).name:8s} '
            f'RA {dms_string(pos.right_ascension)}  '
            f'Dec {dms_string(pos.declination)}  '
            f'Alt {pos.altitude:8.3f}  HA {pos.hour_angle:8.3f}  '
            f'Dist {pos.distance:.5e}  Diam {pos.angular_diameter:.4f}\n'
        )


def _sky_cmd(args: argparse.Namespace) -> int:
    _write_positions(sys.stdout, args)
    return 0


def _ephemeris_cmd(args: argparse.Namespace) -> int:
    params = EphemerisParams(
        start_time=args.start,
        stop_time=args.stop,
        interval=args.interval,
        time_unit=args.time_unit,
        bodies=args.bodies or [],
        columns=parse_column_spec(args.columns or []),
        bodycols=parse_body_column_spec(args.bodycols or []),
        latitude_deg=args.latitude,
        tilt_deg=args.tilt,
    )
    if args.output is not None:
        with open(args.output, 'w') as f:
            generate_ephemeris(params, f)
    else:
        generate_ephemeris(params, sys.stdout)
    return 0


def _tracker_cmd(args: argparse.Namespace) -> int:
    params = TrackerParams(
        start_time=args.start,
        stop_time=args.stop,
        interval=args.interval,
        time_unit=args.time_unit,
        bodies=args.bodies or [],
        latitude_deg=args.latitude,
        tilt_deg=args.tilt,
        title=args.title,
    )
    run_tracker(params, args.output)
    return 0


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        '--bodies', type=str, nargs='+', default=None, help='Body names or "all" (default: all)'
    )
    p.add_argument(
        '--latitude',
        type=_angle_arg,
        default=None,
        help='Observer latitude "deg [min [sec]]"; env: THYRANNIC_SKY_LATITUDE',
    )
    p.add_argument(
        '--tilt',
        type=_angle_arg,
        default=None,
        help='Observer axial tilt "deg [min [sec]]"; env: THYRANNIC_SKY_TILT',
    )


def _add_range(p: argparse.ArgumentParser) -> None:
    p.add_argument('--start', type=str, required=True, help='Start "YYYY-MM-DD [HH]" or clock hours')
    p.add_argument('--stop', type=str, required=True, help='Stop "YYYY-MM-DD [HH]" or clock hours')
    p.add_argument('--interval', type=float, default=DEFAULT_INTERVAL, help='Time step')
    p.add_argument(
        '--time-unit', type=str, default=DEFAULT_TIME_UNIT, help='minute, hour, day, week, month, year'
    )


def main() -> int:
    """Entry point for the thyrannic-sky CLI (sky | ephemeris | tracker).

    Returns:
        Exit code 0 on success, 1 on failure.
    """
    parser = argparse.ArgumentParser(
        prog='thyrannic-sky',
        description='Sky positions of the Sun, Arukma, and Losit on the Thyrannic calendar.',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    subparsers = parser.add_subparsers(dest='command', required=True)

    sky_parser = subparsers.add_parser('sky', help='Positions at one instant')
    when = sky_parser.add_mutually_exclusive_group(required=True)
    when.add_argument('--time', type=str, help='Calendar time "YYYY-MM-DD [HH]"')
    when.add_argument('--value', type=float, help='Clock value (hours since epoch)')
    _add_common(sky_parser)
    sky_parser.set_defaults(func=_sky_cmd)

    ephem_parser = subparsers.add_parser('ephemeris', help='Generate ephemeris table')
    _add_range(ephem_parser)
    _add_common(ephem_parser)
    ephem_parser.add_argument(
        '--columns', type=str, nargs='+', default=None, help='value, days, datetime'
    )
    ephem_parser.add_argument(
        '--bodycols',
        type=str,
        nargs='+',
        default=None,
        help='ra, dec, dist, ha, zenith, alt, diam',
    )
    ephem_parser.add_argument('-o', '--output', type=str, default=None, help='Output file')
    ephem_parser.set_defaults(func=_ephemeris_cmd)

    tracker_parser = subparsers.add_parser('tracker', help='Plot altitude against time')
    _add_range(tracker_parser)
    _add_common(tracker_parser)
    tracker_parser.add_argument('--title', type=str, default='', help='Plot title')
    tracker_parser.add_argument(
        '-o', '--output', type=str, default='tracker.png', help='Output image file'
    )
    tracker_parser.set_defaults(func=_tracker_cmd)

    args = parser.parse_args()
    _configure_logging(args.verbose)
    try:
        return int(args.func(args))
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
