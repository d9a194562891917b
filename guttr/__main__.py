"""guttr: Responsive CSS padding gutters from a base spacing config.

Usage: uv run guttr <command> [options]

Commands:
  padding   Print a single padding value for a gutter and multipliers.
  gutter    Print default padding plus media-query overrides for a config.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, guttr looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import sys

from guttr.core.config_parser import parse_breakpoint_multipliers, parse_config_file, parse_multipliers
from guttr.core.env import default_config_path, default_selector, load_env
from guttr.core.padding import build_padding
from guttr.core.report import format_css, format_json
from guttr.factory import guttr


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  guttr padding\n'
        '  guttr padding --gutter 10 --multipliers top=0.25,bottom=0.25\n'
        '  guttr gutter --config site.json\n'
        '  guttr gutter --config site.json --base right=0 --breakpoint small:left=1 --json\n'
        '\n'
        'Env vars (set in .env or environment):\n'
        '  GUTTR_CONFIG    default --config path\n'
        '  GUTTR_SELECTOR  default --selector for CSS output\n'
    )
    parser = argparse.ArgumentParser(
        prog='guttr',
        description='Responsive CSS padding gutters from a base spacing config.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    p = sub.add_parser('padding', help='Print a single padding value')
    p.add_argument('-g', '--gutter', type=float, default=None, help='Gutter value (default: 16)')
    p.add_argument('-u', '--unit', default=None, help='Unit suffix (default: px)')
    p.add_argument('-m', '--multipliers', default='', metavar='SIDES', help='e.g. top=1,left=0.25')

    g = sub.add_parser('gutter', help='Print default padding plus media-query overrides')
    g.add_argument('-c', '--config', default=None, help='JSON config file (default: $GUTTR_CONFIG)')
    g.add_argument('-b', '--base', default=None, metavar='SIDES', help='Base multipliers, e.g. right=0')
    g.add_argument(
        '-p',
        '--breakpoint',
        action='append',
        default=[],
        metavar='NAME:SIDES',
        help='Breakpoint multipliers, e.g. small:left=1 (repeatable)',
    )
    g.add_argument('-j', '--json', action='store_true', help='Output JSON instead of CSS')
    g.add_argument('-s', '--selector', default=None, help='CSS selector (default: $GUTTR_SELECTOR or .gutter)')

    return parser


def _run_padding(args: argparse.Namespace) -> None:
    multipliers = parse_multipliers(args.multipliers)
    print(build_padding(args.gutter, args.unit, multipliers))


def _run_gutter(args: argparse.Namespace) -> None:
    config_path = args.config or default_config_path()
    config = parse_config_file(config_path) if config_path else None

    base = parse_multipliers(args.base) if args.base is not None else None
    breakpoints = parse_breakpoint_multipliers(args.breakpoint)
    gutters = guttr(config)(base, breakpoints)

    if args.json:
        print(format_json(gutters))
    else:
        print(format_css(gutters, selector=args.selector or default_selector()))


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else: OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'guttr: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        if args.command == 'padding':
            _run_padding(args)
        else:
            _run_gutter(args)
    except (OSError, ValueError) as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
