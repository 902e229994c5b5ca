#!/usr/bin/env python3
"""
Pipe Head Loss Calculator - CLI

Computes velocity, Reynolds number, Darcy friction factor, fitting equivalent
lengths, head loss and pressure drop for one pipe at one operating point.

Examples:
  python main.py --gpm 100 --diameter 4 --length 100
  python main.py --gpm 250 --nominal '6"' --length 300 --nineties 4 --gate 2 --json
  python main.py --interactive
"""

import argparse
import json
import logging
import sys

from headloss.calculator import InputParameters, calculate
from headloss.fittings import get_fitting_options, get_fitting_name
from headloss.inputs import get_inputs, validate_inputs
from headloss.pipe_lookup import get_nominal_sizes, get_pipe_id
from headloss.report import (
    collect_warnings, darcy_chart_dataframe, fittings_dataframe, results_dataframe,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pipe Head Loss Calculator")
    parser.add_argument("--interactive", action="store_true",
                        help="Prompt for every input instead of reading flags")
    parser.add_argument("--gpm", type=float, help="Flow rate in GPM")
    size = parser.add_mutually_exclusive_group()
    size.add_argument("--diameter", type=float, help="Pipe internal diameter in inches")
    size.add_argument("--nominal", choices=get_nominal_sizes(),
                      help="Nominal pipe size (Schedule 40 ID is used)")
    parser.add_argument("--length", type=float, default=0.0,
                        help="Straight pipe length in ft (default: 0)")
    parser.add_argument("--viscosity", type=float, default=1.0,
                        help="Dynamic viscosity in cP (default: 1)")
    parser.add_argument("--spgr", "--specific-gravity", type=float, dest="spgr", default=1.0,
                        help="Specific gravity (default: 1.0)")
    parser.add_argument("--rise", "--vertical-rise", type=float, dest="rise", default=0.0,
                        help="Vertical rise in ft (default: 0)")
    for kind in get_fitting_options():
        parser.add_argument(f"--{kind.replace('_', '-')}", type=float, dest=kind, default=0.0,
                            help=f"Number of {get_fitting_name(kind)} fittings (default: 0)")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("--chart", action="store_true", help="Include the Darcy chart")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def params_from_args(args) -> InputParameters:
    diameter = get_pipe_id(args.nominal) if args.nominal else args.diameter
    return InputParameters(
        gpm=args.gpm,
        diameter=diameter,
        length=args.length,
        viscosity=args.viscosity,
        specific_gravity=args.spgr,
        vertical_rise=args.rise,
        **{kind: getattr(args, kind) for kind in get_fitting_options()},
    )


def print_results(params, result, show_chart=False):
    print("\n" + "=" * 50)
    print("📊 HEAD LOSS RESULTS")
    print("=" * 50)
    print(results_dataframe(result).to_string(index=False))

    fittings = fittings_dataframe(params, result)
    fittings = fittings[fittings['Quantity'] != 0]
    if not fittings.empty:
        print("\n🔧 Fittings:")
        print(fittings.to_string(index=False))

    if show_chart:
        print("\n📈 Darcy Chart:")
        print(darcy_chart_dataframe(result).to_string(index=False))

    for warning in collect_warnings(result):
        print(f"\n{warning}")


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.interactive:
        params = get_inputs()
    else:
        if args.gpm is None or (args.diameter is None and args.nominal is None):
            parser.error("--gpm and one of --diameter/--nominal are required (or use --interactive)")
        params = params_from_args(args)

    is_valid, error_msg = validate_inputs(params)
    if not is_valid:
        print(f"❌ {error_msg}", file=sys.stderr)
        return 1

    result = calculate(params)

    if args.json:
        json.dump(result.to_dict(include_chart=args.chart), sys.stdout, ensure_ascii=False, indent=2)
        sys.stdout.write("\n")
    else:
        print_results(params, result, show_chart=args.chart)

    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\n🛑 Operation cancelled by user.")
        sys.exit(0)
