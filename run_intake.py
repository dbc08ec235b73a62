#!/usr/bin/env python3
"""
VaxQueue CLI, single-document workflow.

The city map JSON is the source of truth for everything:
  cities → households (block, inhabitants) and clinics (name, block, staff)

Usage:
  # Step 1 (optional): Check the city map for quirks
  python run_intake.py check --data data.json --intake 50

  # Step 2: Register eligible inhabitants, print notices, report and map
  python run_intake.py register --data data.json --intake 50 --style complex \
      --out "Intake Report.xlsx"

  # Read-only views of the document as loaded
  python run_intake.py report --data data.json --style simple
  python run_intake.py map --data data.json
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from vaxqueue.models import DEFAULT_CURRENT_INTAKE, IntakeConfig
from vaxqueue.parse_inputs import LoadError, load_registry
from vaxqueue.registration import register_for_shots, summarize
from vaxqueue.reports import REPORT_STYLES, ReportMaker
from vaxqueue.city_map import render_map
from vaxqueue.validate import check_registry, check_assignments
from vaxqueue.write_report import write_report


def _resolve(p: str) -> Path:
    """Relative paths are taken from the caller's working directory."""
    pp = Path(p)
    if pp.is_absolute():
        return pp
    return Path.cwd() / pp


def _config(args) -> IntakeConfig:
    return IntakeConfig(current_intake=args.intake, data_path=str(_resolve(args.data)))


def _load(config: IntakeConfig):
    """Load failures are fatal: report and exit 1."""
    try:
        return load_registry(config.data_path, current_intake=config.current_intake)
    except LoadError as e:
        print(f"Error reading or parsing {config.data_path}: {e}", file=sys.stderr)
        sys.exit(1)


def _print_report(registry, style: str):
    report = ReportMaker(REPORT_STYLES[style](registry.clinics()))
    report.print_details()
    print("---End of Report---")


def _print_map(registry):
    for row in render_map(registry):
        print(row)
    print("---End of Map---")


def cmd_check(args):
    """Dry-run checks on the city map without registering anyone."""
    config = _config(args)
    print(f"Parsing: {config.data_path}")
    registry = _load(config)
    print(f"  Cities: {len(registry.cities)}")
    print(f"  Clinics: {len(registry.clinics())}")
    print(f"  Intake threshold: {registry.current_intake}")

    ok, msgs = check_registry(registry)
    if ok:
        print("\nCity map check: OK")
    else:
        print("\nCity map issues:")
        for m in msgs:
            print(f"  {m}")


def cmd_register(args):
    """Register eligible inhabitants at their nearest clinic, then report."""
    config = _config(args)
    print(f"Parsing: {config.data_path}")
    registry = _load(config)

    # Step 1: dry-run check
    ok, msgs = check_registry(registry)
    if not ok:
        print("\nWarning: city map issues (registering anyway):")
        for m in msgs:
            print(f"  {m}")

    # Step 2: register
    print(f"\nRegistering for shots (intake age {registry.current_intake}+)...")
    notices = register_for_shots(registry)
    for n in notices:
        print(n)

    # Step 3: validate
    valid, violations = check_assignments(registry)
    if not valid:
        print(f"  Validation: {len(violations)} issue(s)")
        for v in violations[:15]:
            print(f"    {v}")
        if len(violations) > 15:
            print(f"    ... and {len(violations) - 15} more")

    for city_name, counts in summarize(registry).items():
        print(f"  {city_name}: {counts['vaccinated']}/{counts['inhabitants']} vaccinated, "
              f"{counts['households_complete']}/{counts['households']} households complete")

    # Step 4: report + map
    print()
    _print_report(registry, args.style)
    _print_map(registry)

    # Step 5: optional workbook
    if args.out:
        out_path = str(_resolve(args.out))
        write_report(registry, out_path, notices=notices)
        print(f"\nReport written to: {out_path}")


def cmd_report(args):
    """Print the clinic report for the map as loaded."""
    registry = _load(_config(args))
    _print_report(registry, args.style)


def cmd_map(args):
    """Print the block map for the map as loaded."""
    registry = _load(_config(args))
    _print_map(registry)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="VaxQueue: vaccination intake by nearest clinic",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    sub = parser.add_subparsers(dest="command", help="Command")

    def _common(p):
        p.add_argument("--data", default="data.json", help="City map JSON path")
        p.add_argument("--intake", type=int, default=DEFAULT_CURRENT_INTAKE,
                       help="Minimum age for the current intake round")

    # check
    p_check = sub.add_parser("check", help="Check the city map for quirks")
    _common(p_check)

    # register
    p_reg = sub.add_parser("register", help="Register eligible inhabitants and report")
    _common(p_reg)
    p_reg.add_argument("--style", choices=sorted(REPORT_STYLES), default="complex")
    p_reg.add_argument("--out", default=None, help="Optional .xlsx report path")

    # report
    p_report = sub.add_parser("report", help="Print clinic lineups")
    _common(p_report)
    p_report.add_argument("--style", choices=sorted(REPORT_STYLES), default="complex")

    # map
    p_map = sub.add_parser("map", help="Print the block map of each city")
    _common(p_map)

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        sys.exit(1)

    dispatch = {
        "check": cmd_check,
        "register": cmd_register,
        "report": cmd_report,
        "map": cmd_map,
    }
    dispatch[args.command](args)


if __name__ == "__main__":
    main()
