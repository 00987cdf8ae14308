#!/usr/bin/env python3
"""
Rotation CLI — three-supervisor drilling rotation.

Parameters come from flags, a JSON file, or the CONFIG sheet of a workbook.
Flags override values loaded from a file.

Usage:
  # Step 1 (optional): create a workbook with a CONFIG sheet to edit
  python run_rotation.py setup --workbook rotation.xlsx

  # Step 2 (optional): check the parameters without scheduling
  python run_rotation.py dry-run --workbook rotation.xlsx

  # Step 3: build the schedule and export it
  python run_rotation.py solve --work-days 14 --rest-days 7 --induction-days 5 \
      --total-days 40 --out schedule.xlsx --csv schedule.csv
"""

import argparse
import dataclasses
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from rotation.analytics import summary_lines
from rotation.engine import run
from rotation.models import RotationConfig
from rotation.parse_inputs import ConfigError, load_config, parse_workbook
from rotation.validate import check_config, support_warnings
from rotation.workbook_sheets import setup_workbook
from rotation.write_schedule import write_csv, write_schedule

EXIT_BAD_CONFIG = 1
EXIT_VIOLATIONS = 2


def _resolve(p: str) -> Path:
    pp = Path(p)
    if pp.is_absolute():
        return pp
    return Path.cwd() / pp


def _config_from_args(args) -> RotationConfig:
    if getattr(args, "config", None):
        config = load_config(str(_resolve(args.config)))
    elif getattr(args, "workbook", None):
        config = parse_workbook(str(_resolve(args.workbook)))
    else:
        config = RotationConfig()
    overrides = {
        name: getattr(args, name)
        for name in ("work_days", "rest_days", "induction_days", "total_days")
        if getattr(args, name, None) is not None
    }
    return dataclasses.replace(config, **overrides)


def _load_checked(args) -> RotationConfig:
    try:
        config = _config_from_args(args)
    except (ConfigError, FileNotFoundError) as e:
        print(f"Config error: {e}")
        sys.exit(EXIT_BAD_CONFIG)
    ok, msgs = check_config(config)
    if not ok:
        print("Invalid configuration:")
        for m in msgs:
            print(f"  {m}")
        sys.exit(EXIT_BAD_CONFIG)
    return config


def _print_config(config: RotationConfig) -> None:
    print(f"  Work days (W):      {config.work_days}")
    print(f"  Rest days (R):      {config.rest_days}")
    print(f"  Induction days (I): {config.induction_days}")
    print(f"  Total days (H):     {config.total_days}")
    print(f"  Drilling ceiling:   {config.drilling_ceiling}")
    print(f"  Third entry day:    {config.third_entry_day + 1}")
    print(f"  Handover day:       {config.handover_day + 1}")


def _print_grid(result) -> None:
    counts = result.drilling_counts()
    width = len(str(len(counts)))
    for name, timeline in zip(("S1", "S2", "S3"), result.timelines()):
        print(f"  {name:<4}" + "".join(s.value for s in timeline))
    print(f"  {'#P':<4}" + "".join(str(c) for c in counts))
    if width > 1:
        print(f"  {'':<4}" + "".join(str((d + 1) % 10) for d in range(len(counts))))


def cmd_setup(args):
    """Create or refresh the CONFIG sheet in the workbook."""
    wb_path = str(_resolve(args.workbook))
    print(f"Setting up CONFIG sheet in: {wb_path}")
    setup_workbook(wb_path, overwrite=args.overwrite)
    print("Done — edit the Value column, then run 'solve --workbook ...'.")


def cmd_dry_run(args):
    """Validate the parameters without scheduling."""
    config = _load_checked(args)
    print("Configuration: OK")
    _print_config(config)
    warnings = support_warnings(config)
    if warnings:
        print("\nWarning:")
        for w in warnings:
            print(f"  {w}")


def cmd_solve(args):
    """Build the schedule, report violations and write exports."""
    config = _load_checked(args)
    _print_config(config)
    for w in support_warnings(config):
        print(f"\nWarning — {w}")

    result = run(config)
    print("")
    _print_grid(result)
    print("\nSummary:")
    for line in summary_lines(result):
        print(line)

    if result.is_valid:
        print("\n  Validation: OK")
    else:
        print(f"\n  Validation: {len(result.violations)} issue(s)")
        for v in result.violations[:15]:
            print(f"    Day {v.display_day}: {v.message}")
        if len(result.violations) > 15:
            print(f"    ... and {len(result.violations) - 15} more")

    if args.out:
        out_path = write_schedule(result, str(_resolve(args.out)))
        print(f"\nWorkbook written to: {out_path}")
        # keep the parameters with the output so it can be re-run
        setup_workbook(out_path, config)
    if args.csv is not None:
        csv_path = write_csv(result, str(_resolve(args.csv)) if args.csv else None)
        print(f"CSV written to: {csv_path}")

    if not result.is_valid:
        sys.exit(EXIT_VIOLATIONS)
    print("Done.")


def _add_config_args(p):
    src = p.add_mutually_exclusive_group()
    src.add_argument("--config", help="JSON or .xlsx config file")
    src.add_argument("--workbook", help="Workbook with a CONFIG sheet")
    p.add_argument("--work-days", dest="work_days", type=int, default=None)
    p.add_argument("--rest-days", dest="rest_days", type=int, default=None)
    p.add_argument("--induction-days", dest="induction_days", type=int, default=None)
    p.add_argument("--total-days", dest="total_days", type=int, default=None)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Rotation — three-supervisor drilling schedule",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    sub = parser.add_subparsers(dest="command", help="Command")

    # setup
    p_setup = sub.add_parser("setup", help="Create/refresh the CONFIG sheet")
    p_setup.add_argument("--workbook", required=True, help="Workbook path")
    p_setup.add_argument("--overwrite", action="store_true",
                         help="Replace an existing CONFIG sheet with defaults")

    # dry-run
    p_dry = sub.add_parser("dry-run", help="Validate parameters only")
    _add_config_args(p_dry)

    # solve
    p_solve = sub.add_parser("solve", help="Build the schedule and export it")
    _add_config_args(p_solve)
    p_solve.add_argument("--out", default=None, help="Output .xlsx path")
    p_solve.add_argument("--csv", nargs="?", const="", default=None,
                         help="Output .csv path (default name if no value given)")

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        sys.exit(1)

    dispatch = {
        "setup": cmd_setup,
        "dry-run": cmd_dry_run,
        "solve": cmd_solve,
    }
    dispatch[args.command](args)


if __name__ == "__main__":
    main()
