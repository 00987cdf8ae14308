#!/usr/bin/env python3
"""
Run the reference rotation scenarios and report coverage violations.

Usage:
  python verify_scenarios.py
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from rotation.engine import run
from rotation.models import RotationConfig
from rotation.validate import longest_drilling_run

SCENARIOS = [
    ("14x7, Ind 5", RotationConfig(work_days=14, rest_days=7, induction_days=5, total_days=40)),
    ("21x7, Ind 3", RotationConfig(work_days=21, rest_days=7, induction_days=3, total_days=60)),
    ("10x5, Ind 2", RotationConfig(work_days=10, rest_days=5, induction_days=2, total_days=30)),
    ("14x6, Ind 4", RotationConfig(work_days=14, rest_days=6, induction_days=4, total_days=40)),
    ("7x7, Ind 1", RotationConfig(work_days=7, rest_days=7, induction_days=1, total_days=30)),
]


def main():
    print("=== RUNNING VERIFICATION ===")
    failed = 0
    for name, config in SCENARIOS:
        print(f"\nTesting {name}...")
        result = run(config)
        print(f"  Violations found: {len(result.violations)}")
        print(f"  Longest run S2/S3: {longest_drilling_run(result.second)}/"
              f"{longest_drilling_run(result.third)} (ceiling {config.drilling_ceiling})")
        if result.violations:
            failed += 1
            for v in result.violations[:3]:
                print(f"    Day {v.display_day}: {v.message}")
        else:
            print("  SUCCESS: No violations.")
    print(f"\n{len(SCENARIOS) - failed}/{len(SCENARIOS)} scenarios clean.")
    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
