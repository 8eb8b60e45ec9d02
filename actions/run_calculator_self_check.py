#!/usr/bin/env python3
"""
Run the calculator self-check.

**Purpose**: Verify the calculator end to end outside of pytest: the fixed
scenario table (add(2, 3) == 5, divide(7, 3) == 2, divide(5, 0) == 0, ...) and
the algebraic properties on seeded random samples. Progress is printed per
operation group.

**Exit codes**:
  - 0: every check passed.
  - 1: a group failed. The run stops at the first failing group and prints
       each failing check with what was observed.

**Usage**:
    python actions/run_calculator_self_check.py
    python actions/run_calculator_self_check.py --samples 5000 --seed 7
    python actions/run_calculator_self_check.py --save

**Outputs** (only with --save, written to CALCULATOR_RESULTS_DIR):
  - calculator_self_check_<YYYYMMDDTHHMMSSZ>.csv: one row per check.

Sample count and seed default to CALCULATOR_PROPERTY_SAMPLES and
CALCULATOR_RANDOM_SEED (see src/config/settings.py).
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

# Ensure project root is on path for imports
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from src.calculator.checks import (
    CHECK_GROUPS,
    CheckResult,
    results_to_frame,
    run_property_checks,
    run_scenario_checks,
)
from src.config.settings import get_settings
from src.utils.time import Clock, RealClock, format_run_stamp


def save_results(results: List[CheckResult], results_dir: Path, clock: Clock) -> Path:
    """
    Write check results to a timestamped CSV under results_dir.

    Args:
        results: Every check evaluated in this run.
        results_dir: Output directory (created if missing).
        clock: Source of the run timestamp (file name and checked_at column).

    Returns:
        Path of the written CSV.
    """
    checked_at = clock.now()
    results_dir.mkdir(parents=True, exist_ok=True)

    path = results_dir / f"calculator_self_check_{format_run_stamp(checked_at)}.csv"
    results_to_frame(results, checked_at).to_csv(path, index=False)
    return path


def run_self_check(
    samples: int,
    seed: int,
    save: bool = False,
    results_dir: Optional[Path] = None,
    clock: Optional[Clock] = None,
) -> int:
    """
    Evaluate all checks, print progress, and return the process exit code.

    Args:
        samples: Random pairs per property check.
        seed: Seed for the random draw.
        save: If True, write the results CSV to results_dir.
        results_dir: Output directory for --save. Required when save is True.
        clock: Clock for the saved timestamp. Defaults to RealClock.

    Returns:
        0 if every check passed, 1 otherwise.
    """
    print("=" * 80)
    print("Calculator Self-Check")
    print("=" * 80)
    print(f"  Property samples: {samples}  |  Seed: {seed}")
    print()

    results = run_scenario_checks() + run_property_checks(samples, seed)

    exit_code = 0
    for operation, label in CHECK_GROUPS:
        group = [r for r in results if r.operation == operation]
        failures = [r for r in group if not r.passed]

        if failures:
            print(f"✗ {label} checks failed ({len(failures)} of {len(group)})")
            for failure in failures:
                print(f"    {failure.name}: {failure.detail}")
            exit_code = 1
            break

        print(f"✓ {label} checks passed ({len(group)} checks)")

    if save:
        if results_dir is None:
            raise ValueError("results_dir is required when save=True")
        path = save_results(results, results_dir, clock or RealClock())
        print()
        print(f"  ✓ Saved results: {path}")

    print()
    if exit_code == 0:
        print("🎉 All checks passed!")
    else:
        print("Self-check FAILED")
    return exit_code


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Verify calculator scenarios and algebraic properties.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--samples",
        type=int,
        default=None,
        help="Random pairs per property check. Default: CALCULATOR_PROPERTY_SAMPLES.",
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed. Default: CALCULATOR_RANDOM_SEED.",
    )

    parser.add_argument(
        "--save",
        action="store_true",
        help="Write a results CSV to CALCULATOR_RESULTS_DIR.",
    )

    args = parser.parse_args(argv)
    if args.samples is not None and args.samples < 0:
        parser.error(f"--samples must be non-negative, got: {args.samples}")
    if args.seed is not None and args.seed < 0:
        parser.error(f"--seed must be non-negative, got: {args.seed}")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    """Main entrypoint: merge CLI flags over settings and run the self-check."""
    args = parse_args(argv)
    settings = get_settings().self_check

    samples = args.samples if args.samples is not None else settings.property_samples
    seed = args.seed if args.seed is not None else settings.random_seed

    return run_self_check(
        samples=samples,
        seed=seed,
        save=args.save,
        results_dir=settings.results_dir,
    )


if __name__ == "__main__":
    sys.exit(main())
