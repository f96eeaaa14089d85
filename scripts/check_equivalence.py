#!/usr/bin/env python3
"""
Check the MAC circuit against its reference model

Runs the equivalence property once per configured cycle count and prints a
shrunk counterexample on failure. Optionally runs the fixed-vector test bench
and the MyHDL circuit as well.
"""

import argparse
import logging
import sys

from moore_mac.config import ConfigLoader, VerificationConfig
from moore_mac.hdl.sim import sample_testbench, simulate_rtl
from moore_mac.verify.property import check_property

logging.basicConfig(
    level=logging.INFO,
    format='%(levelname)s: %(message)s'
)
logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Check the MAC circuit against the running-sum reference model"
    )
    parser.add_argument(
        "--config",
        help="YAML verification config (default: built-in defaults)"
    )
    parser.add_argument(
        "--cycles",
        type=int,
        action="append",
        help="Maximum trace length; repeat for several runs (overrides config)"
    )
    parser.add_argument("--tests", type=int, help="Tests per run (overrides config)")
    parser.add_argument("--seed", type=int, help="Random seed (overrides config)")
    parser.add_argument(
        "--rtl",
        action="store_true",
        help="Also check the MyHDL circuit (uses rtl_tests per run)"
    )
    parser.add_argument(
        "--testbench",
        action="store_true",
        help="Also run the fixed-vector test bench"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        config = ConfigLoader.load_config(args.config) if args.config else VerificationConfig()
        config = ConfigLoader.apply_env(config)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        return 2

    cycle_configs = args.cycles or config.cycle_configs
    tests = args.tests if args.tests is not None else config.tests
    seed = args.seed if args.seed is not None else config.seed

    if tests < 0:
        logger.error(f"--tests must be non-negative, got {tests}")
        return 2

    failed = False

    if args.testbench:
        flags = sample_testbench()
        if any(flags):
            print(f"Test bench FAILED: failure flag per cycle {flags}")
            failed = True
        else:
            print(f"Test bench OK ({len(flags)} cycles)")

    runs = [("model", tests, None)]
    if args.rtl:
        runs.append(("rtl", config.rtl_tests, simulate_rtl))

    for name, run_tests, circuit in runs:
        if run_tests == 0:
            continue
        for cycles in cycle_configs:
            kwargs = {"circuit": circuit} if circuit is not None else {}
            result = check_property(
                cycles,
                tests=run_tests,
                seed=seed,
                fmt=config.fmt,
                shrink_limit=config.max_shrinks,
                **kwargs,
            )
            print(f"[{name}] circuit == spec ({cycles} cycles): {result.summary()}")
            failed = failed or not result.ok

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
