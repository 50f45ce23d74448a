#!/usr/bin/env python
"""
Simple Test Runner for BinTreeLib
=================================

Runs the test suite, skipping slow large-tree tests unless asked.

Usage:
    python run_tests.py           # Run all non-slow tests
    python run_tests.py --slow    # List the slow tests
    python run_tests.py --all     # Run everything including slow tests
"""

import subprocess
import sys
import argparse
from pathlib import Path


def run_tests(include_slow=False):
    """Run the test suite."""
    cmd = [
        sys.executable, "-m", "pytest",
        "tests",
        "--tb=short",               # Short traceback format
        "--durations=5",            # Show 5 slowest tests
        "-v"                        # Verbose output
    ]

    if not include_slow:
        cmd.extend(["-m", "not slow"])
        print("Running all tests EXCEPT slow tests...")
    else:
        print("Running ALL tests including slow ones...")
    print("=" * 60)

    result = subprocess.run(cmd, cwd=Path(__file__).parent)
    return result.returncode


def show_slow_tests():
    """List the tests marked as slow."""
    cmd = [
        sys.executable, "-m", "pytest",
        "tests",
        "-m", "slow",
        "--collect-only", "-q",
    ]
    print("=" * 60)
    print("Tests marked with @pytest.mark.slow:")
    print("=" * 60)
    result = subprocess.run(cmd, cwd=Path(__file__).parent)
    return result.returncode


def main():
    parser = argparse.ArgumentParser(description="Test runner for BinTreeLib")
    parser.add_argument("--slow", action="store_true", help="List the slow tests")
    parser.add_argument("--all", action="store_true", help="Run all tests including slow ones")

    args = parser.parse_args()

    if args.slow:
        return show_slow_tests()

    return run_tests(include_slow=args.all)


if __name__ == "__main__":
    sys.exit(main())
