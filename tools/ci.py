#!/usr/bin/env python3
# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the CI pipeline locally: formatting, linting, tests and a generator smoke run."""

import argparse
import subprocess
import sys
import tempfile
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

SAMPLE_IR = "tests/data/widgets.yaml"


def steps(output_dir: str) -> list[tuple[str, list[str]]]:
    """Return the CI steps as (name, command) pairs."""
    return [
        ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/"]),
        ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/"]),
        ("Tests", ["uv", "run", "pytest", "--cov=wiremap", "--cov-report=term-missing"]),
        ("Check sample IR", ["uv", "run", "wiremap", "check", SAMPLE_IR]),
        ("Generate sample IR", ["uv", "run", "wiremap", "generate", SAMPLE_IR, "--output", output_dir]),
        ("Build", ["uv", "build"]),
    ]


def main() -> int:
    """Run the CI steps and print a summary."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--fail-fast", action="store_true", help="Stop at the first failing step")
    args = parser.parse_args()

    results: list[tuple[str, bool, float]] = []
    with tempfile.TemporaryDirectory(prefix="wiremap-ci-") as output_dir:
        for name, cmd in steps(output_dir):
            _banner(name)
            start = time.monotonic()
            proc = subprocess.run(cmd, cwd=_REPO_ROOT)
            results.append((name, proc.returncode == 0, time.monotonic() - start))
            if args.fail_fast and proc.returncode != 0:
                break

    _banner("  Summary")
    for name, passed, elapsed in results:
        color = chalk.green if passed else chalk.red
        print(color(f"  {'PASS' if passed else 'FAIL'}  {name} ({elapsed:.1f}s)"))
    print()
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################

_REPO_ROOT = Path(__file__).resolve().parent.parent


def _banner(title: str) -> None:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}")
    print(chalk.blue(title))
    print(sep)


if __name__ == "__main__":
    sys.exit(main())
