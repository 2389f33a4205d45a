#!/usr/bin/env python3
# Copyright 2026 Oxy Python Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run all CI checks locally: format, lint, type check, tests, and build.

Pass step names (case-insensitive) to run a subset, e.g. ``tools/ci.py lint tests``.
"""

import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: list[tuple[str, list[str]]] = [
    ("Format", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    ("Types", ["uv", "run", "ty", "check", "src/"]),
    ("Tests", ["uv", "run", "pytest", "--cov=oxypy", "--cov-report=term-missing"]),
    ("Build", ["uv", "build"]),
]


def main(argv: list[str]) -> int:
    """Run the selected CI steps (all by default) and report a summary."""
    try:
        steps = _select_steps(argv)
    except KeyError as exc:
        print(chalk.red(f"Unknown step: {exc.args[0]}"), file=sys.stderr)
        return 2

    results: list[tuple[str, bool, float]] = []
    for name, cmd in steps:
        _banner(name)
        start = time.monotonic()
        proc = subprocess.run(cmd, cwd=_repo_root())
        results.append((name, proc.returncode == 0, time.monotonic() - start))

    _banner("Summary")
    for name, passed, elapsed in results:
        status = "PASS" if passed else "FAIL"
        paint = chalk.green if passed else chalk.red
        print(paint(f"  {status}  {name} ({elapsed:.1f}s)"))

    print()
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################


def _select_steps(names: list[str]) -> list[tuple[str, list[str]]]:
    if not names:
        return STEPS
    by_name = {name.lower(): (name, cmd) for name, cmd in STEPS}
    return [by_name[name.lower()] for name in names]


def _banner(title: str) -> None:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}")
    print(chalk.blue(f"  {title}"))
    print(sep)


def _repo_root() -> Path:
    return Path(__file__).parent.parent


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
