#!/usr/bin/env python3
"""
Run lint, type and test checks for the predicates package.

Usage: python scripts/quality_gates.py [gate ...]
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent

CHECKS: dict[str, list[str]] = {
    "lint": ["ruff", "check", "."],
    "types": ["mypy", "predicates"],
    "tests": ["pytest", "-q"],
}


def run_check(name: str) -> bool:
    command = [sys.executable, "-m", *CHECKS[name]]
    try:
        completed = subprocess.run(command, cwd=PROJECT_ROOT)
    except OSError as e:
        print(f"{name}: could not start ({e})")
        return False
    ok = completed.returncode == 0
    print(f"{name}: {'ok' if ok else 'failed'}")
    return ok


def main(argv: list[str] | None = None) -> int:
    names = argv if argv is not None else sys.argv[1:]
    names = names or list(CHECKS)

    unknown = [n for n in names if n not in CHECKS]
    if unknown:
        print(f"Unknown checks: {', '.join(unknown)} (choose from {', '.join(CHECKS)})")
        return 2

    results = [run_check(name) for name in names]
    return 0 if all(results) else 1


if __name__ == "__main__":
    sys.exit(main())
