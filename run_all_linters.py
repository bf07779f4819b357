#!/usr/bin/env python3
"""Run every formatter, linter and the test suite in one go.

Steps, in order:
1. Black format check
2. isort import-order check
3. Ruff static checks
4. Pylint static analysis
5. pytest

Output of failing steps is repeated at the end.
"""

from pathlib import Path
import subprocess
import sys

ROOT = Path(__file__).parent

COMMANDS = [
    (["python", "-m", "black", ".", "--check"], "Black format check"),
    (["python", "-m", "isort", ".", "--check-only"], "isort import order"),
    (["python", "-m", "ruff", "check", "."], "Ruff"),
    (["python", "-m", "pylint", "trashcan"], "Pylint"),
    (["python", "-m", "pytest", "-q"], "pytest"),
]


def run_command(cmd: list[str], description: str) -> tuple[bool, str]:
    """Run one command and return (success, combined output)."""
    print(f"\n{'=' * 60}")
    print(f"Running: {description}")
    print(f"Command: {' '.join(cmd)}")
    print("=" * 60)

    try:
        result = subprocess.run(cmd, capture_output=True, text=True, check=False, cwd=ROOT)
    except OSError as e:
        print(f"Could not start: {e}")
        return False, str(e)

    success = result.returncode == 0
    output = result.stdout + result.stderr
    print("OK" if success else "FAILED")
    if output.strip():
        print("\nOutput:")
        print(output)
    return success, output


def main() -> None:
    results = [(description, *run_command(cmd, description)) for cmd, description in COMMANDS]

    print(f"\n{'=' * 60}")
    print("Summary")
    print("=" * 60)
    for description, success, _ in results:
        print(f"{description}: {'passed' if success else 'FAILED'}")

    failures = [(d, out) for d, success, out in results if not success]
    for description, output in failures:
        if output.strip():
            print(f"\n--- {description} ---")
            print(output)

    sys.exit(1 if failures else 0)


if __name__ == "__main__":
    main()
