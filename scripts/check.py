#!/usr/bin/env python3
"""Composite quality checks for local and CI use."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from pathlib import Path

POLICY_SCRIPTS = (
    "scripts/check_env_read_placement.py",
    "scripts/check_barrel_exports.py",
)


def _run_checked(*, label: str, command: list[str], env: dict[str, str]) -> None:
    print(label, flush=True)
    completed = subprocess.run(command, env=env, check=False)
    if completed.returncode != 0:
        raise SystemExit(f"{label} failed with exit code {completed.returncode}.")


def main() -> int:
    parser = argparse.ArgumentParser(description="Run repository quality checks.")
    parser.add_argument("--skip-lint-format-typecheck", action="store_true")
    parser.add_argument("--skip-policy", action="store_true")
    parser.add_argument("--skip-tests", action="store_true")
    args = parser.parse_args()

    root = Path(__file__).resolve().parent.parent
    os.chdir(root)

    env = os.environ.copy()
    env["PYTHONPATH"] = "."

    if not args.skip_lint_format_typecheck:
        _run_checked(label="Running ruff...", command=["uv", "run", "ruff", "check", "."], env=env)
        _run_checked(label="Running mypy...", command=["uv", "run", "mypy"], env=env)

    if not args.skip_policy:
        for script in POLICY_SCRIPTS:
            _run_checked(label=f"Running {script}...", command=[sys.executable, script], env=env)

    if not args.skip_tests:
        _run_checked(
            label="Running detector tests with coverage gate...",
            command=[
                "uv",
                "run",
                "pytest",
                "tests/inertia",
                "--cov=inertia",
                "--cov-report=term-missing",
                "--cov-fail-under=90",
            ],
            env=env,
        )

    print("All selected checks passed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
