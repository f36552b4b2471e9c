#!/usr/bin/env python3
"""Enforce barrel export budgets and layer import hygiene."""

from __future__ import annotations

import argparse
import ast
from pathlib import Path


DEFAULT_BUDGETS = {
    "inertia/__init__.py": 5,
    "inertia/api/__init__.py": 40,
    "inertia/runtime/__init__.py": 25,
}


def _extract_all_count(tree: ast.Module) -> int | None:
    for node in tree.body:
        if isinstance(node, ast.Assign):
            for target in node.targets:
                if isinstance(target, ast.Name) and target.id == "__all__":
                    if isinstance(node.value, (ast.List, ast.Tuple)):
                        return len(node.value.elts)
    return None


def _imported_modules(tree: ast.Module) -> list[str]:
    return [str(node.module or "") for node in tree.body if isinstance(node, ast.ImportFrom)]


def main() -> int:
    parser = argparse.ArgumentParser(description="Check barrel export budgets.")
    parser.parse_args()

    violations: list[str] = []
    for rel_path, budget in DEFAULT_BUDGETS.items():
        path = Path(rel_path)
        if not path.exists():
            continue
        tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
        count = _extract_all_count(tree)
        if count is not None and count > budget:
            violations.append(f"{rel_path}: __all__ size {count} exceeds budget {budget}")

        modules = _imported_modules(tree)
        if rel_path == "inertia/api/__init__.py":
            if any(module.startswith("inertia.runtime") for module in modules):
                violations.append(f"{rel_path}: api barrel imports inertia.runtime.*")
        if rel_path == "inertia/runtime/__init__.py":
            if any(module.startswith("inertia.api") for module in modules):
                violations.append(f"{rel_path}: runtime barrel imports inertia.api.*")

    if violations:
        print("Barrel export budget violations:")
        for line in violations:
            print(f"  {line}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
