#!/usr/bin/env python3
"""
Check that kpt_board packages only import from layers at or below their own.

c1 packages hold entities, schemas and policy; c2 holds stores and services;
c3 holds HTTP routes. core/ and api/ sit outside the layering.
"""

import ast
import sys
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

PACKAGE_NAME = "kpt_board"
DEFAULT_PACKAGE_DIR = Path(__file__).resolve().parent.parent / PACKAGE_NAME

# Layer -> kpt_board layers it may import ("other" is always allowed)
ALLOWED_IMPORTS = {
    "c1": {"c1"},
    "c2": {"c1", "c2"},
    "c3": {"c1", "c2", "c3"},
}


def extract_imports(file_path: Path) -> List[str]:
    """Return the kpt_board modules imported by a file."""
    try:
        tree = ast.parse(file_path.read_text(), filename=str(file_path))
    except SyntaxError as e:
        print(f"⚠️  Skipping {file_path}: {e}")
        return []

    return [module for module in _imported_modules(tree) if module.startswith(f"{PACKAGE_NAME}.")]


def _imported_modules(tree: ast.AST) -> Iterator[str]:
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            yield from (alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module:
            yield node.module


def get_layer(package_name: str) -> str:
    """Map a top-level subpackage name to c1/c2/c3, or 'other'."""
    prefix = package_name.split("_", 1)[0]
    return prefix if prefix in ALLOWED_IMPORTS else "other"


def validate_layer_dependencies(package_dir: Optional[Path] = None) -> Tuple[bool, List[str]]:
    """Return (ok, violations) for every module under package_dir."""
    package_dir = package_dir or DEFAULT_PACKAGE_DIR
    if not package_dir.exists():
        return True, []

    violations = []
    for py_file in sorted(package_dir.rglob("*.py")):
        parts = py_file.relative_to(package_dir).parts
        if len(parts) < 2:
            continue

        allowed = ALLOWED_IMPORTS.get(get_layer(parts[0]))
        if allowed is None:
            continue

        for imported_module in extract_imports(py_file):
            imported_layer = get_layer(imported_module.split(".")[1])
            if imported_layer != "other" and imported_layer not in allowed:
                violations.append(
                    f"{py_file}: {get_layer(parts[0])} cannot import from {imported_layer} ({imported_module})"
                )

    return not violations, violations


def main():
    print(f"Checking {PACKAGE_NAME} layer imports")
    for layer, allowed in ALLOWED_IMPORTS.items():
        print(f"  {layer} may import: {', '.join(sorted(allowed))}")
    print()

    success, violations = validate_layer_dependencies()
    if success:
        print("✅ No layer violations")
        return 0

    print(f"❌ {len(violations)} layer violation(s):")
    for violation in violations:
        print(f"  - {violation}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
