"""Tests to verify the integrity of the package source."""

import ast
from pathlib import Path

import coreason_move_agent

PACKAGE_DIR = Path(coreason_move_agent.__file__).parent


def test_package_source_has_no_assert_statements() -> None:
    """Runtime checks must survive `python -O`, so library code never relies on assert."""
    offenders = []
    for path in sorted(PACKAGE_DIR.rglob("*.py")):
        tree = ast.parse(path.read_text(encoding="utf-8"))
        offenders.extend(f"{path.name}:{node.lineno}" for node in ast.walk(tree) if isinstance(node, ast.Assert))

    assert offenders == []
