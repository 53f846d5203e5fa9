"""Run every example script and compare stdout with its ``# =>`` markers."""

from __future__ import annotations

import ast
import difflib
import os
import subprocess
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]
EXAMPLES_ROOT = REPO_ROOT / "examples"
SRC_ROOT = REPO_ROOT / "src"
EXPECTED_MARKER = "# =>"


def _example_paths() -> list[Path]:
    return sorted(EXAMPLES_ROOT.glob("ex_*/01_*.py"))


def _expected_lines(path: Path) -> list[str]:
    """Collect the text after ``# =>`` on the closing line of each ``print`` call."""
    source = path.read_text(encoding="utf-8")
    source_lines = source.splitlines()
    calls = sorted(
        (
            node
            for node in ast.walk(ast.parse(source, filename=str(path)))
            if isinstance(node, ast.Call)
            and isinstance(node.func, ast.Name)
            and node.func.id == "print"
        ),
        key=lambda node: (node.lineno, node.col_offset),
    )

    expected: list[str] = []
    for call in calls:
        closing_line = source_lines[(call.end_lineno or call.lineno) - 1]
        assert EXPECTED_MARKER in closing_line, (
            f"{path}:{call.lineno}: print() must end with '{EXPECTED_MARKER} <output>'"
        )
        expected.append(closing_line.split(EXPECTED_MARKER, maxsplit=1)[1].strip())
    return expected


def test_examples_exist() -> None:
    assert _example_paths()


@pytest.mark.parametrize(
    "path",
    _example_paths(),
    ids=lambda path: str(path.relative_to(EXAMPLES_ROOT)),
)
def test_example_output_matches_markers(path: Path) -> None:
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(filter(None, (str(SRC_ROOT), env.get("PYTHONPATH"))))

    completed = subprocess.run(  # noqa: S603
        [sys.executable, str(path)],
        cwd=path.parent,
        env=env,
        capture_output=True,
        text=True,
        check=False,
    )

    expected = _expected_lines(path)
    actual = completed.stdout.splitlines()
    diff = "\n".join(difflib.unified_diff(expected, actual, "expected", "actual", lineterm=""))

    assert completed.returncode == 0, completed.stderr
    assert completed.stderr == ""
    assert actual == expected, diff
