"""
Pytest configuration and fixtures for hashset tests.

Provides reusable fixtures for:
- Building sets from small literals
- Writing element files
- Running the setcalc command line tool
"""

import pytest
import subprocess
import os
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from hashset import Set


class SetCalcResult:
    """Result of running setcalc."""

    def __init__(self, returncode: int, stdout: str, stderr: str):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr

    @property
    def success(self) -> bool:
        return self.returncode == 0


@pytest.fixture
def project_root():
    """Path to project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def sample_sets():
    """A few small sets used across algebra tests."""
    return [
        Set(),
        Set([1]),
        Set([1, 2, 3]),
        Set([2, 3, 4]),
        Set([3, 4, 5, 6]),
        Set(range(10)),
    ]


@pytest.fixture
def element_file(tmp_path):
    """
    Fixture that returns a function to write an element file.

    Usage:
        path = element_file("a.txt", ["x", "y"])
    """
    def _write(name: str, lines) -> str:
        path = tmp_path / name
        path.write_text("".join(f"{line}\n" for line in lines))
        return str(path)

    return _write


@pytest.fixture
def run_setcalc(project_root):
    """
    Fixture that runs setcalc.py in a subprocess.

    Usage:
        result = run_setcalc("union", a_path, b_path, "--int")
        assert result.success
        assert result.stdout == "{ 1, 2 }\n"
    """
    def _run(*args) -> SetCalcResult:
        script = os.path.join(project_root, "setcalc.py")
        result = subprocess.run(
            [sys.executable, script] + list(args),
            capture_output=True,
            text=True,
            cwd=project_root
        )
        return SetCalcResult(result.returncode, result.stdout, result.stderr)

    return _run
