"""Utility functions for integration tests."""

import subprocess
from pathlib import Path


def git(*args: str, cwd: Path) -> str:
    """Run git in `cwd`, failing the test on error.

    Returns:
        str: The command's standard output.
    """
    result = subprocess.run(["git", *args], cwd=cwd, capture_output=True, text=True)
    assert result.returncode == 0, f"git {' '.join(args)} failed: {result.stderr}"
    return result.stdout
