"""Pytest configuration.

Run pytest from the project root; pythonpath in pyproject.toml puts src/ on
sys.path.
"""

import json
from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def write_batch(tmp_path: Path) -> Callable[[str, object], Path]:
    """Return a helper that writes a JSON batch file under tmp_path."""

    def _write(name: str, payload: object) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write
