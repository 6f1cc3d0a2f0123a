"""Pytest configuration: project root on sys.path and an isolated sandbox per test."""

import sys
from pathlib import Path

import pytest

# Ensure the project root is in sys.path for proper imports with pytest-xdist
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from fsunit.config import reset_settings  # noqa: E402
from fsunit import sandbox  # noqa: E402


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    for name in ("FSUNIT_ROOT", "FSUNIT_ENCODING", "FSUNIT_KEEP", "FSUNIT_SNAPSHOT_DEPTH"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(sandbox, "_root", None)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def sandbox_root(tmp_path: Path):
    with sandbox.sandbox_session(tmp_path / "unit") as root:
        yield root
