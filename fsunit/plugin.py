"""
pytest plugin providing the ``fs_sandbox`` fixture.

Loaded automatically through the ``pytest11`` entry point once fsunit is
installed:

    def test_export(fs_sandbox):
        export_report(fs_sandbox / "out")
        assert_file_exists("out/report.txt")
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from fsunit.config import reset_settings
from fsunit.sandbox import sandbox_session


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("fsunit")
    group.addoption(
        "--fsunit-keep",
        action="store_true",
        default=False,
        help="Leave sandbox trees on disk after each test for inspection.",
    )


@pytest.fixture
def fs_sandbox(
    request: pytest.FixtureRequest, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Iterator[Path]:
    """A fresh sandbox rooted under the test's tmp_path."""
    if request.config.getoption("fsunit_keep"):
        monkeypatch.setenv("FSUNIT_KEEP", "1")
    reset_settings()
    try:
        with sandbox_session(tmp_path / "unit") as root:
            yield root
    finally:
        reset_settings()
