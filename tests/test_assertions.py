"""Tests for the sandbox assertion helpers."""
from __future__ import annotations

from pathlib import Path

import pytest

from fsunit import assertions as fa
from fsunit import sandbox
from fsunit.exceptions import SandboxAssertionError


@pytest.fixture
def populated(sandbox_root: Path) -> Path:
    sandbox.add_folder("out/nested")
    sandbox.add_file("a.txt", folder="out")
    sandbox.add_file("b.txt", folder="out")
    sandbox.set_content("a.txt", "hello", folder="out")
    return sandbox_root


def test_assert_init_ok(sandbox_root: Path) -> None:
    fa.assert_init_ok()
    sandbox.clear_sandbox()
    with pytest.raises(SandboxAssertionError, match="must exist"):
        fa.assert_init_ok()


def test_exists_and_not_exists(populated: Path) -> None:
    fa.assert_file_exists("out/a.txt")
    fa.assert_file_exists("a.txt", folder="out")
    fa.assert_file_not_exists("out/c.txt")

    with pytest.raises(SandboxAssertionError, match=r"\{out/c.txt\} must exist"):
        fa.assert_file_exists("c.txt", folder="out")
    with pytest.raises(SandboxAssertionError, match="must not exist"):
        fa.assert_file_not_exists("out/a.txt")


def test_delete_then_not_exists(populated: Path) -> None:
    sandbox.delete("out/a.txt")
    fa.assert_file_not_exists("out/a.txt")


def test_is_file_and_is_directory(populated: Path) -> None:
    fa.assert_is_file("out/a.txt")
    fa.assert_is_file("a.txt", folder="out")
    fa.assert_is_directory("out/nested")

    with pytest.raises(SandboxAssertionError, match="must be a file"):
        fa.assert_is_file("out/nested")
    with pytest.raises(SandboxAssertionError, match="must be a directory") as excinfo:
        fa.assert_is_directory("out/a.txt")
    assert excinfo.value.code == "not_a_directory"


def test_failures_are_assertion_errors(populated: Path) -> None:
    """Test runners count these as failures, not errors."""
    with pytest.raises(AssertionError):
        fa.assert_file_exists("ghost")


def test_directory_contains(populated: Path) -> None:
    fa.assert_directory_contains("out", "a.txt")
    fa.assert_directory_contains("out", "nested")

    with pytest.raises(SandboxAssertionError, match="must contain the file z.txt"):
        fa.assert_directory_contains("out", "z.txt")
    # Only direct children count.
    with pytest.raises(SandboxAssertionError):
        fa.assert_directory_contains(".", "a.txt")


def test_directory_contains_requires_directory(populated: Path) -> None:
    with pytest.raises(SandboxAssertionError, match="must be a directory"):
        fa.assert_directory_contains("out/a.txt", "a.txt")


def test_directory_size(populated: Path) -> None:
    fa.assert_directory_size("out", 3)
    fa.assert_directory_size("out/nested", 0)

    with pytest.raises(SandboxAssertionError, match="must contain 2 files but contains 3") as excinfo:
        fa.assert_directory_size("out", 2)
    assert "nested, a.txt, b.txt" in str(excinfo.value)
    assert excinfo.value.expected == 2
    assert excinfo.value.actual == 3


def test_file_content_equals(populated: Path) -> None:
    fa.assert_file_content_equals("out/a.txt", "hello")
    fa.assert_file_content_equals("a.txt", "hello", folder="out")
    fa.assert_file_content_equals("out/b.txt", "")

    with pytest.raises(SandboxAssertionError, match="must be 'bye'") as excinfo:
        fa.assert_file_content_equals("out/a.txt", "bye")
    assert excinfo.value.details["actual"] == "hello"


def test_file_content_requires_file(populated: Path) -> None:
    with pytest.raises(SandboxAssertionError, match="must be a file"):
        fa.assert_file_content_equals("out/missing.txt", "")


def test_file_size_equals(populated: Path) -> None:
    fa.assert_file_size_equals("out/a.txt", 5)
    fa.assert_file_size_equals("out/b.txt", 0)
    with pytest.raises(SandboxAssertionError, match="must be 4 but is actually 5"):
        fa.assert_file_size_equals("out/a.txt", 4)


def test_file_size_bounds_are_strict(populated: Path) -> None:
    fa.assert_file_size_lower_than("out/a.txt", 6)
    fa.assert_file_size_greater_than("out/a.txt", 4)

    with pytest.raises(SandboxAssertionError, match="must be lower than 5"):
        fa.assert_file_size_lower_than("out/a.txt", 5)
    with pytest.raises(SandboxAssertionError, match="must be greater than 5"):
        fa.assert_file_size_greater_than("out/a.txt", 5)


def test_file_size_requires_file(populated: Path) -> None:
    with pytest.raises(SandboxAssertionError, match="must be a file"):
        fa.assert_file_size_greater_than("out/nested", 0)


def test_keyword_arguments(populated: Path) -> None:
    fa.assert_directory_size(folder="out", count=3)
    fa.assert_file_content_equals(path="a.txt", expected="hello", folder="out")
