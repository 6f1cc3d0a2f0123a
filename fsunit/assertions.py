"""
Assertions about the sandbox tree.

Every helper raises SandboxAssertionError (an AssertionError) when the
property does not hold:

    from fsunit.assertions import assert_file_content_equals, assert_zip_contains

    assert_file_content_equals("out/report.txt", "done")
    assert_zip_contains("out/bundle.zip", "manifest.json", "data/rows.csv")
"""

from __future__ import annotations

import logging
from typing import Optional

from fsunit.archive import zip_entries
from fsunit.exceptions import SandboxAssertionError
from fsunit.sandbox import (
    PathLike,
    display_path,
    get_content,
    get_file,
    get_root,
    io_failure,
    require_directory,
    require_file,
)
from fsunit.snapshot import list_dir

logger = logging.getLogger(__name__)


def assert_init_ok() -> None:
    """The sandbox root has been created."""
    root = get_root()
    if not root.is_dir():
        raise SandboxAssertionError(
            f"The sandbox root {{{root}}} must exist", path=str(root), code="init_failed"
        )


def assert_file_exists(path: PathLike, folder: Optional[PathLike] = None) -> None:
    if not get_file(path, folder).exists():
        name = display_path(path, folder)
        raise SandboxAssertionError(f"The file {{{name}}} must exist", path=name, code="missing")


def assert_file_not_exists(path: PathLike, folder: Optional[PathLike] = None) -> None:
    if get_file(path, folder).exists():
        name = display_path(path, folder)
        raise SandboxAssertionError(
            f"The file {{{name}}} must not exist", path=name, code="unexpected"
        )


def assert_is_file(path: PathLike, folder: Optional[PathLike] = None) -> None:
    require_file(path, folder)


def assert_is_directory(path: PathLike, folder: Optional[PathLike] = None) -> None:
    require_directory(path, folder)


def assert_directory_contains(folder: PathLike, name: str) -> None:
    """The folder has a direct child called ``name``."""
    target = require_directory(folder)
    with io_failure("list", str(folder)):
        found = any(child.name == name for child in target.iterdir())
    if not found:
        raise SandboxAssertionError(
            f"The directory {{{folder}}} must contain the file {name}",
            path=str(folder),
            expected=name,
            code="not_in_directory",
        )


def assert_directory_size(folder: PathLike, count: int) -> None:
    """The folder has exactly ``count`` direct children, files and folders alike."""
    entries = list_dir(folder)
    size = len(entries)
    if size != count:
        listing = ", ".join(entry.name for entry in entries) or "nothing"
        raise SandboxAssertionError(
            f"The directory {{{folder}}} must contain {count} files "
            f"but contains {size} files ({listing})",
            path=str(folder),
            expected=count,
            actual=size,
            code="directory_size",
        )


def assert_file_content_equals(
    path: PathLike, expected: str, folder: Optional[PathLike] = None
) -> None:
    """The text content, read as get_content() reads it, equals the expectation."""
    content = get_content(path, folder)
    if content != expected:
        name = display_path(path, folder)
        raise SandboxAssertionError(
            f"The content of {{{name}}} must be {expected!r} "
            f"but its content is {content!r}",
            path=name,
            expected=expected,
            actual=content,
            code="content",
        )


def _file_size(path: PathLike) -> int:
    target = require_file(path)
    with io_failure("stat", str(path)):
        return target.stat().st_size


def assert_file_size_equals(path: PathLike, size: int) -> None:
    actual_size = _file_size(path)
    if actual_size != size:
        raise SandboxAssertionError(
            f"The size of {{{path}}} must be {size} but is actually {actual_size}",
            path=str(path),
            expected=size,
            actual=actual_size,
            code="size",
        )


def assert_file_size_lower_than(path: PathLike, size: int) -> None:
    """Strictly lower: a file of exactly ``size`` bytes fails."""
    actual_size = _file_size(path)
    if actual_size >= size:
        raise SandboxAssertionError(
            f"{path} must be lower than {size} but was actually {actual_size}",
            path=str(path),
            expected=size,
            actual=actual_size,
            code="size",
        )


def assert_file_size_greater_than(path: PathLike, size: int) -> None:
    """Strictly greater: a file of exactly ``size`` bytes fails."""
    actual_size = _file_size(path)
    if actual_size <= size:
        raise SandboxAssertionError(
            f"{path} must be greater than {size} but was actually {actual_size}",
            path=str(path),
            expected=size,
            actual=actual_size,
            code="size",
        )


def assert_zip_contains(path: PathLike, *files: str) -> None:
    """Every name in ``files`` is an entry of the zip archive.

    With no names the archive is not even opened.
    """
    if not files:
        return
    entries = set(zip_entries(path))
    for file in files:
        if file not in entries:
            raise SandboxAssertionError(
                f"The zip {{{path}}} must contain {file}",
                path=str(path),
                expected=file,
                code="not_in_zip",
            )
    logger.debug("zip %s contains %s", path, ", ".join(files))


__all__ = [
    "assert_init_ok",
    "assert_file_exists",
    "assert_file_not_exists",
    "assert_is_file",
    "assert_is_directory",
    "assert_directory_contains",
    "assert_directory_size",
    "assert_file_content_equals",
    "assert_file_size_equals",
    "assert_file_size_lower_than",
    "assert_file_size_greater_than",
    "assert_zip_contains",
]
