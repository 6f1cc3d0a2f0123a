"""
Process-wide filesystem sandbox for tests.

All helpers work on paths relative to one sandbox root. The root is
initialised once per test run (or per test, through the pytest plugin) and
cleared at the end:

    from fsunit import sandbox

    sandbox.init_sandbox()
    sandbox.add_folder("out")
    sandbox.add_file("report.txt", folder="out")
    sandbox.set_content("report.txt", "done", folder="out")
    sandbox.clear_sandbox()

Any OSError raised by the filesystem is turned into SandboxIOError, which
fails the running test.
"""

from __future__ import annotations

import logging
import shutil
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, Union

from fsunit.config import get_settings
from fsunit.exceptions import SandboxAssertionError, SandboxIOError, SandboxPathError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

_root: Optional[Path] = None


def init_sandbox(root: Optional[PathLike] = None) -> Path:
    """Set the sandbox root and create it if needed.

    Without an explicit root the configured one (FSUNIT_ROOT, else
    <tmpdir>/unit) is used. Returns the resolved root.
    """
    global _root
    base = Path(root).expanduser() if root is not None else get_settings().root
    _root = base.resolve(strict=False)
    _create_folder(_root, str(_root))
    logger.debug("sandbox initialised at %s", _root)
    return _root


def clear_sandbox() -> None:
    """Delete the sandbox root and everything created under it."""
    root = get_root()
    if get_settings().keep:
        logger.info("keeping sandbox tree at %s", root)
        return
    _delete(root, str(root))
    logger.debug("sandbox cleared at %s", root)


@contextmanager
def sandbox_session(root: Optional[PathLike] = None) -> Iterator[Path]:
    """Initialise the sandbox for the duration of a with-block."""
    path = init_sandbox(root)
    try:
        yield path
    finally:
        clear_sandbox()


def get_root() -> Path:
    if _root is None:
        return get_settings().root.resolve(strict=False)
    return _root


def get_root_folder() -> str:
    return str(get_root())


def get_file(path: PathLike, folder: Optional[PathLike] = None) -> Path:
    """Return the real path of ``path`` (inside ``folder``) in the sandbox.

    Absolute paths are accepted when they point inside the root.
    """
    root = get_root()
    candidate = Path(folder) / path if folder is not None else Path(path)
    candidate = candidate.expanduser()
    if not candidate.is_absolute():
        candidate = root / candidate
    resolved = candidate.resolve(strict=False)
    # Every helper goes through here, so nothing escapes the sandbox.
    if resolved == root or root in resolved.parents:
        return resolved
    raise SandboxPathError(
        f"path outside sandbox root: {display_path(path, folder)}",
        details={"root": str(root), "path": str(resolved)},
    )


def get_path(path: PathLike, folder: Optional[PathLike] = None) -> str:
    return str(get_file(path, folder))


def display_path(path: PathLike, folder: Optional[PathLike] = None) -> str:
    """Sandbox-relative name used in failure messages."""
    if folder is None:
        return str(path)
    return f"{folder}/{path}"


def open_input(path: PathLike, folder: Optional[PathLike] = None) -> BinaryIO:
    """Open a buffered binary stream on a sandbox file. The caller closes it."""
    target = get_file(path, folder)
    with io_failure("open", display_path(path, folder)):
        return open(target, "rb")


def add_file(path: PathLike, folder: Optional[PathLike] = None) -> Path:
    """Create an empty file unless it already exists.

    The parent folder is not created; add it with add_folder() first.
    """
    target = get_file(path, folder)
    if not target.exists():
        with io_failure("create file", display_path(path, folder)):
            target.touch(exist_ok=False)
        logger.debug("created file %s", target)
    return target


def add_folder(path: PathLike, folder: Optional[PathLike] = None) -> Path:
    """Create a folder and its missing parents unless it already exists."""
    target = get_file(path, folder)
    _create_folder(target, display_path(path, folder))
    return target


def set_content(path: PathLike, content: str, folder: Optional[PathLike] = None) -> None:
    """Replace the text content of an existing sandbox file."""
    target = require_file(path, folder)
    with io_failure("write", display_path(path, folder)):
        with open(target, "w", encoding=get_settings().encoding, newline="") as fh:
            fh.write(content)


def get_content(path: PathLike, folder: Optional[PathLike] = None) -> str:
    """Read a sandbox file as text.

    Line separators (\\n, \\r\\n, \\r) come back as \\n and one trailing line
    terminator is dropped, so "a\\r\\nb\\n" reads as "a\\nb".
    """
    target = require_file(path, folder)
    with io_failure("read", display_path(path, folder)):
        with open(target, "r", encoding=get_settings().encoding, newline=None) as fh:
            content = fh.read()
    if content.endswith("\n"):
        content = content[:-1]
    return content


def delete(path: PathLike, folder: Optional[PathLike] = None) -> None:
    """Delete a file or a whole folder tree if it exists."""
    _delete(get_file(path, folder), display_path(path, folder))


def require_file(path: PathLike, folder: Optional[PathLike] = None) -> Path:
    """Return the sandbox path, failing unless it is a regular file."""
    target = get_file(path, folder)
    if not target.is_file():
        name = display_path(path, folder)
        raise SandboxAssertionError(f"{name} must be a file", path=name, code="not_a_file")
    return target


def require_directory(path: PathLike, folder: Optional[PathLike] = None) -> Path:
    """Return the sandbox path, failing unless it is a directory."""
    target = get_file(path, folder)
    if not target.is_dir():
        name = display_path(path, folder)
        raise SandboxAssertionError(
            f"{name} must be a directory", path=name, code="not_a_directory"
        )
    return target


@contextmanager
def io_failure(operation: str, name: str) -> Iterator[None]:
    """Turn OSError inside the block into a SandboxIOError test failure."""
    try:
        yield
    except OSError as exc:
        raise SandboxIOError(
            f"Unable to {operation} {{{name}}} due to {exc}",
            path=name,
            operation=operation,
        ) from exc


def _create_folder(target: Path, name: str) -> None:
    if target.exists():
        return
    with io_failure("create folder", name):
        target.mkdir(parents=True, exist_ok=True)
    logger.debug("created folder %s", target)


def _delete(target: Path, name: str) -> None:
    if not target.exists():
        return
    with io_failure("delete", name):
        if target.is_dir():
            shutil.rmtree(target)
        else:
            target.unlink()
    logger.debug("deleted %s", target)


__all__ = [
    "init_sandbox",
    "clear_sandbox",
    "sandbox_session",
    "get_root",
    "get_root_folder",
    "get_file",
    "get_path",
    "display_path",
    "open_input",
    "add_file",
    "add_folder",
    "set_content",
    "get_content",
    "delete",
    "require_file",
    "require_directory",
    "io_failure",
]
