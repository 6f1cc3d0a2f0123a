"""Zip archive inspection for sandbox files."""

from __future__ import annotations

import logging
import zipfile
from typing import List, Optional

from fsunit.exceptions import SandboxIOError
from fsunit.sandbox import PathLike, display_path, io_failure, open_input

logger = logging.getLogger(__name__)


def zip_entries(path: PathLike, folder: Optional[PathLike] = None) -> List[str]:
    """Return the names of every entry of a zip archive, in archive order."""
    name = display_path(path, folder)
    with open_input(path, folder) as stream:
        with io_failure("read zip", name):
            try:
                with zipfile.ZipFile(stream) as archive:
                    entries = archive.namelist()
            except (zipfile.BadZipFile, EOFError, ValueError) as exc:
                # Bad headers, truncated data and undecodable entry names.
                raise SandboxIOError(
                    f"Unable to read zip {{{name}}} due to {exc}",
                    path=name,
                    operation="read zip",
                ) from exc
    logger.debug("zip %s has %d entries", name, len(entries))
    return entries
