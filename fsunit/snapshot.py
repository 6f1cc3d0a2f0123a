"""
Directory listings and tree snapshots of the sandbox.

Snapshots are mainly for failure messages and debugging:

    from fsunit.snapshot import snapshot

    print(snapshot().render())
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from fsunit.config import get_settings
from fsunit.sandbox import PathLike, display_path, get_root, io_failure, require_directory


class Entry(BaseModel):
    """One file or folder of the sandbox."""

    model_config = ConfigDict(frozen=True)

    name: str
    path: str = Field(description="Path relative to the sandbox root, POSIX style")
    is_dir: bool
    size: Optional[int] = Field(default=None, ge=0, description="Size in bytes, files only")


class Snapshot(Entry):
    """A folder together with its children, down to a bounded depth."""

    is_dir: bool = True
    children: List[Union[Snapshot, Entry]] = Field(default_factory=list)

    def render(self, indent: int = 0) -> str:
        lines = [f"D {'| ' * indent}{self.name}"]
        for child in self.children:
            if isinstance(child, Snapshot):
                lines.append(child.render(indent + 1))
            else:
                kind = "D" if child.is_dir else "F"
                lines.append(f"{kind} {'| ' * (indent + 1)}{child.name}")
        return "\n".join(lines)


Snapshot.model_rebuild()


def _rel_path(path: Path) -> str:
    try:
        return path.relative_to(get_root()).as_posix()
    except ValueError:
        return str(path)


def _entry_info(entry: os.DirEntry) -> Entry:
    is_dir = entry.is_dir(follow_symlinks=False)
    return Entry(
        name=entry.name,
        path=_rel_path(Path(entry.path)),
        is_dir=is_dir,
        size=None if is_dir else entry.stat(follow_symlinks=False).st_size,
    )


def _sort_key(item: Entry):
    return (not item.is_dir, item.name.lower())


def list_dir(path: PathLike = ".", folder: Optional[PathLike] = None) -> List[Entry]:
    """Direct children of a sandbox folder, folders first, then by name."""
    target = require_directory(path, folder)
    with io_failure("list", display_path(path, folder)):
        with os.scandir(target) as it:
            items = [_entry_info(entry) for entry in it]
    items.sort(key=_sort_key)
    return items


def _snapshot_dir(target: Path, depth: int) -> Snapshot:
    rel_path = _rel_path(target)
    node = Snapshot(name="." if rel_path == "." else target.name, path=rel_path, is_dir=True)
    if depth <= 0:
        return node
    children: List[Union[Snapshot, Entry]] = []
    with os.scandir(target) as it:
        for entry in it:
            if entry.is_dir(follow_symlinks=False):
                children.append(_snapshot_dir(Path(entry.path), depth - 1))
            else:
                children.append(_entry_info(entry))
    children.sort(key=_sort_key)
    return node.model_copy(update={"children": children})


def snapshot(path: PathLike = ".", depth: Optional[int] = None) -> Snapshot:
    """Recursive tree of a sandbox folder.

    Folders deeper than ``depth`` (default FSUNIT_SNAPSHOT_DEPTH) are listed
    without their children.
    """
    if depth is None:
        depth = get_settings().snapshot_depth
    target = require_directory(path)
    with io_failure("snapshot", display_path(path)):
        return _snapshot_dir(target, max(depth, 0))


__all__ = ["Entry", "Snapshot", "list_dir", "snapshot"]
