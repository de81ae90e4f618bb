"""Indexer: bounded depth-first walk that turns image files into FileRecords."""

import logging
import os
from datetime import UTC, datetime
from pathlib import Path

from pydantic import ValidationError

from iconbrowser.models import IMAGE_EXTENSIONS, ROOT_DIRECTORY, FileRecord

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 10

_SKIPPED_DIRECTORY_NAMES = {"node_modules"}


def is_skipped_directory(name: str) -> bool:
    """Hidden directories and node_modules are never descended into."""
    return name.startswith(".") or name in _SKIPPED_DIRECTORY_NAMES


def default_mount_prefix(root: str | Path, public_dir: str = "public") -> str:
    """URL prefix the icon root is served under.

    The root's own location is mapped to a URL by dropping everything up to
    and including the last public_dir folder: public/icons -> /icons. A root
    outside any public_dir folder is served under its own name.
    """
    parts = Path(root).parts
    if public_dir and public_dir in parts:
        last = len(parts) - 1 - parts[::-1].index(public_dir)
        below = parts[last + 1:]
    else:
        below = (Path(root).name,) if Path(root).name else ()
    return "/" + "/".join(below)


def public_url(relative_path: str, mount_prefix: str = "/icons") -> str:
    """Web path for a root-relative file under the root's mount prefix."""
    return f"{mount_prefix.rstrip('/')}/{relative_path}"


def scan_icons(
    root: str | Path,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    mount_prefix: str | None = None,
    public_dir: str = "public",
) -> list[FileRecord]:
    """Collect every image file below root, at most max_depth levels down.

    mount_prefix defaults to default_mount_prefix(root, public_dir). Never
    raises for filesystem problems: a missing root yields [], and an
    unreadable directory or file is logged and skipped.
    """
    root_path = Path(root)
    if not root_path.is_dir():
        logger.warning("Icon root %s does not exist or is not a directory", root_path)
        return []

    prefix = mount_prefix or default_mount_prefix(root_path, public_dir)
    walker = _Walker(root_path, max_depth, prefix)
    walker.walk(root_path, 0)
    return walker.records


class _Walker:
    def __init__(self, root: Path, max_depth: int, mount_prefix: str) -> None:
        self._root = root
        self._max_depth = max_depth
        self._mount_prefix = mount_prefix
        self.records: list[FileRecord] = []

    def walk(self, dir_path: Path, depth: int) -> None:
        if depth > self._max_depth:
            logger.warning(
                "Maximum recursion depth (%d) reached for %s", self._max_depth, dir_path
            )
            return

        try:
            with os.scandir(dir_path) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as exc:
            logger.warning("Error reading directory %s: %s", dir_path, exc)
            return

        for entry in entries:
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
                is_file = not is_dir and entry.is_file()
            except OSError as exc:
                logger.warning("Error inspecting %s: %s", entry.path, exc)
                continue

            if is_dir:
                if is_skipped_directory(entry.name):
                    continue
                self.walk(Path(entry.path), depth + 1)
            elif is_file and os.path.splitext(entry.name)[1].lower() in IMAGE_EXTENSIONS:
                record = self._make_record(entry, depth)
                if record is not None:
                    self.records.append(record)

    def _make_record(self, entry: os.DirEntry, depth: int) -> FileRecord | None:
        try:
            stats = entry.stat()
        except OSError as exc:
            logger.warning("Error getting stats for %s: %s", entry.path, exc)
            return None

        relative_path = Path(entry.path).relative_to(self._root).as_posix()
        parent = relative_path.rpartition("/")[0]

        try:
            return FileRecord(
                name=entry.name,
                path=public_url(relative_path, self._mount_prefix),
                relative_path=relative_path,
                directory=parent or ROOT_DIRECTORY,
                size=stats.st_size,
                last_modified=datetime.fromtimestamp(stats.st_mtime, UTC),
                depth=depth,
            )
        except ValidationError as exc:
            logger.warning("Skipping %s: %s", entry.path, exc)
            return None
