"""Ranked substring search over a snapshot of FileRecords."""

import asyncio
import logging
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Protocol

from iconbrowser.indexer.service import DEFAULT_MAX_DEPTH, scan_icons
from iconbrowser.indexer.snapshot import load_snapshot
from iconbrowser.models import FileRecord
from iconbrowser.search.schemas import SearchResponse

logger = logging.getLogger(__name__)

SEARCH_FAILED = "Failed to search icons"

EXACT_NAME_SCORE = 100
NAME_PREFIX_SCORE = 50
DIRECTORY_CONTAINS_SCORE = 25
NAME_CONTAINS_SCORE = 10


# ---------------------------------------------------------------------------
# Matching and ranking
# ---------------------------------------------------------------------------


def match_targets(record: FileRecord) -> list[str]:
    """Every lower-cased string a query may be found in for this record."""
    name = record.name.lower()
    stem = record.stem.lower()
    directory = record.directory.lower()
    relative_path = record.relative_path.lower()
    return [
        name,
        stem,
        directory,
        relative_path,
        *stem.split("-"),
        *directory.split("/"),
        *relative_path.split("/"),
    ]


def matches(record: FileRecord, term: str) -> bool:
    """True if the lower-cased term is a substring of any match target."""
    return any(term in target for target in match_targets(record))


def relevance_score(record: FileRecord, term: str) -> int:
    """Additive heuristic; term must already be lower-cased."""
    name = record.name.lower()
    stem = record.stem.lower()
    score = 0
    if term in (name, stem):
        score += EXACT_NAME_SCORE
    if name.startswith(term) or stem.startswith(term):
        score += NAME_PREFIX_SCORE
    if term in record.directory.lower():
        score += DIRECTORY_CONTAINS_SCORE
    if term in name:
        score += NAME_CONTAINS_SCORE
    return score - record.depth


def listing_key(record: FileRecord) -> tuple[str, str, str, str]:
    """Directory then name, case-insensitively; raw strings settle exact ties."""
    return (record.directory.lower(), record.name.lower(), record.directory, record.name)


def _in_scope(record: FileRecord, directory_filter: str, include_subdirectories: bool) -> bool:
    if record.directory == directory_filter:
        return True
    return include_subdirectories and record.directory.startswith(f"{directory_filter}/")


def _search(
    records: Sequence[FileRecord],
    query: str,
    directory_filter: str | None,
    include_subdirectories: bool,
) -> SearchResponse:
    if directory_filter:
        scoped = [r for r in records if _in_scope(r, directory_filter, include_subdirectories)]
    else:
        scoped = list(records)

    # Roster always covers the whole snapshot, not just the scoped subset.
    directories = sorted({r.directory for r in records})

    if not query.strip():
        icons = sorted(scoped, key=listing_key)
    else:
        term = query.lower()
        scored = [(relevance_score(r, term), r) for r in scoped if matches(r, term)]
        scored.sort(key=lambda item: (-item[0], *listing_key(item[1])))
        icons = [r for _, r in scored]

    return SearchResponse(icons=icons, total=len(icons), query=query, directories=directories)


def search_icons(
    records: Iterable[FileRecord],
    query: str,
    directory_filter: str | None = None,
    *,
    include_subdirectories: bool = False,
) -> SearchResponse:
    """Filter, score and sort records for a free-text query.

    directory_filter keeps only records whose directory equals it; with
    include_subdirectories, descendants of that directory are kept as well.
    An empty or whitespace query returns the scoped set ordered by
    listing_key. Never raises: any failure yields an empty response
    whose error attribute is set.
    """
    try:
        return _search(list(records), query, directory_filter, include_subdirectories)
    except Exception:
        logger.exception("Error searching icon files for query %r", query)
        return SearchResponse.empty(query, error=SEARCH_FAILED)


# ---------------------------------------------------------------------------
# Snapshot sources
# ---------------------------------------------------------------------------


class SnapshotSource(Protocol):
    def load(self) -> list[FileRecord]: ...


class LiveSnapshotSource:
    """Walks the icon root on every load."""

    def __init__(
        self,
        root: str | Path,
        *,
        max_depth: int = DEFAULT_MAX_DEPTH,
        mount_prefix: str | None = None,
        public_dir: str = "public",
    ) -> None:
        self.root = Path(root)
        self._max_depth = max_depth
        self._mount_prefix = mount_prefix
        self._public_dir = public_dir

    def load(self) -> list[FileRecord]:
        return scan_icons(
            self.root,
            max_depth=self._max_depth,
            mount_prefix=self._mount_prefix,
            public_dir=self._public_dir,
        )


class FileSnapshotSource:
    """Reads a precomputed snapshot file on every load."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> list[FileRecord]:
        return load_snapshot(self.path)


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------


class SearchService:
    """Stateless per-request search: load a fresh snapshot, then rank it."""

    def __init__(self, source: SnapshotSource) -> None:
        self._source = source

    async def search(
        self,
        query: str = "",
        directory_filter: str | None = None,
        *,
        include_subdirectories: bool = False,
    ) -> SearchResponse:
        try:
            records = await asyncio.to_thread(self._source.load)
        except Exception:
            logger.exception("Error loading icon snapshot")
            return SearchResponse.empty(query, error=SEARCH_FAILED)

        return search_icons(
            records,
            query,
            directory_filter,
            include_subdirectories=include_subdirectories,
        )
