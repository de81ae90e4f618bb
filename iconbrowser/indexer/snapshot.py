"""Serialized snapshots: a JSON array of FileRecords written once, loaded per request."""

import json
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from iconbrowser.models import FileRecord

_records_adapter = TypeAdapter(list[FileRecord])


class SnapshotError(Exception):
    """Raised when a snapshot file cannot be read or does not hold FileRecords."""


def dump_snapshot(records: list[FileRecord]) -> str:
    """Serialize records with camelCase keys and ISO timestamps."""
    payload = [r.model_dump(mode="json", by_alias=True) for r in records]
    return json.dumps(payload, indent=2)


def write_snapshot(records: list[FileRecord], path: str | Path) -> Path:
    """Write records to path, creating parent directories. Returns the path."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(dump_snapshot(records), encoding="utf-8")
    return target


def load_snapshot(path: str | Path) -> list[FileRecord]:
    """Load a snapshot written by write_snapshot.

    Raises SnapshotError for a missing file, invalid JSON, or entries that do
    not validate as FileRecords.
    """
    source = Path(path)
    try:
        raw = source.read_bytes()
    except OSError as exc:
        raise SnapshotError(f"Cannot read snapshot {source}: {exc}") from exc

    try:
        return _records_adapter.validate_json(raw)
    except ValidationError as exc:
        raise SnapshotError(
            f"Snapshot {source} is not a list of file records "
            f"({exc.error_count()} errors)"
        ) from exc
