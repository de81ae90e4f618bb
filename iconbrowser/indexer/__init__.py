"""Indexing: directory traversal and serialized snapshots."""

from iconbrowser.indexer.service import scan_icons
from iconbrowser.indexer.snapshot import SnapshotError, load_snapshot, write_snapshot

__all__ = ["SnapshotError", "load_snapshot", "scan_icons", "write_snapshot"]
