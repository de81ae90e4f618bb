"""
One-shot snapshot generator: walk the icon tree and write every image file
as a JSON list of FileRecords, for the server to load instead of scanning
the directory on each request (set ICON_SNAPSHOT_PATH to the output file).

Usage:
    python scripts/generate_icon_index.py
    python scripts/generate_icon_index.py --root public/icons --output app/icons.json
"""

import argparse
import sys
from pathlib import Path

from iconbrowser.config import get_settings
from iconbrowser.indexer.service import scan_icons
from iconbrowser.indexer.snapshot import write_snapshot


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Defaults come from the same ICON_* settings the server uses."""
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Generate the icon index snapshot.")
    parser.add_argument("--root", type=Path, default=settings.icon_root)
    parser.add_argument("--output", type=Path, default=Path("app/icons.json"))
    parser.add_argument("--max-depth", type=int, default=settings.max_depth)
    parser.add_argument("--mount-prefix", default=settings.mount_prefix)
    parser.add_argument("--public-dir", default=settings.public_dir)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    records = scan_icons(
        args.root,
        max_depth=args.max_depth,
        mount_prefix=args.mount_prefix,
        public_dir=args.public_dir,
    )

    try:
        output = write_snapshot(records, args.output)
    except OSError as exc:
        print(f"Could not write {args.output}: {exc}")
        return 1

    print(f"Generated {len(records)} icons to {output.name}")
    print(f"Output file: {output.resolve()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
