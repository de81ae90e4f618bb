"""Shared test helpers: in-memory records and on-disk icon trees."""

from pathlib import Path
from typing import Any

from iconbrowser.models import ROOT_DIRECTORY, FileRecord

SVG = "<svg xmlns='http://www.w3.org/2000/svg'/>"


def make_record(
    name: str,
    directory: str = ROOT_DIRECTORY,
    depth: int | None = None,
    **overrides: Any,
) -> FileRecord:
    """Create a FileRecord whose path fields agree with name and directory."""
    relative_path = name if directory == ROOT_DIRECTORY else f"{directory}/{name}"
    fields: dict[str, Any] = {
        "name": name,
        "path": f"/icons/{relative_path}",
        "relative_path": relative_path,
        "directory": directory,
        "size": 128,
        "depth": relative_path.count("/") if depth is None else depth,
    }
    fields.update(overrides)
    return FileRecord(**fields)


def lambda_records() -> list[FileRecord]:
    """Three records at increasing depth that all mention 'lambda'."""
    return [
        make_record("lambda.svg", "root", depth=0),
        make_record("lambda-function.svg", "compute", depth=1),
        make_record("aws-lambda-arch.png", "compute/diagrams", depth=2),
    ]


def write_file(path: Path, content: str = SVG) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


def build_icon_tree(root: Path) -> Path:
    """Lay out a small icon tree, including files the indexer must ignore.

    Indexed:  lambda.svg, compute/lambda-function.svg,
              compute/diagrams/aws-lambda-arch.png, storage/S3.PNG
    Ignored:  README.md, .git/hidden.svg, node_modules/pkg/icon.svg,
              compute/.cache/thumb.png
    """
    write_file(root / "lambda.svg")
    write_file(root / "README.md", "# icons")
    write_file(root / "compute" / "lambda-function.svg")
    write_file(root / "compute" / "diagrams" / "aws-lambda-arch.png", "png")
    write_file(root / "storage" / "S3.PNG", "png")
    write_file(root / ".git" / "hidden.svg")
    write_file(root / "node_modules" / "pkg" / "icon.svg")
    write_file(root / "compute" / ".cache" / "thumb.png", "png")
    return root
