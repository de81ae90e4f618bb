"""Canonical data structures for the icon browser.

A FileRecord is one image file discovered under the indexed root. Records
serialize with camelCase keys (relativePath, lastModified) so a snapshot file
and the search API share one shape.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Sentinel directory value for files sitting directly under the indexed root.
ROOT_DIRECTORY = "root"

IMAGE_EXTENSIONS = frozenset({".svg", ".png", ".jpg", ".jpeg", ".gif", ".webp", ".ico"})


class FileRecord(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(min_length=1)
    path: str
    relative_path: str = Field(alias="relativePath")
    directory: str
    size: int | None = None
    last_modified: datetime | None = Field(default=None, alias="lastModified")
    depth: int = Field(ge=0)

    @model_validator(mode="before")
    @classmethod
    def _normalize_root_directory(cls, data: Any) -> Any:
        # Older generators wrote "." for files directly under the root.
        if isinstance(data, dict) and data.get("directory") == ".":
            data = {**data, "directory": ROOT_DIRECTORY}
        return data

    @model_validator(mode="after")
    def _check_path_invariants(self) -> "FileRecord":
        if "\\" in self.directory or "\\" in self.relative_path:
            raise ValueError("directory and relativePath must use '/' separators")
        if not self.path.startswith("/"):
            raise ValueError(f"path {self.path!r} must start with the mount prefix")
        parent, _, basename = self.relative_path.rpartition("/")
        if basename != self.name:
            raise ValueError(f"relativePath {self.relative_path!r} does not end in {self.name!r}")
        if self.directory != (parent or ROOT_DIRECTORY):
            raise ValueError(
                f"directory {self.directory!r} is not the parent of {self.relative_path!r}"
            )
        if self.depth != self.relative_path.count("/"):
            raise ValueError(
                f"depth {self.depth} does not match relativePath {self.relative_path!r}"
            )
        return self

    @property
    def stem(self) -> str:
        """Filename without its final extension, as os.path.splitext sees it."""
        dot = self.name.rfind(".")
        return self.name[:dot] if dot > 0 else self.name
