"""Search API request/response schemas."""

from pydantic import BaseModel, Field

from iconbrowser.models import FileRecord


class SearchResponse(BaseModel):
    icons: list[FileRecord]
    total: int
    query: str
    directories: list[str]
    # Set only when the pipeline failed; never part of a successful payload.
    error: str | None = Field(default=None, exclude=True)

    @classmethod
    def empty(cls, query: str, error: str | None = None) -> "SearchResponse":
        return cls(icons=[], total=0, query=query, directories=[], error=error)


class SearchErrorResponse(BaseModel):
    error: str
    icons: list[FileRecord] = Field(default_factory=list)
    total: int = 0
    query: str = ""
    directories: list[str] = Field(default_factory=list)
