"""Search API routes."""

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from iconbrowser.search.schemas import SearchErrorResponse, SearchResponse
from iconbrowser.search.service import SearchService

router = APIRouter(prefix="/api", tags=["search"])


def get_search_service() -> SearchService:
    """Dependency placeholder, overridden at startup."""
    raise RuntimeError("SearchService not configured")


@router.get(
    "/search-icons",
    response_model_exclude_none=True,
    responses={500: {"model": SearchErrorResponse}},
)
async def search_icons(
    q: str = Query(""),
    filter_dir: str | None = Query(None),
    recursive: bool = Query(False),
    service: SearchService = Depends(get_search_service),
) -> SearchResponse:
    """Ranked filename/path search over the icon tree."""
    result = await service.search(q, filter_dir or None, include_subdirectories=recursive)
    if result.error is not None:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=SearchErrorResponse(error=result.error).model_dump(mode="json"),
        )
    return result
