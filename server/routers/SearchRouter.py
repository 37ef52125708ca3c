"""Search router: federated search across all record types of the staffing backend."""

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse

from server.core.SearchService import SearchService
from server.dependencies.auth import require_session_token
from server.dependencies.services import get_search_service
from server.models.responses import ErrorResponse, SearchResponse

search_router = APIRouter(prefix="/api", tags=["Search"])


async def require_search_query(query: str | None = Query(default=None)) -> str:
    """Reject missing and whitespace-only queries with 400."""
    if query is None or not query.strip():
        raise HTTPException(status_code=400, detail="Search query is required")
    return query


@search_router.get(
    "/search",
    response_model=SearchResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def handle_search(
    query: str = Depends(require_search_query),
    token: str = Depends(require_session_token),
    search_service: SearchService = Depends(get_search_service),
) -> JSONResponse:
    """Search jobs, leads, job seekers, organizations, tasks, hiring managers and placements.

    The query is checked before the session cookie, so an empty query is
    reported as 400 even without a token.

    Args:
        query (str): The raw query text (validated non-empty).
        token (str): Session token from the "token" cookie.
        search_service (SearchService): The search orchestrator.

    Returns:
        JSONResponse: The search response, or a 500 error payload on an internal failure.
    """
    try:
        result = await search_service.do_search(query, token)
    except Exception:
        search_service.logging.exception("Error in global search for query=%r", query[:80])
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(message="Internal server error").model_dump(),
        )
    return JSONResponse(content=result.model_dump())
