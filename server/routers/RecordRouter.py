"""Record router: resolves a record reference to its display name."""

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse

from server.core.RecordService import RecordService
from server.dependencies.auth import require_session_token
from server.dependencies.services import get_record_service
from server.models.responses import ErrorResponse, ResolvedRecordResponse
from shared.models.errors import BackendRequestError, UnknownEntityTypeError

record_router = APIRouter(prefix="/api", tags=["Records"])


async def require_record_reference(
    type: str | None = Query(default=None),
    id: str | None = Query(default=None),
) -> tuple[str, int]:
    """Validate the type and id query parameters.

    Raises:
        HTTPException: 400 if either is missing or the id is not a non-negative integer.
    """
    if not type or not type.strip() or not id or not id.strip():
        raise HTTPException(status_code=400, detail="Both type and id are required")
    record_id = id.strip()
    if not (record_id.isascii() and record_id.isdigit()):
        raise HTTPException(status_code=400, detail="Record id must be numeric")
    return type, int(record_id)


@record_router.get(
    "/resolve-record",
    response_model=ResolvedRecordResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def handle_resolve_record(
    reference: tuple[str, int] = Depends(require_record_reference),
    token: str = Depends(require_session_token),
    record_service: RecordService = Depends(get_record_service),
) -> JSONResponse:
    """Resolve a record to its display name, e.g. ?type=organization&id=54.

    Args:
        reference (tuple[str, int]): The validated (type, id) pair.
        token (str): Session token from the "token" cookie.
        record_service (RecordService): The record resolver.

    Returns:
        JSONResponse: The resolved record, or an error payload. Backend errors keep their status.
    """
    type_name, record_id = reference
    try:
        result = await record_service.do_resolve(type_name, record_id, token)
    except UnknownEntityTypeError as exc:
        return JSONResponse(status_code=400, content=ErrorResponse(message=exc.message).model_dump())
    except BackendRequestError as exc:
        message = exc.payload.get("message") or "Record not found"
        return JSONResponse(status_code=exc.status_code, content=ErrorResponse(message=str(message)).model_dump())
    except Exception:
        record_service.logging.exception("Error resolving record type=%r id=%d", type_name, record_id)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(message="Internal server error").model_dump(),
        )
    return JSONResponse(content=result.model_dump())
