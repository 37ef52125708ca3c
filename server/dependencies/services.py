from fastapi import HTTPException, Request

from server.core.RecordService import RecordService
from server.core.SearchService import SearchService


def get_search_service(request: Request) -> SearchService:
    search_service = getattr(request.app.state, "search_service", None)
    if search_service is None:
        raise HTTPException(status_code=503, detail="Search service is not ready")
    return search_service


def get_record_service(request: Request) -> RecordService:
    record_service = getattr(request.app.state, "record_service", None)
    if record_service is None:
        raise HTTPException(status_code=503, detail="Record service is not ready")
    return record_service
