"""FastAPI application entry point for the ATS search bridge."""

import os
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.logging.logging_setup import setup_logging
from shared.helper.HelperConfig import HelperConfig
from shared.clients.ats.ATSClientInterface import ATSClientInterface
from shared.clients.ats.ATSClientManager import ATSClientManager
from server.core.RecordService import RecordService
from server.core.SearchService import SearchService
from server.models.responses import ErrorResponse
from server.routers.RecordRouter import record_router
from server.routers.SearchRouter import search_router

logging = setup_logging()
app_version = os.getenv("APP_VERSION", "unknown")
helper_config = HelperConfig(logger=logging)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # when the app starts
    app.state.logging = logging
    app.state.helper_config = helper_config

    ats_client = ATSClientManager(helper_config=helper_config).get_client()
    logging.info("Booting ATS client '%s'...", ats_client.get_engine_name())
    await ats_client.boot()
    app.state.ats_client = ats_client

    app.state.search_service = SearchService(helper_config=helper_config, ats_client=ats_client)
    app.state.record_service = RecordService(helper_config=helper_config, ats_client=ats_client)

    await check_connection(ats_client)

    # while the app is running...
    yield

    # when the app shuts down
    logging.info("Shutting down, closing ATS client...")
    await ats_client.close()
    logging.info("ATS client closed.")


app = FastAPI(
    title="ats_search_bridge",
    description=(
        "Read-only bridge in front of the staffing agency backend. "
        "Serves a federated search across jobs, leads, job seekers, organizations, "
        "tasks, hiring managers and placements via GET /api/search, and record "
        "name resolution via GET /api/resolve-record."
    ),
    version=app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=helper_config.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(search_router)
app.include_router(record_router)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors in the {success, message} shape the dashboard expects."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(message=str(exc.detail)).model_dump(),
        headers=getattr(exc, "headers", None),
    )


@app.get("/health", tags=["Health"])
async def health() -> dict:
    return {"status": "ok", "version": app_version}


async def check_connection(ats_client: ATSClientInterface) -> None:
    """Check that the ATS backend answers on startup.

    Failures are non-fatal: the server stays up and searches degrade to empty
    buckets until the backend is reachable.
    """
    try:
        result: httpx.Response = await ats_client.do_healthcheck()
    except httpx.HTTPError as exc:
        logging.warning(
            "ATS backend at '%s' is not reachable: %s. Searches will return empty results.",
            helper_config.get_api_base_url(),
            exc,
        )
        return
    logging.info(
        "ATS backend at '%s' answered with status %d.",
        helper_config.get_api_base_url(),
        result.status_code,
        color="green",
    )


if __name__ == "__main__":
    import uvicorn

    logging.info("Starting ats_search_bridge API Server v%s on port 8000...", app_version)
    uvicorn.run(app, host="0.0.0.0", port=8000)
