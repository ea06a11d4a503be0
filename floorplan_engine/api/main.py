"""FastAPI application factory."""

from __future__ import annotations
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from floorplan_engine.api.routes import router
from floorplan_engine.services.apartment_service import IncompleteGeometryError

logger = logging.getLogger(__name__)


async def incomplete_geometry_handler(
    request: Request, exc: IncompleteGeometryError,
) -> JSONResponse:
    logger.info("Rejected %s: %s", request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": exc.errors})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Floor Plan Engine",
        description="Geometric analysis and validation of apartment floor plans",
        version="0.1.0",
    )

    # The plan editor runs on its own origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.add_exception_handler(IncompleteGeometryError, incomplete_geometry_handler)
    app.include_router(router, prefix="/api")

    return app


app = create_app()
