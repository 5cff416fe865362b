"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from svg2tsx.config import settings
from svg2tsx.errors import (
    ConversionError,
    ErrorType,
    SvgParseError,
    app_error_from_parse_error,
    create_app_error,
)

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.svg2tsx_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="svg2tsx",
        description="SVG to React TSX component converter",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_error_handlers(app)

    from svg2tsx.api.router import api_router

    app.include_router(api_router)

    return app


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(SvgParseError)
    async def parse_error_handler(request: Request, exc: SvgParseError) -> JSONResponse:
        logger.warning("Parse failed on %s: %s", request.url.path, exc.message)
        error = app_error_from_parse_error(exc)
        return JSONResponse(status_code=422, content=error.model_dump(mode="json"))

    @app.exception_handler(ConversionError)
    async def conversion_error_handler(request: Request, exc: ConversionError) -> JSONResponse:
        logger.error("Conversion failed on %s", request.url.path, exc_info=exc)
        error = create_app_error(ErrorType.CONVERSION_ERROR, details=str(exc))
        return JSONResponse(status_code=500, content=error.model_dump(mode="json"))


app = create_app()
