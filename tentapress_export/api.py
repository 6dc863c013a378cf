"""
HTTP entrypoint for admin exports.

POST /api/v1/export takes four optional booleans and answers with the
archive as a file download. The archive is removed once the response
has been sent.

Usage:

    from tentapress_export.api import create_app
    app = create_app(create_exporter())
"""

from __future__ import annotations

import json
import logging
import time
import traceback
from typing import Any, Optional

from fastapi import APIRouter, Body, FastAPI, HTTPException, Request
from fastapi.responses import FileResponse
from pydantic import BaseModel
from starlette.background import BackgroundTask

from .errors import ExportError
from .export import Exporter, ExportOptions
from .utils.temp import cleanup_export

logger = logging.getLogger(__name__)


def _log(msg: str, **extra: Any) -> None:
    """
    Structured log line: the message and any context as one JSON object.
    """
    try:
        logger.info(json.dumps({"msg": msg, **extra}, ensure_ascii=False, default=str))
    except (TypeError, ValueError):
        logger.info("%s %s", msg, extra)


class ExportRequest(BaseModel):
    include_settings: Optional[bool] = None
    include_theme: Optional[bool] = None
    include_plugins: Optional[bool] = None
    include_seo: Optional[bool] = None

    def to_options(self) -> ExportOptions:
        return ExportOptions.from_mapping({
            "include_settings": self.include_settings,
            "include_theme": self.include_theme,
            "include_plugins": self.include_plugins,
            "include_seo": self.include_seo,
        })


def build_router(exporter: Exporter) -> APIRouter:
    router = APIRouter(prefix="/api/v1", tags=["export"])

    @router.post("/export")
    def run_export(payload: Optional[ExportRequest] = Body(default=None)):
        options = (payload or ExportRequest()).to_options()
        _log("[api] export starting", options=options.__dict__)

        try:
            result = exporter.create_export_zip(options)
        except ExportError as exc:
            _log("[api] export failed", error=str(exc), traceback=traceback.format_exc())
            raise HTTPException(status_code=500, detail="Export failed.")

        _log("[api] export ready", path=str(result.path), filename=result.filename)
        return FileResponse(
            result.path,
            media_type="application/zip",
            filename=result.filename,
            background=BackgroundTask(cleanup_export, result.path),
        )

    return router


def create_app(exporter: Exporter) -> FastAPI:
    app = FastAPI(title="TentaPress Export API")

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.time()
        _log("[http] request", method=request.method, path=request.url.path)
        resp = await call_next(request)
        _log(
            "[http] response",
            path=request.url.path,
            duration_ms=int((time.time() - start) * 1000),
            status_code=getattr(resp, "status_code", None),
        )
        return resp

    @app.get("/health")
    async def health():
        return {"status": "ok", "time": time.time()}

    app.include_router(build_router(exporter))
    return app


__all__ = [
    "ExportRequest",
    "build_router",
    "create_app",
]
