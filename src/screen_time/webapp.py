"""FastAPI application that exposes a local web UI and API for the tracker."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import FileResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel, ConfigDict

from .config import TrackerSettings
from .controller import TrackerController, TrackerStatus
from .errors import (
    AlreadyTrackingError,
    EmptyLogError,
    ExportError,
    NotTrackingError,
)
from .export import to_csv
from .formatting import format_duration, format_timestamp
from .models import UsageEntry
from .paths import get_export_path
from .tracker import Clock

logger = logging.getLogger(__name__)


class ResetPayload(BaseModel):
    confirm: bool = False

    model_config = ConfigDict(extra="forbid")


def create_app(
    *,
    settings: Optional[TrackerSettings] = None,
    export_path: Optional[Path] = None,
    clock: Optional[Clock] = None,
) -> FastAPI:
    """Instantiate the FastAPI application."""
    resolved_settings = settings or TrackerSettings()
    controller = TrackerController(settings=resolved_settings, clock=clock)

    app = FastAPI(title="ScreenTime Tracker", version="0.1.0")
    app.state.controller = controller
    app.state.export_path = Path(export_path) if export_path else None

    static_dir = Path(__file__).parent / "static"
    if static_dir.exists():
        app.mount("/static", StaticFiles(directory=static_dir), name="static")

    @app.on_event("startup")
    async def _startup() -> None:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s %(levelname)s %(name)s %(message)s",
        )
        logger.info(
            "Dashboard ready; daily limit %s.",
            format_duration(resolved_settings.daily_limit_ms),
        )

    @app.get("/api/status")
    def status(request: Request) -> Dict[str, Any]:
        snapshot = request.app.state.controller.tick()
        payload = _status_payload(snapshot)
        payload["daily_limit_ms"] = resolved_settings.daily_limit_ms
        payload["refresh_ms"] = resolved_settings.refresh_ms
        return payload

    @app.post("/api/start")
    def start(request: Request) -> Dict[str, Any]:
        try:
            message = request.app.state.controller.start()
        except AlreadyTrackingError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        return {"message": message}

    @app.post("/api/stop")
    def stop(request: Request) -> Dict[str, Any]:
        try:
            result = request.app.state.controller.stop()
        except NotTrackingError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        return {
            "entry": _entry_payload(result.entry),
            "last_session": result.last_session,
            "total_usage": result.total_usage,
            "limit_exceeded": result.limit_exceeded,
            "warning": result.warning,
        }

    @app.get("/api/log")
    def view_log(request: Request) -> Dict[str, Any]:
        tracker: TrackerController = request.app.state.controller
        try:
            text = tracker.view()
        except EmptyLogError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return {
            "text": text,
            "entries": [_entry_payload(entry) for entry in tracker.log.entries()],
        }

    @app.post("/api/export")
    def export(request: Request) -> Dict[str, Any]:
        target = request.app.state.export_path or get_export_path(
            resolved_settings.export_filename
        )
        try:
            written = request.app.state.controller.export(target)
        except EmptyLogError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        except ExportError as exc:
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        return {
            "path": str(written),
            "message": f"Usage log exported to {written.name} successfully!",
        }

    @app.get("/api/export/download")
    def download(request: Request) -> PlainTextResponse:
        try:
            content = to_csv(request.app.state.controller.log)
        except EmptyLogError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        filename = resolved_settings.export_filename
        return PlainTextResponse(
            content,
            media_type="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    @app.post("/api/reset")
    def reset(payload: ResetPayload, request: Request) -> Dict[str, Any]:
        if not payload.confirm:
            return {"reset": False, "message": "Reset cancelled."}
        message = request.app.state.controller.reset()
        return {"reset": True, "message": message}

    @app.get("/")
    def index(request: Request):
        index_path = (Path(__file__).parent / "static" / "index.html").resolve()
        if not index_path.exists():
            raise HTTPException(status_code=404, detail="UI not found")
        return FileResponse(index_path)

    return app


def _status_payload(snapshot: TrackerStatus) -> Dict[str, Any]:
    return {
        "tracking": snapshot.tracking,
        "elapsed": snapshot.elapsed,
        "total_usage": snapshot.total_usage,
        "today_usage": snapshot.today_usage,
        "limit_exceeded": snapshot.limit_exceeded,
        "entry_count": snapshot.entry_count,
    }


def _entry_payload(entry: UsageEntry) -> Dict[str, Any]:
    return {
        "start": format_timestamp(entry.start),
        "end": format_timestamp(entry.end),
        "start_ms": entry.start,
        "end_ms": entry.end,
        "duration_ms": entry.duration,
        "duration": format_duration(entry.duration),
    }
