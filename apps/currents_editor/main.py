"""FastAPI app for the currents editor (development only)."""

from __future__ import annotations

import uuid

from fastapi import FastAPI, Header, Request
from fastapi.responses import HTMLResponse, JSONResponse

from apps.currents_editor.audit import audit_event
from apps.currents_editor.gui import render_gui
from apps.currents_editor.schemas import (
    CreateEntryRequest,
    EditorEnvelope,
    EditorError,
    SaveEntryRequest,
)
from apps.currents_editor.store import EntryStore, EntryStoreError
from currents.config import entries_dir

GUI_ROUTE = "/__currents"
API_BASE = "/__currents/api"

app = FastAPI(title="Currents Editor", version="1.0.0")


def _trace_id(incoming: str | None) -> str:
    if incoming and incoming.strip():
        return incoming.strip()
    return str(uuid.uuid4())


def _store() -> EntryStore:
    return EntryStore(entries_dir())


def _response(
    *,
    trace_id: str,
    data: dict[str, object] | list[dict[str, object]] | None = None,
    error_message: str | None = None,
    status_code: int = 200,
) -> JSONResponse:
    envelope = EditorEnvelope(
        success=status_code < 400,
        data=data,
        error=None if status_code < 400 else EditorError(message=error_message or "request failed"),
        trace_id=trace_id,
    )
    return JSONResponse(status_code=status_code, content=envelope.model_dump(mode="json"))


async def _json_body(request: Request) -> dict[str, object]:
    try:
        body = await request.json()
    except ValueError as exc:
        raise EntryStoreError("request body must be valid JSON") from exc
    if not isinstance(body, dict):
        raise EntryStoreError("request body must be a JSON object")
    return body


@app.get(GUI_ROUTE, response_class=HTMLResponse)
async def gui() -> HTMLResponse:
    return HTMLResponse(render_gui(API_BASE))


@app.get(f"{API_BASE}/list")
async def list_entries(x_trace_id: str | None = Header(default=None, alias="X-Trace-Id")) -> JSONResponse:
    trace_id = _trace_id(x_trace_id)
    return _response(trace_id=trace_id, data=_store().list_entries())


@app.get(f"{API_BASE}/read")
async def read_entry(
    file: str | None = None,
    x_trace_id: str | None = Header(default=None, alias="X-Trace-Id"),
) -> JSONResponse:
    trace_id = _trace_id(x_trace_id)
    try:
        entry = _store().read_entry(file)
    except EntryStoreError as exc:
        return _response(trace_id=trace_id, status_code=exc.status_code, error_message=exc.message)
    return _response(trace_id=trace_id, data={"file": entry.filename, "data": entry.fields, "body": entry.body})


@app.post(f"{API_BASE}/create")
async def create_entry(
    request: Request,
    x_trace_id: str | None = Header(default=None, alias="X-Trace-Id"),
) -> JSONResponse:
    trace_id = _trace_id(x_trace_id)
    try:
        payload = CreateEntryRequest.model_validate(await _json_body(request))
        file, entry_id = _store().create_entry(payload.data.model_dump(), payload.body)
    except EntryStoreError as exc:
        audit_event(trace_id=trace_id, action="create", file=None, result="error", detail=exc.message)
        return _response(trace_id=trace_id, status_code=exc.status_code, error_message=exc.message)
    except ValueError as exc:
        audit_event(trace_id=trace_id, action="create", file=None, result="error", detail=str(exc))
        return _response(trace_id=trace_id, status_code=400, error_message=str(exc))

    audit_event(trace_id=trace_id, action="create", file=file, result="success")
    return _response(trace_id=trace_id, data={"file": file, "id": entry_id})


@app.post(f"{API_BASE}/save")
async def save_entry(
    request: Request,
    x_trace_id: str | None = Header(default=None, alias="X-Trace-Id"),
) -> JSONResponse:
    trace_id = _trace_id(x_trace_id)
    file: str | None = None
    try:
        payload = SaveEntryRequest.model_validate(await _json_body(request))
        file = payload.file
        saved = _store().save_entry(payload.file, payload.data.model_dump(), payload.body)
    except EntryStoreError as exc:
        audit_event(trace_id=trace_id, action="save", file=file, result="error", detail=exc.message)
        return _response(trace_id=trace_id, status_code=exc.status_code, error_message=exc.message)
    except ValueError as exc:
        audit_event(trace_id=trace_id, action="save", file=file, result="error", detail=str(exc))
        return _response(trace_id=trace_id, status_code=400, error_message=str(exc))

    audit_event(trace_id=trace_id, action="save", file=saved, result="success")
    return _response(trace_id=trace_id, data={"file": saved})
