"""Audit logging for the currents editor."""

from __future__ import annotations

import json

from currents.logs import get_logger

_LOGGER_NAME = "currents_editor.audit"


def audit_event(
    *,
    trace_id: str,
    action: str,
    file: str | None,
    result: str,
    detail: str | None = None,
) -> None:
    payload = {
        "trace_id": trace_id,
        "action": action,
        "file": file,
        "result": result,
        "detail": detail,
    }
    logger = get_logger(_LOGGER_NAME, "currents_editor.log")
    logger.info(json.dumps(payload, ensure_ascii=False))
