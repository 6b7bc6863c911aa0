"""
Live Validation WebSocket Route.

Each connection owns a server-side RealtimeValidator. Clients send
{"params": {...}} on every edit (or {"action": "validate" | "clear"}) and
receive {"type": "validation", "data": ..., "dependencies": ...} after
every completed pass.
"""

import logging
from typing import Optional

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from hdbscan_params import Mode
from hdbscan_params.api import ApiError, ApiErrorCode, ApiRequestError, load_json_body

from ..services.session_manager import session_manager


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/clusters", tags=["live-validation"])


@router.websocket("/validate/live")
async def live_validation(
    websocket: WebSocket,
    mode: str = "basic",
    debounce_ms: Optional[int] = None
):
    """WebSocket endpoint for debounced live validation."""
    await websocket.accept()

    try:
        mode_enum = Mode.from_string(mode)
    except ValueError as e:
        error = ApiError(code=ApiErrorCode.VALIDATION_ERROR, message=str(e))
        await websocket.send_json({'type': 'error', 'error': error.to_dict()})
        await websocket.close(code=1008)
        return

    session = session_manager.create_session(websocket, mode_enum, debounce_ms)
    await websocket.send_json({
        'type': 'session',
        'sessionId': session.session_id,
        'mode': mode_enum.value,
        'debounceMs': session.validator.debounce_ms,
    })

    try:
        while True:
            text = await websocket.receive_text()
            try:
                session_manager.handle_message(session, load_json_body(text))
            except ApiRequestError as e:
                await websocket.send_json({'type': 'error', 'error': e.error.to_dict()})
    except WebSocketDisconnect:
        logger.info("Live session %s disconnected", session.session_id)
    finally:
        session_manager.close_session(session.session_id)
