"""
Session Manager for live validation over WebSocket.

Provides:
- Session creation and tracking
- One RealtimeValidator per connected client
- Pushing every completed validation pass to the client
- Idle session cleanup
"""

import asyncio
import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Set

from hdbscan_params import (
    DependencyWatcher,
    Mode,
    RealtimeValidator,
    ValidationResult,
)
from hdbscan_params.api import ApiError, ApiErrorCode, ApiRequestError

from ..config import config


logger = logging.getLogger(__name__)


@dataclass
class LiveSession:
    """Represents one live validation client."""
    session_id: str
    mode: Mode
    validator: RealtimeValidator
    websocket: Any = None
    dependencies: DependencyWatcher = field(default_factory=DependencyWatcher)
    created_at: float = field(default_factory=time.time)
    last_activity: float = field(default_factory=time.time)
    pending_sends: Set[asyncio.Task] = field(default_factory=set)

    def touch(self) -> None:
        self.last_activity = time.time()

    def build_message(self, result: ValidationResult) -> Dict[str, Any]:
        """Message pushed to the client after a validation pass."""
        return {
            'type': 'validation',
            'data': result.to_dict(),
            'dependencies': self.dependencies(self.validator.params).to_dict(),
        }


class SessionManager:
    """Manages live validation sessions."""

    def __init__(self, default_debounce_ms: int = None, max_debounce_ms: int = None):
        """Initialize session manager.

        Args:
            default_debounce_ms: Debounce used when a client does not ask for one
            max_debounce_ms: Upper bound for client-requested debounce
        """
        if default_debounce_ms is None:
            default_debounce_ms = config.default_debounce_ms
        if max_debounce_ms is None:
            max_debounce_ms = config.max_debounce_ms
        self.default_debounce_ms = default_debounce_ms
        self.max_debounce_ms = max_debounce_ms
        self.sessions: Dict[str, LiveSession] = {}

    def create_session(
        self,
        websocket: Any,
        mode: Mode,
        debounce_ms: Optional[int] = None
    ) -> LiveSession:
        """Create a session bound to a connected client.

        Args:
            websocket: Connection receiving validation messages
            mode: Validation mode of the session
            debounce_ms: Requested debounce (clamped to the configured range)

        Returns:
            New LiveSession
        """
        if debounce_ms is None:
            debounce_ms = self.default_debounce_ms
        debounce_ms = max(0, min(debounce_ms, self.max_debounce_ms))

        session_id = str(uuid.uuid4())[:8]  # Short ID for convenience
        validator = RealtimeValidator(mode=mode, debounce_ms=debounce_ms)
        session = LiveSession(
            session_id=session_id,
            mode=mode,
            validator=validator,
            websocket=websocket,
        )
        validator.on_validation_change = lambda result: self._push(session, result)

        self.sessions[session_id] = session
        logger.info(
            "Live session %s opened (mode=%s, debounce=%sms)",
            session_id, mode.value, debounce_ms,
        )
        return session

    def get_session(self, session_id: str) -> Optional[LiveSession]:
        """Get a session by ID."""
        return self.sessions.get(session_id)

    def handle_message(self, session: LiveSession, message: Mapping[str, Any]) -> None:
        """Apply one client message to a session.

        Messages:
            {"params": {...}}        -> debounced validation of the new parameters
            {"action": "validate"}   -> immediate validation
            {"action": "clear"}      -> reset to the empty valid result

        Raises:
            ApiRequestError: VALIDATION_ERROR for unrecognized messages
        """
        session.touch()
        validator = session.validator
        action = message.get('action')

        if action == 'validate':
            validator.validate()
        elif action == 'clear':
            validator.clear_errors()
            self._push(session, validator.result)
        elif action is None and isinstance(message.get('params'), dict):
            validator.update(message['params'])
            validator.mount()
        else:
            raise ApiRequestError(ApiError(
                code=ApiErrorCode.VALIDATION_ERROR,
                message="Message must contain a params object or an action "
                        "('validate' or 'clear')",
            ))

    def close_session(self, session_id: str) -> bool:
        """Dispose a session's validator and forget the session.

        Returns:
            True if closed, False if session not found
        """
        session = self.sessions.pop(session_id, None)
        if not session:
            return False

        session.validator.dispose()
        for task in list(session.pending_sends):
            task.cancel()
        logger.info("Live session %s closed", session_id)
        return True

    def close_all(self) -> None:
        for session_id in list(self.sessions):
            self.close_session(session_id)

    def cleanup_idle_sessions(self, max_idle_seconds: int = None) -> int:
        """Close sessions without client activity for max_idle_seconds.

        Returns:
            Number of sessions closed
        """
        max_idle = max_idle_seconds
        if max_idle is None:
            max_idle = config.session_idle_seconds
        current_time = time.time()

        to_close = [
            session_id for session_id, session in self.sessions.items()
            if current_time - session.last_activity > max_idle
        ]
        for session_id in to_close:
            websocket = self.sessions[session_id].websocket
            self.close_session(session_id)
            if websocket is not None:
                asyncio.get_running_loop().create_task(websocket.close(code=1001))

        return len(to_close)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _push(self, session: LiveSession, result: ValidationResult) -> None:
        """Schedule sending a validation message to the session's client."""
        if session.websocket is None:
            return
        message = session.build_message(result)
        task = asyncio.get_running_loop().create_task(self._send(session, message))
        session.pending_sends.add(task)
        task.add_done_callback(session.pending_sends.discard)

    async def _send(self, session: LiveSession, message: Dict[str, Any]) -> None:
        try:
            await session.websocket.send_json(message)
        except Exception:
            # Client disconnected, the session is closed by its handler
            logger.debug("Dropping message for live session %s", session.session_id)


# Global session manager instance
session_manager = SessionManager()
