import logging
import threading
from typing import Dict

from food_assist.app.errors import InvalidTransitionError
from food_assist.session.state import Event, SessionState, Submitted, reduce

logger = logging.getLogger(__name__)


class SessionStore:
    """In-memory sessions, one per browser tab. Nothing survives a restart.

    Handlers run in a threadpool, so every read-reduce-write happens under one
    lock against the stored snapshot, never against a copy read earlier.
    """

    def __init__(self) -> None:
        self._sessions: Dict[str, SessionState] = {}
        self._lock = threading.Lock()

    def _get_or_create(self, session_id: str) -> SessionState:
        state = self._sessions.get(session_id)
        if state is None:
            state = SessionState.new(session_id)
            self._sessions[session_id] = state
            logger.info("Started session %s", session_id)
        return state

    def get(self, session_id: str) -> SessionState:
        with self._lock:
            return self._get_or_create(session_id)

    def begin(self, session_id: str, event: Submitted) -> SessionState:
        """Start a submission; raises SubmissionInFlightError if one is running."""
        with self._lock:
            state = reduce(self._get_or_create(session_id), event)
            self._sessions[session_id] = state
            return state

    def apply(self, session_id: str, event: Event, pending_id: str | None = None) -> SessionState:
        """Finish the submission ``pending_id`` on the current snapshot. A reset session stays gone."""
        with self._lock:
            state = self._sessions.get(session_id)
            if state is None:
                raise InvalidTransitionError(f"session {session_id} was reset while a submission was in flight")
            if pending_id is not None and state.pending_id != pending_id:
                raise InvalidTransitionError(f"session {session_id} is no longer waiting on submission {pending_id}")
            state = reduce(state, event)
            self._sessions[session_id] = state
            return state

    def reset(self, session_id: str) -> bool:
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
