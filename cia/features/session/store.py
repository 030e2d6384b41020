import threading
from typing import Callable

from cia.domain.enums import Council
from cia.features.session.state import SessionState, new_session

DEFAULT_SESSION_ID = "default"


class SessionStore:
    """In-memory session states, one writer at a time.

    Nothing survives a restart. Only transitions create entries and reset() ends
    a session. Transitions run under the lock so concurrent requests for the
    same session cannot interleave half-applied updates.
    """

    def __init__(self, *, project_name: str, council: Council) -> None:
        self._project_name = project_name
        self._council = council
        self._states: dict[str, SessionState] = {}
        self._lock = threading.Lock()

    def get(self, session_id: str = DEFAULT_SESSION_ID) -> SessionState:
        """Current state, or a fresh one for an unknown id. Reading never stores."""

        with self._lock:
            return self._states.get(session_id) or self._fresh()

    def update(
        self,
        session_id: str,
        transition: Callable[[SessionState], SessionState],
    ) -> SessionState:
        with self._lock:
            new_state = transition(self._states.get(session_id) or self._fresh())
            self._states[session_id] = new_state
            return new_state

    def reset(self, session_id: str = DEFAULT_SESSION_ID) -> bool:
        with self._lock:
            return self._states.pop(session_id, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._states)

    def _fresh(self) -> SessionState:
        return new_session(self._project_name, self._council)
