from __future__ import annotations

import logging
from typing import Callable

from fastapi import HTTPException, Request

from cia.domain.enums import Council
from cia.features.regions.classifier import Pending, classify
from cia.features.session import state as st
from cia.features.session.errors import SessionError
from cia.features.session.store import DEFAULT_SESSION_ID, SessionStore

logger = logging.getLogger(__name__)


def session_id(request: Request) -> str:
    """`X-Session-Id` header, else the `session` query parameter (plain links)."""

    return (
        request.headers.get("X-Session-Id")
        or request.query_params.get("session")
        or DEFAULT_SESSION_ID
    )


def parse_council(value: str) -> Council:
    try:
        return Council(value)
    except ValueError:
        raise HTTPException(status_code=400, detail="invalid_council")


def state_to_dict(s: st.SessionState) -> dict[str, object]:
    pending = None
    if s.pending is not None:
        pending = {"candidates": list(s.pending.candidates), "default": s.pending.default}
    return {
        "project_name": s.project_name,
        "project_location": s.project_location,
        "council": s.council.value,
        "include_checkpoint": s.include_checkpoint,
        "icmp_label": s.icmp_label,
        "pending": pending,
        "figures": [
            {"id": f.id, "caption": f.caption, "selected": f.selected}
            for f in s.figures
        ],
        "selected_figure_count": len(st.selected_figures(s)),
    }


class SessionService:
    def __init__(self, *, store: SessionStore, session_id: str) -> None:
        self._store = store
        self._session_id = session_id

    def _apply(self, transition: Callable[[st.SessionState], st.SessionState]) -> dict[str, object]:
        try:
            new_state = self._store.update(self._session_id, transition)
        except SessionError as e:
            status = 404 if e.code == "figure_not_found" else 409
            raise HTTPException(status_code=status, detail=e.code)
        return state_to_dict(new_state)

    def get(self) -> dict[str, object]:
        return state_to_dict(self._store.get(self._session_id))

    def end(self) -> dict[str, object]:
        ended = self._store.reset(self._session_id)
        logger.info("Session %r ended (had state: %s)", self._session_id, ended)
        return {"session_id": self._session_id, "ended": ended}

    def set_project(self, *, name: str | None, location: str | None) -> dict[str, object]:
        return self._apply(lambda s: st.with_project(s, name=name, location=location))

    def set_council(self, *, council: Council) -> dict[str, object]:
        return self._apply(lambda s: st.with_council(s, council))

    def set_checkpoint(self, *, enabled: bool) -> dict[str, object]:
        return self._apply(lambda s: st.with_checkpoint(s, enabled))

    def select_figure(self, *, figure_id: str, selected: bool) -> dict[str, object]:
        return self._apply(lambda s: st.with_figure_selected(s, figure_id, selected))

    def detect_icmp(self) -> dict[str, object]:
        def transition(s: st.SessionState) -> st.SessionState:
            result = classify(s.project_location, s.council)
            if isinstance(result, Pending):
                logger.info("ICMP pending for %r: %s", s.project_location, ", ".join(result.candidates))
            else:
                logger.info("ICMP resolved for %r: %s", s.project_location, result.label)
            return st.apply_classification(s, result)

        return self._apply(transition)

    def confirm_icmp(self, *, choice: str | None) -> dict[str, object]:
        return self._apply(lambda s: st.confirm_icmp(s, choice))

    def cancel_icmp(self) -> dict[str, object]:
        return self._apply(st.cancel_icmp)
