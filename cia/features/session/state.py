from __future__ import annotations

from dataclasses import dataclass, replace

from cia.domain.enums import NOT_SET_LABEL, Council
from cia.features.figures.gallery import Figure, default_gallery
from cia.features.narratives.context import ProjectContext
from cia.features.regions.classifier import ClassificationResult, Pending, Resolved
from cia.features.session.errors import SessionError


@dataclass(frozen=True)
class SessionState:
    """Everything a user can change during a session.

    Transitions below are pure: they return a new state and never mutate the
    one they were given.
    """

    project_name: str
    project_location: str = ""
    council: Council = Council.hamilton
    include_checkpoint: bool = True
    icmp_label: str = NOT_SET_LABEL
    pending: Pending | None = None
    figures: tuple[Figure, ...] = ()


def new_session(project_name: str, council: Council = Council.hamilton) -> SessionState:
    return SessionState(
        project_name=project_name,
        council=council,
        include_checkpoint=council is Council.hamilton,
        figures=default_gallery(),
    )


def with_project(state: SessionState, *, name: str | None = None, location: str | None = None) -> SessionState:
    return replace(
        state,
        project_name=state.project_name if name is None else name,
        project_location=state.project_location if location is None else location,
    )


def with_council(state: SessionState, council: Council) -> SessionState:
    # Candidates of a pending proposal belong to the previous council's dictionary.
    return replace(
        state,
        council=council,
        include_checkpoint=council is Council.hamilton,
        pending=None,
    )


def with_checkpoint(state: SessionState, enabled: bool) -> SessionState:
    if enabled and state.council is not Council.hamilton:
        raise SessionError("checkpoint_unavailable")
    return replace(state, include_checkpoint=enabled)


def apply_classification(state: SessionState, result: ClassificationResult) -> SessionState:
    if isinstance(result, Resolved):
        return replace(state, icmp_label=result.label, pending=None)
    return replace(state, pending=result)


def confirm_icmp(state: SessionState, choice: str | None = None) -> SessionState:
    if state.pending is None:
        raise SessionError("no_pending_classification")
    label = state.pending.default if choice is None else choice
    if label not in state.pending.candidates:
        raise SessionError("invalid_icmp_choice")
    return replace(state, icmp_label=label, pending=None)


def cancel_icmp(state: SessionState) -> SessionState:
    return replace(state, pending=None)


def with_figure_selected(state: SessionState, figure_id: str, selected: bool) -> SessionState:
    if not any(f.id == figure_id for f in state.figures):
        raise SessionError("figure_not_found")
    figures = tuple(replace(f, selected=selected) if f.id == figure_id else f for f in state.figures)
    return replace(state, figures=figures)


def selected_figures(state: SessionState) -> list[Figure]:
    return [f for f in state.figures if f.selected]


def project_context(state: SessionState) -> ProjectContext:
    return ProjectContext(
        project_name=state.project_name,
        council=state.council,
        icmp_label=state.icmp_label,
    )
