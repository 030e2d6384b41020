from __future__ import annotations

from cia.domain.enums import ExportKind
from cia.features.findings.repository import FindingRepository
from cia.features.narratives.community_v1 import render_community_narrative
from cia.features.narratives.technical_v1 import render_technical_narrative
from cia.features.session.state import SessionState, project_context, selected_figures

_RENDERERS = {
    ExportKind.community: render_community_narrative,
    ExportKind.technical: render_technical_narrative,
}


class NarrativesService:
    def __init__(self, *, repository: FindingRepository) -> None:
        self._repository = repository

    def render(self, *, kind: ExportKind, state: SessionState) -> str:
        renderer = _RENDERERS.get(kind)
        if renderer is None:
            raise ValueError(f"not a narrative: {kind}")
        return renderer(self._repository.all(), project_context(state))

    def preview(self, *, kind: ExportKind, state: SessionState) -> str:
        """Narrative followed by the captions of the figures that will be embedded."""

        captions = "\n".join(f"- {f.caption}" for f in selected_figures(state))
        return f"{self.render(kind=kind, state=state)}\n\n## Selected Figures (inline)\n{captions}"
