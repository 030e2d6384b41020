from __future__ import annotations

from cia.domain.enums import ExportKind
from cia.features.exports.docx_v1 import (
    DocxRequest,
    ExportResult,
    ImageBlock,
    TableSpec,
    export_docx,
    export_filename,
)
from cia.features.findings.repository import FindingRepository
from cia.features.monitoring.plan_v1 import JOB_DESCRIPTION, TABLE_HEADER, derive_monitoring_rows
from cia.features.narratives.service import NarrativesService
from cia.features.session.state import SessionState, selected_figures

NARRATIVE_TITLES: dict[ExportKind, str] = {
    ExportKind.community: "CIA_Mana_Whenua",
    ExportKind.technical: "CIA_Council_Developer",
}

MONITORING_TITLE = "Cultural Monitoring Programme"


class ExportsService:
    def __init__(self, *, repository: FindingRepository) -> None:
        self._repository = repository

    def narrative_request(self, *, kind: ExportKind, state: SessionState) -> DocxRequest:
        if kind not in NARRATIVE_TITLES:
            raise ValueError(f"not a narrative export: {kind}")
        title = NARRATIVE_TITLES[kind]
        text = NarrativesService(repository=self._repository).render(kind=kind, state=state)
        return DocxRequest(
            title=title,
            filename=export_filename(title, state.project_name),
            body_lines=text.split("\n"),
            images_heading="Selected Figures (Inline)",
            images=tuple(ImageBlock(caption=f.caption, data_url=f.data_url) for f in selected_figures(state)),
        )

    def monitoring_request(self, *, state: SessionState) -> DocxRequest:
        rows = derive_monitoring_rows(self._repository.all(), state.council, state.include_checkpoint)
        return DocxRequest(
            title=MONITORING_TITLE,
            filename=export_filename(MONITORING_TITLE, state.project_name),
            body_lines=(f"Project: {state.project_name}",),
            table=TableSpec(
                heading="Timeline & Tasks",
                header=TABLE_HEADER,
                rows=tuple((r.phase, r.focus, r.role, r.frequency) for r in rows),
            ),
            closing_heading="Job Description",
            closing_lines=tuple(f"• {line}" for line in JOB_DESCRIPTION),
        )

    async def export(self, *, kind: ExportKind, state: SessionState) -> ExportResult:
        if kind is ExportKind.monitoring:
            req = self.monitoring_request(state=state)
        else:
            req = self.narrative_request(kind=kind, state=state)
        return await export_docx(req)
