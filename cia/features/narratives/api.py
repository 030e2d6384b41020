from urllib.parse import urlencode

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse

from cia.domain.enums import ExportKind
from cia.features.narratives.service import NarrativesService
from cia.features.session.service import session_id
from cia.features.session.store import DEFAULT_SESSION_ID

router = APIRouter(prefix="/narratives", tags=["narratives"])

_NARRATIVE_KINDS = (ExportKind.community, ExportKind.technical)


def _parse_kind(s: str) -> ExportKind:
    if s not in (k.value for k in _NARRATIVE_KINDS):
        raise HTTPException(status_code=404, detail="invalid_narrative_kind")
    return ExportKind(s)


@router.get("/preview", response_class=HTMLResponse)
def preview_page(request: Request) -> HTMLResponse:
    sid = session_id(request)
    state = request.app.state.sessions.get(sid)
    service = NarrativesService(repository=request.app.state.findings)
    # Export links are plain GETs and cannot carry the session header.
    export_query = "" if sid == DEFAULT_SESSION_ID else "?" + urlencode({"session": sid})
    return request.app.state.templates.TemplateResponse(
        request,
        "narratives/preview.html",
        {
            "title": "CIA narratives",
            "project_name": state.project_name,
            "icmp_label": state.icmp_label,
            "council": state.council.value,
            "export_query": export_query,
            "community": service.preview(kind=ExportKind.community, state=state),
            "technical": service.preview(kind=ExportKind.technical, state=state),
        },
    )


@router.get("/{kind}")
def get_narrative(request: Request, kind: str) -> dict[str, object]:
    k = _parse_kind(kind)
    state = request.app.state.sessions.get(session_id(request))
    service = NarrativesService(repository=request.app.state.findings)
    return {
        "kind": k.value,
        "icmp_label": state.icmp_label,
        "text": service.render(kind=k, state=state),
        "preview": service.preview(kind=k, state=state),
    }
