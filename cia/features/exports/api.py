from urllib.parse import quote

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import Response

from cia.domain.enums import ExportKind
from cia.features.exports.docx_v1 import ExportFailure
from cia.features.exports.service import ExportsService
from cia.features.session.service import session_id

router = APIRouter(prefix="/exports", tags=["exports"])


def _parse_kind(s: str) -> ExportKind:
    try:
        return ExportKind(s)
    except ValueError:
        raise HTTPException(status_code=404, detail="invalid_export_kind")


@router.get("/{kind}.docx")
async def export_document(request: Request, kind: str) -> Response:
    k = _parse_kind(kind)
    state = request.app.state.sessions.get(session_id(request))
    result = await ExportsService(repository=request.app.state.findings).export(kind=k, state=state)

    if isinstance(result, ExportFailure):
        raise HTTPException(status_code=500, detail=f"export_failed:{result.kind.value}")

    return Response(
        content=result.content,
        media_type=result.media_type,
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(result.filename)}"},
    )
