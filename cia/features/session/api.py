from fastapi import APIRouter, Request

from cia.features.session.schemas import CheckpointUpdate, CouncilUpdate, FigureSelection, ProjectUpdate
from cia.features.session.service import SessionService, parse_council, session_id

router = APIRouter(prefix="/session", tags=["session"])


def _service(request: Request) -> SessionService:
    return SessionService(store=request.app.state.sessions, session_id=session_id(request))


@router.get("")
def get_session(request: Request) -> dict[str, object]:
    return _service(request).get()


@router.delete("")
def end_session(request: Request) -> dict[str, object]:
    return _service(request).end()


@router.put("/project")
def update_project(request: Request, body: ProjectUpdate) -> dict[str, object]:
    return _service(request).set_project(name=body.name, location=body.location)


@router.put("/council")
def update_council(request: Request, body: CouncilUpdate) -> dict[str, object]:
    return _service(request).set_council(council=parse_council(body.council))


@router.put("/checkpoint")
def update_checkpoint(request: Request, body: CheckpointUpdate) -> dict[str, object]:
    return _service(request).set_checkpoint(enabled=body.enabled)


@router.put("/figures/{figure_id}")
def select_figure(request: Request, figure_id: str, body: FigureSelection) -> dict[str, object]:
    return _service(request).select_figure(figure_id=figure_id, selected=body.selected)
