from fastapi import APIRouter, Request

from cia.features.selfcheck.checks import PASSED, run_self_checks
from cia.features.session.service import session_id

router = APIRouter(prefix="/self-checks", tags=["self-checks"])


@router.post("")
def run_checks(request: Request) -> dict[str, object]:
    state = request.app.state.sessions.get(session_id(request))
    result = run_self_checks(state, request.app.state.findings)
    return {"passed": result == PASSED, "result": result}
