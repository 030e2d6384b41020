from dataclasses import asdict

from fastapi import APIRouter, Request

from cia.features.monitoring.plan_v1 import (
    JOB_DESCRIPTION,
    JOB_DESCRIPTION_PLAIN,
    TABLE_HEADER,
    category_tasks,
    derive_monitoring_rows,
)
from cia.features.session.service import session_id

router = APIRouter(prefix="/monitoring", tags=["monitoring"])


@router.get("")
def get_monitoring_plan(request: Request) -> dict[str, object]:
    state = request.app.state.sessions.get(session_id(request))
    findings = request.app.state.findings.all()
    rows = derive_monitoring_rows(findings, state.council, state.include_checkpoint)
    return {
        "council": state.council.value,
        "include_checkpoint": state.include_checkpoint,
        "header": list(TABLE_HEADER),
        "rows": [asdict(r) for r in rows],
        "job_description": list(JOB_DESCRIPTION),
        "job_description_plain": list(JOB_DESCRIPTION_PLAIN),
        "category_tasks": [{"category": c, "tasks": tasks} for c, tasks in category_tasks(findings)],
    }
