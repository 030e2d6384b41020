from fastapi import APIRouter, Request

from cia.features.findings.service import FindingsService

router = APIRouter(prefix="/findings", tags=["findings"])


def _service(request: Request) -> FindingsService:
    return FindingsService(repository=request.app.state.findings)


@router.get("")
def list_findings(request: Request) -> dict[str, object]:
    return _service(request).summary()


@router.get("/consent-library")
def consent_library(request: Request) -> dict[str, object]:
    return _service(request).consent_library()


@router.get("/{category}")
def get_finding(request: Request, category: str) -> dict[str, object]:
    return _service(request).detail(category=category)
