from fastapi import APIRouter, Request

from cia.features.regions.classifier import Pending, classify, match_regions
from cia.features.session.schemas import IcmpChoice
from cia.features.session.service import SessionService, parse_council, session_id

router = APIRouter(tags=["regions"])


def _service(request: Request) -> SessionService:
    return SessionService(store=request.app.state.sessions, session_id=session_id(request))


@router.get("/regions/classify")
def classify_location(location: str = "", council: str = "Hamilton City Council") -> dict[str, object]:
    """Stateless classification; does not touch the session."""

    c = parse_council(council)
    result = classify(location, c)
    if isinstance(result, Pending):
        return {
            "status": "pending",
            "candidates": list(result.candidates),
            "default": result.default,
        }
    return {
        "status": "resolved",
        "label": result.label,
        "matches": match_regions(location, c),
    }


@router.post("/session/icmp/detect")
def detect_icmp(request: Request) -> dict[str, object]:
    return _service(request).detect_icmp()


@router.post("/session/icmp/confirm")
def confirm_icmp(request: Request, body: IcmpChoice) -> dict[str, object]:
    return _service(request).confirm_icmp(choice=body.choice)


@router.post("/session/icmp/cancel")
def cancel_icmp(request: Request) -> dict[str, object]:
    return _service(request).cancel_icmp()
