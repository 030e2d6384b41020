from fastapi import HTTPException

from cia.features.findings.catalog import EMS_ALIGNMENT_CLAUSE
from cia.features.findings.repository import FindingRepository
from cia.features.findings.schemas import Finding

CONSENT_LIBRARY_SIZE = 3


class FindingsService:
    def __init__(self, *, repository: FindingRepository) -> None:
        self._repository = repository

    def summary(self) -> dict[str, object]:
        return {
            "items": [
                {
                    "category": f.category,
                    "issue": f.issue,
                    "policy_check": "; ".join(f.policy_links[:2]),
                }
                for f in self._repository.all()
            ]
        }

    def detail(self, *, category: str) -> dict[str, object]:
        try:
            f = self._repository.get(category)
        except KeyError:
            raise HTTPException(status_code=404, detail="finding_not_found")
        return _finding_to_dict(f)

    def consent_library(self) -> dict[str, object]:
        clauses = [c for f in self._repository.all() for c in f.consent_clauses]
        return {"clauses": [*clauses[:CONSENT_LIBRARY_SIZE], EMS_ALIGNMENT_CLAUSE]}


def _finding_to_dict(f: Finding) -> dict[str, object]:
    t = f.triggers
    return {
        **f.model_dump(mode="json"),
        "trigger_summary": {
            "metrics": ", ".join(t.metrics),
            "baseline": t.baselines,
            "thresholds": "; ".join(t.thresholds),
            "actions": "; ".join(t.actions),
            "reporting": t.reporting,
        },
    }
