from __future__ import annotations

import logging
from typing import Any, Iterable

from cia.features.findings.catalog import STANDARD_FINDINGS
from cia.features.findings.schemas import Finding
from cia.features.findings.validation import validate_findings

logger = logging.getLogger(__name__)


class FindingRepository:
    """Read-only, validated set of findings.

    Construction raises FindingRepositoryError when the payloads break the data
    model; a repository instance therefore always holds a complete category set.
    """

    def __init__(self, raw: Iterable[dict[str, Any]]) -> None:
        self._findings = validate_findings(raw)
        logger.info("Loaded %d findings", len(self._findings))

    def all(self) -> tuple[Finding, ...]:
        return self._findings

    def get(self, category: str) -> Finding:
        for f in self._findings:
            if f.category == category:
                return f
        raise KeyError(f"Finding not found: {category}")

    def categories(self) -> list[str]:
        return [f.category for f in self._findings]


def load_standard_repository() -> FindingRepository:
    return FindingRepository(STANDARD_FINDINGS)
