from __future__ import annotations

import logging

from cia.domain.enums import CANONICAL_CATEGORIES, Council
from cia.features.findings.repository import FindingRepository
from cia.features.narratives.community_v1 import CONTEXT_MARKER, render_community_narrative
from cia.features.narratives.context import POLICY_BRANCH_MARKERS
from cia.features.narratives.technical_v1 import render_technical_narrative
from cia.features.regions.classifier import Resolved, classify
from cia.features.session.state import SessionState, project_context, selected_figures

logger = logging.getLogger(__name__)

PASSED = "All self-checks passed"

_REQUIRED_FIELDS = ("effects", "mitigations", "recommendations", "triggers", "policy_links", "consent_clauses")

# (location, council, expected label)
_CANARIES: tuple[tuple[str, Council, str], ...] = (
    ("Waitawhiriwhiri", Council.hamilton, "Waitawhiriwhiri ICMP"),
    ("Mangakotukutuku", Council.hamilton, "Mangakotukutuku ICMP"),
)


class SelfCheckFailure(Exception):
    pass


def _check(cond: bool, message: str) -> None:
    if not cond:
        raise SelfCheckFailure(message)


def _assert_battery(state: SessionState, repository: FindingRepository) -> None:
    findings = repository.all()
    ctx = project_context(state)

    for f in findings:
        _check(bool(f.category) and bool(f.issue), "Missing category or issue")
        for name in _REQUIRED_FIELDS:
            _check(getattr(f, name, None) is not None, f"Missing field: {name}")

    community = render_community_narrative(findings, ctx)
    _check(CONTEXT_MARKER in community, "Unicode marker missing")

    technical = render_technical_narrative(findings, ctx)
    _check(POLICY_BRANCH_MARKERS[state.council] in technical, "Council branch failed")

    categories = {f.category for f in findings}
    for c in CANONICAL_CATEGORIES:
        _check(c in categories, f"Missing category: {c}")
    _check(categories == set(CANONICAL_CATEGORIES), "Unexpected category set")

    _check(bool(selected_figures(state)), "No figures selected")

    for location, council, expected in _CANARIES:
        result = classify(location, council)
        _check(
            isinstance(result, Resolved) and result.label == expected,
            f"ICMP inference failed for {location}",
        )


def run_self_checks(state: SessionState, repository: FindingRepository) -> str:
    """Fixed smoke battery; stops at the first failure and reports it as one line."""

    try:
        _assert_battery(state, repository)
    except SelfCheckFailure as e:
        logger.info("Self-checks failed: %s", e)
        return f"Test failure: {e}"
    logger.info("Self-checks passed")
    return PASSED
