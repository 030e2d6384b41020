from __future__ import annotations

from typing import Sequence

from cia.features.findings.schemas import Finding
from cia.features.narratives.context import POLICY_INSTRUMENTS, ProjectContext

TITLE = "# CIA - Council/Developer Narrative (Standard)"

_MONITORING = (
    "## Monitoring and Adaptive Management\n"
    "- Baseline: clarity/NTU, macroinvertebrates, mahinga kai presence.\n"
    "- Triggers: set per-site with mana whenua; actions within 10 working days.\n"
    "- Reporting: quarterly hui plus written report for Council and mana whenua."
)


def _scope(ctx: ProjectContext) -> str:
    return (
        "## Assessment Scope\n"
        "- Technical reports reviewed: EMPs, CMPs, ESCPs, ecology/archaeology/hydrology.\n"
        "- Policy instruments: Te Ture Whaimana; Tai Tumu, Tai Pari, Tai Ao EMP; "
        f"{POLICY_INSTRUMENTS[ctx.council]}.\n"
        f"- ICMP area: **{ctx.icmp_label}**."
    )


def _matrix_row(index: int, f: Finding) -> str:
    return (
        f"{index}. {f.category} | {f.issue}\n"
        f"   - Mitigation: {'; '.join(f.mitigations)}\n"
        f"   - Recommendation: {'; '.join(f.recommendations)}\n"
        f"   - Policy: {'; '.join(f.policy_links)}"
    )


def consent_conditions(findings: Sequence[Finding]) -> list[str]:
    """All consent clauses across findings, in finding order."""

    return [c for f in findings for c in f.consent_clauses]


def render_technical_narrative(findings: Sequence[Finding], ctx: ProjectContext) -> str:
    """Council/developer narrative: scope, category matrix, conditions, monitoring."""

    matrix = "\n\n".join(_matrix_row(i, f) for i, f in enumerate(findings, start=1))
    conditions = "\n".join(f"{i}. {c}" for i, c in enumerate(consent_conditions(findings), start=1))

    return (
        f"{TITLE}\n\n"
        f"## Project\n{ctx.project_name}\n\n"
        f"{_scope(ctx)}\n\n"
        "## Category Matrix (Issues -> Mitigation -> Recommendation -> Policy Link)\n"
        f"{matrix}\n\n"
        "## Proposed Consent Conditions (extract)\n"
        f"{conditions}\n\n"
        f"{_MONITORING}"
    )
