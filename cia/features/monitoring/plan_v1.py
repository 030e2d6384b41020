from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from cia.domain.enums import Council
from cia.features.findings.schemas import Finding
from cia.features.regions.normalize import normalize_for_match
from cia.features.regions.predicates import KeywordPredicate, TextPredicate


@dataclass(frozen=True)
class MonitoringRow:
    phase: str
    focus: str
    role: str
    frequency: str


DISABLED_FREQUENCY = "(disabled)"

TABLE_HEADER: tuple[str, str, str, str] = (
    "Phase",
    "Monitoring focus",
    "Role of Cultural Monitor",
    "Frequency",
)

BASE_ROWS: tuple[MonitoringRow, ...] = (
    MonitoringRow(
        phase="Pre-construction",
        focus="Baseline mauri / mudfish / habitat surveys",
        role="Attend site walkover; confirm wāhi tapu avoidance; record baseline (photos/notes)",
        frequency="One-off",
    ),
    MonitoringRow(
        phase="During earthworks",
        focus="Sediment discharge (NTU/TSS), discovery protocol readiness",
        role="Onsite checks; hold stop-work if tikanga/cultural risk; verify ESCP field controls",
        frequency="Daily / storm-event",
    ),
    MonitoringRow(
        phase="Ecology",
        focus="Mudfish / fish passage; planting survival",
        role="Guide methods using tikanga; co-observe with ecologist; confirm safe handling/release",
        frequency="Monthly / seasonal",
    ),
    MonitoringRow(
        phase="Close-out",
        focus="Verify consent conditions delivered; cultural outcomes",
        role="Final site check; sign-off report to Council and mana whenua",
        frequency="One-off",
    ),
)


@dataclass(frozen=True)
class KeywordRowRule:
    """Insert `row` at `position` when findings text hits `predicate`."""

    predicate: TextPredicate
    row: MonitoringRow
    position: int


@dataclass(frozen=True)
class CheckpointRule:
    """Row appended for a council. `toggleable` rows honour the checkpoint toggle."""

    phase: str
    focus: str
    role: str
    frequency: str
    toggleable: bool = False

    def to_row(self, enabled: bool) -> MonitoringRow:
        frequency = self.frequency if (enabled or not self.toggleable) else DISABLED_FREQUENCY
        return MonitoringRow(phase=self.phase, focus=self.focus, role=self.role, frequency=frequency)


SPECIES_RULES: tuple[KeywordRowRule, ...] = (
    KeywordRowRule(
        predicate=KeywordPredicate(keywords=("mudfish", "inanga")),
        row=MonitoringRow(
            phase="Pre-construction",
            focus="Targeted mudfish presence/absence at drains/wetlands",
            role="Assist ecologist; apply tikanga for handling; confirm relocation plan if needed",
            frequency="One-off",
        ),
        position=1,
    ),
)

COUNCIL_CHECKPOINTS: dict[Council, CheckpointRule] = {
    Council.hamilton: CheckpointRule(
        phase="During earthworks",
        focus="He Pou Manawa Ora engagement checkpoint",
        role="Attend engagement checkpoint; confirm cultural measures are active",
        frequency="At each stage-gate",
        toggleable=True,
    ),
    Council.waikato: CheckpointRule(
        phase="During earthworks",
        focus="Waikato District Plan noise/access checks near marae",
        role="Check access windows and noise limits with whānau",
        frequency="Weekly",
    ),
}


def findings_scan_text(findings: Sequence[Finding]) -> str:
    """Normalized issue + recommendations text of every finding."""

    parts = [" ".join([f.issue, *f.recommendations]) for f in findings]
    return normalize_for_match(" ".join(parts))


def derive_monitoring_rows(
    findings: Sequence[Finding],
    council: Council,
    include_checkpoint: bool,
) -> list[MonitoringRow]:
    """Cultural monitoring timeline for the given findings and council.

    Always 5 or 6 rows: four base rows, at most one species row (index 1) and
    exactly one council checkpoint row at the end.
    """

    rows = list(BASE_ROWS)
    text = findings_scan_text(findings)

    for rule in SPECIES_RULES:
        if not rule.predicate.matches(text):
            continue
        if any(r.focus == rule.row.focus for r in rows):
            continue
        rows.insert(rule.position, rule.row)

    rows.append(COUNCIL_CHECKPOINTS[council].to_row(include_checkpoint))
    return rows


JOB_DESCRIPTION: tuple[str, ...] = (
    "Represent mana whenua onsite and act as kaitiaki of wāhi tapu, wai and whenua.",
    "Hold stop-work authority when tikanga or cultural risk is observed.",
    "Record observations (photos + narrative) into the CIA dashboard.",
    "Attend toolbox talks and ensure contractors understand cultural protocols.",
    "Escalate incident triggers to Project Manager and Council.",
)

JOB_DESCRIPTION_PLAIN: tuple[str, ...] = (
    "Be our eyes and ears on site for mana whenua.",
    "If you see a cultural risk, you can ask for work to stop.",
    "Take clear notes and photos. Upload them to the CIA dashboard.",
    "Help builders understand our tikanga and why it matters.",
    "Tell the project lead and Council when there is a problem.",
)

CATEGORY_TASKS: dict[str, tuple[str, ...]] = {
    "wai": (
        "Check water clarity and NTU each day of earthworks.",
        "Watch for fish movement (e.g., tuna, īnanga) at the right seasons.",
        "Log any discolouration or sheen with time and weather.",
    ),
    "whenua": (
        "Check for signs of kōiwi/taonga. Follow discovery protocol.",
        "Watch stripping works and keep a safe buffer around risk areas.",
    ),
    "whakapapa": (
        "Check fish passage is clear after works and during flows.",
        "Walk planting areas; note survival and pest pressure.",
    ),
    "whānau": (
        "Check marae access and traffic plans match what was agreed.",
        "Log noise issues and call the site contact if access is blocked.",
    ),
    "mauri": (
        "During storms, verify controls are working (photos before/after).",
        "Join post-event hui to decide what needs fixing.",
    ),
    "wairua": (
        "Stand at agreed view points and compare to the pre-works photos.",
        "Raise concerns early so designs can be adjusted.",
    ),
}


def category_tasks(findings: Sequence[Finding]) -> list[tuple[str, list[str]]]:
    return [(f.category, list(CATEGORY_TASKS.get(f.category, ()))) for f in findings]
