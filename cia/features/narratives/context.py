from __future__ import annotations

from dataclasses import dataclass

from cia.domain.enums import NOT_SET_LABEL, Council


@dataclass(frozen=True)
class ProjectContext:
    project_name: str
    council: Council
    icmp_label: str = NOT_SET_LABEL


# Council -> policy instruments named in the technical assessment scope.
POLICY_INSTRUMENTS: dict[Council, str] = {
    Council.hamilton: "He Pou Manawa Ora; Hamilton District Plan",
    Council.waikato: "Waikato District Plan",
}

# Council -> phrase that must appear in the technical narrative for that branch.
POLICY_BRANCH_MARKERS: dict[Council, str] = {
    Council.hamilton: "He Pou Manawa Ora",
    Council.waikato: "Waikato District Plan",
}
