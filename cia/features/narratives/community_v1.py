from __future__ import annotations

from typing import Sequence

from cia.features.findings.schemas import Finding
from cia.features.narratives.context import ProjectContext

TITLE = "# CIA - Mana Whenua Narrative (Standard)"

# Literal the self-checks look for to confirm macrons survive rendering.
CONTEXT_MARKER = "Whakataukī"

SECTIONS: tuple[str, ...] = (
    "Executive Summary",
    "Background and Whakapapa",
    "Methodology (Kaupapa Māori, Wānanga)",
    "Categories Assessment",
    "ICMP and Policy Alignment",
    "Cultural Monitoring Programme",
    "Consent Conditions and Next Steps",
)

_CONTEXT = (
    "Ko te mana o te awa me te whenua te tūāpapa. This kaupapa recognises our "
    "relationship to wai, whenua, and all living systems. We have assessed the "
    "technical reports and translated key matters into plain language for whānau."
)

_PARTICIPATION = (
    "\n## Tikanga and Participation\n"
    "- Mana whenua monitors present at ground-break.\n"
    "- Wānanga-a-rohe, quarterly, to review monitoring and adapt.\n"
    "- Cultural discovery protocol: stop-work, karakia, kōrero, record.\n"
    "\n"
    "## Ask to Council / Developer\n"
    "Adopt the consent conditions listed and fund the co-governed monitoring programme. "
    "Partner early on planting design and mahinga kai."
)


def _bullets(items: Sequence[str]) -> str:
    return "- " + "\n- ".join(items)


def _category_block(index: int, f: Finding) -> str:
    return (
        f"\n### {index}. {f.category.upper()}\n"
        f"**Ngā take / Issue:** {f.issue}\n"
        "\n"
        "**Ngā whakatika / Mitigations:**\n"
        f"{_bullets(f.mitigations)}\n"
        "\n"
        "**Ngā tūtohunga / Recommendations:**\n"
        f"{_bullets(f.recommendations)}\n"
        "\n"
        f"**Monitoring triggers (plain):** {', '.join(f.triggers.metrics)}\n"
    )


def render_community_narrative(findings: Sequence[Finding], ctx: ProjectContext) -> str:
    """Plain-language narrative written in the mana whenua voice.

    Pure: output depends only on `findings` and `ctx`.
    """

    intro = f"{TITLE}\n\n## Project\n{ctx.project_name}\n\n## {CONTEXT_MARKER} / Context\n{_CONTEXT}"
    sections = f"\n## Sections\n{_bullets(SECTIONS)}"
    categories = "\n".join(_category_block(i, f) for i, f in enumerate(findings, start=1))
    alignment = (
        "\n## Te Ture Whaimana and Tai Tumu, Tai Pari, Tai Ao alignment\n"
        "We checked the mahi against the Vision and Objectives of Te Ture Whaimana, "
        "the Waikato-Tainui EMP (Tai Tumu, Tai Pari, Tai Ao), and the relevant District Plan. "
        f"The project is connected to: **{ctx.icmp_label}**."
    )

    return "\n\n".join(
        [
            intro,
            sections,
            f"\n## Categories - Issues, Mitigations, Recommendations\n{categories}",
            alignment,
            _PARTICIPATION,
        ]
    )
