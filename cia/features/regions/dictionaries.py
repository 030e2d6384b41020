from __future__ import annotations

from dataclasses import dataclass

from cia.domain.enums import Council
from cia.features.regions.predicates import RegexPredicate, TextPredicate


@dataclass(frozen=True)
class Region:
    name: str
    patterns: tuple[TextPredicate, ...]

    def matches(self, normalized_text: str) -> bool:
        return any(p.matches(normalized_text) for p in self.patterns)


def _region(name: str, *patterns: str) -> Region:
    return Region(name=name, patterns=tuple(RegexPredicate.of(p) for p in patterns))


# Patterns run against normalize_for_match() output: lower-case, no macrons.
# Declaration order is the candidate order when several areas match.
HAMILTON_REGIONS: tuple[Region, ...] = (
    _region("Peacocke ICMP", r"\bpeacocke\b|\bpeacocks\b"),
    _region("Rotokauri ICMP", r"\brotokauri\b"),
    _region("Te Rapa ICMP", r"te\s?rapa|\bpukete\b|\bnorthgate\b"),
    _region("Rototuna ICMP", r"\brototuna\b|\bflagstaff\b|\bchartwell\b"),
    _region("Ruakura ICMP", r"\bruakura\b|\bhillcrest\b|\bsilverdale\b|\buniversity\b"),
    _region("Waitawhiriwhiri ICMP", r"waitawhiriwhiri|beerescourt|forest\s*lakes?|frankton|clarkin|bryant"),
    _region("Mangakotukutuku ICMP", r"mangakotukutuku|glenview|melville|fitzroy|bader|kahikatea|ohaupo"),
)

WAIKATO_REGIONS: tuple[Region, ...] = (
    _region("Ngāruawāhia ICMP", r"ngaruawahia|hopuhopu"),
    _region("Huntly ICMP", r"\bhuntly\b|\brahuipokeka\b"),
    _region("Te Kauwhata ICMP", r"te\s*kauwhata|waerenga|meremere"),
)

_DICTIONARIES: dict[Council, tuple[Region, ...]] = {
    Council.hamilton: HAMILTON_REGIONS,
    Council.waikato: WAIKATO_REGIONS,
}


def regions_for(council: Council) -> tuple[Region, ...]:
    return _DICTIONARIES[council]
