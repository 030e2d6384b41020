from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from cia.domain.enums import Council
from cia.features.regions.dictionaries import regions_for
from cia.features.regions.normalize import normalize_for_match

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolved:
    label: str


@dataclass(frozen=True)
class Pending:
    candidates: tuple[str, ...]
    default: str


ClassificationResult = Union[Resolved, Pending]


def matched_region_names(location: str | None, council: Council) -> list[str]:
    """Names of every region whose patterns hit, in dictionary declaration order."""

    text = normalize_for_match(location)
    return [r.name for r in regions_for(council) if r.matches(text)]


def match_regions(location: str | None, council: Council) -> list[str]:
    """Like `matched_region_names`, but never empty: no hit yields the fallback label."""

    names = matched_region_names(location, council)
    return names or [council.fallback_label]


def classify(location: str | None, council: Council) -> ClassificationResult:
    """Map free-text location to an ICMP area label for `council`.

    - no match: the council's fallback label
    - one match: that region
    - several: Pending, defaulting to the first declared candidate. Callers must
      confirm or cancel; a pending result is never treated as resolved.
    """

    names = matched_region_names(location, council)

    if not names:
        result: ClassificationResult = Resolved(label=council.fallback_label)
    elif len(names) == 1:
        result = Resolved(label=names[0])
    else:
        result = Pending(candidates=tuple(names), default=names[0])

    logger.debug("classify(%r, %s) -> %r", location, council.value, result)
    return result
