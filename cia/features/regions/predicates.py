from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Protocol


class TextPredicate(Protocol):
    """Match test over already-normalized text."""

    def matches(self, text: str) -> bool: ...


@dataclass(frozen=True)
class RegexPredicate:
    pattern: re.Pattern[str]

    @classmethod
    def of(cls, pattern: str) -> RegexPredicate:
        return cls(pattern=re.compile(pattern))

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


@dataclass(frozen=True)
class KeywordPredicate:
    """Substring hit on any keyword. Keywords must be normalized."""

    keywords: tuple[str, ...]

    def matches(self, text: str) -> bool:
        return any(kw in text for kw in self.keywords if kw)
