from enum import Enum


class Council(str, Enum):
    hamilton = "Hamilton City Council"
    waikato = "Waikato District Council"

    @property
    def short_name(self) -> str:
        if self is Council.hamilton:
            return "Hamilton City"
        return "Waikato District"

    @property
    def fallback_label(self) -> str:
        return f"{self.short_name} ICMP (area to confirm)"


class Category(str, Enum):
    wai = "wai"
    whenua = "whenua"
    whakapapa = "whakapapa"
    whanau = "whānau"
    mauri = "mauri"
    wairua = "wairua"


CANONICAL_CATEGORIES: tuple[str, ...] = tuple(c.value for c in Category)


class ExportKind(str, Enum):
    community = "community"
    technical = "technical"
    monitoring = "monitoring"


class ExportFailureKind(str, Enum):
    serialization_failure = "serialization_failure"


NOT_SET_LABEL = "(not set)"
