from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

CategoryName = Literal["wai", "whenua", "whakapapa", "whānau", "mauri", "wairua"]

Text = Annotated[str, Field(min_length=1, max_length=4000)]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class Effects(_Frozen):
    cultural: tuple[Text, ...] = Field(min_length=1, max_length=20)
    social: tuple[Text, ...] = Field(min_length=1, max_length=20)
    environmental: tuple[Text, ...] = Field(min_length=1, max_length=20)
    spiritual: tuple[Text, ...] = Field(min_length=1, max_length=20)


class TriggerSpec(_Frozen):
    metrics: tuple[Text, ...] = Field(min_length=1, max_length=30)
    baselines: Text
    thresholds: tuple[Text, ...] = Field(min_length=1, max_length=30)
    actions: tuple[Text, ...] = Field(min_length=1, max_length=30)
    reporting: Text


class Finding(_Frozen):
    category: CategoryName
    issue: Text
    effects: Effects
    mitigations: tuple[Text, ...] = Field(min_length=1, max_length=30)
    recommendations: tuple[Text, ...] = Field(min_length=1, max_length=30)
    triggers: TriggerSpec
    policy_links: tuple[Text, ...] = Field(min_length=1, max_length=30)
    consent_clauses: tuple[Text, ...] = Field(min_length=1, max_length=30)
