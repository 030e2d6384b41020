from __future__ import annotations

from pydantic import BaseModel, Field


class ProjectUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=300)
    location: str | None = Field(default=None, max_length=500)


class CouncilUpdate(BaseModel):
    council: str


class CheckpointUpdate(BaseModel):
    enabled: bool


class FigureSelection(BaseModel):
    selected: bool


class IcmpChoice(BaseModel):
    choice: str | None = None
