from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationIssue:
    code: str
    path: str
    message: str


class FindingRepositoryError(Exception):
    """The finding knowledge base is malformed; nothing downstream may run."""

    def __init__(self, issues: list[ValidationIssue]):
        super().__init__("finding_repository_invalid")
        self.issues = issues

    def __str__(self) -> str:
        head = "; ".join(f"{i.path or '<root>'}: {i.message}" for i in self.issues[:5])
        more = f" (+{len(self.issues) - 5} more)" if len(self.issues) > 5 else ""
        return f"finding_repository_invalid: {head}{more}"
