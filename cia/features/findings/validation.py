from __future__ import annotations

from typing import Any, Iterable

from pydantic import ValidationError

from cia.domain.enums import CANONICAL_CATEGORIES
from cia.features.findings.errors import FindingRepositoryError, ValidationIssue
from cia.features.findings.schemas import Finding


def _to_issues(e: ValidationError, prefix: str) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    for err in e.errors():
        loc = err.get("loc") or []
        path = ".".join([prefix, *(str(p) for p in loc)])
        issues.append(
            ValidationIssue(
                code=str(err.get("type") or "validation_error"),
                path=path,
                message=str(err.get("msg") or "invalid"),
            )
        )
    return issues


def validate_findings(raw: Iterable[dict[str, Any]]) -> tuple[Finding, ...]:
    """Validate raw finding payloads and the category set as a whole.

    Raises FindingRepositoryError listing every problem found, not just the first.
    """

    issues: list[ValidationIssue] = []
    findings: list[Finding] = []

    for i, content in enumerate(raw):
        try:
            findings.append(Finding.model_validate(content))
        except ValidationError as e:
            issues.extend(_to_issues(e, prefix=str(i)))

    seen: set[str] = set()
    for i, f in enumerate(findings):
        if f.category in seen:
            issues.append(
                ValidationIssue(
                    code="duplicate_category",
                    path=f"{i}.category",
                    message=f"category {f.category!r} appears more than once",
                )
            )
        seen.add(f.category)

    if not issues:
        missing = [c for c in CANONICAL_CATEGORIES if c not in seen]
        for c in missing:
            issues.append(
                ValidationIssue(
                    code="missing_category",
                    path="",
                    message=f"missing canonical category {c!r}",
                )
            )

    if issues:
        raise FindingRepositoryError(issues)
    return tuple(findings)
