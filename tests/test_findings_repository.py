import copy

import pytest

from cia.domain.enums import CANONICAL_CATEGORIES
from cia.features.findings.catalog import STANDARD_FINDINGS
from cia.features.findings.errors import FindingRepositoryError
from cia.features.findings.repository import FindingRepository


def _raw() -> list[dict]:
    return copy.deepcopy(list(STANDARD_FINDINGS))


def test_standard_repository_has_six_canonical_categories(repository) -> None:
    assert repository.categories() == list(CANONICAL_CATEGORIES)
    for f in repository.all():
        assert f.issue
        assert f.effects.cultural and f.effects.social
        assert f.effects.environmental and f.effects.spiritual


def test_get_by_category(repository) -> None:
    assert repository.get("whānau").issue.startswith("Construction traffic")
    with pytest.raises(KeyError):
        repository.get("rongoā")


def test_findings_are_frozen(repository) -> None:
    f = repository.all()[0]
    with pytest.raises(Exception):
        f.issue = "changed"  # type: ignore[misc]


def test_empty_effect_axis_is_fatal() -> None:
    raw = _raw()
    raw[0]["effects"]["spiritual"] = []

    with pytest.raises(FindingRepositoryError) as exc:
        FindingRepository(raw)

    paths = [i.path for i in exc.value.issues]
    assert "0.effects.spiritual" in paths


def test_blank_issue_is_fatal() -> None:
    raw = _raw()
    raw[2]["issue"] = ""

    with pytest.raises(FindingRepositoryError) as exc:
        FindingRepository(raw)

    assert any(i.path == "2.issue" for i in exc.value.issues)


def test_missing_subfield_is_fatal() -> None:
    raw = _raw()
    del raw[1]["consent_clauses"]

    with pytest.raises(FindingRepositoryError) as exc:
        FindingRepository(raw)

    assert any(i.path == "1.consent_clauses" and i.code == "missing" for i in exc.value.issues)


def test_unknown_category_is_fatal() -> None:
    raw = _raw()
    raw[0]["category"] = "rongoā"

    with pytest.raises(FindingRepositoryError):
        FindingRepository(raw)


def test_duplicate_category_is_fatal() -> None:
    raw = _raw()
    raw[5]["category"] = "wai"

    with pytest.raises(FindingRepositoryError) as exc:
        FindingRepository(raw)

    assert [i.code for i in exc.value.issues] == ["duplicate_category"]


def test_missing_category_is_fatal() -> None:
    raw = _raw()[:-1]

    with pytest.raises(FindingRepositoryError) as exc:
        FindingRepository(raw)

    assert [i.code for i in exc.value.issues] == ["missing_category"]
    assert "wairua" in exc.value.issues[0].message
