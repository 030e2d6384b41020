import copy

import pytest

from cia.config import AppConfig
from cia.features.findings.catalog import STANDARD_FINDINGS
from cia.features.findings.errors import FindingRepositoryError
from cia.main import create_app


def test_malformed_knowledge_base_stops_startup() -> None:
    raw = copy.deepcopy(list(STANDARD_FINDINGS))
    raw[3]["mitigations"] = []

    with pytest.raises(FindingRepositoryError) as exc:
        create_app(AppConfig(), raw_findings=raw)

    assert any(i.path == "3.mitigations" for i in exc.value.issues)


def test_incomplete_category_set_stops_startup() -> None:
    with pytest.raises(FindingRepositoryError):
        create_app(AppConfig(), raw_findings=copy.deepcopy(list(STANDARD_FINDINGS))[:5])


def test_explicit_findings_are_served() -> None:
    from fastapi.testclient import TestClient

    client = TestClient(create_app(AppConfig(), raw_findings=copy.deepcopy(list(STANDARD_FINDINGS))))

    assert client.get("/health").json()["findings"] == 6
