import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    # Ensure `import cia...` works without installing the package.
    repo_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo_root))


@pytest.fixture()
def repository():
    from cia.features.findings.repository import load_standard_repository

    return load_standard_repository()


@pytest.fixture()
def client():
    from fastapi.testclient import TestClient

    from cia.config import AppConfig
    from cia.main import create_app

    # Fresh app per test so session state never leaks between tests.
    return TestClient(create_app(AppConfig()))
