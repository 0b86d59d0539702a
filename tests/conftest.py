from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from algoevo.api.server import create_app
from algoevo.knowledge import load_knowledge_base
from algoevo.system.config_loader import build_system_config


@pytest.fixture(scope="session")
def kb():
    return load_knowledge_base()


@pytest.fixture
def app_cfg(tmp_path):
    return build_system_config(
        {
            "storage": {"imported_cases_path": str(tmp_path / "imported_cases.json")},
            "enrichment": {"enabled": False},
        }
    )


@pytest.fixture
def client(app_cfg):
    return TestClient(create_app(app_cfg))
