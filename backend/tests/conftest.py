from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from cellgrid_backend.api.deps import get_table_service
from cellgrid_backend.engine.service import TableRegistryService
from cellgrid_backend.main import app
from cellgrid_backend.repo.in_memory import InMemoryTableRepository


@pytest.fixture
def service() -> TableRegistryService:
    return TableRegistryService(InMemoryTableRepository())


@pytest.fixture
def client(service: TableRegistryService):
    app.dependency_overrides[get_table_service] = lambda: service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
