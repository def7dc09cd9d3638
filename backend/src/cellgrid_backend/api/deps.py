from __future__ import annotations

from cellgrid_backend.engine.service import TableRegistryService
from cellgrid_backend.repo.in_memory import InMemoryTableRepository


repository = InMemoryTableRepository()
table_service = TableRegistryService(repository)


def get_table_service() -> TableRegistryService:
    return table_service
