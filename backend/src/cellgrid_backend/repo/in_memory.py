from __future__ import annotations

from cellgrid_backend.engine.internal import Table
from cellgrid_backend.repo.base import TableRepository


class InMemoryTableRepository(TableRepository):
    def __init__(self) -> None:
        self._tables: dict[str, Table] = {}

    def put(self, table: Table) -> Table | None:
        previous = self._tables.get(table.id)
        self._tables[table.id] = table
        return previous

    def get(self, table_id: str) -> Table:
        if table_id not in self._tables:
            raise KeyError(f"table {table_id} not found")
        return self._tables[table_id]

    def all(self) -> list[Table]:
        return list(self._tables.values())
