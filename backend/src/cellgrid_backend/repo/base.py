from __future__ import annotations

from abc import ABC, abstractmethod

from cellgrid_backend.engine.internal import Table


class TableRepository(ABC):
    @abstractmethod
    def put(self, table: Table) -> Table | None:
        """Store ``table`` under its id, returning the table it replaced, if any."""
        raise NotImplementedError

    @abstractmethod
    def get(self, table_id: str) -> Table:
        raise NotImplementedError

    @abstractmethod
    def all(self) -> list[Table]:
        raise NotImplementedError
