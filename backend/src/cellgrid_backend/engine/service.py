from __future__ import annotations

import asyncio
import logging

from cellgrid_backend.engine.internal import Table
from cellgrid_backend.engine.models import TableState
from cellgrid_backend.exceptions import TableNotFound
from cellgrid_backend.repo.base import TableRepository


logger = logging.getLogger(__name__)


class TableRegistryService:
    """Owns every table and serializes all access to them.

    Each public coroutine holds ``self._lock`` for its whole body, including
    the nested cell write and the snapshot copy, so no caller can observe a
    table mid-mutation. Live ``Table`` objects never leave this class.
    """

    def __init__(self, repository: TableRepository) -> None:
        self._repo = repository
        self._lock = asyncio.Lock()

    async def create_table(self, table_id: str, size_y: int, size_x: int) -> TableState:
        async with self._lock:
            table = Table.new(table_id, size_y, size_x)
            replaced = self._repo.put(table)
            if replaced is not None:
                # Last write wins: the previous grid and its contents are dropped.
                logger.warning(
                    "table %s replaced (%dx%d -> %dx%d)",
                    table_id,
                    replaced.size_y,
                    replaced.size_x,
                    size_y,
                    size_x,
                )
            else:
                logger.info("table %s created (%dx%d)", table_id, size_y, size_x)
            return table.snapshot()

    async def get_table(self, table_id: str) -> TableState:
        async with self._lock:
            return self._get_locked(table_id).snapshot()

    async def change_table(self, table_id: str, y: int, x: int, value: str) -> None:
        async with self._lock:
            table = self._get_locked(table_id)
            table.set_value(y, x, value)
            logger.debug("table %s cell (%d, %d) set", table_id, y, x)

    async def table_ids(self) -> list[str]:
        async with self._lock:
            return sorted(table.id for table in self._repo.all())

    def _get_locked(self, table_id: str) -> Table:
        try:
            return self._repo.get(table_id)
        except KeyError as exc:
            raise TableNotFound(table_id) from exc
