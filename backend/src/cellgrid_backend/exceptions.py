from __future__ import annotations


class TableError(Exception):
    """Base class for request-scoped table failures."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class TableNotFound(TableError):
    def __init__(self, table_id: str) -> None:
        super().__init__("TABLE_NOT_FOUND", f"Table not found: {table_id}")
        self.table_id = table_id


class CellOutOfBounds(TableError):
    def __init__(self, table_id: str, y: int, x: int, size_y: int, size_x: int) -> None:
        super().__init__(
            "CELL_OUT_OF_BOUNDS",
            f"Cell ({y}, {x}) is outside table {table_id} of size {size_y}x{size_x}.",
        )
        self.table_id = table_id
        self.y = y
        self.x = x
