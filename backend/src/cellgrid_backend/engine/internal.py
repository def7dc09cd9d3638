from __future__ import annotations

from dataclasses import dataclass, field

from cellgrid_backend.engine.models import TableState
from cellgrid_backend.exceptions import CellOutOfBounds


@dataclass
class Table:
    id: str
    size_y: int
    size_x: int
    cells: list[list[str]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.cells = [["" for _ in range(self.size_x)] for _ in range(self.size_y)]

    @classmethod
    def new(cls, table_id: str, size_y: int, size_x: int) -> Table:
        return cls(id=table_id, size_y=size_y, size_x=size_x)

    @classmethod
    def from_state(cls, state: TableState) -> Table:
        """Rebuild a table from a snapshot, refusing ragged or mis-sized data."""
        if len(state.data) != state.size_y or any(len(row) != state.size_x for row in state.data):
            raise ValueError(
                f"table {state.id} data does not match its {state.size_y}x{state.size_x} dimensions",
            )
        table = cls(id=state.id, size_y=state.size_y, size_x=state.size_x)
        table.cells = [list(row) for row in state.data]
        return table

    def size(self) -> int:
        return self.size_x * self.size_y

    def in_bounds(self, y: int, x: int) -> bool:
        return 0 <= y < self.size_y and 0 <= x < self.size_x

    def get_value(self, y: int, x: int) -> str | None:
        if not self.in_bounds(y, x):
            return None
        return self.cells[y][x]

    def set_value(self, y: int, x: int, new_value: str) -> None:
        if not self.in_bounds(y, x):
            raise CellOutOfBounds(self.id, y, x, self.size_y, self.size_x)
        self.cells[y][x] = new_value

    def snapshot(self) -> TableState:
        return TableState(
            id=self.id,
            size_x=self.size_x,
            size_y=self.size_y,
            data=[list(row) for row in self.cells],
        )

    def __str__(self) -> str:
        lines = [f"table: {self.size_x}x{self.size_y}"]
        for row in self.cells:
            lines.append("|" + "".join(f"{value}|" for value in row))
        return "\n".join(lines) + "\n"
