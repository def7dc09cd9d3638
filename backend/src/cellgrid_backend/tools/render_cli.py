from __future__ import annotations

import argparse
import json
from pathlib import Path

from cellgrid_backend.engine.internal import Table
from cellgrid_backend.engine.models import TableState


def render(path: Path) -> str:
    state = TableState.model_validate(json.loads(path.read_text()))
    return str(Table.from_state(state))


def main() -> None:
    parser = argparse.ArgumentParser(description="Render a saved table snapshot as a text grid")
    parser.add_argument("snapshot_file", type=Path)
    args = parser.parse_args()

    print(render(args.snapshot_file), end="")


if __name__ == "__main__":
    main()
