from __future__ import annotations

import json
import sys

import pytest

from cellgrid_backend.tools import render_cli


def test_render_snapshot_file(tmp_path) -> None:
    path = tmp_path / "table.json"
    path.write_text(json.dumps({"id": "t", "size_x": 2, "size_y": 1, "data": [["a", "b"]]}))

    assert render_cli.render(path) == "table: 2x1\n|a|b|\n"


def test_main_prints_grid(tmp_path, monkeypatch, capsys) -> None:
    path = tmp_path / "table.json"
    path.write_text(json.dumps({"id": "t", "size_x": 1, "size_y": 2, "data": [["x"], [""]]}))
    monkeypatch.setattr(sys, "argv", ["cellgrid-render", str(path)])

    render_cli.main()

    assert capsys.readouterr().out == "table: 1x2\n|x|\n||\n"


def test_render_rejects_mismatched_dimensions(tmp_path) -> None:
    path = tmp_path / "table.json"
    path.write_text(json.dumps({"id": "t", "size_x": 3, "size_y": 1, "data": [["a"]]}))

    with pytest.raises(ValueError):
        render_cli.render(path)
