# tests/test_cli.py
import json

import pytest
from PIL import Image

from apps.cli.config import DEFAULTS, build_config, merge_overrides
from apps.cli.solve_cli import main
from solver.puzzles import PUZZLES


def test_merge_overrides_skips_none():
    cfg = {"verbose": True, "render_empty": "."}
    assert merge_overrides(cfg, verbose=None, render_empty="0") == {"verbose": True, "render_empty": "0"}


def test_build_config_precedence(tmp_path):
    path = tmp_path / "solve.yaml"
    path.write_text("render_empty: '_'\nverbose: true\n", encoding="utf-8")
    cfg = build_config(path, verbose=False)
    assert cfg.render_empty == "_"
    assert cfg.verbose is False
    assert cfg.json is DEFAULTS["json"]


def test_build_config_rejects_unknown_keys(tmp_path):
    path = tmp_path / "solve.yaml"
    path.write_text("colour: blue\n", encoding="utf-8")
    with pytest.raises(ValueError, match="colour"):
        build_config(path)


def test_solves_named_puzzle(capsys):
    assert main(["easy"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Puzzle solved!\n")
    assert "| 5   3   4 | 6   7   8 | 9   1   2 |" in out


def test_missing_name_prints_usage(capsys):
    assert main([]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Usage: sudoku-solve <puzzlename>" in captured.err
    for name in PUZZLES:
        assert f"  * {name}" in captured.err


def test_unknown_name_prints_usage_without_solving(capsys):
    assert main(["nope"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "unknown puzzle name 'nope'" in captured.err
    assert "  * easy" in captured.err


@pytest.mark.parametrize(
    "name, message",
    [
        ("invalid", "Invalid puzzle, no feasible solution"),
        ("blank", "Puzzle not solved :("),
    ],
)
def test_unsolved_outcomes(capsys, name, message):
    assert main([name]) == 1
    out = capsys.readouterr().out
    assert out.splitlines()[0] == message
    assert "+-----------+-----------+-----------+" in out


def test_injected_library(capsys, contradictory):
    assert main(["broken"], library={"broken": contradictory}) == 1
    assert capsys.readouterr().out.startswith("Puzzle invalidated\n")
    assert main(["easy"], library={"broken": contradictory}) == 2


def test_json_report(capsys, easy_solution):
    assert main(["easy", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["status"] == "solved"
    assert payload["message"] == "Puzzle solved!"
    assert payload["grid"] == easy_solution
    assert payload["candidates_count"] == 0
    assert payload["passes"] >= 1
    assert {m["technique"] for m in payload["moves"]} <= {"naked_single", "hidden_single"}


def test_extra_puzzle_file_and_empty_char(tmp_path, capsys):
    path = tmp_path / "extra.yaml"
    path.write_text("empty_one: '" + "0" * 81 + "'\n", encoding="utf-8")
    assert main(["empty_one", "--puzzles", str(path), "--empty", "0"]) == 1
    out = capsys.readouterr().out
    assert "| 0   0   0 | 0   0   0 | 0   0   0 |" in out


def test_config_file(tmp_path, capsys):
    cfg = tmp_path / "solve.yaml"
    cfg.write_text("json: true\n", encoding="utf-8")
    assert main(["blank", "--config", str(cfg)]) == 1
    assert json.loads(capsys.readouterr().out)["status"] == "stuck"


def test_bad_config_is_reported(tmp_path, capsys):
    cfg = tmp_path / "solve.yaml"
    cfg.write_text("colour: blue\n", encoding="utf-8")
    assert main(["easy", "--config", str(cfg)]) == 2
    assert "[error]" in capsys.readouterr().err


def test_image_output(tmp_path, capsys):
    out = tmp_path / "board.png"
    assert main(["easy", "--image", str(out)]) == 0
    assert "[ok] wrote" in capsys.readouterr().err
    with Image.open(out) as im:
        assert im.size == (900, 900)
