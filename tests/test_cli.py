# tests/test_cli.py
import json

import pytest

from mazegen.cli import EXIT_BAD_SIZE, EXIT_FAILED, EXIT_NOT_NUMBER, EXIT_OK, EXIT_USAGE, EXIT_WRITE, run
from mazegen.config import GeneratorOptions


@pytest.fixture(autouse=True)
def in_tmp(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_missing_arguments(capsys):
    assert run([]) == EXIT_USAGE
    assert run(["3"]) == EXIT_USAGE
    err = capsys.readouterr().err
    assert "usage:" in err


def test_not_a_number(capsys):
    assert run(["x", "3"]) == EXIT_NOT_NUMBER
    assert "width is not number (x)" in capsys.readouterr().err
    assert run(["3", "4.5"]) == EXIT_NOT_NUMBER
    assert "height is not number (4.5)" in capsys.readouterr().err


def test_bad_size(capsys):
    assert run(["0", "5"]) == EXIT_BAD_SIZE
    assert run(["5", "-1"]) == EXIT_BAD_SIZE
    assert "height" in capsys.readouterr().err


def test_prints_maze_and_writes_dot(capsys, in_tmp):
    assert run(["4", "3", "--seed", "7"]) == EXIT_OK
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 7
    assert out[0] == "+-+-+-+-+"
    dot = (in_tmp / "maze.dot").read_text(encoding="utf-8")
    assert dot.startswith("graph maze4x3 {\n")
    assert dot.count(" -- ") == 11


def test_seed_is_reproducible(capsys):
    run(["9", "6", "--seed", "3", "--no-dot"])
    first = capsys.readouterr().out
    run(["9", "6", "--seed", "3", "--no-dot"])
    assert capsys.readouterr().out == first


def test_no_dot_and_custom_dot(in_tmp):
    assert run(["2", "2", "--no-dot"]) == EXIT_OK
    assert not (in_tmp / "maze.dot").exists()
    assert run(["2", "2", "--dot", "other.dot"]) == EXIT_OK
    assert (in_tmp / "other.dot").exists()


def test_png_and_json_outputs(in_tmp):
    code = run(["5", "4", "--seed", "1", "--png", "img/m.png", "--cell-size", "8",
                "--solve", "--json", "m.json"])
    assert code == EXIT_OK
    assert (in_tmp / "img" / "m.png").stat().st_size > 0
    data = json.loads((in_tmp / "m.json").read_text(encoding="utf-8"))
    assert sum(data["walls"]) == 19


def test_bad_cell_size(capsys):
    assert run(["3", "3", "--png", "m.png", "--cell-size", "1"]) == EXIT_USAGE


def test_generation_failure(capsys, monkeypatch):
    # five draws cannot connect a 30x30 grid
    monkeypatch.setattr(GeneratorOptions, "max_iterations", lambda self, cells, walls: 5)
    assert run(["30", "30", "--seed", "1"]) == EXIT_FAILED
    captured = capsys.readouterr()
    assert "maze generation failed" in captured.err
    assert captured.out == ""


@pytest.mark.parametrize("text", ["1_0", " 3", "3 ", "+", "", "٣", "0x5"])
def test_width_must_be_plain_decimal(capsys, text):
    assert run([text, "3"]) == EXIT_NOT_NUMBER
    assert f"width is not number ({text})" in capsys.readouterr().err


def test_signed_decimal_is_a_number(capsys):
    assert run(["+3", "2", "--no-dot"]) == EXIT_OK
    assert run(["3", "-0"]) == EXIT_BAD_SIZE


def test_unwritable_dot_path(capsys, in_tmp):
    assert run(["2", "2", "--dot", str(in_tmp / "missing" / "m.dot")]) == EXIT_WRITE
    assert "cannot write output" in capsys.readouterr().err


def test_unwritable_json_path(capsys, in_tmp):
    assert run(["2", "2", "--no-dot", "--json", str(in_tmp / "missing" / "m.json")]) == EXIT_WRITE


def test_unwritable_png_path(capsys, in_tmp):
    (in_tmp / "blocker").write_text("not a directory", encoding="utf-8")
    assert run(["2", "2", "--no-dot", "--png", str(in_tmp / "blocker" / "m.png")]) == EXIT_WRITE


def test_cell_size_ignored_without_raster_output(capsys):
    assert run(["3", "3", "--no-dot", "--cell-size", "1"]) == EXIT_OK
    assert run(["3", "3", "--no-dot", "--png", "m.png", "--cell-size", "1"]) == EXIT_USAGE
