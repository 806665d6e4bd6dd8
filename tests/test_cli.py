import io

import pytest

from termtetris.cli import main, run
from termtetris.options import apply_settings, default_bindings, format_bindings, usage
from termtetris.pieces import format_pieces, load_pieces

START = "Press any key to start Tetris\n"


@pytest.fixture
def pieces_dir(tmp_path):
    directory = tmp_path / "tetrimino"
    directory.mkdir()
    (directory / "bar.tetrimino").write_text("3 2 4\n***\n *\n")
    (directory / "broken.tetrimino").write_text("9 9 9\n*\n")
    return directory


def test_no_arguments_prints_usage(pieces_dir):
    out = io.StringIO()
    assert run(["tetris"], out, pieces_dir) == 84
    assert out.getvalue() == usage("tetris")


def test_help_then_start(pieces_dir):
    out = io.StringIO()
    assert run(["tetris", "--help"], out, pieces_dir) == 0
    assert out.getvalue() == usage("tetris") + START


def test_plain_start(pieces_dir):
    out = io.StringIO()
    assert run(["tetris", "-l", "5"], out, pieces_dir) == 0
    assert out.getvalue() == START


def test_invalid_argument(pieces_dir):
    out = io.StringIO()
    assert run(["tetris", "--bogus=1"], out, pieces_dir) == 84
    assert out.getvalue() == usage("tetris")


def test_help_with_invalid_argument_prints_usage_once(pieces_dir):
    out = io.StringIO()
    assert run(["tetris", "--help", "--bogus=1"], out, pieces_dir) == 84
    assert out.getvalue() == usage("tetris")


def test_missing_pieces_directory(tmp_path):
    out = io.StringIO()
    assert run(["tetris", "-l", "5"], out, tmp_path / "missing") == 84
    assert out.getvalue() == ""


def test_debug_output(pieces_dir):
    argv = ["tetris", "-d", "-kl", "z"]
    out = io.StringIO()
    assert run(argv, out, pieces_dir) == 0
    expected = (
        format_bindings(apply_settings(default_bindings(), argv))
        + format_pieces(load_pieces(pieces_dir))
        + START
    )
    assert out.getvalue() == expected
    assert "Key Left : z\n" in out.getvalue()


def test_main_rejects_unknown_flag(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["-kz", "a"]) == 84
    assert capsys.readouterr().out == usage("tetris")


def test_main_without_arguments(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 84
    assert capsys.readouterr().out == usage("tetris")