"""Tests for the console entry point."""

import io

import pytest

from maze_game.cli import EXIT_LOAD_FAILED, EXIT_OK, main


# Sample maze for testing
SIMPLE_MAZE = """#####
#S  #
# # #
#  E#
#####"""


@pytest.fixture
def maze_file(tmp_path):
    path = tmp_path / "simple.txt"
    path.write_text(SIMPLE_MAZE + "\n")
    return path


def run_cli(argv, commands=""):
    stdout = io.StringIO()
    code = main(argv, stdin=io.StringIO(commands), stdout=stdout)
    return code, stdout.getvalue()


def test_play_to_victory(maze_file):
    code, out = run_cli([str(maze_file)], "D\nD\nS\nS\n")

    assert code == EXIT_OK
    assert "!!! VICTORY !!!" in out


def test_quit(maze_file):
    code, out = run_cli([str(maze_file)], "Q\n")

    assert code == EXIT_OK
    assert "Game quit." in out


def test_missing_file(tmp_path, capsys):
    code, _ = run_cli([str(tmp_path / "missing.txt")], "Q\n")

    assert code == EXIT_LOAD_FAILED
    assert "Failed to load maze" in capsys.readouterr().err


def test_invalid_maze(tmp_path, capsys):
    path = tmp_path / "small.txt"
    path.write_text("#####\n#S E#\n#####\n")

    code, _ = run_cli([str(path)])

    assert code == EXIT_LOAD_FAILED
    assert "Invalid maze dimensions" in capsys.readouterr().err


def test_generate_with_seed():
    code, first = run_cli(["--generate", "--seed", "42", "--max-size", "15"], "M\nQ\n")
    _, second = run_cli(["--generate", "--seed", "42", "--max-size", "15"], "M\nQ\n")

    assert code == EXIT_OK
    assert "X" in first
    assert first == second


def test_generate_invalid_range(capsys):
    code, _ = run_cli(["--generate", "--min-size", "20", "--max-size", "10"])

    assert code == EXIT_LOAD_FAILED
    assert "Invalid generator settings" in capsys.readouterr().err


def test_no_arguments_is_usage_error():
    with pytest.raises(SystemExit) as exc_info:
        main([])

    assert exc_info.value.code == 2


def test_file_and_generate_conflict(maze_file):
    with pytest.raises(SystemExit) as exc_info:
        main([str(maze_file), "--generate"])

    assert exc_info.value.code == 2
