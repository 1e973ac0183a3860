import json

import pytest

from solve_cli import main


@pytest.fixture
def clue_files(tmp_path):
    def write(rows, cols):
        rows_path = tmp_path / "rows.txt"
        cols_path = tmp_path / "cols.txt"
        rows_path.write_text(rows)
        cols_path.write_text(cols)
        return str(rows_path), str(cols_path)
    return write


def test_solves_and_prints(clue_files, capsys):
    rows, cols = clue_files("2\n0\n", "1\n1\n")
    assert main(["-r", rows, "-c", cols]) == 0
    assert capsys.readouterr().out == "XX\n  \n"


def test_custom_symbols(clue_files, capsys):
    rows, cols = clue_files("1\n1\n1\n", "1\n1\n1\n")
    assert main(["-r", rows, "-c", cols, "-E", ".", "-U", "~", "-F", "#"]) == 0
    assert capsys.readouterr().out == "~~~\n~~~\n~~~\n"


def test_process_flag_traces(clue_files, capsys):
    rows, cols = clue_files("3\n1\n", "1\n2\n1\n")
    assert main(["-r", rows, "-c", cols, "-p", "-E", "."]) == 0
    assert capsys.readouterr().out == "XXX\n.X.\n\nXXX\n.X.\n"


def test_contradiction_exit_code(clue_files, capsys):
    rows, cols = clue_files("1\n", "0\n")
    assert main(["-r", rows, "-c", cols]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Failed to solve nonogram." in captured.err


def test_bad_file_exit_code(clue_files, capsys):
    rows, cols = clue_files("1 a\n", "1\n")
    assert main(["-r", rows, "-c", cols]) == 1
    assert "Failed to read and parse file." in capsys.readouterr().err


def test_json_input_and_image(tmp_path, capsys):
    puzzle = tmp_path / "p.json"
    puzzle.write_text(json.dumps({"row_hints": [[1], []], "col_hints": [[1], []]}))
    image = tmp_path / "out.png"
    assert main(["-j", str(puzzle), "--image", str(image)]) == 0
    assert capsys.readouterr().out == "X \n  \n"
    assert image.exists()


def test_missing_sources():
    with pytest.raises(SystemExit):
        main(["-r", "rows.txt"])
