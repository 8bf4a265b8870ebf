import pytest

from wordament.cli import build_grid, format_solution, main, parse_overrides
from wordament.grid import LETTER_VALUES
from wordament.settings import Settings
from wordament.solver import FoundWord, Solution


@pytest.fixture
def dict_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("ad\nbad\ncab\ncad\nab\na\n")
    return path


def _run(dict_file, *extra: str) -> int:
    argv = ["--letters", "ab/cd", "-w", "2", "-H", "2", "--values", "1,1,1,1",
            "-d", str(dict_file), "--min-length", "1", *extra]
    return main(argv, cfg=Settings())


def test_solves_grid(dict_file, capsys):
    assert _run(dict_file) == 0
    out = capsys.readouterr().out
    assert "| (a: 1) | (b: 1) |" in out
    assert "score: 14, words: a, ab, ad, bad, cab, cad" in out


def test_first_match(tmp_path, capsys):
    path = tmp_path / "words.txt"
    path.write_text("ab\n")
    argv = ["--letters", "abba", "-w", "2", "-H", "2", "-d", str(path),
            "--min-length", "1", "--first-match"]
    assert main(argv, cfg=Settings()) == 0
    assert "words: ab\n" in capsys.readouterr().out


def test_report_all_paths_setting(tmp_path, capsys):
    path = tmp_path / "words.txt"
    path.write_text("ab\n")
    argv = ["--letters", "abba", "-w", "2", "-H", "2", "-d", str(path),
            "--set", "MIN_WORD_LENGTH=1", "--set", "REPORT_ALL_PATHS=false"]
    assert main(argv, cfg=Settings()) == 0
    assert "words: ab\n" in capsys.readouterr().out


def test_threaded_run(dict_file, capsys):
    assert _run(dict_file, "--workers", "3") == 0
    assert "score: 14, words: a, ab, ad, bad, cab, cad" in capsys.readouterr().out


def test_verbose_lists_paths(dict_file, capsys):
    assert _run(dict_file, "-v") == 0
    out = capsys.readouterr().out
    assert "cab" in out
    assert "(1,0) (0,0) (0,1)" in out


def test_dump_dictionary(dict_file, capsys):
    assert _run(dict_file, "--dump-dictionary") == 0
    out = capsys.readouterr().out
    assert "a: is word\n- b: is word\n- d: is word" in out


def test_missing_dictionary_exits_before_solving(tmp_path, capsys):
    assert _run(tmp_path / "missing.txt") == 1
    assert "score:" not in capsys.readouterr().out


def test_wrong_letter_count(dict_file, capsys):
    argv = ["--letters", "abc", "-w", "2", "-H", "2", "-d", str(dict_file)]
    assert main(argv, cfg=Settings()) == 1
    assert capsys.readouterr().out == ""


def test_invalid_letter(dict_file):
    argv = ["--letters", "ab1d", "-w", "2", "-H", "2", "-d", str(dict_file)]
    assert main(argv, cfg=Settings()) == 1


def test_bad_setting_override(dict_file):
    assert _run(dict_file, "--set", "NOPE=1") == 1
    assert _run(dict_file, "--set", "novalue") == 1


def test_parse_overrides():
    assert parse_overrides(["DEBUG=true", " MAX_WORKERS = 4 "]) == {"DEBUG": "true", "MAX_WORKERS": "4"}
    with pytest.raises(ValueError):
        parse_overrides(["=1"])


def test_build_grid_default_values():
    grid = build_grid("Tape Insa", 4, 2)
    assert grid.get(0, 0).letter == "t"
    assert grid.get(1, 2).value == LETTER_VALUES["s"]


def test_build_grid_value_count_mismatch():
    with pytest.raises(ValueError):
        build_grid("ab", 2, 1, "1")


def test_format_solution_verbose_table():
    solution = Solution()
    solution.record(FoundWord("ab", 3, ((0, 0), (0, 1))))
    text = format_solution(solution, verbose=True)
    assert text.splitlines()[0] == "score: 3, words: ab"
    assert "(0,0) (0,1)" in text
    assert format_solution(Solution()) == "score: 0, words: "
