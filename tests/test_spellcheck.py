import io

import pytest

from algolab.spellcheck import (
    INT_MAX,
    Correction,
    EmptyFileError,
    best_match,
    correct_file,
    correct_lines,
    delete_punct,
    load_dictionary,
    main,
)

DICTIONARY = "casa\ncara\nvino\npassato\npioppo\n"
CORRECTME = "casa\ntassa\nvinaio\noppio\n"


@pytest.fixture
def files(tmp_path):
    d = tmp_path / "dictionary.txt"
    c = tmp_path / "correctme.txt"
    d.write_text(DICTIONARY)
    c.write_text(CORRECTME)
    return d, c


def test_correct_file_leaves_input_unchanged(files):
    d, c = files
    correct_file(str(d), str(c), io.StringIO())
    lines = c.read_text().splitlines(keepends=True)
    assert lines[0] == "casa\n"
    assert lines[1] == "tassa\n"


def test_correct_file_results(files):
    d, c = files
    out = io.StringIO()
    result = correct_file(str(d), str(c), out)
    assert result == [
        Correction("casa", "casa", 0),
        Correction("tassa", "casa", 3),
        Correction("vinaio", "vino", 2),
        Correction("oppio", "pioppo", 3),
    ]
    text = out.getvalue()
    assert text.startswith("Parola trovata\t\tParola corretta\t\tEdit Distance\n")
    assert "Parola da correggere: tassa\n" in text
    assert "tassa\t\tcasa\t\t3\n" in text


def test_empty_dictionary_raises(tmp_path, files):
    _, c = files
    empty = tmp_path / "empty.txt"
    empty.write_text("")
    with pytest.raises(EmptyFileError):
        correct_file(str(empty), str(c), io.StringIO())


def test_empty_text_raises(tmp_path, files):
    d, _ = files
    empty = tmp_path / "empty.txt"
    empty.write_text("")
    with pytest.raises(EmptyFileError):
        correct_file(str(d), str(empty), io.StringIO())


def test_delete_punct():
    assert delete_punct("Hello, world! 42.") == "Hello world 42"


def test_delete_punct_drops_non_ascii_and_tabs():
    assert delete_punct("perché\tsì") == "perchs"


def test_load_dictionary_lowercases():
    assert load_dictionary(["Casa\n", "VINO\n"]) == ["casa", "vino"]


def test_load_dictionary_empty():
    with pytest.raises(EmptyFileError):
        load_dictionary([])


def test_best_match_prefers_first_on_tie():
    assert best_match("ab", ["a", "b"]) == Correction("ab", "a", 1)


def test_best_match_without_words():
    assert best_match("x", []) == Correction("x", None, INT_MAX)


def test_correct_lines_splits_and_cleans():
    words = ["casa", "vino"]
    result = list(correct_lines(words, ["Casa, VINO!\n"]))
    assert [(c.word, c.correction, c.distance) for c in result] == [
        ("casa", "casa", 0),
        ("vino", "vino", 0),
    ]


def test_main_missing_arguments(capsys):
    assert main(["only_one"]) == 1
    assert "Argomenti non validi!" in capsys.readouterr().out


def test_main_missing_first_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.txt"), str(tmp_path / "nope2.txt")]) == 1
    assert "Il primo file non esiste!" in capsys.readouterr().out


def test_main_missing_second_file(files, tmp_path, capsys):
    d, _ = files
    assert main([str(d), str(tmp_path / "nope.txt")]) == 1
    assert "Il secondo file non esiste!" in capsys.readouterr().out


def test_main_success(files, capsys):
    d, c = files
    assert main([str(d), str(c)]) == 0
    output = capsys.readouterr().out
    assert "vinaio\t\tvino\t\t2" in output
    assert output.rstrip().endswith("ALL DONE!")