# tests/test_find_compound_words.py
"""Tests for the command-line driver."""

import pytest

import word_sources
from find_compound_words import build_parser, main


@pytest.fixture
def words_path(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("cat\ndog\ndogcat\ncatdogcat\na\n", encoding="utf-8")
    return path


@pytest.fixture
def output_path(tmp_path):
    return tmp_path / "out.txt"


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.input == "wordsforproblem.txt"
    assert args.output == "output_wordsforproblem.txt"
    assert args.source == "file"
    assert args.limit is None
    assert not args.show_parts
    assert not args.debug


def test_main_reports_and_writes(words_path, output_path, capsys):
    assert main([str(words_path), "-o", str(output_path)]) == 0

    out = capsys.readouterr().out
    assert "Input words: 5" in out
    assert "The longest output: catdogcat" in out
    assert "The second longest output: dogcat" in out
    assert "Total Found words: 2" in out
    assert "Seconds to execute:" in out
    assert output_path.read_text(encoding="utf-8") == "catdogcat\ndogcat\n"


def test_main_show_parts(words_path, output_path):
    main([str(words_path), "-o", str(output_path), "--show-parts"])
    assert output_path.read_text(encoding="utf-8").splitlines() == [
        "catdogcat: cat + dog + cat",
        "dogcat: dog + cat",
    ]


def test_main_one_result_has_no_second_longest(tmp_path, output_path, capsys):
    path = tmp_path / "words.txt"
    path.write_text("sun\nflower\nsunflower\n", encoding="utf-8")

    main([str(path), "-o", str(output_path)])

    out = capsys.readouterr().out
    assert "The longest output: sunflower" in out
    assert "second longest" not in out
    assert "Total Found words: 1" in out


def test_main_empty_input(tmp_path, output_path, capsys):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")

    assert main([str(path), "-o", str(output_path)]) == 0

    out = capsys.readouterr().out
    assert "Input words: 0" in out
    assert "Total Found words: 0" in out
    assert output_path.read_text(encoding="utf-8") == ""


def test_main_skips_invalid_words(tmp_path, output_path, capsys):
    path = tmp_path / "words.txt"
    path.write_text("cat\ndog\ncat-dog\ncatdog\n", encoding="utf-8")

    main([str(path), "-o", str(output_path)])

    captured = capsys.readouterr()
    assert "Input words: 3" in captured.out
    assert "Skipped invalid words: 1" in captured.out
    assert "Warning: skipping invalid word 'cat-dog' on line 3" in captured.err
    assert output_path.read_text(encoding="utf-8") == "catdog\n"


def test_main_missing_input(tmp_path, output_path, capsys):
    with pytest.raises(SystemExit) as info:
        main([str(tmp_path / "missing.txt"), "-o", str(output_path)])

    assert info.value.code == 1
    assert "ERROR: file loader error: file not found" in capsys.readouterr().err
    assert not output_path.exists()


def test_main_unwritable_output(words_path, tmp_path, capsys):
    with pytest.raises(SystemExit) as info:
        main([str(words_path), "-o", str(tmp_path / "no" / "such" / "dir.txt")])

    assert info.value.code == 1
    assert "ERROR: output error" in capsys.readouterr().err


def test_main_wordfreq_source(monkeypatch, output_path, capsys):
    monkeypatch.setattr(
        word_sources, "iter_wordlist",
        lambda lang: iter(["the", "rain", "bow", "rainbow", "day"]),
    )

    main(["--source", "wordfreq", "-o", str(output_path)])

    assert "Input words: 5" in capsys.readouterr().out
    assert output_path.read_text(encoding="utf-8") == "rainbow\n"


def test_main_limit(words_path, output_path, capsys):
    main([str(words_path), "-o", str(output_path), "--limit", "3"])

    assert "Input words: 3" in capsys.readouterr().out
    assert output_path.read_text(encoding="utf-8") == "dogcat\n"


def test_main_rejects_negative_limit(words_path, output_path):
    with pytest.raises(SystemExit) as info:
        main([str(words_path), "-o", str(output_path), "--limit", "-1"])
    assert info.value.code == 2


def test_main_debug_output(words_path, output_path, capsys):
    try:
        main([str(words_path), "-o", str(output_path), "--debug"])
    finally:
        word_sources.set_debug(False)
    assert "DEBUG: main:" in capsys.readouterr().err
