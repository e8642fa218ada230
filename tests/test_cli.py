import io
import json
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "../src")))

from wordmetrics.cli import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in [
        "WORDS_PUNCTUATION_AS_BREAKER",
        "WORDS_DISABLE_DEFAULT_PUNCTUATION",
        "WORDS_PUNCTUATION",
        "WORDS_AVERAGE_WPM",
        "WORDS_RELAXED_WPM",
    ]:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_count_text_argument(capsys):
    assert main(["count", "one two"]) == 0
    assert capsys.readouterr().out.strip() == "2"


def test_metrics_json(capsys):
    assert main(["metrics", "--json", "one two"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["word_count"] == 2
    assert data["average"]["minutes"] == 0
    assert data["relaxed"]["minutes"] == 1


def test_search_json(capsys):
    main(["search", "word", "one word two word", "--json"])
    assert json.loads(capsys.readouterr().out) == {"score": 2, "matched": ["word"]}


def test_parse_from_file(tmp_path, capsys):
    path = tmp_path / "sample.txt"
    path.write_text("helloさようなら", encoding="utf-8")
    main(["parse", "--file", str(path), "--json"])
    assert json.loads(capsys.readouterr().out) == ["hello", "さ", "よ", "う", "な", "ら"]


def test_count_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("a b c"))
    main(["count"])
    assert capsys.readouterr().out.strip() == "3"


def test_breaker_flag_and_env(clean_env, capsys):
    main(["tokenize", "--breaker", "they're"])
    assert capsys.readouterr().out.split() == ["they", "re"]

    clean_env.setenv("WORDS_PUNCTUATION_AS_BREAKER", "true")
    main(["tokenize", "they're"])
    assert capsys.readouterr().out.split() == ["they", "re"]


def test_missing_file_exits_with_error(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["count", "--file", str(tmp_path / "missing.txt")])
    assert exc_info.value.code == 1
    assert "missing.txt" in capsys.readouterr().err


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "wordmetrics" in capsys.readouterr().out
