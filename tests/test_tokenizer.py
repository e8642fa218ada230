import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "../src")))

from wordmetrics.constants import DEFAULT_PUNCTUATION
from wordmetrics.tokenizer import tokenize


def test_empty_and_blank_input_yield_no_tokens():
    assert tokenize("", DEFAULT_PUNCTUATION) == []
    assert tokenize("   ", DEFAULT_PUNCTUATION) == []
    assert tokenize("\t\n", DEFAULT_PUNCTUATION, as_breaker=True) == []


def test_only_punctuation_yields_no_tokens():
    assert tokenize("!!! ... ???", DEFAULT_PUNCTUATION) == []


def test_punctuation_is_deleted_by_default():
    assert tokenize("they're", DEFAULT_PUNCTUATION) == ["theyre"]
    assert tokenize("Hello, world!", DEFAULT_PUNCTUATION) == ["Hello", "world"]
    assert tokenize("a,b", DEFAULT_PUNCTUATION) == ["ab"]


def test_punctuation_as_breaker_splits_words():
    assert tokenize("they're", DEFAULT_PUNCTUATION, as_breaker=True) == ["they", "re"]
    assert tokenize("a,b", DEFAULT_PUNCTUATION, as_breaker=True) == ["a", "b"]


def test_symbols_are_always_removed():
    # '+' 与 '€' 是 Unicode 符号，不在标点集合中
    assert tokenize("price 5 + tax €", DEFAULT_PUNCTUATION) == ["price", "5", "tax"]
    assert tokenize("a+b", frozenset(), as_breaker=True) == ["ab"]


def test_whitespace_runs_collapse():
    assert tokenize("  one \t\n two  ", frozenset()) == ["one", "two"]


def test_space_less_scripts_stay_clumped():
    assert tokenize("helloさようなら world", DEFAULT_PUNCTUATION) == ["helloさようなら", "world"]
