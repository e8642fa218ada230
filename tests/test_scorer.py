import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "../src")))

from wordmetrics.scorer import SearchResult, score_keywords


def test_each_occurrence_adds_weight():
    result = score_keywords(["word"], ["one", "word", "two", "word"])
    assert result == SearchResult(2, ["word"])


def test_earlier_keywords_weigh_more():
    score, matched = score_keywords(["b", "a"], ["a", "b", "c"])
    # b 在第 0 位权重 2，a 在第 1 位权重 1
    assert score == 3
    # matched 按正文出现顺序
    assert matched == ["a", "b"]


def test_duplicate_query_keywords_compound():
    score, matched = score_keywords(["a", "a"], ["a"])
    assert score == 3
    assert matched == ["a"]


def test_no_keywords_or_no_match():
    assert score_keywords([], ["a"]) == (0, [])
    assert score_keywords(["x"], ["a", "b"]) == (0, [])
