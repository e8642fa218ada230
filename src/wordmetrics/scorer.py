"""
关键词打分

按关键词位置加权的简单匹配打分。
"""

from __future__ import annotations

from typing import List, NamedTuple, Sequence


class SearchResult(NamedTuple):
    score: int
    matched: List[str]


def score_keywords(keywords: Sequence[str], haystack: Sequence[str]) -> SearchResult:
    """
    对 haystack 按 keywords 打分
    规则：
    - 第 i 个关键词权重为 len(keywords) - i，越靠前越重要
    - 正文中每出现一次就累加一次权重
    - 查询里重复的关键词在每个位置各计一次
    - matched 按正文中首次命中的顺序去重
    """
    keyword_count = len(keywords)
    score = 0
    found: List[str] = []
    for word in haystack:
        for idx, keyword in enumerate(keywords):
            if word == keyword:
                score += keyword_count - idx
                found.append(word)
    return SearchResult(score, list(dict.fromkeys(found)))
