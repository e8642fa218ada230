"""按空格分词：去除标点与符号后切分。"""

from __future__ import annotations

from typing import AbstractSet, List

import regex

_SPACES_RE = regex.compile(r"\s+")
_SYMBOLS_RE = regex.compile(r"\p{S}")


def tokenize(text: str, punctuation: AbstractSet[str], as_breaker: bool = False) -> List[str]:
    """
    去掉标点和符号后按空白切分
    规则：
    - as_breaker 为 True 时标点替换为空格，否则直接删除（"they're" -> "theyre"）
    - Unicode 符号（货币、数学符号等）总是删除
    - 无空格文字仍会粘在一起，由 segmenter 负责拆分
    """
    work = (text or "").strip()
    if not work:
        return []

    if punctuation:
        spacer = " " if as_breaker else None
        work = work.translate({ord(ch): spacer for ch in punctuation})

    work = _SYMBOLS_RE.sub("", work)
    work = _SPACES_RE.sub(" ", work).strip()
    if not work:
        return []
    return work.split(" ")
