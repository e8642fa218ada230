"""
无空格文字切分

汉字、片假名、平假名、谚文书写时词间没有空格，这里把其中每个字符各算一个词；
同一 token 内夹杂的其他字符（如紧贴日文的英文）保持为连续的整体。
"""

from __future__ import annotations

from enum import Enum
from typing import AbstractSet, Callable, Iterable, Iterator, List

import regex

_SCRIPT_RE = regex.compile(
    r"[\p{Script=Han}\p{Script=Katakana}\p{Script=Hiragana}\p{Script=Hangul}]"
)


class SegmentState(Enum):
    ACCUMULATING_RUN = "accumulating_run"
    EMIT_SCRIPT_CHAR = "emit_script_char"


def is_script_char(ch: str) -> bool:
    return _SCRIPT_RE.match(ch) is not None


def has_script_chars(token: str) -> bool:
    return _SCRIPT_RE.search(token) is not None


def split_token(token: str, punctuation: AbstractSet[str]) -> Iterator[str]:
    """按从左到右的顺序产出单个 token 中的词"""
    if not has_script_chars(token):
        yield token
        return

    # ACCUMULATING_RUN 时 run 必然非空
    state = SegmentState.EMIT_SCRIPT_CHAR
    run: List[str] = []
    for ch in token:
        if is_script_char(ch):
            if state is SegmentState.ACCUMULATING_RUN:
                yield "".join(run)
                run = []
            state = SegmentState.EMIT_SCRIPT_CHAR
            yield ch
        elif ch not in punctuation:
            state = SegmentState.ACCUMULATING_RUN
            run.append(ch)

    if state is SegmentState.ACCUMULATING_RUN:
        yield "".join(run)


def iter_segments(tokens: Iterable[str], punctuation: AbstractSet[str]) -> Iterator[str]:
    for token in tokens:
        yield from split_token(token, punctuation)


def segment(
    tokens: Iterable[str],
    punctuation: AbstractSet[str],
    consumer: Callable[[str], None],
) -> None:
    """逐个把词交给 consumer，不构造中间列表"""
    for word in iter_segments(tokens, punctuation):
        consumer(word)
