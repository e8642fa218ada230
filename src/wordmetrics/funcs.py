"""使用默认配置的快捷函数"""

from typing import Callable, List

from .metrics import ReadingMetrics
from .scorer import SearchResult
from .words import Words


def tokenize(text: str) -> List[str]:
    return Words.default().tokenize(text)


def range_words(text: str, consumer: Callable[[str], None]) -> None:
    Words.default().range_words(text, consumer)


def count(text: str) -> int:
    return Words.default().count(text)


def parse(text: str) -> List[str]:
    return Words.default().parse(text)


def search(query: str, content: str) -> SearchResult:
    return Words.default().search(query, content)


def metrics(content: str) -> ReadingMetrics:
    return Words.default().metrics(content)
