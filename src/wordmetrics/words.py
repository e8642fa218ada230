"""
Words - 统一入口

按给定配置执行分词、字数统计、关键词检索与阅读时间估算。
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from .config import EffectiveSettings, WordsConfig, normalize
from .metrics import ReadingMetrics, estimate
from .scorer import SearchResult, score_keywords
from .segmenter import segment
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


class Words:
    """使用固定 WordsConfig 执行各项操作"""

    def __init__(self, config: Optional[WordsConfig] = None):
        self.config = config or WordsConfig.default()

    @classmethod
    def default(cls) -> "Words":
        return cls(WordsConfig.default())

    def _settings(self) -> EffectiveSettings:
        return normalize(self.config)

    def tokenize(self, text: str) -> List[str]:
        """按空格切分；中日韩字符仍粘连，逐字拆分请用 parse()"""
        settings = self._settings()
        return tokenize(text, settings.punctuation, settings.as_breaker)

    def range_words(self, text: str, consumer: Callable[[str], None]) -> None:
        """每找到一个词调用一次 consumer"""
        settings = self._settings()
        tokens = tokenize(text, settings.punctuation, settings.as_breaker)
        segment(tokens, settings.punctuation, consumer)

    def count(self, text: str) -> int:
        total = 0

        def _count(_word: str) -> None:
            nonlocal total
            total += 1

        self.range_words(text, _count)
        return total

    def parse(self, text: str) -> List[str]:
        words: List[str] = []
        self.range_words(text, words.append)
        return words

    def search(self, query: str, content: str) -> SearchResult:
        """忽略大小写的关键词检索，返回得分与命中的关键词（权重见 scorer.score_keywords）"""
        keywords = self.parse((query or "").lower())
        haystack = self.parse((content or "").lower())
        result = score_keywords(keywords, haystack)
        logger.debug(
            "search: %d keywords over %d words, score=%d matched=%s",
            len(keywords), len(haystack), result.score, result.matched,
        )
        return result

    def metrics(self, content: str) -> ReadingMetrics:
        settings = self._settings()
        word_count = self.count(content)
        result = estimate(word_count, settings.average_wpm, settings.relaxed_wpm)
        logger.debug(
            "metrics: %d words at %.1f/%.1f wpm",
            word_count, settings.average_wpm, settings.relaxed_wpm,
        )
        return result
