"""wordmetrics - 多语言分词、字数统计与阅读时间估算。"""

from .config import EffectiveSettings, WordsConfig, normalize
from .constants import (
    AVERAGE_WORDS_PER_MINUTE,
    DEFAULT_PUNCTUATION,
    RELAXED_WORDS_PER_MINUTE,
)
from .funcs import count, metrics, parse, range_words, search, tokenize
from .metrics import ReadingMetrics, ReadingTime
from .scorer import SearchResult
from .words import Words

__version__ = "0.1.0"

__all__ = [
    "AVERAGE_WORDS_PER_MINUTE",
    "DEFAULT_PUNCTUATION",
    "EffectiveSettings",
    "RELAXED_WORDS_PER_MINUTE",
    "ReadingMetrics",
    "ReadingTime",
    "SearchResult",
    "Words",
    "WordsConfig",
    "count",
    "metrics",
    "normalize",
    "parse",
    "range_words",
    "search",
    "tokenize",
]
