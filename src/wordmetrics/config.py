"""
配置管理

WordsConfig 是调用方提供的不可变配置；normalize() 从中推导出每次调用实际使用的
标点集合与阅读速度。
"""
import math
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import FrozenSet, Iterable

from .constants import (
    AVERAGE_WORDS_PER_MINUTE,
    DEFAULT_PUNCTUATION,
    RELAXED_WORDS_PER_MINUTE,
)


def _env_bool(name: str, default: bool) -> bool:
    """读取布尔环境变量，非法值回退默认值。"""
    value = os.getenv(name)
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in {"1", "true", "yes", "on"}:
        return True
    if lowered in {"0", "false", "no", "off"}:
        return False
    return default


def _env_float(name: str, default: float) -> float:
    """读取浮点环境变量，非法值回退默认值。"""
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value.strip())
    except ValueError:
        return default


def _flatten_chars(values: Iterable[str]) -> FrozenSet[str]:
    """把任意字符串集合拆成单字符集合。"""
    if isinstance(values, str):
        values = [values]
    return frozenset(ch for item in values or () for ch in str(item))


@dataclass(frozen=True)
class WordsConfig:
    """分词与阅读时间配置"""

    # True 时标点替换为空格（拆词）；False 时直接删除（"they're" -> "theyre"）
    punctuation_as_breaker: bool = False
    # True 时只使用 punctuation 中的字符
    disable_default_punctuation: bool = False
    punctuation: FrozenSet[str] = field(default_factory=frozenset)

    # 阅读速度，<= 0 时使用默认值
    average_wpm: float = AVERAGE_WORDS_PER_MINUTE
    relaxed_wpm: float = RELAXED_WORDS_PER_MINUTE

    def __post_init__(self):
        object.__setattr__(self, "punctuation", _flatten_chars(self.punctuation))

    @classmethod
    def default(cls) -> "WordsConfig":
        return cls()

    @classmethod
    def from_env(cls) -> "WordsConfig":
        """从环境变量加载配置"""
        return cls(
            punctuation_as_breaker=_env_bool("WORDS_PUNCTUATION_AS_BREAKER", False),
            disable_default_punctuation=_env_bool("WORDS_DISABLE_DEFAULT_PUNCTUATION", False),
            punctuation=os.getenv("WORDS_PUNCTUATION", ""),
            average_wpm=_env_float("WORDS_AVERAGE_WPM", AVERAGE_WORDS_PER_MINUTE),
            relaxed_wpm=_env_float("WORDS_RELAXED_WPM", RELAXED_WORDS_PER_MINUTE),
        )


@dataclass(frozen=True)
class EffectiveSettings:
    """由 WordsConfig 推导出的单次调用实际参数"""

    punctuation: FrozenSet[str]
    as_breaker: bool
    average_wpm: float
    relaxed_wpm: float


def _valid_wpm(value: float, default: float) -> float:
    try:
        wpm = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(wpm) or wpm <= 0:
        return default
    return wpm


@lru_cache(maxsize=128)
def normalize(config: WordsConfig) -> EffectiveSettings:
    """
    计算实际使用的标点集合与阅读速度
    配置不可变，结果按配置缓存，无需失效处理。
    """
    punctuation = frozenset() if config.disable_default_punctuation else DEFAULT_PUNCTUATION
    return EffectiveSettings(
        punctuation=punctuation | config.punctuation,
        as_breaker=config.punctuation_as_breaker,
        average_wpm=_valid_wpm(config.average_wpm, AVERAGE_WORDS_PER_MINUTE),
        relaxed_wpm=_valid_wpm(config.relaxed_wpm, RELAXED_WORDS_PER_MINUTE),
    )
