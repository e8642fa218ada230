"""
阅读时间估算

根据字数推算平均与慢速两种阅读时间。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Dict


@dataclass(frozen=True)
class ReadingTime:
    """整分钟数（用于展示）与精确时长"""

    minutes: int
    duration: timedelta

    def to_dict(self) -> Dict[str, Any]:
        return {"minutes": self.minutes, "seconds": self.duration.total_seconds()}


@dataclass(frozen=True)
class ReadingMetrics:
    word_count: int
    average: ReadingTime
    relaxed: ReadingTime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "word_count": self.word_count,
            "average": self.average.to_dict(),
            "relaxed": self.relaxed.to_dict(),
        }


def estimate(word_count: int, average_wpm: float, relaxed_wpm: float) -> ReadingMetrics:
    """
    按字数估算阅读时间
    平均速度向下取整，慢速向上取整，两者给出以整分钟计的大致区间。
    """
    avg_time = word_count / average_wpm
    rel_time = word_count / relaxed_wpm
    return ReadingMetrics(
        word_count=word_count,
        average=ReadingTime(math.floor(avg_time), timedelta(minutes=avg_time)),
        relaxed=ReadingTime(math.ceil(rel_time), timedelta(minutes=rel_time)),
    )
