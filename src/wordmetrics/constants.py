"""阅读速度与默认标点常量"""

# 成年人平均阅读速度（词/分钟）
AVERAGE_WORDS_PER_MINUTE = 238.0

# 较慢的阅读速度：年龄较小的读者，或整天盯着屏幕的疲惫读者
RELAXED_WORDS_PER_MINUTE = 177.0

DEFAULT_PUNCTUATION = frozenset(
    [
        ",", "，", ".", "。", ":", "：", ";", "；",
        "[", "]", "【", "】", "{", "｛", "}", "｝",
        "(", "（", ")", "）", "<", "《", ">", "》",
        "$", "￥", "!", "！", "?", "？", "~", "～",
        "'", "’", "‘", '"', "“", "”",
        "*", "/", "\\", "&", "%", "@", "#", "^",
        "、", "「", "」", "『", "』", "〈", "〉", "…", "・",
    ]
)
