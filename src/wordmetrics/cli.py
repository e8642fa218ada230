#!/usr/bin/env python3
"""
wordmetrics CLI - 命令行入口
"""
import argparse
import dataclasses
import json
import sys

from dotenv import load_dotenv

from .config import WordsConfig
from .logger import setup_logging
from .words import Words


def _read_text(args) -> str:
    """读取输入文本：位置参数 > --file > 标准输入"""
    if args.text is not None:
        return args.text
    if args.file:
        try:
            with open(args.file, "r", encoding="utf-8") as f:
                return f.read()
        except OSError as exc:
            print(f"❌ 无法读取文件 {args.file}: {exc}", file=sys.stderr)
            raise SystemExit(1)
    return sys.stdin.read()


def _build_words(args) -> Words:
    """环境变量配置 + 命令行覆盖"""
    config = WordsConfig.from_env()
    overrides = {}
    if args.breaker:
        overrides["punctuation_as_breaker"] = True
    if args.no_default_punctuation:
        overrides["disable_default_punctuation"] = True
    if args.punctuation:
        overrides["punctuation"] = config.punctuation | frozenset(args.punctuation)
    if args.average_wpm is not None:
        overrides["average_wpm"] = args.average_wpm
    if args.relaxed_wpm is not None:
        overrides["relaxed_wpm"] = args.relaxed_wpm
    if overrides:
        config = dataclasses.replace(config, **overrides)
    return Words(config)


def _emit(args, payload, lines):
    if args.json:
        print(json.dumps(payload, ensure_ascii=False))
    else:
        for line in lines:
            print(line)


def cmd_tokenize(args):
    """按空格切分"""
    tokens = _build_words(args).tokenize(_read_text(args))
    _emit(args, tokens, tokens)


def cmd_parse(args):
    """完整分词（中日韩逐字拆分）"""
    words = _build_words(args).parse(_read_text(args))
    _emit(args, words, words)


def cmd_count(args):
    """统计字数"""
    total = _build_words(args).count(_read_text(args))
    _emit(args, {"word_count": total}, [str(total)])


def cmd_search(args):
    """关键词检索打分"""
    result = _build_words(args).search(args.query, _read_text(args))
    _emit(
        args,
        {"score": result.score, "matched": result.matched},
        [f"🔍 得分: {result.score}", f"✅ 命中: {', '.join(result.matched) or '-'}"],
    )


def cmd_metrics(args):
    """字数与阅读时间"""
    m = _build_words(args).metrics(_read_text(args))
    _emit(
        args,
        m.to_dict(),
        [
            f"📝 总字数: {m.word_count}",
            f"⏱️ 平均阅读: {m.average.minutes} 分钟 ({m.average.duration.total_seconds():.0f} 秒)",
            f"🐢 慢速阅读: {m.relaxed.minutes} 分钟 ({m.relaxed.duration.total_seconds():.0f} 秒)",
        ],
    )


def _add_common(p):
    p.add_argument("text", nargs="?", help="输入文本（省略时读取 --file 或标准输入）")
    p.add_argument("--file", help="从文件读取文本")
    p.add_argument("--breaker", action="store_true", help="标点视为分隔符而不是直接删除")
    p.add_argument("--no-default-punctuation", action="store_true", help="只使用 --punctuation 指定的标点")
    p.add_argument("--punctuation", default="", help="额外的标点字符")
    p.add_argument("--average-wpm", type=float, help="平均阅读速度（词/分钟）")
    p.add_argument("--relaxed-wpm", type=float, help="慢速阅读速度（词/分钟）")
    p.add_argument("--json", action="store_true", help="以 JSON 输出")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordmetrics",
        description="wordmetrics - 多语言字数统计与阅读时间估算",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
示例:
  # 统计字数
  wordmetrics count "さらに「やり遂げる」ためのEnjin"

  # 阅读时间
  wordmetrics metrics --file chapter.txt --json

  # 关键词检索
  wordmetrics search "enjin" --file chapter.txt
""",
    )
    parser.add_argument("--log-level", help="日志级别（默认读取 WORDS_LOG_LEVEL）")

    subparsers = parser.add_subparsers(dest="command")

    p_tokenize = subparsers.add_parser("tokenize", help="按空格切分")
    _add_common(p_tokenize)
    p_tokenize.set_defaults(func=cmd_tokenize)

    p_parse = subparsers.add_parser("parse", help="完整分词")
    _add_common(p_parse)
    p_parse.set_defaults(func=cmd_parse)

    p_count = subparsers.add_parser("count", help="统计字数")
    _add_common(p_count)
    p_count.set_defaults(func=cmd_count)

    p_search = subparsers.add_parser("search", help="关键词检索")
    p_search.add_argument("query", help="检索关键词")
    _add_common(p_search)
    p_search.set_defaults(func=cmd_search)

    p_metrics = subparsers.add_parser("metrics", help="阅读时间估算")
    _add_common(p_metrics)
    p_metrics.set_defaults(func=cmd_metrics)

    return parser


def main(argv=None):
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if not args.command:
        parser.print_help()
        return 1
    args.func(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
