"""
文档注释的派生查询：首行与描述文本
"""

import re

from docblock_tags.core.normalizer import (
    normalize_comment,
    normalize_line_endings,
    strip_line_decoration,
)

# 任意换行符
LINE_SPLIT_PATTERN = re.compile(r'\r\n|\r|\n')

# 首行两端需要去除的装饰字符
FIRST_LINE_TRIM_CHARS = "/\t *"

# 描述结束位置：第一个 `@单词` 开头的行
DESCRIPTION_END_PATTERN = re.compile(r'^[ \t]*@\w', re.MULTILINE)


def first_line(comment: str) -> str:
    """
    返回文档注释的第一行内容

    不做完整规范化，只按行切分：第 0 行是 `/**` 开始行，
    返回第 1 行去掉装饰后的文本。

    Args:
        comment: 原始注释文本

    Returns:
        首行文本，不足两行时返回 ""
    """
    if not normalize_comment(comment):
        return ""

    lines = LINE_SPLIT_PATTERN.split(comment)
    if len(lines) < 2:
        return ""
    return lines[1].strip(FIRST_LINE_TRIM_CHARS)


def description(comment: str) -> str:
    """
    返回第一个标签之前的完整描述文本

    多行描述会保留换行。独立实现，不依赖 parse_tags 的结果。

    Args:
        comment: 原始注释文本

    Returns:
        描述文本，没有标签时返回全部规范化文本
    """
    if not normalize_comment(comment):
        return ""

    text = normalize_line_endings(comment.strip("/"))
    text = strip_line_decoration(text).strip()

    match = DESCRIPTION_END_PATTERN.search(text)
    if match:
        text = text[:match.start()].strip()

    return text
