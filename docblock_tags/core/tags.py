"""
标签解析器模块 - 将文档注释解析为 标签名 -> 标签值 映射

解析流程：
1. 规范化注释（去装饰、统一换行）
2. 在开头插入默认标签标记，吸收第一个标签之前的文本
3. 在每个以 `@` 开头的行处切分片段
4. 提取标签名，按 ignore / allow 过滤，累加标签值
"""

import logging
import re
from typing import Optional

from docblock_tags.core.models import ParseOptions, TagMap, append_value
from docblock_tags.core.normalizer import normalize_comment

logger = logging.getLogger(__name__)

# 标签标记行：可选的行首空白 + @
TAG_MARKER_PATTERN = re.compile(r'^[ \t]*@', re.MULTILINE)

# 标签名：字母开头，后接任意单词字符；其余部分为标签值
TAG_NAME_PATTERN = re.compile(r'^([A-Za-z]\w*)(.*)', re.DOTALL)


def split_segments(text: str) -> list[str]:
    """
    按标签标记行切分文本

    第一个标记之前的文本不属于任何片段，直接丢弃；
    空片段也会被丢弃。

    Args:
        text: 规范化后的文本

    Returns:
        片段列表，每个片段以标签名开头（`@` 已去掉）
    """
    _, *segments = TAG_MARKER_PATTERN.split(text)
    return [segment for segment in segments if segment]


def parse_segment(segment: str) -> Optional[tuple[str, str]]:
    """
    解析单个片段

    Args:
        segment: 切分得到的片段

    Returns:
        (标签名, 标签值) 元组；无法提取标签名时返回 None
    """
    match = TAG_NAME_PATTERN.match(segment.strip())
    if not match:
        return None
    return match.group(1), match.group(2).strip()


def parse_tags(comment: str, options: Optional[ParseOptions] = None) -> TagMap:
    """
    解析文档注释中的标签

    没有任何标签的注释会得到唯一一项：默认标签 -> 全部规范化文本。
    同名标签重复出现时，值从 Scalar 变为 Multi，按出现顺序排列。

    Args:
        comment: 原始注释文本
        options: 解析配置，None 表示不做任何过滤

    Returns:
        TagMap，空注释返回空字典
    """
    if options is None:
        options = ParseOptions()

    text = normalize_comment(comment)
    if not text:
        return {}

    if options.default:
        text = f"@{options.default}\n{text}"

    tags: TagMap = {}
    for segment in split_segments(text):
        parsed = parse_segment(segment)
        if parsed is None:
            logger.debug(f"Dropping malformed tag segment: {segment[:40]!r}")
            continue

        name, value = parsed
        if not options.is_retained(name):
            continue

        tags[name] = append_value(tags.get(name), value)

    return tags
