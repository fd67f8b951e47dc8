"""
注释装饰清理

去除块注释的 `/**`、`*/`、行首 `*` 等装饰字符，并统一换行符。
"""

import re

# 整块注释首尾需要去除的字符
BLOCK_TRIM_CHARS = "/* \t\n\r\f\v"

# 行首装饰：空白 + 若干星号 + 可选的一个空格或制表符
LINE_DECORATION_PATTERN = re.compile(r'^[ \t]*\**[ \t]?', re.MULTILINE)

# CRLF 和单独的 CR 都视为 LF
LINE_ENDING_PATTERN = re.compile(r'\r\n?')


def normalize_line_endings(text: str) -> str:
    """将所有换行符统一为 \\n"""
    return LINE_ENDING_PATTERN.sub('\n', text)


def strip_line_decoration(text: str) -> str:
    """
    逐行去除行首装饰

    必须逐行处理：每一行都可能带有独立的 ` * ` 前缀。
    只匹配空格和制表符，不会吞掉空行。

    Args:
        text: 已统一换行符的文本

    Returns:
        去除装饰后的文本
    """
    return LINE_DECORATION_PATTERN.sub('', text)


def normalize_comment(comment: str) -> str:
    """
    规范化原始注释块

    步骤：
    1. 去除整块首尾的斜杠、星号和空白
    2. 为空则直接返回空字符串
    3. 统一换行符
    4. 逐行去除行首装饰
    5. 去除首尾空白

    Args:
        comment: 原始注释文本

    Returns:
        规范化后的文本，空注释返回 ""
    """
    text = comment.strip(BLOCK_TRIM_CHARS)
    if not text:
        return ""

    text = normalize_line_endings(text)
    return strip_line_decoration(text).strip()
