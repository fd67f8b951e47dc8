"""
docblock-tags - 文档注释标签解析器

将 /** ... */ 文档注释解析为 标签名 -> 标签值 映射，
并提供首行、描述文本查询和源码目录扫描。
"""

from docblock_tags.core import (
    ParseOptions,
    Scalar,
    Multi,
    TagValue,
    TagMap,
    parse_tags,
    first_line,
    description,
)

__version__ = "0.1.0"

__all__ = [
    "ParseOptions",
    "Scalar",
    "Multi",
    "TagValue",
    "TagMap",
    "parse_tags",
    "first_line",
    "description",
    "__version__",
]
