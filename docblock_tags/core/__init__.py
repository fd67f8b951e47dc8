"""
Core Layer - 核心层

包含注释规范化、标签解析器、首行/描述查询和验证器。
"""

from docblock_tags.core.models import (
    ParseOptions,
    Scalar,
    Multi,
    TagValue,
    TagMap,
    tag_map_to_plain,
    tag_map_from_plain,
)
from docblock_tags.core.normalizer import normalize_comment
from docblock_tags.core.tags import parse_tags
from docblock_tags.core.docblock import first_line, description
from docblock_tags.core.validator import (
    Validator,
    Issue,
    ValidationResult,
)

__all__ = [
    # models
    "ParseOptions",
    "Scalar",
    "Multi",
    "TagValue",
    "TagMap",
    "tag_map_to_plain",
    "tag_map_from_plain",
    # parser
    "normalize_comment",
    "parse_tags",
    "first_line",
    "description",
    # validator
    "Validator",
    "Issue",
    "ValidationResult",
]
