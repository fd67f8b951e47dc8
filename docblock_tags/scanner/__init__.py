"""
Scanner Layer - 扫描层

从源文件中提取文档注释并解析标签。
"""

from docblock_tags.scanner.core import (
    build_docblock,
    extract_docblocks,
    scan_file,
    scan_source_files,
)
from docblock_tags.scanner.models import (
    DocBlock,
    ScanConfig,
    ScanError,
    ScanPathError,
    ScanResult,
)
from docblock_tags.scanner.patterns import EXTENSION_TO_LANGUAGE, SOURCE_EXTENSIONS

__all__ = [
    # core
    "build_docblock",
    "extract_docblocks",
    "scan_file",
    "scan_source_files",
    # models
    "DocBlock",
    "ScanConfig",
    "ScanError",
    "ScanPathError",
    "ScanResult",
    # patterns
    "EXTENSION_TO_LANGUAGE",
    "SOURCE_EXTENSIONS",
]
