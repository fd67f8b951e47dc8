"""
核心扫描函数

从源文件中提取 /** */ 文档注释并解析标签。
"""

import logging
from pathlib import Path
from typing import Callable, Optional

from docblock_tags.core.docblock import description, first_line
from docblock_tags.core.models import ParseOptions
from docblock_tags.core.tags import parse_tags
from docblock_tags.filters.pathspec_filter import PathspecFilter
from docblock_tags.scanner.models import (
    DocBlock,
    ScanConfig,
    ScanPathError,
    ScanResult,
)
from docblock_tags.scanner.patterns import (
    DOCBLOCK_PATTERN,
    DECLARATION_MAX_LENGTH,
    EXTENSION_TO_LANGUAGE,
)

logger = logging.getLogger(__name__)

# 进度回调类型
ProgressCallback = Callable[[str, str], None]


def _get_line_number(content: str, position: int) -> int:
    """根据字符位置计算行号（从1开始）"""
    return content.count('\n', 0, position) + 1


def _find_declaration(content: str, end: int) -> str:
    """
    查找注释之后的第一行非空文本

    如果紧接着的是另一个文档注释，说明当前注释不属于任何声明，返回 ""。
    """
    for line in content[end:].split('\n'):
        stripped = line.strip()
        if not stripped:
            continue
        if stripped.startswith('/**'):
            return ""
        return stripped[:DECLARATION_MAX_LENGTH]
    return ""


def build_docblock(
    raw: str,
    file_path: str = "",
    line_number: int = 1,
    declaration: str = "",
    options: Optional[ParseOptions] = None,
) -> DocBlock:
    """对单个注释执行全部解析并构建 DocBlock"""
    return DocBlock(
        file_path=file_path,
        line_number=line_number,
        raw=raw,
        declaration=declaration,
        tags=parse_tags(raw, options),
        description=description(raw),
        first_line=first_line(raw),
    )


def extract_docblocks(
    content: str,
    file_path: str = "",
    options: Optional[ParseOptions] = None,
) -> list[DocBlock]:
    """
    从源码内容中提取所有文档注释

    Args:
        content: 源文件内容
        file_path: 源文件路径（用于记录）
        options: 标签解析配置

    Returns:
        DocBlock 列表，按出现顺序排列
    """
    content = content.replace('\r\n', '\n')
    blocks: list[DocBlock] = []

    for match in DOCBLOCK_PATTERN.finditer(content):
        blocks.append(build_docblock(
            match.group(0),
            file_path=file_path,
            line_number=_get_line_number(content, match.start()),
            declaration=_find_declaration(content, match.end()),
            options=options,
        ))

    return blocks


def scan_file(
    file_path: Path,
    root: Path,
    options: Optional[ParseOptions] = None,
) -> list[DocBlock]:
    """扫描单个文件，读取失败时记录警告并返回空列表"""
    try:
        content = file_path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.warning(f"Failed to read {file_path}: {e}")
        return []

    relative_path = file_path.relative_to(root).as_posix()
    return extract_docblocks(content, relative_path, options)


def scan_source_files(
    root: Path,
    options: Optional[ParseOptions] = None,
    config: Optional[ScanConfig] = None,
    on_file: Optional[ProgressCallback] = None,
) -> ScanResult:
    """
    扫描目录下所有源文件中的文档注释

    Args:
        root: 扫描根目录
        options: 标签解析配置
        config: 扫描配置
        on_file: 每扫描一个文件时的回调 (文件路径, 语言)

    Returns:
        ScanResult

    Raises:
        ScanPathError: 根目录不存在或不是目录
    """
    if config is None:
        config = ScanConfig()

    root = root.resolve()
    if not root.exists():
        raise ScanPathError(f"Path does not exist: {root}")
    if not root.is_dir():
        raise ScanPathError(f"Path is not a directory: {root}")

    path_filter = PathspecFilter(root) if config.respect_gitignore else None
    result = ScanResult()
    files_scanned = 0
    files_skipped = 0

    candidates = [
        p for p in sorted(root.rglob("*"))
        if p.is_file() and p.suffix.lower() in config.extensions
    ]
    if path_filter:
        candidates = path_filter.filter_paths(candidates)

    for file_path in candidates:
        suffix = file_path.suffix.lower()
        if file_path.stat().st_size > config.max_file_size:
            logger.warning(f"File {file_path} exceeds {config.max_file_size} bytes, skipping")
            files_skipped += 1
            continue

        language = EXTENSION_TO_LANGUAGE.get(suffix, "unknown")
        if on_file:
            on_file(file_path.relative_to(root).as_posix(), language)

        result.docblocks.extend(scan_file(file_path, root, options))
        files_scanned += 1

    result.stats["files_scanned"] = files_scanned
    result.stats["files_skipped"] = files_skipped
    result.stats["docblocks"] = len(result.docblocks)
    return result
