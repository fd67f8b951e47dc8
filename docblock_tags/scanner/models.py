"""
数据模型定义

包含扫描器使用的所有数据类。
"""

import json
from dataclasses import dataclass, field, asdict

from docblock_tags.core.models import TagMap, tag_map_to_plain, tag_map_from_plain
from docblock_tags.core.validator import Issue
from docblock_tags.scanner.patterns import SOURCE_EXTENSIONS, MAX_FILE_SIZE


class ScanError(Exception):
    """扫描错误基类"""
    pass


class ScanPathError(ScanError):
    """扫描路径不存在或不是目录"""
    pass


@dataclass
class ScanConfig:
    """
    扫描配置

    Attributes:
        extensions: 需要扫描的文件扩展名
        respect_gitignore: 是否跳过 .gitignore 忽略的文件
        max_file_size: 单文件大小上限（字节），超过则跳过
    """
    extensions: frozenset[str] = SOURCE_EXTENSIONS
    respect_gitignore: bool = True
    max_file_size: int = MAX_FILE_SIZE


@dataclass
class DocBlock:
    """
    文档注释记录

    Attributes:
        file_path: 源文件路径
        line_number: 注释起始行号 (1-based)
        raw: 原始注释文本
        declaration: 注释后的第一行声明
        tags: 解析得到的标签
        description: 第一个标签之前的描述
        first_line: 注释首行
    """
    file_path: str
    line_number: int
    raw: str
    declaration: str = ""
    tags: TagMap = field(default_factory=dict)
    description: str = ""
    first_line: str = ""

    def to_dict(self) -> dict:
        return {
            "file_path": self.file_path,
            "line_number": self.line_number,
            "raw": self.raw,
            "declaration": self.declaration,
            "tags": tag_map_to_plain(self.tags),
            "description": self.description,
            "first_line": self.first_line,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DocBlock":
        data = dict(data)
        data["tags"] = tag_map_from_plain(data.get("tags", {}))
        return cls(**data)


@dataclass
class ScanResult:
    """
    扫描结果

    Attributes:
        docblocks: 文档注释列表
        issues: 验证问题列表
        stats: 统计信息
    """
    docblocks: list[DocBlock] = field(default_factory=list)
    issues: list[Issue] = field(default_factory=list)
    stats: dict[str, int] = field(default_factory=dict)

    def to_json(self) -> str:
        """序列化为 JSON 字符串"""
        data = {
            "docblocks": [block.to_dict() for block in self.docblocks],
            "issues": [asdict(issue) for issue in self.issues],
            "stats": self.stats,
        }
        return json.dumps(data, ensure_ascii=False, indent=2)

    @classmethod
    def from_json(cls, json_str: str) -> "ScanResult":
        """从 JSON 字符串反序列化"""
        data = json.loads(json_str)
        return cls(
            docblocks=[DocBlock.from_dict(b) for b in data.get("docblocks", [])],
            issues=[Issue(**i) for i in data.get("issues", [])],
            stats=data.get("stats", {}),
        )
