"""
核心验证器模块 - 检查文档注释是否包含必需的标签

解析器本身从不报错，严格性由调用方决定：
1. 必需标签检查：缺少指定标签的注释报告为错误
2. 空描述检查：默认标签存在但内容为空时报告警告
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Literal, Optional

from docblock_tags.core.models import Scalar

if TYPE_CHECKING:
    from docblock_tags.scanner.models import DocBlock


@dataclass
class Issue:
    """
    检查问题

    Attributes:
        severity: 严重程度 (error, warning, info)
        code: 问题代码 (如 MISSING_TAG, EMPTY_DESCRIPTION)
        message: 问题描述
        file_path: 相关文件路径
        line_number: 行号
        suggestion: 修复建议
    """
    severity: Literal["error", "warning", "info"]
    code: str
    message: str
    file_path: str
    line_number: int
    suggestion: Optional[str] = None


@dataclass
class ValidationResult:
    """
    验证结果

    Attributes:
        issues: 发现的问题列表
        stats: 统计信息
    """
    issues: list[Issue] = field(default_factory=list)
    stats: dict[str, int] = field(default_factory=dict)


def find_missing_tags(tags: dict, required: Iterable[str]) -> list[str]:
    """返回 required 中不在 tags 里的标签名，保持 required 的顺序"""
    return [name for name in required if name not in tags]


class Validator:
    """验证器"""

    def __init__(
        self,
        required: Iterable[str] = (),
        default_tag: str = "description",
        warn_empty_description: bool = False,
    ):
        """
        初始化验证器

        Args:
            required: 每个文档注释都必须包含的标签
            default_tag: 默认标签名（用于空描述检查）
            warn_empty_description: 是否对空描述发出警告
        """
        self.required = list(dict.fromkeys(required))
        self.default_tag = default_tag
        self.warn_empty_description = warn_empty_description

    def validate_docblock(self, block: "DocBlock") -> list[Issue]:
        """
        验证单个文档注释

        Args:
            block: 文档注释

        Returns:
            问题列表
        """
        issues: list[Issue] = []
        target = block.declaration or "docblock"

        for name in find_missing_tags(block.tags, self.required):
            issues.append(Issue(
                severity="error",
                code="MISSING_TAG",
                message=f"Missing @{name} on {target}",
                file_path=block.file_path,
                line_number=block.line_number,
                suggestion=f"Add an @{name} tag to the comment",
            ))

        if self.warn_empty_description:
            value = block.tags.get(self.default_tag)
            if isinstance(value, Scalar) and not value.value:
                issues.append(Issue(
                    severity="warning",
                    code="EMPTY_DESCRIPTION",
                    message=f"Empty description on {target}",
                    file_path=block.file_path,
                    line_number=block.line_number,
                    suggestion="Describe the declaration before the first tag",
                ))

        return issues

    def validate(self, blocks: list["DocBlock"]) -> ValidationResult:
        """验证所有文档注释并汇总统计"""
        result = ValidationResult()
        for block in blocks:
            result.issues.extend(self.validate_docblock(block))

        result.stats["docblocks"] = len(blocks)
        result.stats["total_issues"] = len(result.issues)
        result.stats["errors"] = sum(1 for i in result.issues if i.severity == "error")
        result.stats["warnings"] = sum(1 for i in result.issues if i.severity == "warning")
        return result
