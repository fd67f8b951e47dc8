"""
报告器基类 - 定义报告器接口
"""

from typing import Protocol

from docblock_tags.scanner.models import ScanResult


class Reporter(Protocol):
    """报告器协议"""

    def report(self, result: ScanResult, target: str) -> None:
        """生成报告"""
        ...
