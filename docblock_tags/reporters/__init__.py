"""
Reporters Layer - 报告层

包含 Rich 终端报告器和 JSON 报告器。
"""

from docblock_tags.reporters.base import Reporter
from docblock_tags.reporters.rich_reporter import RichReporter
from docblock_tags.reporters.json_reporter import JsonReporter

__all__ = [
    "Reporter",
    "RichReporter",
    "JsonReporter",
]
