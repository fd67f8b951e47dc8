"""
CLI Layer - 命令行接口层

提供 parse / scan / version 命令。
"""

from docblock_tags.cli.app import app, parse, scan, version, DEFAULT_IGNORE_TAGS

__all__ = [
    "app",
    "parse",
    "scan",
    "version",
    "DEFAULT_IGNORE_TAGS",
]
