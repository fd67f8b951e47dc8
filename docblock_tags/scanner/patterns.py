"""
正则表达式模式定义

文档注释的提取模式和支持的源文件类型。
"""

import re

# 文档注释：/** ... */，排除 /**/ 这种空块注释
DOCBLOCK_PATTERN = re.compile(r'/\*\*(?!/).*?\*/', re.DOTALL)

# 文件扩展名到语言的映射（只包含使用 /** */ 文档注释的语言）
EXTENSION_TO_LANGUAGE: dict[str, str] = {
    ".php": "php",
    ".js": "javascript",
    ".ts": "javascript",
    ".jsx": "javascript",
    ".tsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".java": "java",
    ".kt": "kotlin",
    ".scala": "scala",
    ".groovy": "groovy",
    ".c": "c",
    ".cpp": "c",
    ".cc": "c",
    ".h": "c",
    ".hpp": "c",
    ".cs": "csharp",
    ".swift": "swift",
}

SOURCE_EXTENSIONS: frozenset[str] = frozenset(EXTENSION_TO_LANGUAGE)

# 声明行最大长度
DECLARATION_MAX_LENGTH = 120

# 单文件大小限制 (2MB)
MAX_FILE_SIZE = 2 * 1024 * 1024
