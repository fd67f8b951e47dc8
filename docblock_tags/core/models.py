"""
数据模型定义

包含标签解析使用的配置与结果类型。
"""

import re
from dataclasses import dataclass, field
from typing import Iterable, Union

# 合法标签名：字母开头，后接任意单词字符
TAG_NAME_RE = re.compile(r"[A-Za-z]\w*")


@dataclass(frozen=True)
class ParseOptions:
    """
    标签解析配置

    Attributes:
        allow: 只保留这些标签（为空表示不限制），default 标签总是被允许
        ignore: 无条件丢弃的标签，优先于 allow 判断
        default: 默认标签名，第一个标签之前的文本归属于它
    """
    allow: frozenset[str] = field(default_factory=frozenset)
    ignore: frozenset[str] = field(default_factory=frozenset)
    default: str = "description"

    def __post_init__(self) -> None:
        # 允许传入 list / tuple / set
        object.__setattr__(self, "allow", frozenset(self.allow))
        object.__setattr__(self, "ignore", frozenset(self.ignore))
        if self.default and not TAG_NAME_RE.fullmatch(self.default):
            raise ValueError(f"Invalid default tag name: {self.default!r}")

    @classmethod
    def create(
        cls,
        allow: Iterable[str] | None = None,
        ignore: Iterable[str] | None = None,
        default: str = "description",
    ) -> "ParseOptions":
        """从可选参数构建配置，None 视为空集合"""
        return cls(
            allow=frozenset(allow or ()),
            ignore=frozenset(ignore or ()),
            default=default,
        )

    def is_retained(self, name: str) -> bool:
        """判断标签是否保留：先看 ignore，再看 allow"""
        if name in self.ignore:
            return False
        if self.allow and name not in self.allow and name != self.default:
            return False
        return True


@dataclass(frozen=True)
class Scalar:
    """只出现一次的标签值"""
    value: str

    def values(self) -> list[str]:
        return [self.value]


@dataclass(frozen=True)
class Multi:
    """重复出现的标签值，按源码顺序排列"""
    items: tuple[str, ...]

    def values(self) -> list[str]:
        return list(self.items)

    def __len__(self) -> int:
        return len(self.items)


TagValue = Union[Scalar, Multi]

# 标签名 -> 标签值
TagMap = dict[str, TagValue]


def append_value(existing: TagValue | None, value: str) -> TagValue:
    """
    将新值累加到已有标签值上

    规则：
    1. 不存在 -> Scalar(value)
    2. Scalar -> Multi((旧值, value))
    3. Multi -> 追加到末尾

    Args:
        existing: 已有的标签值，可能为 None
        value: 新值

    Returns:
        新的标签值
    """
    if existing is None:
        return Scalar(value)
    if isinstance(existing, Scalar):
        return Multi((existing.value, value))
    return Multi(existing.items + (value,))


def tag_map_to_plain(tags: TagMap) -> dict[str, str | list[str]]:
    """转换为可 JSON 序列化的普通字典（Scalar -> str，Multi -> list）"""
    plain: dict[str, str | list[str]] = {}
    for name, tag_value in tags.items():
        if isinstance(tag_value, Scalar):
            plain[name] = tag_value.value
        else:
            plain[name] = tag_value.values()
    return plain


def tag_map_from_plain(data: dict[str, str | list[str]]) -> TagMap:
    """从普通字典还原 TagMap"""
    tags: TagMap = {}
    for name, raw in data.items():
        if isinstance(raw, list):
            tags[name] = Multi(tuple(raw))
        else:
            tags[name] = Scalar(raw)
    return tags
