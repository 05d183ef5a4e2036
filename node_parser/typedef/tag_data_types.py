import json
from enum import Enum
from typing import Any, Callable, Dict, List, Optional
from dataclasses import dataclass, field

from node_parser.utils.tag_analyzer.tag_renderer import (
    RenderOptions, render_child, render_container
)


# ====== Lexer 模块 数据类型定义 ======
TAG_SIGIL = "@"


class Token:
    """Token类，仅在词法分析与模型构建之间临时传递，不会被实体保存"""
    def __init__(self, key: str, value: str, line_num: int = 0):
        self.key: str = key
        self.value: str = value
        self.line_num: int = line_num

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self.key == other.key and self.value == other.value

    def __repr__(self) -> str:
        return f"Token({self.key!r}, {self.value!r}, {self.line_num})"


class TagDialect(Enum):
    """标签方言枚举，决定容器/子实体的起始标签"""
    FORM = "form"
    NODE = "node"


# 各方言对应的 (容器起始标签, 子实体起始标签)
DIALECT_TAGS: Dict[TagDialect, tuple] = {
    TagDialect.FORM: ("form", "input"),
    TagDialect.NODE: ("node", "property"),
}


# ====== 实体 数据类型定义 ======
@dataclass
class BaseTagEntity:
    """实体基类，持有名称与扁平的属性映射"""
    name: str = ""
    attributes: Dict[str, str] = field(default_factory=dict)

    def add_attribute(self, key: str, value: str) -> None:
        """添加属性，重复的key以最后一次写入为准"""
        self.attributes[key] = value

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "attributes": dict(self.attributes),
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)

    @classmethod
    def from_json(cls, text: str) -> 'BaseTagEntity':
        return cls.from_dict(json.loads(text))


@dataclass
class ChildEntity(BaseTagEntity):
    """子实体（Input/Property），由唯一的容器实体持有"""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ChildEntity':
        """从字典创建子实体，缺失的attributes默认为空"""
        return cls(name=data["name"], attributes=dict(data.get("attributes") or {}))

    def to_html(
        self,
        renderer: Optional[Callable[..., str]] = None,
        options: Optional[RenderOptions] = None
    ) -> str:
        """渲染为HTML字符串，未提供renderer时使用内置的子实体渲染函数"""
        if renderer is None:
            renderer = render_child
        return renderer(self, options)

    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r}, attributes={len(self.attributes)})"


@dataclass
class ContainerEntity(BaseTagEntity):
    """容器实体（Form/Node），持有有序的子实体列表"""
    children: List[ChildEntity] = field(default_factory=list)

    # from_dict 重建子实体时使用的类型
    child_class = ChildEntity

    def add_child(self, child: ChildEntity) -> None:
        """按声明顺序追加子实体"""
        self.children.append(child)

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["children"] = [child.to_dict() for child in self.children]
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ContainerEntity':
        """从字典创建容器实体，未知字段忽略，缺失的attributes/children默认为空"""
        container = cls(name=data["name"], attributes=dict(data.get("attributes") or {}))
        for child_data in data.get("children") or []:
            container.add_child(cls.child_class.from_dict(child_data))
        return container

    def to_html(
        self,
        renderer: Optional[Callable[..., str]] = None,
        options: Optional[RenderOptions] = None
    ) -> str:
        """渲染为HTML字符串，未提供renderer时使用内置的容器渲染函数"""
        if renderer is None:
            renderer = render_container
        return renderer(self, options)

    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r}, children={len(self.children)})"


@dataclass(repr=False)
class Input(ChildEntity):
    """表单输入项"""


@dataclass(repr=False)
class Form(ContainerEntity):
    """表单"""
    child_class = Input


@dataclass(repr=False)
class Property(ChildEntity):
    """节点属性项"""


@dataclass(repr=False)
class Node(ContainerEntity):
    """节点"""
    child_class = Property


# 各方言对应的 (容器类型, 子实体类型)
DIALECT_CLASSES: Dict[TagDialect, tuple] = {
    TagDialect.FORM: (Form, Input),
    TagDialect.NODE: (Node, Property),
}


# ====== 注释提取 数据类型定义 ======
class CommentKind(Enum):
    """源码注释类型"""
    BLOCK = "block"
    LINE = "line"


@dataclass
class RawComment:
    """从源码中提取出的原始注释"""
    kind: CommentKind
    text: str
    line_num: int = 0
