from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Union

from node_parser.typedef.tag_data_types import (
    Token, TagDialect, DIALECT_TAGS, DIALECT_CLASSES,
    BaseTagEntity, ChildEntity, ContainerEntity, Form, Input
)
from node_parser.typedef.exception_types import TagParserError
from node_parser.lib.debug_print import DEBUG_PRINT, WARNING_T, DEBUG_T

from node_parser.utils.tag_analyzer.tag_lexer import TagSource


@dataclass
class ParserOptions:
    """模型构建配置

    container_factory / child_factory 为接收name并返回实体的可调用对象，
    构建过程只依赖实体的 add_attribute / add_child 两个能力。
    """
    container_factory: Callable[[str], ContainerEntity] = Form
    child_factory: Callable[[str], ChildEntity] = Input
    container_tag: str = "form"
    child_tag: str = "input"

    @classmethod
    def for_dialect(cls, dialect: Union[TagDialect, str]) -> 'ParserOptions':
        dialect = TagDialect(dialect)
        container_tag, child_tag = DIALECT_TAGS[dialect]
        container_class, child_class = DIALECT_CLASSES[dialect]
        return cls(
            container_factory=container_class,
            child_factory=child_class,
            container_tag=container_tag,
            child_tag=child_tag,
        )

    @classmethod
    def form_dialect(cls) -> 'ParserOptions':
        return cls.for_dialect(TagDialect.FORM)

    @classmethod
    def node_dialect(cls) -> 'ParserOptions':
        return cls.for_dialect(TagDialect.NODE)


class ParserState(Enum):
    """解析器状态枚举"""
    TOP_LEVEL = "TOP_LEVEL"  # 尚未遇到任何容器起始标签
    CONTAINER = "CONTAINER"  # 属性写入当前容器
    CHILD = "CHILD"  # 属性写入当前子实体


class TagParser:
    """标签注释模型构建器，单次前向扫描 Token 序列"""
    def __init__(self, content: str, options: Optional[ParserOptions] = None) -> None:
        self.source = TagSource(content)
        self.options = options if options is not None else ParserOptions()
        self.state = ParserState.TOP_LEVEL
        self.containers: List[ContainerEntity] = []
        self.current_container: Optional[ContainerEntity] = None
        # 属性写入目标，在第一个子实体出现前指向当前容器
        self.current_target: Optional[BaseTagEntity] = None

    def parse(self) -> List[ContainerEntity]:
        """执行解析，返回按声明顺序排列的容器实体列表"""
        for token in self.source:
            self._process_token(token)

        # 没有显式的结束标签，扫描结束时关闭最后一个容器
        self._close_container()
        return self.containers

    def _process_token(self, token: Token) -> None:
        if token.key == self.options.container_tag:
            self._open_container(token)
        elif token.key == self.options.child_tag:
            self._open_child(token)
        elif not token.key:
            DEBUG_PRINT(WARNING_T, f"Line {token.line_num}: Bare tag sigil without key, ignored")
        else:
            self._set_attribute(token)

    def _open_container(self, token: Token) -> None:
        self._close_container()
        container = self.options.container_factory(token.value)
        DEBUG_PRINT(DEBUG_T, f"Line {token.line_num}: open container '{token.value}'")
        self.current_container = container
        self.current_target = container
        self.state = ParserState.CONTAINER

    def _open_child(self, token: Token) -> None:
        if self.current_container is None:
            raise TagParserError(
                message="child declared before any container",
                line_num=token.line_num,
                line_content=self.source.lines[token.line_num - 1].strip()
            )

        child = self.options.child_factory(token.value)
        self.current_container.add_child(child)
        self.current_target = child
        self.state = ParserState.CHILD

    def _set_attribute(self, token: Token) -> None:
        if self.state == ParserState.TOP_LEVEL or self.current_target is None:
            DEBUG_PRINT(
                WARNING_T,
                f"Line {token.line_num}: Attribute '{token.key}' declared before any container, ignored"
            )
            return
        self.current_target.add_attribute(token.key, token.value)

    def _close_container(self) -> None:
        if self.current_container is not None:
            self.containers.append(self.current_container)
        self.current_container = None
        self.current_target = None
        self.state = ParserState.TOP_LEVEL


def parse(content: str, options: Optional[ParserOptions] = None) -> List[ContainerEntity]:
    """解析一段注释文本，返回容器实体列表

    Raises:
        TagParserError: 子实体起始标签出现在任何容器之前
    """
    return TagParser(content, options).parse()
