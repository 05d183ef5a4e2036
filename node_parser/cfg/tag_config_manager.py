import os
import json
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from node_parser.lib.debug_print import DEBUG_PRINT, INFO_T, WARNING_T
from node_parser.typedef.tag_data_types import DIALECT_TAGS, TagDialect
from node_parser.utils.tag_analyzer.tag_parser import ParserOptions
from node_parser.utils.tag_analyzer.tag_renderer import (
    DEFAULT_IGNORED_ATTRIBUTES, RenderOptions
)


DEFAULT_CONFIG_FILE_NAME = "node_parser_config.json"


class NodeParserConfig(BaseModel):
    """配置文件内容，字段缺失时使用默认值"""
    dialect: Literal["form", "node"] = "form"
    ignored_attributes: List[str] = Field(
        default_factory=lambda: sorted(DEFAULT_IGNORED_ATTRIBUTES)
    )
    indent: str = "  "
    print_level: int = WARNING_T


# 只在运行过程中管理解析/渲染相关配置，配置文件本身只读
class TagConfigManager:
    _instance = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super(TagConfigManager, cls).__new__(cls)
        return cls._instance

    def __init__(self):
        if not hasattr(self, 'config'):
            self.config = NodeParserConfig()
            self.config_path = ""

    def load_config(self, config_path: Optional[str] = None) -> NodeParserConfig:
        """加载配置文件，未指定路径时尝试读取当前目录下的默认配置文件

        Raises:
            FileNotFoundError: 显式指定的配置文件不存在
            json.JSONDecodeError: 配置文件不是合法JSON
            pydantic.ValidationError: 配置内容不合法
        """
        if config_path is None:
            config_path = DEFAULT_CONFIG_FILE_NAME
            if not os.path.exists(config_path):
                DEBUG_PRINT(INFO_T, "未找到配置文件，使用默认配置")
                self.config = NodeParserConfig()
                self.config_path = ""
                return self.config

        with open(config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        self.config = NodeParserConfig.model_validate(data)
        self.config_path = config_path
        DEBUG_PRINT(INFO_T, f"已加载配置文件: {config_path}")
        return self.config

    def set_dialect(self, dialect: str) -> None:
        self.config = self.config.model_copy(update={"dialect": TagDialect(dialect).value})

    def reset(self) -> None:
        self.config = NodeParserConfig()
        self.config_path = ""

    def get_parser_options(self) -> ParserOptions:
        return ParserOptions.for_dialect(self.config.dialect)

    def get_render_options(self) -> RenderOptions:
        container_tag, child_tag = DIALECT_TAGS[TagDialect(self.config.dialect)]
        return RenderOptions(
            container_tag=container_tag,
            child_tag=child_tag,
            indent=self.config.indent,
            ignored_attributes=frozenset(self.config.ignored_attributes),
        )


_instance = TagConfigManager()


def get_instance() -> TagConfigManager:
    return _instance
