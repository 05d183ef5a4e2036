"""从源码块注释中提取 form/node 定义，并输出为JSON或HTML"""
from node_parser.typedef.tag_data_types import (
    Token, TagDialect, BaseTagEntity, ChildEntity, ContainerEntity,
    Form, Input, Node, Property, CommentKind, RawComment
)
from node_parser.typedef.exception_types import TagAnalyzerError, TagParserError
from node_parser.utils.tag_analyzer.tag_lexer import TagSource, parse_line, tokenize
from node_parser.utils.tag_analyzer.tag_parser import ParserOptions, TagParser, parse
from node_parser.utils.tag_analyzer.tag_renderer import (
    DEFAULT_IGNORED_ATTRIBUTES, RenderOptions, attributes_to_html, render_child, render_container
)
from node_parser.libs.tag_file_funcs import (
    expand_globs, parse_file, parse_module, parse_text, read_text_file
)

__version__ = "0.2.0"
