import threading
from typing import List

import tree_sitter as ts
import tree_sitter_javascript as tsjs

from node_parser.typedef.tag_data_types import CommentKind, RawComment


JS_LANGUAGE = ts.Language(tsjs.language())
# ts.Parser 不可跨线程共享，parse_module 会在线程池中并发调用
_local = threading.local()


def _get_parser() -> ts.Parser:
    parser = getattr(_local, "parser", None)
    if parser is None:
        parser = ts.Parser(JS_LANGUAGE)
        _local.parser = parser
    return parser


def _to_raw_comment(node: ts.Node) -> RawComment:
    """将 comment 节点转换为 RawComment，注释文本去掉 /* */ 或 // 定界符"""
    raw = node.text.decode("utf-8", errors="replace")
    line_num = node.start_point[0] + 1
    if raw.startswith("/*"):
        body = raw[2:-2] if raw.endswith("*/") else raw[2:]
        return RawComment(kind=CommentKind.BLOCK, text=body, line_num=line_num)
    return RawComment(kind=CommentKind.LINE, text=raw[2:], line_num=line_num)


def extract_comments(file_text: str) -> List[RawComment]:
    """按源码中的出现顺序提取全部注释（块注释与行注释）

    tree-sitter 对语法错误是容错的，因此这里不会因源码不完整而抛出异常。
    """
    tree = _get_parser().parse(file_text.encode("utf-8"))

    comments: List[RawComment] = []
    stack: List[ts.Node] = [tree.root_node]
    while stack:
        node = stack.pop()
        if node.type == "comment":
            comments.append(_to_raw_comment(node))
            continue
        # 逆序压栈以保证按文档顺序出栈
        stack.extend(reversed(node.children))
    return comments


def extract_block_comments(file_text: str) -> List[str]:
    """仅返回块注释的正文，行注释（即使以 @ 开头）一律忽略"""
    return [
        comment.text for comment in extract_comments(file_text)
        if comment.kind == CommentKind.BLOCK
    ]
