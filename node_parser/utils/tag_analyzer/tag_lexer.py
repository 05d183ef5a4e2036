from typing import Iterator, List, Optional

from node_parser.typedef.tag_data_types import TAG_SIGIL, Token


def parse_line(raw_line: str, line_num: int = 0) -> Optional[Token]:
    """将单行文本解析为 (key, value) Token

    行首尾空白会先被去除；只有以 @ 开头的行才被识别为标签行，
    key 为 @ 之后直到第一个空白字符的部分，value 为剩余内容去除首尾空白。
    空行以及非标签行返回 None，由调用方静默跳过。
    单独一个 @ 会得到 key 与 value 均为空串的 Token。
    """
    line = raw_line.strip()
    if not line or line[0] != TAG_SIGIL:
        return None

    # 扫描到第一个空白字符为止
    boundary = len(line)
    for i, char in enumerate(line):
        if char.isspace():
            boundary = i
            break

    key = line[len(TAG_SIGIL):boundary]
    value = line[boundary:].strip()
    return Token(key=key, value=value, line_num=line_num)


# 对外统一的分词入口
tokenize = parse_line


class TagSource:
    """对一段注释文本按行产出 Token 的单向游标，不可回退"""
    def __init__(self, text: str) -> None:
        self.text: str = text
        self.lines: List[str] = text.split('\n') if text else []
        self.line_num = 0

    def get_next(self) -> Optional[Token]:
        """获取下一个Token，已到文本末尾时返回None"""
        while self.line_num < len(self.lines):
            current_line = self.lines[self.line_num]
            self.line_num += 1
            token = parse_line(current_line, self.line_num)
            if token is not None:
                return token
        return None

    def __iter__(self) -> Iterator[Token]:
        token = self.get_next()
        while token is not None:
            yield token
            token = self.get_next()
