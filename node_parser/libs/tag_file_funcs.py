"""文件/模块级驱动：读取源码文件，提取块注释并逐个调用模型构建器"""
import os
import glob
import asyncio
from typing import Iterable, List, Optional

from node_parser.typedef.tag_data_types import ContainerEntity
from node_parser.typedef.exception_types import TagParserError
from node_parser.lib.debug_print import DEBUG_PRINT, ERROR_T, WARNING_T, INFO_T

from node_parser.utils.comment_extractor.js_comment_extractor import extract_block_comments
from node_parser.utils.tag_analyzer.tag_parser import ParserOptions, parse


def read_text_file(path: str) -> str:
    """以UTF-8读取文本文件，文件不存在等异常直接向上抛出"""
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def expand_globs(patterns: Iterable[str]) -> List[str]:
    """展开glob模式，保持模式顺序，每个模式内按路径排序，重复路径只保留首次出现"""
    file_paths: List[str] = []
    seen = set()
    for pattern in patterns:
        matched = sorted(glob.glob(pattern, recursive=True))
        if not matched:
            DEBUG_PRINT(WARNING_T, f"Pattern '{pattern}' matched no files")
            continue
        for path in matched:
            if not os.path.isfile(path):
                continue
            normalized = os.path.normpath(path)
            if normalized in seen:
                continue
            seen.add(normalized)
            file_paths.append(normalized)
    return file_paths


def parse_text(text: str, options: Optional[ParserOptions] = None) -> List[ContainerEntity]:
    """对一段源码文本中的每个块注释调用parse，并按出现顺序拼接结果"""
    containers: List[ContainerEntity] = []
    for comment_text in extract_block_comments(text):
        containers.extend(parse(comment_text, options))
    return containers


def parse_file(path: str, options: Optional[ParserOptions] = None) -> List[ContainerEntity]:
    """解析单个源码文件

    Raises:
        TagParserError: 文件中存在结构性错误，打印文件路径后原样抛出
        OSError: 文件读取失败
    """
    content = read_text_file(path)
    try:
        containers = parse_text(content, options)
    except TagParserError as e:
        DEBUG_PRINT(ERROR_T, f"解析文件失败 [{path}]: {e}")
        raise
    DEBUG_PRINT(INFO_T, f"{path}: {len(containers)} container(s)")
    return containers


async def parse_module(
    glob_patterns: Iterable[str],
    options: Optional[ParserOptions] = None
) -> List[ContainerEntity]:
    """并发解析glob模式匹配到的全部文件

    返回结果先按文件展开顺序、再按文件内声明顺序排列。
    """
    file_paths = await asyncio.to_thread(expand_globs, list(glob_patterns))
    results = await asyncio.gather(
        *(asyncio.to_thread(parse_file, path, options) for path in file_paths)
    )

    containers: List[ContainerEntity] = []
    for file_containers in results:
        containers.extend(file_containers)
    return containers
