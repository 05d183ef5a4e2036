from dataclasses import dataclass
from typing import List


class Colors:
    """颜色类"""
    HEADER = '\033[95m'
    OKBLUE = '\033[94m'
    OKCYAN = '\033[96m'
    OKGREEN = '\033[92m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'
    UNDERLINE = '\033[4m'


class OutputFormat:
    """命令行输出格式"""
    JSON = "json"
    HTML = "html"


@dataclass
class CmdArgs:
    """命令行参数数据类"""
    patterns: List[str]                 # 待解析文件的glob模式
    output_format: str                  # 输出格式 json/html
    dialect: str                        # 标签方言 form/node
    config_path: str = ""               # 配置文件路径
    output_path: str = ""               # 输出文件路径，为空时打印到终端
    verbose: bool = False               # 是否打印调试信息
