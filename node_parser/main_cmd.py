import sys
import json
import asyncio
import argparse
from typing import List, Optional

from node_parser.typedef.cmd_data_types import CmdArgs, Colors, OutputFormat
from node_parser.typedef.exception_types import TagAnalyzerError
from node_parser.lib.debug_print import DEBUG_PRINT, INFO_T, DEBUG_T, set_print_level

from node_parser.cfg.tag_config_manager import get_instance as get_tag_config_manager
from node_parser.data_store.tag_data_store import get_instance as get_tag_data_store
from node_parser.libs.tag_file_funcs import parse_module


def parse_args(argv: Optional[List[str]] = None) -> CmdArgs:
    parser = argparse.ArgumentParser(description='从源码块注释中提取 form/node 定义')
    parser.add_argument('patterns', nargs='+', help='待解析文件的glob模式')
    parser.add_argument('--format', dest='output_format', default=OutputFormat.JSON,
                        choices=[OutputFormat.JSON, OutputFormat.HTML], help='输出格式')
    parser.add_argument('--dialect', choices=['form', 'node'], default=None,
                        help='标签方言，覆盖配置文件中的设置')
    parser.add_argument('--config', dest='config_path', default='', help='配置文件路径')
    parser.add_argument('--output', dest='output_path', default='', help='输出文件路径')
    parser.add_argument('--verbose', action='store_true', help='打印调试信息')
    args = parser.parse_args(argv)

    return CmdArgs(
        patterns=args.patterns,
        output_format=args.output_format,
        dialect=args.dialect or "",
        config_path=args.config_path,
        output_path=args.output_path,
        verbose=args.verbose,
    )


def run(cmd_args: CmdArgs) -> int:
    config_manager = get_tag_config_manager()
    config = config_manager.load_config(cmd_args.config_path or None)
    set_print_level(DEBUG_T if cmd_args.verbose else config.print_level)
    if cmd_args.dialect:
        config_manager.set_dialect(cmd_args.dialect)

    containers = asyncio.run(parse_module(cmd_args.patterns, config_manager.get_parser_options()))
    DEBUG_PRINT(INFO_T, f"共解析出 {len(containers)} 个容器")

    data_store = get_tag_data_store()
    if cmd_args.output_format == OutputFormat.JSON:
        if cmd_args.output_path:
            data_store.save_containers(cmd_args.output_path, containers, config_manager.config.dialect)
            return 0
        output = json.dumps(
            data_store.containers_to_dict(containers, config_manager.config.dialect),
            ensure_ascii=False, indent=2
        )
    else:
        render_options = config_manager.get_render_options()
        output = "\n".join(container.to_html(options=render_options) for container in containers)

    if cmd_args.output_path:
        with open(cmd_args.output_path, 'w', encoding='utf-8') as f:
            f.write(output + "\n")
    else:
        print(output)
    return 0


# CMD 模式启动
def main(argv: Optional[List[str]] = None) -> int:
    cmd_args = parse_args(argv)
    try:
        return run(cmd_args)
    except (TagAnalyzerError, OSError, ValueError) as e:
        print(f"{Colors.FAIL}错误: {e}{Colors.ENDC}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
