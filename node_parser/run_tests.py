#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
测试脚本入口文件
开发者可以通过修改变量来选择运行特定的测试脚本
"""

# 测试开关变量，设置为1表示运行对应测试，设置为0表示跳过
RUN_TAG_LEXER_TEST = 1         # 标签词法分析测试
RUN_TAG_PARSER_TEST = 1        # 模型构建测试
RUN_TAG_DATA_TYPES_TEST = 1    # 实体JSON往返测试
RUN_TAG_RENDERER_TEST = 1      # HTML渲染测试
RUN_TAG_FILE_FUNCS_TEST = 1    # 文件/模块驱动测试
RUN_CONFIG_AND_STORE_TEST = 1  # 配置、存储与命令行测试


def run_test_script(title: str, module_name: str) -> None:
    """按模块名导入测试脚本并运行其main函数"""
    print(f"开始运行{title}...")
    try:
        module = __import__(f"node_parser._script_for_func_test.{module_name}", fromlist=["main"])
        module.main()
        print(f"{title}完成!")
    except Exception as e:
        print(f"{title}出错: {e}")
        import traceback
        traceback.print_exc()


def main():
    """主函数"""
    print("node_parser - 功能测试入口")
    print("=" * 40)

    test_switches = [
        (RUN_TAG_LEXER_TEST, "标签词法分析测试", "test_tag_lexer"),
        (RUN_TAG_PARSER_TEST, "模型构建测试", "test_tag_parser"),
        (RUN_TAG_DATA_TYPES_TEST, "实体JSON往返测试", "test_tag_data_types"),
        (RUN_TAG_RENDERER_TEST, "HTML渲染测试", "test_tag_renderer"),
        (RUN_TAG_FILE_FUNCS_TEST, "文件/模块驱动测试", "test_tag_file_funcs"),
        (RUN_CONFIG_AND_STORE_TEST, "配置、存储与命令行测试", "test_tag_config_and_store"),
    ]

    test_executed = False
    for enabled, title, module_name in test_switches:
        if enabled:
            run_test_script(title, module_name)
            test_executed = True

    if not test_executed:
        print("未选择任何测试，请修改变量设置后重试。")

    print("=" * 40)
    print("测试运行结束")


if __name__ == "__main__":
    main()
