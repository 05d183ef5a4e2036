class TagAnalyzerError(Exception):
    """标签注释分析器基础异常类"""
    def __init__(self, message: str, line_num: int = 0, line_content: str = ""):
        self.message = message
        self.line_num = line_num
        self.line_content = line_content
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """格式化错误信息"""
        if self.line_num > 0:
            if self.line_content:
                return (
                    f"Tag Analysis Error at Line {self.line_num}\n"
                    f"Line Content: {self.line_content}\n"
                    f"Error: {self.message}\n"
                )
            else:
                return f"Line {self.line_num}: {self.message}"
        return self.message


class TagParserError(TagAnalyzerError):
    """模型构建状态机异常，目前仅在结构性错误时抛出"""
    def _format_message(self) -> str:
        """格式化解析器错误信息"""
        if self.line_num > 0:
            if self.line_content:
                return (
                    f"Parser Error at Line {self.line_num}\n"
                    f"Line Content: {self.line_content}\n"
                    f"Error: {self.message}\n"
                )
            else:
                return f"Parser Error at Line {self.line_num}: {self.message}"
        return f"Parser Error: {self.message}"
