"""容器实体数据管理器 - 统一管理解析结果的JSON持久化存储"""
import json
import os
from typing import Any, Dict, List, Type, Union

from node_parser.typedef.tag_data_types import (
    ContainerEntity, DIALECT_CLASSES, TagDialect
)


class TagDataStore:
    """容器实体数据管理器 - 单例模式"""

    _instance = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super(TagDataStore, cls).__new__(cls)
        return cls._instance

    def __init__(self):
        if not hasattr(self, '_initialized'):
            self._initialized = True

    def build_json_path(self, out_dir: str, source_path: str) -> str:
        """构建JSON文件路径: out_dir/<源文件名>_nodes.json"""
        base_name = os.path.splitext(os.path.basename(source_path))[0]
        return os.path.join(out_dir, f"{base_name}_nodes.json")

    def containers_to_dict(
        self,
        containers: List[ContainerEntity],
        dialect: Union[TagDialect, str] = TagDialect.FORM
    ) -> Dict[str, Any]:
        return {
            "dialect": TagDialect(dialect).value,
            "containers": [container.to_dict() for container in containers],
        }

    def containers_from_dict(self, data: Dict[str, Any]) -> List[ContainerEntity]:
        """根据dialect字段选择容器类型，缺失时按form处理"""
        dialect = TagDialect(data.get("dialect") or TagDialect.FORM.value)
        container_class: Type[ContainerEntity] = DIALECT_CLASSES[dialect][0]
        return [container_class.from_dict(item) for item in data.get("containers") or []]

    def save_containers(
        self,
        json_path: str,
        containers: List[ContainerEntity],
        dialect: Union[TagDialect, str] = TagDialect.FORM
    ) -> None:
        """保存容器实体列表到JSON文件"""
        try:
            directory = os.path.dirname(json_path)
            if directory and not os.path.exists(directory):
                os.makedirs(directory)

            with open(json_path, 'w', encoding='utf-8') as f:
                json.dump(self.containers_to_dict(containers, dialect), f, ensure_ascii=False, indent=2)
        except OSError as e:
            raise IOError(f"保存解析结果失败 [{json_path}]: {e}") from e

    def load_containers(self, json_path: str) -> List[ContainerEntity]:
        """加载容器实体列表，文件不存在时返回空列表，JSON格式错误原样抛出"""
        if not os.path.exists(json_path):
            return []

        with open(json_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return self.containers_from_dict(data)


_instance = TagDataStore()


def get_instance() -> TagDataStore:
    return _instance
