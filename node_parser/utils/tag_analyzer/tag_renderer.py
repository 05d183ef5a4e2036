"""实体的默认HTML渲染函数

渲染函数签名统一为 renderer(entity, options) -> str，调用方可整体替换。
属性值不做HTML转义，由调用方负责。
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, FrozenSet, Iterable, Optional


# 仅用于文档说明的属性，默认不输出到HTML属性中
DEFAULT_IGNORED_ATTRIBUTES: FrozenSet[str] = frozenset({"description", "desc"})


@dataclass
class RenderOptions:
    """渲染配置"""
    container_tag: str = "form"
    child_tag: str = "input"
    indent: str = "  "
    ignored_attributes: FrozenSet[str] = field(default=DEFAULT_IGNORED_ATTRIBUTES)
    child_renderer: Optional[Callable[..., str]] = None  # 容器渲染时用于子实体的渲染函数


def attributes_to_html(
    attributes: Dict[str, str],
    ignored: Iterable[str] = DEFAULT_IGNORED_ATTRIBUTES
) -> str:
    """将属性映射转换为 key="value" 形式的HTML属性串，跳过ignored中的key"""
    ignored_set = set(ignored)
    return " ".join(
        f'{key}="{value}"' for key, value in attributes.items() if key not in ignored_set
    )


def render_child(entity: Any, options: Optional[RenderOptions] = None) -> str:
    """默认子实体渲染：自闭合标签，name在前，其余属性按插入顺序排列"""
    if options is None:
        options = RenderOptions()

    attrs = attributes_to_html(entity.attributes, options.ignored_attributes)
    name_attr = f'name="{entity.name}"'
    if attrs:
        return f"<{options.child_tag} {name_attr} {attrs} />"
    return f"<{options.child_tag} {name_attr} />"


def render_container(entity: Any, options: Optional[RenderOptions] = None) -> str:
    """默认容器渲染：以容器标签包裹所有子实体各自的渲染结果，每个子实体单独一行并缩进"""
    if options is None:
        options = RenderOptions()

    lines = [f'<{options.container_tag} name="{entity.name}">']
    for child in entity.children:
        rendered = child.to_html(options.child_renderer, options)
        lines.append(f"{options.indent}{rendered}")
    lines.append(f"</{options.container_tag}>")
    return "\n".join(lines)
