import json

from node_parser.typedef.tag_data_types import Form, Input, Node, Property
from node_parser.utils.tag_analyzer.tag_parser import ParserOptions, parse


def build_form() -> Form:
    form = Form("Node")
    form.add_attribute("desc", "Dense layer")
    units = Input("units")
    units.add_attribute("type", "number")
    units.add_attribute("min", "1")
    form.add_child(units)
    form.add_child(Input("activation"))
    form.add_child(Input("bias"))
    return form


def test_to_dict_shape():
    """测试JSON结构"""
    print("测试 to_dict 结构...")
    assert build_form().to_dict() == {
        "name": "Node",
        "attributes": {"desc": "Dense layer"},
        "children": [
            {"name": "units", "attributes": {"type": "number", "min": "1"}},
            {"name": "activation", "attributes": {}},
            {"name": "bias", "attributes": {}},
        ],
    }
    print("  ✓ 结构正确")


def test_round_trip():
    """测试 from_dict(to_dict(x)).to_dict() == to_dict(x)"""
    print("测试 JSON 往返...")
    form = build_form()
    restored = Form.from_dict(form.to_dict())
    assert restored.to_dict() == form.to_dict()
    assert restored == form
    assert all(isinstance(child, Input) for child in restored.children)

    restored_from_text = Form.from_json(form.to_json(indent=2))
    assert restored_from_text.to_dict() == form.to_dict()
    print("  ✓ 往返一致")


def test_round_trip_parsed_sample():
    content = "@node Dense\n@description foo\n@property units\n@type number\n@min 1"
    node = parse(content, ParserOptions.node_dialect())[0]
    restored = Node.from_dict(json.loads(json.dumps(node.to_dict())))
    assert isinstance(restored.children[0], Property)
    assert restored.to_dict() == node.to_dict()


def test_children_order():
    names = [f"field_{i}" for i in range(10)]
    form = Form("Ordered")
    for name in reversed(names):
        form.add_child(Input(name))
    assert [child["name"] for child in form.to_dict()["children"]] == list(reversed(names))


def test_from_dict_defaults():
    """缺失 attributes/children 时默认为空，未知字段忽略"""
    form = Form.from_dict({"name": "Bare", "unknown": 42})
    assert form.attributes == {}
    assert form.children == []

    child = Input.from_dict({"name": "x", "attributes": None})
    assert child.attributes == {}


def test_from_dict_missing_name():
    try:
        Form.from_dict({"attributes": {}})
    except KeyError:
        return
    raise AssertionError("缺失name应抛出KeyError")


def test_from_json_malformed():
    try:
        Form.from_json("{not json")
    except json.JSONDecodeError:
        return
    raise AssertionError("非法JSON应原样抛出")


def test_to_dict_is_a_copy():
    form = build_form()
    data = form.to_dict()
    data["attributes"]["desc"] = "changed"
    data["children"][0]["attributes"]["type"] = "text"
    assert form.attributes["desc"] == "Dense layer"
    assert form.children[0].attributes["type"] == "number"


def test_repr():
    assert repr(build_form()) == "Form(name='Node', children=3)"
    assert repr(Property("units")) == "Property(name='units', attributes=0)"


def main():
    tests = [
        test_to_dict_shape,
        test_round_trip,
        test_round_trip_parsed_sample,
        test_children_order,
        test_from_dict_defaults,
        test_from_dict_missing_name,
        test_from_json_malformed,
        test_to_dict_is_a_copy,
        test_repr,
    ]
    failed = 0
    for test in tests:
        try:
            test()
        except AssertionError as e:
            failed += 1
            print(f"  ❌ {test.__name__} 失败: {e}")
    print(f"\n总计: {len(tests) - failed} 通过, {failed} 失败")


if __name__ == "__main__":
    main()
