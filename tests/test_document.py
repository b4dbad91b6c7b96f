"""
设置文档节点访问层的单元测试
"""

import pytest

from sim_settings.core.document import (
    MappingNode,
    XMLNode,
    load_document,
    parse_xml_string,
    parse_yaml_string,
)
from sim_settings.core.errors import ConfigError


class TestXMLNode:
    """测试 XML 节点"""

    def test_attribute_and_child_fields(self):
        """字段可以是属性也可以是子元素"""
        node = parse_xml_string(
            '<source strength="2.5"><space type="point"><parameters>1 2 3</parameters></space></source>'
        )
        assert isinstance(node, XMLNode)
        assert node.has("strength")
        assert node.value_float("strength") == 2.5
        space = node.child("space")
        assert space.value("type") == "point"
        assert space.array("parameters") == [1.0, 2.0, 3.0]

    def test_value_strip_and_lower(self):
        root = parse_xml_string("<settings><temperature_method>  Nearest \n</temperature_method></settings>")
        assert root.value("temperature_method") == "  Nearest \n"
        assert root.value("temperature_method", strip=True, lower=True) == "nearest"

    def test_missing_field(self):
        root = parse_xml_string("<settings/>")
        assert not root.has("verbosity")
        assert root.child("output") is None
        assert root.children("source") == []
        with pytest.raises(ConfigError, match="verbosity"):
            root.value("verbosity")

    @pytest.mark.parametrize("token,expected", [
        ("true", True), ("True", True), (" 1 ", True),
        ("false", False), ("FALSE", False), ("0", False),
    ])
    def test_value_bool(self, token, expected):
        root = parse_xml_string(f"<settings><survival_biasing>{token}</survival_biasing></settings>")
        assert root.value_bool("survival_biasing") is expected

    def test_invalid_bool(self):
        root = parse_xml_string("<settings><survival_biasing>maybe</survival_biasing></settings>")
        with pytest.raises(ConfigError, match="survival_biasing"):
            root.value_bool("survival_biasing")

    def test_invalid_number(self):
        root = parse_xml_string("<settings><temperature_default>hot</temperature_default></settings>")
        with pytest.raises(ConfigError, match="temperature_default"):
            root.value_float("temperature_default")

    def test_children_in_document_order(self):
        root = parse_xml_string(
            '<settings><source strength="1"/><verbosity>5</verbosity>'
            '<source strength="2"/><source strength="3"/></settings>'
        )
        strengths = [node.value_float("strength") for node in root.children("source")]
        assert strengths == [1.0, 2.0, 3.0]

    def test_empty_element_value(self):
        root = parse_xml_string("<settings><cross_sections/></settings>")
        assert root.has("cross_sections")
        assert root.value("cross_sections") == ""

    def test_malformed_xml(self):
        with pytest.raises(ConfigError, match="XML"):
            parse_xml_string("<settings><output></settings>")


class TestMappingNode:
    """测试 YAML 映射节点"""

    def test_settings_wrapper_is_unwrapped(self):
        root = parse_yaml_string("settings:\n  verbosity: 5\n")
        assert isinstance(root, MappingNode)
        assert root.value_int("verbosity") == 5

    def test_unwrapped_document(self):
        root = parse_yaml_string("verbosity: 5\n")
        assert root.value_int("verbosity") == 5

    def test_yaml_scalars(self):
        root = parse_yaml_string(
            "temperature_multipole: true\n"
            "temperature_range: [300, 600]\n"
            "temperature_method: ' Interpolation'\n"
        )
        assert root.value_bool("temperature_multipole") is True
        assert root.array("temperature_range") == [300.0, 600.0]
        assert root.value("temperature_method", strip=True, lower=True) == "interpolation"

    def test_array_from_string(self):
        root = parse_yaml_string("temperature_range: 300 600\n")
        assert root.array("temperature_range") == [300.0, 600.0]

    def test_repeated_children_as_list(self):
        root = parse_yaml_string(
            "source:\n"
            "  - strength: 1.0\n"
            "  - strength: 2.0\n"
        )
        sources = root.children("source")
        assert [s.value_float("strength") for s in sources] == [1.0, 2.0]
        assert root.child("source").value_float("strength") == 1.0

    def test_single_child_mapping(self):
        root = parse_yaml_string("output:\n  path: results\n")
        output = root.child("output")
        assert output is not None
        assert output.value("path") == "results"
        assert len(root.children("output")) == 1

    def test_section_is_not_a_value(self):
        root = parse_yaml_string("output:\n  path: results\n")
        with pytest.raises(ConfigError, match="output"):
            root.value("output")

    def test_scalar_is_not_a_child(self):
        root = parse_yaml_string("cross_sections: /data/cross_sections.xml\n")
        assert root.child("cross_sections") is None
        assert root.value("cross_sections") == "/data/cross_sections.xml"

    def test_empty_document(self):
        root = parse_yaml_string("")
        assert not root.has("source")

    def test_non_mapping_document(self):
        with pytest.raises(ConfigError, match="mapping"):
            parse_yaml_string("- a\n- b\n")

    def test_malformed_yaml(self):
        with pytest.raises(ConfigError, match="YAML"):
            parse_yaml_string("output: [unclosed\n")


class TestLoadDocument:
    """测试从文件加载文档"""

    def test_load_xml(self, tmp_path):
        path = tmp_path / "settings.xml"
        path.write_text("<settings><verbosity>3</verbosity></settings>", encoding="utf-8")
        root = load_document(path)
        assert isinstance(root, XMLNode)
        assert root.value_int("verbosity") == 3

    @pytest.mark.parametrize("suffix", [".yaml", ".yml"])
    def test_load_yaml(self, tmp_path, suffix):
        path = tmp_path / f"settings{suffix}"
        path.write_text("verbosity: 3\n", encoding="utf-8")
        root = load_document(str(path))
        assert isinstance(root, MappingNode)
        assert root.value_int("verbosity") == 3

    def test_unknown_suffix(self, tmp_path):
        path = tmp_path / "settings.txt"
        path.write_text("verbosity 3", encoding="utf-8")
        with pytest.raises(ConfigError, match="settings.txt"):
            load_document(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_document(tmp_path / "missing.xml")

    def test_file_name_recorded(self, tmp_path):
        """节点记录所属文档的文件名，子节点继承"""
        path = tmp_path / "case.yaml"
        path.write_text("output:\n  path: results\n", encoding="utf-8")
        root = load_document(path)
        assert root.name == "case.yaml"
        assert root.child("output").name == "case.yaml"
