"""
Navigable node tree for settings documents.

The parsers in this package only need three things from a document: find a
child node by name, read a scalar value and read a whitespace separated
array. `DocumentNode` provides exactly that on top of either an XML element
(`xml.etree.ElementTree`) or a mapping loaded with PyYAML, so that the same
loader accepts ``settings.xml`` and ``settings.yaml``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, List, Mapping, Optional, Union
import xml.etree.ElementTree as ET

import yaml

from .errors import ConfigError

_TRUE_TOKENS = {"true", "1"}
_FALSE_TOKENS = {"false", "0"}


class DocumentNode(ABC):
    """A node in a settings document.

    A *field* of a node is either an attribute or a child carrying a scalar,
    whichever the document format uses. ``name`` is the file name of the
    document the node belongs to, used in messages.
    """

    tag: str = ""
    name: str = ""

    @abstractmethod
    def has(self, name: str) -> bool:
        """Return True when the node has a field or child called ``name``."""

    @abstractmethod
    def _lookup(self, name: str) -> Any:
        """Return the raw value of ``name`` or None when absent."""

    @abstractmethod
    def child(self, name: str) -> Optional["DocumentNode"]:
        """Return the first child node called ``name`` or None."""

    @abstractmethod
    def children(self, name: str) -> List["DocumentNode"]:
        """Return every child node called ``name`` in document order."""

    def value(self, name: str, strip: bool = False, lower: bool = False) -> str:
        """Return the value of ``name`` as a string.

        Parameters
        ----------
        name : str
            Field name.
        strip : bool
            Remove surrounding whitespace.
        lower : bool
            Convert to lower case.

        Raises
        ------
        ConfigError
            If the field is absent.
        """
        raw = self._lookup(name)
        if raw is None:
            raise ConfigError(f"Missing value for '{name}' in <{self.tag}>")
        text = _to_text(raw)
        if strip:
            text = text.strip()
        if lower:
            text = text.lower()
        return text

    def value_bool(self, name: str) -> bool:
        token = self.value(name, strip=True, lower=True)
        if token in _TRUE_TOKENS:
            return True
        if token in _FALSE_TOKENS:
            return False
        raise ConfigError(f"Invalid boolean value for '{name}': {token}")

    def value_float(self, name: str) -> float:
        return _convert(self.value(name, strip=True), float, name)

    def value_int(self, name: str) -> int:
        return _convert(self.value(name, strip=True), int, name)

    def array(self, name: str, dtype: Callable[[str], Any] = float) -> list:
        """Return the whitespace separated (or list) value of ``name``."""
        raw = self._lookup(name)
        if raw is None:
            raise ConfigError(f"Missing value for '{name}' in <{self.tag}>")
        if isinstance(raw, (list, tuple)):
            items = [_to_text(item) for item in raw]
        else:
            items = _to_text(raw).split()
        return [_convert(item, dtype, name) for item in items]


class XMLNode(DocumentNode):
    """`DocumentNode` backed by an ElementTree element."""

    def __init__(self, element: ET.Element, name: str = "settings.xml"):
        self.element = element
        self.tag = element.tag
        self.name = name

    def has(self, name: str) -> bool:
        return name in self.element.attrib or self.element.find(name) is not None

    def _lookup(self, name: str) -> Any:
        if name in self.element.attrib:
            return self.element.attrib[name]
        found = self.element.find(name)
        if found is None:
            return None
        return found.text or ""

    def child(self, name: str) -> Optional[DocumentNode]:
        found = self.element.find(name)
        return XMLNode(found, self.name) if found is not None else None

    def children(self, name: str) -> List[DocumentNode]:
        return [XMLNode(e, self.name) for e in self.element.findall(name)]


class MappingNode(DocumentNode):
    """`DocumentNode` backed by a mapping, as produced by ``yaml.safe_load``.

    A repeated child (e.g. several ``source`` entries) is written as a YAML
    list under one key.
    """

    def __init__(self, data: Mapping[str, Any], tag: str = "settings",
                 name: str = "settings.yaml"):
        self.data = data
        self.tag = tag
        self.name = name

    def has(self, name: str) -> bool:
        return name in self.data

    def _lookup(self, name: str) -> Any:
        raw = self.data.get(name)
        if isinstance(raw, Mapping):
            raise ConfigError(f"Expected a value for '{name}' in <{self.tag}>, found a section")
        return raw

    def child(self, name: str) -> Optional[DocumentNode]:
        nodes = self.children(name)
        return nodes[0] if nodes else None

    def children(self, name: str) -> List[DocumentNode]:
        raw = self.data.get(name)
        if raw is None:
            return []
        items = raw if isinstance(raw, list) else [raw]
        nodes: List[DocumentNode] = []
        for item in items:
            if not isinstance(item, Mapping):
                # Scalar children (e.g. ``cross_sections: path``) are fields, not nodes
                return []
            nodes.append(MappingNode(item, tag=name, name=self.name))
        return nodes


def _to_text(raw: Any) -> str:
    if isinstance(raw, bool):
        return "true" if raw else "false"
    if isinstance(raw, (list, tuple)):
        return " ".join(_to_text(item) for item in raw)
    return str(raw)


def _convert(text: str, dtype: Callable[[str], Any], name: str) -> Any:
    try:
        return dtype(text)
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid value for '{name}': {text}") from None


# =============================================================================
# Loading
# =============================================================================

def parse_xml_string(text: str, name: str = "settings.xml") -> XMLNode:
    try:
        return XMLNode(ET.fromstring(text), name)
    except ET.ParseError as e:
        raise ConfigError(f"Could not parse XML document: {e}") from e


def parse_yaml_string(text: str, tag: str = "settings",
                      name: str = "settings.yaml") -> MappingNode:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse YAML document: {e}") from e
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ConfigError("YAML settings document must be a mapping at the top level")
    # Allow the whole document to be wrapped in a single ``settings:`` key
    if set(data) == {tag} and isinstance(data[tag], Mapping):
        data = data[tag]
    return MappingNode(data, tag=tag, name=name)


def load_document(path: Union[str, Path]) -> DocumentNode:
    """Load a settings document and return its root node.

    Parameters
    ----------
    path : str or Path
        ``.xml``, ``.yaml`` or ``.yml`` file.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ConfigError
        If the suffix is not recognized or the file cannot be parsed.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Settings document '{path}' does not exist")

    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if suffix == ".xml":
        return parse_xml_string(text, name=path.name)
    if suffix in (".yaml", ".yml"):
        return parse_yaml_string(text, name=path.name)
    raise ConfigError(f"Unrecognized settings document type: {path.name}")
