"""
Builders for small settings documents.

These helpers create XML documents in memory so that tests and examples can
exercise the loader without files on disk.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Sequence, Tuple
import xml.etree.ElementTree as ET

from ..core.document import XMLNode, parse_xml_string


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return " ".join(_format_value(v) for v in value)
    return str(value)


def _add_fields(element: ET.Element, fields: Mapping[str, Any]) -> None:
    for name, value in fields.items():
        if isinstance(value, Mapping):
            _add_fields(ET.SubElement(element, name), value)
        else:
            ET.SubElement(element, name).text = _format_value(value)


def make_source_element(
    space: Optional[Tuple[str, Sequence[float]]] = None,
    angle: Optional[Tuple[str, Sequence[float]]] = None,
    energy: Optional[Tuple[str, Sequence[float]]] = None,
    strength: Optional[float] = None,
) -> ET.Element:
    """Create a ``<source>`` element.

    Parameters
    ----------
    space, angle, energy : (type, parameters), optional
        Distribution type and its parameters. For a monodirectional angle
        the parameters are the reference direction.
    strength : float, optional
        Source strength attribute.
    """
    source = ET.Element("source")
    if strength is not None:
        source.set("strength", _format_value(strength))
    for tag, part in (("space", space), ("angle", angle), ("energy", energy)):
        if part is None:
            continue
        kind, params = part
        node = ET.SubElement(source, tag, type=kind)
        if params:
            field = "reference_uvw" if kind == "monodirectional" else "parameters"
            ET.SubElement(node, field).text = _format_value(params)
    return source


def make_settings_xml(sources: Iterable[ET.Element] = (), **fields: Any) -> str:
    """Create a settings document as an XML string.

    Keyword arguments become child elements; nested mappings become nested
    elements (e.g. ``output={"path": "results"}``). ``sources`` are appended
    in order.

    Example
    -------
    >>> make_settings_xml(temperature_method="interpolation")
    '<settings><temperature_method>interpolation</temperature_method></settings>'
    """
    root = ET.Element("settings")
    _add_fields(root, fields)
    for source in sources:
        root.append(source)
    return ET.tostring(root, encoding="unicode")


def make_settings_root(sources: Iterable[ET.Element] = (), **fields: Any) -> XMLNode:
    """Same as `make_settings_xml` but return the parsed root node."""
    return parse_xml_string(make_settings_xml(sources, **fields))
