"""Write SVG markup from a generic tree."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from svgscene.svg.ids import EId
from svgscene.svg.tree import GenericDocument, GenericNode, TextNode
from svgscene.svg.values import format_value

_INDENT = "  "


def write_svg(doc: GenericDocument, indent: bool = True) -> str:
    """Format a GenericDocument as an SVG string with an XML declaration."""
    if doc.root is None:
        raise ValueError("cannot write an empty document")

    root = _build(doc.root)
    if indent:
        _indent(root)
    body = ET.tostring(root, encoding="unicode")
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + body + "\n"


def _build(node: GenericNode) -> ET.Element:
    elem = ET.Element(node.tag.value)
    if node.id:
        elem.set("id", node.id)
    for aid, value in node.attributes.items():
        elem.set(aid.value, format_value(value))

    last: ET.Element | None = None
    for child in node.children:
        if isinstance(child, TextNode):
            if last is None:
                elem.text = (elem.text or "") + child.text
            else:
                last.tail = (last.tail or "") + child.text
        else:
            last = _build(child)
            elem.append(last)
    return elem


def _indent(elem: ET.Element, level: int = 0) -> None:
    # Whitespace inside text is content, so text subtrees are left untouched.
    if elem.tag == EId.TEXT.value:
        return
    children = list(elem)
    if not children:
        return
    inner = "\n" + _INDENT * (level + 1)
    if not (elem.text or "").strip():
        elem.text = inner
    for child in children:
        _indent(child, level + 1)
        if not (child.tail or "").strip():
            child.tail = inner
    if not (children[-1].tail or "").strip():
        children[-1].tail = "\n" + _INDENT * level
