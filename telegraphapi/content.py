"""Conversion of HTML into the node format used for page content."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any
from xml.dom import Node as DomNode

import html5lib

from .errors import InvalidDataTypeError
from .models import Node, NodeElement

FilterFunc = Callable[[Any], bool]

ALLOWED_TAGS = frozenset(
    {
        "a", "aside", "b", "blockquote", "br", "code", "em", "figcaption", "figure",
        "h3", "h4", "hr", "i", "iframe", "img", "li", "ol", "p", "pre", "s",
        "strong", "u", "ul", "video",
    }
)
_ALLOWED_ATTRS = frozenset({"href", "src"})


def _read_text(data: Any) -> str:
    if isinstance(data, str):
        return data
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode("utf-8", errors="replace")
    if hasattr(data, "read"):
        raw = data.read()
        if isinstance(raw, (bytes, bytearray)):
            return bytes(raw).decode("utf-8", errors="replace")
        if isinstance(raw, str):
            return raw
    raise InvalidDataTypeError()


def content_format(data: Any, *args: FilterFunc) -> list[Node]:
    """Parse HTML (str, bytes or a readable object) into content nodes.

    Each extra argument is a filter called with a DOM node; a node for which
    a filter returns true is dropped along with its subtree.
    """
    text = _read_text(data)
    document = html5lib.parse(text, treebuilder="dom", namespaceHTMLElements=False)
    root = document.firstChild
    if root is None:
        return []
    node = _dom_to_node(root, args)
    return [] if node is None else [node]


def _dom_to_node(dom_node: Any, filters: tuple[FilterFunc, ...]) -> Node | None:
    if any(check(dom_node) for check in filters):
        return None
    if dom_node.nodeType == DomNode.TEXT_NODE:
        return dom_node.data
    if dom_node.nodeType != DomNode.ELEMENT_NODE:
        return None

    element = NodeElement()
    name = dom_node.tagName
    if name.lower() in ALLOWED_TAGS:
        element.tag = name
        for key, value in dom_node.attributes.items():
            if key.lower() in _ALLOWED_ATTRS:
                element.attrs = {key: value}

    for child in dom_node.childNodes:
        node = _dom_to_node(child, filters)
        if node is not None:
            element.children.append(node)
    return element