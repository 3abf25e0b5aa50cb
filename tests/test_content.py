import io

import pytest

from telegraphapi.content import content_format
from telegraphapi.errors import InvalidDataTypeError
from telegraphapi.models import NodeElement


def _find(nodes, tag):
    for node in nodes:
        if isinstance(node, NodeElement):
            if node.tag == tag:
                return node
            found = _find(node.children, tag)
            if found is not None:
                return found
    return None


def test_invalid_type():
    with pytest.raises(InvalidDataTypeError):
        content_format(42)


def test_valid_string():
    nodes = content_format("<p>Hello, World!</p>")
    assert len(nodes) == 1
    paragraph = _find(nodes, "p")
    assert paragraph.children == ["Hello, World!"]


def test_valid_bytes():
    nodes = content_format(b"<p>Hello, World!</p>")
    assert len(nodes) == 1
    assert _find(nodes, "p").children == ["Hello, World!"]


def test_valid_reader():
    nodes = content_format(io.StringIO("<p>Hello, World!</p>"))
    assert _find(nodes, "p").children == ["Hello, World!"]


def test_binary_reader():
    nodes = content_format(io.BytesIO("<p>Привет</p>".encode("utf-8")))
    assert _find(nodes, "p").children == ["Привет"]


def test_root_element_has_empty_tag():
    nodes = content_format("<p>Hello, World!</p>")
    root = nodes[0]
    assert root.tag == ""
    assert [child.tag for child in root.children] == ["", ""]


def test_only_href_and_src_attributes_kept():
    nodes = content_format('<a href="/page" title="t" class="c">link</a>')
    link = _find(nodes, "a")
    assert link.attrs == {"href": "/page"}
    assert link.children == ["link"]


def test_unknown_tag_keeps_children_without_tag():
    nodes = content_format("<p><span>inner</span></p>")
    paragraph = _find(nodes, "p")
    assert paragraph.children == [NodeElement(tag="", children=["inner"])]


def test_filter_drops_matching_nodes():
    nodes = content_format(
        "<p>one</p><h3>two</h3>",
        lambda dom: getattr(dom, "tagName", None) == "p",
    )
    assert _find(nodes, "p") is None
    assert _find(nodes, "h3").children == ["two"]


def test_filter_rejecting_root_gives_empty_list():
    assert content_format("<p>x</p>", lambda dom: True) == []


def test_result_serialises_to_dicts():
    nodes = content_format('<p><img src="/file/a.png"></p>')
    image = _find(nodes, "img")
    assert image.to_dict() == {"tag": "img", "attrs": {"src": "/file/a.png"}}