"""Objects returned by the Telegraph API and the node tree of page content."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass
class NodeElement:
    """A DOM element node of page content."""

    tag: str = ""
    attrs: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form, leaving out empty attributes and children."""
        result: dict[str, Any] = {"tag": self.tag}
        if self.attrs:
            result["attrs"] = dict(self.attrs)
        if self.children:
            result["children"] = [node_to_json(child) for child in self.children]
        return result


Node = Union[str, NodeElement]


def node_to_json(node: Any) -> Any:
    """Convert a content node to its JSON-ready form."""
    if isinstance(node, str):
        return node
    if isinstance(node, NodeElement):
        return node.to_dict()
    if isinstance(node, dict):
        return node
    raise TypeError(f"unsupported node type: {type(node).__name__}")


def node_from_json(data: Any) -> Node:
    """Build a content node from its JSON form."""
    if isinstance(data, str):
        return data
    if isinstance(data, dict):
        return NodeElement(
            tag=data.get("tag", ""),
            attrs=dict(data.get("attrs") or {}),
            children=[node_from_json(child) for child in data.get("children") or []],
        )
    raise TypeError(f"unsupported node data: {type(data).__name__}")


@dataclass
class Account:
    """A Telegraph account."""

    access_token: str = ""
    auth_url: str = ""
    short_name: str = ""
    author_name: str = ""
    author_url: str = ""
    page_count: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Account:
        return cls(
            access_token=data.get("access_token", ""),
            auth_url=data.get("auth_url", ""),
            short_name=data.get("short_name", ""),
            author_name=data.get("author_name", ""),
            author_url=data.get("author_url", ""),
            page_count=data.get("page_count", 0),
        )


@dataclass
class Page:
    """A page on Telegraph."""

    path: str = ""
    url: str = ""
    title: str = ""
    description: str = ""
    author_name: str = ""
    author_url: str = ""
    image_url: str = ""
    content: list[Node] = field(default_factory=list)
    views: int = 0
    can_edit: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Page:
        return cls(
            path=data.get("path", ""),
            url=data.get("url", ""),
            title=data.get("title", ""),
            description=data.get("description", ""),
            author_name=data.get("author_name", ""),
            author_url=data.get("author_url", ""),
            image_url=data.get("image_url", ""),
            content=[node_from_json(node) for node in data.get("content") or []],
            views=data.get("views", 0),
            can_edit=data.get("can_edit", False),
        )


@dataclass
class PageList:
    """Pages of an account, most recently created first."""

    total_count: int = 0
    pages: list[Page] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PageList:
        return cls(
            total_count=data.get("total_count", 0),
            pages=[Page.from_dict(page) for page in data.get("pages") or []],
        )


@dataclass
class PageViews:
    """The number of views of a page."""

    views: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PageViews:
        return cls(views=data.get("views", 0))