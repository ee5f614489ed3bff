# src/generator/dom/nodes.py
from __future__ import annotations

from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field


class TextNode(BaseModel):
    """
    An element that only carries text: no attributes and no child elements.
    Table cells such as <td>click</td> end up as TextNodes.
    """
    kind: Literal["text"] = "text"
    tag: str
    text: str

    def children(self, tag: str) -> List["Node"]:
        return []

    def first(self, tag: str) -> Optional["Node"]:
        return None

    def attribute(self, name: str) -> Optional[str]:
        return None

    @property
    def is_empty(self) -> bool:
        return False

    @property
    def text_content(self) -> str:
        return self.text


class ElementNode(BaseModel):
    """
    An element with attributes and/or child elements.

    Children are grouped by tag name in document order. Every group is a list,
    even when the tag occurs once, so callers never have to tell a single
    child apart from repeated siblings.
    """
    kind: Literal["element"] = "element"
    tag: str
    attributes: Dict[str, str] = Field(default_factory=dict)
    child_groups: Dict[str, List["Node"]] = Field(default_factory=dict)
    text: str = ""
    # Text of the element and all its descendants, in document order.
    content_text: str = ""

    def children(self, tag: str) -> List["Node"]:
        """Returns all direct children with the given tag, as a sequence."""
        return list(self.child_groups.get(tag, []))

    def first(self, tag: str) -> Optional["Node"]:
        """Returns the first direct child with the given tag, if any."""
        group = self.child_groups.get(tag)
        return group[0] if group else None

    def attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name)

    @property
    def is_empty(self) -> bool:
        """True for the empty placeholder: no attributes, no children, no text."""
        return not self.attributes and not self.child_groups and not self.text

    @property
    def text_content(self) -> str:
        return self.content_text


Node = Union[TextNode, ElementNode]

ElementNode.model_rebuild()


class ParsedTree(BaseModel):
    """The normalized structure of one recorded test document."""
    root: ElementNode

    def walk(self, *path: str) -> Optional[Node]:
        """Follows the first child of each tag in `path`, returning None on a dead end."""
        node: Optional[Node] = self.root
        for tag in path:
            if node is None:
                return None
            node = node.first(tag)
        return node
