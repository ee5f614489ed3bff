from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from generator.dom.nodes import ElementNode, Node, ParsedTree, TextNode
from generator.errors import InputReadError

logger = logging.getLogger(__name__)

# Prologue strings written by the recorder that only get in the way of parsing.
EXCLUDING_STRINGS = (
    '<?xml version="1.0" encoding="UTF-8"?>',
    '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Strict//EN" '
    '"http://www.w3.org/TR/xhtml1/DTD/xhtml1-strict.dtd">',
)

# Line breaks inside cells become this two character token, not a real newline.
LINE_BREAK_TOKEN = "\\n"


class DocumentNormalizeService:
    """
    Turns a recorded test document into a ParsedTree.

    The markup is loosely valid HTML as exported by the recorder. Nothing here
    raises on malformed markup; missing structure is reported later by the
    RowExtractService.
    """

    def read(self, path: Path) -> str:
        """Reads a document from disk. Undecodable bytes are replaced, not fatal."""
        try:
            raw = Path(path).read_bytes()
        except OSError as e:
            logger.error("Could not read %s: %s", path, e)
            raise InputReadError(path) from e
        return raw.decode("utf-8", errors="replace")

    def normalize(self, html: str) -> ParsedTree:
        markup = self._to_entity_safe(html)
        markup = self._strip_boilerplate(markup)
        markup = self._to_strict_markup(markup)
        markup = markup.replace("<br/>", LINE_BREAK_TOKEN)

        soup = self._soup(markup)
        root = soup.find("html")
        if not isinstance(root, Tag):
            logger.debug("No <html> element found; using the document itself as root.")
            root = soup
        return ParsedTree(root=self._build_element(root, tag_name="html"))

    # -------- Markup cleanup --------

    @staticmethod
    def _to_entity_safe(html: str) -> str:
        """Transcodes every non-ASCII character to a numeric character reference."""
        html = html.replace("\ufeff", "")
        return html.encode("ascii", errors="xmlcharrefreplace").decode("ascii")

    @staticmethod
    def _strip_boilerplate(html: str) -> str:
        for excluded in EXCLUDING_STRINGS:
            html = html.replace(excluded, "")
        return html

    def _to_strict_markup(self, html: str) -> str:
        """Permissive parse, then serialize with every element closed (void tags as <x/>)."""
        return str(self._soup(html))

    @staticmethod
    def _soup(markup: str) -> BeautifulSoup:
        # Keep attributes such as class as their raw string.
        return BeautifulSoup(markup, "html.parser", multi_valued_attributes=None)

    # -------- Tree flattening --------

    def _build(self, tag: Tag) -> Node:
        if not tag.attrs and not tag.find(True, recursive=False):
            text = self._own_text(tag)
            if text.strip():
                return TextNode(tag=tag.name, text=text)
            return ElementNode(tag=tag.name)
        return self._build_element(tag)

    def _build_element(self, tag: Tag, tag_name: str = "") -> ElementNode:
        groups: Dict[str, List[Node]] = {}
        for child in tag.children:
            if isinstance(child, Tag):
                groups.setdefault(child.name, []).append(self._build(child))

        text = self._own_text(tag)
        return ElementNode(
            tag=tag_name or tag.name,
            attributes={str(k): str(v) for k, v in tag.attrs.items()},
            child_groups=groups,
            text=text if text.strip() else "",
            content_text=self._all_text(tag),
        )

    @staticmethod
    def _is_text(node) -> bool:
        """Plain text only; comments, doctypes and the like are skipped."""
        return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)

    def _own_text(self, tag: Tag) -> str:
        return "".join(str(child) for child in tag.children if self._is_text(child))

    def _all_text(self, tag: Tag) -> str:
        return "".join(str(node) for node in tag.descendants if self._is_text(node))
