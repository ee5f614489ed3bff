from __future__ import annotations

import logging
from typing import List

from generator.dom.nodes import Node, ParsedTree
from generator.errors import MissingRowsError, MissingUrlError

logger = logging.getLogger(__name__)


class RowExtractService:
    """
    Recovers the recorded base URL and the action rows from a ParsedTree.
    Both lookups follow a fixed path; any missing segment is fatal for the document.
    """

    URL_PATH = ("head", "link")
    ROWS_PATH = ("body", "table", "tbody")

    def __init__(self, tree: ParsedTree):
        self.tree = tree

    def extract_url(self) -> str:
        """Returns head > link[href]. The first <link> wins when there are several."""
        link = self.tree.walk(*self.URL_PATH)
        href = link.attribute("href") if link is not None else None
        if href is None:
            raise MissingUrlError()
        return href

    def extract_rows(self) -> List[Node]:
        """
        Returns body > table > tbody > tr as a sequence, whether the
        document holds one row or many.
        """
        tbody = self.tree.walk(*self.ROWS_PATH)
        rows = tbody.children("tr") if tbody is not None else []
        if not rows:
            raise MissingRowsError()
        logger.debug("Extracted %d row(s).", len(rows))
        return rows
