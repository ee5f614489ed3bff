from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence

from generator.dom.nodes import ElementNode, Node, TextNode
from generator.model import ActionRow, Command

logger = logging.getLogger(__name__)

DEPRECATED_XPATH_COMMENT = "// TODO X Path is deprecated."

# First matching prefix wins.
LOCATOR_PREFIXES = (
    ("id=", "#"),
    ("class=", "."),
    ("css=", ""),
)

VALUE_LABEL_PREFIX = "label="

CELLS_PER_ROW = 3


def format_target(target: Any) -> str:
    """
    Rewrites a recorded locator into Codeception syntax:
    id=foo -> #foo, class=foo -> .foo, css=foo -> foo. Anything else,
    XPath included, is returned unchanged. Single quotes are escaped first.
    """
    if not isinstance(target, str) or not target:
        return ""

    target = target.replace("'", "\\'")
    for prefix, replacement in LOCATOR_PREFIXES:
        if target.startswith(prefix):
            return replacement + target[len(prefix):]
    return target


def format_value(value: Any) -> str:
    """Collapses the empty placeholder to "" and strips a leading 'label='."""
    if value is None or (isinstance(value, (list, tuple, dict)) and not value):
        return ""
    if isinstance(value, ElementNode) and value.is_empty:
        return ""

    value = str(value)
    if value.startswith(VALUE_LABEL_PREFIX):
        return value[len(VALUE_LABEL_PREFIX):]
    return value


def is_deprecated_locator(target: str) -> bool:
    """XPath style locators (containing '/' or '>') need manual follow-up."""
    return ">" in target or "/" in target


def cell_text(cell: Node) -> Optional[str]:
    """Text of a table cell, or None for the empty placeholder."""
    if isinstance(cell, TextNode):
        return cell.text
    if cell.is_empty:
        return None
    return cell.text_content


# -------- Emission strategies --------

def _emit_open(row: ActionRow) -> List[str]:
    return [f"$I->amOnPage('{row.target}');"]


def _emit_click(row: ActionRow) -> List[str]:
    return [f"$I->click('{row.target}');"]


def _emit_type(row: ActionRow) -> List[str]:
    return [f"$I->fillField('{row.target}', '{row.value}');"]


def _emit_select(row: ActionRow) -> List[str]:
    return [f"$I->selectOption('{row.target}', '{row.value}');"]


def _emit_click_and_wait(row: ActionRow) -> List[str]:
    return [
        "// TODO Please implement \"waiting\", e.g. $I->waitForJS('return $.active == 0;', 60);",
        "// $I->waitForText('foo', 30);",
        f"$I->click('{row.target}');",
    ]


def _emit_nothing(row: ActionRow) -> List[str]:
    return []


EMITTERS: Dict[Command, Callable[[ActionRow], List[str]]] = {
    Command.OPEN: _emit_open,
    Command.CLICK: _emit_click,
    Command.TYPE: _emit_type,
    Command.SELECT: _emit_select,
    Command.CLICK_AND_WAIT: _emit_click_and_wait,
    Command.UNKNOWN: _emit_nothing,
}


class CommandTranslateService:
    """
    Maps recorded rows to Codeception statements.
    Statements are returned without indentation; the CestTemplate owns layout.
    """

    def to_action_row(self, row: Node) -> Optional[ActionRow]:
        """
        Builds an ActionRow from the first three <td> cells of a <tr>.
        Returns None for rows that cannot be translated.
        """
        cells = row.children("td")
        if len(cells) < CELLS_PER_ROW:
            return None

        raw_command = cell_text(cells[0]) or ""
        command = Command.parse(raw_command)
        raw_target = cell_text(cells[1])

        if command is Command.OPEN:
            target = raw_target or ""
        else:
            target = format_target(raw_target)

        return ActionRow(
            command=command,
            raw_command=raw_command,
            target=target,
            value=format_value(cell_text(cells[2])),
        )

    def translate_row(self, row: ActionRow) -> List[str]:
        lines: List[str] = []
        if row.command is not Command.OPEN and is_deprecated_locator(row.target):
            lines.append(DEPRECATED_XPATH_COMMENT)
        if row.command is Command.UNKNOWN:
            logger.debug("Ignoring unsupported command '%s'.", row.raw_command)
        lines.extend(EMITTERS[row.command](row))
        return lines

    def translate(self, rows: Sequence[Node]) -> List[str]:
        statements: List[str] = []
        for index, row in enumerate(rows):
            action = self.to_action_row(row)
            if action is None:
                logger.debug("Skipping row %d: fewer than %d cells.", index, CELLS_PER_ROW)
                continue
            statements.extend(self.translate_row(action))
        return statements


def count_statements(lines: Sequence[str]) -> int:
    """Counts the non-comment lines."""
    return sum(1 for line in lines if not line.lstrip().startswith("//"))
