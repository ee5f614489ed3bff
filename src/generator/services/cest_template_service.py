from __future__ import annotations

from typing import Sequence

CEST_TEMPLATE = """<?php

class {{outputClassName}}
{
    // TODO Please rename the following function name.
    public function xxxTest(\\AcceptanceTester $I)
    {
{{testCode}}
    }
}"""

STATEMENT_INDENT = " " * 8


class CestTemplate:
    """Renders a Cest class around an ordered list of statements."""

    def __init__(self, template: str = CEST_TEMPLATE, indent: str = STATEMENT_INDENT):
        self.template = template
        self.indent = indent

    def render_body(self, statements: Sequence[str]) -> str:
        return "\n".join(self.indent + statement for statement in statements)

    def render(self, class_name: str, statements: Sequence[str]) -> str:
        result = self.template.replace("{{outputClassName}}", class_name)
        return result.replace("{{testCode}}", self.render_body(statements))
