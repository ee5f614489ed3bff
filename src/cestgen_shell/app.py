from __future__ import annotations

import logging
import sys
from typing import List, Optional

from cestgen_shell.core.command_registry import CommandRegistry, help_text, register_all_commands
from cestgen_shell.core.managers.config_manager import config_manager
from cestgen_shell.core.utils.configure_logging import configure_logger

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """Entrypoint for the `cestgen` command."""
    configure_logger(config_manager.get_nested("debug.level", "INFO"))
    register_all_commands()

    args = list(sys.argv[1:] if argv is None else argv)
    if not args or args[0] in ("-h", "--help", "help"):
        print(help_text())
        return 0

    name, rest = args[0], args[1:]
    handler = CommandRegistry.get(name)
    if handler is None:
        print(f"Unknown command: {name}")
        print(help_text())
        return 1

    logger.debug("Dispatching '%s' with %s", name, rest)
    return handler(rest)


if __name__ == "__main__":
    sys.exit(main())
