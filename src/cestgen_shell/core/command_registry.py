# src/cestgen_shell/core/command_registry.py
import logging
from typing import Callable, Dict

from cestgen_shell.core.handlers.csv_handler import csv_help_text, handle_csv
from cestgen_shell.core.handlers.generate_handler import generate_help_text, handle_generate

logger = logging.getLogger(__name__)

CommandRegistry: Dict[str, Callable[..., int]] = {}
COMMAND_HELP_TEXTS: Dict[str, str] = {}


def register_command(name: str, handler: Callable[..., int], help_text: str = "") -> None:
    """Adds a command, its handler function and help text to the registry."""
    CommandRegistry[name] = handler
    COMMAND_HELP_TEXTS[name] = help_text
    logger.debug("Registered command '%s'", name)


def register_all_commands() -> None:
    if CommandRegistry:
        return
    register_command("generate", handle_generate, generate_help_text)
    register_command("csv", handle_csv, csv_help_text)


def help_text() -> str:
    register_all_commands()
    lines = ["Usage: cestgen <command> [options]", "", "Commands:"]
    lines.extend(COMMAND_HELP_TEXTS[name] for name in sorted(COMMAND_HELP_TEXTS))
    return "\n".join(lines)
