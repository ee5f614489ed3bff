# src/cestgen_shell/core/utils/string_utils.py
import re
from typing import Any, Pattern

_WORD_SEPARATORS = re.compile(r"[_\-]")


def camel_case(value: Any) -> str:
    """
    Converts 'login_test' or 'login-test' into 'LoginTest'.
    Only the first letter of every word is upper-cased; the rest is kept as-is.
    """
    if not isinstance(value, str) or not value:
        return ""

    words = _WORD_SEPARATORS.sub(" ", value).split(" ")
    return "".join(word[:1].upper() + word[1:] for word in words)


def file_name_pattern(extension: str) -> Pattern[str]:
    """
    Builds the restrictive file name pattern used for every input file:
    a leading letter, then letters, digits or underscores, then the extension.
    Guards against directory traversal and NULL byte injection.
    """
    return re.compile(r"[A-Za-z][A-Za-z0-9_]+\." + re.escape(extension))


def is_valid_file_name(file_name: str, extension: str) -> bool:
    """Returns True if the bare file name fully matches the pattern for `extension`."""
    if not isinstance(file_name, str):
        return False
    return file_name_pattern(extension).fullmatch(file_name) is not None
