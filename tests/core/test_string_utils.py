# tests/core/test_string_utils.py
import pytest

from cestgen_shell.core.utils.string_utils import camel_case, is_valid_file_name


@pytest.mark.parametrize("raw, expected", [
    ("login_test", "LoginTest"),
    ("login-test", "LoginTest"),
    ("checkout", "Checkout"),
    ("already_CamelCase", "AlreadyCamelCase"),
    ("user_2fa_flow", "User2faFlow"),
    ("double__underscore", "DoubleUnderscore"),
    ("", ""),
    (None, ""),
    (42, ""),
])
def test_camel_case(raw, expected):
    assert camel_case(raw) == expected


def test_is_valid_file_name_per_extension():
    assert is_valid_file_name("users.csv", "csv")
    assert not is_valid_file_name("users.html", "csv")
    assert not is_valid_file_name("users.csv", "html")
    assert not is_valid_file_name(None, "csv")
