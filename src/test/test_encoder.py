import string
from typing import Final

import pytest

from unicode_strings.dialect import Dialect
from unicode_strings.dialect import EscapePolicy
from unicode_strings.encoder import encode
from unicode_strings.encoder import escape
from unicode_strings.encoder import escape_char
from unicode_strings.encoder import escape_json_safe
from unicode_strings.encoder import escape_with_policy


@pytest.mark.parametrize(
    "code_point, expected",
    [
        (0x08, "\\b"),
        (0x0C, "\\f"),
        (0x0A, "\\n"),
        (0x0D, "\\r"),
        (0x09, "\\t"),
        (0x0B, "\\v"),
        (0x00, "\\0"),
        (0x01, "\\1"),
        (0x05, "\\5"),
        (0x1B, "\\33"),
        (0x1F, "\\37"),
        (0x20, " "),
        (0x41, "A"),
        (0x7F, "\x7f"),
        (0x80, "\\x80"),
        (0x85, "\\x85"),
        (0xFF, "\\xff"),
        (0x100, "\\u0100"),
        (0xC77C, "\\uc77c"),
        (0xFFFF, "\\uffff"),
        (0x10000, "\\U00010000"),
        (0x1F600, "\\U0001f600"),
        (0x10FFFF, "\\U0010ffff"),
    ],
)
def test_escape_picks_shortest_form(code_point: int, expected: str) -> None:
    assert escape(chr(code_point)) == expected


@pytest.mark.parametrize(
    "code_point, expected",
    [
        (0x0A, "\\n"),
        (0x08, "\\b"),
        (0x00, "\\u0000"),
        (0x1B, "\\u001b"),
        (0x7E, "~"),
        (0x80, "\\u0080"),
        (0x100, "\\u0100"),
        (0xFFFF, "\\uffff"),
        (0x10000, "\\ud800\\udc00"),
        (0x1F600, "\\ud83d\\ude00"),
    ],
)
def test_escape_json_safe_uses_mnemonics_and_four_digit_hex_only(code_point: int, expected: str) -> None:
    assert escape_json_safe(chr(code_point)) == expected


def test_printable_ascii_is_left_unchanged() -> None:
    printable: Final = "".join(chr(code_point) for code_point in range(0x20, 0x7F))
    assert escape(printable) == printable
    assert escape_json_safe(printable) == printable


def test_escape_json_safe_never_emits_octal_or_other_hex_widths() -> None:
    text: Final = "".join(chr(code_point) for code_point in range(0x20)) + "\x80\xff\u0100\U0001f600"
    escaped: Final = escape_json_safe(text)
    assert "\\x" not in escaped
    assert "\\U" not in escaped
    remainder = escaped
    for letter in "bfnrtv":
        remainder = remainder.replace(f"\\{letter}", "")
    assert all(chunk.startswith("u") for chunk in remainder.split("\\")[1:])


def test_escape_of_mixed_text() -> None:
    assert escape("Hi\nI'm\t\uce7c") == "Hi\\nI'm\\t\\uce7c"


def test_single_digit_octal_is_padded_before_a_digit() -> None:
    assert escape("\x01") == "\\1"
    assert escape("\x012") == "\\012"
    assert escape("\x018") == "\\018"
    assert escape("\x019") == "\\19"
    assert escape("\x01a") == "\\1a"
    assert escape("\x1b5") == "\\335"


def test_backslash_passes_through_by_default() -> None:
    assert escape("C:\\temp") == "C:\\temp"
    assert escape_json_safe("C:\\temp") == "C:\\temp"


def test_policy_can_escape_backslashes() -> None:
    policy: Final = EscapePolicy(allow_octal=True, allow_short_hex=True, allow_long_hex=True, escape_backslashes=True)
    assert escape_with_policy("C:\\new", policy) == "C:\\\\new"
    assert escape_char("\\", policy) == "\\\\"


def test_escape_char_respects_policy() -> None:
    policy: Final = EscapePolicy(allow_octal=False, allow_short_hex=True, allow_long_hex=False)
    assert escape_char("\x01", policy) == "\\x01"
    assert escape_char("\xe9", policy) == "\\xe9"
    assert escape_char("\U0001f600", policy) == "\\ud83d\\ude00"


def test_escape_of_empty_text() -> None:
    assert escape("") == ""
    assert escape_json_safe("") == ""


def test_escaped_output_is_ascii() -> None:
    text: Final = "".join(chr(code_point) for code_point in range(0, 0x3000, 7)) + string.printable
    assert escape(text).isascii()
    assert escape_json_safe(text).isascii()


@pytest.mark.parametrize(
    "dialect, expected",
    [
        (Dialect.GENERAL, "\\x80\\U00010000"),
        (Dialect.JSON_SAFE, "\\u0080\\ud800\\udc00"),
    ],
)
def test_encode_with_explicit_dialect(dialect: Dialect, expected: str) -> None:
    assert encode("\x80\U00010000", dialect) == expected
