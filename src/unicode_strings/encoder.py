"""Backslash-escaping of arbitrary text into printable ASCII.

Each character is escaped on its own using the shortest form its dialect
allows:

    * ``\\b``, ``\\f``, ``\\n``, ``\\r``, ``\\t``, ``\\v``
    * ``\\N`` / ``\\NN``   - octal value of the remaining control characters below 0x20
    * ``\\xXX``           - 2-digit hex value for 0x80 <= value < 0x100
    * ``\\uXXXX``         - 4-digit hex value for 0x100 <= value < 0x10000
    * ``\\UXXXXXXXX``     - 8-digit hex value for value >= 0x10000

Printable ASCII (0x20 up to and including 0x7f) is passed through unchanged.
"""

from typing import Final
from typing import Optional

from unicode_strings.config import get_config
from unicode_strings.dialect import GENERAL_POLICY
from unicode_strings.dialect import JSON_SAFE_POLICY
from unicode_strings.dialect import Dialect
from unicode_strings.dialect import EscapePolicy
from unicode_strings.escape_mappings import MNEMONIC_ESCAPES_REVERSED
from unicode_strings.hex_formatting import to_octal
from unicode_strings.hex_formatting import zero_pad_hex

# Digits the decoder would read as the second digit of an octal escape.
_OCTAL_CONTINUATION_DIGITS: Final = frozenset("012345678")


def _to_surrogate_pair(code_point: int) -> tuple[int, int]:
    offset: Final = code_point - 0x10000
    return 0xD800 + (offset >> 10), 0xDC00 + (offset & 0x3FF)


def escape_char(char: str, policy: EscapePolicy = GENERAL_POLICY) -> str:
    mnemonic: Final = MNEMONIC_ESCAPES_REVERSED.get(char)
    if mnemonic is not None:
        return f"\\{mnemonic}"
    code_point: Final = ord(char)
    if code_point < 0x20 and policy.allow_octal:
        return f"\\{to_octal(code_point)}"
    if char == "\\" and policy.escape_backslashes:
        return "\\\\"
    if 0x20 <= code_point < 0x80:
        return char
    if code_point < 0x100 and policy.allow_short_hex:
        return f"\\x{zero_pad_hex(code_point, 2)}"
    if code_point < 0x10000:
        return f"\\u{zero_pad_hex(code_point, 4)}"
    if policy.allow_long_hex:
        return f"\\U{zero_pad_hex(code_point, 8)}"
    high, low = _to_surrogate_pair(code_point)
    return f"\\u{zero_pad_hex(high, 4)}\\u{zero_pad_hex(low, 4)}"


def escape_with_policy(text: str, policy: EscapePolicy) -> str:
    parts: Final[list[str]] = []
    for index, char in enumerate(text):
        escaped = escape_char(char, policy)
        is_single_digit_octal = len(escaped) == 2 and escaped[1].isdigit()
        if is_single_digit_octal and text[index + 1 : index + 2] in _OCTAL_CONTINUATION_DIGITS:
            # Keep a following literal digit from being read as part of this escape.
            escaped = f"\\0{escaped[1]}"
        parts.append(escaped)
    return "".join(parts)


def escape(text: str) -> str:
    return escape_with_policy(text, GENERAL_POLICY)


def escape_json_safe(text: str) -> str:
    """Escapes `text` using only mnemonic and `\\uXXXX` escapes, so the result is valid inside a JSON string."""
    return escape_with_policy(text, JSON_SAFE_POLICY)


def encode(text: str, dialect: Optional[Dialect] = None) -> str:
    if dialect is None:
        dialect = get_config().default_dialect
    return escape_with_policy(text, EscapePolicy.for_dialect(dialect))
