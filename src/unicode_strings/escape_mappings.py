"""Single-letter mnemonic escapes and their control characters."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

MNEMONIC_ESCAPES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "b": "\x08",
        "f": "\x0c",
        "n": "\x0a",
        "r": "\x0d",
        "t": "\x09",
        "v": "\x0b",
    }
)

# Control character -> mnemonic letter.
MNEMONIC_ESCAPES_REVERSED: Final[Mapping[str, str]] = MappingProxyType(
    {char: letter for letter, char in MNEMONIC_ESCAPES.items()}
)
