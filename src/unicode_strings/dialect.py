from enum import StrEnum
from typing import Final
from typing import final

from pydantic import BaseModel
from pydantic import ConfigDict


@final
class Dialect(StrEnum):
    GENERAL = "general"
    JSON_SAFE = "json_safe"


@final
class EscapePolicy(BaseModel):
    """Which escape forms an encoder may emit besides mnemonics and `\\uXXXX`."""

    model_config = ConfigDict(frozen=True)

    allow_octal: bool  # `\N` / `\NN` for control characters below 0x20.
    allow_short_hex: bool  # `\xXX` for 0x80..0xff.
    allow_long_hex: bool  # `\UXXXXXXXX` for code points above 0xffff.
    escape_backslashes: bool = False  # `\\` instead of a bare backslash.

    @staticmethod
    def for_dialect(dialect: Dialect) -> "EscapePolicy":
        return _POLICIES[dialect]


_POLICIES: Final[dict[Dialect, EscapePolicy]] = {
    Dialect.GENERAL: EscapePolicy(allow_octal=True, allow_short_hex=True, allow_long_hex=True),
    Dialect.JSON_SAFE: EscapePolicy(allow_octal=False, allow_short_hex=False, allow_long_hex=False),
}

GENERAL_POLICY: Final = _POLICIES[Dialect.GENERAL]
JSON_SAFE_POLICY: Final = _POLICIES[Dialect.JSON_SAFE]
