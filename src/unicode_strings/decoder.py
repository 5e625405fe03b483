import logging
from typing import Final
from typing import Optional

from unicode_strings.escape_mappings import MNEMONIC_ESCAPES
from unicode_strings.escape_token import EscapeToken
from unicode_strings.escape_token_types import EscapeTokenType
from unicode_strings.hex_formatting import parse_lenient_octal
from unicode_strings.tokenizer import tokenize

logger: Final = logging.getLogger(__name__)

_MAX_CODE_POINT: Final = 0x10FFFF


def _code_point_to_char(code_point: int) -> str:
    if code_point > _MAX_CODE_POINT:
        logger.debug(f"Code point {code_point:#x} is out of range, keeping its lower 16 bits.")
        code_point &= 0xFFFF
    return chr(code_point)


def decode_token(token: EscapeToken) -> str:
    match token.type:
        case EscapeTokenType.MNEMONIC:
            return MNEMONIC_ESCAPES[token.payload]
        case EscapeTokenType.OCTAL:
            return chr(parse_lenient_octal(token.payload))
        case EscapeTokenType.SHORT_HEX | EscapeTokenType.HEX | EscapeTokenType.LONG_HEX:
            return _code_point_to_char(int(token.payload, 16))
        case EscapeTokenType.LITERAL:
            if token.payload != "\\":
                logger.debug(f"Unrecognized escape sequence '{token.source_location.lexeme}' decoded as literal.")
            return token.payload


def _surrogate_pair_value(high: EscapeToken, low: Optional[EscapeToken]) -> Optional[int]:
    if low is None or high.type != EscapeTokenType.HEX or low.type != EscapeTokenType.HEX:
        return None
    if high.source_location.end != low.source_location.offset:
        return None
    high_value: Final = int(high.payload, 16)
    low_value: Final = int(low.payload, 16)
    if not (0xD800 <= high_value < 0xDC00 and 0xDC00 <= low_value < 0xE000):
        return None
    return 0x10000 + ((high_value - 0xD800) << 10) + (low_value - 0xDC00)


def unescape(text: str) -> str:
    """Replaces every escape sequence in `text` by the character it stands for.

    Understands both the general and the JSON-safe dialect. A `\\uXXXX` escape of a
    high surrogate directly followed by one of a low surrogate decodes to a single
    code point.
    """
    tokens: Final = tokenize(text)
    parts: Final[list[str]] = []
    offset = 0
    index = 0
    while index < len(tokens):
        token = tokens[index]
        parts.append(text[offset : token.source_location.offset])
        next_token = tokens[index + 1] if index + 1 < len(tokens) else None
        combined = _surrogate_pair_value(token, next_token)
        if combined is not None and next_token is not None:
            parts.append(chr(combined))
            offset = next_token.source_location.end
            index += 2
            continue
        parts.append(decode_token(token))
        offset = token.source_location.end
        index += 1
    if text.endswith("\\") and offset < len(text):
        logger.debug("Unterminated trailing backslash kept as a literal backslash.")
    parts.append(text[offset:])
    return "".join(parts)
