import re
from typing import Final

from unicode_strings.escape_token import EscapeToken
from unicode_strings.escape_token_types import EscapeTokenType
from unicode_strings.source_location import SourceLocation

# Alternatives are tried in order, the first one that matches wins. The two-digit
# octal form accepts `8` as a digit.
ESCAPE_SEQUENCE_RE: Final = re.compile(
    r"\\(?:"
    r"(?P<mnemonic>[bfnrtv])"
    r"|(?P<octal>[0-8]{2}|[0-7])"
    r"|x(?P<short_hex>[0-9a-f]{2})"
    r"|u(?P<hex>[0-9a-f]{4})"
    r"|U(?P<long_hex>[0-9a-f]{8})"
    r"|(?P<literal>.)"
    r")",
    re.DOTALL,
)

_GROUP_TOKEN_TYPES: Final = {
    "mnemonic": EscapeTokenType.MNEMONIC,
    "octal": EscapeTokenType.OCTAL,
    "short_hex": EscapeTokenType.SHORT_HEX,
    "hex": EscapeTokenType.HEX,
    "long_hex": EscapeTokenType.LONG_HEX,
    "literal": EscapeTokenType.LITERAL,
}


def _create_token(source: str, match: re.Match[str]) -> EscapeToken:
    group_name: Final = match.lastgroup
    if group_name is None:
        raise AssertionError("Escape sequence matched without a named group. This should not happen.")
    return EscapeToken(
        type=_GROUP_TOKEN_TYPES[group_name],
        payload=match.group(group_name),
        source_location=SourceLocation(
            source=source,
            offset=match.start(),
            length=match.end() - match.start(),
        ),
    )


def tokenize(source: str) -> list[EscapeToken]:
    """Returns all escape sequences in `source`, in order and without overlaps.

    Text between the returned tokens is plain text. A backslash at the very end of
    `source` starts no token.
    """
    return [_create_token(source, match) for match in ESCAPE_SEQUENCE_RE.finditer(source)]
