from typing import NamedTuple
from typing import final

from unicode_strings.escape_token_types import EscapeTokenType
from unicode_strings.source_location import SourceLocation


@final
class EscapeToken(NamedTuple):
    type: EscapeTokenType
    payload: str  # The escape without its backslash and `x`/`u`/`U` prefix.
    source_location: SourceLocation
