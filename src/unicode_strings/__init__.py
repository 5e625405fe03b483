from unicode_strings.decoder import unescape
from unicode_strings.dialect import Dialect
from unicode_strings.dialect import EscapePolicy
from unicode_strings.encoder import encode
from unicode_strings.encoder import escape
from unicode_strings.encoder import escape_json_safe
from unicode_strings.encoder import escape_with_policy
from unicode_strings.tokenizer import tokenize

__all__ = [
    "Dialect",
    "EscapePolicy",
    "encode",
    "escape",
    "escape_json_safe",
    "escape_with_policy",
    "tokenize",
    "unescape",
]
