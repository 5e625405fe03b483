from enum import Enum
from enum import auto
from typing import final


@final
class EscapeTokenType(Enum):
    MNEMONIC = auto()  # \b \f \n \r \t \v
    OCTAL = auto()  # \N or \NN
    SHORT_HEX = auto()  # \xXX
    HEX = auto()  # \uXXXX
    LONG_HEX = auto()  # \UXXXXXXXX
    LITERAL = auto()  # Backslash followed by any other character.
