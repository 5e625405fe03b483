from typing import NamedTuple
from typing import final


@final
class SourceLocation(NamedTuple):
    source: str
    offset: int
    length: int

    @property
    def lexeme(self) -> str:
        if self.offset >= len(self.source):
            return ""
        return self.source[self.offset : self.offset + self.length]

    @property
    def end(self) -> int:
        return self.offset + self.length
