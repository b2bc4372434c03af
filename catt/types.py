# Shared value types for the Catt core.
# Coordinates are zero-based. ``character`` counts scanned characters since the
# last newline (one per source character, not per visual column).

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Position:
    line: int
    character: int

    def to_json(self) -> dict:
        return {"line": self.line, "character": self.character}


@dataclass(frozen=True)
class Range:
    start: Position
    end: Position

    def to_json(self) -> dict:
        return {"start": self.start.to_json(), "end": self.end.to_json()}


class TokenType(str, Enum):
    KEYWORD = "KEYWORD"
    IDENTIFIER = "IDENTIFIER"
    NUMBER = "NUMBER"
    STRING = "STRING"
    OPERATOR = "OPERATOR"
    PUNCTUATION = "PUNCTUATION"  # reserved, the lexer files brackets under OPERATOR
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str
    position: Position
    length: int

    @property
    def range(self) -> Range:
        # Tokens never span lines, so the end sits on the start line.
        start = self.position
        return Range(start=start, end=Position(line=start.line, character=start.character + self.length))

    def __repr__(self):
        return f"Token({self.type.value} {self.value!r} @{self.position.line}:{self.position.character})"
