from __future__ import annotations

"""
In-memory document store for the language server.

Documents are keyed by URI and always hold the full current text (the server
asks clients for full sync). Also holds the small text helpers the editor
features use to look at the line around the cursor.
"""

import re
from dataclasses import dataclass
from typing import Dict, Optional

from catt.lexer import code_units, utf16_length
from catt.types import Position, Range

# Word characters as seen by completion and hover.
WORD_RE = re.compile(r"\w+")
PREFIX_RE = re.compile(r"\w*$")


@dataclass
class Word:
    text: str
    range: Range


class DocumentStore:
    def __init__(self):
        self._texts: Dict[str, str] = {}

    def open(self, uri: str, text: str) -> None:
        self._texts[uri] = text

    def update(self, uri: str, text: str) -> None:
        self._texts[uri] = text

    def close(self, uri: str) -> None:
        self._texts.pop(uri, None)

    def get(self, uri: str) -> Optional[str]:
        return self._texts.get(uri)

    def __contains__(self, uri: str) -> bool:
        return uri in self._texts


def line_at(text: str, line: int) -> Optional[str]:
    lines = text.split("\n")
    if line < 0 or line >= len(lines):
        return None
    return lines[line]


def index_of(line: str, character: int) -> int:
    """String index for an LSP ``character`` (UTF-16 code units) on ``line``."""
    units = 0
    for idx, ch in enumerate(line):
        if units >= character:
            return idx
        units += code_units(ch)
    return len(line)


def line_prefix(text: str, pos: Position) -> str:
    # Text from the start of the line up to the cursor
    line = line_at(text, pos.line)
    if line is None:
        return ""
    return line[: index_of(line, pos.character)]


def current_prefix(text: str, pos: Position) -> str:
    """Trailing word characters before the cursor ("" right after a non-word char)."""
    return PREFIX_RE.search(line_prefix(text, pos)).group(0)


def word_under_cursor(text: str, pos: Position) -> Optional[Word]:
    line = line_at(text, pos.line)
    if line is None:
        return None
    cursor = index_of(line, pos.character)
    for m in WORD_RE.finditer(line):
        # cursor may sit just after the last character of the word
        if m.start() <= cursor <= m.end():
            start = utf16_length(line[: m.start()])
            return Word(
                text=m.group(0),
                range=Range(
                    start=Position(line=pos.line, character=start),
                    end=Position(line=pos.line, character=start + utf16_length(m.group(0))),
                ),
            )
    return None
