"""Completion and hover. Both work on the raw text around the cursor only."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from lsprotocol.types import CompletionItem, CompletionItemKind, CompletionList, Hover, MarkupContent, MarkupKind

from catt.types import Position
from catt_lsp.documents import current_prefix, word_under_cursor
from catt_lsp.protocol import to_lsp_range

logger = logging.getLogger(__name__)

COMPLETION_WORDS: List[str] = ["var", "false", "true", "if", "else", "while", "for", "fn", "return", "meow", "meowln"]

KEYWORD_DOCS: Dict[str, str] = {
    "var": "`var name = value;` declares a variable. It is visible for the rest of the document.",
    "if": "`if (condition) { ... }` runs the block when the condition holds.",
    "else": "`else { ... }` or `else if (condition) { ... }` must follow an open `if` block.",
    "while": "`while (condition) { ... }` repeats the block while the condition holds.",
    "for": "`for (...) { ... }` loop.",
    "meow": "`meow(value)` prints a value.",
    "meowln": "`meowln(value)` prints a value followed by a newline.",
    "return": "`return value;` leaves the current function.",
    "function": "Declares a function.",
    "true": "Boolean literal.",
    "false": "Boolean literal.",
    "null": "The null literal.",
}


def complete(text: str, pos: Position) -> CompletionList:
    prefix = current_prefix(text, pos)
    logger.debug("completion prefix %r at %d:%d", prefix, pos.line, pos.character)
    items = [
        CompletionItem(label=word, kind=CompletionItemKind.Keyword)
        for word in COMPLETION_WORDS
        if word.startswith(prefix)
    ]
    # Incomplete: the client re-queries as the prefix grows.
    return CompletionList(is_incomplete=True, items=items)


def hover(text: str, pos: Position) -> Optional[Hover]:
    word = word_under_cursor(text, pos)
    if word is None:
        return None
    doc = KEYWORD_DOCS.get(word.text, f"`{word.text}`")
    return Hover(
        contents=MarkupContent(kind=MarkupKind.Markdown, value=doc),
        range=to_lsp_range(word.range),
    )
