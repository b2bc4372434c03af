"""
  Catt Lexer

- Single forward pass over the document text, one character at a time.
- Never raises: anything it cannot classify becomes an UNKNOWN token, and the
  validator reports it.
- Positions: ``character`` counts UTF-16 code units, as LSP clients do, so a
  character outside the BMP advances it by two. A newline outside a string
  resets it to 0 and bumps ``line``.

   n.b. A string literal containing a newline is scanned as one token and the
   newline inside it is not counted as a line break, so every later position on
   that logical line is off. This matches the editor extension's behaviour and
   is left as is.
"""

from __future__ import annotations

from typing import List

from catt.types import Position, Token, TokenType


KEYWORDS = frozenset({
    "var",
    "return",
    "if",
    "else",
    "while",
    "for",
    "function",
    "true",
    "false",
    "null",
    "meow",
    "meowln",
})

# Single- and two-character operators share one set. Lookahead tries
# ``char + next_char`` first and falls back to ``char``; the only two-character
# members are ==, !=, && and ||.
OPERATORS = frozenset({
    "+", "-", "*", "/", "%",
    "==", "!=", "<", ">",
    "&&", "||", "!", "=",
    "[", "]", "(", ")", "}", "{",
    ";",
})

_IDENT_START = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_")
_DIGITS = frozenset("0123456789")

# The ECMAScript \s class. str.isspace() disagrees on U+FEFF, U+0085 and U+001C..U+001F.
WHITESPACE = frozenset(
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def is_whitespace(ch: str) -> bool:
    return ch in WHITESPACE


def is_digit(ch: str) -> bool:
    # ASCII only: str.isdigit() would accept superscripts and other scripts.
    return ch in _DIGITS


def is_identifier_start(ch: str) -> bool:
    return ch in _IDENT_START


def is_identifier_continue(ch: str) -> bool:
    return ch in _IDENT_START or ch in _DIGITS


def code_units(ch: str) -> int:
    """UTF-16 code units taken by ``ch``; LSP positions count these."""
    return 2 if ord(ch) > 0xFFFF else 1


def utf16_length(text: str) -> int:
    return sum(code_units(ch) for ch in text)


def scan(text: str) -> List[Token]:
    """Tokenize ``text``. Total: returns a (possibly empty) list for any input."""
    tokens: List[Token] = []
    pos = 0
    n = len(text)
    line = 0
    character = 0

    def emit(kind: TokenType, start: int, start_char: int) -> None:
        nonlocal character
        value = text[start:pos]
        length = utf16_length(value)
        character += length
        tokens.append(Token(kind, value, Position(line, start_char), length))

    while pos < n:
        ch = text[pos]

        if is_whitespace(ch):
            if ch == "\n":
                line += 1
                character = 0
            else:
                character += 1
            pos += 1
            continue

        start, start_char = pos, character

        if is_digit(ch):
            while pos < n and is_digit(text[pos]):
                pos += 1
            emit(TokenType.NUMBER, start, start_char)
            continue

        if is_identifier_start(ch):
            while pos < n and is_identifier_continue(text[pos]):
                pos += 1
            word = text[start:pos]
            emit(TokenType.KEYWORD if word in KEYWORDS else TokenType.IDENTIFIER, start, start_char)
            continue

        if ch == '"':
            # Through the closing quote, or to end of input when unterminated.
            pos += 1
            while pos < n and text[pos] != '"':
                pos += 1
            if pos < n:
                pos += 1
            emit(TokenType.STRING, start, start_char)
            continue

        # Longest match first: "&" and "|" are only operators when doubled.
        if pos + 1 < n and text[pos:pos + 2] in OPERATORS:
            pos += 2
            emit(TokenType.OPERATOR, start, start_char)
            continue

        if ch in OPERATORS:
            pos += 1
            emit(TokenType.OPERATOR, start, start_char)
            continue

        pos += 1
        emit(TokenType.UNKNOWN, start, start_char)

    return tokens
