"""
Heuristic syntax and semantic checks over a Catt token list.

This is not a parser. One forward pass walks the tokens with a cursor and
tracks two pieces of state, both created fresh for every call:

- declared variables: a flat, unscoped set of names from ``var`` declarations.
  A name is visible from its declaration to the end of the document, blocks
  do not scope it.
- a block stack: one ``BlockContext`` per open ``if``/``else``/``while``/``for``
  body, counting nested braces until the body's matching ``}``.

Conditions and call arguments are only checked for balanced parentheses;
their contents are skipped. Every branch advances the cursor, so the pass
always reaches the end of the token list in linear time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Set

from catt.diagnostics import Diagnostic, create_error
from catt.types import Token, TokenType


@dataclass
class BlockContext:
    is_if: bool
    start_token: Token
    start_index: int  # cursor index of the opening "{"
    brace_count: int = 1


class Validator:
    """One validation pass. Use ``validate()`` rather than reusing instances."""

    def __init__(self, tokens: Sequence[Token]):
        self.tokens = tokens
        self.current = 0
        self.diagnostics: List[Diagnostic] = []
        self.declared_variables: Set[str] = set()
        self.block_stack: List[BlockContext] = []
        self._keyword_handlers: Dict[str, Callable[[Token], None]] = {
            "var": self._var_declaration,
            "meow": self._print_call,
            "meowln": self._print_call,
            "if": self._control_statement,
            "while": self._control_statement,
            "for": self._control_statement,
            "else": self._else_statement,
        }

    def run(self) -> List[Diagnostic]:
        tokens = self.tokens
        while self.current < len(tokens):
            token = tokens[self.current]

            if token.value == "}":
                self._close_brace()
            elif token.value == "{":
                self._open_brace()
            elif token.type is TokenType.UNKNOWN:
                self._error(token, f"Unexpected character: {token.value}")
                self.current += 1
            elif token.type is TokenType.KEYWORD:
                handler = self._keyword_handlers.get(token.value)
                if handler is None:
                    self.current += 1
                else:
                    handler(token)
            else:
                if token.type is TokenType.IDENTIFIER and token.value not in self.declared_variables:
                    self._error(token, f'Undefined variable "{token.value}"')
                self.current += 1

        for block in self.block_stack:
            self._error(block.start_token, f"Unclosed block starting at position {block.start_index}")

        return self.diagnostics

    # --- helpers ---

    def _error(self, token: Token, message: str) -> None:
        self.diagnostics.append(create_error(token, message))

    def _peek(self, offset: int = 0) -> Optional[Token]:
        idx = self.current + offset
        if idx < len(self.tokens):
            return self.tokens[idx]
        return None

    def _skip_parens(self) -> bool:
        """Consume from the "(" under the cursor through its matching ")".

        Returns False when the input ends first; the cursor is then at the end.
        """
        tokens = self.tokens
        depth = 1
        self.current += 1
        while self.current < len(tokens) and depth > 0:
            value = tokens[self.current].value
            if value == "(":
                depth += 1
            elif value == ")":
                depth -= 1
            self.current += 1
        return depth == 0

    def _open_block(self, keyword: Token, is_if: bool, what: str) -> None:
        brace = self._peek()
        if brace is not None and brace.value == "{":
            self.block_stack.append(BlockContext(is_if=is_if, start_token=keyword, start_index=self.current))
            self.current += 1
        else:
            self._error(brace or keyword, f'Expected block starting with "{{" for {what}')

    # --- braces ---

    def _close_brace(self) -> None:
        # A stray "}" with nothing open is ignored.
        if self.block_stack:
            block = self.block_stack[-1]
            block.brace_count -= 1
            if block.brace_count == 0:
                self.block_stack.pop()
        self.current += 1

    def _open_brace(self) -> None:
        if self.block_stack and self.block_stack[-1].start_index != self.current:
            self.block_stack[-1].brace_count += 1
        self.current += 1

    # --- keywords ---

    def _var_declaration(self, token: Token) -> None:
        name = self._peek(1)
        if name is None or name.type is not TokenType.IDENTIFIER:
            self._error(token, "var keyword must be followed by an identifier")
            self.current += 1
            return

        equals = self._peek(2)
        if equals is None or equals.value != "=":
            self._error(name, "var declaration requires initialization with '='")
            self.current += 2
            return

        # Registered before the initializer is read, so `var x = x;` is accepted.
        self.declared_variables.add(name.value)
        self.current += 3

        tokens = self.tokens
        while self.current < len(tokens) and tokens[self.current].value != ";":
            tok = tokens[self.current]
            if tok.type is TokenType.IDENTIFIER and tok.value not in self.declared_variables:
                self._error(tok, f'Undefined variable "{tok.value}" in initialization')
            self.current += 1

        if self.current >= len(tokens):
            self._error(tokens[self.current - 1], "var declaration must end with semicolon")
        else:
            self.current += 1

    def _print_call(self, token: Token) -> None:
        kw = token.value
        paren = self._peek(1)
        if paren is None or paren.value != "(":
            self._error(token, f'Invalid {kw} call. Expected "(" after "{kw}"')
            self.current += 1
            return

        self.current += 1
        if not self._skip_parens():
            self._error(token, f"Unclosed parenthesis in {kw} call")

    def _control_statement(self, token: Token) -> None:
        kw = token.value
        paren = self._peek(1)
        if paren is None or paren.value != "(":
            self._error(token, f'Invalid {kw} statement. Expected "(" after "{kw}"')
            self.current += 1
            return

        self.current += 1
        if not self._skip_parens():
            self._error(token, f"Unclosed parenthesis in {kw} condition")
            return

        self._open_block(token, is_if=(kw == "if"), what=f"{kw} statement")

    def _else_statement(self, token: Token) -> None:
        # Any open if block will do, not only the innermost one.
        if not any(block.is_if for block in self.block_stack):
            self._error(token, "else statement without preceding if statement")
            self.current += 1
            return

        self.current += 1
        nxt = self._peek()
        if nxt is not None and nxt.value == "if":
            self.current += 1
            paren = self._peek()
            if paren is None or paren.value != "(":
                self._error(self.tokens[self.current - 1], 'Invalid else if statement. Expected "(" after "if"')
                return
            if not self._skip_parens():
                self._error(self.tokens[self.current - 1], "Unclosed parenthesis in else if condition")
                return

        self._open_block(token, is_if=False, what="else statement")


def validate(tokens: Sequence[Token]) -> List[Diagnostic]:
    """Run one validation pass over ``tokens`` and return its diagnostics."""
    return Validator(tokens).run()
