"""Catt Language Server package.

This package provides:
- A pygls-based Language Server for the Catt language.
- An in-memory document store plus the cursor helpers used by completion and hover.

Note: The server never evaluates user buffers; diagnostics come from the static
lexer and validator in ``catt``.
"""

__version__ = "0.1.0"

__all__ = [
    "server",
    "documents",
    "features",
    "protocol",
    "config",
]
