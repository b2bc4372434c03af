from __future__ import annotations
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional


# Defaults
_DEFAULT_LOG_FILE = Path(tempfile.gettempdir()) / 'catt-lsp.log'
_DEFAULT_LOG_LEVEL = 'INFO'
_DEFAULT_HOST = '127.0.0.1'
_DEFAULT_PORT = 2087

# A log file of "-" sends records to stderr (stdout carries the protocol).
STDERR = '-'


def value_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def get_log_file() -> Optional[Path]:
    raw = value_from_env('CATT_LSP_LOG_FILE', str(_DEFAULT_LOG_FILE))
    return None if raw == STDERR else Path(raw)


def parse_log_level(raw: str) -> int:
    level = logging.getLevelName(raw.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {raw!r}")
    return level


def get_log_level() -> int:
    return parse_log_level(value_from_env('CATT_LSP_LOG_LEVEL', _DEFAULT_LOG_LEVEL))


def get_host() -> str:
    return value_from_env('CATT_LSP_HOST', _DEFAULT_HOST)


def parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise ValueError(f"Port must be an integer, got {raw!r}") from None
    if not 0 < port < 65536:
        raise ValueError(f"Port out of range: {port}")
    return port


def get_port() -> int:
    return parse_port(value_from_env('CATT_LSP_PORT', str(_DEFAULT_PORT)))


def configure_logging(log_file: Optional[Path], level: int) -> None:
    """Route root logging (ours and pygls') to ``log_file``, or stderr when None."""
    if log_file is None:
        handler: logging.Handler = logging.StreamHandler()
    else:
        handler = logging.FileHandler(log_file, encoding='utf-8')
    handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s: %(message)s'))
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level)
