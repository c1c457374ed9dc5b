"""
Logging setup for the asciinema API client and CLI.

Library modules only ask for ``logging.getLogger(__name__)``; handlers are
installed by the CLI entry point through :func:`setup_logging`.

Defaults:
- Every record goes to stderr; stdout carries only command output
- Level WARNING (overridable via env or argument)
- Optional JSON format and optional rotating log file via env

Env options (optional):
- ASCIINEMA_LOG_LEVEL=DEBUG|INFO|WARNING|ERROR
- ASCIINEMA_LOG_JSON=1 (JSON formatting)
- ASCIINEMA_LOG_FILE=/path/to/file.log (RotatingFileHandler)
"""

from __future__ import annotations

import json
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Optional


_INITIALIZED = False
_TRUTHY = ('1', 'true', 'yes', 'on')

__all__ = [
    "setup_logging",
    "get_logger",
]


class _ServiceFilter(logging.Filter):
    def __init__(self, service: str):
        super().__init__()
        self.service = service

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, 'service', None):
            record.service = self.service
        return True


class _JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            'ts': self.formatTime(record, datefmt='%Y-%m-%dT%H:%M:%S'),
            'level': record.levelname,
            'name': record.name,
            'service': getattr(record, 'service', ''),
            'message': record.getMessage(),
        }
        if record.exc_info:
            payload['exc_info'] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _get_level(default: str = 'WARNING') -> int:
    level = os.getenv('ASCIINEMA_LOG_LEVEL', default).upper()
    return getattr(logging, level, logging.WARNING)


def setup_logging(
    service: str,
    level: Optional[str] = None,
    json_format: Optional[bool] = None,
) -> None:
    """Configure logging once. Safe to call multiple times.

    Args:
        service: label attached to every record (e.g. 'asciinema')
        level: optional level override (DEBUG/INFO/...), else from env
        json_format: optional flag to force JSON format, else from env
    """
    global _INITIALIZED
    if _INITIALIZED:
        return

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.WARNING) if level else _get_level())

    use_json = (str(json_format).lower() in _TRUTHY) if json_format is not None \
        else (os.getenv('ASCIINEMA_LOG_JSON', '').lower() in _TRUTHY)
    if use_json:
        formatter = _JSONFormatter()
    else:
        formatter = logging.Formatter('%(asctime)s %(levelname)s %(name)s [%(service)s] %(message)s')

    service_filter = _ServiceFilter(service)

    console = logging.StreamHandler(stream=sys.stderr)
    console.setFormatter(formatter)
    console.addFilter(service_filter)
    root.addHandler(console)

    log_path = os.getenv('ASCIINEMA_LOG_FILE')
    if log_path:
        try:
            Path(log_path).parent.mkdir(parents=True, exist_ok=True)
            fh = logging.handlers.RotatingFileHandler(
                log_path, maxBytes=5 * 1024 * 1024, backupCount=5, encoding='utf-8'
            )
            fh.setFormatter(formatter)
            fh.addFilter(service_filter)
            root.addHandler(fh)
        except OSError:
            root.warning(f"Could not open log file {log_path}, using stderr only")

    _INITIALIZED = True


def get_logger(name: Optional[str] = None, **context) -> logging.LoggerAdapter:
    base = logging.getLogger(name or __name__)
    if 'service' not in context:
        context['service'] = ''
    return logging.LoggerAdapter(base, context)
