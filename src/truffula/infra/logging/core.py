from __future__ import annotations

"""
Logging Core Orchestrator.

Configures the root logger once per process. Records are pushed through a
QueueHandler and written by a QueueListener thread, so file I/O never
interleaves with the tree being printed on stdout.
"""

import atexit
import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from truffula.infra.logging.config import _LEVEL_MAP, LoggingConfig
from truffula.infra.logging.handlers import (
    _create_console_handler,
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

_CONFIGURED_FLAG_ATTR: str = "_truffula_configured"
_QUEUE_LISTENER_ATTR: str = "_truffula_queue_listener"
_FALLBACK_FLAG_ATTR: str = "_truffula_fallback"

_FALLBACK_FMT = "CRITICAL FALLBACK | %(levelname)s | %(message)s"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Idempotently configure the root logger.

    Args:
        cfg: Logging settings.
        force: If True, tear down and rebuild an existing configuration.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()

    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    try:
        return _install_handlers(root, cfg)
    except Exception as e:
        return _install_fallback(root, e)


def get_logger(name: str) -> logging.Logger:
    """
    Acquire a named logger (usually __name__).
    """
    return logging.getLogger(name)


def reset_logging() -> None:
    """
    Detach every handler installed by configure_logging and stop its listener.
    """
    root = logging.getLogger()

    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()

    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener:
        _safe_stop_listener(listener)
        setattr(root, _QUEUE_LISTENER_ATTR, None)

    setattr(root, _CONFIGURED_FLAG_ATTR, False)
    setattr(root, _FALLBACK_FLAG_ATTR, False)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _install_handlers(root: logging.Logger, cfg: LoggingConfig) -> logging.Logger:
    """Build the configured handlers behind a QueueHandler/QueueListener pair."""
    level_int = _parse_level(cfg.level)
    root.setLevel(level_int)
    reset_logging()

    handlers_list: List[logging.Handler] = []

    if cfg.console:
        handlers_list.append(
            _create_console_handler(level_int, logging.Formatter(cfg.console_fmt))
        )

    if cfg.log_file:
        fh = _create_rotating_file_handler(
            cfg.log_file,
            level_int,
            logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
            cfg.max_bytes,
            cfg.backup_count,
        )
        if fh:
            handlers_list.append(fh)

    if not handlers_list:
        return root

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    queue_handler = QueueHandler(log_queue)
    _tag_handler(queue_handler)

    listener = QueueListener(log_queue, *handlers_list, respect_handler_level=True)
    listener.start()
    root.addHandler(queue_handler)

    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    setattr(root, _CONFIGURED_FLAG_ATTR, True)

    # Flush pending records on interpreter shutdown
    atexit.register(_safe_stop_listener, listener)

    return root


def _install_fallback(root: logging.Logger, error: Exception) -> logging.Logger:
    """Replace partial setup with a single synchronous stderr handler."""
    reset_logging()
    root.setLevel(logging.INFO)

    sh = logging.StreamHandler(sys.stderr)
    sh.setFormatter(logging.Formatter(_FALLBACK_FMT))
    _tag_handler(sh)
    root.addHandler(sh)
    setattr(root, _FALLBACK_FLAG_ATTR, True)

    root.warning(f"Logging setup failed ({error}). Switched to emergency console.")
    return root


def _parse_level(level: str) -> int:
    """Convert a level name to its numeric constant, defaulting to WARNING."""
    if not level:
        return logging.WARNING
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.WARNING)


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """Stop a QueueListener that may already have been stopped."""
    if listener is None:
        return
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
