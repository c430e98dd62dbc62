from __future__ import annotations

import inspect
import json
import logging
import os
import time
from datetime import datetime
from typing import Any, Dict, Optional

from utilkit.core.settings import settings

_logger = logging.getLogger("utilkit")
_logger.setLevel(settings.log_level)

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def log_event(event: str, level: str = "info", **fields: Any) -> None:
    """Emit ``event`` as one JSON line on the ``utilkit`` logger.

    ``ts`` is epoch milliseconds; extra fields are appended in call order and
    ``None`` values are dropped. Unknown levels log at INFO.
    """
    levelno = _LEVELS.get(level, logging.INFO)
    if not _logger.isEnabledFor(levelno):
        return
    payload: Dict[str, Any] = {"ts": int(time.time() * 1000), "level": level, "event": event}
    payload.update((k, v) for k, v in fields.items() if v is not None)
    _logger.log(levelno, json.dumps(payload, ensure_ascii=False, default=str))


def _clock() -> str:
    return datetime.now().strftime("%H:%M:%S")


def _caller(depth: int = 2) -> Optional[str]:
    frame = inspect.currentframe()
    try:
        for _ in range(depth):
            if frame is None:
                return None
            frame = frame.f_back
        if frame is None:
            return None
        return f"{os.path.basename(frame.f_code.co_filename)}:{frame.f_lineno}"
    finally:
        del frame


def log(message: Any, *, time: Optional[bool] = None, file_name: Optional[bool] = None) -> str:
    """Log ``message`` prefixed with the wall clock and the caller location.

    ``log("ready")`` emits ``[14:30:00] [worker.py:15] ready``. Both prefixes
    default to ``settings.LOG_TIME`` / ``settings.LOG_FILENAME``.

    Returns the emitted line.
    """
    show_time = settings.LOG_TIME if time is None else time
    show_file = settings.LOG_FILENAME if file_name is None else file_name

    parts = []
    if show_time:
        parts.append(f"[{_clock()}]")
    if show_file:
        where = _caller()
        if where:
            parts.append(f"[{where}]")
    parts.append(str(message))

    line = " ".join(parts)
    _logger.info(line)
    return line


def time_log(*args: Any) -> str:
    """Log ``args`` space-joined after the current ``HH:MM:SS``."""
    line = " ".join([_clock(), *(str(a) for a in args)])
    _logger.info(line)
    return line
