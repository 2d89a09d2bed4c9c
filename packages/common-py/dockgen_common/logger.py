"""
dockgen Logging

Thin layer over the standard ``logging`` module. Every dockgen logger lives
under the ``dockgen`` namespace so a single call to ``configure_logging``
controls all packages (common, sdk, cli).

Usage:
    from dockgen_common import get_logger, configure_logging

    configure_logging("debug")
    logger = get_logger(__name__)
    logger.info("Rendering template", extra={"template": "fastapi.Dockerfile.j2"})
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union

from .constants import DEFAULT_LOG_LEVEL, LOG_LEVELS
from .errors import ValidationError

ROOT_LOGGER_NAME = "dockgen"

# Attributes present on every LogRecord; anything else came from `extra=`
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", None, None)).keys()
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Formats records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class StderrHandler(logging.StreamHandler):
    """Stream handler that always writes to the current ``sys.stderr``."""

    def __init__(self):
        super().__init__(sys.stderr)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


class DockgenLogger(logging.LoggerAdapter):
    """
    Logger adapter that binds fixed context to every record.

    Example:
        >>> log = DockgenLogger(get_logger("cli"), framework="fastapi")
        >>> log.info("Generated Dockerfile")
    """

    def __init__(self, logger: logging.Logger, **context: Any):
        super().__init__(logger, context)

    def process(self, msg, kwargs):
        extra = dict(self.extra or {})
        extra.update(kwargs.get("extra") or {})
        kwargs["extra"] = extra
        return msg, kwargs

    def bind(self, **context: Any) -> "DockgenLogger":
        """Return a new adapter with additional bound context."""
        merged = dict(self.extra or {})
        merged.update(context)
        return DockgenLogger(self.logger, **merged)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger inside the dockgen namespace.

    Module names such as ``dockgen_sdk.clipboard`` become
    ``dockgen.dockgen_sdk.clipboard``.
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def _coerce_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    normalized = level.strip().lower()
    if normalized == "warn":
        normalized = "warning"
    if normalized not in LOG_LEVELS:
        raise ValidationError(
            f"Invalid log level: '{level}'. Supported levels: {', '.join(LOG_LEVELS)}"
        )
    return getattr(logging, normalized.upper())


def configure_logging(
    level: Union[str, int] = DEFAULT_LOG_LEVEL,
    json_output: bool = False,
    stream=None,
) -> logging.Logger:
    """
    Configure the dockgen root logger.

    Replaces any handler installed by a previous call, so it is safe to call
    more than once (the CLI does so when --verbose is passed).

    Args:
        level: Log level name or numeric level
        json_output: Emit JSON lines instead of plain text
        stream: Target stream (defaults to stderr so stdout stays clean for piping)

    Returns:
        The configured root dockgen logger
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(_coerce_level(level))

    for handler in list(root.handlers):
        if getattr(handler, "_dockgen_handler", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(stream) if stream is not None else StderrHandler()
    handler._dockgen_handler = True  # type: ignore[attr-defined]
    if json_output:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s")
        )
    root.addHandler(handler)
    return root
