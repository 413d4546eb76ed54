"""Logging configuration and contextual loggers.

setup_logging() configures the root logger once at startup. Components do not
call logging.getLogger() themselves: the dependency registry hands each one a
ContextLogger built by create_logger(), pre-tagged with the owning class name,
so every line is attributable without string concatenation at the call site.
"""

import logging
import sys
from collections.abc import Mapping
from contextvars import ContextVar
from typing import Any

LOG_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(context)s%(message)s"
)
COMPONENT_LOGGER_PREFIX = "app"

# Bound by RequestIDMiddleware for the duration of one HTTP request.
request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)


class ContextFilter(logging.Filter):
    """Render className/methodName into `context` and attach `request_id`.

    Records from plain loggers (uvicorn, third-party) get an empty context,
    and records written outside a request get request_id "-", so the shared
    format string never fails.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        class_name = getattr(record, "className", None)
        method_name = getattr(record, "methodName", None)
        if class_name and method_name:
            record.context = f"[{class_name}.{method_name}] "
        elif class_name:
            record.context = f"[{class_name}] "
        else:
            record.context = ""
        record.request_id = request_id_var.get() or "-"
        return True


def setup_logging(level: str | int = logging.INFO) -> None:
    """Configure application-wide logging.

    Output goes to stdout. Safe to call more than once; the last call wins.

    Args:
        level: Level name (e.g. "debug") or logging constant.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(ContextFilter())
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[handler],
        force=True,
    )


class ContextLogger(logging.LoggerAdapter):
    """Logger adapter bound to a className tag, optionally a methodName tag.

    Usage:
        logger.info("getting service info")
        logger.debug(sql, method_name="find_by_email")
        logger.for_method("login").info("Login with email: %s", email)
    """

    def __init__(
        self,
        logger: logging.Logger,
        class_name: str,
        method_name: str | None = None,
    ) -> None:
        extra: dict[str, Any] = {"className": class_name}
        if method_name:
            extra["methodName"] = method_name
        super().__init__(logger, extra)

    @property
    def class_name(self) -> str:
        return self.extra["className"]

    @property
    def method_name(self) -> str | None:
        return self.extra.get("methodName")

    def for_method(self, method_name: str) -> "ContextLogger":
        """Return a sibling adapter with methodName bound."""
        return ContextLogger(self.logger, self.class_name, method_name)

    def process(
        self, msg: Any, kwargs: Any
    ) -> tuple[Any, Any]:
        extra = dict(self.extra)
        caller_extra = kwargs.pop("extra", None)
        if isinstance(caller_extra, Mapping):
            extra.update(caller_extra)
        method_name = kwargs.pop("method_name", None)
        if method_name:
            extra["methodName"] = method_name
        kwargs["extra"] = extra
        return msg, kwargs


def create_logger(owner_name: str) -> ContextLogger:
    """Return a logger tagged with owner_name (usually the implementation class name).

    Pure construction; no handlers are added here.
    """
    logger = logging.getLogger(f"{COMPONENT_LOGGER_PREFIX}.{owner_name}")
    return ContextLogger(logger, owner_name)


def get_logger(name: str) -> logging.Logger:
    """Return a plain module logger (for wiring code outside the registry).

    Args:
        name: Usually __name__ of the calling module.
    """
    return logging.getLogger(name)
