import logging
import sys
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, MutableMapping

from messenger.config.settings import Config

NO_CORRELATION_ID = "NO Correlation ID"
ROOT_LOGGER_NAME = "messenger"

# Context variable to store correlation ID across async/thread boundaries
correlation_id_var: ContextVar[str] = ContextVar(
    "correlation_id", default=NO_CORRELATION_ID
)


class CorrelationIdFilter(logging.Filter):
    """Logging filter to add correlation ID to log records."""

    def filter(self, record):
        record.correlation_id = correlation_id_var.get()
        return True


class SafeFormatter(logging.Formatter):
    """Formatter that ensures correlation_id and component always exist."""

    def format(self, record):
        if not hasattr(record, "correlation_id"):
            record.correlation_id = NO_CORRELATION_ID
        if not hasattr(record, "component"):
            record.component = record.name
        return super().format(record)


class ComponentLogger(logging.LoggerAdapter):
    """
    Logger handed to one component (a handler, a store adapter, the id generator).

    Every record it emits carries a `component` attribute, so the formatter can
    print which part of the system wrote it without string prefixes in messages.
    """

    def __init__(self, logger: logging.Logger, component: str):
        super().__init__(logger, {"component": component})
        self.component = component

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        extra = dict(kwargs.get("extra") or {})
        extra.setdefault("component", self.component)
        kwargs["extra"] = extra
        return msg, kwargs


def component_logger(component: str) -> ComponentLogger:
    """Get the logger for a component, e.g. component_logger("UserService")."""
    return ComponentLogger(
        logging.getLogger(f"{ROOT_LOGGER_NAME}.{component}"), component
    )


def setup_logging(level: str = "INFO", log_file: str | None = None):
    root = logging.getLogger()
    root.setLevel(logging.WARNING)  # Set root to WARNING to avoid too much noise

    # Called again by the app factory in tests; handlers are only attached once
    if not any(getattr(h, "_messenger_handler", False) for h in root.handlers):
        formatter = SafeFormatter(Config.LOG_FORMAT)

        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(formatter)
        stream_handler.addFilter(CorrelationIdFilter())
        stream_handler._messenger_handler = True
        root.addHandler(stream_handler)

        # Set up file logging if log_file provided with rotation
        if log_file:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_file, maxBytes=10 * 1024 * 1024, backupCount=5
            )
            file_handler.setFormatter(formatter)
            file_handler.addFilter(CorrelationIdFilter())
            file_handler._messenger_handler = True
            root.addHandler(file_handler)

    logging.getLogger(ROOT_LOGGER_NAME).setLevel(
        getattr(logging, level.upper(), logging.INFO)
    )
    logging.getLogger(ROOT_LOGGER_NAME).info("Logging is set up.")

    return root
