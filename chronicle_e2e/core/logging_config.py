# chronicle_e2e/core/logging_config.py

import logging
import sys
import json
import os
from datetime import datetime

# Extra level for "step/scenario passed" messages, between INFO and WARNING
SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")

logger = logging.getLogger(__name__)


def _component_for(pathname: str) -> str:
    # Rough grouping so run logs can be filtered by layer
    normalized = pathname.replace("\\", "/")
    if "/page_objects/" in normalized:
        return "page-object"
    if "/steps/" in normalized:
        return "step"
    if "/utils/" in normalized:
        return "helper"
    if "/core/" in normalized:
        return "browser"
    if "/tests/" in normalized or "conftest" in normalized:
        return "runner"
    return "suite"


class JsonFormatter(logging.Formatter):
    """Custom JSON formatter for logging."""
    def format(self, record):
        log_record = {
            "timestamp": datetime.fromtimestamp(record.created).astimezone().isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "module": record.name,
            "funcName": record.funcName,
            "lineno": record.lineno,
            "process": record.process,
            "thread": record.thread,
            "threadName": record.threadName,
            "component": _component_for(record.pathname),
        }

        # logger.info("message", extra={'extra_context': {'scenario': 'Login'}})
        if hasattr(record, 'extra_context') and isinstance(record.extra_context, dict):
            log_record.update(record.extra_context)

        if record.exc_info:
            log_record['exc_info'] = self.formatException(record.exc_info)

        if record.stack_info:
            log_record['stack_info'] = self.formatStack(record.stack_info)

        return json.dumps(log_record, default=str)


class ConsoleFormatter(logging.Formatter):
    """Plain `[LEVEL] timestamp - [logger] message` lines for local runs."""

    GREEN = "\x1b[32m"
    RESET = "\x1b[0m"

    def format(self, record):
        timestamp = datetime.fromtimestamp(record.created).astimezone().isoformat()
        line = f"[{record.levelname}] {timestamp} - [{record.name}] {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        if record.levelno == SUCCESS:
            return f"{self.GREEN}{line}{self.RESET}"
        return line


def success(log: logging.Logger, message: str, *args, **kwargs):
    """Logs `message` at the SUCCESS level on the given logger."""
    log.log(SUCCESS, message, *args, **kwargs)


def setup_logging():
    """Configures the root logger. LOG_FORMAT=text switches to console lines."""
    root_logger = logging.getLogger()

    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicate logs
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)

    if os.getenv("LOG_FORMAT", "json").lower() == "text":
        console_handler.setFormatter(ConsoleFormatter())
    else:
        console_handler.setFormatter(JsonFormatter())

    root_logger.addHandler(console_handler)

    # Selenium and webdriver-manager are chatty at DEBUG
    logging.getLogger('selenium').setLevel(logging.WARNING)
    logging.getLogger('urllib3').setLevel(logging.WARNING)
    logging.getLogger('WDM').setLevel(logging.WARNING)

    logger.info("Logging configured.")
