import json
import logging
import sys
from pathlib import Path
from typing import Any, cast

from loguru import logger
from loguru._defaults import LOGURU_FORMAT

REDACTED = "***REDACTED***"
SENSITIVE_KEYS = frozenset(
    {"api_key", "secret_key", "api_secret", "listen_key", "signature", "password"}
)


class InterceptHandler(logging.Handler):
    """Redirects standard logging records (e.g. from httpx) to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = str(record.levelno)

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = cast(Any, frame.f_back)
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def redact_sensitive(record: dict[str, Any]) -> bool:
    """Masks credential values bound into a record's `extra` data.

    Used as a sink filter, so it always lets the record through.
    """
    for key, value in record["extra"].items():
        if key in SENSITIVE_KEYS and isinstance(value, str):
            record["extra"][key] = REDACTED
    return True


def _json_formatter(record: dict[str, Any]) -> str:
    """Structures a log record as a single JSON line."""
    log_object = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name,
        "message": record["message"],
        "source": {
            "name": record["name"],
            "file": f"{record['file'].name}:{record['line']}",
            "function": record["function"],
        },
        "extra": record["extra"],
    }
    # Escape braces so Loguru does not treat the JSON as a format string.
    return json.dumps(log_object, default=str).replace("{", "{{").replace(
        "}", "}}"
    ) + "\n"


def setup_logging(
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    log_dir: Path | None = None,
) -> None:
    """Configures the application-wide Loguru logger.

    The library itself only emits records; applications call this once at
    startup. It installs a readable console sink, an optional daily-rotated
    JSON file sink, and routes standard library logging through Loguru.

    Args:
        console_level: The minimum log level for console output.
        file_level: The minimum log level for file output.
        log_dir: Directory to store log files. If None, file logging is disabled.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=console_level.upper(),
        format=LOGURU_FORMAT,
        colorize=True,
        filter=redact_sensitive,
    )

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_dir / "binance_rest_{time:YYYY-MM-DD}.log",
            level=file_level.upper(),
            format=_json_formatter,
            rotation="00:00",
            retention="7 days",
            compression="zip",
            filter=redact_sensitive,
            enqueue=True,
            backtrace=False,
            diagnose=False,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    logger.info("Logging configured successfully.")
