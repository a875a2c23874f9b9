"""Logger configuration."""

import logging
import sys
from collections.abc import Mapping
from typing import Any

from loguru import logger
from loki_logger_handler.formatters.loguru_formatter import LoguruFormatter
from loki_logger_handler.loki_logger_handler import LokiLoggerHandler

from .config import settings

__all__ = ["InterceptHandler", "config_logger"]


# Libraries whose per-request records are already covered by the backend hooks.
_QUIET_LOGGERS = ("httpx", "httpcore")


def config_logger() -> None:
    """Route all application and library logs through loguru.

    Development logs to stdout and a rotating file, testing to stdout only.
    Production logs compact lines to stderr, ships them to Loki and takes over
    the stdlib loggers of uvicorn and httpx.
    """
    logger.remove()

    if settings.app_env == "production":
        _intercept_stdlib_logging()
        _add_stream_sink(sys.stderr, _compact_format, rich=False)
        _add_loki_sink()
        return

    _add_stream_sink(sys.stdout, _colored_format, rich=True)
    if settings.app_env == "development":
        _add_file_sink()


def _intercept_stdlib_logging() -> None:
    logging.basicConfig(
        handlers=[InterceptHandler()], level=settings.log_level, force=True
    )

    for name in list(logging.root.manager.loggerDict):
        named_logger = logging.getLogger(name)
        named_logger.handlers = []
        named_logger.propagate = True

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def _add_stream_sink(
    stream: Any,  # noqa: ANN401
    formatter: Any,  # noqa: ANN401
    *,
    rich: bool,
) -> None:
    logger.add(
        stream,
        format=formatter,
        level=settings.log_level,
        colorize=rich,
        backtrace=rich,
        diagnose=rich,
        catch=rich,
        enqueue=True,
    )


def _add_file_sink() -> None:
    logger.add(
        settings.log_path,
        format=_colored_format,
        level=logging.DEBUG,
        rotation=settings.rotation,
        compression="zip",
        colorize=False,
        enqueue=True,
    )


def _add_loki_sink() -> None:
    handler = LokiLoggerHandler(
        url=settings.loki_url,
        labels={
            "application": "chargepoint-console",
            "environment": settings.app_env,
            "version": settings.version,
            "backend": settings.backend_url,
        },
        timeout=5,
        enable_structured_loki_metadata=True,
        default_formatter=LoguruFormatter(),  # type: ignore[arg-type]
    )
    logger.add(handler, serialize=True, enqueue=True, level=settings.log_level)


class InterceptHandler(logging.Handler):
    """Forward stdlib logging records to loguru, keeping the caller location."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def _extras(extra: Mapping[str, Any], pair: str) -> str:
    return "".join(pair.format(key=key) for key in extra)


def _compact_format(record: Mapping[str, Any]) -> str:
    return (
        "{time:YYYY-MM-DDTHH:mm:ss.SSS} {level: <8} {name}:{line} {message}"
        + _extras(record["extra"], " {key}={{extra[{key}]}}")
        + "\n{exception}"
    )


def _colored_format(record: Mapping[str, Any]) -> str:
    return (
        "<green>{time:HH:mm:ss.SSS}</green> <level>{level: <8}</level> "
        "<cyan>{name}:{function}:{line}</cyan> {message}"
        + _extras(
            record["extra"], " <yellow>{key}</yellow>=<cyan>{{extra[{key}]}}</cyan>"
        )
        + "\n{exception}"
    )
