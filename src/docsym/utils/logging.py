"""loguru setup for the CLI and the MCP server.

Both hosts log to stderr only: ``docsym outline`` prints results on
stdout and the stdio transport owns stdout for protocol frames. The
outline engine itself never logs.
"""

import inspect
import logging
import sys

from loguru import logger

from docsym.config.models import LoggingConfig

_CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> <level>{level: <8}</level> "
    "<cyan>{extra[origin]}</cyan> {message}"
)
_PLAIN_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} {level: <8} {extra[origin]} {message}"
_JSON_FORMAT = "{message}"


class _StdlibBridge(logging.Handler):
    """Forward records from stdlib loggers (mcp, anyio, uvicorn) to loguru.

    The originating logger name is kept as ``origin`` so server output
    shows which library spoke.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.bind(origin=record.name).opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def _origin(record: dict) -> None:
    record["extra"].setdefault("origin", record["name"])


def configure_logging(config: LoggingConfig) -> None:
    """
    Replace loguru's default sink with the configured ones.

    ``console`` is colored only when stderr is a terminal; ``plain``
    never is, for redirected CLI runs and log collectors; ``json``
    writes one serialized record per line.

    Args:
        config: Level, format and optional rotating file sink.
    """
    logger.remove()
    logger.configure(patcher=_origin)

    serialize = config.format == "json"
    if serialize:
        fmt = _JSON_FORMAT
    elif config.format == "console":
        fmt = _CONSOLE_FORMAT
    else:
        fmt = _PLAIN_FORMAT

    logger.add(
        sys.stderr,
        format=fmt,
        level=config.level,
        serialize=serialize,
        colorize=config.format == "console" and sys.stderr.isatty(),
    )

    if config.file:
        logger.add(
            config.file,
            format=_PLAIN_FORMAT if config.format == "console" else fmt,
            level=config.level,
            serialize=serialize,
            colorize=False,
            rotation=config.rotation,
            retention=config.retention,
            compression="gz",
        )

    logging.basicConfig(handlers=[_StdlibBridge()], level=0, force=True)

    logger.debug("Logging configured: level={} format={}", config.level, config.format)
