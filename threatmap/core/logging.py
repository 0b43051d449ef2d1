"""structlog setup shared by the models, repositories and services."""

import logging
import sys

import structlog

from threatmap.core.config import get_settings

_configured = False

# stdlib loggers whose output we route through the same handler
_LIBRARY_LOGGERS = ("sqlalchemy.engine", "alembic")


def configure_logging(force: bool = False) -> None:
    """Install the structlog pipeline once per process.

    ``app_debug`` selects the colored console renderer, otherwise each event
    is one JSON line. ``db_echo`` raises ``sqlalchemy.engine`` to INFO so
    emitted SQL shows up next to the repository events.
    """
    global _configured
    if _configured and not force:
        return

    settings = get_settings()
    level = logging.getLevelName(settings.log_level.upper())

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]
    if settings.app_debug:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors += [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        # stdlib factory: add_logger_name needs a .name on the logger
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level, force=force)
    for name in _LIBRARY_LOGGERS:
        logging.getLogger(name).setLevel(level)
    if settings.db_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)

    _configured = True


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    configure_logging()
    return structlog.get_logger(name)
