import logging
import sys
import structlog
from fastapi import Request
from structlog.stdlib import ProcessorFormatter

# Third-party loggers that only report warnings and errors
QUIET_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "resend")

CONTEXT_KEYS = ("ip_address", "request_id")


def get_client_ip(request: Request) -> str:
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        # First hop is the original client
        return forwarded_for.split(",")[0].strip()
    if request.client and request.client.host:
        return request.client.host
    return "127.0.0.1"


def add_request_info(
    logger: structlog.BoundLogger, method_name: str, event_dict: dict
) -> dict:
    context_vars = structlog.contextvars.get_contextvars()
    for key in CONTEXT_KEYS:
        if context_vars.get(key) and key not in event_dict:
            event_dict[key] = context_vars[key]
    return event_dict


def _build_formatter(is_production: bool) -> ProcessorFormatter:
    if is_production:
        return ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(sort_keys=False),
        )
    return ProcessorFormatter(
        processor=structlog.dev.ConsoleRenderer(colors=True, pad_event=8),
    )


def setup_logging(is_production: bool = False, log_level: str = "INFO"):
    """Route structlog through stdlib logging.

    Production emits one JSON object per line; development uses the
    coloured console renderer.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    structlog.configure(
        processors=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            add_request_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_build_formatter(is_production))

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(level)

    # The logging middleware replaces uvicorn's access log
    logging.getLogger("uvicorn").handlers = []
    logging.getLogger("uvicorn.access").handlers = []

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return structlog.get_logger()


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a logger instance with optional name."""
    return structlog.get_logger(name)
