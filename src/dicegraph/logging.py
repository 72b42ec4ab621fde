"""
Structured logging for dicegraph, built on structlog

Every event logged while a request is in flight carries the request id and,
for GraphQL requests, the operation being executed.
"""

import logging
import secrets
import sys
from contextvars import ContextVar
from typing import Any

import structlog

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
graphql_operation_ctx: ContextVar[str | None] = ContextVar("graphql_operation", default=None)

_CONTEXT_VARS = (
    ("request_id", request_id_ctx),
    ("graphql_operation", graphql_operation_ctx),
)


class RequestContextFilter:
    """structlog processor copying the current request context into each event.

    Values passed explicitly to the log call win over the context.
    """

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        _ = logger, method_name

        for key, var in _CONTEXT_VARS:
            value = var.get()
            if value and key not in event_dict:
                event_dict[key] = value

        return event_dict


def configure_logging(debug: bool = False, level: str | None = None) -> None:
    """Configure structlog over stdlib logging.

    Args:
        debug: Render for a terminal instead of as JSON lines. Also lowers the
            level to DEBUG unless ``level`` is given.
        level: Level name such as "info" or "WARNING".
    """
    if level:
        log_level = logging.getLevelName(level.upper())
        if not isinstance(log_level, int):
            raise ValueError(f"Unknown log level: {level}")
    else:
        log_level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(level=log_level, stream=sys.stdout, format="%(message)s", force=True)

    renderer = (
        structlog.dev.ConsoleRenderer(colors=True)
        if debug
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            RequestContextFilter(),
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """Return a random 12-character hex request id."""
    return secrets.token_hex(6)


def set_request_context(request_id: str | None = None) -> str:
    """Start the logging context of a request and return its id."""
    if request_id is None:
        request_id = generate_request_id()

    request_id_ctx.set(request_id)
    graphql_operation_ctx.set(None)
    return request_id


def set_graphql_operation(operation: str | None) -> None:
    """Record the GraphQL operation the current request executes."""
    graphql_operation_ctx.set(operation)


def clear_request_context() -> None:
    request_id_ctx.set(None)
    graphql_operation_ctx.set(None)


def get_request_id() -> str | None:
    return request_id_ctx.get()


def get_graphql_operation() -> str | None:
    return graphql_operation_ctx.get()
