"""
Structured Logging Configuration (ECS-based)

JSON lines on stdout, one object per record, shaped after the Elastic
Common Schema so log shippers can forward them without parsing rules.
Passwords embedded in database URLs never reach the output.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any

from opentelemetry import trace
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

from starwars.core.constants import (
    DEFAULT_ENVIRONMENT,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    ECS_VERSION,
    ENV_KEY_ENVIRONMENT,
    ENV_KEY_LOG_FORMAT,
    ENV_KEY_LOG_LEVEL,
    EXCLUDED_LOG_RECORD_ATTRS,
    SERVICE_NAME,
    SERVICE_VERSION,
    URL_SCHEME_SEPARATOR,
)

QUIET_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error", "sqlalchemy.engine", "asyncio")


def hide_url_password(value: str) -> str:
    """Render `value` without its password if it parses as a database URL."""
    if URL_SCHEME_SEPARATOR not in value or "@" not in value:
        return value
    try:
        return make_url(value).render_as_string(hide_password=True)
    except (ArgumentError, ValueError):
        return value


def redact_labels(labels: Any) -> Any:
    """Walk dicts and lists, hiding passwords in any URL-shaped string."""
    if isinstance(labels, str):
        return hide_url_password(labels)
    if isinstance(labels, dict):
        return {key: redact_labels(value) for key, value in labels.items()}
    if isinstance(labels, (list, tuple)):
        return [redact_labels(item) for item in labels]
    return labels


class ECSJsonFormatter(logging.Formatter):
    """Elastic Common Schema (ECS) JSON formatter."""

    def __init__(
        self,
        service_name: str = SERVICE_NAME,
        service_version: str = SERVICE_VERSION,
        environment: str = DEFAULT_ENVIRONMENT,
    ):
        super().__init__()
        self.service_fields = {
            "service.name": service_name,
            "service.version": service_version,
            "service.environment": environment,
        }

    def format(self, record: logging.LogRecord) -> str:
        log_obj: dict[str, Any] = {
            "@timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(
                timespec="milliseconds"
            ),
            "message": record.getMessage(),
            "log.level": record.levelname.lower(),
            "log.logger": record.name,
            "ecs.version": ECS_VERSION,
            **self.service_fields,
        }
        log_obj.update(self._trace_fields())
        if record.exc_info:
            log_obj.update(self._error_fields(record))

        labels = {
            key: value
            for key, value in record.__dict__.items()
            if key not in EXCLUDED_LOG_RECORD_ATTRS
        }
        if labels:
            log_obj["labels"] = redact_labels(labels)

        return json.dumps(log_obj, ensure_ascii=False, default=str)

    @staticmethod
    def _trace_fields() -> dict[str, str]:
        ctx = trace.get_current_span().get_span_context()
        if not ctx.is_valid:
            return {}
        return {
            "trace.id": format(ctx.trace_id, "032x"),
            "span.id": format(ctx.span_id, "016x"),
        }

    def _error_fields(self, record: logging.LogRecord) -> dict[str, Any]:
        exc_type, exc_value, _ = record.exc_info
        return {
            "error.type": exc_type.__name__ if exc_type else None,
            "error.message": redact_labels(str(exc_value)) if exc_value else None,
            "error.stack_trace": self.formatException(record.exc_info),
        }


def configure_logging(
    service_name: str = SERVICE_NAME,
    service_version: str = SERVICE_VERSION,
    log_level: str | None = None,
    json_format: bool | None = None,
) -> None:
    """Install a single stdout handler on the root logger.

    Arguments win over LOG_LEVEL / LOG_FORMAT; ENVIRONMENT only labels
    records.
    """
    level_name = (log_level or os.getenv(ENV_KEY_LOG_LEVEL, DEFAULT_LOG_LEVEL)).upper()
    level = getattr(logging, level_name, logging.INFO)
    if json_format is None:
        json_format = os.getenv(ENV_KEY_LOG_FORMAT, DEFAULT_LOG_FORMAT) == "json"

    if json_format:
        formatter: logging.Formatter = ECSJsonFormatter(
            service_name=service_name,
            service_version=service_version,
            environment=os.getenv(ENV_KEY_ENVIRONMENT, DEFAULT_ENVIRONMENT),
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    for logger_name in QUIET_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
