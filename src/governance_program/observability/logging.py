"""
governance_program.observability.logging

Structured logging for REST calls issued by the client.

Responsibilities:
- Configure `structlog` JSON output for scripts that use `create_client`.
- Bind the per-call correlation fields (`request_id`, `method_name`) that the
  REST client attaches to every line it emits.
- Keep platform credentials out of log output.
"""

from __future__ import annotations

import logging
import sys
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog

# Keys never written to a log line, whatever the caller binds.
REDACTED_KEYS = frozenset({"password", "authorization", "auth"})


def configure_logging(*, client_name: str, level: str) -> None:
    """
    JSON logs for the OMAS calls made by this process.

    Services that already configure structlog should skip this; the client only
    emits through `structlog.get_logger` and picks up the host configuration.
    """

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _stamp_client(client_name),
            _redact_credentials,
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


@contextmanager
def bind_call(method_name: str) -> Iterator[str]:
    """
    Bind a fresh correlation id and the operation name for one REST call.

    Yields the request id so it can also be sent as the `x-request-id` header.
    """

    request_id = str(uuid.uuid4())
    with structlog.contextvars.bound_contextvars(request_id=request_id, method_name=method_name):
        yield request_id


def _stamp_client(client_name: str):
    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("client", client_name)
        return event_dict

    return processor


def _redact_credentials(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for key in REDACTED_KEYS.intersection(event_dict):
        event_dict[key] = "***"
    return event_dict


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


# --- Module Notes -----------------------------------------------------------
# bind_call is the only place correlation fields are bound; the REST client
# enters it once per dispatch, so nested calls never share a request id.
