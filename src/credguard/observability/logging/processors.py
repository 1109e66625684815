"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog

from credguard.observability.logging.filters import SensitiveFieldsFilter

_DEFAULT_FILTER = SensitiveFieldsFilter()


def redact_sensitive_fields(
    logger: Any,           # noqa: ARG001
    method_name: str,      # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """structlog processor that redacts :data:`DEFAULT_SENSITIVE_FIELDS`.

    Usage::

        structlog.configure(processors=[redact_sensitive_fields, ...])
    """
    return _DEFAULT_FILTER.redact_deep(event_dict)


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["get_logger", "redact_sensitive_fields"]
