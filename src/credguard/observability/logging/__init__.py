"""Observability – structured logging helpers."""
from credguard.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from credguard.observability.logging.factory import JsonLoggerFactory
from credguard.observability.logging.processors import get_logger, redact_sensitive_fields

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
    "redact_sensitive_fields",
]
